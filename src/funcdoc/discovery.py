# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Locate Go source files beneath a project root."""

import logging
import os
from pathlib import Path

import pathspec

logger = logging.getLogger(__name__)

GO_SUFFIX = ".go"
GENERATED_MARKER = "generated"


class IgnoreMatcher:
    """Match project paths against .gitignore patterns."""

    def __init__(self, spec: pathspec.GitIgnoreSpec) -> None:
        """Initialize matcher.

        Args:
            spec: Compiled gitignore matcher.
        """
        self._spec = spec

    @classmethod
    def from_project_root(cls, root: Path) -> "IgnoreMatcher":
        """Build matcher from root and nested .gitignore files.

        Unreadable .gitignore files are skipped with a warning.

        Args:
            root: Project root.

        Returns:
            Configured ignore matcher; empty when no .gitignore exists.
        """
        patterns: list[str] = []
        for ignore_path in sorted(root.rglob(".gitignore")):
            base = ignore_path.parent.relative_to(root).as_posix()
            if base == ".":
                base = ""
            try:
                lines = ignore_path.read_text(encoding="utf-8").splitlines()
            except (OSError, UnicodeDecodeError) as exc:
                logger.warning(
                    f"Skipping unreadable .gitignore (path={ignore_path} error={exc})"
                )
                continue
            patterns.extend(_translate_gitignore_line(line, base) for line in lines)
        return cls(spec=pathspec.GitIgnoreSpec.from_lines(patterns))

    def matches(self, relative_path: str) -> bool:
        """Check whether a project-relative path is ignored."""
        normalized = relative_path.replace(os.sep, "/").strip("/")
        if not normalized:
            return False
        return self._spec.match_file(normalized)


def find_go_files(root: Path) -> list[Path]:
    """Find Go source files to describe.

    Files whose name contains ``generated`` are skipped, as are files inside
    ``.git`` and files ignored by the project's .gitignore files.

    Args:
        root: Project directory, or a single ``.go`` file.

    Returns:
        Matching files in sorted order.

    Raises:
        FileNotFoundError: If ``root`` does not exist.
    """
    if not root.exists():
        raise FileNotFoundError(f"Project path does not exist: {root}")
    if root.is_file():
        return [root] if _is_candidate(root) else []

    matcher = IgnoreMatcher.from_project_root(root)
    files: list[Path] = []
    for path in sorted(root.rglob(f"*{GO_SUFFIX}")):
        relative = path.relative_to(root)
        if ".git" in relative.parts or not path.is_file():
            continue
        if not _is_candidate(path):
            continue
        if matcher.matches(relative.as_posix()):
            logger.debug(f"Skipping ignored file (path={relative})")
            continue
        files.append(path)
    logger.info(f"Go file discovery completed (root={root} files={len(files)})")
    return files


def _is_candidate(path: Path) -> bool:
    return path.name.endswith(GO_SUFFIX) and GENERATED_MARKER not in path.name


def _translate_gitignore_line(line: str, base: str) -> str:
    """Scope one .gitignore line to the directory that holds the file."""
    stripped = line.strip()
    if not base or not stripped or stripped.startswith("#"):
        return line
    negated = stripped.startswith("!")
    pattern = stripped[1:] if negated else stripped
    if pattern.startswith("/"):
        scoped = f"{base}{pattern}"
    elif "/" in pattern.rstrip("/"):
        scoped = f"{base}/{pattern}"
    else:
        scoped = f"{base}/**/{pattern}"
    return f"!{scoped}" if negated else scoped
