# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Unit tests for Go file discovery."""

from pathlib import Path

import pytest

from funcdoc.discovery import find_go_files


def _write_file(path: Path, content: str = "package p\n") -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def test_ph6_dis_001_finds_go_files_and_skips_generated_ones(tmp_path: Path) -> None:
    _write_file(tmp_path / "b.go")
    _write_file(tmp_path / "a.go")
    _write_file(tmp_path / "sub" / "c_test.go")
    _write_file(tmp_path / "zz_generated.go")
    _write_file(tmp_path / "notes.txt", "not go")

    files = find_go_files(tmp_path)

    assert [p.relative_to(tmp_path).as_posix() for p in files] == [
        "a.go",
        "b.go",
        "sub/c_test.go",
    ]


def test_ph6_dis_002_honors_gitignore_and_skips_git_dir(tmp_path: Path) -> None:
    _write_file(tmp_path / ".gitignore", "vendor/\n")
    _write_file(tmp_path / "sub" / ".gitignore", "local.go\n")
    _write_file(tmp_path / "main.go")
    _write_file(tmp_path / "vendor" / "dep" / "dep.go")
    _write_file(tmp_path / "sub" / "local.go")
    _write_file(tmp_path / "sub" / "kept.go")
    _write_file(tmp_path / ".git" / "hooks" / "hook.go")

    files = find_go_files(tmp_path)

    assert [p.relative_to(tmp_path).as_posix() for p in files] == [
        "main.go",
        "sub/kept.go",
    ]


def test_ph6_dis_003_single_file_root_is_returned(tmp_path: Path) -> None:
    path = tmp_path / "one.go"
    _write_file(path)

    assert find_go_files(path) == [path]


def test_ph6_dis_004_missing_root_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        find_go_files(tmp_path / "missing")
