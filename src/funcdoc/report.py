# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Build the per-file function report."""

import logging

from funcdoc.describer import describe_function
from funcdoc.model import (
    DescribeOptions,
    Diagnostic,
    FileReport,
    FunctionRecord,
    SourceFileInfo,
)
from funcdoc.syntax import FuncDecl, SourceFile, UnsupportedExpr, walk

logger = logging.getLogger(__name__)

TEST_FILE_MARKER = "_test"


def is_test_file(file_name: str) -> bool:
    """Check whether a file name follows the Go test file convention."""
    return TEST_FILE_MARKER in file_name


def build_file_report(
    file_info: SourceFileInfo,
    tree: SourceFile,
    source: bytes,
    options: DescribeOptions | None = None,
) -> FileReport:
    """Describe every function declared in one parsed file.

    Test classification is per file: every function of a test file lands in
    ``test_functions`` whatever its own name.

    Args:
        file_info: Path and name supplied by the caller.
        tree: Parsed syntax tree of the file.
        source: Exact bytes the tree was parsed from.
        options: Optional body rendering settings.

    Returns:
        The complete file report.
    """
    is_test = is_test_file(file_info.file_name)
    package = tree.package.name
    file_kind = "go test" if is_test else "go"
    ordinary: list[FunctionRecord] = []
    tests: list[FunctionRecord] = []
    diagnostics: list[Diagnostic] = []

    def on_unsupported(expr: UnsupportedExpr) -> None:
        diagnostics.append(
            Diagnostic(
                kind="unrenderable_expression",
                file_path=file_info.file_path,
                message=f"Unknown type: {expr.kind} at byte {expr.pos}",
            )
        )

    parts = [_render_header(file_info, package, file_kind)]
    for node in walk(tree):
        if not isinstance(node, FuncDecl):
            continue
        block, record = describe_function(
            node,
            source,
            package=package,
            is_test=is_test,
            options=options,
            on_unsupported=on_unsupported,
        )
        parts.append(block)
        (tests if is_test else ordinary).append(record)
    parts.append(f"----- End of {file_kind} file {file_info.file_path} -------\n")

    return FileReport(
        file_path=file_info.file_path,
        file_name=file_info.file_name,
        package=package,
        body_text="".join(parts),
        ordinary_functions=tuple(ordinary),
        test_functions=tuple(tests),
        diagnostics=tuple(diagnostics),
    )


def _render_header(file_info: SourceFileInfo, package: str, file_kind: str) -> str:
    return (
        f"##Start of {file_kind} file {file_info.file_path}\n"
        f"###File path: {file_info.file_path}\n"
        f"###File name: {file_info.file_name}\n"
        f"##Package name: {package}\n"
        f"##{file_kind.title()} Functions\n"
    )
