# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Domain models for function description artifacts."""

from dataclasses import dataclass
from typing import Literal

DiagnosticKind = Literal["load", "parse", "unrenderable_expression"]


@dataclass(frozen=True)
class FunctionRecord:
    """Represent one described function declaration.

    Attributes:
        name: Function identifier.
        documentation: Full rendered documentation block for the function.
        package: Package declared by the owning file.
        is_test_function: Whether the owning file is a test file.
    """

    name: str
    documentation: str
    package: str
    is_test_function: bool


@dataclass(frozen=True)
class Diagnostic:
    """Represent one recoverable problem surfaced during a run."""

    kind: DiagnosticKind
    file_path: str
    message: str


@dataclass(frozen=True)
class SourceFileInfo:
    """Identify a source file; both values are supplied by the caller."""

    file_path: str
    file_name: str


@dataclass(frozen=True)
class DescribeOptions:
    """Control optional parts of function descriptions.

    Attributes:
        include_body: Append the exact function source to each description.
        repeat_body: Emit the body a second time, unfenced, after the fenced
            copy. Only used when ``include_body`` is set.
    """

    include_body: bool = False
    repeat_body: bool = True


@dataclass(frozen=True)
class FileReport:
    """Represent the description of one source file.

    Attributes:
        file_path: Source path as supplied by the caller.
        file_name: Base file name as supplied by the caller.
        package: Declared package name.
        body_text: Rendered report for the whole file.
        ordinary_functions: Records for functions of a non-test file.
        test_functions: Records for functions of a test file.
        diagnostics: Unrenderable expressions met while building the report.
    """

    file_path: str
    file_name: str
    package: str
    body_text: str
    ordinary_functions: tuple[FunctionRecord, ...]
    test_functions: tuple[FunctionRecord, ...]
    diagnostics: tuple[Diagnostic, ...] = ()


@dataclass(frozen=True)
class Catalog:
    """Represent the project-wide result of a run."""

    file_reports: tuple[str, ...] = ()
    function_records: tuple[FunctionRecord, ...] = ()
    test_function_records: tuple[FunctionRecord, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()
