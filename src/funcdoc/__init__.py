# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Public import surface for Go function description components."""

from funcdoc.catalog import CatalogAggregator
from funcdoc.describer import describe_function
from funcdoc.discovery import find_go_files
from funcdoc.errors import ExtractionError, LoadFailure, ParseFailure
from funcdoc.model import (
    Catalog,
    DescribeOptions,
    Diagnostic,
    FileReport,
    FunctionRecord,
    SourceFileInfo,
)
from funcdoc.output import write_outputs
from funcdoc.parser import GoParser
from funcdoc.pipeline import describe_files, load_source
from funcdoc.render import render_expr, render_fields
from funcdoc.report import build_file_report, is_test_file

__all__ = [
    "Catalog",
    "CatalogAggregator",
    "DescribeOptions",
    "Diagnostic",
    "ExtractionError",
    "FileReport",
    "FunctionRecord",
    "GoParser",
    "LoadFailure",
    "ParseFailure",
    "SourceFileInfo",
    "build_file_report",
    "describe_files",
    "describe_function",
    "find_go_files",
    "is_test_file",
    "load_source",
    "render_expr",
    "render_fields",
    "write_outputs",
]
