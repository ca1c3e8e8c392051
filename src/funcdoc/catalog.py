# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Accumulate file reports into a project-wide catalog."""

import logging

from funcdoc.model import Catalog, Diagnostic, FileReport, FunctionRecord

logger = logging.getLogger(__name__)


class CatalogAggregator:
    """Collect file reports and diagnostics in processing order."""

    def __init__(self) -> None:
        """Initialize an empty aggregator."""
        self._file_reports: list[str] = []
        self._function_records: list[FunctionRecord] = []
        self._test_function_records: list[FunctionRecord] = []
        self._diagnostics: list[Diagnostic] = []

    def add(self, report: FileReport) -> None:
        """Append one file report.

        Args:
            report: Report of one successfully parsed file.
        """
        self._file_reports.append(report.body_text)
        self._function_records.extend(report.ordinary_functions)
        self._test_function_records.extend(report.test_functions)
        self._diagnostics.extend(report.diagnostics)
        logger.debug(
            f"Added file report (file_path={report.file_path} "
            f"functions={len(report.ordinary_functions)} "
            f"test_functions={len(report.test_functions)})"
        )

    def add_diagnostic(self, diagnostic: Diagnostic) -> None:
        """Record a problem for a file that contributes no report."""
        self._diagnostics.append(diagnostic)

    @property
    def catalog(self) -> Catalog:
        """Return an immutable snapshot of everything added so far."""
        return Catalog(
            file_reports=tuple(self._file_reports),
            function_records=tuple(self._function_records),
            test_function_records=tuple(self._test_function_records),
            diagnostics=tuple(self._diagnostics),
        )
