# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Load, parse and describe many Go files into one catalog."""

import logging
from pathlib import Path

from funcdoc.catalog import CatalogAggregator
from funcdoc.errors import LoadFailure, ParseFailure
from funcdoc.model import Catalog, DescribeOptions, Diagnostic, SourceFileInfo
from funcdoc.parser import GoParser
from funcdoc.report import build_file_report

logger = logging.getLogger(__name__)


def load_source(path: Path) -> bytes:
    """Read the raw bytes of a Go source file.

    Args:
        path: File to read.

    Returns:
        File content, guaranteed to be valid UTF-8.

    Raises:
        LoadFailure: If the file cannot be read or is not UTF-8.
    """
    try:
        source = path.read_bytes()
        source.decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise LoadFailure(str(exc)) from exc
    return source


def describe_files(
    paths: list[Path],
    options: DescribeOptions | None = None,
    parser: GoParser | None = None,
) -> Catalog:
    """Describe the functions of every file, skipping unusable files.

    Args:
        paths: Go source files in processing order.
        options: Optional body rendering settings.
        parser: Parser to reuse; a new one is created when omitted.

    Returns:
        Catalog covering every file that could be loaded and parsed.
    """
    parser = parser or GoParser()
    aggregator = CatalogAggregator()
    for path in paths:
        file_info = SourceFileInfo(file_path=str(path), file_name=path.name)
        try:
            source = load_source(path)
            tree = parser.parse(source, file_name=file_info.file_name)
        except LoadFailure as exc:
            logger.warning(f"Error reading file (file_path={path} error={exc})")
            aggregator.add_diagnostic(
                Diagnostic(kind="load", file_path=str(path), message=str(exc))
            )
            continue
        except ParseFailure as exc:
            logger.warning(f"Error parsing file (file_path={path} error={exc})")
            aggregator.add_diagnostic(
                Diagnostic(kind="parse", file_path=str(path), message=str(exc))
            )
            continue
        aggregator.add(build_file_report(file_info, tree, source, options))

    catalog = aggregator.catalog
    logger.info(
        f"Function description completed (files={len(paths)} "
        f"reports={len(catalog.file_reports)} "
        f"functions={len(catalog.function_records)} "
        f"test_functions={len(catalog.test_function_records)} "
        f"diagnostics={len(catalog.diagnostics)})"
    )
    return catalog
