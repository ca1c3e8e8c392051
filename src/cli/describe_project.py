# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Describe every function of a Go project and write the description files."""

import argparse
import logging
import sys
from pathlib import Path
from typing import TextIO

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from funcdoc.discovery import find_go_files
from funcdoc.model import Catalog, DescribeOptions, Diagnostic
from funcdoc.output import write_outputs
from funcdoc.parser import GoParser
from funcdoc.pipeline import describe_files

logger = logging.getLogger(__name__)


def configure_logging(level: int = logging.INFO) -> None:
    """Configure application logging with Rich handler.

    Args:
        level: Logging severity threshold.
    """
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI parser."""
    parser = argparse.ArgumentParser(
        prog="funcdoc",
        description=(
            "Parse a go project and generate a json file with all functions "
            "and test functions"
        ),
    )
    parser.add_argument("--project", required=True, help="The path to the go project.")
    parser.add_argument(
        "--output", required=True, help="The path to the output directory."
    )
    parser.add_argument(
        "--include-body",
        action="store_true",
        help="Append the full source of each function to its description.",
    )
    parser.add_argument(
        "--single-body",
        action="store_true",
        help="Emit the function source once instead of fenced and raw copies.",
    )
    parser.add_argument(
        "--keep-empty-lists",
        action="store_true",
        help="Emit '##Parameters ' and '##Return ' labels for empty () lists.",
    )
    parser.add_argument(
        "--print",
        dest="print_reports",
        action="store_true",
        help="Also print every file report to stdout.",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging."
    )
    return parser


def run(argv: list[str], stdout: TextIO, stderr: TextIO) -> int:
    """Run the describe command.

    Args:
        argv: CLI arguments.
        stdout: Standard output stream.
        stderr: Standard error stream.

    Returns:
        Exit code.
    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit:
        logger.warning(f"Argument parsing failed (argv={argv})")
        return 2
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    project_path = Path(args.project)
    try:
        go_files = find_go_files(project_path)
    except FileNotFoundError:
        logger.warning(f"Project path does not exist (path={project_path})")
        stderr.write(f"Project path does not exist: {project_path}\n")
        return 2

    options = DescribeOptions(
        include_body=args.include_body, repeat_body=not args.single_body
    )
    catalog = describe_files(
        go_files,
        options=options,
        parser=GoParser(keep_empty_lists=args.keep_empty_lists),
    )
    _write_diagnostics(diagnostics=catalog.diagnostics, stderr=stderr)

    output_path = Path(args.output)
    try:
        write_outputs(catalog, output_path)
    except OSError as exc:
        logger.warning(
            f"Failed to write output files (output_path={output_path} error={exc})"
        )
        stderr.write(f"Failed to write output files: {output_path}\n")
        return 2

    console = Console(file=stdout, force_terminal=False, color_system="truecolor")
    if args.print_reports:
        for report in catalog.file_reports:
            console.print(report, markup=False, highlight=False, soft_wrap=True)
    _write_summary(
        catalog=catalog, file_count=len(go_files), output_path=output_path, console=console
    )
    return 0


def _write_diagnostics(diagnostics: tuple[Diagnostic, ...], stderr: TextIO) -> None:
    """Write run diagnostics to stderr, one per line.

    Args:
        diagnostics: Recoverable problems collected during the run.
        stderr: Standard error stream.
    """
    for diagnostic in diagnostics:
        stderr.write(
            f"{diagnostic.kind}_error: {diagnostic.file_path}: {diagnostic.message}\n"
        )


def _write_summary(
    catalog: Catalog, file_count: int, output_path: Path, console: Console
) -> None:
    table = Table(title=f"Function descriptions written to {output_path}")
    table.add_column("metric")
    table.add_column("count", justify="right")
    table.add_row("go files", str(file_count))
    table.add_row("file reports", str(len(catalog.file_reports)))
    table.add_row("functions", str(len(catalog.function_records)))
    table.add_row("test functions", str(len(catalog.test_function_records)))
    table.add_row("diagnostics", str(len(catalog.diagnostics)))
    console.print(table)


def main() -> None:
    """Run the CLI application and exit."""
    configure_logging()
    exit_code = run(sys.argv[1:], stdout=sys.stdout, stderr=sys.stderr)
    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
