# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Write a catalog to the description and JSON record files."""

import json
import logging
from pathlib import Path

from funcdoc.model import Catalog, FunctionRecord

logger = logging.getLogger(__name__)

DESCRIPTIONS_FILE = "all_function_descriptions.txt"
FUNCTIONS_FILE = "functions.json"
TEST_FUNCTIONS_FILE = "test_functions.json"
DESCRIPTIONS_HEADING = (
    "#### This is detailed description of all functions in the project its references\n"
)


def combine_descriptions(catalog: Catalog) -> str:
    """Join every file report under the project heading."""
    return DESCRIPTIONS_HEADING + "".join(catalog.file_reports)


def records_to_json(records: tuple[FunctionRecord, ...]) -> str:
    """Serialize function records as a compact JSON array.

    Args:
        records: Records to serialize.

    Returns:
        JSON text with ``name``, ``doc``, ``package`` and ``is_test_function``
        keys per record.
    """
    payload = [
        {
            "name": record.name,
            "doc": record.documentation,
            "package": record.package,
            "is_test_function": record.is_test_function,
        }
        for record in records
    ]
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))


def write_outputs(catalog: Catalog, output_dir: Path) -> list[Path]:
    """Write the combined descriptions and both record files.

    Args:
        catalog: Result of a run.
        output_dir: Target directory; created when missing.

    Returns:
        Written file paths.

    Raises:
        OSError: If directory creation or file writing fails.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    contents = {
        DESCRIPTIONS_FILE: combine_descriptions(catalog),
        TEST_FUNCTIONS_FILE: records_to_json(catalog.test_function_records),
        FUNCTIONS_FILE: records_to_json(catalog.function_records),
    }
    written: list[Path] = []
    for file_name, content in contents.items():
        path = output_dir / file_name
        path.write_text(content, encoding="utf-8")
        written.append(path)
    logger.info(f"Output files written (output_dir={output_dir} files={len(written)})")
    return written
