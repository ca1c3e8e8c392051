# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Unit tests for catalog aggregation and the multi-file pipeline."""

import logging
from pathlib import Path

import pytest

from funcdoc.catalog import CatalogAggregator
from funcdoc.errors import LoadFailure
from funcdoc.model import Catalog, Diagnostic, FileReport, FunctionRecord
from funcdoc.pipeline import describe_files, load_source


def _write_file(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def _record(name: str, is_test: bool = False) -> FunctionRecord:
    return FunctionRecord(
        name=name,
        documentation=f"## {name}\n\n",
        package="p",
        is_test_function=is_test,
    )


def _report(path: str, ordinary: list[str], tests: list[str]) -> FileReport:
    return FileReport(
        file_path=path,
        file_name=path,
        package="p",
        body_text=f"report:{path}\n",
        ordinary_functions=tuple(_record(name) for name in ordinary),
        test_functions=tuple(_record(name, is_test=True) for name in tests),
    )


def test_ph5_cat_001_empty_aggregator_yields_empty_catalog() -> None:
    assert CatalogAggregator().catalog == Catalog()


def test_ph5_cat_002_aggregator_preserves_file_and_function_order() -> None:
    aggregator = CatalogAggregator()
    aggregator.add(_report("b.go", ["B1", "B2"], []))
    aggregator.add(_report("a_test.go", [], ["TestA"]))
    aggregator.add(_report("a.go", ["A1"], []))

    catalog = aggregator.catalog

    assert catalog.file_reports == (
        "report:b.go\n",
        "report:a_test.go\n",
        "report:a.go\n",
    )
    assert [r.name for r in catalog.function_records] == ["B1", "B2", "A1"]
    assert [r.name for r in catalog.test_function_records] == ["TestA"]


def test_ph5_cat_003_aggregator_does_not_deduplicate() -> None:
    aggregator = CatalogAggregator()
    aggregator.add(_report("a.go", ["A"], []))
    aggregator.add(_report("a.go", ["A"], []))

    assert len(aggregator.catalog.function_records) == 2


def test_ph5_cat_004_catalog_snapshot_is_not_affected_by_later_adds() -> None:
    aggregator = CatalogAggregator()
    aggregator.add(_report("a.go", ["A"], []))
    snapshot = aggregator.catalog
    aggregator.add(_report("b.go", ["B"], []))
    aggregator.add_diagnostic(Diagnostic(kind="load", file_path="c.go", message="x"))

    assert len(snapshot.file_reports) == 1
    assert snapshot.diagnostics == ()
    assert len(aggregator.catalog.diagnostics) == 1


def test_ph5_cat_005_pipeline_over_zero_files_is_empty() -> None:
    catalog = describe_files([])

    assert catalog == Catalog()


def test_ph5_cat_006_pipeline_skips_unloadable_and_unparseable_files(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    ok = tmp_path / "ok.go"
    ok_test = tmp_path / "ok_test.go"
    broken = tmp_path / "broken.go"
    missing = tmp_path / "missing.go"
    _write_file(ok, "package ok\n\nfunc A() {}\n\nfunc B() { A() }\n")
    _write_file(ok_test, "package ok\n\nfunc helper() {}\n")
    _write_file(broken, "package ok\n\nfunc broken( {\n")

    with caplog.at_level(logging.WARNING):
        catalog = describe_files([ok, broken, missing, ok_test])

    assert len(catalog.file_reports) == 2
    assert [r.name for r in catalog.function_records] == ["A", "B"]
    assert [r.name for r in catalog.test_function_records] == ["helper"]
    assert [(d.kind, d.file_path) for d in catalog.diagnostics] == [
        ("parse", str(broken)),
        ("load", str(missing)),
    ]
    assert "broken.go" in caplog.text
    assert "missing.go" in caplog.text


def test_ph5_cat_007_pipeline_record_count_matches_declarations(tmp_path: Path) -> None:
    paths = []
    for index in range(3):
        path = tmp_path / f"f{index}.go"
        functions = "\n".join(f"func F{index}_{n}() {{}}" for n in range(index + 1))
        _write_file(path, f"package p\n\n{functions}\n")
        paths.append(path)

    catalog = describe_files(paths)

    total = len(catalog.function_records) + len(catalog.test_function_records)
    assert total == 1 + 2 + 3
    assert catalog.file_reports[0].startswith(f"##Start of go file {paths[0]}\n")


def test_ph5_cat_008_load_source_rejects_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "latin1.go"
    path.write_bytes(b"package p\n// \xe9t\xe9\n")

    with pytest.raises(LoadFailure):
        load_source(path)
