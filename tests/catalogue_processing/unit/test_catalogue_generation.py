"""Catalogue discovery, pairing and generation tests."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import pytest
from message_codegen.catalogue_processing import (
    CatalogueError,
    catalogue_stats,
    collect_message_pairs,
    discover_schema_files,
    generate_catalogue,
    split_message_name,
)
from message_codegen.configuration import GeneratorSettings


def _write_schema(directory: Path, stem: str, properties: dict[str, Any]) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{stem}.json"
    path.write_text(json.dumps({"type": "object", "properties": properties}), encoding="utf-8")
    return path


@pytest.mark.parametrize(
    ("stem", "expected"),
    [
        ("AuthorizeRequest", ("Authorize", True)),
        ("AuthorizeResponse", ("Authorize", False)),
        ("NotifyPeriodicEventStream", None),
        ("Request", None),
    ],
)
def test_split_message_name(stem: str, expected: tuple[str, bool] | None) -> None:
    assert split_message_name(stem) == expected


def test_discover_schema_files_is_recursive_and_sorted(tmp_path: Path) -> None:
    _write_schema(tmp_path / "b", "ZetaRequest", {})
    _write_schema(tmp_path / "a", "AlphaRequest", {})
    (tmp_path / "notes.txt").write_text("ignored", encoding="utf-8")

    files = discover_schema_files(tmp_path)

    assert [path.name for path in files] == ["AlphaRequest.json", "ZetaRequest.json"]


def test_missing_schema_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(CatalogueError, match="does not exist"):
        discover_schema_files(tmp_path / "absent")


def test_collect_pairs_and_stats(tmp_path: Path) -> None:
    _write_schema(tmp_path, "ResetRequest", {"type": {"type": "string"}})
    _write_schema(tmp_path, "ResetResponse", {"status": {"type": "string"}})
    _write_schema(tmp_path, "HeartbeatRequest", {})

    scan = collect_message_pairs(tmp_path)
    stats = catalogue_stats(scan)

    assert [pair.base_name for pair in scan.pairs] == ["Heartbeat", "Reset"]
    assert scan.pairs[1].is_complete
    assert not scan.pairs[0].is_complete
    assert stats.total_pairs == 2
    assert stats.complete_pairs == 1
    assert stats.incomplete_pairs == 1


def test_malformed_document_is_recorded_and_others_continue(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    _write_schema(tmp_path, "ResetRequest", {"type": {"type": "string"}})
    _write_schema(tmp_path, "ResetResponse", {"status": {"type": "string"}})
    broken = tmp_path / "BrokenRequest.json"
    broken.write_text(json.dumps({"type": "object", "required": ["x"]}), encoding="utf-8")

    with caplog.at_level(logging.WARNING):
        scan = collect_message_pairs(tmp_path)

    assert [failure.path for failure in scan.failures] == [broken]
    assert [pair.base_name for pair in scan.pairs] == ["Reset"]
    assert "BrokenRequest.json" in caplog.text


def test_unsuffixed_schema_is_recorded_as_failure(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    _write_schema(tmp_path, "FooRequest", {"a": {"type": "string"}})
    stray = _write_schema(tmp_path, "Foo", {"b": {"type": "string"}})

    with caplog.at_level(logging.WARNING):
        scan = collect_message_pairs(tmp_path)

    assert [failure.path for failure in scan.failures] == [stray]
    assert "Request or Response" in scan.failures[0].message
    assert [pair.base_name for pair in scan.pairs] == ["Foo"]
    assert scan.pairs[0].response is None
    assert "Foo.json" in caplog.text


def test_duplicate_stem_in_another_directory_is_recorded_as_failure(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    _write_schema(tmp_path / "a", "FooRequest", {"first": {"type": "string"}})
    duplicate = _write_schema(tmp_path / "b", "FooRequest", {"second": {"type": "string"}})
    _write_schema(tmp_path / "b", "FooResponse", {})

    with caplog.at_level(logging.WARNING):
        scan = collect_message_pairs(tmp_path)

    assert [failure.path for failure in scan.failures] == [duplicate]
    assert "Duplicate message schema" in scan.failures[0].message
    request = scan.pairs[0].request
    assert request is not None
    assert [record.info.name for record in request.records] == ["first"]
    assert "Duplicate message schema" in caplog.text


def test_generate_catalogue_writes_modules_and_index(tmp_path: Path) -> None:
    schema_dir = tmp_path / "schemas"
    _write_schema(
        schema_dir, "SetChargingLimitRequest", {"limit": {"type": "integer", "minimum": 0}}
    )
    _write_schema(
        schema_dir, "SetChargingLimitResponse", {"note": {"type": "string", "maxLength": 8}}
    )
    _write_schema(schema_dir, "OrphanRequest", {})
    settings = GeneratorSettings(schema_dir=schema_dir, output_dir=tmp_path / "out")

    report = generate_catalogue(settings)

    module_path = tmp_path / "out" / "set_charging_limit.rs"
    assert report.generated == ("SetChargingLimit",)
    assert report.incomplete == ("Orphan",)
    assert not report.has_problems
    assert report.mod_file == tmp_path / "out" / "mod.rs"
    source = module_path.read_text(encoding="utf-8")
    assert "pub struct SetChargingLimitRequest {" in source
    assert "#[validate(range(min = 0))]" in source
    assert "#[validate(length(max = 8))]" in source
    index = report.mod_file.read_text(encoding="utf-8")
    assert "pub mod set_charging_limit;" in index
    assert "orphan" not in index


def test_generate_catalogue_reports_field_issues(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    schema_dir = tmp_path / "schemas"
    _write_schema(
        schema_dir,
        "PingRequest",
        {"count": {"type": "integer", "maxLength": 3}, "label": {"type": "string"}},
    )
    _write_schema(schema_dir, "PingResponse", {})
    settings = GeneratorSettings(
        schema_dir=schema_dir, output_dir=tmp_path / "out", generate_mod_file=False
    )

    with caplog.at_level(logging.WARNING):
        report = generate_catalogue(settings)

    assert report.has_problems
    assert [issue.field_path for issue in report.issues] == ["count"]
    assert report.mod_file is None
    assert not (tmp_path / "out" / "mod.rs").exists()
    source = (tmp_path / "out" / "ping.rs").read_text(encoding="utf-8")
    assert "pub label: Option<String>," in source
    assert "count" not in source
    assert "maxLength" in caplog.text
