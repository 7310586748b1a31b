"""Rust identifier conversion tests."""

from __future__ import annotations

import pytest
from message_codegen.rust_rendering.naming import (
    camel_case,
    needs_serde_rename,
    rust_field_name,
    snake_case,
)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("idToken", "id_token"),
        ("EVSEType", "evse_type"),
        ("iso15118CertificateHashData", "iso15118_certificate_hash_data"),
        ("SetVariables", "set_variables"),
        ("already_snake", "already_snake"),
    ],
)
def test_snake_case(name: str, expected: str) -> None:
    assert snake_case(name) == expected


def test_keywords_get_trailing_underscore() -> None:
    assert rust_field_name("type") == "type_"
    assert rust_field_name("match") == "match_"
    assert rust_field_name("value") == "value"


def test_camel_case_round_trips_regular_names() -> None:
    assert camel_case("charging_station_id") == "chargingStationId"
    assert not needs_serde_rename("chargingStationId", "charging_station_id")


def test_rename_is_needed_when_camel_case_differs() -> None:
    assert needs_serde_rename("EVSEId", rust_field_name("EVSEId"))
    assert not needs_serde_rename("type", rust_field_name("type"))
