"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import (
    DEFAULT_DATATYPES_MODULE,
    DEFAULT_ENUMERATIONS_MODULE,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_SCHEMA_DIR,
    GeneratorSettings,
    RustModuleSettings,
)

_KNOWN_KEYS = frozenset(
    {
        "schema_dir",
        "output_dir",
        "generate_mod_file",
        "show_statistics",
        "decimal",
        "rust",
    }
)


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def default_settings(base_path: Path | None = None) -> GeneratorSettings:
    """Return settings with every default applied, relative to ``base_path``."""
    base = base_path or Path.cwd()
    return GeneratorSettings(
        schema_dir=_resolve_path(base, DEFAULT_SCHEMA_DIR),
        output_dir=_resolve_path(base, DEFAULT_OUTPUT_DIR),
    )


def load_settings(config_path: Path | str) -> GeneratorSettings:
    """Load and validate the generator configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    unknown = sorted(str(key) for key in parsed if key not in _KNOWN_KEYS)
    if unknown:
        raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")

    base_path = path.resolve().parent
    decimal_formats, numbers_as_decimal = _parse_decimal_section(parsed.get("decimal"))
    return GeneratorSettings(
        schema_dir=_resolve_path(
            base_path,
            _require_non_empty_string(parsed.get("schema_dir", DEFAULT_SCHEMA_DIR), "schema_dir"),
        ),
        output_dir=_resolve_path(
            base_path,
            _require_non_empty_string(parsed.get("output_dir", DEFAULT_OUTPUT_DIR), "output_dir"),
        ),
        generate_mod_file=_require_bool(parsed.get("generate_mod_file", True), "generate_mod_file"),
        show_statistics=_require_bool(parsed.get("show_statistics", True), "show_statistics"),
        decimal_formats=decimal_formats,
        numbers_as_decimal=numbers_as_decimal,
        modules=_parse_rust_section(parsed.get("rust")),
    )


def _parse_decimal_section(value: Any) -> tuple[tuple[str, ...], bool]:
    if value is None:
        return ("decimal",), False
    section = _require_mapping(value, "decimal")
    formats = _normalize_string_sequence(section.get("formats", ["decimal"]), "decimal.formats")
    numbers_as_decimal = _require_bool(
        section.get("numbers_as_decimal", False), "decimal.numbers_as_decimal"
    )
    return formats, numbers_as_decimal


def _parse_rust_section(value: Any) -> RustModuleSettings:
    if value is None:
        return RustModuleSettings()
    section = _require_mapping(value, "rust")
    return RustModuleSettings(
        datatypes_module=_require_non_empty_string(
            section.get("datatypes_module", DEFAULT_DATATYPES_MODULE), "rust.datatypes_module"
        ),
        enumerations_module=_require_non_empty_string(
            section.get("enumerations_module", DEFAULT_ENUMERATIONS_MODULE),
            "rust.enumerations_module",
        ),
    )


def _normalize_string_sequence(value: Any, field_name: str) -> tuple[str, ...]:
    if isinstance(value, str):
        stripped = value.strip()
        return (stripped,) if stripped else ()
    if isinstance(value, Sequence):
        normalized = []
        for item in value:
            if not isinstance(item, str):
                raise ConfigurationError(f"{field_name} entries must be strings.")
            stripped = item.strip()
            if stripped:
                normalized.append(stripped)
        return tuple(normalized)
    raise ConfigurationError(f"{field_name} must be a string or list of strings.")


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _require_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be true or false.")
    return value
