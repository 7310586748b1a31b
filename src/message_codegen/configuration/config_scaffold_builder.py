"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "message-codegen.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Generator configuration for message-codegen.
# Relative directories resolve against the directory holding this file.
# Every key is optional; command line options override these values.

# Directory searched recursively for *Request.json / *Response.json schemas.
schema_dir: "schemas"
# Directory receiving one .rs module per complete message pair.
output_dir: "generated/messages"
generate_mod_file: true
show_statistics: true

decimal:
  # Schema "format" values that map a field to rust_decimal::Decimal.
  # Decimal fields never receive range validation.
  formats:
    - "decimal"
  # Map every "number" field to Decimal instead of f64.
  numbers_as_decimal: false

rust:
  # Crate paths for referenced structured types and enumerations.
  datatypes_module: "crate::v2_1::datatypes"
  enumerations_module: "crate::v2_1::enumerations"
"""


def build_placeholder_settings() -> str:
    """Build a YAML generator configuration with defaults and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_settings(output_path: Path | str) -> Path:
    """Write the generator configuration scaffold to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_settings(), encoding="utf-8")
    return destination.resolve()
