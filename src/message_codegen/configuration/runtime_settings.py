"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from message_codegen.constraint_resolution.constraint_models import DecimalPolicy

DEFAULT_SCHEMA_DIR = "schemas"
DEFAULT_OUTPUT_DIR = "generated/messages"
DEFAULT_DATATYPES_MODULE = "crate::v2_1::datatypes"
DEFAULT_ENUMERATIONS_MODULE = "crate::v2_1::enumerations"


@dataclass(frozen=True)
class RustModuleSettings:
    """Crate paths that referenced types are imported from."""

    datatypes_module: str = DEFAULT_DATATYPES_MODULE
    enumerations_module: str = DEFAULT_ENUMERATIONS_MODULE


@dataclass(frozen=True)
class GeneratorSettings:  # pylint: disable=too-many-instance-attributes
    """Normalized generator settings."""

    schema_dir: Path
    output_dir: Path
    generate_mod_file: bool = True
    show_statistics: bool = True
    decimal_formats: tuple[str, ...] = ("decimal",)
    numbers_as_decimal: bool = False
    modules: RustModuleSettings = RustModuleSettings()

    @property
    def decimal_policy(self) -> DecimalPolicy:
        """Return the classifier policy derived from the decimal settings."""
        return DecimalPolicy(
            formats=frozenset(self.decimal_formats), all_numbers=self.numbers_as_decimal
        )
