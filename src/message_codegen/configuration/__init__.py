"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_settings,
    write_placeholder_settings,
)
from .loader import ConfigurationError, default_settings, load_settings
from .runtime_settings import GeneratorSettings, RustModuleSettings

__all__ = [
    "GeneratorSettings",
    "RustModuleSettings",
    "ConfigurationError",
    "default_settings",
    "load_settings",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_settings",
    "write_placeholder_settings",
]
