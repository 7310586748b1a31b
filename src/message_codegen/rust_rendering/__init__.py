"""Rust rendering exports."""

from .naming import rust_field_name, snake_case
from .struct_rendering import (
    RenderedStruct,
    render_message_module,
    render_mod_index,
    render_struct,
)
from .type_mapping import RustImport, RustType, render_imports, rust_type

__all__ = [
    "RenderedStruct",
    "RustImport",
    "RustType",
    "render_imports",
    "render_message_module",
    "render_mod_index",
    "render_struct",
    "rust_field_name",
    "rust_type",
    "snake_case",
]
