"""Identifier conversion between schema names and Rust names."""

from __future__ import annotations

import re

_WORD_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_SEPARATORS = re.compile(r"[^A-Za-z0-9]+")

RUST_KEYWORDS = frozenset(
    {
        "as", "async", "await", "break", "const", "continue", "crate", "dyn", "else",
        "enum", "extern", "false", "fn", "for", "if", "impl", "in", "let", "loop",
        "match", "mod", "move", "mut", "pub", "ref", "return", "self", "static",
        "struct", "super", "trait", "true", "type", "unsafe", "use", "where", "while",
    }
)  # fmt: skip


def snake_case(name: str) -> str:
    """Convert ``chargingStationId`` / ``EVSEType`` style names to snake case."""
    words = [
        word
        for chunk in _SEPARATORS.split(name)
        for word in _WORD_BOUNDARY.split(chunk)
        if word
    ]
    return "_".join(word.lower() for word in words)


def camel_case(name: str) -> str:
    """Convert a snake case name back to lower camel case."""
    head, *tail = name.split("_")
    return head + "".join(word[:1].upper() + word[1:] for word in tail)


def rust_field_name(name: str) -> str:
    """Return the Rust field identifier for a schema property name."""
    converted = snake_case(name) or "field"
    if converted[0].isdigit():
        converted = f"field_{converted}"
    if converted in RUST_KEYWORDS:
        return f"{converted}_"
    return converted


def needs_serde_rename(name: str, field_name: str) -> bool:
    """Return True when ``rename_all = "camelCase"`` would not reproduce ``name``."""
    return camel_case(field_name) != name
