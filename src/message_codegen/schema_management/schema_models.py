"""Schema management entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

CONSTRAINT_KEYWORDS = ("minLength", "maxLength", "minItems", "maxItems", "minimum", "maximum")


@dataclass(frozen=True)
class PropertyDeclaration:  # pylint: disable=too-many-instance-attributes
    """Raw per-field schema fragment without constraint interpretation."""

    name: str
    path: str
    type_tag: str | None
    reference: str | None = None
    keywords: Mapping[str, Any] = field(default_factory=dict)
    items: PropertyDeclaration | None = None
    enum_values: tuple[Any, ...] = ()
    format: str | None = None
    description: str | None = None

    def keyword(self, name: str) -> Any:
        """Return the raw value of one constraint keyword, or None when absent."""
        return self.keywords.get(name)


@dataclass(frozen=True)
class SchemaDocument:
    """Structured representation of one message schema."""

    title: str
    properties: Mapping[str, PropertyDeclaration]
    required: frozenset[str]

    def is_required(self, field_name: str) -> bool:
        """Return True when the field is listed in the required set."""
        return field_name in self.required
