"""Constraint resolution entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SizeSource(str, Enum):
    """Schema keyword family a size constraint was read from."""

    STRING_LENGTH = "string_length"
    ITEM_COUNT = "item_count"


class FieldCategory(str, Enum):
    """Structural category of a declared field."""

    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"
    REFERENCE = "reference"
    UNTYPED = "untyped"


class ClassificationKind(str, Enum):
    """Special-case rule selected for a field."""

    DECIMAL = "decimal"
    ENUMERATION = "enumeration"
    PLAIN = "plain"


@dataclass(frozen=True)
class SizeConstraint:
    """Length bounds shared by string length and array item count keywords."""

    min: int | None = None
    max: int | None = None
    source: SizeSource | None = None

    @property
    def is_empty(self) -> bool:
        """Return True when neither bound is present."""
        return self.min is None and self.max is None


@dataclass(frozen=True)
class RangeConstraint:
    """Numeric bounds, always held as floats."""

    min: float | None = None
    max: float | None = None

    @property
    def is_empty(self) -> bool:
        """Return True when neither bound is present."""
        return self.min is None and self.max is None


@dataclass(frozen=True)
class ExtractedConstraints:
    """Constraint half of a field record."""

    size: SizeConstraint
    range: RangeConstraint


@dataclass(frozen=True)
class DecimalPolicy:
    """Rules deciding which declarations map to an arbitrary-precision decimal."""

    formats: frozenset[str] = frozenset({"decimal"})
    all_numbers: bool = False


DEFAULT_DECIMAL_POLICY = DecimalPolicy()


@dataclass(frozen=True)
class TypeClassification:
    """Outcome of the type classification decision table."""

    kind: ClassificationKind
    base_category: FieldCategory
    requires_nested: bool = False

    @property
    def is_decimal(self) -> bool:
        return self.kind is ClassificationKind.DECIMAL

    @property
    def is_enum(self) -> bool:
        return self.kind is ClassificationKind.ENUMERATION


@dataclass(frozen=True)
class FieldInfo:
    """Normalized per-field constraint record, independent of keyword naming."""

    name: str
    path: str
    is_optional: bool
    size: SizeConstraint
    range: RangeConstraint
    classification: TypeClassification

    @property
    def is_decimal(self) -> bool:
        return self.classification.is_decimal

    @property
    def is_enum(self) -> bool:
        return self.classification.is_enum

    @property
    def base_category(self) -> FieldCategory:
        return self.classification.base_category
