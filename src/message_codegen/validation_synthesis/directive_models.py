"""Validation directive entities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True)
class LengthDirective:
    """Length rule shared by string length and collection item count."""

    min: int | None = None
    max: int | None = None


@dataclass(frozen=True)
class RangeDirective:
    """Numeric range rule; ``integral`` selects integer literals for whole bounds."""

    min: float | None = None
    max: float | None = None
    integral: bool = False


@dataclass(frozen=True)
class NestedDirective:
    """Delegates validation to the referenced structured type."""


ValidationDirective: TypeAlias = LengthDirective | RangeDirective | NestedDirective
