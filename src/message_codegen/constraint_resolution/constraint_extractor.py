"""Constraint extraction from raw property declarations."""

from __future__ import annotations

import math
from typing import Any

from message_codegen.schema_management.schema_models import PropertyDeclaration

from .constraint_models import ExtractedConstraints, RangeConstraint, SizeConstraint, SizeSource

_LENGTH_KEYWORDS = ("minLength", "maxLength")
_ITEM_KEYWORDS = ("minItems", "maxItems")
_RANGE_KEYWORDS = ("minimum", "maximum")
_NUMERIC_TYPES = ("number", "integer")


class ConstraintError(Exception):
    """Raised when a field's constraint keywords cannot be resolved."""

    def __init__(self, field_path: str, message: str) -> None:
        super().__init__(f"{field_path}: {message}")
        self.field_path = field_path


class ConstraintTypeMismatchError(ConstraintError):
    """Raised when a constraint keyword does not apply to the declared type."""


class InvalidConstraintError(ConstraintError):
    """Raised when a constraint keyword carries an unusable or contradictory value."""


def extract(decl: PropertyDeclaration) -> ExtractedConstraints:
    """Read the applicable keywords of one declaration into size and range constraints."""
    _check_keyword_placement(decl)

    size = SizeConstraint()
    range_ = RangeConstraint()
    if decl.type_tag == "string":
        size = _size_constraint(decl, _LENGTH_KEYWORDS, SizeSource.STRING_LENGTH)
    elif decl.type_tag == "array":
        size = _size_constraint(decl, _ITEM_KEYWORDS, SizeSource.ITEM_COUNT)
    elif decl.type_tag in _NUMERIC_TYPES:
        range_ = _range_constraint(decl)
    return ExtractedConstraints(size=size, range=range_)


def _check_keyword_placement(decl: PropertyDeclaration) -> None:
    declared = decl.type_tag or "untyped"
    for keywords, allowed in (
        (_LENGTH_KEYWORDS, ("string",)),
        (_ITEM_KEYWORDS, ("array",)),
        (_RANGE_KEYWORDS, _NUMERIC_TYPES),
    ):
        misplaced = [key for key in keywords if key in decl.keywords]
        if misplaced and decl.type_tag not in allowed:
            raise ConstraintTypeMismatchError(
                decl.path,
                f"{', '.join(misplaced)} not allowed on a field of type {declared}.",
            )


def _size_constraint(
    decl: PropertyDeclaration, keywords: tuple[str, str], source: SizeSource
) -> SizeConstraint:
    min_key, max_key = keywords
    minimum = _size_value(decl, min_key)
    maximum = _size_value(decl, max_key)
    if minimum is None and maximum is None:
        return SizeConstraint()
    if minimum is not None and maximum is not None and minimum > maximum:
        raise InvalidConstraintError(
            decl.path, f"{min_key} {minimum} is greater than {max_key} {maximum}."
        )
    return SizeConstraint(min=minimum, max=maximum, source=source)


def _range_constraint(decl: PropertyDeclaration) -> RangeConstraint:
    minimum = _range_value(decl, "minimum")
    maximum = _range_value(decl, "maximum")
    if minimum is not None and maximum is not None and minimum > maximum:
        raise InvalidConstraintError(
            decl.path, f"minimum {minimum} is greater than maximum {maximum}."
        )
    return RangeConstraint(min=minimum, max=maximum)


def _size_value(decl: PropertyDeclaration, keyword: str) -> int | None:
    value: Any = decl.keyword(keyword)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConstraintError(decl.path, f"{keyword} must be an integer, got {value!r}.")
    if value < 0:
        raise InvalidConstraintError(decl.path, f"{keyword} must not be negative, got {value}.")
    return value


def _range_value(decl: PropertyDeclaration, keyword: str) -> float | None:
    value: Any = decl.keyword(keyword)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise InvalidConstraintError(decl.path, f"{keyword} must be a number, got {value!r}.")
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidConstraintError(decl.path, f"{keyword} must be finite, got {value!r}.")
    return float(value)
