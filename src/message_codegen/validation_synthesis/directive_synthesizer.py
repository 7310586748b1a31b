"""Validation directive synthesis policy."""

from __future__ import annotations

from message_codegen.constraint_resolution.constraint_models import (
    ClassificationKind,
    FieldCategory,
    FieldInfo,
)

from .directive_models import LengthDirective, NestedDirective, RangeDirective, ValidationDirective


def synthesize(info: FieldInfo) -> tuple[ValidationDirective, ...]:
    """Return the ordered validation directives for one field.

    Decimal fields get nothing. Otherwise a present size constraint yields one
    combined length directive, or a present range constraint yields one combined
    range directive, followed by a nested directive for non-enumeration
    references. Optionality plays no part here.
    """
    classification = info.classification
    if classification.kind is ClassificationKind.DECIMAL:
        return ()

    directives: list[ValidationDirective] = []
    if not info.size.is_empty:
        directives.append(LengthDirective(min=info.size.min, max=info.size.max))
    elif not info.range.is_empty:
        directives.append(
            RangeDirective(
                min=info.range.min,
                max=info.range.max,
                integral=classification.base_category is FieldCategory.INTEGER,
            )
        )

    if classification.kind is not ClassificationKind.ENUMERATION and classification.requires_nested:
        directives.append(NestedDirective())
    return tuple(directives)
