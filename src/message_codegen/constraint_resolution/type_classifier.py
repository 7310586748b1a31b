"""Type classification decision table."""

from __future__ import annotations

from message_codegen.schema_management.schema_models import PropertyDeclaration

from .constraint_models import (
    DEFAULT_DECIMAL_POLICY,
    ClassificationKind,
    DecimalPolicy,
    FieldCategory,
    TypeClassification,
)

_CATEGORY_BY_TYPE = {
    "string": FieldCategory.STRING,
    "number": FieldCategory.NUMBER,
    "integer": FieldCategory.INTEGER,
    "boolean": FieldCategory.BOOLEAN,
    "array": FieldCategory.ARRAY,
    "object": FieldCategory.OBJECT,
}
_PRIMITIVE_TYPES = frozenset({"string", "number", "integer", "boolean"})


def classify(
    decl: PropertyDeclaration, policy: DecimalPolicy = DEFAULT_DECIMAL_POLICY
) -> TypeClassification:
    """Classify one declaration; the first matching rule wins.

    1. A decimal marker makes the field a decimal, even when it carries
       ``minimum``/``maximum``, since the decimal target type has no range directive.
    2. A non-empty enumerated literal set makes the field an enumeration, which
       never receives a nested-validation directive.
    3. Anything else keeps its structural category.
    """
    base_category = base_category_of(decl)
    if _has_decimal_marker(decl, policy):
        return TypeClassification(kind=ClassificationKind.DECIMAL, base_category=base_category)
    if decl.enum_values:
        return TypeClassification(kind=ClassificationKind.ENUMERATION, base_category=base_category)
    return TypeClassification(
        kind=ClassificationKind.PLAIN,
        base_category=base_category,
        requires_nested=_requires_nested(decl, base_category, policy),
    )


def base_category_of(decl: PropertyDeclaration) -> FieldCategory:
    """Return the structural category from the reference or declared type tag.

    A reference keeps its named type unless it resolves to a primitive without
    enumerated literals, which behaves like the primitive it aliases.
    """
    if decl.reference is not None and not _is_primitive_alias(decl):
        return FieldCategory.REFERENCE
    if decl.type_tag is None:
        return FieldCategory.UNTYPED
    return _CATEGORY_BY_TYPE.get(decl.type_tag, FieldCategory.UNTYPED)


def _has_decimal_marker(decl: PropertyDeclaration, policy: DecimalPolicy) -> bool:
    if decl.format is not None and decl.format in policy.formats:
        return True
    return policy.all_numbers and decl.type_tag == "number"


def _is_primitive_alias(decl: PropertyDeclaration) -> bool:
    return decl.type_tag in _PRIMITIVE_TYPES and not decl.enum_values


def _requires_nested(
    decl: PropertyDeclaration, base_category: FieldCategory, policy: DecimalPolicy
) -> bool:
    if base_category is FieldCategory.REFERENCE:
        return True
    if base_category is FieldCategory.ARRAY and decl.items is not None:
        item_classification = classify(decl.items, policy)
        return (
            item_classification.base_category is FieldCategory.REFERENCE
            and item_classification.requires_nested
        )
    return False
