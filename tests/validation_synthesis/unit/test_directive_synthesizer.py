"""Validation directive synthesis tests."""

from __future__ import annotations

from typing import Any

import pytest
from message_codegen.constraint_resolution import (
    ClassificationKind,
    FieldCategory,
    FieldInfo,
    RangeConstraint,
    SizeConstraint,
    TypeClassification,
    resolve_field,
)
from message_codegen.schema_management import parse
from message_codegen.validation_synthesis import (
    LengthDirective,
    NestedDirective,
    RangeDirective,
    format_directive,
    synthesize,
)

_DEFINITIONS = {
    "StatusEnumType": {"type": "string", "enum": ["Accepted", "Rejected"]},
    "StatusInfoType": {"type": "object", "properties": {"reasonCode": {"type": "string"}}},
    "IdType": {"type": "integer"},
}


def _field_info(node: dict[str, Any], *, required: bool = True) -> FieldInfo:
    document = parse(
        {
            "definitions": _DEFINITIONS,
            "properties": {"field": node},
            "required": ["field"] if required else [],
        }
    )
    return resolve_field(document.properties["field"], is_optional=not required)


def _rendered(node: dict[str, Any], *, required: bool = True) -> list[str]:
    return [format_directive(item) for item in synthesize(_field_info(node, required=required))]


def test_string_with_min_and_max_length_gives_one_combined_directive() -> None:
    assert _rendered({"type": "string", "minLength": 5, "maxLength": 50}) == [
        "length(min = 5, max = 50)"
    ]


def test_array_with_min_items_only() -> None:
    directives = synthesize(
        _field_info({"type": "array", "items": {"type": "integer"}, "minItems": 1})
    )

    assert directives == (LengthDirective(min=1, max=None),)
    assert [format_directive(item) for item in directives] == ["length(min = 1)"]


def test_integer_range_renders_integer_literals() -> None:
    assert _rendered({"type": "integer", "minimum": 1, "maximum": 100}) == [
        "range(min = 1, max = 100)"
    ]


def test_decimal_field_gets_no_directive_even_with_bounds() -> None:
    assert _rendered({"type": "number", "format": "decimal", "minimum": 0.5, "maximum": 99.9}) == []


def test_optional_field_keeps_its_length_directive() -> None:
    info = _field_info({"type": "string", "minLength": 3, "maxLength": 20}, required=False)

    assert info.is_optional
    assert [format_directive(item) for item in synthesize(info)] == ["length(min = 3, max = 20)"]


@pytest.mark.parametrize(
    ("node", "expected"),
    [
        ({"type": "string", "minLength": 10}, ["length(min = 10)"]),
        ({"type": "string", "maxLength": 100}, ["length(max = 100)"]),
        ({"type": "array", "items": {"type": "string"}, "maxItems": 10}, ["length(max = 10)"]),
        ({"type": "integer", "minimum": 0}, ["range(min = 0)"]),
        ({"type": "integer", "maximum": 7.5}, ["range(max = 7.5)"]),
        ({"type": "number", "minimum": 0, "maximum": 100}, ["range(min = 0.0, max = 100.0)"]),
        ({"type": "number", "maximum": 0.25}, ["range(max = 0.25)"]),
        ({"type": "string"}, []),
        ({"type": "boolean"}, []),
    ],
)
def test_min_only_max_only_and_both_combination_policy(
    node: dict[str, Any], expected: list[str]
) -> None:
    assert _rendered(node) == expected


@pytest.mark.parametrize("required", [True, False])
def test_optionality_never_changes_directives(required: bool) -> None:
    node = {"type": "integer", "minimum": -5, "maximum": 5}

    assert _rendered(node, required=required) == ["range(min = -5, max = 5)"]


def test_reference_to_structured_type_gets_nested_directive() -> None:
    assert synthesize(_field_info({"$ref": "#/definitions/StatusInfoType"})) == (
        NestedDirective(),
    )


def test_array_of_structured_type_gets_length_then_nested() -> None:
    directives = synthesize(
        _field_info(
            {"type": "array", "items": {"$ref": "#/definitions/StatusInfoType"}, "minItems": 1}
        )
    )

    assert directives == (LengthDirective(min=1), NestedDirective())


def test_enumerations_never_get_nested_directive() -> None:
    reference = synthesize(_field_info({"$ref": "#/definitions/StatusEnumType"}))
    inline = synthesize(_field_info({"type": "string", "enum": ["A"], "maxLength": 1}))
    items = synthesize(
        _field_info({"type": "array", "items": {"$ref": "#/definitions/StatusEnumType"}})
    )

    assert reference == ()
    assert inline == (LengthDirective(max=1),)
    assert items == ()


def test_enum_kind_suppresses_nested_even_if_classification_requests_it() -> None:
    info = FieldInfo(
        name="status",
        path="status",
        is_optional=False,
        size=SizeConstraint(),
        range=RangeConstraint(),
        classification=TypeClassification(
            kind=ClassificationKind.ENUMERATION,
            base_category=FieldCategory.REFERENCE,
            requires_nested=True,
        ),
    )

    assert synthesize(info) == ()


def test_decimal_kind_is_terminal_even_with_size_constraint() -> None:
    info = FieldInfo(
        name="amount",
        path="amount",
        is_optional=False,
        size=SizeConstraint(min=1, max=3),
        range=RangeConstraint(min=0.0, max=1.0),
        classification=TypeClassification(
            kind=ClassificationKind.DECIMAL, base_category=FieldCategory.STRING
        ),
    )

    assert synthesize(info) == ()


def test_size_wins_when_both_constraints_are_present_on_a_record() -> None:
    info = FieldInfo(
        name="mixed",
        path="mixed",
        is_optional=False,
        size=SizeConstraint(max=4),
        range=RangeConstraint(min=1.0),
        classification=TypeClassification(
            kind=ClassificationKind.PLAIN, base_category=FieldCategory.STRING
        ),
    )

    directives = synthesize(info)

    assert directives == (LengthDirective(max=4),)
    assert not any(isinstance(item, RangeDirective) for item in directives)


def test_range_directive_is_integral_only_for_integer_fields() -> None:
    integer_directive = synthesize(_field_info({"type": "integer", "minimum": 2}))[0]
    number_directive = synthesize(_field_info({"type": "number", "minimum": 2}))[0]

    assert integer_directive == RangeDirective(min=2.0, max=None, integral=True)
    assert number_directive == RangeDirective(min=2.0, max=None, integral=False)


def test_reference_to_primitive_definition_behaves_like_the_primitive() -> None:
    info = _field_info({"$ref": "#/definitions/IdType", "minimum": 1, "maximum": 100})

    directives = synthesize(info)

    assert info.base_category is FieldCategory.INTEGER
    assert not info.classification.requires_nested
    assert [format_directive(item) for item in directives] == ["range(min = 1, max = 100)"]


def test_reference_to_structured_definition_still_requires_nested() -> None:
    info = _field_info({"$ref": "#/definitions/StatusInfoType"})

    assert info.base_category is FieldCategory.REFERENCE
    assert synthesize(info) == (NestedDirective(),)
