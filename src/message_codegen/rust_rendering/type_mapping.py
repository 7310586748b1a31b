"""Mapping from classified schema declarations to Rust types."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass

from message_codegen.configuration.runtime_settings import RustModuleSettings
from message_codegen.constraint_resolution.constraint_models import (
    DEFAULT_DECIMAL_POLICY,
    DecimalPolicy,
    FieldCategory,
    TypeClassification,
)
from message_codegen.constraint_resolution.type_classifier import classify
from message_codegen.schema_management.schema_models import PropertyDeclaration

_MULTILINE_IMPORT_THRESHOLD = 3


@dataclass(frozen=True, order=True)
class RustImport:
    """One imported name and the module path it comes from."""

    module: str
    name: str


@dataclass(frozen=True)
class RustType:
    """Rust type expression plus the imports it needs."""

    expression: str
    imports: frozenset[RustImport] = frozenset()


BASE_IMPORTS = frozenset(
    {
        RustImport("serde", "Deserialize"),
        RustImport("serde", "Serialize"),
        RustImport("validator", "Validate"),
    }
)
_VALUE = RustType("Value", frozenset({RustImport("serde_json", "Value")}))
_PRIMITIVES = {
    FieldCategory.INTEGER: RustType("i32"),
    FieldCategory.NUMBER: RustType("f64"),
    FieldCategory.BOOLEAN: RustType("bool"),
}


def rust_type(
    decl: PropertyDeclaration,
    classification: TypeClassification,
    *,
    modules: RustModuleSettings,
    policy: DecimalPolicy = DEFAULT_DECIMAL_POLICY,
) -> RustType:
    """Return the Rust type for a declaration, not wrapped in ``Option``."""
    if classification.is_decimal:
        return RustType("Decimal", frozenset({RustImport("rust_decimal", "Decimal")}))

    category = classification.base_category
    if category is FieldCategory.REFERENCE and decl.reference is not None:
        module = modules.enumerations_module if classification.is_enum else modules.datatypes_module
        return RustType(decl.reference, frozenset({RustImport(module, decl.reference)}))
    if category is FieldCategory.STRING:
        if decl.format == "date-time":
            return RustType(
                "DateTime<Utc>",
                frozenset({RustImport("chrono", "DateTime"), RustImport("chrono", "Utc")}),
            )
        return RustType("String")
    if category in _PRIMITIVES:
        return _PRIMITIVES[category]
    if category is FieldCategory.ARRAY:
        if decl.items is None:
            return RustType("Vec<Value>", _VALUE.imports)
        inner = rust_type(decl.items, classify(decl.items, policy), modules=modules, policy=policy)
        return RustType(f"Vec<{inner.expression}>", inner.imports)
    return _VALUE


def render_imports(imports: Iterable[RustImport]) -> list[str]:
    """Group imports per module, crate-local modules first, names sorted."""
    grouped: dict[str, set[str]] = defaultdict(set)
    for item in imports:
        grouped[item.module].add(item.name)

    ordered_modules = sorted(grouped, key=lambda module: (not module.startswith("crate::"), module))
    lines = []
    for module in ordered_modules:
        names = sorted(grouped[module])
        if len(names) == 1:
            lines.append(f"use {module}::{names[0]};")
        elif len(names) <= _MULTILINE_IMPORT_THRESHOLD:
            lines.append(f"use {module}::{{{', '.join(names)}}};")
        else:
            body = "".join(f"    {name},\n" for name in names)
            lines.append(f"use {module}::{{\n{body}}};")
    return lines
