"""Rust source rendering for message structs and module indexes."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from message_codegen.configuration.runtime_settings import RustModuleSettings
from message_codegen.constraint_resolution.constraint_models import (
    DEFAULT_DECIMAL_POLICY,
    DecimalPolicy,
)
from message_codegen.validation_synthesis.directive_formatting import format_directive
from message_codegen.validation_synthesis.field_records import DocumentResolution, FieldRecord

from .naming import needs_serde_rename, rust_field_name, snake_case
from .type_mapping import BASE_IMPORTS, RustImport, render_imports, rust_type

_DERIVES = "#[derive(Debug, Clone, PartialEq, Deserialize, Serialize, Validate)]"
_INDENT = "    "


@dataclass(frozen=True)
class RenderedStruct:
    """Rust struct source plus the imports it relies on."""

    name: str
    source: str
    imports: frozenset[RustImport]


@dataclass(frozen=True)
class _RenderedField:
    name: str
    type_expression: str
    is_optional: bool
    lines: tuple[str, ...]


def render_struct(
    resolution: DocumentResolution,
    *,
    message_name: str,
    role: str,
    modules: RustModuleSettings,
    policy: DecimalPolicy = DEFAULT_DECIMAL_POLICY,
) -> RenderedStruct:
    """Render one resolved schema document as a serde/validator struct."""
    imports: set[RustImport] = set(BASE_IMPORTS)
    fields = []
    for record in resolution.records:
        field_type = rust_type(
            record.declaration, record.info.classification, modules=modules, policy=policy
        )
        imports.update(field_type.imports)
        fields.append(_render_field(record, field_type.expression))

    lines = [
        f"/// {role.capitalize()} body for the {message_name} {role}.",
        _DERIVES,
        '#[serde(rename_all = "camelCase")]',
        f"pub struct {resolution.title} {{",
    ]
    for index, field in enumerate(fields):
        if index:
            lines.append("")
        lines.extend(field.lines)
    lines.append("}")
    lines.append("")
    lines.extend(_render_constructor(resolution.title, fields))
    return RenderedStruct(
        name=resolution.title, source="\n".join(lines) + "\n", imports=frozenset(imports)
    )


def render_message_module(structs: Sequence[RenderedStruct]) -> str:
    """Join structs of one message pair under a single merged import block."""
    imports: set[RustImport] = set()
    for struct in structs:
        imports.update(struct.imports)
    header = "\n".join(render_imports(imports))
    body = "\n".join(struct.source for struct in structs)
    return f"{header}\n\n{body}"


def render_mod_index(base_names: Sequence[str]) -> str:
    """Render ``mod.rs`` declaring and re-exporting every generated message pair."""
    lines = [
        "// Generated message modules.",
        "// This file is auto-generated. Do not edit manually.",
        "",
    ]
    lines.extend(f"pub mod {snake_case(name)};" for name in base_names)
    lines.append("")
    lines.extend(
        f"pub use {snake_case(name)}::{{{name}Request, {name}Response}};" for name in base_names
    )
    return "\n".join(lines) + "\n"


def _render_field(record: FieldRecord, type_expression: str) -> _RenderedField:
    info = record.info
    name = rust_field_name(info.name)
    lines = []
    description = record.declaration.description
    if description:
        lines.append(f"{_INDENT}/// {description}")

    serde_attributes = []
    if needs_serde_rename(info.name, name):
        serde_attributes.append(f'rename = "{info.name}"')
    if info.is_optional:
        serde_attributes.append('skip_serializing_if = "Option::is_none"')
    if len(serde_attributes) == 1:
        lines.append(f"{_INDENT}#[serde({serde_attributes[0]})]")
    elif serde_attributes:
        lines.append(f"{_INDENT}#[serde(")
        lines.append(",\n".join(f"{_INDENT * 2}{attribute}" for attribute in serde_attributes))
        lines.append(f"{_INDENT})]")

    lines.extend(
        f"{_INDENT}#[validate({format_directive(directive)})]" for directive in record.directives
    )
    declared_type = f"Option<{type_expression}>" if info.is_optional else type_expression
    lines.append(f"{_INDENT}pub {name}: {declared_type},")
    return _RenderedField(
        name=name,
        type_expression=type_expression,
        is_optional=info.is_optional,
        lines=tuple(lines),
    )


def _render_constructor(struct_name: str, fields: Sequence[_RenderedField]) -> list[str]:
    parameters = ", ".join(
        f"{field.name}: {field.type_expression}" for field in fields if not field.is_optional
    )
    lines = [
        f"impl {struct_name} {{",
        f"{_INDENT}/// Creates a new instance with optional fields set to None.",
        f"{_INDENT}pub fn new({parameters}) -> Self {{",
        f"{_INDENT * 2}Self {{",
    ]
    for field in fields:
        initializer = f"{field.name}: None" if field.is_optional else field.name
        lines.append(f"{_INDENT * 3}{initializer},")
    lines.extend([f"{_INDENT * 2}}}", f"{_INDENT}}}", "}"])
    return lines
