"""Schema loading and parsing service."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from .schema_models import CONSTRAINT_KEYWORDS, PropertyDeclaration, SchemaDocument

_LOCAL_REFERENCE_PREFIX = "#/definitions/"


class MalformedSchemaError(Exception):
    """Raised when a schema document does not have the expected structure."""


def load_schema_document(schema_path: Path | str) -> SchemaDocument:
    """Read one schema file and parse it into a document titled after the file stem."""
    path = Path(schema_path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise MalformedSchemaError(f"Invalid JSON in schema {path.name}: {exc}") from exc
    return parse(raw, title=path.stem)


def parse(raw: Any, *, title: str | None = None) -> SchemaDocument:
    """Parse a decoded JSON schema object into a SchemaDocument."""
    if not isinstance(raw, Mapping):
        raise MalformedSchemaError("Schema root must be an object.")

    document_title = title or _optional_text(raw.get("title")) or "Message"
    properties = raw.get("properties")
    if not isinstance(properties, Mapping):
        raise MalformedSchemaError(f"Schema {document_title} must define a properties object.")

    definitions = raw.get("definitions") or {}
    if not isinstance(definitions, Mapping):
        raise MalformedSchemaError(f"Schema {document_title} definitions must be an object.")

    declarations = {
        name: _parse_property(name, node, path=name, definitions=definitions)
        for name, node in properties.items()
    }
    required = _parse_required(raw.get("required"), declarations, document_title)
    return SchemaDocument(title=document_title, properties=declarations, required=required)


def _parse_required(
    value: Any, declarations: Mapping[str, PropertyDeclaration], title: str
) -> frozenset[str]:
    if value is None:
        return frozenset()
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise MalformedSchemaError(f"Schema {title} required must be a list of field names.")
    names: set[str] = set()
    for name in value:
        if not isinstance(name, str):
            raise MalformedSchemaError(f"Schema {title} required entries must be strings.")
        if name not in declarations:
            raise MalformedSchemaError(
                f"Schema {title} requires '{name}' which is not declared in properties."
            )
        names.add(name)
    return frozenset(names)


def _parse_property(
    name: str, node: Any, *, path: str, definitions: Mapping[str, Any]
) -> PropertyDeclaration:
    if not isinstance(node, Mapping):
        raise MalformedSchemaError(f"Property {path} must be an object.")

    type_tag = _normalize_type(node.get("type"), path)
    enum_values = _parse_enum(node.get("enum"), path)
    reference = None
    ref_value = node.get("$ref")
    if ref_value is not None:
        reference, target = _resolve_reference(ref_value, path, definitions)
        if target is not None:
            type_tag = type_tag or _normalize_type(target.get("type"), path)
            enum_values = enum_values or _parse_enum(target.get("enum"), path)

    items = None
    items_node = node.get("items")
    if items_node is not None:
        items = _parse_property(name, items_node, path=f"{path}[]", definitions=definitions)

    keywords = {key: node[key] for key in CONSTRAINT_KEYWORDS if key in node}
    return PropertyDeclaration(
        name=name,
        path=path,
        type_tag=type_tag,
        reference=reference,
        keywords=keywords,
        items=items,
        enum_values=enum_values,
        format=_optional_text(node.get("format")),
        description=_optional_text(node.get("description")),
    )


def _normalize_type(node_type: Any, path: str) -> str | None:
    if node_type is None:
        return None
    if isinstance(node_type, str):
        return node_type
    if isinstance(node_type, list):
        filtered = [value for value in node_type if isinstance(value, str) and value != "null"]
        if len(filtered) == 1:
            return filtered[0]
        raise MalformedSchemaError(
            f"Property {path} type list must name exactly one non-null type, got {node_type}."
        )
    raise MalformedSchemaError(f"Property {path} type must be a string or list of strings.")


def _parse_enum(value: Any, path: str) -> tuple[Any, ...]:
    if value is None:
        return ()
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise MalformedSchemaError(f"Property {path} enum must be a list of literals.")
    return tuple(value)


def _resolve_reference(
    ref_value: Any, path: str, definitions: Mapping[str, Any]
) -> tuple[str, Mapping[str, Any] | None]:
    if not isinstance(ref_value, str) or not ref_value:
        raise MalformedSchemaError(f"Property {path} $ref must be a non-empty string.")
    if not ref_value.startswith(_LOCAL_REFERENCE_PREFIX):
        # Cross-document references stay opaque.
        return ref_value.rsplit("/", 1)[-1].removesuffix(".json"), None
    name = ref_value[len(_LOCAL_REFERENCE_PREFIX) :]
    target = definitions.get(name)
    if not isinstance(target, Mapping):
        raise MalformedSchemaError(f"Property {path} references unknown definition '{name}'.")
    return name, target


def _optional_text(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    normalized = " ".join(value.replace("\r", "").split())
    return normalized or None
