"""Field records handed to the rendering stage."""

from __future__ import annotations

from dataclasses import dataclass

from message_codegen.constraint_resolution.constraint_extractor import ConstraintError
from message_codegen.constraint_resolution.constraint_models import (
    DEFAULT_DECIMAL_POLICY,
    DecimalPolicy,
    FieldInfo,
)
from message_codegen.constraint_resolution.field_resolution import resolve_field
from message_codegen.schema_management.schema_models import PropertyDeclaration, SchemaDocument

from .directive_models import ValidationDirective
from .directive_synthesizer import synthesize


@dataclass(frozen=True)
class FieldRecord:
    """Normalized field with its synthesized directives and source declaration."""

    info: FieldInfo
    directives: tuple[ValidationDirective, ...]
    declaration: PropertyDeclaration


@dataclass(frozen=True)
class FieldIssue:
    """A field skipped because its constraints could not be resolved."""

    document_title: str
    field_path: str
    message: str


@dataclass(frozen=True)
class DocumentResolution:
    """Field records of one document plus the fields that had to be skipped."""

    title: str
    records: tuple[FieldRecord, ...]
    issues: tuple[FieldIssue, ...]


def emit_field_records(
    document: SchemaDocument, policy: DecimalPolicy = DEFAULT_DECIMAL_POLICY
) -> DocumentResolution:
    """Resolve every field of a document in declaration order.

    A field whose constraints fail to resolve is reported as an issue and left
    out of the records; the remaining fields are still resolved.
    """
    records: list[FieldRecord] = []
    issues: list[FieldIssue] = []
    for name, decl in document.properties.items():
        try:
            info = resolve_field(decl, is_optional=not document.is_required(name), policy=policy)
        except ConstraintError as exc:
            issues.append(
                FieldIssue(
                    document_title=document.title,
                    field_path=exc.field_path,
                    message=str(exc),
                )
            )
            continue
        records.append(FieldRecord(info=info, directives=synthesize(info), declaration=decl))
    return DocumentResolution(title=document.title, records=tuple(records), issues=tuple(issues))
