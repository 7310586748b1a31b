"""Field record construction from schema declarations."""

from __future__ import annotations

from message_codegen.schema_management.schema_models import PropertyDeclaration

from .constraint_extractor import extract
from .constraint_models import DEFAULT_DECIMAL_POLICY, DecimalPolicy, FieldInfo
from .type_classifier import classify


def resolve_field(
    decl: PropertyDeclaration,
    *,
    is_optional: bool,
    policy: DecimalPolicy = DEFAULT_DECIMAL_POLICY,
) -> FieldInfo:
    """Extract and classify one declaration into a complete FieldInfo."""
    constraints = extract(decl)
    classification = classify(decl, policy)
    return FieldInfo(
        name=decl.name,
        path=decl.path,
        is_optional=is_optional,
        size=constraints.size,
        range=constraints.range,
        classification=classification,
    )
