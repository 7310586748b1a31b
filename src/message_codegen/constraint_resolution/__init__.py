"""Constraint resolution exports."""

from .constraint_extractor import (
    ConstraintError,
    ConstraintTypeMismatchError,
    InvalidConstraintError,
    extract,
)
from .constraint_models import (
    DEFAULT_DECIMAL_POLICY,
    ClassificationKind,
    DecimalPolicy,
    ExtractedConstraints,
    FieldCategory,
    FieldInfo,
    RangeConstraint,
    SizeConstraint,
    SizeSource,
    TypeClassification,
)
from .field_resolution import resolve_field
from .type_classifier import classify

__all__ = [
    "ClassificationKind",
    "ConstraintError",
    "ConstraintTypeMismatchError",
    "DEFAULT_DECIMAL_POLICY",
    "DecimalPolicy",
    "ExtractedConstraints",
    "FieldCategory",
    "FieldInfo",
    "InvalidConstraintError",
    "RangeConstraint",
    "SizeConstraint",
    "SizeSource",
    "TypeClassification",
    "classify",
    "extract",
    "resolve_field",
]
