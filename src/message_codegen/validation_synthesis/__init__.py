"""Validation synthesis exports."""

from .directive_formatting import format_directive
from .directive_models import LengthDirective, NestedDirective, RangeDirective, ValidationDirective
from .directive_synthesizer import synthesize
from .field_records import DocumentResolution, FieldIssue, FieldRecord, emit_field_records

__all__ = [
    "DocumentResolution",
    "FieldIssue",
    "FieldRecord",
    "LengthDirective",
    "NestedDirective",
    "RangeDirective",
    "ValidationDirective",
    "emit_field_records",
    "format_directive",
    "synthesize",
]
