"""Schema management exports."""

from .schema_models import CONSTRAINT_KEYWORDS, PropertyDeclaration, SchemaDocument
from .schema_parsing import MalformedSchemaError, load_schema_document, parse

__all__ = [
    "CONSTRAINT_KEYWORDS",
    "PropertyDeclaration",
    "SchemaDocument",
    "MalformedSchemaError",
    "load_schema_document",
    "parse",
]
