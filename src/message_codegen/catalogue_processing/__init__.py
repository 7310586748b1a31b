"""Catalogue processing exports."""

from .catalogue_generation import (
    MOD_FILENAME,
    CatalogueError,
    catalogue_stats,
    collect_message_pairs,
    discover_schema_files,
    generate_catalogue,
    split_message_name,
)
from .catalogue_models import (
    CatalogueScan,
    CatalogueStats,
    DocumentFailure,
    GenerationReport,
    MessagePair,
)

__all__ = [
    "MOD_FILENAME",
    "CatalogueError",
    "CatalogueScan",
    "CatalogueStats",
    "DocumentFailure",
    "GenerationReport",
    "MessagePair",
    "catalogue_stats",
    "collect_message_pairs",
    "discover_schema_files",
    "generate_catalogue",
    "split_message_name",
]
