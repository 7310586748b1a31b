"""Catalogue processing entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from message_codegen.validation_synthesis.field_records import DocumentResolution, FieldIssue


@dataclass(frozen=True)
class DocumentFailure:
    """A schema file that could not be parsed."""

    path: Path
    message: str


@dataclass
class MessagePair:
    """Request and response documents sharing one base message name."""

    base_name: str
    request: DocumentResolution | None = None
    response: DocumentResolution | None = None

    @property
    def is_complete(self) -> bool:
        """Return True when both halves of the pair are present."""
        return self.request is not None and self.response is not None

    @property
    def issues(self) -> tuple[FieldIssue, ...]:
        """Return the field issues of both halves."""
        return tuple(
            issue
            for resolution in (self.request, self.response)
            if resolution is not None
            for issue in resolution.issues
        )


@dataclass(frozen=True)
class CatalogueScan:
    """Message pairs grouped from a schema directory plus unreadable files."""

    pairs: tuple[MessagePair, ...]
    failures: tuple[DocumentFailure, ...]


@dataclass(frozen=True)
class CatalogueStats:
    """Pair counts for one schema directory."""

    total_pairs: int
    complete_pairs: int
    incomplete_pairs: int


@dataclass(frozen=True)
class GenerationReport:
    """Outcome of one catalogue generation run."""

    output_dir: Path
    generated: tuple[str, ...]
    incomplete: tuple[str, ...]
    failures: tuple[DocumentFailure, ...]
    issues: tuple[FieldIssue, ...]
    mod_file: Path | None = None

    @property
    def has_problems(self) -> bool:
        """Return True when any document or field had to be skipped."""
        return bool(self.failures or self.issues)
