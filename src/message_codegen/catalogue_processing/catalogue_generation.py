"""Catalogue discovery, pairing and generation service."""

from __future__ import annotations

import logging
from pathlib import Path

from message_codegen.configuration.runtime_settings import GeneratorSettings
from message_codegen.constraint_resolution.constraint_models import (
    DEFAULT_DECIMAL_POLICY,
    DecimalPolicy,
)
from message_codegen.rust_rendering import (
    render_message_module,
    render_mod_index,
    render_struct,
    snake_case,
)
from message_codegen.schema_management import MalformedSchemaError, load_schema_document
from message_codegen.validation_synthesis.field_records import emit_field_records

from .catalogue_models import (
    CatalogueScan,
    CatalogueStats,
    DocumentFailure,
    GenerationReport,
    MessagePair,
)

logger = logging.getLogger(__name__)

_REQUEST_SUFFIX = "Request"
_RESPONSE_SUFFIX = "Response"
MOD_FILENAME = "mod.rs"


class CatalogueError(Exception):
    """Raised when a catalogue run cannot read its input or write its output."""


def split_message_name(stem: str) -> tuple[str, bool] | None:
    """Return the base message name and whether the file is the request half.

    Returns ``None`` for names without a Request/Response suffix, which cannot
    form a pair.
    """
    if stem.endswith(_REQUEST_SUFFIX) and stem != _REQUEST_SUFFIX:
        return stem.removesuffix(_REQUEST_SUFFIX), True
    if stem.endswith(_RESPONSE_SUFFIX) and stem != _RESPONSE_SUFFIX:
        return stem.removesuffix(_RESPONSE_SUFFIX), False
    return None


def discover_schema_files(schema_dir: Path) -> list[Path]:
    """Return every ``*.json`` file below ``schema_dir`` in a stable order."""
    if not schema_dir.is_dir():
        raise CatalogueError(f"Schema directory does not exist: {schema_dir}")
    return sorted(path for path in schema_dir.rglob("*.json") if path.is_file())


def collect_message_pairs(
    schema_dir: Path, policy: DecimalPolicy = DEFAULT_DECIMAL_POLICY
) -> CatalogueScan:
    """Parse and resolve every schema file, grouping documents by base message name."""
    pairs: dict[str, MessagePair] = {}
    sources: dict[tuple[str, bool], Path] = {}
    failures: list[DocumentFailure] = []

    def _skip(path: Path, message: str) -> None:
        logger.warning("Skipping schema %s: %s", path, message)
        failures.append(DocumentFailure(path=path, message=message))

    for path in discover_schema_files(schema_dir):
        name_parts = split_message_name(path.stem)
        if name_parts is None:
            _skip(path, "File name must end with Request or Response.")
            continue
        base_name, is_request = name_parts
        first_path = sources.setdefault((base_name, is_request), path)
        if first_path != path:
            _skip(path, f"Duplicate message schema; already read from {first_path}.")
            continue

        try:
            document = load_schema_document(path)
        except (MalformedSchemaError, OSError, UnicodeDecodeError) as exc:
            _skip(path, str(exc))
            continue

        resolution = emit_field_records(document, policy)
        for issue in resolution.issues:
            logger.warning("Skipping field in %s: %s", resolution.title, issue.message)

        pair = pairs.setdefault(base_name, MessagePair(base_name=base_name))
        if is_request:
            pair.request = resolution
        else:
            pair.response = resolution
    return CatalogueScan(
        pairs=tuple(pairs[name] for name in sorted(pairs)), failures=tuple(failures)
    )


def catalogue_stats(scan: CatalogueScan) -> CatalogueStats:
    """Count complete and incomplete message pairs."""
    complete = sum(1 for pair in scan.pairs if pair.is_complete)
    return CatalogueStats(
        total_pairs=len(scan.pairs),
        complete_pairs=complete,
        incomplete_pairs=len(scan.pairs) - complete,
    )


def generate_catalogue(
    settings: GeneratorSettings, scan: CatalogueScan | None = None
) -> GenerationReport:
    """Write one Rust module per complete message pair, plus ``mod.rs`` when enabled."""
    policy = settings.decimal_policy
    resolved_scan = (
        scan if scan is not None else collect_message_pairs(settings.schema_dir, policy)
    )
    try:
        settings.output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise CatalogueError(f"Cannot create {settings.output_dir}: {exc}") from exc

    generated: list[str] = []
    incomplete: list[str] = []
    for pair in resolved_scan.pairs:
        if not pair.is_complete:
            logger.warning("Incomplete message pair for %s; skipping", pair.base_name)
            incomplete.append(pair.base_name)
            continue
        destination = settings.output_dir / f"{snake_case(pair.base_name)}.rs"
        _write_text(destination, _render_pair(pair, settings, policy))
        logger.info("Generated %s", destination)
        generated.append(pair.base_name)

    mod_file = None
    if settings.generate_mod_file:
        mod_file = settings.output_dir / MOD_FILENAME
        _write_text(mod_file, render_mod_index(generated))
        logger.info("Generated %s", mod_file)

    return GenerationReport(
        output_dir=settings.output_dir,
        generated=tuple(generated),
        incomplete=tuple(incomplete),
        failures=resolved_scan.failures,
        issues=tuple(issue for pair in resolved_scan.pairs for issue in pair.issues),
        mod_file=mod_file,
    )


def _render_pair(pair: MessagePair, settings: GeneratorSettings, policy: DecimalPolicy) -> str:
    structs = [
        render_struct(
            resolution,
            message_name=pair.base_name,
            role=role,
            modules=settings.modules,
            policy=policy,
        )
        for role, resolution in (("request", pair.request), ("response", pair.response))
        if resolution is not None
    ]
    return render_message_module(structs)


def _write_text(destination: Path, text: str) -> None:
    try:
        destination.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise CatalogueError(f"Cannot write {destination}: {exc}") from exc
