"""Command line interface entry point."""

from __future__ import annotations

import dataclasses
import logging
import sys
from pathlib import Path

import click

from message_codegen.catalogue_processing import (
    CatalogueError,
    CatalogueStats,
    GenerationReport,
    catalogue_stats,
    collect_message_pairs,
    generate_catalogue,
)
from message_codegen.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    GeneratorSettings,
    default_settings,
    load_settings,
    write_placeholder_settings,
)
from message_codegen.schema_management import MalformedSchemaError, load_schema_document
from message_codegen.validation_synthesis import emit_field_records, format_directive

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


class CliError(Exception):
    """Custom CLI error."""


def _resolve_settings(
    config_path: str | None,
    schema_dir: str | None,
    output_dir: str | None,
    **flags: bool | None,
) -> GeneratorSettings:
    try:
        settings = load_settings(config_path) if config_path else default_settings()
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc

    overrides: dict[str, object] = {
        name: value for name, value in flags.items() if value is not None
    }
    if schema_dir:
        overrides["schema_dir"] = Path(schema_dir).resolve()
    if output_dir:
        overrides["output_dir"] = Path(output_dir).resolve()
    return dataclasses.replace(settings, **overrides)


def _settings_options(command):
    command = click.option(
        "--schema-dir",
        "schema_dir",
        required=False,
        type=click.Path(path_type=str),
        help="Directory searched recursively for message schemas",
    )(command)
    return click.option(
        "--config",
        "config_path",
        required=False,
        type=click.Path(path_type=str),
        help="Path to the YAML generator configuration file",
    )(command)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="message-codegen")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log every generated file.")
def cli(verbose: bool) -> None:
    """Schema-driven message struct generator."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING, format=_LOG_FORMAT, force=True
    )


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML generator configuration to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML generator configuration with default values and guidance comments."""
    try:
        resolved_output = write_placeholder_settings(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="generate")
@_settings_options
@click.option(
    "--output-dir",
    "output_dir",
    required=False,
    type=click.Path(path_type=str),
    help="Directory receiving generated Rust modules",
)
@click.option(
    "--mod-file/--no-mod-file",
    "generate_mod_file",
    default=None,
    help="Write mod.rs declaring every generated module",
)
@click.option(
    "--stats/--no-stats",
    "show_statistics",
    default=None,
    help="Print pair statistics before generating",
)
def generate(
    config_path: str | None,
    schema_dir: str | None,
    output_dir: str | None,
    generate_mod_file: bool | None,
    show_statistics: bool | None,
) -> None:
    """Generate Rust message modules for every complete Request/Response pair."""
    settings = _resolve_settings(
        config_path,
        schema_dir,
        output_dir,
        generate_mod_file=generate_mod_file,
        show_statistics=show_statistics,
    )
    try:
        scan = collect_message_pairs(settings.schema_dir, settings.decimal_policy)
        if settings.show_statistics:
            _echo_stats(catalogue_stats(scan))
        report = generate_catalogue(settings, scan)
    except CatalogueError as exc:
        raise CliError(str(exc)) from exc
    _echo_report(report)
    if report.has_problems:
        raise CliError(
            f"Completed with {len(report.failures)} skipped schema(s) "
            f"and {len(report.issues)} skipped field(s)."
        )


@cli.command(name="stats")
@_settings_options
def stats(config_path: str | None, schema_dir: str | None) -> None:
    """Print Request/Response pair statistics for the schema directory."""
    settings = _resolve_settings(config_path, schema_dir, None)
    try:
        scan = collect_message_pairs(settings.schema_dir, settings.decimal_policy)
    except CatalogueError as exc:
        raise CliError(str(exc)) from exc
    _echo_stats(catalogue_stats(scan))


@cli.command(name="inspect")
@click.argument("schema_file", type=click.Path(path_type=str))
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to the YAML generator configuration file",
)
def inspect_schema(schema_file: str, config_path: str | None) -> None:
    """Print the validation directives synthesized for each field of one schema."""
    settings = _resolve_settings(config_path, None, None)
    try:
        document = load_schema_document(schema_file)
    except (MalformedSchemaError, OSError) as exc:
        raise CliError(str(exc)) from exc

    resolution = emit_field_records(document, settings.decimal_policy)
    for record in resolution.records:
        directives = ", ".join(format_directive(item) for item in record.directives) or "-"
        marker = " (optional)" if record.info.is_optional else ""
        click.echo(f"{record.info.name}{marker}: {directives}")
    if resolution.issues:
        raise CliError("\n".join(issue.message for issue in resolution.issues))


def _echo_stats(counts: CatalogueStats) -> None:
    click.echo("Schema processing statistics:")
    click.echo(f"  Total message pairs: {counts.total_pairs}")
    click.echo(f"  Complete pairs: {counts.complete_pairs}")
    click.echo(f"  Incomplete pairs: {counts.incomplete_pairs}")


def _echo_report(report: GenerationReport) -> None:
    click.echo(f"Generated {len(report.generated)} message pairs in {report.output_dir}")
    if report.mod_file is not None:
        click.echo(f"Module index: {report.mod_file}")
    for base_name in report.incomplete:
        click.echo(f"Incomplete pair skipped: {base_name}", err=True)
    for failure in report.failures:
        click.echo(f"Schema skipped: {failure.path}: {failure.message}", err=True)
    for issue in report.issues:
        click.echo(f"Field skipped: {issue.message}", err=True)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
