"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from opensearch_mapping_builder.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    GenerationConfig,
    load_configuration,
    resolve_record_type,
    write_placeholder_configuration,
)
from opensearch_mapping_builder.schema_compilation import (
    SchemaCompilationError,
    SchemaCompiler,
    SchemaTree,
)
from opensearch_mapping_builder.schema_serialization import (
    IndexGenerationOptions,
    IndexGenerator,
    SchemaSerializationError,
)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="opensearch-mapping-builder")
@click.option("--verbose", is_flag=True, default=False, help="Log compilation details to stderr.")
def cli(verbose: bool) -> None:
    """Generate OpenSearch index mappings from Python dataclasses."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML generation configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML generation configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="generate-index")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON generation configuration file",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to write the index document to; printed to stdout when omitted",
)
@click.option(
    "--strict/--no-strict",
    "strict_mapping",
    default=None,
    help="Override index.strict_mapping from the configuration.",
)
def generate_index(config_path: str, output_path: str | None, strict_mapping: bool | None) -> None:
    """Generate the create-index document (mappings and settings)."""
    try:
        configuration = load_configuration(config_path)
        tree = _compile_configured_record(configuration)
        strict = configuration.index.strict_mapping if strict_mapping is None else strict_mapping
        document = IndexGenerator().generate_index_json(
            tree,
            configuration.index.settings,
            IndexGenerationOptions(strict_mapping=strict),
        )
        _emit(document, output_path)
    except (ConfigurationError, SchemaCompilationError, SchemaSerializationError, OSError) as exc:
        raise CliError(str(exc)) from exc


@cli.command(name="generate-mapping")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON generation configuration file",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to write the mapping document to; printed to stdout when omitted",
)
def generate_mapping(config_path: str, output_path: str | None) -> None:
    """Generate the put-mapping document for updating an existing index."""
    try:
        configuration = load_configuration(config_path)
        tree = _compile_configured_record(configuration)
        document = IndexGenerator().generate_mapping_update_json(tree)
        _emit(document, output_path)
    except (ConfigurationError, SchemaCompilationError, SchemaSerializationError, OSError) as exc:
        raise CliError(str(exc)) from exc


def _compile_configured_record(configuration: GenerationConfig) -> SchemaTree:
    record_type = resolve_record_type(configuration.record, configuration.path.parent)
    compiler = SchemaCompiler(
        max_depth=configuration.compiler.max_depth,
        omit_unsupported_types=configuration.compiler.omit_unsupported_types,
    )
    return compiler.compile(record_type)


def _emit(document: bytes, output_path: str | None) -> None:
    if output_path is None:
        click.echo(document.decode("utf-8"))
        return
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(document + b"\n")
    click.echo(str(output.resolve()))


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
