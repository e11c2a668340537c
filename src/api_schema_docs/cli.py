"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any

import click

from api_schema_docs.catalog_export import export_catalog_workbook
from api_schema_docs.configuration import (
    DEFAULT_CONFIG_FILENAME,
    Configuration,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from api_schema_docs.operation_overview import DocumentOverview, create_overview_builder
from api_schema_docs.schema_graph import SpecificationError, load_specification
from api_schema_docs.type_projection import markdown_cross_reference, plain_cross_reference


class CliError(Exception):
    """Custom CLI error."""


_SPEC_OPTION = click.option(
    "--spec",
    "spec_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the Swagger 2.0 specification (YAML or JSON)",
)
_CONFIG_OPTION = click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional path to the YAML configuration file",
)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="api-schema-docs")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Schema type signatures and example payloads for API documentation."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML configuration with the default settings and guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="examples")
@_SPEC_OPTION
@_CONFIG_OPTION
def examples(spec_path: str, config_path: str | None) -> None:
    """Print request and response examples of every operation as JSON."""
    document = _build_document(spec_path, config_path)
    payload = [
        {
            "method": operation.method,
            "path": operation.path,
            "request": operation.request_example,
            "responses": operation.response_examples,
        }
        for operation in document.operations
    ]
    click.echo(_to_json(payload))


@cli.command(name="types")
@_SPEC_OPTION
@_CONFIG_OPTION
@click.option(
    "--links/--no-links",
    default=True,
    show_default=True,
    help="Render references as Markdown links",
)
def types(spec_path: str, config_path: str | None, links: bool) -> None:
    """Print type signatures of definitions and operation parameters as JSON."""
    document = _build_document(spec_path, config_path, links=links)
    payload = {
        "definitions": [
            {
                "name": definition.name,
                "type": definition.type_signature,
                "properties": {row.name: row.type_signature for row in definition.properties},
            }
            for definition in document.definitions
        ],
        "operations": [
            {
                "method": operation.method,
                "path": operation.path,
                "parameters": [
                    {"name": row.name, "in": row.location, "type": row.type_signature}
                    for row in operation.parameters
                ],
                "responses": {row.status: row.type_signature for row in operation.responses},
            }
            for operation in document.operations
        ],
    }
    click.echo(_to_json(payload))


@cli.command(name="export-catalog")
@_SPEC_OPTION
@_CONFIG_OPTION
@click.option(
    "--output",
    "output_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the catalog workbook to write",
)
def export_catalog(spec_path: str, config_path: str | None, output_path: str) -> None:
    """Write definitions and operation examples into an Excel workbook."""
    document = _build_document(spec_path, config_path)
    try:
        written = export_catalog_workbook(document, output_path)
    except OSError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(written))


def _build_document(
    spec_path: str, config_path: str | None, *, links: bool = False
) -> DocumentOverview:
    try:
        configuration: Configuration = load_configuration(config_path)
        specification = load_specification(spec_path)
    except (ConfigurationError, SpecificationError) as exc:
        raise CliError(str(exc)) from exc
    builder = create_overview_builder(
        specification.graph,
        configuration,
        cross_reference=markdown_cross_reference if links else plain_cross_reference,
    )
    return builder.document_overview(specification, configuration.ordering.definitions)


def _to_json(payload: Any) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False, default=str)


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
