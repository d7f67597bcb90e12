"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from graphql import GraphQLError, build_schema, print_schema

from graphql_schema_extender.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from graphql_schema_extender.directive_dispatch import DirectiveDispatchError
from graphql_schema_extender.document_normalization import (
    DocumentMergeError,
    ExtensionSourceError,
)
from graphql_schema_extender.extension_run import ExtensionRequest, extend_schema


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="graphql-schema-extender")
def cli() -> None:
    """Apply directive handlers declared in extension SDL to a GraphQL schema."""


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML extension configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML extension configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="extend")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON extension configuration file",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional path for the extended schema SDL; printed to stdout when omitted",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log directive dispatch.")
def extend(config_path: str, output_path: str | None, verbose: bool) -> None:
    """Build the base schema, apply the extension directives and print the result."""
    if verbose:
        _enable_debug_logging()
    try:
        configuration = load_configuration(config_path)
        schema = build_schema(configuration.schema.text)
        extend_schema(
            ExtensionRequest(
                schema=schema,
                extensions=configuration.extension_texts,
                directives=configuration.directive_registry,
                parse_options=configuration.parse_options,
                context=configuration.context,
            )
        )
        printed = print_schema(schema)
        if output_path:
            Path(output_path).write_text(f"{printed}\n", encoding="utf-8")
    except (
        ConfigurationError,
        GraphQLError,
        DirectiveDispatchError,
        DocumentMergeError,
        ExtensionSourceError,
        OSError,
    ) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(Path(output_path).resolve()) if output_path else printed)


def _enable_debug_logging() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    # basicConfig is a no-op when the root logger already has handlers.
    logging.getLogger("graphql_schema_extender").setLevel(logging.DEBUG)


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
