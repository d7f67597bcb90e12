"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "extender.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Schema extension configuration for graphql-schema-extender.
# Replace every <REQUIRED> placeholder before running extend.
# Replace <OPTIONAL> placeholders only when your setup needs them.
# Relative paths are resolved against the directory of this file.

schema:
  # Provide either inline base schema SDL or a base schema path.
  path: "<REQUIRED>"
  # inline: "<OPTIONAL>"

extensions:
  # Extension documents are merged in order; repeated type names are combined.
  - path: "<REQUIRED>"
  # - inline: "<OPTIONAL>"

directives:
  # Directive name mapped to a handler in 'package.module:Attribute' form.
  deprecated: "graphql_schema_extender.directive_handlers:DeprecatedDirective"

parse_options:
  no_location: "<OPTIONAL>"
  max_tokens: "<OPTIONAL>"
  allow_legacy_fragment_variables: "<OPTIONAL>"

# Passed unchanged to every directive handler.
context: {}
"""


def build_placeholder_configuration() -> str:
    """Build a YAML extension configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
