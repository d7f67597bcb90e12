"""Schema extension entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from graphql_schema_extender.directive_dispatch import DirectiveRegistry
from graphql_schema_extender.document_normalization import ExtensionSource
from graphql_schema_extender.schema_navigation import SchemaNavigator


@dataclass(frozen=True)
class ExtensionRequest:
    """Input contract for extending one live schema."""

    schema: Any
    extensions: ExtensionSource
    directives: DirectiveRegistry
    parse_options: Mapping[str, Any] | None = None
    context: Any = None
    navigator: SchemaNavigator | None = None
