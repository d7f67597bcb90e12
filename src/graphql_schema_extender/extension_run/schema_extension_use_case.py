"""Schema extension use-case service."""

from __future__ import annotations

import logging

from graphql_schema_extender.directive_dispatch import walk_extensions
from graphql_schema_extender.document_normalization import normalize_extensions
from graphql_schema_extender.schema_navigation import GraphQLSchemaNavigator

from .run_contracts import ExtensionRequest

LOGGER = logging.getLogger(__name__)


def extend_schema(request: ExtensionRequest) -> None:
    """Apply the directives declared in the extension documents to the live schema.

    Errors propagate unchanged. Mutations made before a failure are kept, so a
    schema that failed to extend should be discarded.
    """
    document = normalize_extensions(request.extensions, parse_options=request.parse_options)
    LOGGER.debug("Walking %d extension definitions", len(document.definitions or ()))
    walk_extensions(
        document,
        schema=request.schema,
        registry=request.directives,
        navigator=request.navigator or GraphQLSchemaNavigator(),
        context=request.context,
    )
    LOGGER.debug("Schema extension completed")
