"""Name-based navigation over a live schema."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

DIRECTIVES_EXTENSION_KEY = "directives"


class SchemaNavigator(Protocol):
    """Lookup contract the walker needs from a live schema."""

    def resolve_type(self, schema: Any, name: str) -> Any | None:
        """Return the named type of the schema root, or None."""

    def resolve_field(self, element: Any, name: str) -> Any | None:
        """Return the named field of a composite element, or None."""

    def resolve_value(self, element: Any, name: str) -> Any | None:
        """Return the named enum value of an enum element, or None."""

    def directives_of(self, element: Any) -> list[Any]:
        """Return the mutable directive collection of an element, creating it if absent."""


class GraphQLSchemaNavigator:
    """Navigator for graphql-core schemas.

    Handler instances are kept in ``element.extensions["directives"]`` because
    ``GraphQLSchema.directives`` already holds directive definitions.
    """

    def resolve_type(self, schema: Any, name: str) -> Any | None:
        return schema.get_type(name)

    def resolve_field(self, element: Any, name: str) -> Any | None:
        return _lookup_member(element, "fields", name)

    def resolve_value(self, element: Any, name: str) -> Any | None:
        return _lookup_member(element, "values", name)

    def directives_of(self, element: Any) -> list[Any]:
        extensions = element.extensions
        if extensions is None:
            extensions = {}
            element.extensions = extensions
        collection = extensions.get(DIRECTIVES_EXTENSION_KEY)
        if not isinstance(collection, list):
            collection = []
            extensions[DIRECTIVES_EXTENSION_KEY] = collection
        return collection


def _lookup_member(element: Any, attribute: str, name: str) -> Any | None:
    members = getattr(element, attribute, None)
    if not isinstance(members, Mapping):
        return None
    return members.get(name)
