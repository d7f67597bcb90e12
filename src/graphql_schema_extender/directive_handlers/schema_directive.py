"""Base class for directive handlers."""

from __future__ import annotations

from typing import Any


class SchemaDirective:
    """Holds the construction arguments every directive handler receives.

    Subclasses opt into a node kind by defining the matching visitor method,
    for example ``visit_field_definition(self, field)``. Missing visitors are
    skipped by the walker.
    """

    def __init__(self, *, args: dict[str, Any], schema: Any, context: Any, name: str) -> None:
        self.args = args
        self.schema = schema
        self.context = context
        self.name = name

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, args={self.args!r})"
