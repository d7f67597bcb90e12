"""Schema navigation exports."""

from .navigator import GraphQLSchemaNavigator, SchemaNavigator

__all__ = ["GraphQLSchemaNavigator", "SchemaNavigator"]
