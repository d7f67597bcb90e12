"""Directive handler exports."""

from .deprecation import DeprecatedDirective
from .schema_directive import SchemaDirective

__all__ = ["DeprecatedDirective", "SchemaDirective"]
