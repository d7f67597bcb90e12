"""Deprecation directive handler."""

from __future__ import annotations

from typing import Any

from graphql import DEFAULT_DEPRECATION_REASON

from .schema_directive import SchemaDirective


class DeprecatedDirective(SchemaDirective):
    """Marks fields, input fields and enum values as deprecated."""

    def visit_field_definition(self, field: Any) -> None:
        field.deprecation_reason = self._reason()

    def visit_input_field_definition(self, field: Any) -> None:
        field.deprecation_reason = self._reason()

    def visit_enum_value(self, value: Any) -> None:
        value.deprecation_reason = self._reason()

    def _reason(self) -> str:
        reason = self.args.get("reason")
        return reason if isinstance(reason, str) else DEFAULT_DEPRECATION_REASON
