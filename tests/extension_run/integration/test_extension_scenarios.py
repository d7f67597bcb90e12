"""End-to-end schema extension scenarios."""

from __future__ import annotations

from typing import Any

import pytest
from graphql import DocumentNode, ScalarTypeDefinitionNode, build_schema, print_schema
from graphql_schema_extender.directive_dispatch import (
    UnknownDirectiveError,
    UnresolvableNameError,
)
from graphql_schema_extender.directive_handlers import DeprecatedDirective, SchemaDirective
from graphql_schema_extender.extension_run import ExtensionRequest, extend_schema

_BASE_SDL = """
type Query {
  widgets: [Widget]
}

type Widget {
  name: String
  size: Int
  color: Color
}

enum Color {
  RED
  GREEN
}
"""


class ArgumentProbe(SchemaDirective):
    """Stores the coerced arguments on the context for inspection."""

    def visit_field_definition(self, field: Any) -> None:
        self.context.append(dict(self.args))


def test_deprecating_a_field_through_a_type_extension() -> None:
    schema = build_schema(_BASE_SDL)

    extend_schema(
        ExtensionRequest(
            schema=schema,
            extensions='extend type Widget { name: String @deprecated(reason: "x") }',
            directives={"deprecated": DeprecatedDirective},
        )
    )

    field = schema.get_type("Widget").fields["name"]
    assert len(field.extensions["directives"]) == 1
    assert isinstance(field.extensions["directives"][0], DeprecatedDirective)
    assert field.deprecation_reason == "x"
    assert 'name: String @deprecated(reason: "x")' in print_schema(schema)


def test_merged_documents_accumulate_directives_in_declaration_order() -> None:
    schema = build_schema(_BASE_SDL)
    seen: list[dict] = []

    extend_schema(
        ExtensionRequest(
            schema=schema,
            extensions=[
                "type Widget { size: Int @probe(order: 1) }",
                "type Widget { size: Int @probe(order: 2) @probe(order: 3) }",
            ],
            directives={"probe": ArgumentProbe},
            context=seen,
        )
    )

    handlers = schema.get_type("Widget").fields["size"].extensions["directives"]
    assert [handler.args["order"] for handler in handlers] == [1, 2, 3]
    assert seen == [{"order": 1}, {"order": 2}, {"order": 3}]


def test_argument_coercion_keeps_boolean_text() -> None:
    seen: list[dict] = []

    extend_schema(
        ExtensionRequest(
            schema=build_schema(_BASE_SDL),
            extensions=(
                'type Widget { size: Int @probe(max: 42, ratio: 3.5, unit: "cm", on: true) }'
            ),
            directives={"probe": ArgumentProbe},
            context=seen,
        )
    )

    assert seen == [{"max": 42, "ratio": 3.5, "unit": "cm", "on": "true"}]


def test_annotation_counts_match_per_element() -> None:
    schema = build_schema(_BASE_SDL)

    extend_schema(
        ExtensionRequest(
            schema=schema,
            extensions="""
            directive @probe(order: Int) on FIELD_DEFINITION | OBJECT | ENUM_VALUE
            type Widget @probe @probe { name: String @probe size: Int color: Color @probe }
            enum Color { RED @probe @probe @probe }
            """,
            directives={"probe": ArgumentProbe},
            context=[],
        )
    )

    widget = schema.get_type("Widget")
    assert len(widget.extensions["directives"]) == 2
    assert len(widget.fields["name"].extensions["directives"]) == 1
    assert "directives" not in (widget.fields["size"].extensions or {})
    assert len(widget.fields["color"].extensions["directives"]) == 1
    assert len(schema.get_type("Color").values["RED"].extensions["directives"]) == 3


def test_unknown_directive_fails_the_whole_extension() -> None:
    schema = build_schema(_BASE_SDL)

    with pytest.raises(UnknownDirectiveError, match='No directive named "audited" found!'):
        extend_schema(
            ExtensionRequest(
                schema=schema,
                extensions="type Widget { name: String @deprecated size: Int @audited }",
                directives={"deprecated": DeprecatedDirective},
            )
        )

    # Mutations made before the failure are kept.
    assert schema.get_type("Widget").fields["name"].deprecation_reason is not None


def test_missing_name_in_pre_parsed_document_fails() -> None:
    with pytest.raises(UnresolvableNameError):
        extend_schema(
            ExtensionRequest(
                schema=build_schema(_BASE_SDL),
                extensions=DocumentNode(definitions=[ScalarTypeDefinitionNode(name=None)]),
                directives={},
            )
        )
