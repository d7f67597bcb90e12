"""Dispatch rules per extension node kind."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from graphql.language import Node

from .dispatch_errors import UnexpectedNodeKindError


class ExtensionNodeKind(str, Enum):
    """Node kinds the walker knows how to dispatch."""

    DOCUMENT = "document"
    OBJECT_TYPE_DEFINITION = "object_type_definition"
    FIELD_DEFINITION = "field_definition"
    SCALAR_TYPE_DEFINITION = "scalar_type_definition"
    INTERFACE_TYPE_DEFINITION = "interface_type_definition"
    INPUT_OBJECT_TYPE_DEFINITION = "input_object_type_definition"
    INPUT_VALUE_DEFINITION = "input_value_definition"
    UNION_TYPE_DEFINITION = "union_type_definition"
    ENUM_TYPE_DEFINITION = "enum_type_definition"
    ENUM_VALUE_DEFINITION = "enum_value_definition"
    DIRECTIVE_DEFINITION = "directive_definition"
    OBJECT_TYPE_EXTENSION = "object_type_extension"
    SCALAR_TYPE_EXTENSION = "scalar_type_extension"
    INTERFACE_TYPE_EXTENSION = "interface_type_extension"
    INPUT_OBJECT_TYPE_EXTENSION = "input_object_type_extension"
    UNION_TYPE_EXTENSION = "union_type_extension"
    ENUM_TYPE_EXTENSION = "enum_type_extension"


class ChildLookup(str, Enum):
    """How a child node finds its counterpart on the parent element."""

    TYPE = "type"
    FIELD = "field"
    VALUE = "value"


@dataclass(frozen=True)
class NodeRule:
    """Visitor name and child traversal for one node kind.

    A rule without a visitor name is inert: the node is neither resolved nor visited.
    """

    visitor_name: str | None
    children_attribute: str | None = None
    child_lookup: ChildLookup | None = None

    @property
    def is_inert(self) -> bool:
        return self.visitor_name is None


_OBJECT_RULE = NodeRule("visit_object", "fields", ChildLookup.FIELD)
_SCALAR_RULE = NodeRule("visit_scalar")
_INTERFACE_RULE = NodeRule("visit_interface", "fields", ChildLookup.FIELD)
_INPUT_OBJECT_RULE = NodeRule("visit_input_object", "fields", ChildLookup.FIELD)
_UNION_RULE = NodeRule("visit_union")
_ENUM_RULE = NodeRule("visit_enum", "values", ChildLookup.VALUE)

NODE_RULES: Mapping[ExtensionNodeKind, NodeRule] = {
    ExtensionNodeKind.DOCUMENT: NodeRule("visit_schema", "definitions", ChildLookup.TYPE),
    ExtensionNodeKind.OBJECT_TYPE_DEFINITION: _OBJECT_RULE,
    ExtensionNodeKind.FIELD_DEFINITION: NodeRule("visit_field_definition"),
    ExtensionNodeKind.SCALAR_TYPE_DEFINITION: _SCALAR_RULE,
    ExtensionNodeKind.INTERFACE_TYPE_DEFINITION: _INTERFACE_RULE,
    ExtensionNodeKind.INPUT_OBJECT_TYPE_DEFINITION: _INPUT_OBJECT_RULE,
    ExtensionNodeKind.INPUT_VALUE_DEFINITION: NodeRule("visit_input_field_definition"),
    ExtensionNodeKind.UNION_TYPE_DEFINITION: _UNION_RULE,
    ExtensionNodeKind.ENUM_TYPE_DEFINITION: _ENUM_RULE,
    ExtensionNodeKind.ENUM_VALUE_DEFINITION: NodeRule("visit_enum_value"),
    ExtensionNodeKind.DIRECTIVE_DEFINITION: NodeRule(None),
    # `extend ...` declarations target the same live elements as definitions.
    ExtensionNodeKind.OBJECT_TYPE_EXTENSION: _OBJECT_RULE,
    ExtensionNodeKind.SCALAR_TYPE_EXTENSION: _SCALAR_RULE,
    ExtensionNodeKind.INTERFACE_TYPE_EXTENSION: _INTERFACE_RULE,
    ExtensionNodeKind.INPUT_OBJECT_TYPE_EXTENSION: _INPUT_OBJECT_RULE,
    ExtensionNodeKind.UNION_TYPE_EXTENSION: _UNION_RULE,
    ExtensionNodeKind.ENUM_TYPE_EXTENSION: _ENUM_RULE,
}


def rule_for(node: Node) -> NodeRule:
    """Return the dispatch rule for a node, rejecting kinds outside the table."""
    kind = getattr(node, "kind", None)
    try:
        return NODE_RULES[ExtensionNodeKind(kind)]
    except ValueError as exc:
        raise UnexpectedNodeKindError(f'Unexpected node "{kind}"') from exc
