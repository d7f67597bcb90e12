"""Read names and directive arguments from extension nodes."""

from __future__ import annotations

from typing import Any

from graphql import DirectiveNode, print_ast
from graphql.language import Node

from .dispatch_errors import MalformedArgumentError, UnresolvableNameError

_ARGUMENT_KIND = "argument"
_NAME_KIND = "name"


def name_of(node: Node | None) -> str:
    """Return the identifier carried by a node's name sub-node."""
    name_node = getattr(node, "name", None)
    if name_node is None or getattr(name_node, "kind", None) != _NAME_KIND:
        raise UnresolvableNameError("Unable to determine name")
    value = getattr(name_node, "value", None)
    if not isinstance(value, str) or not value:
        raise UnresolvableNameError("Unable to determine name")
    return value


def coerce_argument_value(value_node: Node) -> Any:
    """Convert an argument literal to a native value.

    Int and float literals are parsed. String literals keep their payload and
    boolean literals keep their source text (``"true"``/``"false"``).
    """
    kind = value_node.kind
    if kind == "int_value":
        return int(value_node.value)
    if kind == "float_value":
        return float(value_node.value)
    if kind == "boolean_value":
        return print_ast(value_node)
    return getattr(value_node, "value", None)


def read_arguments(directive: DirectiveNode) -> dict[str, Any]:
    """Map argument names to coerced values in declaration order; last duplicate wins."""
    arguments: dict[str, Any] = {}
    for argument in directive.arguments or ():
        if getattr(argument, "kind", None) != _ARGUMENT_KIND:
            raise MalformedArgumentError(
                f'Invalid argument block "{getattr(argument, "kind", None)}" received. '
                f'expected "{_ARGUMENT_KIND}"'
            )
        arguments[name_of(argument)] = coerce_argument_value(argument.value)
    return arguments
