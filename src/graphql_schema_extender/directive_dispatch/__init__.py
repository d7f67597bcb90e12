"""Directive dispatch exports."""

from .directive_instantiation import DirectiveFactory, DirectiveRegistry, instantiate_directive
from .dispatch_errors import (
    DirectiveDispatchError,
    MalformedArgumentError,
    UnexpectedNodeKindError,
    UnknownDirectiveError,
    UnresolvableNameError,
    UnresolvedElementError,
)
from .node_kinds import NODE_RULES, ChildLookup, ExtensionNodeKind, NodeRule, rule_for
from .node_reading import coerce_argument_value, name_of, read_arguments
from .schema_walker import SchemaWalker, walk_extensions

__all__ = [
    "NODE_RULES",
    "ChildLookup",
    "DirectiveDispatchError",
    "DirectiveFactory",
    "DirectiveRegistry",
    "ExtensionNodeKind",
    "MalformedArgumentError",
    "NodeRule",
    "SchemaWalker",
    "UnexpectedNodeKindError",
    "UnknownDirectiveError",
    "UnresolvableNameError",
    "UnresolvedElementError",
    "coerce_argument_value",
    "instantiate_directive",
    "name_of",
    "read_arguments",
    "rule_for",
    "walk_extensions",
]
