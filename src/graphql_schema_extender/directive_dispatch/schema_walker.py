"""Walk an extension document alongside the live schema and dispatch directives."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from graphql import DocumentNode
from graphql.language import Node

from graphql_schema_extender.schema_navigation import SchemaNavigator

from .directive_instantiation import DirectiveRegistry, instantiate_directive
from .dispatch_errors import UnresolvedElementError
from .node_kinds import ChildLookup, NodeRule, rule_for
from .node_reading import name_of

LOGGER = logging.getLogger(__name__)


class SchemaWalker:
    """Depth-first, pre-order walk that attaches and visits directive handlers.

    For every node the handlers of all its annotations are created and
    appended to the live element before any visitor runs, so a visitor can see
    its siblings from the same node. Children are visited afterwards, each
    resolved by name from the element of its parent.
    """

    def __init__(
        self,
        *,
        registry: DirectiveRegistry,
        schema: Any,
        navigator: SchemaNavigator,
        context: Any = None,
    ) -> None:
        self._registry = registry
        self._schema = schema
        self._navigator = navigator
        self._context = context

    def walk(self, document: DocumentNode) -> None:
        """Process the document against the schema root."""
        self._visit(document, self._schema, rule_for(document))

    def _visit(self, node: Node, element: Any, rule: NodeRule) -> None:
        self._dispatch_directives(node, element, rule)
        if rule.children_attribute is None or rule.child_lookup is None:
            return
        for child in getattr(node, rule.children_attribute, None) or ():
            self._visit_child(child, element, rule.child_lookup)

    def _visit_child(self, child: Node, parent: Any, lookup: ChildLookup) -> None:
        child_rule = rule_for(child)
        child_name = name_of(child)
        if child_rule.is_inert:
            return
        child_element = self._resolve(parent, child_name, lookup)
        if child_element is None:
            raise UnresolvedElementError(
                f'No schema element named "{child_name}" found for {child.kind}'
            )
        self._visit(child, child_element, child_rule)

    def _resolve(self, parent: Any, name: str, lookup: ChildLookup) -> Any | None:
        if lookup is ChildLookup.TYPE:
            return self._navigator.resolve_type(parent, name)
        if lookup is ChildLookup.FIELD:
            return self._navigator.resolve_field(parent, name)
        return self._navigator.resolve_value(parent, name)

    def _dispatch_directives(self, node: Node, element: Any, rule: NodeRule) -> None:
        annotations: Sequence[Node] = getattr(node, "directives", None) or ()
        if not annotations:
            return
        handlers = [
            instantiate_directive(
                annotation,
                registry=self._registry,
                schema=self._schema,
                context=self._context,
            )
            for annotation in annotations
        ]
        self._navigator.directives_of(element).extend(handlers)
        LOGGER.debug("Attached %d directive handler(s) to %s", len(handlers), _describe(node))

        for handler in handlers:
            visitor = getattr(handler, rule.visitor_name, None) if rule.visitor_name else None
            if callable(visitor):
                visitor(element)


def walk_extensions(
    document: DocumentNode,
    *,
    schema: Any,
    registry: DirectiveRegistry,
    navigator: SchemaNavigator,
    context: Any = None,
) -> None:
    """Walk one normalized document against a live schema."""
    SchemaWalker(
        registry=registry, schema=schema, navigator=navigator, context=context
    ).walk(document)


def _describe(node: Node) -> str:
    name = getattr(getattr(node, "name", None), "value", None)
    return f"{node.kind} {name}" if name else node.kind
