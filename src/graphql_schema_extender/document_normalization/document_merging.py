"""Merge several extension documents into one document."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from graphql import (
    DirectiveDefinitionNode,
    DocumentNode,
    EnumTypeDefinitionNode,
    EnumTypeExtensionNode,
    InputObjectTypeDefinitionNode,
    InputObjectTypeExtensionNode,
    InterfaceTypeDefinitionNode,
    InterfaceTypeExtensionNode,
    ObjectTypeDefinitionNode,
    ObjectTypeExtensionNode,
    ScalarTypeDefinitionNode,
    ScalarTypeExtensionNode,
    UnionTypeDefinitionNode,
    UnionTypeExtensionNode,
    parse,
)
from graphql.language import Node

LOGGER = logging.getLogger(__name__)

TypeConflictPolicy = Callable[[Node, Node], bool]


class DocumentMergeError(Exception):
    """Raised when extension documents cannot be combined."""


@dataclass(frozen=True)
class _TypeFamily:
    """Definition and extension node classes sharing one type namespace entry."""

    label: str
    definition_class: type[Node]
    extension_class: type[Node]
    child_attributes: tuple[str, ...]


_TYPE_FAMILIES = (
    _TypeFamily(
        "object", ObjectTypeDefinitionNode, ObjectTypeExtensionNode, ("interfaces", "fields")
    ),
    _TypeFamily(
        "interface",
        InterfaceTypeDefinitionNode,
        InterfaceTypeExtensionNode,
        ("interfaces", "fields"),
    ),
    _TypeFamily(
        "input object", InputObjectTypeDefinitionNode, InputObjectTypeExtensionNode, ("fields",)
    ),
    _TypeFamily("enum", EnumTypeDefinitionNode, EnumTypeExtensionNode, ("values",)),
    _TypeFamily("union", UnionTypeDefinitionNode, UnionTypeExtensionNode, ("types",)),
    _TypeFamily("scalar", ScalarTypeDefinitionNode, ScalarTypeExtensionNode, ()),
)

_FAMILY_BY_KIND: Mapping[str, _TypeFamily] = {
    node_class.kind: family
    for family in _TYPE_FAMILIES
    for node_class in (family.definition_class, family.extension_class)
}


def accept_type_conflict(existing: Node, incoming: Node) -> bool:  # noqa: ARG001
    """Permissive conflict policy: repeated type names are always combined."""
    return True


def merge_documents(
    documents: Sequence[DocumentNode | str],
    *,
    on_type_conflict: TypeConflictPolicy,
    parse_options: Mapping[str, Any] | None = None,
) -> DocumentNode:
    """Combine documents into one, folding repeated type names together.

    Args:
      documents: Parsed documents or SDL text, in precedence order.
      on_type_conflict: Decides whether two declarations of the same type name
        may be combined. Returning ``False`` aborts the merge.
      parse_options: Keyword arguments forwarded to ``graphql.parse``.

    Returns:
      A new document whose first occurrence of every type name keeps its position.

    Raises:
      DocumentMergeError: If a conflict is rejected or two kinds share a name.
    """
    merged: dict[str, Node] = {}
    anonymous: list[Node] = []
    order: list[str | int] = []

    for document in _parsed_documents(documents, parse_options or {}):
        for definition in document.definitions:
            key = _merge_key(definition)
            if key is None:
                order.append(len(anonymous))
                anonymous.append(definition)
                continue
            existing = merged.get(key)
            if existing is None:
                order.append(key)
                merged[key] = definition
            elif isinstance(definition, DirectiveDefinitionNode):
                merged[key] = definition
            else:
                merged[key] = _merge_type_declarations(existing, definition, on_type_conflict)

    definitions = tuple(
        anonymous[entry] if isinstance(entry, int) else merged[entry] for entry in order
    )
    LOGGER.debug(
        "Merged %d extension documents into %d definitions", len(documents), len(definitions)
    )
    return DocumentNode(definitions=definitions)


def _parsed_documents(
    documents: Iterable[DocumentNode | str], parse_options: Mapping[str, Any]
) -> Iterable[DocumentNode]:
    for document in documents:
        if isinstance(document, DocumentNode):
            yield document
        elif isinstance(document, str):
            yield parse(document, **parse_options)
        else:
            raise DocumentMergeError(
                f"Cannot merge extension document of type {type(document).__name__}."
            )


def _merge_key(definition: Node) -> str | None:
    name = _name_value(definition)
    if name is None:
        return None
    if isinstance(definition, DirectiveDefinitionNode):
        return f"@{name}"
    if definition.kind in _FAMILY_BY_KIND:
        return name
    return None


def _merge_type_declarations(
    existing: Node, incoming: Node, on_type_conflict: TypeConflictPolicy
) -> Node:
    name = _name_value(incoming)
    existing_family = _FAMILY_BY_KIND[existing.kind]
    incoming_family = _FAMILY_BY_KIND[incoming.kind]
    if existing_family is not incoming_family:
        raise DocumentMergeError(
            f"Type {name} is declared as both {existing_family.label} and "
            f"{incoming_family.label}."
        )
    if not on_type_conflict(existing, incoming):
        raise DocumentMergeError(f"Conflicting definitions for type {name}.")

    is_definition = isinstance(existing, existing_family.definition_class) or isinstance(
        incoming, existing_family.definition_class
    )
    node_class = (
        existing_family.definition_class if is_definition else existing_family.extension_class
    )
    LOGGER.debug("Combining repeated %s declarations of %s", existing_family.label, name)
    return _combine_nodes(existing, incoming, node_class, existing_family.child_attributes)


def _combine_nodes(
    existing: Node,
    incoming: Node,
    node_class: type[Node],
    child_attributes: tuple[str, ...] = (),
) -> Node:
    attributes: dict[str, Any] = {}
    for key in node_class.keys:
        value = getattr(incoming, key, None)
        attributes[key] = value if value is not None else getattr(existing, key, None)
    attributes["loc"] = existing.loc
    if "directives" in node_class.keys:
        attributes["directives"] = (
            *_items(getattr(existing, "directives", None)),
            *_items(getattr(incoming, "directives", None)),
        )
    for attribute in child_attributes:
        attributes[attribute] = _merge_named_children(
            _items(getattr(existing, attribute, None)),
            _items(getattr(incoming, attribute, None)),
        )
    return node_class(**attributes)


def _merge_named_children(
    existing_children: tuple[Node, ...], incoming_children: tuple[Node, ...]
) -> tuple[Node, ...]:
    children: dict[str, Node] = {}
    for child in (*existing_children, *incoming_children):
        name = _name_value(child)
        if name is None:
            raise DocumentMergeError(f"Cannot merge unnamed {child.kind} node.")
        previous = children.get(name)
        children[name] = child if previous is None else _combine_nodes(previous, child, type(child))
    return tuple(children.values())


def _items(value: Sequence[Node] | None) -> tuple[Node, ...]:
    return tuple(value) if value else ()


def _name_value(node: Node) -> str | None:
    name = getattr(node, "name", None)
    value = getattr(name, "value", None)
    return value if isinstance(value, str) and value else None
