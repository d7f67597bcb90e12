"""Document merge tests."""

from __future__ import annotations

import pytest
from graphql import parse
from graphql_schema_extender.document_normalization import (
    DocumentMergeError,
    accept_type_conflict,
    merge_documents,
)


def _merge(*documents: str):
    return merge_documents(list(documents), on_type_conflict=accept_type_conflict)


def _names(nodes) -> list[str]:
    return [node.name.value for node in nodes]


def test_repeated_object_types_become_one_definition() -> None:
    document = _merge("type A { x: Int }", "type A { y: Int }")

    assert len(document.definitions) == 1
    merged = document.definitions[0]
    assert merged.kind == "object_type_definition"
    assert _names(merged.fields) == ["x", "y"]


def test_first_occurrence_keeps_its_position() -> None:
    document = _merge("scalar S\ntype A { x: Int }", "enum E { V }\ntype A { y: Int }")

    assert _names(document.definitions) == ["S", "A", "E"]


def test_directives_are_concatenated_in_declaration_order() -> None:
    document = _merge(
        "extend type A @a { x: Int @one }",
        "type A @b { x: Int @two y: Int }",
    )
    merged = document.definitions[0]

    assert merged.kind == "object_type_definition"
    assert _names(merged.directives) == ["a", "b"]
    assert _names(merged.fields) == ["x", "y"]
    assert _names(merged.fields[0].directives) == ["one", "two"]


def test_repeated_type_extensions_stay_extensions() -> None:
    document = _merge("extend type A @a", "extend type A @b")
    merged = document.definitions[0]

    assert merged.kind == "object_type_extension"
    assert _names(merged.directives) == ["a", "b"]


def test_enum_values_and_union_members_merge_by_name() -> None:
    document = _merge(
        "enum E { RED @a GREEN }\nunion U = A | B",
        "enum E { GREEN @b BLUE }\nunion U = B | C",
    )
    enum_type, union_type = document.definitions

    assert _names(enum_type.values) == ["RED", "GREEN", "BLUE"]
    assert _names(enum_type.values[1].directives) == ["b"]
    assert _names(union_type.types) == ["A", "B", "C"]


def test_later_field_type_replaces_earlier_one() -> None:
    document = _merge("input I { x: Int }", "input I { x: String }")

    assert document.definitions[0].fields[0].type.name.value == "String"


def test_directive_definitions_are_deduplicated_last_wins() -> None:
    document = _merge(
        "directive @tag on FIELD_DEFINITION",
        "directive @tag(label: String) on FIELD_DEFINITION",
    )

    assert len(document.definitions) == 1
    assert _names(document.definitions[0].arguments) == ["label"]


def test_directive_definition_and_type_may_share_a_name() -> None:
    document = _merge("directive @A on FIELD_DEFINITION", "type A { x: Int }")

    assert [definition.kind for definition in document.definitions] == [
        "directive_definition",
        "object_type_definition",
    ]


def test_parsed_documents_are_accepted() -> None:
    document = merge_documents(
        [parse("scalar A"), parse("scalar B")], on_type_conflict=accept_type_conflict
    )

    assert _names(document.definitions) == ["A", "B"]


def test_rejecting_policy_aborts_merge() -> None:
    with pytest.raises(DocumentMergeError, match="Conflicting definitions for type A"):
        merge_documents(
            ["type A { x: Int }", "type A { y: Int }"],
            on_type_conflict=lambda existing, incoming: False,
        )


def test_policy_receives_both_declarations() -> None:
    seen = []

    def policy(existing, incoming) -> bool:
        seen.append((existing.kind, incoming.kind))
        return True

    merge_documents(["type A", "extend type A @a"], on_type_conflict=policy)

    assert seen == [("object_type_definition", "object_type_extension")]


def test_different_type_families_cannot_share_a_name() -> None:
    with pytest.raises(DocumentMergeError, match="declared as both object and enum"):
        _merge("type A { x: Int }", "enum A { B }")


def test_unsupported_items_are_rejected() -> None:
    with pytest.raises(DocumentMergeError, match="Cannot merge extension document of type int"):
        merge_documents(["scalar A", 3], on_type_conflict=accept_type_conflict)
