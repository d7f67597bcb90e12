"""Normalize extension input into a single document."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from graphql import DocumentNode, parse

from .document_merging import accept_type_conflict, merge_documents

ExtensionSource = DocumentNode | str | Sequence[DocumentNode | str]


class ExtensionSourceError(Exception):
    """Raised when extensions are given in an unsupported shape."""


def normalize_extensions(
    extensions: ExtensionSource, *, parse_options: Mapping[str, Any] | None = None
) -> DocumentNode:
    """Return one document for a parsed document, SDL text, or a sequence of either."""
    options = dict(parse_options or {})
    if isinstance(extensions, DocumentNode):
        return extensions
    if isinstance(extensions, str):
        return parse(extensions, **options)
    if isinstance(extensions, Sequence) and not isinstance(extensions, (bytes, bytearray)):
        return merge_documents(
            extensions,
            on_type_conflict=accept_type_conflict,
            parse_options=options,
        )
    raise ExtensionSourceError(
        f"Unsupported extensions value of type {type(extensions).__name__}; "
        "expected a document, SDL text, or a sequence of either."
    )
