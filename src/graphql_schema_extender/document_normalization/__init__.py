"""Document normalization exports."""

from .document_merging import DocumentMergeError, accept_type_conflict, merge_documents
from .extension_sources import ExtensionSource, ExtensionSourceError, normalize_extensions

__all__ = [
    "DocumentMergeError",
    "ExtensionSource",
    "ExtensionSourceError",
    "accept_type_conflict",
    "merge_documents",
    "normalize_extensions",
]
