"""Directive dispatch failures."""

from __future__ import annotations


class DirectiveDispatchError(Exception):
    """Base class for failures while walking an extension document."""


class UnresolvableNameError(DirectiveDispatchError):
    """Raised when a node has no well-formed name."""


class UnknownDirectiveError(DirectiveDispatchError):
    """Raised when an annotation names a directive missing from the registry."""


class MalformedArgumentError(DirectiveDispatchError):
    """Raised when a directive argument entry is not an argument node."""


class UnexpectedNodeKindError(DirectiveDispatchError):
    """Raised when the walk reaches a node kind it cannot dispatch."""


class UnresolvedElementError(DirectiveDispatchError):
    """Raised when a named node has no counterpart in the live schema."""
