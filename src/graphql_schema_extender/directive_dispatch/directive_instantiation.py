"""Create directive handler instances from annotations."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Protocol

from graphql import DirectiveNode

from .dispatch_errors import UnknownDirectiveError
from .node_reading import name_of, read_arguments

LOGGER = logging.getLogger(__name__)


class DirectiveFactory(Protocol):
    """Callable producing one handler for one directive occurrence."""

    def __call__(
        self, *, args: dict[str, Any], schema: Any, context: Any, name: str
    ) -> Any: ...


DirectiveRegistry = Mapping[str, DirectiveFactory]


def instantiate_directive(
    directive: DirectiveNode,
    *,
    registry: DirectiveRegistry,
    schema: Any,
    context: Any,
) -> Any:
    """Build a fresh handler instance for one directive annotation."""
    directive_name = name_of(directive)
    factory = registry.get(directive_name)
    if not callable(factory):
        raise UnknownDirectiveError(f'No directive named "{directive_name}" found!')

    args = read_arguments(directive)
    LOGGER.debug("Instantiating directive @%s with args %s", directive_name, args)
    return factory(args=args, schema=schema, context=context, name=directive_name)
