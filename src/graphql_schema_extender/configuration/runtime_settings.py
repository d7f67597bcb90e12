"""Configuration domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from graphql_schema_extender.directive_dispatch import DirectiveFactory


@dataclass(frozen=True)
class SdlSource:
    """SDL text plus the file it was read from, if any."""

    text: str
    source_path: Path | None


@dataclass(frozen=True)
class DirectiveBinding:
    """Directive name bound to an importable handler."""

    name: str
    reference: str
    factory: DirectiveFactory


@dataclass(frozen=True)
class ExtenderConfiguration:
    """Top-level configuration aggregate."""

    path: Path
    schema: SdlSource
    extensions: tuple[SdlSource, ...]
    directives: tuple[DirectiveBinding, ...]
    parse_options: Mapping[str, Any]
    context: Mapping[str, Any]

    @property
    def directive_registry(self) -> dict[str, DirectiveFactory]:
        return {binding.name: binding.factory for binding in self.directives}

    @property
    def extension_texts(self) -> list[str]:
        return [source.text for source in self.extensions]
