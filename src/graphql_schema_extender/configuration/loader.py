"""Configuration loader service."""

from __future__ import annotations

import importlib
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import DirectiveBinding, ExtenderConfiguration, SdlSource

_BOOLEAN_PARSE_OPTIONS = ("no_location", "allow_legacy_fragment_variables")
_INTEGER_PARSE_OPTIONS = ("max_tokens",)


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> ExtenderConfiguration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    base_path = path.parent
    return ExtenderConfiguration(
        path=path,
        schema=_load_sdl_source(parsed.get("schema"), base_path, "schema"),
        extensions=_parse_extensions_section(parsed.get("extensions"), base_path),
        directives=_parse_directives_section(parsed.get("directives")),
        parse_options=_parse_parse_options_section(parsed.get("parse_options")),
        context=_parse_context_section(parsed.get("context")),
    )


def _parse_extensions_section(value: Any, base_path: Path) -> tuple[SdlSource, ...]:
    if value is None:
        raise ConfigurationError("Configuration section 'extensions' is required.")
    entries = [value] if isinstance(value, (str, Mapping)) else value
    if not isinstance(entries, Sequence) or not entries:
        raise ConfigurationError("extensions must list at least one extension document.")
    return tuple(
        _load_sdl_source(entry, base_path, f"extensions[{index}]")
        for index, entry in enumerate(entries)
    )


def _load_sdl_source(definition: Any, base_path: Path, field_name: str) -> SdlSource:
    if isinstance(definition, str):
        text, source_path = definition, None
    else:
        mapping = _require_mapping(definition, field_name)
        inline = mapping.get("inline")
        path_value = mapping.get("path")
        if inline and path_value:
            raise ConfigurationError(f"{field_name} must not set both inline and path.")
        if inline:
            if not isinstance(inline, str):
                raise ConfigurationError(f"{field_name}.inline must be a string.")
            text, source_path = inline, None
        elif path_value:
            if not isinstance(path_value, str):
                raise ConfigurationError(f"{field_name}.path must be a string.")
            source_path = _resolve_path(base_path, path_value)
            if not source_path.exists():
                raise ConfigurationError(f"SDL file not found: {source_path}")
            text = source_path.read_text(encoding="utf-8")
        else:
            raise ConfigurationError(f"{field_name} requires either inline or path.")

    if not text.strip():
        raise ConfigurationError(f"{field_name} SDL text cannot be empty.")
    return SdlSource(text=text, source_path=source_path)


def _parse_directives_section(value: Any) -> tuple[DirectiveBinding, ...]:
    if value is None:
        return ()
    section = _require_mapping(value, "directives")
    bindings = []
    for name, reference in section.items():
        if not isinstance(name, str) or not name.strip():
            raise ConfigurationError("Directive names must be non-empty strings.")
        field_name = f"directives.{name}"
        reference_text = _require_non_empty_string(reference, field_name)
        bindings.append(
            DirectiveBinding(
                name=name.strip(),
                reference=reference_text,
                factory=_import_reference(reference_text, field_name),
            )
        )
    return tuple(bindings)


def _import_reference(reference: str, field_name: str) -> Any:
    module_name, separator, attribute_path = reference.partition(":")
    if not separator or not module_name or not attribute_path:
        raise ConfigurationError(
            f"{field_name} must use the 'package.module:Attribute' form, got '{reference}'."
        )
    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise ConfigurationError(
            f"{field_name} module '{module_name}' cannot be imported: {exc}"
        ) from exc
    for attribute in attribute_path.split("."):
        try:
            target = getattr(target, attribute)
        except AttributeError as exc:
            raise ConfigurationError(
                f"{field_name} attribute '{attribute_path}' not found in '{module_name}'."
            ) from exc
    if not callable(target):
        raise ConfigurationError(f"{field_name} reference '{reference}' is not callable.")
    return target


def _parse_parse_options_section(value: Any) -> dict[str, Any]:
    if value is None:
        return {}
    section = _require_mapping(value, "parse_options")
    options: dict[str, Any] = {}
    for key, option in section.items():
        field_name = f"parse_options.{key}"
        if key in _BOOLEAN_PARSE_OPTIONS:
            if not isinstance(option, bool):
                raise ConfigurationError(f"{field_name} must be a boolean.")
            options[key] = option
        elif key in _INTEGER_PARSE_OPTIONS:
            options[key] = _require_positive_int(option, field_name)
        else:
            raise ConfigurationError(f"Unsupported parse option: {key}")
    return options


def _parse_context_section(value: Any) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError("context must be a mapping.")
    return dict(value)


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
