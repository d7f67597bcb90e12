"""Schema extension exports."""

from .run_contracts import ExtensionRequest
from .schema_extension_use_case import extend_schema

__all__ = ["ExtensionRequest", "extend_schema"]
