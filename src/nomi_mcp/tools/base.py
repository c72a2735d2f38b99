"""Base types for MCP tools.

This module defines the core abstractions shared by the catalog and the
dispatcher:
- ToolDefinition: JSON Schema-based tool specification
- ToolResponse: The envelope returned for every tool invocation
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

ERROR_PREFIX = "Error: "


@dataclass(frozen=True)
class ToolDefinition:
    """Definition of a tool advertised to the MCP host.

    Attributes:
        name: Unique tool identifier (e.g., "list_nomis", "create_room").
        description: Concise description for the host to understand when to use.
        input_schema: JSON Schema object defining accepted arguments.

    Example:
        >>> ToolDefinition(
        ...     name="get_nomi",
        ...     description="Get details of a specific Nomi",
        ...     input_schema={
        ...         "type": "object",
        ...         "properties": {
        ...             "nomi_id": {"type": "string", "description": "UUID of the Nomi"},
        ...         },
        ...         "required": ["nomi_id"],
        ...     },
        ... )
    """

    name: str
    description: str
    input_schema: dict[str, Any] = field(
        default_factory=lambda: {"type": "object", "properties": {}}
    )

    @property
    def required(self) -> list[str]:
        """Names of the required arguments."""
        return list(self.input_schema.get("required", []))


@dataclass(frozen=True)
class ToolResponse:
    """Uniform result of a tool invocation.

    Attributes:
        is_error: True if the invocation failed.
        text: Pretty-printed JSON on success, ``"Error: <message>"`` on failure.
    """

    is_error: bool
    text: str

    @classmethod
    def success(cls, result: Any) -> ToolResponse:
        """Wrap a decoded API result as an indented JSON envelope."""
        return cls(is_error=False, text=json.dumps(result, indent=2, ensure_ascii=False))

    @classmethod
    def failure(cls, message: str) -> ToolResponse:
        """Wrap a failure message as an error envelope."""
        return cls(is_error=True, text=f"{ERROR_PREFIX}{message}")
