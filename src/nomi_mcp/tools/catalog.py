"""Catalog of the tools exposed to MCP hosts.

One entry per Nomi API endpoint. Order here is the order hosts see in
``tools/list``. Length and cardinality limits are documented in the schemas
but enforced by the Nomi API, not locally.
"""

from __future__ import annotations

import copy
from types import MappingProxyType
from typing import Any

from nomi_mcp.tools.base import ToolDefinition

MAX_ROOM_NOMIS = 10


def _string(description: str) -> dict[str, Any]:
    return {"type": "string", "description": description}


def _no_arguments() -> dict[str, Any]:
    return {"type": "object", "properties": {}}


def _nomi_id() -> dict[str, Any]:
    return _string("UUID of the Nomi")


def _room_id() -> dict[str, Any]:
    return _string("UUID of the room")


def _message() -> dict[str, Any]:
    return _string("Message text to send")


_DEFINITIONS = (
    # Nomi management
    ToolDefinition(
        name="list_nomis",
        description="List all Nomis associated with your account",
        input_schema=_no_arguments(),
    ),
    ToolDefinition(
        name="get_nomi",
        description="Get details of a specific Nomi",
        input_schema={
            "type": "object",
            "properties": {"nomi_id": _nomi_id()},
            "required": ["nomi_id"],
        },
    ),
    ToolDefinition(
        name="send_message_to_nomi",
        description="Send a message to a specific Nomi and get their reply",
        input_schema={
            "type": "object",
            "properties": {"nomi_id": _nomi_id(), "message": _message()},
            "required": ["nomi_id", "message"],
        },
    ),
    ToolDefinition(
        name="get_nomi_avatar",
        description="Get the avatar URL of a specific Nomi",
        input_schema={
            "type": "object",
            "properties": {"nomi_id": _nomi_id()},
            "required": ["nomi_id"],
        },
    ),
    # Room management
    ToolDefinition(
        name="list_rooms",
        description="List all rooms associated with your account",
        input_schema=_no_arguments(),
    ),
    ToolDefinition(
        name="create_room",
        description="Create a new room with one or more Nomis",
        input_schema={
            "type": "object",
            "properties": {
                "name": {"type": "string", "description": "Room name (100 characters max)"},
                "note": {
                    "type": "string",
                    "description": "Room note/description (1000 characters max)",
                },
                "backchanneling_enabled": {
                    "type": "boolean",
                    "description": "Enable backchanneling for the room",
                },
                "nomi_uuids": {
                    "type": "array",
                    "items": {"type": "string"},
                    "minItems": 1,
                    "maxItems": MAX_ROOM_NOMIS,
                    "description": f"Array of Nomi UUIDs (min 1, max {MAX_ROOM_NOMIS})",
                },
            },
            "required": ["name", "note", "backchanneling_enabled", "nomi_uuids"],
        },
    ),
    ToolDefinition(
        name="get_room",
        description="Get details of a specific room",
        input_schema={
            "type": "object",
            "properties": {"room_id": _room_id()},
            "required": ["room_id"],
        },
    ),
    ToolDefinition(
        name="update_room",
        description="Update room information",
        input_schema={
            "type": "object",
            "properties": {
                "room_id": _room_id(),
                "name": {"type": "string", "description": "New room name (optional)"},
                "note": {"type": "string", "description": "New room note (optional)"},
                "nomi_uuids": {
                    "type": "array",
                    "items": {"type": "string"},
                    "minItems": 1,
                    "maxItems": MAX_ROOM_NOMIS,
                    "description": "New list of Nomi UUIDs (optional)",
                },
                "backchanneling_enabled": {
                    "type": "boolean",
                    "description": "Enable/disable backchanneling (optional)",
                },
            },
            "required": ["room_id"],
        },
    ),
    ToolDefinition(
        name="delete_room",
        description="Delete a specific room",
        input_schema={
            "type": "object",
            "properties": {
                "room_id": {"type": "string", "description": "UUID of the room to delete"},
            },
            "required": ["room_id"],
        },
    ),
    ToolDefinition(
        name="send_room_message",
        description="Send a message in a specific room",
        input_schema={
            "type": "object",
            "properties": {"room_id": _room_id(), "message": _message()},
            "required": ["room_id", "message"],
        },
    ),
    ToolDefinition(
        name="request_nomi_message",
        description="Request a specific Nomi to post a message in a room",
        input_schema={
            "type": "object",
            "properties": {
                "room_id": _room_id(),
                "nomi_uuid": {
                    "type": "string",
                    "description": "UUID of the Nomi to request a message from",
                },
            },
            "required": ["room_id", "nomi_uuid"],
        },
    ),
)

TOOL_CATALOG: MappingProxyType[str, ToolDefinition] = MappingProxyType(
    {definition.name: definition for definition in _DEFINITIONS}
)


def list_operations() -> list[ToolDefinition]:
    """Return a copy of every tool definition in presentation order."""
    return [copy.deepcopy(definition) for definition in TOOL_CATALOG.values()]


def get_definition(name: str) -> ToolDefinition | None:
    """Look up a copy of a tool definition by name."""
    definition = TOOL_CATALOG.get(name)
    return copy.deepcopy(definition) if definition is not None else None
