"""Translate tool invocations into Nomi API calls.

Each tool name maps to a translator: a small pure function that turns the
tool's arguments into a ``RemoteCall``. Adding a tool means adding one
catalog entry and one translator here.

``Dispatcher.invoke`` is the single place where failures are caught. Every
invocation produces exactly one ``ToolResponse``, whether it succeeded,
failed with a ``NomiError``, crashed unexpectedly or was cancelled.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any
from urllib.parse import quote

from nomi_mcp.client import NomiClient, RemoteCall
from nomi_mcp.config import get_api_key
from nomi_mcp.errors import NomiError
from nomi_mcp.models import RoomCreate, RoomUpdate
from nomi_mcp.observability.logging import get_logger
from nomi_mcp.tools.base import ToolDefinition, ToolResponse
from nomi_mcp.tools.catalog import list_operations

log = get_logger(__name__)

Translator = Callable[[Mapping[str, Any]], RemoteCall]
ClientFactory = Callable[[str], NomiClient]


def _path_arg(arguments: Mapping[str, Any], name: str) -> str:
    """Return an argument quoted as a single URL path segment.

    Slashes, dots and query characters are escaped so the value can never
    reach a different endpoint.

    Raises:
        NomiError: ``MISSING_ARGUMENTS`` if the argument is absent, null or empty.
    """
    value = arguments.get(name)
    if value is None or value == "":
        raise NomiError.missing_arguments(f"Missing required argument: {name}")
    segment = quote(str(value), safe="")
    # "." and ".." would still be resolved as dot segments
    if set(segment) == {"."}:
        segment = segment.replace(".", "%2E")
    return segment


def _body(arguments: Mapping[str, Any], fields: Mapping[str, str]) -> dict[str, Any]:
    """Copy the present arguments into a body, renaming them to their wire names."""
    return {wire: arguments[arg] for arg, wire in fields.items() if arg in arguments}


def _create_room(arguments: Mapping[str, Any]) -> RemoteCall:
    return RemoteCall("POST", "/rooms", RoomCreate.from_arguments(arguments).to_payload())


def _update_room(arguments: Mapping[str, Any]) -> RemoteCall:
    room_id = _path_arg(arguments, "room_id")
    return RemoteCall("PUT", f"/rooms/{room_id}", RoomUpdate.from_arguments(arguments).to_payload())


TRANSLATORS: Mapping[str, Translator] = MappingProxyType(
    {
        # Nomi management
        "list_nomis": lambda args: RemoteCall("GET", "/nomis"),
        "get_nomi": lambda args: RemoteCall("GET", f"/nomis/{_path_arg(args, 'nomi_id')}"),
        "send_message_to_nomi": lambda args: RemoteCall(
            "POST",
            f"/nomis/{_path_arg(args, 'nomi_id')}/chat",
            _body(args, {"message": "messageText"}),
        ),
        "get_nomi_avatar": lambda args: RemoteCall(
            "GET", f"/nomis/{_path_arg(args, 'nomi_id')}/avatar"
        ),
        # Room management
        "list_rooms": lambda args: RemoteCall("GET", "/rooms"),
        "create_room": _create_room,
        "get_room": lambda args: RemoteCall("GET", f"/rooms/{_path_arg(args, 'room_id')}"),
        "update_room": _update_room,
        "delete_room": lambda args: RemoteCall("DELETE", f"/rooms/{_path_arg(args, 'room_id')}"),
        "send_room_message": lambda args: RemoteCall(
            "POST",
            f"/rooms/{_path_arg(args, 'room_id')}/chat",
            _body(args, {"message": "messageText"}),
        ),
        "request_nomi_message": lambda args: RemoteCall(
            "POST",
            f"/rooms/{_path_arg(args, 'room_id')}/chat/request",
            _body(args, {"nomi_uuid": "nomiUuid"}),
        ),
    }
)


def translate(name: str, arguments: Mapping[str, Any]) -> RemoteCall:
    """Build the ``RemoteCall`` for a tool invocation.

    Raises:
        NomiError: ``UNKNOWN_OPERATION`` for unknown tools, ``MISSING_ARGUMENTS``
            when a path argument is missing.
    """
    translator = TRANSLATORS.get(name)
    if translator is None:
        raise NomiError.unknown_operation(name)
    return translator(arguments)


class Dispatcher:
    """Runs tool invocations against the Nomi API.

    Stateless: the credential is read and a fresh client is opened for every
    invocation, so concurrent invocations share nothing.
    """

    def __init__(self, client_factory: ClientFactory = NomiClient) -> None:
        """Initialize the dispatcher.

        Args:
            client_factory: Builds a client from an API key. Tests substitute
                clients backed by a mock transport.
        """
        self._client_factory = client_factory

    def list_operations(self) -> list[ToolDefinition]:
        """Return the tool catalog. Needs no credential."""
        return list_operations()

    async def invoke(self, name: str, arguments: Mapping[str, Any] | None) -> ToolResponse:
        """Invoke a tool and wrap the outcome in a ``ToolResponse``.

        Never raises.

        Args:
            name: Tool name.
            arguments: Tool arguments. ``None`` (absent) is an error; an empty
                mapping is valid for tools without arguments.

        Returns:
            Success envelope with the pretty-printed API result, or an error
            envelope with ``"Error: <message>"``.
        """
        try:
            result = await self._run(name, arguments)
            response = ToolResponse.success(result)
        except NomiError as e:
            log.warning("tool_failed", tool=name, kind=e.kind.value, error=e.message)
            return ToolResponse.failure(e.message)
        except asyncio.CancelledError:
            log.warning("tool_cancelled", tool=name)
            return ToolResponse.failure("Request cancelled")
        except Exception as e:
            log.exception("tool_crashed", tool=name)
            return ToolResponse.failure(str(e) or type(e).__name__)

        log.info("tool_succeeded", tool=name)
        return response

    async def _run(self, name: str, arguments: Mapping[str, Any] | None) -> Any:
        if arguments is None:
            raise NomiError.missing_arguments()

        api_key = get_api_key()
        call = translate(name, arguments)
        log.debug("tool_invoked", tool=name, method=call.method, path=call.path)

        async with self._client_factory(api_key) as client:
            return await client.send(call)
