"""MCP server wiring.

Binds the tool catalog and the dispatcher to the ``mcp`` SDK's low-level
server and runs it over stdio.
"""

from __future__ import annotations

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from nomi_mcp import __version__
from nomi_mcp.dispatcher import Dispatcher
from nomi_mcp.observability.logging import get_logger
from nomi_mcp.tools.base import ToolDefinition, ToolResponse

log = get_logger(__name__)

SERVER_NAME = "nomi-ai-server"


def to_mcp_tool(definition: ToolDefinition) -> types.Tool:
    """Convert a tool definition to the MCP wire type."""
    return types.Tool(
        name=definition.name,
        description=definition.description,
        inputSchema=definition.input_schema,
    )


def to_call_result(response: ToolResponse) -> types.CallToolResult:
    """Convert a tool envelope to an MCP call result with one text item."""
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=response.text)],
        isError=response.is_error,
    )


def create_server(dispatcher: Dispatcher | None = None) -> Server:
    """Build the MCP server.

    Args:
        dispatcher: Dispatcher to route tool calls through. A default one is
            created if not given.

    Returns:
        A server exposing ``tools/list`` and ``tools/call``.
    """
    dispatcher = dispatcher or Dispatcher()
    server: Server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        return [to_mcp_tool(definition) for definition in dispatcher.list_operations()]

    # Registered directly instead of through @server.call_tool() so the raw
    # ``arguments`` value reaches the dispatcher: the decorator replaces a
    # missing value with {} and validates it against the schema first.
    async def handle_call_tool(request: types.CallToolRequest) -> types.ServerResult:
        response = await dispatcher.invoke(request.params.name, request.params.arguments)
        return types.ServerResult(to_call_result(response))

    server.request_handlers[types.CallToolRequest] = handle_call_tool
    return server


async def serve(dispatcher: Dispatcher | None = None) -> None:
    """Run the MCP server on stdio until the host closes the stream."""
    server = create_server(dispatcher)
    async with stdio_server() as (read_stream, write_stream):
        log.info("server_started", name=SERVER_NAME, version=__version__, transport="stdio")
        await server.run(read_stream, write_stream, server.create_initialization_options())
    log.info("server_stopped", name=SERVER_NAME)
