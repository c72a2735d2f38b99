"""Observability module for the Nomi MCP server.

Provides structured logging routed to stderr, keeping stdout free for the
MCP stdio transport.
"""

from nomi_mcp.observability.logging import (
    close_file_logging,
    configure_logging,
    get_logger,
    get_log_file,
)

__all__ = [
    "close_file_logging",
    "configure_logging",
    "get_log_file",
    "get_logger",
]
