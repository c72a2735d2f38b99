"""Tool definitions exposed to MCP hosts.

This package provides the tool definition and response envelope types and
the fixed catalog of Nomi API tools.
"""

from nomi_mcp.tools.base import ToolDefinition, ToolResponse
from nomi_mcp.tools.catalog import TOOL_CATALOG, get_definition, list_operations

__all__ = [
    "TOOL_CATALOG",
    "ToolDefinition",
    "ToolResponse",
    "get_definition",
    "list_operations",
]
