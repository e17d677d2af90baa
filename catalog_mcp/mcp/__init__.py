"""MCP tool server bridging to the catalog API."""

from catalog_mcp.mcp.bridge import CatalogToolBridge
from catalog_mcp.mcp.tools import TOOL_INPUTS, build_tools

__all__ = ["CatalogToolBridge", "TOOL_INPUTS", "build_tools"]
