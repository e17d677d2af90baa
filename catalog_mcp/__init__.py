"""Catalog MCP: a product catalog REST API and the MCP tool server bridging to it."""

__version__ = "1.0.0"
