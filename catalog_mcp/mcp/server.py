"""MCP server entry point.

Wires a CatalogToolBridge into the MCP SDK's low-level ``Server`` and serves
it over stdio. Stdout carries the protocol, so all logging goes to stderr.
"""

import asyncio

from mcp import types
from mcp.server import Server
from mcp.server.stdio import stdio_server

from catalog_mcp.client import CatalogClient
from catalog_mcp.config import get_settings
from catalog_mcp.config.settings import Settings
from catalog_mcp.mcp.bridge import CatalogToolBridge
from catalog_mcp.observability.logging import get_logger, setup_logging

logger = get_logger(__name__)


def create_server(bridge: CatalogToolBridge, settings: Settings) -> Server:
    """Create an MCP server exposing the bridge's tools.

    Args:
        bridge: Tool dispatcher
        settings: Application settings, for the announced name and version

    Returns:
        Server with tools/list and tools/call handlers registered
    """
    server: Server = Server(settings.mcp.server_name, version=settings.mcp.server_version)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return bridge.list_tools()

    async def call_tool(request: types.CallToolRequest) -> types.ServerResult:
        content = await bridge.call_tool(request.params.name, request.params.arguments)
        return types.ServerResult(types.CallToolResult(content=content))

    # Raw handler: an McpError from the bridge reaches the client as a JSON-RPC error
    server.request_handlers[types.CallToolRequest] = call_tool

    return server


async def serve(settings: Settings) -> None:
    """Probe the catalog API, then serve the tools over stdio until stdin closes."""
    async with CatalogClient(
        base_url=settings.client.base_url,
        timeout=settings.client.timeout,
    ) as client:
        if not await client.health_check():
            logger.warning(
                "catalog_api_unavailable",
                base_url=settings.client.base_url,
                msg="Catalog API server is not available. Start it with 'catalog-api'.",
            )

        server = create_server(CatalogToolBridge(client), settings)

        logger.info(
            "mcp_server_starting",
            server_name=settings.mcp.server_name,
            base_url=settings.client.base_url,
        )
        async with stdio_server() as (read_stream, write_stream):
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )


def main() -> None:
    """Run the catalog MCP server on stdio."""
    settings = get_settings()
    setup_logging(
        level=settings.observability.logging.level,
        format=settings.observability.logging.format,
    )
    asyncio.run(serve(settings))


if __name__ == "__main__":
    main()
