"""MCP server configuration."""

from pydantic import BaseModel, Field


class MCPConfig(BaseModel):
    """Identity the MCP server announces to clients."""

    server_name: str = Field(default="catalog-api-server")
    server_version: str = Field(default="1.0.0")
