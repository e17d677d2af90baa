"""Catalog API client configuration."""

from pydantic import BaseModel, Field


class ClientConfig(BaseModel):
    """How the MCP server reaches the catalog API."""

    base_url: str = Field(
        default="http://localhost:3001",
        description="Base URL of the catalog API",
    )
    timeout: float = Field(
        default=10.0,
        gt=0,
        description="Request timeout in seconds",
    )
