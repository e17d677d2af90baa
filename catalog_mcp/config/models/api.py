"""API server configuration."""

from pydantic import BaseModel, Field


class APIConfig(BaseModel):
    """HTTP server settings for the catalog API."""

    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=3001, ge=1, le=65535, description="Bind port")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Allowed CORS origins",
    )
    default_page_size: int = Field(
        default=10,
        ge=1,
        description="Page size used when a request does not send 'limit'",
    )
    max_page_size: int = Field(
        default=100,
        ge=1,
        description="Largest 'limit' a request may ask for",
    )
