"""Configuration section models."""

from catalog_mcp.config.models.api import APIConfig
from catalog_mcp.config.models.catalog import CatalogConfig
from catalog_mcp.config.models.client import ClientConfig
from catalog_mcp.config.models.mcp import MCPConfig
from catalog_mcp.config.models.observability import LoggingConfig, ObservabilityConfig

__all__ = [
    "APIConfig",
    "CatalogConfig",
    "ClientConfig",
    "LoggingConfig",
    "MCPConfig",
    "ObservabilityConfig",
]
