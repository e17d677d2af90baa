"""Configuration loading for catalog-mcp.

Configuration is loaded from TOML files with environment variable overrides.

Usage:
    from catalog_mcp.config import get_settings

    settings = get_settings()
    port = settings.api.port
"""

from functools import lru_cache

from catalog_mcp.config.loader import load_config
from catalog_mcp.config.settings import Settings, set_toml_config
from catalog_mcp.observability.logging import get_logger

logger = get_logger(__name__)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the singleton settings instance.

    The result is cached for the lifetime of the process.
    Call `get_settings.cache_clear()` (or `reload_settings()`) to reload.
    When no config/default.toml can be found, code defaults and environment
    variables still apply.
    """
    try:
        set_toml_config(load_config())
    except FileNotFoundError as e:
        logger.warning("config_file_not_found", error=str(e), msg="Using default configuration")
        set_toml_config({})

    return Settings()


def reload_settings() -> Settings:
    """Clear the settings cache and reload configuration."""
    get_settings.cache_clear()
    return get_settings()


__all__ = ["get_settings", "reload_settings", "Settings"]
