"""Unit tests for Settings class and get_settings function."""

from pathlib import Path

import pytest

from catalog_mcp.config import get_settings, reload_settings
from catalog_mcp.config.models.catalog import DEFAULT_DATA_PATH
from catalog_mcp.config.settings import Settings, set_toml_config


@pytest.fixture(autouse=True)
def no_toml_config() -> None:
    """Start every test from code defaults only."""
    set_toml_config({})


class TestSettings:
    """Tests for Settings model."""

    def test_default_values(self) -> None:
        settings = Settings()
        assert settings.app_name == "catalog-mcp"
        assert settings.debug is False

    def test_section_defaults(self) -> None:
        settings = Settings()
        assert settings.api.port == 3001
        assert settings.api.default_page_size == 10
        assert settings.api.max_page_size == 100
        assert settings.catalog.limited_stock_threshold == 10
        assert settings.catalog.popular_min_rating == 4.0
        assert settings.catalog.data_path == DEFAULT_DATA_PATH
        assert settings.client.base_url == "http://localhost:3001"
        assert settings.mcp.server_name == "catalog-api-server"
        assert settings.observability.logging.level == "INFO"

    def test_seed_catalog_ships_with_the_package(self) -> None:
        assert DEFAULT_DATA_PATH.is_file()

    def test_env_var_overrides_nested_value(self, env_override) -> None:
        with env_override({"CATALOG_MCP_CLIENT__BASE_URL": "http://catalog:8080"}):
            settings = Settings()

        assert settings.client.base_url == "http://catalog:8080"

    def test_env_var_beats_toml(self, env_override) -> None:
        set_toml_config({"api": {"port": 4000, "host": "127.0.0.1"}})

        with env_override({"CATALOG_MCP_API__PORT": "5000"}):
            settings = Settings()

        assert settings.api.port == 5000
        assert settings.api.host == "127.0.0.1"


class TestGetSettings:
    """Tests for get_settings function."""

    def test_loads_toml_from_config_dir(
        self,
        test_config_dir: Path,
        mock_toml_files,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        mock_toml_files({"default.toml": "app_name = 'test'\n[catalog]\nlimited_stock_threshold = 3"})
        monkeypatch.setenv("CATALOG_MCP_CONFIG_DIR", str(test_config_dir))
        monkeypatch.setenv("CATALOG_MCP_ENV", "nonexistent")

        settings = get_settings()

        assert settings.app_name == "test"
        assert settings.catalog.limited_stock_threshold == 3

    def test_missing_config_falls_back_to_defaults(
        self, test_config_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("CATALOG_MCP_CONFIG_DIR", str(test_config_dir))

        settings = get_settings()

        assert settings.api.port == 3001

    def test_settings_cached_until_reload(
        self,
        test_config_dir: Path,
        mock_toml_files,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        mock_toml_files({"default.toml": "app_name = 'first'"})
        monkeypatch.setenv("CATALOG_MCP_CONFIG_DIR", str(test_config_dir))
        monkeypatch.setenv("CATALOG_MCP_ENV", "nonexistent")

        first = get_settings()
        mock_toml_files({"default.toml": "app_name = 'second'"})

        assert get_settings() is first
        assert reload_settings().app_name == "second"
