"""Smoke tests for environment configuration in death_mountain_renderer/config.py."""

import importlib

import pytest

from death_mountain_renderer import config


@pytest.fixture
def reload_config(monkeypatch):
    """Reload the config module, restoring the original environment afterwards."""
    yield lambda: importlib.reload(config)
    monkeypatch.undo()
    importlib.reload(config)


class TestConfigSmoke:
    """Smoke tests to validate configuration defaults."""

    def test_config_imports_successfully(self):
        """Test that all config constants can be imported without errors."""
        assert config.DEFAULT_NORMAL_PAGES
        assert config.DEFAULT_PAGE_DISPLAY_SECONDS > 0
        assert config.DEFAULT_PAGE_TRANSITION_SECONDS > 0
        assert isinstance(config.DEFAULT_VALIDATE_OUTPUT, bool)
        assert config.DEFAULT_OUTPUT_DIR
        assert config.DEFAULT_API_PORT > 0

    def test_environment_overrides(self, monkeypatch, reload_config):
        """Test values are read from DMR_* variables."""
        monkeypatch.setenv("DMR_NORMAL_PAGES", "inventory, item_bag,journey,")
        monkeypatch.setenv("DMR_PAGE_DISPLAY_SECONDS", "6")
        monkeypatch.setenv("DMR_VALIDATE_OUTPUT", "off")
        monkeypatch.setenv("DMR_LOG_LEVEL", "debug")
        module = reload_config()
        assert module.DEFAULT_NORMAL_PAGES == ["inventory", "item_bag", "journey"]
        assert module.DEFAULT_PAGE_DISPLAY_SECONDS == 6
        assert module.DEFAULT_VALIDATE_OUTPUT is False
        assert module.DEFAULT_LOG_LEVEL == "DEBUG"

    @pytest.mark.parametrize("value", ["", ",", " , ,"])
    def test_blank_page_list_uses_default(self, monkeypatch, reload_config, value):
        """Test an empty or all-blank page variable falls back to the two default pages."""
        monkeypatch.setenv("DMR_NORMAL_PAGES", value)
        assert reload_config().DEFAULT_NORMAL_PAGES == ["inventory", "item_bag"]
