"""Tests for configuration loading."""

import os
from unittest.mock import patch

import pytest

from collection_util.config.defaults import LogDestination, LogLevel
from collection_util.config.manager import (
    ConfigurationManager,
    get_config_manager,
    reset_config_manager,
)
from collection_util.exceptions import ConfigurationError


@pytest.mark.unit
class TestConfigurationManager:
    """Test ConfigurationManager defaults, overrides and validation."""

    def test_defaults(self):
        manager = ConfigurationManager()

        assert manager.config.logging.level == LogLevel.WARNING
        assert manager.config.logging.destination == LogDestination.NONE
        assert manager.config.multi_value_map.reject_empty_backing_map is False

    def test_environment_overrides(self):
        env = {
            "COLLECTION_UTIL_LOG_LEVEL": "debug",
            "COLLECTION_UTIL_LOG_DESTINATION": "STDOUT",
            "COLLECTION_UTIL_REJECT_EMPTY_BACKING_MAP": "yes",
        }
        with patch.dict(os.environ, env):
            manager = ConfigurationManager()

        assert manager.config.logging.level == LogLevel.DEBUG
        assert manager.config.logging.destination == LogDestination.STDOUT
        assert manager.config.multi_value_map.reject_empty_backing_map is True

    def test_config_file_is_merged(self, config_file):
        path = config_file('{"multi_value_map": {"reject_empty_backing_map": true}}')

        manager = ConfigurationManager(path)

        assert manager.config.multi_value_map.reject_empty_backing_map is True
        assert manager.config.logging.level == LogLevel.WARNING

    def test_config_file_from_environment(self, config_file):
        path = config_file('{"logging": {"level": "ERROR"}}')

        with patch.dict(os.environ, {"COLLECTION_UTIL_CONFIG_FILE": path}):
            manager = ConfigurationManager()

        assert manager.config.logging.level == LogLevel.ERROR

    def test_unreadable_config_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Failed to load configuration"):
            ConfigurationManager(str(tmp_path / "missing.json"))

    def test_malformed_config_file(self, config_file):
        with pytest.raises(ConfigurationError):
            ConfigurationManager(config_file("{not json"))

    def test_non_object_config_file(self, config_file):
        with pytest.raises(ConfigurationError, match="JSON object"):
            ConfigurationManager(config_file("[1, 2]"))

    def test_invalid_values_rejected(self):
        with patch.dict(os.environ, {"COLLECTION_UTIL_LOG_LEVEL": "LOUD"}):
            with pytest.raises(ConfigurationError, match="Invalid configuration") as exc_info:
                ConfigurationManager()

        assert exc_info.value.details

    def test_unknown_keys_rejected(self, config_file):
        with pytest.raises(ConfigurationError):
            ConfigurationManager(config_file('{"logging": {"colour": "red"}}'))

    def test_get_and_get_bool(self):
        manager = ConfigurationManager()

        assert manager.get("logging.level") == "WARNING"
        assert manager.get("logging.missing", "fallback") == "fallback"
        assert manager.get_bool("multi_value_map.reject_empty_backing_map") is False
        assert manager.get_bool("nothing.here", True) is True

    def test_update_revalidates(self):
        manager = ConfigurationManager()

        manager.update({"multi_value_map": {"reject_empty_backing_map": True}})
        assert manager.config.multi_value_map.reject_empty_backing_map is True

        with pytest.raises(ConfigurationError):
            manager.update({"logging": {"level": "nope"}})
        assert manager.get("logging.level") == "WARNING"

    def test_reload_picks_up_environment(self):
        manager = ConfigurationManager()

        with patch.dict(os.environ, {"COLLECTION_UTIL_LOG_LEVEL": "INFO"}):
            manager.reload()

        assert manager.config.logging.level == LogLevel.INFO


@pytest.mark.unit
class TestConfigManagerSingleton:
    """Test get_config_manager and reset_config_manager."""

    def test_same_instance(self):
        assert get_config_manager() is get_config_manager()

    def test_reset(self):
        first = get_config_manager()
        reset_config_manager()

        assert get_config_manager() is not first
