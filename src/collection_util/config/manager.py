"""Configuration management for collection-util."""
from __future__ import annotations

import copy
import json
import logging
import os
import threading
from typing import Any, Dict, Optional

from pydantic import ValidationError

from collection_util.config.defaults import CONFIG_FILE_ENV_VAR, DEFAULT_CONFIG
from collection_util.config.schemas import CollectionUtilConfig
from collection_util.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_TRUE_VALUES = ("true", "1", "yes", "on")


class ConfigurationManager:
    """
    Manages library configuration with defaults and overrides.

    This class handles:
    - Loading default configuration
    - Applying user configuration overrides from a JSON file
    - Variable interpolation from the environment
    - Configuration validation through the pydantic schema
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration manager with defaults.

        Args:
            config_file: Optional path to a JSON configuration file. If not
                        provided, COLLECTION_UTIL_CONFIG_FILE is consulted.
        """
        self._config_file = config_file or os.environ.get(CONFIG_FILE_ENV_VAR)
        self._lock = threading.RLock()
        self._app_config: Optional[CollectionUtilConfig] = None
        self._config: Dict[str, Any] = {}
        self.reload()

    def reload(self) -> None:
        """Reload configuration from defaults, file and environment."""
        with self._lock:
            self._config = copy.deepcopy(DEFAULT_CONFIG)
            if self._config_file:
                self._load_config_file(self._config_file)
            self._app_config = self._validate(self.get_raw_config())
        logger.debug("Configuration loaded (file=%s)", self._config_file)

    def _load_config_file(self, config_path: str) -> None:
        """Load configuration from file."""
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                user_config = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(
                f"Failed to load configuration: {str(e)}", details={"path": config_path}
            ) from e
        if not isinstance(user_config, dict):
            raise ConfigurationError(
                "Configuration file must contain a JSON object", details={"path": config_path}
            )
        self._merge_config(user_config)

    def _merge_config(self, user_config: Dict[str, Any]) -> None:
        """
        Merge user configuration with the current configuration.

        Args:
            user_config: User configuration dictionary
        """
        def deep_update(target: Dict[str, Any], source: Dict[str, Any]) -> None:
            for key, value in source.items():
                if key in target and isinstance(target[key], dict) and isinstance(value, dict):
                    deep_update(target[key], value)
                else:
                    target[key] = value

        deep_update(self._config, user_config)

    def _interpolate_values(self, config: Any) -> Any:
        """Interpolate ${VAR} and ${VAR:default} placeholders from the environment."""
        if isinstance(config, str):
            if config.startswith("${") and config.endswith("}"):
                var_name = config[2:-1]
                if ":" in var_name:
                    var_name, default = var_name.split(":", 1)
                    return os.environ.get(var_name, default)
                return os.environ.get(var_name, config)
            return config
        elif isinstance(config, dict):
            return {k: self._interpolate_values(v) for k, v in config.items()}
        elif isinstance(config, list):
            return [self._interpolate_values(v) for v in config]
        return config

    @staticmethod
    def _validate(raw_config: Dict[str, Any]) -> CollectionUtilConfig:
        """Build the typed configuration, wrapping schema failures."""
        try:
            return CollectionUtilConfig.model_validate(raw_config)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration: {e.error_count()} error(s)", details=e.errors()
            ) from e

    @property
    def config(self) -> CollectionUtilConfig:
        """Get typed configuration."""
        if self._app_config is None:
            raise ConfigurationError("Configuration not initialized")
        return self._app_config

    def get_raw_config(self) -> Dict[str, Any]:
        """Get the configuration dictionary with all interpolations applied."""
        return self._interpolate_values(self._config)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration key (dot notation for nested keys)
            default: Default value if key not found

        Returns:
            Configuration value
        """
        value = self.get_raw_config()
        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def get_bool(self, key: str, default: bool = False) -> bool:
        """
        Get configuration value as a boolean.

        Args:
            key: Configuration key (dot notation for nested keys)
            default: Default value if key not found

        Returns:
            Boolean value
        """
        value = self.get(key)
        if value is None:
            return default
        if isinstance(value, bool):
            return value
        return str(value).strip().lower() in _TRUE_VALUES

    def update(self, updates: Dict[str, Any]) -> None:
        """
        Update configuration with user-provided values and revalidate.

        Args:
            updates: Nested configuration dictionary
        """
        with self._lock:
            previous = copy.deepcopy(self._config)
            self._merge_config(updates)
            try:
                self._app_config = self._validate(self.get_raw_config())
            except ConfigurationError:
                self._config = previous
                raise
        logger.debug("Configuration updated: %s", sorted(updates))


_config_manager: Optional[ConfigurationManager] = None
_config_manager_lock = threading.Lock()


def get_config_manager(config_file: Optional[str] = None) -> ConfigurationManager:
    """
    Get the configuration manager singleton instance.

    Args:
        config_file: Optional path to configuration file, used on first call only

    Returns:
        Configuration manager instance
    """
    global _config_manager
    if _config_manager is None:
        with _config_manager_lock:
            # Double-checked locking pattern
            if _config_manager is None:
                _config_manager = ConfigurationManager(config_file)
    return _config_manager


def reset_config_manager() -> None:
    """Drop the singleton so the next access reloads configuration."""
    global _config_manager
    with _config_manager_lock:
        _config_manager = None
