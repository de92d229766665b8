"""Configuration package."""

from collection_util.config.defaults import DEFAULT_CONFIG, LogDestination, LogLevel
from collection_util.config.manager import (
    ConfigurationManager,
    get_config_manager,
    reset_config_manager,
)
from collection_util.config.schemas import (
    CollectionUtilConfig,
    LoggingConfig,
    MultiValueMapConfig,
)

__all__ = [
    "DEFAULT_CONFIG",
    "LogLevel",
    "LogDestination",
    "ConfigurationManager",
    "get_config_manager",
    "reset_config_manager",
    "CollectionUtilConfig",
    "LoggingConfig",
    "MultiValueMapConfig",
]
