# src/collection_util/config/defaults.py
from enum import Enum


class LogLevel(str, Enum):
    """Log level enumeration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogDestination(str, Enum):
    """Log destination enumeration."""
    STDOUT = "stdout"
    NONE = "none"


CONFIG_FILE_ENV_VAR = "COLLECTION_UTIL_CONFIG_FILE"

DEFAULT_CONFIG = {
    # Logging configuration
    "logging": {
        "level": "${COLLECTION_UTIL_LOG_LEVEL:WARNING}",
        "destination": "${COLLECTION_UTIL_LOG_DESTINATION:none}",
        "format": "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s",
    },

    # Multi-value map adapter configuration
    "multi_value_map": {
        "reject_empty_backing_map": "${COLLECTION_UTIL_REJECT_EMPTY_BACKING_MAP:false}",
    },
}
