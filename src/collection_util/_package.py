"""Package metadata and naming constants."""

PACKAGE_NAME = "collection-util"
__version__ = "1.0.0"
VERSION = __version__  # Alias for compatibility
DESCRIPTION = "Null-safe helpers for collections, arrays, properties and multi-value maps"

# Derived values
PACKAGE_NAME_PYTHON = PACKAGE_NAME.replace("-", "_")
