"""Exceptions raised by the collection utilities."""
from typing import Any, Optional


class CollectionUtilError(Exception):
    """Base exception for all collection-util errors."""
    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.details = details


class InvalidArgumentError(CollectionUtilError, ValueError):
    """Raised when a required argument is missing or unusable."""
    pass


class ConfigurationError(CollectionUtilError):
    """Raised when there's an issue with configuration."""
    pass
