"""Configuration schemas."""
from pydantic import BaseModel, ConfigDict, Field, field_validator

from collection_util.config.defaults import LogDestination, LogLevel


class LoggingConfig(BaseModel):
    """Logging configuration."""
    model_config = ConfigDict(extra="forbid")

    level: LogLevel = Field(LogLevel.WARNING, description="Log level for the collection_util logger")
    destination: LogDestination = Field(LogDestination.NONE, description="Where log records are written")
    format: str = Field(
        "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s",
        description="stdlib logging format string",
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        """Accept log levels in any case."""
        return v.upper() if isinstance(v, str) else v

    @field_validator("destination", mode="before")
    @classmethod
    def normalize_destination(cls, v):
        """Accept destinations in any case."""
        return v.lower() if isinstance(v, str) else v


class MultiValueMapConfig(BaseModel):
    """Multi-value map adapter configuration."""
    model_config = ConfigDict(extra="forbid")

    reject_empty_backing_map: bool = Field(
        False,
        description="Reject empty backing maps at adapter construction, not only None",
    )


class CollectionUtilConfig(BaseModel):
    """Top-level configuration."""
    model_config = ConfigDict(extra="forbid")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    multi_value_map: MultiValueMapConfig = Field(default_factory=MultiValueMapConfig)
