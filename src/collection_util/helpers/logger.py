import logging
from typing import Optional

import structlog

from collection_util.config.defaults import LogDestination
from collection_util.config.schemas import LoggingConfig

LIBRARY_LOGGER_NAME = "collection_util"

# Processor chain bound to library loggers only; structlog's global
# configuration belongs to the host application.
LIBRARY_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
    structlog.processors.KeyValueRenderer(key_order=["event"]),
]

logging.getLogger(LIBRARY_LOGGER_NAME).addHandler(logging.NullHandler())


class DetailedFormatter(logging.Formatter):
    """Formatter that adds caller information to each record."""

    def format(self, record):
        # Add method name and line number to the record
        record.caller_info = f"{record.module}.{record.funcName}:{record.lineno}"
        return super().format(record)


def setup_logging(config: Optional[LoggingConfig] = None) -> structlog.stdlib.BoundLogger:
    """
    Route the library's log records according to the logging configuration.

    This is opt-in: nothing in the library calls it. Only the
    ``collection_util`` stdlib logger is touched; the root logger and
    structlog's global configuration are left alone.

    Args:
        config: Logging configuration. If None, uses the ConfigurationManager.
    Returns:
        Library structlog logger instance.
    """
    if config is None:
        from collection_util.config.manager import get_config_manager
        config = get_config_manager().config.logging

    library_logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    library_logger.setLevel(getattr(logging, config.level.value))

    # Remove handlers from a previous setup before adding new ones
    for handler in library_logger.handlers[:]:
        library_logger.removeHandler(handler)

    if config.destination == LogDestination.STDOUT:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(DetailedFormatter(config.format))
        library_logger.addHandler(console_handler)
        library_logger.propagate = False
    else:
        library_logger.addHandler(logging.NullHandler())
        library_logger.propagate = True

    logger = get_logger(LIBRARY_LOGGER_NAME)
    logger.debug(
        "Logging configured",
        log_level=config.level.value,
        log_destination=config.destination.value,
    )
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structlog logger over the stdlib logger of the given name.

    Does not read configuration and never fails on a bad environment.

    Args:
        name: Logger name, normally the caller's ``__name__``
    Returns:
        Bound structlog logger
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=LIBRARY_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )
