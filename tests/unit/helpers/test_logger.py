"""Tests for logging setup."""

import logging

import pytest
import structlog

from collection_util.collections.multi_value_map import MultiValueMapAdapter
from collection_util.collections.transforming import (
    merge_array_into_collection,
    merge_properties_into_map,
)
from collection_util.config.schemas import LoggingConfig
from collection_util.helpers.logger import (
    LIBRARY_LOGGER_NAME,
    DetailedFormatter,
    get_logger,
    setup_logging,
)


def _restore_library_logger():
    library_logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    for handler in library_logger.handlers[:]:
        library_logger.removeHandler(handler)
    library_logger.addHandler(logging.NullHandler())
    library_logger.propagate = True
    library_logger.setLevel(logging.NOTSET)


@pytest.mark.unit
class TestSetupLogging:
    """Test setup_logging and get_logger."""

    def teardown_method(self):
        _restore_library_logger()

    def test_library_logger_is_silent_on_import(self):
        library_logger = logging.getLogger(LIBRARY_LOGGER_NAME)

        assert any(isinstance(h, logging.NullHandler) for h in library_logger.handlers)

    def test_default_is_silent(self):
        setup_logging(LoggingConfig())
        library_logger = logging.getLogger(LIBRARY_LOGGER_NAME)

        assert library_logger.level == logging.WARNING
        assert [type(h) for h in library_logger.handlers] == [logging.NullHandler]

    def test_stdout_destination_installs_stream_handler(self):
        setup_logging(LoggingConfig(level="debug", destination="stdout"))
        library_logger = logging.getLogger(LIBRARY_LOGGER_NAME)

        assert library_logger.level == logging.DEBUG
        assert len(library_logger.handlers) == 1
        assert isinstance(library_logger.handlers[0], logging.StreamHandler)
        assert isinstance(library_logger.handlers[0].formatter, DetailedFormatter)
        assert library_logger.propagate is False

    def test_repeated_setup_does_not_stack_handlers(self):
        setup_logging(LoggingConfig(destination="stdout"))
        setup_logging(LoggingConfig(destination="stdout"))

        assert len(logging.getLogger(LIBRARY_LOGGER_NAME).handlers) == 1

    def test_debug_records_emitted(self, caplog):
        setup_logging(LoggingConfig(level="DEBUG"))

        with caplog.at_level(logging.DEBUG, logger=LIBRARY_LOGGER_NAME):
            merge_array_into_collection([1, 2], [])

        messages = [r.getMessage() for r in caplog.records]
        assert any("Merged array into collection" in m and "count=2" in m for m in messages)

    def test_get_logger_wraps_named_stdlib_logger(self, caplog):
        logging.getLogger(LIBRARY_LOGGER_NAME).setLevel(logging.INFO)

        with caplog.at_level(logging.INFO, logger=LIBRARY_LOGGER_NAME):
            get_logger("collection_util.tests").info("hello", answer=42)

        record = caplog.records[-1]
        assert record.name == "collection_util.tests"
        assert "event='hello'" in record.getMessage()
        assert "answer=42" in record.getMessage()


@pytest.mark.unit
class TestDetailedFormatter:
    """Test caller information in formatted records."""

    def test_default_format_includes_caller_info(self):
        formatter = DetailedFormatter(LoggingConfig().format)
        record = logging.LogRecord(
            "collection_util.x", logging.WARNING, "/tmp/module.py", 12, "message", None, None,
            func="do_work",
        )

        output = formatter.format(record)

        assert "[module.do_work:12]" in output
        assert output.endswith("- message")


@pytest.mark.unit
class TestHostStructlogConfiguration:
    """The library must leave the application's structlog setup alone."""

    def setup_method(self):
        """Install an application-owned structlog configuration."""
        def host_processor(logger, method_name, event_dict):
            event_dict["host"] = True
            return event_dict

        self.host_processors = [host_processor, structlog.processors.JSONRenderer()]
        structlog.configure(processors=self.host_processors)

    def teardown_method(self):
        structlog.reset_defaults()
        _restore_library_logger()

    def test_library_calls_keep_host_configuration(self):
        MultiValueMapAdapter({}, reject_empty=False)
        merge_array_into_collection([1], [])
        merge_properties_into_map({"a": "1"}, {})
        setup_logging(LoggingConfig(level="DEBUG"))

        assert structlog.get_config()["processors"] == self.host_processors
