"""
Integration tests for sales_engine/observability.py

Tests structured logging, log context and timing.
"""
import logging
import json
import pytest
import time as time_module

from sales_engine.config import AppConfig, ConfigurationError, LoggingConfig
from sales_engine.observability import (
    add_log_context,
    clear_log_context,
    setup_logging,
    Timer,
    timed,
    StructuredFormatter,
    HumanReadableFormatter,
    get_logger,
)


def make_record(msg="Test message", name="test.logger", level=logging.INFO):
    return logging.LogRecord(
        name=name,
        level=level,
        pathname="test.py",
        lineno=10,
        msg=msg,
        args=(),
        exc_info=None,
    )


@pytest.fixture(autouse=True)
def reset_log_context():
    clear_log_context()
    yield
    clear_log_context()


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestTimer:
    """Tests for Timer context manager."""

    def test_measures_elapsed_time(self):
        """Timer measures elapsed time correctly."""
        with Timer("test_operation") as timer:
            time_module.sleep(0.05)

        assert timer.elapsed_ms >= 45  # At least 45ms
        assert timer.elapsed_ms < 1000

    def test_timer_name(self):
        """Timer stores operation name."""
        with Timer("load_items") as timer:
            pass

        assert timer.name == "load_items"

    def test_warn_threshold(self, caplog):
        """Blocks slower than the threshold log at WARNING."""
        logger = get_logger("test.timer")
        with caplog.at_level(logging.DEBUG, logger="test.timer"):
            with Timer("load_invoice", logger, warn_threshold_ms=0):
                time_module.sleep(0.001)

        assert caplog.records[-1].levelno == logging.WARNING

    def test_logs_duration(self, caplog):
        """Timer logs completion at DEBUG with duration."""
        logger = get_logger("test.timer")
        with caplog.at_level(logging.DEBUG, logger="test.timer"):
            with Timer("load_items", logger):
                pass

        record = caplog.records[-1]
        assert record.getMessage() == "load_items completed"
        assert record.levelno == logging.DEBUG
        assert record.duration_ms >= 0


class TestTimed:
    """Tests for timed decorator."""

    def test_returns_result(self):
        @timed()
        def add(a, b):
            return a + b

        assert add(2, 3) == 5
        assert add.__name__ == "add"

    def test_logs_operation_name(self, caplog):
        @timed("ranking")
        def rank():
            return []

        with caplog.at_level(logging.DEBUG):
            rank()

        assert any(r.getMessage() == "ranking completed" for r in caplog.records)

    def test_warns_when_slow(self, caplog):
        """Exceeding the threshold logs at WARNING."""
        @timed(warn_threshold_ms=1)
        def slow():
            time_module.sleep(0.01)

        with caplog.at_level(logging.DEBUG):
            slow()

        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert warnings and warnings[0].getMessage() == "slow completed"

    def test_logs_on_exception(self, caplog):
        """Timing is logged even when the call raises."""
        @timed()
        def broken():
            raise ValueError("boom")

        with caplog.at_level(logging.DEBUG):
            with pytest.raises(ValueError):
                broken()

        assert any(r.getMessage() == "broken completed" for r in caplog.records)

    def test_analyst_query_is_timed(self, analyst, caplog):
        with caplog.at_level(logging.DEBUG, logger="sales_engine.analytics.revenue"):
            analyst.top_revenue_earners(2)

        assert any(r.getMessage() == "top_revenue_earners completed" for r in caplog.records)


class TestStructuredFormatter:
    """Tests for JSON log formatter."""

    def test_formats_as_json(self):
        """Outputs valid JSON."""
        parsed = json.loads(StructuredFormatter().format(make_record()))

        assert parsed["message"] == "Test message"
        assert parsed["level"] == "INFO"
        assert parsed["logger"] == "test.logger"

    def test_includes_timestamp(self):
        """JSON includes ISO timestamp."""
        parsed = json.loads(StructuredFormatter().format(make_record()))

        assert "T" in parsed["timestamp"]
        assert parsed["timestamp"].endswith("Z")

    def test_includes_log_context(self):
        """JSON includes fields added with add_log_context."""
        add_log_context(data_dir="./data")

        parsed = json.loads(StructuredFormatter().format(make_record()))

        assert parsed["data_dir"] == "./data"

    def test_includes_extras(self):
        """Extra fields passed to the logger are top-level keys."""
        record = make_record()
        record.duration_ms = 12.5
        record.path = "items.csv"

        parsed = json.loads(StructuredFormatter().format(record))

        assert parsed["duration_ms"] == 12.5
        assert parsed["path"] == "items.csv"


class TestHumanReadableFormatter:
    """Tests for human-readable log formatter."""

    def test_format(self):
        output = HumanReadableFormatter().format(make_record("Loaded 5 Item rows"))
        assert "INFO" in output
        assert "test.logger - Loaded 5 Item rows" in output

    def test_appends_extras(self):
        record = make_record()
        record.duration_ms = 3.0
        output = HumanReadableFormatter().format(record)
        assert output.endswith("| {'duration_ms': 3.0}")


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_human_readable(self, restore_root_logger):
        setup_logging(level="DEBUG", json_format=False)
        root = restore_root_logger
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, HumanReadableFormatter)

    def test_json(self, restore_root_logger):
        setup_logging(level="warning", json_format=True)
        root = restore_root_logger
        assert root.level == logging.WARNING
        assert isinstance(root.handlers[0].formatter, StructuredFormatter)

    def test_quiets_pandas(self, restore_root_logger):
        setup_logging(level="DEBUG")
        assert logging.getLogger("pandas").level == logging.WARNING

    def test_defaults_from_config(self, restore_root_logger):
        """Level and format come from the logging config when not given."""
        app_config = AppConfig(logging=LoggingConfig(level="debug", json_format=True))
        setup_logging(app_config=app_config)
        root = restore_root_logger
        assert root.level == logging.DEBUG
        assert isinstance(root.handlers[0].formatter, StructuredFormatter)

    def test_arguments_override_config(self, restore_root_logger):
        app_config = AppConfig(logging=LoggingConfig(level="DEBUG", json_format=True))
        setup_logging(level="ERROR", json_format=False, app_config=app_config)
        root = restore_root_logger
        assert root.level == logging.ERROR
        assert isinstance(root.handlers[0].formatter, HumanReadableFormatter)

    def test_invalid_config(self, restore_root_logger):
        """An unknown level in the config fails before touching handlers."""
        handlers = list(restore_root_logger.handlers)
        with pytest.raises(ConfigurationError):
            setup_logging(app_config=AppConfig(logging=LoggingConfig(level="LOUD")))
        assert restore_root_logger.handlers == handlers


class TestGetLogger:
    """Tests for get_logger function."""

    def test_returns_logger(self):
        """Returns a logger instance."""
        logger = get_logger("test.module")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "test.module"
