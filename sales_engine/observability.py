"""
Logging and timing for the sales engine.

Loaders log one INFO line per CSV file with its row count and duration.
Repositories log creates and deletes at DEBUG. The analyst's whole-table
revenue queries are wrapped in ``timed`` and log at DEBUG, or at WARNING
when they take longer than the threshold.

Usage:
    from sales_engine.observability import setup_logging, get_logger, timed

    # At startup (level and format from SALES_ENGINE_LOG_LEVEL / _LOG_JSON):
    setup_logging()

    # In modules:
    logger = get_logger(__name__)

    # Around whole-table queries:
    @timed()
    def top_revenue_earners(self, count): ...
"""
import logging
import json
import time
import functools
from contextvars import ContextVar
from typing import Optional, Any, Dict, Callable
from datetime import datetime, timezone

from sales_engine.config import AppConfig, config, validate_config

# Fields attached to every log line of a run, e.g. the data directory
_log_context: ContextVar[Dict[str, Any]] = ContextVar("log_context", default={})

# LogRecord attributes that are not user-supplied extras
_STANDARD_ATTRS = {
    "name", "msg", "args", "created", "filename", "funcName",
    "levelname", "levelno", "lineno", "module", "msecs",
    "pathname", "process", "processName", "relativeCreated",
    "stack_info", "exc_info", "exc_text", "thread", "threadName",
    "message", "asctime", "taskName"
}

DEFAULT_WARN_THRESHOLD_MS = 1000


def add_log_context(**kwargs) -> None:
    """Attach fields to every following log line."""
    _log_context.set({**_log_context.get(), **kwargs})


def clear_log_context() -> None:
    _log_context.set({})


def _fields(record: logging.LogRecord) -> Dict[str, Any]:
    """Run context plus the record's ``extra`` fields."""
    extras = {k: v for k, v in record.__dict__.items()
              if k not in _STANDARD_ATTRS and not k.startswith("_")}
    return {**_log_context.get(), **extras}


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class StructuredFormatter(logging.Formatter):
    """One JSON object per line: timestamp, level, logger, message, fields."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": _utc_now().isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_fields(record),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class HumanReadableFormatter(logging.Formatter):
    """``TIMESTAMP - LEVEL - LOGGER - MESSAGE | FIELDS``"""

    def format(self, record: logging.LogRecord) -> str:
        line = (
            f"{_utc_now():%Y-%m-%d %H:%M:%S} - {record.levelname:8} - "
            f"{record.name} - {record.getMessage()}"
        )
        fields = _fields(record)
        if fields:
            line += f" | {fields}"
        if record.exc_info:
            line += f"\n{self.formatException(record.exc_info)}"
        return line


def setup_logging(
    level: Optional[str] = None,
    json_format: Optional[bool] = None,
    include_libs: bool = False,
    app_config: Optional[AppConfig] = None,
) -> None:
    """
    Configure the root logger.

    Args:
        level: Log level name; default from app_config.logging.level
        json_format: JSON lines instead of human-readable; default from
                     app_config.logging.json_format
        include_libs: Keep pandas at the same level instead of WARNING
        app_config: Configuration to read defaults from (default: config)

    Raises:
        ConfigurationError: If the configuration is invalid
    """
    app_config = app_config or config
    validate_config(app_config)

    if level is None:
        level = app_config.logging.level
    if json_format is None:
        json_format = app_config.logging.json_format

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter() if json_format else HumanReadableFormatter())

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level.upper())

    if not include_libs:
        logging.getLogger("pandas").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


# ═══════════════════════════════════════════════════════════════════════════════
# TIMING
# ═══════════════════════════════════════════════════════════════════════════════

def _log_duration(logger: logging.Logger, name: str, elapsed_ms: float, warn_threshold_ms: float) -> None:
    level = logging.WARNING if elapsed_ms > warn_threshold_ms else logging.DEBUG
    logger.log(level, f"{name} completed", extra={"duration_ms": round(elapsed_ms, 2)})


class Timer:
    """
    Context manager measuring a block in milliseconds.

    Usage:
        with Timer("load_item", logger) as timer:
            rows = read_rows(path)
        logger.info("Loaded", extra={"duration_ms": timer.elapsed_ms})

    Without a logger it only measures.
    """

    def __init__(
        self,
        name: str,
        logger: Optional[logging.Logger] = None,
        warn_threshold_ms: float = DEFAULT_WARN_THRESHOLD_MS,
    ):
        self.name = name
        self.logger = logger
        self.warn_threshold_ms = warn_threshold_ms
        self.elapsed_ms: float = 0
        self._start: float = 0

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, *args):
        self.elapsed_ms = (time.perf_counter() - self._start) * 1000
        if self.logger:
            _log_duration(self.logger, self.name, self.elapsed_ms, self.warn_threshold_ms)


def timed(name: Optional[str] = None, warn_threshold_ms: float = DEFAULT_WARN_THRESHOLD_MS):
    """
    Decorator logging how long each call takes, to the function's module logger.

    Args:
        name: Operation name (defaults to function name)
        warn_threshold_ms: Log at WARNING level above this duration
    """
    def decorator(func: Callable) -> Callable:
        operation_name = name or func.__name__
        func_logger = get_logger(func.__module__)

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            with Timer(operation_name, func_logger, warn_threshold_ms):
                return func(*args, **kwargs)

        return wrapper

    return decorator
