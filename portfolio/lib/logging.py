"""Logging utilities for the portfolio.

Provides structured JSON logging and a context-aware logger. While the TUI
owns the terminal, console records are routed through Textual instead of
stdout so they do not corrupt the screen.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

__all__ = [
    "setup_logging",
    "JSONFormatter",
    "PortfolioLogger",
    "get_portfolio_logger",
    "get_log_level_from_env",
]


class JSONFormatter(logging.Formatter):
    """Formatter that outputs log records as JSON.

    Example output:
        {"timestamp": "2025-01-15T10:30:00.123Z", "level": "INFO",
         "logger": "portfolio.lib.images", "message": "Created WebP: me.webp"}
    """

    def __init__(
        self,
        include_fields: Optional[list[str]] = None,
        exclude_fields: Optional[list[str]] = None,
    ):
        """Initialize JSON formatter.

        Args:
            include_fields: Extra fields to include (from record.__dict__)
            exclude_fields: Fields to exclude from output
        """
        super().__init__()
        self.include_fields = include_fields or []
        self.exclude_fields = exclude_fields or []

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as JSON."""
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.pathname:
            log_data["source"] = {
                "file": record.pathname,
                "line": record.lineno,
                "function": record.funcName,
            }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for field in self.include_fields:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        # Attributes passed through extra=
        extra_attrs = {
            k: v
            for k, v in record.__dict__.items()
            if k not in logging.LogRecord("", 0, "", 0, "", (), None).__dict__
            and k not in ("message", "asctime")
            and k not in self.exclude_fields
        }
        if extra_attrs:
            log_data["extra"] = extra_attrs

        return json.dumps(log_data, default=str)


class PortfolioLogger:
    """Logger that stamps a fixed context onto every record.

    Example:
        logger = PortfolioLogger("portfolio.lib.images")
        logger.set_context(images_dir="assets/images")
        logger.info("Starting optimization")  # Includes images_dir
    """

    def __init__(self, name: str):
        self._logger = logging.getLogger(name)
        self._context: Dict[str, Any] = {}

    def set_context(self, **kwargs: Any) -> None:
        """Set context fields that will be included in all log messages."""
        self._context.update(kwargs)

    def clear_context(self) -> None:
        """Clear all context fields."""
        self._context.clear()

    def _log(self, level: int, msg: str, *args: Any, **kwargs: Any) -> None:
        extra = kwargs.pop("extra", {})
        extra.update(self._context)
        self._logger.log(level, msg, *args, extra=extra, **kwargs)

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.DEBUG, msg, *args, **kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.INFO, msg, *args, **kwargs)

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.WARNING, msg, *args, **kwargs)

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.ERROR, msg, *args, **kwargs)

    def exception(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log an exception with traceback."""
        kwargs["exc_info"] = True
        self._log(logging.ERROR, msg, *args, **kwargs)

    def metric(
        self,
        name: str,
        value: Any,
        unit: Optional[str] = None,
        **tags: Any,
    ) -> None:
        """Log a metric value.

        Args:
            name: Metric name (e.g., "images_processed", "duration_seconds")
            value: Metric value
            unit: Optional unit (e.g., "files", "seconds")
            **tags: Additional tags for the metric
        """
        extra = {
            "metric_name": name,
            "metric_value": value,
        }
        if unit:
            extra["metric_unit"] = unit
        extra.update(self._context)
        extra.update(tags)
        self._logger.info(f"METRIC {name}={value}", extra=extra)


def get_portfolio_logger(name: str) -> PortfolioLogger:
    """Get a portfolio logger instance."""
    return PortfolioLogger(name)


def get_log_level_from_env(default: int = logging.INFO) -> int:
    """Read the log level from PORTFOLIO_LOG_LEVEL, falling back to LOG_LEVEL."""
    level_name = os.environ.get("PORTFOLIO_LOG_LEVEL") or os.environ.get("LOG_LEVEL")
    if not level_name:
        return default

    level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "WARN": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return level_map.get(level_name.upper(), default)


def setup_logging(
    verbose: bool = False,
    json_format: Optional[bool] = None,
    log_file: Optional[str] = None,
    console: bool = True,
) -> None:
    """Configure logging for the portfolio.

    Args:
        verbose: Enable debug-level logging
        json_format: Use JSON output format; defaults to PORTFOLIO_LOG_FORMAT=json
        log_file: Optional file path to write logs to; defaults to PORTFOLIO_LOG_FILE
        console: Write to stdout. When False, records go to the Textual
            devtools console instead (for use while the TUI is running).
    """
    level = logging.DEBUG if verbose else get_log_level_from_env()

    if json_format is None:
        json_format = os.environ.get("PORTFOLIO_LOG_FORMAT", "").lower() == "json"
    if log_file is None:
        log_file = os.environ.get("PORTFOLIO_LOG_FILE") or None

    if json_format:
        formatter: logging.Formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if console:
        console_handler: logging.Handler = logging.StreamHandler(sys.stdout)
    else:
        from textual.logging import TextualHandler

        console_handler = TextualHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # Pillow logs every plugin import at DEBUG
    logging.getLogger("PIL").setLevel(logging.WARNING)
