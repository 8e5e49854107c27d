"""Tests for portfolio logging utilities."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Generator

import pytest
from textual.logging import TextualHandler

from portfolio.lib.logging import (
    JSONFormatter,
    PortfolioLogger,
    get_log_level_from_env,
    get_portfolio_logger,
    setup_logging,
)


def _reset_logging() -> None:
    """Remove every root handler setup_logging installed."""
    root = logging.getLogger()
    for handler in list(root.handlers):
        handler.close()
        root.removeHandler(handler)
    root.setLevel(logging.WARNING)


@pytest.fixture(autouse=True)
def clean_logging(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    for name in ("PORTFOLIO_LOG_LEVEL", "LOG_LEVEL", "PORTFOLIO_LOG_FORMAT", "PORTFOLIO_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    yield
    _reset_logging()


def _record(msg: str = "Test message", args: tuple = (), exc_info=None) -> logging.LogRecord:
    return logging.LogRecord(
        name="test.logger",
        level=logging.INFO,
        pathname="/test/file.py",
        lineno=42,
        msg=msg,
        args=args,
        exc_info=exc_info,
    )


class TestJSONFormatter:
    """Tests for JSONFormatter class."""

    def test_basic_format(self) -> None:
        data = json.loads(JSONFormatter().format(_record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "test.logger"
        assert data["message"] == "Test message"
        assert data["timestamp"].endswith("Z")
        assert data["source"] == {"file": "/test/file.py", "line": 42, "function": None}

    def test_format_with_args(self) -> None:
        data = json.loads(JSONFormatter().format(_record("Processed %d images", (3,))))
        assert data["message"] == "Processed 3 images"

    def test_format_with_exception(self) -> None:
        try:
            raise ValueError("Test error")
        except ValueError:
            exc_info = sys.exc_info()

        data = json.loads(JSONFormatter().format(_record(exc_info=exc_info)))
        assert "ValueError" in data["exception"]

    def test_format_with_extra(self) -> None:
        record = _record()
        record.images_dir = "assets/images"

        data = json.loads(JSONFormatter().format(record))
        assert data["extra"]["images_dir"] == "assets/images"

    def test_excluded_fields(self) -> None:
        record = _record()
        record.secret = "hidden"

        data = json.loads(JSONFormatter(exclude_fields=["secret"]).format(record))
        assert "extra" not in data


class TestPortfolioLogger:
    """Tests for PortfolioLogger class."""

    def test_context_is_attached(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = PortfolioLogger("test.portfolio")
        logger.set_context(images_dir="assets/images")

        with caplog.at_level(logging.INFO, logger="test.portfolio"):
            logger.info("Starting")

        assert caplog.records[-1].images_dir == "assets/images"

    def test_clear_context(self) -> None:
        logger = PortfolioLogger("test.portfolio")
        logger.set_context(images_dir="assets/images")
        logger.clear_context()
        assert logger._context == {}

    def test_metric(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = get_portfolio_logger("test.portfolio")

        with caplog.at_level(logging.INFO, logger="test.portfolio"):
            logger.metric("images_processed", 4, unit="files", stage="webp")

        record = caplog.records[-1]
        assert record.getMessage() == "METRIC images_processed=4"
        assert record.metric_unit == "files"
        assert record.stage == "webp"

    def test_exception_includes_traceback(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = PortfolioLogger("test.portfolio")
        with caplog.at_level(logging.ERROR, logger="test.portfolio"):
            try:
                raise RuntimeError("boom")
            except RuntimeError:
                logger.exception("Failed")

        assert caplog.records[-1].exc_info is not None


class TestLogLevelFromEnv:
    def test_default(self) -> None:
        assert get_log_level_from_env() == logging.INFO

    def test_portfolio_variable_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORTFOLIO_LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        assert get_log_level_from_env() == logging.DEBUG

    def test_fallback_variable(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "warn")
        assert get_log_level_from_env() == logging.WARNING

    def test_unknown_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORTFOLIO_LOG_LEVEL", "chatty")
        assert get_log_level_from_env() == logging.INFO


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_default_setup(self) -> None:
        setup_logging()
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert any(type(h) is logging.StreamHandler for h in root.handlers)

    def test_verbose_setup(self) -> None:
        setup_logging(verbose=True)
        assert logging.getLogger().level == logging.DEBUG

    def test_json_format_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORTFOLIO_LOG_FORMAT", "json")
        setup_logging()
        assert any(isinstance(h.formatter, JSONFormatter) for h in logging.getLogger().handlers)

    def test_log_file_setup(self, tmp_path: Path) -> None:
        log_file = tmp_path / "portfolio.log"
        setup_logging(json_format=True, log_file=str(log_file))

        logging.getLogger("portfolio.test").info("hello file")
        for handler in logging.getLogger().handlers:
            handler.flush()

        records = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
        assert any(record["message"] == "hello file" for record in records)

    def test_tui_routes_console_through_textual(self) -> None:
        setup_logging(console=False)
        handlers = logging.getLogger().handlers
        assert any(isinstance(h, TextualHandler) for h in handlers)
        assert not any(type(h) is logging.StreamHandler for h in handlers)

    def test_pillow_debug_is_quietened(self) -> None:
        setup_logging(verbose=True)
        assert logging.getLogger("PIL").level == logging.WARNING

    def test_repeated_setup_does_not_duplicate_handlers(self) -> None:
        setup_logging()
        setup_logging()
        assert len(logging.getLogger().handlers) == 1
