"""Tests for structured logging configuration."""

from __future__ import annotations

import json
import logging
import re
from typing import TYPE_CHECKING

import pytest

from nomi_mcp.observability import close_file_logging, configure_logging, get_log_file, get_logger

if TYPE_CHECKING:
    from pathlib import Path


def test_configure_logging_sets_level_warning() -> None:
    """Default verbosity (0) sets WARNING level."""
    configure_logging(verbosity=0)

    root_logger = logging.getLogger()
    assert root_logger.level == logging.WARNING


def test_configure_logging_verbose_sets_debug_root() -> None:
    """verbosity=1 opens the root logger; the console handler filters at INFO."""
    configure_logging(verbosity=1)

    root_logger = logging.getLogger()
    assert root_logger.level == logging.DEBUG
    assert root_logger.handlers[0].level == logging.INFO


def test_console_handler_writes_to_stderr() -> None:
    """Console output never goes to stdout, which carries the MCP protocol."""
    configure_logging(verbosity=2)

    handler = logging.getLogger().handlers[0]
    assert handler.console.stderr is True  # type: ignore[attr-defined]


def test_get_logger_returns_bound_logger() -> None:
    """get_logger returns a structlog logger with expected methods."""
    logger = get_logger(__name__)

    assert hasattr(logger, "info")
    assert hasattr(logger, "debug")
    assert hasattr(logger, "error")
    assert hasattr(logger, "warning")


def test_get_logger_auto_configures() -> None:
    """get_logger configures logging if not already done."""
    import nomi_mcp.observability.logging as log_module

    log_module._configured = False

    logger = get_logger("test")

    assert log_module._configured is True
    assert logger is not None


def test_configure_logging_suppresses_noisy_loggers() -> None:
    """httpx and the MCP SDK are capped at WARNING."""
    configure_logging(verbosity=2)

    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("mcp").level == logging.WARNING


def test_configure_logging_without_file(tmp_path: Path) -> None:
    """Without a log file, no file handler is installed."""
    configure_logging(verbosity=0)

    assert get_log_file() is None
    assert list(tmp_path.iterdir()) == []


def test_configure_logging_creates_log_dir(tmp_path: Path) -> None:
    """The log file's parent directory is created."""
    log_file = tmp_path / "logs" / "nomi.jsonl"

    configure_logging(verbosity=0, log_file=log_file)

    assert log_file.parent.is_dir()
    assert get_log_file() == log_file
    close_file_logging()


def test_configure_logging_reconfiguration_closes_handler(tmp_path: Path) -> None:
    """Reconfiguring logging closes previous file handler."""
    import nomi_mcp.observability.logging as log_module

    configure_logging(verbosity=0, log_file=tmp_path / "a.jsonl")
    first_handler = log_module._file_handler
    assert first_handler is not None

    configure_logging(verbosity=0, log_file=tmp_path / "b.jsonl")
    second_handler = log_module._file_handler

    assert first_handler.stream is None or first_handler.stream.closed
    assert second_handler is not None
    close_file_logging()


def test_close_file_logging_clears_handler(tmp_path: Path) -> None:
    """close_file_logging closes handler and clears reference."""
    import nomi_mcp.observability.logging as log_module

    configure_logging(verbosity=0, log_file=tmp_path / "nomi.jsonl")
    assert log_module._file_handler is not None

    close_file_logging()

    assert log_module._file_handler is None
    assert get_log_file() is None


def test_jsonl_file_handler_writes_structlog_context(tmp_path: Path) -> None:
    """JSONLFileHandler correctly extracts structlog context to JSONL."""
    log_file = tmp_path / "nomi.jsonl"
    configure_logging(verbosity=2, log_file=log_file)

    logger = get_logger("test.context")
    logger.info("tool_invoked", tool="get_nomi", attempt=1)

    close_file_logging()

    found = False
    with log_file.open() as f:
        for line in f:
            entry = json.loads(line)
            if entry.get("message") == "tool_invoked":
                found = True
                assert entry["tool"] == "get_nomi"
                assert entry["attempt"] == 1
                assert entry["level"] == "INFO"
                break

    assert found, "Log entry with structlog context not found in JSONL"


def test_jsonl_file_handler_writes_exception_traceback(tmp_path: Path) -> None:
    """log.exception() records the rendered traceback, not just exc_info=true."""
    log_file = tmp_path / "nomi.jsonl"
    configure_logging(verbosity=0, log_file=log_file)

    logger = get_logger("test.exception")
    try:
        raise RuntimeError("kaboom")
    except RuntimeError:
        logger.exception("tool_crashed", tool="list_nomis")

    close_file_logging()

    entries = [json.loads(line) for line in log_file.read_text().splitlines()]
    entry = next(e for e in entries if e.get("message") == "tool_crashed")
    assert entry["level"] == "ERROR"
    assert entry["tool"] == "list_nomis"
    assert "exc_info" not in entry
    assert "Traceback" in entry["exception"]
    assert "RuntimeError: kaboom" in entry["exception"]


def test_console_output_has_single_level_and_time(capsys: pytest.CaptureFixture[str]) -> None:
    """The rendered message carries neither level nor timestamp; Rich shows them once."""
    configure_logging(verbosity=0)

    get_logger("test.console").warning("tool_failed", tool="get_nomi")

    err = capsys.readouterr().err
    assert "tool_failed" in err
    assert "tool=get_nomi" in err
    assert err.lower().count("warning") == 1
    assert re.search(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}", err) is None
