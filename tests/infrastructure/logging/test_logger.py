"""Tests for the networth loggers."""

import logging
from unittest.mock import MagicMock

import pytest

from src.infrastructure.logging import logger as logger_module

LOGGER_NAMES = ("networth.app", "networth.usage", "networth.test.builder")


def _drop_handlers() -> None:
    for name in LOGGER_NAMES:
        target = logging.getLogger(name)
        for handler in list(target.handlers):
            handler.close()
            target.removeHandler(handler)


@pytest.fixture()
def isolated_logs(tmp_path, monkeypatch):
    """Point log files at tmp_path and start from unbuilt singletons."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20240101"),
    )
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)
    monkeypatch.delenv("NETWORTH_LOG_CONSOLE", raising=False)
    _drop_handlers()
    yield tmp_path
    _drop_handlers()


def _file_paths(target: logging.Logger) -> list[str]:
    return [
        handler.baseFilename
        for handler in target.handlers
        if isinstance(handler, logging.FileHandler)
    ]


def test_app_and_usage_logs_go_to_their_own_files(isolated_logs):
    app_logger = logger_module.get_app_logger()
    usage_logger = logger_module.get_usage_logger()

    assert app_logger.logger.name == "networth.app"
    assert usage_logger.logger.name == "networth.usage"
    assert _file_paths(app_logger.logger) == [
        str(isolated_logs / "logs" / "app" / "20240101_app_logs.log")
    ]
    assert _file_paths(usage_logger.logger) == [
        str(isolated_logs / "logs" / "usage" / "20240101_usage_logs.log")
    ]
    assert app_logger.logger.propagate is False
    assert logger_module.get_app_logger() is app_logger


def test_messages_reach_the_log_file(isolated_logs):
    app_logger = logger_module.get_app_logger()

    app_logger.warning("Balance recorded for savings")
    for handler in app_logger.logger.handlers:
        handler.flush()

    log_file = isolated_logs / "logs" / "app" / "20240101_app_logs.log"
    content = log_file.read_text(encoding="utf-8")
    assert "networth.app | WARNING | Balance recorded for savings" in content


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("1", True),
        ("true", True),
        (" YES ", True),
        ("", False),
        ("0", False),
        ("off", False),
    ],
)
def test_console_switch_reads_environment(monkeypatch, raw, expected):
    monkeypatch.setenv("NETWORTH_LOG_CONSOLE", raw)

    assert logger_module._console_enabled() is expected


def test_console_switch_adds_stream_handler(isolated_logs, monkeypatch):
    monkeypatch.setenv("NETWORTH_LOG_CONSOLE", "true")

    app_logger = logger_module.get_app_logger()

    kinds = sorted(
        type(handler).__name__ for handler in app_logger.logger.handlers
    )
    assert kinds == ["FileHandler", "StreamHandler"]


def test_builder_reuses_handlers_on_rebuild(isolated_logs):
    builder = (
        logger_module.LoggerBuilder()
        .name("networth.test.builder")
        .subdir("cli")
        .prefix("cli_logs")
        .level(logging.DEBUG)
    )

    first = builder.build()
    second = builder.build()

    assert first is second
    assert first.level == logging.DEBUG
    assert len(first.handlers) == 1
    assert (isolated_logs / "logs" / "cli").is_dir()


def test_facade_forwards_arguments(monkeypatch):
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)

    usage_logger = logger_module.get_usage_logger()
    usage_logger.info("Page view: %s", "Dashboard")
    usage_logger.error("failed", exc_info=True)

    fake_logger.info.assert_called_once_with("Page view: %s", "Dashboard")
    fake_logger.error.assert_called_once_with("failed", exc_info=True)
