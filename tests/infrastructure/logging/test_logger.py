"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

import pytest

from src.infrastructure.logging import logger as logger_module


@pytest.fixture
def fresh_singletons(monkeypatch):
    """Reset logger singletons so each test builds its own."""
    for cls in (
        logger_module.Logger,
        logger_module.AppLogger,
        logger_module.UsageLogger,
    ):
        monkeypatch.setattr(cls, "_instance", None)


def test_builder_writes_dated_file_under_subdir(tmp_path, monkeypatch):
    """Files land in logs/<subdir>/<stamp>_<prefix>.log."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20240315"),
    )

    builder = (
        logger_module.LoggerBuilder()
        .name("ledger-test-audit")
        .subdir("usage")
        .prefix("usage_logs")
        .level(logging.DEBUG)
        .formatter(logger_module.LoggerBuilder._default_formatter)
        .file_handler(logger_module.LoggerBuilder._default_file_handler)
    )
    built = builder.build()

    try:
        handlers = [
            h for h in built.handlers if isinstance(h, logging.FileHandler)
        ]
        assert built.level == logging.DEBUG
        assert built.propagate is False
        assert len(handlers) == 1
        assert handlers[0].baseFilename == str(
            tmp_path / "logs" / "usage" / "20240315_usage_logs.log"
        )
        assert not any(
            type(h) is logging.StreamHandler for h in built.handlers
        )
        assert builder.build() is built
    finally:
        for handler in list(built.handlers):
            handler.close()
            built.removeHandler(handler)


def test_console_flag_adds_stream_handler(tmp_path, monkeypatch):
    """Console output is opt-in and uses the same formatter."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    console = MagicMock(spec=logging.Handler)

    built = (
        logger_module.LoggerBuilder()
        .name("ledger-test-console")
        .console(True)
        .console_handler(lambda fmt: console)
        .build()
    )

    try:
        assert console in built.handlers
    finally:
        for handler in list(built.handlers):
            built.removeHandler(handler)
            if handler is not console:
                handler.close()


def test_wrapper_delegates_every_level(monkeypatch, fresh_singletons):
    """Logger forwards each level, exception included."""
    fake = MagicMock()
    monkeypatch.setattr(logger_module.LoggerBuilder, "build", lambda self: fake)

    wrapper = logger_module.Logger("ledger")
    wrapper.debug("d")
    wrapper.info("i")
    wrapper.warning("w")
    wrapper.error("e")
    wrapper.critical("c")
    wrapper.exception("x")

    fake.debug.assert_called_with("d")
    fake.info.assert_called_with("i")
    fake.warning.assert_called_with("w")
    fake.error.assert_called_with("e")
    fake.critical.assert_called_with("c")
    fake.exception.assert_called_with("x")


def test_app_and_usage_loggers_are_distinct_singletons(
    monkeypatch,
    fresh_singletons,
):
    """The audit trail never shares a logger with operational messages."""
    built_names = []

    def fake_build(self):
        built_names.append((self._name, self._subdir, self._console))
        return MagicMock()

    monkeypatch.setattr(logger_module.LoggerBuilder, "build", fake_build)

    app_logger = logger_module.get_app_logger()
    usage_logger = logger_module.get_usage_logger()

    assert app_logger is logger_module.get_app_logger()
    assert usage_logger is logger_module.get_usage_logger()
    assert app_logger is not usage_logger
    assert built_names == [
        ("finance_ledger", "app", True),
        ("finance_ledger.usage", "usage", False),
    ]
