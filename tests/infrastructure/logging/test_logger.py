"""Tests for the ledger logging helpers."""

import logging
from unittest.mock import MagicMock

from honey_ledger.infrastructure.logging import logger as logger_module


def _stamp(monkeypatch, tmp_path) -> None:
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20240101"),
    )


def test_builder_writes_under_project_logs(tmp_path, monkeypatch):
    """LoggerBuilder should place the file in logs/<subdir>/<stamp>_<prefix>."""
    _stamp(monkeypatch, tmp_path)

    builder = (
        logger_module.LoggerBuilder()
        .name("honey_ledger.test.builder")
        .subdir("ledger")
        .prefix("ledger_logs")
        .level(logging.WARNING)
    )
    built = builder.build()

    assert built.level == logging.WARNING
    assert built.propagate is False
    file_handlers = [
        h for h in built.handlers if isinstance(h, logging.FileHandler)
    ]
    assert [h.baseFilename for h in file_handlers] == [
        str(tmp_path / "logs" / "ledger" / "20240101_ledger_logs.log")
    ]
    assert len(built.handlers) == 2
    # A second build reuses the configured logger.
    assert builder.build() is built
    assert len(built.handlers) == 2


def test_builder_without_console_uses_custom_factories(tmp_path, monkeypatch):
    _stamp(monkeypatch, tmp_path)
    seen = {}

    def file_factory(path, fmt):
        seen["path"] = path
        seen["fmt"] = fmt
        return logging.NullHandler()

    def console_factory(fmt):
        raise AssertionError("console handler must not be created")

    built = (
        logger_module.LoggerBuilder()
        .name("honey_ledger.test.quiet")
        .subdir("usage")
        .prefix("usage_logs")
        .console(False)
        .formatter(lambda: logging.Formatter("%(message)s"))
        .file_handler(file_factory)
        .console_handler(console_factory)
        .build()
    )

    assert seen["path"] == tmp_path / "logs" / "usage" / "20240101_usage_logs.log"
    assert seen["fmt"]._fmt == "%(message)s"
    assert len(built.handlers) == 1


def test_default_handlers_use_formatter(tmp_path):
    """Default handlers should log at INFO with the given formatter."""
    fmt = logger_module.LoggerBuilder._default_formatter()
    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "ledger.log",
        fmt,
    )
    console_handler = logger_module.LoggerBuilder._default_console_handler(fmt)

    assert file_handler.level == logging.INFO
    assert file_handler.formatter is fmt
    assert console_handler.level == logging.INFO
    assert console_handler.formatter is fmt
    file_handler.close()


def test_logger_delegates_every_level(monkeypatch):
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    monkeypatch.setattr(logger_module.Logger, "_instance", None)

    wrapped = logger_module.Logger("honey_ledger.test")
    wrapped.info("hello")
    wrapped.warning("warn")
    wrapped.error("err")
    wrapped.debug("dbg")
    wrapped.critical("crit")

    fake_logger.info.assert_called_with("hello")
    fake_logger.warning.assert_called_with("warn")
    fake_logger.error.assert_called_with("err")
    fake_logger.debug.assert_called_with("dbg")
    fake_logger.critical.assert_called_with("crit")
    assert logger_module.Logger("other") is wrapped


def test_app_and_usage_loggers_are_distinct_singletons(monkeypatch):
    """Each logger class keeps its own shared instance."""
    built_names = []

    def _fake_build(self):
        built_names.append((self._name, self._subdir, self._console))
        return MagicMock()

    monkeypatch.setattr(logger_module.LoggerBuilder, "build", _fake_build)
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)

    app_logger = logger_module.get_app_logger()
    usage_logger = logger_module.get_usage_logger()

    assert logger_module.get_app_logger() is app_logger
    assert logger_module.get_usage_logger() is usage_logger
    assert app_logger is not usage_logger
    assert built_names == [
        ("honey_ledger", "app", True),
        ("honey_ledger.usage", "usage", False),
    ]
