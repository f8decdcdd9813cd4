# tests/utils/test_logging_config.py
"""Unit tests for logging configuration utility.
=================================================

Tests for the logging setup utility in `pyco.utils.logging_config`.

This module verifies that `setup_logging`:
- Creates a rotating file handler for the main log and a separate error log
  when `separate_error_log` is enabled.
- Honors the configured levels for each handler.
- Leaves the console alone unless `log_to_console` is set.
- Keeps the key trace logger silent unless `PYCO_KEYTRACE` is set.

Each test runs in a temporary working directory to avoid touching real files.
"""

import logging

from pyco.utils import logging_config


def test_setup_logging_creates_handlers(tmp_path, monkeypatch) -> None:
    """Main rotating file handler plus a separate error log, with their levels."""
    monkeypatch.chdir(tmp_path)

    logging_config.setup_logging(
        {
            "logging": {
                "file_level": "INFO",
                "console_level": "ERROR",
                "log_to_console": False,
                "separate_error_log": True,
                "log_file": str(tmp_path / "logs" / "pyco.log"),
            }
        }
    )

    root = logging.getLogger()
    names = {type(h).__name__ for h in root.handlers}
    assert "RotatingFileHandler" in names
    assert len(root.handlers) == 2
    assert root.handlers[0].level == logging.INFO
    assert root.handlers[1].level == logging.ERROR
    # The missing log directory is created on demand.
    assert (tmp_path / "logs").is_dir()


def test_setup_logging_console_handler_is_opt_in(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    logging_config.setup_logging({"logging": {"log_to_console": True, "console_level": "ERROR"}})
    root = logging.getLogger()
    stream_handlers = [
        h for h in root.handlers if type(h) is logging.StreamHandler
    ]
    assert len(stream_handlers) == 1
    assert stream_handlers[0].level == logging.ERROR

    # Calling again replaces handlers instead of stacking them.
    logging_config.setup_logging({"logging": {"log_to_console": False}})
    assert len(logging.getLogger().handlers) == 1


def test_key_trace_disabled_by_default(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("PYCO_KEYTRACE", raising=False)

    logging_config.setup_logging({})

    assert logging_config.KEY_LOGGER.disabled is True
    assert logging_config.KEY_LOGGER.propagate is False
    assert not (tmp_path / "keytrace.log").exists()


def test_key_trace_enabled_by_env(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PYCO_KEYTRACE", "1")

    logging_config.setup_logging({})
    logging_config.KEY_LOGGER.debug("key=%r", 17)

    assert logging_config.KEY_LOGGER.disabled is False
    assert (tmp_path / "keytrace.log").exists()
