# src/pyco/utils/logging_config.py
"""pyco.utils.logging_config
===========================

Logging setup for the pyco editor.

While curses owns the terminal nothing may be printed to it, so the default
configuration logs to a rotating file only. Handlers:

    - Rotating file handler for ``pyco.log`` (``logging.log_file``).
    - Optional console handler on stderr (``log_to_console``).
    - Optional rotating ``error.log`` for ERROR and CRITICAL records.
    - Optional ``keytrace.log`` for the ``pyco.keyevents`` logger, enabled by
      ``PYCO_KEYTRACE=1``.

Globals:
    logger: Main application logger ("pyco").
    KEY_LOGGER: Logger for key-press trace events ("pyco.keyevents").
"""

import logging
import logging.handlers
import os
import sys
import tempfile
from typing import Any, Optional


# These loggers stay unconfigured until setup_logging() attaches handlers.
logger = logging.getLogger("pyco")
KEY_LOGGER = logging.getLogger("pyco.keyevents")


def _ensure_parent_dir(filename: str) -> str:
    """Creates the directory for `filename`, falling back to the temp dir."""
    log_dir = os.path.dirname(filename)
    if log_dir and not os.path.exists(log_dir):
        try:
            os.makedirs(log_dir)
        except OSError as e_mkdir:
            print(f"Error creating log directory '{log_dir}': {e_mkdir}", file=sys.stderr)
            filename = os.path.join(tempfile.gettempdir(), os.path.basename(filename))
            print(f"Logging to temporary file: '{filename}'", file=sys.stderr)
    return filename


def setup_logging(config: Optional[dict[str, Any]] = None) -> None:
    """Configures application-wide logging handlers and log levels.

    Existing handlers on the root logger are replaced, so calling this more
    than once (e.g. in tests) does not duplicate records.

    Args:
        config (dict | None): Application configuration. Only the
            ``["logging"]`` section is read; recognised keys are
            ``file_level`` (default ``"DEBUG"``), ``console_level``
            (default ``"WARNING"``), ``log_to_console`` (default ``False``),
            ``separate_error_log`` (default ``False``) and ``log_file``
            (default ``"pyco.log"``).

    Notes:
        Never raises. I/O or permission problems are reported on stderr and
        logging continues with whatever handlers could be created.
    """
    if config is None:
        config = {}
    logging_config = config.get("logging", {})

    log_file_level_str = str(logging_config.get("file_level", "DEBUG")).upper()
    log_file_level = getattr(logging, log_file_level_str, logging.DEBUG)
    log_filename = _ensure_parent_dir(logging_config.get("log_file", "pyco.log"))

    file_formatter = logging.Formatter(
        "%(asctime)s - %(levelname)-8s - %(name)-15s - %(message)s (%(filename)s:%(lineno)d)"
    )
    file_handler = None
    try:
        file_handler = logging.handlers.RotatingFileHandler(
            log_filename, maxBytes=2 * 1024 * 1024, backupCount=5, encoding="utf-8"
        )
        file_handler.setFormatter(file_formatter)
        file_handler.setLevel(log_file_level)
    except OSError as e_fh:
        print(
            f"Error setting up file logger for '{log_filename}': {e_fh}. File logging may be impaired.",
            file=sys.stderr,
        )

    console_handler = None
    if logging_config.get("log_to_console", False):
        console_level_str = str(logging_config.get("console_level", "WARNING")).upper()
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(
            logging.Formatter("%(levelname)-8s - %(name)-12s - %(message)s")
        )
        console_handler.setLevel(getattr(logging, console_level_str, logging.WARNING))

    error_file_handler = None
    if logging_config.get("separate_error_log", False):
        error_log_filename = _ensure_parent_dir("error.log")
        try:
            error_file_handler = logging.handlers.RotatingFileHandler(
                error_log_filename, maxBytes=1 * 1024 * 1024, backupCount=3, encoding="utf-8"
            )
            error_file_handler.setFormatter(file_formatter)
            error_file_handler.setLevel(logging.ERROR)
        except OSError as e_efh:
            print(
                f"Error setting up separate error log '{error_log_filename}': {e_efh}.",
                file=sys.stderr,
            )

    root_logger = logging.getLogger()
    root_logger.handlers = []
    for handler in (file_handler, console_handler, error_file_handler):
        if handler:
            root_logger.addHandler(handler)
    root_logger.setLevel(log_file_level)

    # Key event logger
    KEY_LOGGER.propagate = False
    KEY_LOGGER.setLevel(logging.DEBUG)
    KEY_LOGGER.handlers = []

    if os.environ.get("PYCO_KEYTRACE", "").lower() in {"1", "true", "yes"}:
        try:
            key_trace_handler = logging.handlers.RotatingFileHandler(
                "keytrace.log", maxBytes=1 * 1024 * 1024, backupCount=3, encoding="utf-8"
            )
            key_trace_handler.setFormatter(logging.Formatter("%(asctime)s - %(message)s"))
            KEY_LOGGER.addHandler(key_trace_handler)
            KEY_LOGGER.disabled = False
            logging.info("Key event tracing enabled, logging to 'keytrace.log'.")
        except OSError as e_keytrace:
            logging.error(f"Failed to set up key trace logging: {e_keytrace}", exc_info=True)
            KEY_LOGGER.disabled = True
    else:
        KEY_LOGGER.addHandler(logging.NullHandler())
        KEY_LOGGER.disabled = True
        logging.debug("Key event tracing is disabled.")

    logging.info(
        "Logging setup complete. Root logger level: %s.",
        logging.getLevelName(root_logger.level),
    )
