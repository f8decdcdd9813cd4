# src/pyco/main.py
"""
pyco Main Entry Point
=====================

Launches the pyco editor:
1) Environment Loading: reads ~/.config/pyco/.env early (PYCO_KEYTRACE, PYCO_LOG_LEVEL).
2) Configuration & Logging: loads config and initializes logging ASAP.
3) Argument Check: exactly one file path is required.
4) Curses Wrapper: safely initializes/tears down curses to avoid terminal corruption.
5) Application Run: instantiates Pyco and starts its main loop.

Exit status is 0 on a normal quit and 1 on usage errors or fatal errors.
"""

from __future__ import annotations

import curses
import locale
import logging
import os
import sys
from typing import Any, Optional

from dotenv import load_dotenv

from pyco.core.errors import PycoError
from pyco.core.Pyco import Pyco
from pyco.utils.logging_config import setup_logging
from pyco.utils.utils import get_config_dir, load_config

USAGE = "Usage: pyco <file>"

logger = logging.getLogger("pyco")


def main_app_runner(stdscr: curses.window, config: dict[str, Any], path: str) -> None:
    """Target for `curses.wrapper`: builds the editor and runs it."""
    editor = Pyco(stdscr, config=config, path=path)
    editor.run()


def start(argv: Optional[list[str]] = None) -> int:
    """Runs the editor and returns the process exit status."""
    argv = sys.argv if argv is None else argv

    load_dotenv(dotenv_path=get_config_dir() / ".env")
    config = load_config()
    setup_logging(config)

    if len(argv) != 2 or not argv[1].strip():
        print(USAGE, file=sys.stderr)
        return 1
    path = os.path.expanduser(argv[1].strip())

    logger.info("pyco editor starting up for %s", path)

    try:
        locale.setlocale(locale.LC_ALL, "")
    except locale.Error:
        logger.warning("Could not set system locale. Character rendering may be affected.")

    # Keep ESC-prefixed arrow sequences snappy on raw terminals.
    os.environ.setdefault("ESCDELAY", "25")

    try:
        curses.wrapper(main_app_runner, config, path)
    except PycoError as e:
        logger.critical("Fatal editor error: %s", e, exc_info=True)
        print(f"pyco: {e}", file=sys.stderr)
        return 1
    except MemoryError:
        logger.critical("Out of memory while editing %s", path, exc_info=True)
        print("pyco: out of memory", file=sys.stderr)
        return 1

    logger.info("pyco editor shut down gracefully.")
    return 0


def main() -> None:
    sys.exit(start())


if __name__ == "__main__":
    main()
