# src/pyco/ui/TerminalAppMode.py
from __future__ import annotations

import curses
import logging
from typing import Optional


class TerminalAppMode:
    """
    Put the terminal into the state the editor loop expects:

    - raw + noecho, so Ctrl+Q / Ctrl+S reach the editor instead of being
      taken by flow control or signal generation.
    - keypad(True), so arrow keys arrive as single curses key codes.
    - A short input timeout, so the loop wakes up to service resizes.
    - No curses-level scrolling.

    Always pair `enter(stdscr)` with `exit()` (try/finally).
    """

    def __init__(self, timeout_ms: int = 100) -> None:
        self.timeout_ms = timeout_ms
        self._entered: bool = False
        self._stdscr: Optional[curses.window] = None

    def __enter__(self) -> "TerminalAppMode":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.exit()
        return False

    def enter(self, stdscr: curses.window) -> None:
        self._stdscr = stdscr

        try:
            curses.raw()
        except curses.error:
            curses.cbreak()
        curses.noecho()
        stdscr.keypad(True)

        try:
            curses.curs_set(1)
        except curses.error:
            logging.debug("TerminalAppMode: cursor visibility not supported.")

        stdscr.scrollok(False)
        stdscr.timeout(self.timeout_ms)
        stdscr.erase()
        stdscr.refresh()

        self._entered = True
        logging.debug("TerminalAppMode: entered (raw, keypad, timeout=%dms).", self.timeout_ms)

    def exit(self) -> None:
        if not self._entered:
            return

        try:
            if self._stdscr is not None:
                self._stdscr.keypad(False)
        except curses.error:
            logging.debug("TerminalAppMode: keypad(False) failed on exit.")

        try:
            curses.noraw()
        except curses.error:
            curses.nocbreak()
        curses.echo()

        self._entered = False
        logging.debug("TerminalAppMode: exited (restored terminal modes).")
