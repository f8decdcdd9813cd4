# src/pyco/core/Pyco.py
"""pyco.core.Pyco
=================
Pyco: the editor controller.

Pyco wires the pieces of the editor together and runs the main loop:

- `KeyBinder` reads one key (with a short timeout) and turns it into an
  `Event`.
- `EditorState.apply` performs at most one edit, clamps the cursor and
  scrolls the viewport.
- `DrawScreen` redraws the whole screen when anything changed.

The loop is single threaded. The state is owned by this object and only
mutated between key reads. A Quit event ends the loop; storage and memory
errors are logged and propagate to the caller, which restores the terminal
and exits.
"""

import curses
import logging
from typing import Any, Optional

from pyco.core.EditorState import EditorState
from pyco.core.Events import EventKind
from pyco.ui.DrawScreen import DrawScreen
from pyco.ui.KeyBinder import KeyBinder
from pyco.ui.TerminalAppMode import TerminalAppMode
from pyco.utils.logging_config import logger


## ==================== Pyco Class ====================
class Pyco:
    """Main editor object.

    Attributes:
        stdscr (curses.window): The curses window the editor draws into.
        config (dict): Merged configuration.
        state (EditorState): Document, cursor, viewport and status.
        keybinder (KeyBinder): Key code to event translation.
        drawer (DrawScreen): Renderer.
    """

    def __init__(
        self,
        stdscr: "curses.window",
        config: dict[str, Any],
        path: Optional[str] = None,
    ) -> None:
        self.stdscr = stdscr
        self.config = config

        rows, cols = stdscr.getmaxyx()
        self.state = EditorState.from_config(config, path, size=(rows, cols))
        self.keybinder = KeyBinder(config, stdscr)
        self.drawer = DrawScreen(stdscr)
        self.terminal_mode = TerminalAppMode(self.keybinder.input_timeout_ms)
        logging.info(f"Pyco initialized for {path or '[No Name]'} at {cols}x{rows}")

    @property
    def running(self) -> bool:
        return self.state.running

    def handle_event_once(self) -> bool:
        """Reads and applies a single event. Returns True if a redraw is needed."""
        event = self.keybinder.read_event()
        if event.kind is EventKind.NO_EVENT:
            return False
        return self.state.apply(event)

    def run(self) -> None:
        """The main event loop. Runs until a Quit event arrives."""
        logger.info("Editor main loop started.")
        self.terminal_mode.enter(self.stdscr)
        try:
            self.state.adjust()
            self.drawer.draw(self.state)
            while self.state.running:
                if self.handle_event_once():
                    self.drawer.draw(self.state)
        except KeyboardInterrupt:
            logger.info("Main loop interrupted by KeyboardInterrupt.")
        except Exception as e:
            logger.critical("Unhandled exception in main loop: %s", e, exc_info=True)
            raise
        finally:
            self.terminal_mode.exit()
        logger.info("Editor main loop finished.")
