# src/pyco/core/EditorState.py
"""pyco.core.EditorState
========================

The single value that holds everything the editor loop mutates: the
document, the cursor, the viewport, the terminal size, the file path and
the status line message. Events are applied through `apply`, which runs at
most one edit, re-clamps the cursor and re-adjusts the viewport, so the
cursor and viewport invariants hold whenever `apply` returns.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from pyco.core import Editing
from pyco.core.Cursor import Cursor
from pyco.core.Document import DEFAULT_LINE_CAPACITY, Document
from pyco.core.Events import Event, EventKind
from pyco.core.Viewport import (
    DEFAULT_HORIZONTAL_MARGIN,
    StatusSummary,
    Viewport,
    format_status,
)
from pyco.utils import storage

STATUS_ROWS = 1
DEFAULT_SCREEN_SIZE = (24, 80)


def _config_int(section: dict, key: str, default: int, minimum: int) -> int:
    """Reads an integer setting, falling back to `default` when unusable.

    Non-numeric values (booleans included) are logged and replaced by the
    default; values below `minimum` are raised to it.
    """
    raw = section.get(key, default)
    if isinstance(raw, bool):
        logging.warning(f"Config editor.{key}={raw!r} is not a number; using {default}")
        return default
    try:
        value = int(raw)
    except (TypeError, ValueError):
        logging.warning(f"Config editor.{key}={raw!r} is not a number; using {default}")
        return default
    if value < minimum:
        logging.warning(f"Config editor.{key}={value} is below {minimum}; using {minimum}")
        return minimum
    return value


@dataclass
class EditorState:
    document: Document = field(default_factory=Document)
    cursor: Cursor = field(default_factory=Cursor)
    viewport: Viewport = field(default_factory=Viewport)
    screen_rows: int = DEFAULT_SCREEN_SIZE[0]
    screen_cols: int = DEFAULT_SCREEN_SIZE[1]
    path: Optional[str] = None
    modified: bool = False
    status_message: str = ""
    running: bool = True

    @classmethod
    def from_config(
        cls,
        config: dict,
        path: Optional[str] = None,
        size: tuple[int, int] = DEFAULT_SCREEN_SIZE,
    ) -> "EditorState":
        """Creates a state sized to `size`, loading `path` when it exists."""
        editor_cfg = config.get("editor", {})
        if not isinstance(editor_cfg, dict):
            logging.warning(f"Ignoring non-table [editor] config: {editor_cfg!r}")
            editor_cfg = {}
        capacity = _config_int(
            editor_cfg, "initial_line_capacity", DEFAULT_LINE_CAPACITY, minimum=1
        )
        margin = _config_int(
            editor_cfg, "horizontal_margin", DEFAULT_HORIZONTAL_MARGIN, minimum=0
        )

        if path and storage.exists(path):
            document = Document.from_lines(storage.load(path), capacity)
            logging.info(f"Opened '{path}' ({document.count()} lines)")
        else:
            document = Document(capacity)
            if path:
                logging.info(f"'{path}' does not exist yet; starting empty")

        state = cls(
            document=document,
            viewport=Viewport(margin=margin),
            screen_rows=size[0],
            screen_cols=size[1],
            path=path,
        )
        state.adjust()
        return state

    # --- Geometry ---
    @property
    def text_rows(self) -> int:
        return max(1, self.screen_rows - STATUS_ROWS)

    @property
    def text_cols(self) -> int:
        return max(1, self.screen_cols)

    def resize(self, rows: int, cols: int) -> None:
        self.screen_rows, self.screen_cols = rows, cols
        logging.debug(f"Screen resized to {cols}x{rows}")

    def adjust(self) -> bool:
        """Clamps the cursor into the document, then scrolls it into view."""
        self.cursor.clamp(self.document)
        return self.viewport.adjust(self.cursor, self.text_rows, self.text_cols)

    # --- Render inputs ---
    def visible_lines(self) -> list[bytes]:
        return self.viewport.visible_lines(self.document, self.text_rows, self.text_cols)

    def screen_cursor(self) -> tuple[int, int]:
        return self.viewport.screen_cursor(self.cursor)

    def status_summary(self) -> StatusSummary:
        return self.viewport.status_summary(self.cursor, self.text_rows, self.text_cols)

    def status_text(self) -> str:
        return format_status(self.status_summary())

    def _set_status_message(self, message: str) -> None:
        if self.status_message != message:
            self.status_message = message
            logging.debug(f"Status message set to: '{message}'")

    # --- Event dispatch ---
    def apply(self, event: Event) -> bool:
        """Applies one event. Returns True if a redraw is needed."""
        handler = self._handlers().get(event.kind)
        changed = handler(event) if handler else False
        if self.adjust():
            changed = True
        return changed

    def _handlers(self) -> dict[EventKind, Callable[[Event], bool]]:
        return {
            EventKind.PRINTABLE_CHAR: self._on_printable,
            EventKind.ENTER: lambda _e: Editing.insert_newline(self),
            EventKind.BACKSPACE: lambda _e: Editing.delete_char(self),
            EventKind.MOVE_UP: lambda _e: self.cursor.move_up(self.document),
            EventKind.MOVE_DOWN: lambda _e: self.cursor.move_down(self.document),
            EventKind.MOVE_LEFT: lambda _e: self.cursor.move_left(self.document),
            EventKind.MOVE_RIGHT: lambda _e: self.cursor.move_right(self.document),
            EventKind.SAVE: lambda _e: self.save(),
            EventKind.QUIT: self._on_quit,
            EventKind.RESIZE: self._on_resize,
        }

    def _on_printable(self, event: Event) -> bool:
        if event.byte is None:
            return False
        return Editing.insert_char(self, event.byte)

    def _on_resize(self, event: Event) -> bool:
        if event.rows is None or event.cols is None:
            return False
        self.resize(event.rows, event.cols)
        return True

    def _on_quit(self, _event: Event) -> bool:
        logging.info("Quit requested")
        self.running = False
        return False

    def save(self) -> bool:
        """Writes the document to `path`. Storage errors propagate."""
        if not self.path:
            self._set_status_message("No file name; nothing saved")
            return True
        lines = self.document.lines()
        written = storage.save(self.path, lines)
        self.modified = False
        self._set_status_message(f"Saved {len(lines)} lines, {written} bytes")
        logging.info(f"Saved '{self.path}' ({written} bytes)")
        return True
