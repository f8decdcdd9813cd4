# src/pyco/ui/DrawScreen.py
"""DrawScreen.py
========================
DrawScreen renders the editor state onto a curses window.

Rendering is split in two steps so the layout can be checked without a
terminal:

1. `build_frame(state)` turns the viewport output and the status summary into
   a fixed, ordered list of `DrawInstruction` values:
   - one ``erase``,
   - one ``addstr`` per text row (the visible slice of a line, or ``~`` for
     rows past the end of the document),
   - one ``addstr`` for the status line in reverse video, padded to the full
     width,
   - one ``move`` placing the physical cursor.
2. `draw(state)` executes those instructions on the window and refreshes.

Line bytes are shown one cell per byte. Bytes outside the printable ASCII
range are drawn as ``?`` so the screen column always equals the byte column
minus the horizontal scroll.
"""

import curses
import logging
import os
from typing import TYPE_CHECKING, NamedTuple, Optional

from wcwidth import wcswidth, wcwidth

from pyco.core.Editing import is_printable

if TYPE_CHECKING:
    from pyco.core.EditorState import EditorState

EMPTY_ROW_MARKER = "~"
PLACEHOLDER = "?"


class DrawInstruction(NamedTuple):
    op: str  # "erase" | "addstr" | "move"
    row: int = 0
    col: int = 0
    text: str = ""
    attr: int = 0


def bytes_to_cells(data: bytes) -> str:
    return "".join(chr(b) if is_printable(b) else PLACEHOLDER for b in data)


def display_width(text: str) -> int:
    if text.isascii():
        return len(text)
    width = wcswidth(text)
    if width < 0:
        width = sum(max(wcwidth(ch), 0) for ch in text)
    return width


def truncate_string(s: str, max_width: int) -> str:
    """Return `s` clipped to `max_width` terminal cells."""
    result: list[str] = []
    consumed = 0
    for ch in s:
        w = wcwidth(ch)
        if w < 0:
            w = 1
        if consumed + w > max_width:
            break
        result.append(ch)
        consumed += w
    return "".join(result)


## ================= class DrawScreen ==============================
class DrawScreen:
    """Renders `EditorState` onto a curses window.

    Attributes:
        stdscr (curses.window): The window drawn into.
    """

    def __init__(self, stdscr: Optional["curses.window"] = None) -> None:
        self.stdscr = stdscr

    # --- Frame layout ---
    def build_frame(self, state: "EditorState") -> list[DrawInstruction]:
        rows, cols = state.text_rows, state.text_cols
        frame = [DrawInstruction("erase")]

        visible = state.visible_lines()
        for screen_row in range(rows):
            if screen_row < len(visible):
                text = bytes_to_cells(visible[screen_row])
            else:
                text = EMPTY_ROW_MARKER
            frame.append(DrawInstruction("addstr", screen_row, 0, text))

        frame.append(
            DrawInstruction(
                "addstr", rows, 0, self.compose_status_line(state, cols), curses.A_REVERSE
            )
        )

        cursor_row, cursor_col = state.screen_cursor()
        frame.append(DrawInstruction("move", cursor_row, cursor_col))
        return frame

    def compose_status_line(self, state: "EditorState", width: int) -> str:
        """Status text on the left, file name on the right, message in between.

        The result is exactly `width` cells wide.
        """
        left = f" {state.status_text()} "
        fname = os.path.basename(state.path) if state.path else "[No Name]"
        right = f" {fname}{'*' if state.modified else ''} "

        left_w = display_width(left)
        right_w = display_width(right)
        if left_w + right_w > width:
            right = truncate_string(right, max(0, width - left_w))
            right_w = display_width(right)

        msg = state.status_message
        spacing = max(0, width - left_w - right_w)
        if display_width(msg) > spacing:
            msg = truncate_string(msg, max(0, spacing - 1))
        middle = msg + " " * (spacing - display_width(msg))

        line = truncate_string(left + middle + right, width)
        return line + " " * (width - display_width(line))

    # --- Painting ---
    def draw(self, state: "EditorState") -> None:
        """Paints one full frame and pushes it to the terminal."""
        if self.stdscr is None:
            return
        for instruction in self.build_frame(state):
            self._apply(instruction)
        try:
            self.stdscr.noutrefresh()
            curses.doupdate()
        except curses.error as e:
            logging.error(f"Curses doupdate error: {e}")

    def _apply(self, instruction: DrawInstruction) -> None:
        try:
            if instruction.op == "erase":
                self.stdscr.erase()
            elif instruction.op == "addstr":
                self.stdscr.addstr(
                    instruction.row, instruction.col, instruction.text, instruction.attr
                )
            elif instruction.op == "move":
                self.stdscr.move(instruction.row, instruction.col)
        except curses.error:
            # Writing the bottom-right cell raises after the text is drawn.
            logging.debug("curses.error on %s at (%d,%d)", instruction.op,
                          instruction.row, instruction.col)
