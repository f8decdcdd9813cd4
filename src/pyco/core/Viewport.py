# src/pyco/core/Viewport.py
"""pyco.core.Viewport
=====================

Scroll arithmetic that maps document coordinates onto a bounded grid.

The viewport is the pair `(top_row, left_col)`: the first document row and
the first byte column that are visible. It only moves through `adjust`,
which keeps the cursor inside the visible band:

    top_row  <= cursor.row < top_row  + rows
    left_col <= cursor.col < left_col + cols

Horizontal scrolling uses a usable width of `cols - margin` so the cursor
stays clear of the right edge, with a floor of one column.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import NamedTuple

from pyco.core.Cursor import Cursor
from pyco.core.Document import Document

DEFAULT_HORIZONTAL_MARGIN = 10


class StatusSummary(NamedTuple):
    """1-based cursor position and grid size, as shown in the status line."""

    line: int
    column: int
    cols: int
    rows: int


@dataclass(slots=True)
class Viewport:
    top_row: int = 0
    left_col: int = 0
    margin: int = DEFAULT_HORIZONTAL_MARGIN

    def usable_width(self, cols: int) -> int:
        """Columns the cursor may use before the view scrolls right.

        Args:
            cols (int): Width of the text area.

        Returns:
            int: `cols - margin`, never wider than `cols` and never below 1.
        """
        cols = max(1, cols)
        return min(cols, max(1, cols - self.margin))

    def adjust(self, cursor: Cursor, rows: int, cols: int) -> bool:
        """Scrolls so the cursor is visible.

        Args:
            cursor (Cursor): Cursor in document coordinates.
            rows (int): Height of the text area.
            cols (int): Width of the text area.

        Returns:
            bool: True if `top_row` or `left_col` changed.
        """
        old = (self.top_row, self.left_col)
        rows = max(1, rows)

        # Vertical
        if cursor.row < self.top_row:
            self.top_row = cursor.row
        elif cursor.row >= self.top_row + rows:
            self.top_row = cursor.row - rows + 1

        # Horizontal
        usable = self.usable_width(cols)
        if cursor.col < self.left_col:
            self.left_col = cursor.col
        elif cursor.col >= self.left_col + usable:
            self.left_col = cursor.col - usable + 1

        self.top_row = max(0, self.top_row)
        self.left_col = max(0, self.left_col)

        changed = (self.top_row, self.left_col) != old
        if changed:
            logging.debug(
                "Viewport scrolled to top=%d left=%d", self.top_row, self.left_col
            )
        return changed

    def visible_lines(self, document: Document, rows: int, cols: int) -> list[bytes]:
        """Returns the visible slice of each visible line, without padding.

        Rows past the end of the document are not included, so the result
        may be shorter than `rows`.
        """
        visible: list[bytes] = []
        for index, ref in enumerate(document):
            if index < self.top_row:
                continue
            if len(visible) >= rows:
                break
            line = document.line(ref)
            start = min(self.left_col, line.length)
            end = min(start + cols, line.length)
            visible.append(bytes(line.text[start:end]))
        return visible

    def screen_cursor(self, cursor: Cursor) -> tuple[int, int]:
        """Maps the cursor to `(row, col)` on the text area."""
        return (cursor.row - self.top_row, cursor.col - self.left_col)

    @staticmethod
    def status_summary(cursor: Cursor, rows: int, cols: int) -> StatusSummary:
        """Builds the 1-based position and grid size shown in the status line."""
        return StatusSummary(cursor.row + 1, cursor.col + 1, cols, rows)


def format_status(summary: StatusSummary) -> str:
    return f"Line: {summary.line} Col: {summary.column} [{summary.cols}x{summary.rows}]"
