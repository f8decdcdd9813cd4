# src/pyco/core/Cursor.py
"""Cursor position in document coordinates and its movement rules."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pyco.core.Document import Document, LineRef


@dataclass(slots=True)
class Cursor:
    """The edit position as a 0-based `(row, col)` pair.

    `col` is a byte offset. The cursor never keeps a reference to its line:
    rows shift whenever lines are inserted or removed, so the line is always
    re-resolved from `row`.
    """

    row: int = 0
    col: int = 0

    @property
    def position(self) -> tuple[int, int]:
        return (self.row, self.col)

    def current_line(self, document: Document) -> LineRef:
        """Resolves the cursor row to a line handle.

        Raises:
            IndexError: If the row is outside the document.
        """
        return document.line_at(self.row)

    # --- Movement ---
    def move_up(self, document: Document) -> bool:
        """Moves one row up and clamps the column to the new line.

        Args:
            document (Document): The document the cursor addresses.

        Returns:
            bool: True if the cursor moved, False on the first row.
        """
        if self.row == 0:
            return False
        self.row -= 1
        self.clamp(document)
        return True

    def move_down(self, document: Document) -> bool:
        """Moves one row down and clamps the column. Returns False on the last row."""
        if document.next_of(self.current_line(document)) is None:
            return False
        self.row += 1
        self.clamp(document)
        return True

    def move_left(self, document: Document) -> bool:
        """Moves one byte left, wrapping to the end of the previous line.

        Returns:
            bool: False only at `(0, 0)`.
        """
        if self.col > 0:
            self.col -= 1
            return True
        if self.row > 0:
            self.row -= 1
            self.col = document.line(self.current_line(document)).length
            return True
        return False

    def move_right(self, document: Document) -> bool:
        """Moves one byte right, wrapping to the start of the next line.

        Returns:
            bool: False only at the end of the last line.
        """
        ref = self.current_line(document)
        if self.col < document.line(ref).length:
            self.col += 1
            return True
        if document.next_of(ref) is not None:
            self.row += 1
            self.col = 0
            return True
        return False

    def clamp(self, document: Document) -> None:
        """Pulls a stale position back inside the document.

        Row is clamped to `[0, count() - 1]` first, then col to the length of
        the line the row now resolves to.
        """
        total = document.count()
        row = max(0, min(self.row, total - 1))
        length = document.line(document.line_at(row)).length
        col = max(0, min(self.col, length))
        if (row, col) != (self.row, self.col):
            logging.debug(
                "Cursor clamped (%d,%d) -> (%d,%d)", self.row, self.col, row, col
            )
        self.row, self.col = row, col
