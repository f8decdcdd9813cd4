# src/pyco/core/Editing.py
"""Character and line level edits applied at the cursor.

Each function mutates the document and the cursor of an `EditorState`
together and returns True when the buffer changed. Nothing is mutated before
the operation knows it can complete.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pyco.core.EditorState import EditorState

PRINTABLE_MIN = 0x20
PRINTABLE_MAX = 0x7E


def is_printable(byte: int) -> bool:
    return PRINTABLE_MIN <= byte <= PRINTABLE_MAX


def insert_char(state: "EditorState", byte: int) -> bool:
    """Inserts one printable byte at the cursor and advances the column."""
    if not is_printable(byte):
        logging.debug("insert_char: rejected non-printable byte 0x%02x", byte)
        return False
    cursor = state.cursor
    line = state.document.line(cursor.current_line(state.document))
    line.insert_byte(cursor.col, byte)
    cursor.col += 1
    state.modified = True
    return True


def delete_char(state: "EditorState") -> bool:
    """Backspace: deletes the byte before the cursor or joins with the line above.

    At the very start of the document this is a silent no-op.
    """
    document, cursor = state.document, state.cursor
    current = cursor.current_line(document)

    if cursor.col > 0:
        document.line(current).delete_before(cursor.col)
        cursor.col -= 1
        state.modified = True
        return True

    if cursor.row == 0:
        logging.debug("delete_char: at beginning of document, nothing to delete")
        return False

    prev_ref = document.prev_of(current)
    if prev_ref is None:
        # Only reachable with a stale cursor row.
        logging.warning("delete_char: row %d has no predecessor", cursor.row)
        return False

    prev = document.line(prev_ref)
    join_col = prev.length
    prev.append(document.line(current).content())
    document.remove(current)
    cursor.row -= 1
    cursor.col = join_col
    state.modified = True
    logging.debug("delete_char: merged line into row %d at col %d", cursor.row, join_col)
    return True


def insert_newline(state: "EditorState") -> bool:
    """Enter: splits the current line at the cursor and moves to the new line."""
    document, cursor = state.document, state.cursor
    current = cursor.current_line(document)
    line = document.line(current)

    new_ref = document.create_line()
    if cursor.col < line.length:
        document.line(new_ref).append(line.tail(cursor.col))
        line.truncate(cursor.col)
    document.link_after(current, new_ref)

    cursor.row += 1
    cursor.col = 0
    state.modified = True
    return True
