# tests/stubs.py
"""Shared helpers for pyco editor tests.

Provides invariant checks used by several test modules and a scripted
curses window that replays a fixed sequence of key codes.
"""

from unittest.mock import MagicMock

from pyco.core.EditorState import EditorState


def assert_cursor_in_bounds(state: EditorState) -> None:
    """Check `0 <= row < count()` and `0 <= col <= length` for the cursor."""
    row, col = state.cursor.row, state.cursor.col
    assert 0 <= row < state.document.count()
    assert 0 <= col <= state.document.line(state.document.line_at(row)).length


def assert_cursor_visible(state: EditorState) -> None:
    """Check that the viewport contains the cursor after adjustment."""
    top, left = state.viewport.top_row, state.viewport.left_col
    assert top <= state.cursor.row < top + state.text_rows
    assert left <= state.cursor.col < left + state.text_cols


def scripted_window(keys: list[int], size: tuple[int, int] = (24, 80)) -> MagicMock:
    """A mock curses window whose `getch` returns `keys`, then -1 forever.

    Args:
        keys: Key codes returned in order.
        size: Value returned by `getmaxyx`.
    """
    remaining = list(keys)

    def _getch() -> int:
        return remaining.pop(0) if remaining else -1

    window = MagicMock()
    window.getmaxyx.return_value = size
    window.getch.side_effect = _getch
    return window
