# tests/test_core/test_cursor.py
"""Cursor movement and clamping."""

from pyco.core.Cursor import Cursor
from pyco.core.Document import Document


def make_doc() -> Document:
    """Return a three-line document with an empty middle line."""
    return Document.from_lines([b"hello", b"", b"hi"])


def test_move_right_wraps_to_next_line() -> None:
    """Test: Moving right past the line end lands on the next line's start."""
    doc = make_doc()
    cursor = Cursor(0, 5)
    assert cursor.move_right(doc) is True
    assert cursor.position == (1, 0)


def test_move_right_stops_at_document_end() -> None:
    """Test: Moving right at the end of the last line does nothing."""
    doc = make_doc()
    cursor = Cursor(2, 2)
    assert cursor.move_right(doc) is False
    assert cursor.position == (2, 2)


def test_move_left_wraps_to_previous_line_end() -> None:
    """Test: Moving left at column 0 lands on the previous line's end."""
    doc = make_doc()
    cursor = Cursor(2, 0)
    assert cursor.move_left(doc) is True
    assert cursor.position == (1, 0)
    cursor.move_left(doc)
    assert cursor.position == (0, 5)


def test_move_left_at_origin_is_noop() -> None:
    """Test: Moving left at `(0, 0)` does nothing."""
    cursor = Cursor()
    assert cursor.move_left(make_doc()) is False
    assert cursor.position == (0, 0)


def test_move_down_clamps_column() -> None:
    """Test: Moving down clamps the column to the shorter line."""
    doc = make_doc()
    cursor = Cursor(0, 4)
    assert cursor.move_down(doc) is True
    assert cursor.position == (1, 0)
    cursor.move_down(doc)
    # The clamped column is kept; there is no remembered "desired column".
    assert cursor.position == (2, 0)


def test_move_down_on_last_line_is_noop() -> None:
    """Test: Moving down on the last line does nothing."""
    cursor = Cursor(2, 1)
    assert cursor.move_down(make_doc()) is False
    assert cursor.position == (2, 1)


def test_move_up_clamps_column() -> None:
    """Test: Moving up clamps the column; the first row cannot move up."""
    doc = Document.from_lines([b"ab", b"abcdef"])
    cursor = Cursor(1, 6)
    assert cursor.move_up(doc) is True
    assert cursor.position == (0, 2)
    assert cursor.move_up(doc) is False


def test_clamp_pulls_stale_position_back() -> None:
    """Test: `clamp` brings out-of-range rows and columns back inside."""
    doc = make_doc()
    cursor = Cursor(10, 10)
    cursor.clamp(doc)
    assert cursor.position == (2, 2)

    cursor = Cursor(-3, -1)
    cursor.clamp(doc)
    assert cursor.position == (0, 0)
