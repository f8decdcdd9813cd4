# tests/conftest.py
"""Pytest configuration with shared fixtures for the pyco editor tests."""

from __future__ import annotations

from typing import Any, Callable, Optional
from unittest.mock import MagicMock

import pytest

from pyco.core.Cursor import Cursor
from pyco.core.Document import Document
from pyco.core.EditorState import EditorState
from pyco.core.Viewport import Viewport


@pytest.fixture
def mock_stdscr() -> MagicMock:
    """Create a mock curses window with a (24, 80) terminal."""
    stdscr = MagicMock()
    stdscr.getmaxyx.return_value = (24, 80)
    stdscr.getch.return_value = -1
    return stdscr


@pytest.fixture
def mock_config() -> dict[str, dict[str, Any]]:
    """Provide a baseline configuration for editor tests."""
    return {
        "editor": {
            "horizontal_margin": 10,
            "initial_line_capacity": 4,
            "input_timeout_ms": 100,
        },
        "keybindings": {},
        "logging": {"log_to_console": False},
    }


@pytest.fixture
def make_state() -> Callable[..., EditorState]:
    """Factory building an `EditorState` from a list of byte lines.

    Keyword Args:
        cursor: Initial `(row, col)`.
        size: Screen `(rows, cols)`, status row included.
        margin: Horizontal scroll margin.
        path: Optional file path.
    """

    def _make(
        lines: list[bytes],
        cursor: tuple[int, int] = (0, 0),
        size: tuple[int, int] = (24, 80),
        margin: int = 10,
        path: Optional[str] = None,
    ) -> EditorState:
        return EditorState(
            document=Document.from_lines(lines, initial_capacity=4),
            cursor=Cursor(*cursor),
            viewport=Viewport(margin=margin),
            screen_rows=size[0],
            screen_cols=size[1],
            path=path,
        )

    return _make

