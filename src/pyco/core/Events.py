# src/pyco/core/Events.py
"""Logical input events consumed by the editor core."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class EventKind(Enum):
    PRINTABLE_CHAR = "printable_char"
    ENTER = "enter"
    BACKSPACE = "backspace"
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    QUIT = "quit"
    SAVE = "save"
    RESIZE = "resize"
    NO_EVENT = "no_event"


@dataclass(frozen=True, slots=True)
class Event:
    kind: EventKind
    byte: Optional[int] = None
    rows: Optional[int] = None
    cols: Optional[int] = None

    @classmethod
    def printable(cls, byte: int) -> "Event":
        return cls(EventKind.PRINTABLE_CHAR, byte=byte)

    @classmethod
    def resize(cls, rows: int, cols: int) -> "Event":
        return cls(EventKind.RESIZE, rows=rows, cols=cols)


ENTER = Event(EventKind.ENTER)
BACKSPACE = Event(EventKind.BACKSPACE)
MOVE_UP = Event(EventKind.MOVE_UP)
MOVE_DOWN = Event(EventKind.MOVE_DOWN)
MOVE_LEFT = Event(EventKind.MOVE_LEFT)
MOVE_RIGHT = Event(EventKind.MOVE_RIGHT)
QUIT = Event(EventKind.QUIT)
SAVE = Event(EventKind.SAVE)
NO_EVENT = Event(EventKind.NO_EVENT)
