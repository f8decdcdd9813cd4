# src/pyco/core/__init__.py
"""Public facade for pyco.core: re-export main classes from CamelCase modules.

Keeps CamelCase file names (Document.py, Cursor.py, ...),
but provides flat imports for convenience and stability.
"""

from .Cursor import Cursor  # noqa: F401
from .Document import Document, Line, LineRef  # noqa: F401
from .EditorState import EditorState  # noqa: F401
from .errors import PycoError, StaleLineError, StorageError  # noqa: F401
from .Events import Event, EventKind  # noqa: F401
from .Pyco import Pyco  # noqa: F401
from .Viewport import StatusSummary, Viewport  # noqa: F401


__all__ = [
    "Cursor",
    "Document",
    "EditorState",
    "Event",
    "EventKind",
    "Line",
    "LineRef",
    "Pyco",
    "PycoError",
    "StaleLineError",
    "StatusSummary",
    "StorageError",
    "Viewport",
]
