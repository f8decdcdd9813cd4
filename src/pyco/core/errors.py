# src/pyco/core/errors.py
"""Exception types raised by the pyco core."""

from __future__ import annotations

from typing import Optional


class PycoError(Exception):
    """Base class for all pyco errors."""


class StaleLineError(PycoError, LookupError):
    """Raised when a line handle refers to a slot that has been freed or reused."""

    def __init__(self, message: str, *, slot: Optional[int] = None) -> None:
        super().__init__(message)
        self.slot = slot


class StorageError(PycoError, OSError):
    """Raised when a document cannot be read from or written to disk."""

    def __init__(self, message: str, *, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path
