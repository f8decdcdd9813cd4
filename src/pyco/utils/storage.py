# src/pyco/utils/storage.py
"""
pyco.utils.storage
==================

Byte-exact persistence for documents.

A file is split on ``b"\\n"`` into lines; saving joins them back with a single
``b"\\n"`` between lines and none after the last one, so ``n`` lines produce
exactly ``n - 1`` line breaks. With these two rules ``save(load(x))``
reproduces ``x`` for any input:

- ``b""``          -> ``[b""]``
- ``b"a\\nb"``      -> ``[b"a", b"b"]``
- ``b"a\\nb\\n"``    -> ``[b"a", b"b", b""]``

Open/read/write failures are logged and re-raised as `StorageError`.
"""

import logging
import os
from typing import Iterable

from pyco.core.errors import StorageError

LINE_BREAK = b"\n"


def split_lines(data: bytes) -> list[bytes]:
    """Splits raw file content into lines. Always returns at least one line."""
    return data.split(LINE_BREAK)


def join_lines(lines: Iterable[bytes]) -> bytes:
    """Joins lines with one line break between each pair and none at the end."""
    return LINE_BREAK.join(lines)


def load(path: str) -> list[bytes]:
    """Reads `path` and returns its raw lines.

    Args:
        path (str): File to read.

    Returns:
        list[bytes]: The file content split on line breaks.

    Raises:
        StorageError: If the file cannot be opened or read.
    """
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as e:
        logging.error(f"Failed to read file '{path}': {e}", exc_info=True)
        raise StorageError(f"Cannot read '{path}': {e.strerror or e}", path=path) from e

    lines = split_lines(data)
    logging.debug(f"Loaded {len(lines)} lines ({len(data)} bytes) from '{path}'")
    return lines


def save(path: str, lines: Iterable[bytes]) -> int:
    """Writes `lines` to `path`, replacing its content.

    Args:
        path (str): Destination file.
        lines (Iterable[bytes]): Line contents without line breaks.

    Returns:
        int: Number of bytes written.

    Raises:
        StorageError: If the file cannot be opened or written.
    """
    content = join_lines(lines)
    try:
        with open(path, "wb") as f:
            f.write(content)
    except OSError as e:
        logging.error(f"Failed to write file '{path}': {e}", exc_info=True)
        raise StorageError(f"Cannot write '{path}': {e.strerror or e}", path=path) from e

    logging.debug(f"Wrote {len(content)} bytes to '{path}'")
    return len(content)


def exists(path: str) -> bool:
    return os.path.exists(path)
