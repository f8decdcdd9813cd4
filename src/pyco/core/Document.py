# src/pyco/core/Document.py
"""pyco.core.Document
=====================

Line storage for the pyco editor.

A `Document` is an ordered, doubly linked sequence of `Line` records. The
records live in an arena (a plain list of slots) and link to their neighbours
by slot index instead of by object reference. Callers address a line through
a `LineRef`, a `(slot, generation)` pair: when a line is removed its slot is
put on a free list and its generation is bumped, so any handle that still
points at the old line is rejected with `StaleLineError` rather than silently
reading whatever line reuses the slot later.

Invariants:
    - The sequence is never empty. Removing the last remaining line clears it
      in place instead of freeing it.
    - For every live line, `length < capacity`. The byte at `text[length]` is
      a zero sentinel.
    - `text[:length]` never contains a line-break byte.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, NamedTuple, Optional

from pyco.core.errors import StaleLineError

DEFAULT_LINE_CAPACITY = 128
LINE_BREAK = 0x0A


class LineRef(NamedTuple):
    """Generation-checked handle to a line slot."""

    slot: int
    generation: int


@dataclass(slots=True)
class Line:
    """One line of text plus its allocated storage.

    `text` is a bytearray whose size is the capacity; only the first `length`
    bytes are content. `prev` and `next` are slot indices owned by the
    Document and are `None` at either end of the sequence.
    """

    text: bytearray
    length: int = 0
    prev: Optional[int] = None
    next: Optional[int] = None
    generation: int = 0
    alive: bool = field(default=True, repr=False)

    @classmethod
    def empty(cls, capacity: int = DEFAULT_LINE_CAPACITY) -> "Line":
        """Creates a zero-length line with `capacity` bytes of storage.

        Args:
            capacity (int): Initial storage size. Values below 1 are raised
                to 1 so the sentinel always fits.

        Returns:
            Line: An unlinked, empty line.
        """
        return cls(text=bytearray(max(1, capacity)))

    @property
    def capacity(self) -> int:
        return len(self.text)

    def content(self) -> bytes:
        """Returns a copy of the first `length` bytes."""
        return bytes(self.text[: self.length])

    def ensure_capacity(self, additional: int) -> None:
        """Grow storage so that `length + additional < capacity`.

        Args:
            additional (int): Number of bytes about to be added.

        Growth goes to twice the required size.
        """
        needed = self.length + additional
        if needed >= self.capacity:
            new_capacity = needed * 2
            self.text.extend(bytes(new_capacity - self.capacity))
            logging.debug("Line grown to capacity %d", new_capacity)

    def insert_byte(self, col: int, value: int) -> None:
        """Inserts `value` at `col`, shifting the bytes after it one to the right.

        Args:
            col (int): Byte offset in `[0, length]`.
            value (int): The byte to insert.
        """
        self.ensure_capacity(1)
        self.text[col + 1 : self.length + 1] = self.text[col : self.length]
        self.text[col] = value
        self.length += 1
        self.text[self.length] = 0

    def delete_before(self, col: int) -> int:
        """Removes the byte at `col - 1` and closes the gap.

        Args:
            col (int): Byte offset in `[1, length]`.

        Returns:
            int: The removed byte.
        """
        removed = self.text[col - 1]
        self.text[col - 1 : self.length - 1] = self.text[col : self.length]
        self.length -= 1
        self.text[self.length] = 0
        return removed

    def append(self, data: bytes) -> None:
        """Appends `data` after the current content, growing storage if needed."""
        self.ensure_capacity(len(data))
        self.text[self.length : self.length + len(data)] = data
        self.length += len(data)
        self.text[self.length] = 0

    def tail(self, col: int) -> bytes:
        """Returns the bytes from `col` to the end of the line."""
        return bytes(self.text[col : self.length])

    def truncate(self, length: int) -> None:
        """Shortens the line to `length` bytes. Storage is kept."""
        self.length = length
        self.text[self.length] = 0

    def clear(self) -> None:
        self.truncate(0)


class Document:
    """Ordered, never-empty sequence of lines stored in an arena."""

    def __init__(self, initial_capacity: int = DEFAULT_LINE_CAPACITY) -> None:
        self.initial_capacity: int = max(1, initial_capacity)
        self._slots: list[Line] = []
        self._free: list[int] = []
        self._head: int = self.create_line().slot

    @classmethod
    def from_lines(
        cls, lines: Iterable[bytes], initial_capacity: int = DEFAULT_LINE_CAPACITY
    ) -> "Document":
        """Builds a document with one line per item of `lines`.

        An empty iterable gives a document with a single empty line.
        """
        document = cls(initial_capacity)
        current = document.head
        first = True
        for raw in lines:
            if LINE_BREAK in raw:
                raise ValueError("Line content may not contain a line break")
            if not first:
                new_line = document.create_line()
                document.link_after(current, new_line)
                current = new_line
            first = False
            document.line(current).append(raw)
        logging.debug("Document built with %d lines", document.count())
        return document

    # --- Handles ---
    @property
    def head(self) -> LineRef:
        return self._ref(self._head)

    def _ref(self, slot: int) -> LineRef:
        return LineRef(slot, self._slots[slot].generation)

    def line(self, ref: LineRef) -> Line:
        """Resolves a handle to its live Line record."""
        if not 0 <= ref.slot < len(self._slots):
            raise StaleLineError(f"No line slot {ref.slot}", slot=ref.slot)
        record = self._slots[ref.slot]
        if not record.alive or record.generation != ref.generation:
            raise StaleLineError(
                f"Line handle {ref} no longer refers to a live line", slot=ref.slot
            )
        return record

    def next_of(self, ref: LineRef) -> Optional[LineRef]:
        """Returns the handle of the following line, or None at the tail."""
        nxt = self.line(ref).next
        return None if nxt is None else self._ref(nxt)

    def prev_of(self, ref: LineRef) -> Optional[LineRef]:
        prv = self.line(ref).prev
        return None if prv is None else self._ref(prv)

    # --- Structure ---
    def create_line(self) -> LineRef:
        """Returns a new, empty, unlinked line."""
        if self._free:
            slot = self._free.pop()
            record = self._slots[slot]
            record.text = bytearray(self.initial_capacity)
            record.length = 0
            record.prev = record.next = None
            record.alive = True
        else:
            slot = len(self._slots)
            self._slots.append(Line.empty(self.initial_capacity))
        return self._ref(slot)

    def link_after(self, anchor: LineRef, new_line: LineRef) -> None:
        """Splices `new_line` into the sequence right after `anchor`."""
        anchor_rec = self.line(anchor)
        new_rec = self.line(new_line)
        new_rec.prev = anchor.slot
        new_rec.next = anchor_rec.next
        if anchor_rec.next is not None:
            self._slots[anchor_rec.next].prev = new_line.slot
        anchor_rec.next = new_line.slot

    def remove(self, ref: LineRef) -> LineRef:
        """Removes `ref` and returns the line that should receive the cursor.

        The predecessor is preferred, then the successor. If `ref` is the only
        line it is cleared and returned instead of being freed.
        """
        record = self.line(ref)
        if record.prev is None and record.next is None:
            record.clear()
            logging.debug("remove: sole line cleared in place")
            return ref

        move_to = record.prev if record.prev is not None else record.next
        if record.prev is not None:
            self._slots[record.prev].next = record.next
        if record.next is not None:
            self._slots[record.next].prev = record.prev
        if self._head == ref.slot:
            self._head = record.next  # type: ignore[assignment]

        record.alive = False
        record.generation += 1
        record.prev = record.next = None
        record.text = bytearray(1)
        record.length = 0
        self._free.append(ref.slot)
        return self._ref(move_to)  # type: ignore[arg-type]

    def ensure_capacity(self, ref: LineRef, additional: int) -> None:
        """Grows the line behind `ref` so `additional` more bytes fit.

        Raises:
            StaleLineError: If `ref` no longer refers to a live line.
        """
        self.line(ref).ensure_capacity(additional)

    # --- Queries ---
    def count(self) -> int:
        """Counts the lines by walking the links from the head."""
        total = 0
        slot: Optional[int] = self._head
        while slot is not None:
            total += 1
            slot = self._slots[slot].next
        return total

    def __iter__(self) -> Iterator[LineRef]:
        slot: Optional[int] = self._head
        while slot is not None:
            yield self._ref(slot)
            slot = self._slots[slot].next

    def line_at(self, row: int) -> LineRef:
        """Returns the handle of the line at 0-based `row`.

        Raises:
            IndexError: If `row` is outside `[0, count() - 1]`.
        """
        if row < 0:
            raise IndexError(f"Row {row} out of range")
        for index, ref in enumerate(self):
            if index == row:
                return ref
        raise IndexError(f"Row {row} out of range")

    def lines(self) -> list[bytes]:
        return [self.line(ref).content() for ref in self]
