# tests/test_core/test_document.py
"""Document Tests
=================

Unit tests for the arena-backed `Document` and its `Line` records.

Covers:
1. Construction (empty document, `from_lines`).
2. Linking and removal, including the never-empty rule.
3. Generation-checked handles after removal and slot reuse.
4. Capacity growth and the `length < capacity` invariant.
"""

import pytest

from pyco.core.Document import Document, Line
from pyco.core.errors import StaleLineError


def test_new_document_has_one_empty_line() -> None:
    """Test: A fresh document holds exactly one empty line."""
    doc = Document()
    assert doc.count() == 1
    assert doc.lines() == [b""]


def test_from_lines_preserves_order() -> None:
    """Test: `from_lines` links one line per item, in order."""
    doc = Document.from_lines([b"one", b"two", b"three"])
    assert doc.count() == 3
    assert doc.lines() == [b"one", b"two", b"three"]


def test_from_lines_empty_iterable_gives_single_empty_line() -> None:
    """Test: An empty iterable still yields a non-empty document."""
    assert Document.from_lines([]).lines() == [b""]


def test_from_lines_rejects_line_breaks() -> None:
    """Test: Line content with an embedded line break is refused."""
    with pytest.raises(ValueError):
        Document.from_lines([b"a\nb"])


def test_create_line_is_unlinked_and_empty() -> None:
    """Test: `create_line` returns an empty line outside the sequence.

    Verifies that:
    - The new line uses the document's initial capacity.
    - It has no neighbours and does not change `count()`.
    """
    doc = Document(initial_capacity=16)
    ref = doc.create_line()
    line = doc.line(ref)
    assert line.length == 0
    assert line.capacity == 16
    assert line.prev is None and line.next is None
    # Not linked yet, so the sequence is unchanged.
    assert doc.count() == 1


def test_link_after_splices_in_the_middle() -> None:
    """Test: `link_after` updates both neighbours of the new line."""
    doc = Document.from_lines([b"a", b"c"])
    first = doc.head
    new_ref = doc.create_line()
    doc.line(new_ref).append(b"b")

    doc.link_after(first, new_ref)

    assert doc.lines() == [b"a", b"b", b"c"]
    assert doc.prev_of(new_ref) == first
    third = doc.next_of(new_ref)
    assert third is not None
    assert doc.prev_of(third) == new_ref


def test_link_after_tail_appends() -> None:
    """Test: Linking after the last line makes the new line the tail."""
    doc = Document.from_lines([b"a"])
    new_ref = doc.create_line()
    doc.link_after(doc.head, new_ref)
    assert doc.lines() == [b"a", b""]
    assert doc.next_of(new_ref) is None


def test_remove_middle_returns_predecessor() -> None:
    """Test: Removing an inner line hands the cursor to its predecessor."""
    doc = Document.from_lines([b"a", b"b", b"c"])
    middle = doc.line_at(1)
    move_to = doc.remove(middle)
    assert move_to == doc.line_at(0)
    assert doc.lines() == [b"a", b"c"]


def test_remove_head_returns_successor_and_moves_head() -> None:
    """Test: Removing the head promotes and returns the successor."""
    doc = Document.from_lines([b"a", b"b"])
    old_head = doc.head
    move_to = doc.remove(old_head)
    assert doc.head == move_to
    assert doc.lines() == [b"b"]
    assert doc.prev_of(doc.head) is None


def test_remove_only_line_clears_in_place() -> None:
    """Test: Removing the sole line clears it and returns the same handle."""
    doc = Document.from_lines([b"hello"])
    only = doc.head
    move_to = doc.remove(only)
    assert move_to == only
    assert doc.count() == 1
    assert doc.lines() == [b""]


def test_repeated_removal_never_empties_document() -> None:
    """Test: No sequence of removals leaves the document without lines."""
    doc = Document.from_lines([b"x", b"y", b"z", b"w"])
    for _ in range(10):
        doc.remove(doc.head)
        assert doc.count() >= 1
    assert doc.lines() == [b""]


def test_removed_handle_is_stale() -> None:
    """Test: Resolving a handle after its line was removed raises."""
    doc = Document.from_lines([b"a", b"b"])
    second = doc.line_at(1)
    doc.remove(second)
    with pytest.raises(StaleLineError):
        doc.line(second)


def test_reused_slot_rejects_old_handle() -> None:
    """Test: A freed slot is reused under a new generation.

    Verifies that:
    - `create_line` takes the slot from the free list.
    - The old handle still raises instead of reading the new line.
    """
    doc = Document.from_lines([b"a", b"b"])
    second = doc.line_at(1)
    doc.remove(second)

    reused = doc.create_line()
    assert reused.slot == second.slot
    assert reused.generation != second.generation
    assert doc.line(reused).length == 0
    with pytest.raises(StaleLineError):
        doc.line(second)


def test_line_at_out_of_range() -> None:
    """Test: Rows outside the document raise IndexError."""
    doc = Document.from_lines([b"a"])
    with pytest.raises(IndexError):
        doc.line_at(1)
    with pytest.raises(IndexError):
        doc.line_at(-1)


def test_ensure_capacity_doubles_required_size() -> None:
    """Test: Growth goes to `(length + additional) * 2` and keeps content."""
    doc = Document(initial_capacity=4)
    ref = doc.head
    doc.line(ref).append(b"abc")
    assert doc.line(ref).capacity == 4

    doc.ensure_capacity(ref, 1)
    # 3 + 1 is not < 4, so grow to (3 + 1) * 2.
    assert doc.line(ref).capacity == 8
    assert doc.line(ref).content() == b"abc"


def test_ensure_capacity_no_growth_when_room_left() -> None:
    """Test: Storage is untouched while `length + additional < capacity`."""
    doc = Document(initial_capacity=8)
    doc.ensure_capacity(doc.head, 3)
    assert doc.line(doc.head).capacity == 8


def test_length_stays_below_capacity_under_growth() -> None:
    """Test: Repeated inserts keep `length < capacity` and the zero sentinel."""
    line = Line.empty(capacity=1)
    for i in range(200):
        line.insert_byte(line.length, ord("a") + i % 26)
        assert line.length < line.capacity
        assert line.text[line.length] == 0
    assert line.length == 200


def test_line_insert_and_delete_shift_bytes() -> None:
    """Test: Byte-level Line operations shift content correctly."""
    line = Line.empty(capacity=4)
    line.append(b"ace")
    line.insert_byte(1, ord("b"))
    assert line.content() == b"abce"
    assert line.delete_before(4) == ord("e")
    assert line.content() == b"abc"
    line.truncate(1)
    assert line.content() == b"a"
    assert line.tail(0) == b"a"
