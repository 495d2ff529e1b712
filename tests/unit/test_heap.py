"""Unit tests for the binary heap."""

import random

import pytest

from dsviz.core.errors import ErrorKind
from dsviz.core.types import MessageType
from dsviz.structures.heap import (
    Heap,
    HeapMode,
    extract,
    heap_height,
    heapify,
    insert,
    is_heap,
    peek,
    toggle_mode,
)


def build(values, mode=HeapMode.MIN):
    heap = Heap(mode=mode)
    for value in values:
        heap = insert(heap, value).heap
    return heap


def drain(heap):
    out = []
    while len(heap):
        result = extract(heap)
        out.append(result.value)
        heap = result.heap
    return out


def test_min_heap_extracts_smallest_first():
    heap = build([5, 3, 8, 1])
    assert heap.root == 1

    first = extract(heap)
    second = extract(first.heap)
    assert first.value == 1
    assert second.value == 3
    assert first.message.text == "Extracted 1 from the min heap."


def test_insert_message_and_order():
    result = insert(Heap(), 4)
    assert result.heap.values == (4,)
    assert result.message.text == "Inserted 4 into the min heap."

    heap = build([10, 20, 5], mode=HeapMode.MAX)
    assert heap.values[0] == 20
    assert is_heap(heap)


def test_extract_empty():
    result = extract(Heap())
    assert result.value is None
    assert result.message.text == "Heap is empty."
    assert result.message.kind is ErrorKind.EMPTY_STRUCTURE


def test_extract_single_element_empties_heap():
    result = extract(Heap((7,)))
    assert result.value == 7
    assert result.heap.values == ()


def test_sift_down_picks_child_that_belongs_on_top():
    # after moving 9 to the root both children violate order; 2 must win
    heap = Heap((1, 3, 2, 9), HeapMode.MIN)
    result = extract(heap)
    assert result.heap.values[0] == 2
    assert is_heap(result.heap)


def test_toggle_mode_rebuilds_under_new_order():
    heap = build([5, 3, 8, 1, 9, 2])
    result = toggle_mode(heap)

    assert result.heap.mode is HeapMode.MAX
    assert is_heap(result.heap)
    assert result.message.text == "Switched to max heap."
    assert result.message.type is MessageType.INFO
    assert drain(result.heap) == [9, 8, 5, 3, 2, 1]


def test_toggle_empty_heap():
    result = toggle_mode(Heap())
    assert result.heap == Heap((), HeapMode.MAX)


def test_peek():
    assert peek(build([4, 2])).value == 2
    assert peek(build([4, 2])).message.text == "Root of the min heap is 2."
    assert peek(Heap()).message.text == "Heap is empty."


@pytest.mark.parametrize("size, expected", [(0, 0), (1, 1), (2, 2), (3, 2), (4, 3), (7, 3), (8, 4)])
def test_heap_height(size, expected):
    assert heap_height(size) == expected


def test_heapify():
    heap = heapify([9, 4, 7, 1, 8], HeapMode.MIN)
    assert is_heap(heap)
    assert heap.root == 1


def test_random_extraction_order():
    rng = random.Random(3)
    values = [rng.randint(-50, 50) for _ in range(40)]

    heap = build(values)
    assert drain(heap) == sorted(values)

    toggled = toggle_mode(heap).heap
    assert drain(toggled) == sorted(values, reverse=True)


def test_operations_leave_old_heap_untouched():
    heap = build([3, 1, 2])
    before = heap.values
    insert(heap, 0)
    extract(heap)
    toggle_mode(heap)
    assert heap.values == before
