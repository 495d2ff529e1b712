"""Array-backed binary heap with a switchable min/max ordering.

The backing tuple is read as a complete binary tree: the parent of index i
is (i - 1) // 2 and its children are 2i + 1 and 2i + 2.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from ..core.errors import ErrorKind
from ..core.types import Message, Number, format_value


class HeapMode(str, Enum):
    MIN = "min"
    MAX = "max"

    def flipped(self) -> HeapMode:
        return HeapMode.MAX if self is HeapMode.MIN else HeapMode.MIN


@dataclass(frozen=True)
class Heap:
    """An immutable heap snapshot.

    Invariants:
        - For every index with children in range, the heap-order relation
          (<= for min, >= for max) holds between the node and each child
    """

    values: Tuple[Number, ...] = ()
    mode: HeapMode = HeapMode.MIN

    def __len__(self) -> int:
        return len(self.values)

    @property
    def root(self) -> Optional[Number]:
        return self.values[0] if self.values else None


@dataclass(frozen=True)
class HeapResult:
    heap: Heap
    message: Message
    value: Optional[Number] = None


def parent_index(index: int) -> int:
    return (index - 1) // 2


def left_child_index(index: int) -> int:
    return 2 * index + 1


def right_child_index(index: int) -> int:
    return 2 * index + 2


def should_swap(mode: HeapMode, parent: Number, child: Number) -> bool:
    """True when parent and child violate heap order under mode."""
    if mode is HeapMode.MIN:
        return parent > child
    return parent < child


def _sift_up(values: List[Number], index: int, mode: HeapMode) -> None:
    while index > 0:
        parent = parent_index(index)
        if not should_swap(mode, values[parent], values[index]):
            return
        values[parent], values[index] = values[index], values[parent]
        index = parent


def _sift_down(values: List[Number], index: int, mode: HeapMode) -> None:
    n = len(values)
    while True:
        left, right = left_child_index(index), right_child_index(index)
        target = index
        # Comparing against the current best picks the child that would
        # become the new root under mode when both children violate order.
        if left < n and should_swap(mode, values[target], values[left]):
            target = left
        if right < n and should_swap(mode, values[target], values[right]):
            target = right
        if target == index:
            return
        values[index], values[target] = values[target], values[index]
        index = target


def heapify(values: Iterable[Number], mode: HeapMode = HeapMode.MIN) -> Heap:
    """Bulk-builds a heap with a bottom-up sift-down pass."""
    work = list(values)
    for i in range(len(work) // 2 - 1, -1, -1):
        _sift_down(work, i, mode)
    return Heap(tuple(work), mode)


def is_heap(heap: Heap) -> bool:
    values = heap.values
    for i in range(len(values)):
        for child in (left_child_index(i), right_child_index(i)):
            if child < len(values) and should_swap(heap.mode, values[i], values[child]):
                return False
    return True


def heap_height(size: int) -> int:
    """Number of levels of a heap holding size elements."""
    return 0 if size == 0 else math.floor(math.log2(size)) + 1


# -------------------------------
# Operations
# -------------------------------
def insert(heap: Heap, value: Number) -> HeapResult:
    work = list(heap.values)
    work.append(value)
    _sift_up(work, len(work) - 1, heap.mode)
    return HeapResult(
        Heap(tuple(work), heap.mode),
        Message.success(f"Inserted {format_value(value)} into the {heap.mode.value} heap."),
    )


def extract(heap: Heap) -> HeapResult:
    """Removes the root and returns it in `value`."""
    if not heap.values:
        return HeapResult(heap, Message.error(ErrorKind.EMPTY_STRUCTURE, "Heap is empty."))

    root = heap.values[0]
    message = Message.success(f"Extracted {format_value(root)} from the {heap.mode.value} heap.")
    if len(heap.values) == 1:
        return HeapResult(Heap((), heap.mode), message, root)

    work = list(heap.values)
    work[0] = work.pop()
    _sift_down(work, 0, heap.mode)
    return HeapResult(Heap(tuple(work), heap.mode), message, root)


def toggle_mode(heap: Heap) -> HeapResult:
    """Flips the ordering and rebuilds the heap under the new mode."""
    rebuilt = heapify(heap.values, heap.mode.flipped())
    return HeapResult(rebuilt, Message.info(f"Switched to {rebuilt.mode.value} heap."))


def peek(heap: Heap) -> HeapResult:
    if not heap.values:
        return HeapResult(heap, Message.error(ErrorKind.EMPTY_STRUCTURE, "Heap is empty."))
    root = heap.values[0]
    return HeapResult(
        heap,
        Message.info(f"Root of the {heap.mode.value} heap is {format_value(root)}."),
        root,
    )
