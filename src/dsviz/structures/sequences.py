"""
Array, stack, queue and deque operations over an immutable sequence.

Every operation takes the current sequence and returns a new tuple; the
input is never modified.

Time Complexity:
Insert/Remove at index: O(n), the tuple is rebuilt
View/Peek: O(1)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from ..core.errors import ErrorKind
from ..core.types import Message, Value, format_value

Items = Tuple[Value, ...]


@dataclass(frozen=True)
class SequenceResult:
    """
    Outcome of a sequence operation.
    `value` holds the removed or viewed element, or None when
    the operation failed or does not produce one.
    """

    items: Items
    message: Message
    value: Optional[Value] = None


def _invalid_index(index: int, upper: int) -> Message:
    return Message.error(
        ErrorKind.OUT_OF_RANGE,
        f"Invalid index: {index}. Index must be between 0 and {upper}.",
    )


def _empty(text: str) -> Message:
    return Message.error(ErrorKind.EMPTY_STRUCTURE, text)


# -----------------------------
# Array
# -----------------------------
def insert_at(seq: Sequence[Value], value: Value, index: int) -> SequenceResult:
    """
    Inserts value before position index, shifting later elements right.
    Valid for 0 <= index <= len(seq).
    """
    items = tuple(seq)
    if index < 0 or index > len(items):
        return SequenceResult(items, _invalid_index(index, len(items)))

    new_items = items[:index] + (value,) + items[index:]
    return SequenceResult(
        new_items,
        Message.success(f"Added {format_value(value)} at index {index}."),
    )


def remove_at(seq: Sequence[Value], index: int) -> SequenceResult:
    """
    Removes the element at index and returns it in `value`.
    Valid for 0 <= index < len(seq).
    """
    items = tuple(seq)
    if index < 0 or index >= len(items):
        return SequenceResult(items, _invalid_index(index, len(items) - 1))

    removed = items[index]
    return SequenceResult(
        items[:index] + items[index + 1 :],
        Message.success(f"Removed {format_value(removed)} from index {index}."),
        removed,
    )


def view_at(seq: Sequence[Value], index: int) -> SequenceResult:
    items = tuple(seq)
    if index < 0 or index >= len(items):
        return SequenceResult(items, _invalid_index(index, len(items) - 1))

    value = items[index]
    return SequenceResult(
        items,
        Message.info(f"Value at index {index} is {format_value(value)}."),
        value,
    )


# -----------------------------
# Stack (top is the last element)
# -----------------------------
def push(stack: Sequence[Value], value: Value) -> SequenceResult:
    return SequenceResult(
        tuple(stack) + (value,),
        Message.success(f"Pushed {format_value(value)} to the stack."),
    )


def pop(stack: Sequence[Value]) -> SequenceResult:
    items = tuple(stack)
    if not items:
        return SequenceResult(items, _empty("Cannot pop from an empty stack."))

    popped = items[-1]
    return SequenceResult(
        items[:-1],
        Message.success(f"Popped {format_value(popped)} from the stack."),
        popped,
    )


def peek_stack(stack: Sequence[Value]) -> SequenceResult:
    items = tuple(stack)
    if not items:
        return SequenceResult(items, _empty("Cannot peek an empty stack."))

    top = items[-1]
    return SequenceResult(items, Message.info(f"Top of stack is {format_value(top)}."), top)


# -----------------------------
# Queue (front is index 0)
# -----------------------------
def enqueue(queue: Sequence[Value], value: Value) -> SequenceResult:
    return SequenceResult(
        tuple(queue) + (value,),
        Message.success(f"Enqueued {format_value(value)} to the queue."),
    )


def dequeue(queue: Sequence[Value]) -> SequenceResult:
    items = tuple(queue)
    if not items:
        return SequenceResult(items, _empty("Cannot dequeue from an empty queue."))

    front = items[0]
    return SequenceResult(
        items[1:],
        Message.success(f"Dequeued {format_value(front)} from the queue."),
        front,
    )


def peek_queue(queue: Sequence[Value]) -> SequenceResult:
    items = tuple(queue)
    if not items:
        return SequenceResult(items, _empty("Cannot peek an empty queue."))

    front = items[0]
    return SequenceResult(items, Message.info(f"Front of queue is {format_value(front)}."), front)


# -----------------------------
# Deque
# -----------------------------
def add_front(deque: Sequence[Value], value: Value) -> SequenceResult:
    return SequenceResult(
        (value,) + tuple(deque),
        Message.success(f"Added {format_value(value)} to the front of the deque."),
    )


def add_rear(deque: Sequence[Value], value: Value) -> SequenceResult:
    return SequenceResult(
        tuple(deque) + (value,),
        Message.success(f"Added {format_value(value)} to the rear of the deque."),
    )


def remove_front(deque: Sequence[Value]) -> SequenceResult:
    items = tuple(deque)
    if not items:
        return SequenceResult(items, _empty("Cannot remove from the front of an empty deque."))

    removed = items[0]
    return SequenceResult(
        items[1:],
        Message.success(f"Removed {format_value(removed)} from the front of the deque."),
        removed,
    )


def remove_rear(deque: Sequence[Value]) -> SequenceResult:
    items = tuple(deque)
    if not items:
        return SequenceResult(items, _empty("Cannot remove from the rear of an empty deque."))

    removed = items[-1]
    return SequenceResult(
        items[:-1],
        Message.success(f"Removed {format_value(removed)} from the rear of the deque."),
        removed,
    )


def peek_front(deque: Sequence[Value]) -> SequenceResult:
    items = tuple(deque)
    if not items:
        return SequenceResult(items, _empty("Cannot peek the front of an empty deque."))

    front = items[0]
    return SequenceResult(items, Message.info(f"Front of deque is {format_value(front)}."), front)


def peek_rear(deque: Sequence[Value]) -> SequenceResult:
    items = tuple(deque)
    if not items:
        return SequenceResult(items, _empty("Cannot peek the rear of an empty deque."))

    rear = items[-1]
    return SequenceResult(items, Message.info(f"Rear of deque is {format_value(rear)}."), rear)
