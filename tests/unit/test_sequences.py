"""Unit tests for array, stack, queue and deque operations."""

import pytest

from dsviz.core.errors import ErrorKind
from dsviz.core.types import MessageType
from dsviz.structures import sequences


def test_insert_into_empty_array():
    result = sequences.insert_at((), "x", 0)

    assert result.items == ("x",)
    assert result.message.text == "Added x at index 0."
    assert result.message.type is MessageType.SUCCESS


def test_remove_out_of_range_leaves_array_unchanged():
    result = sequences.remove_at(("x",), 5)

    assert result.items == ("x",)
    assert result.value is None
    assert result.message.type is MessageType.ERROR
    assert result.message.kind is ErrorKind.OUT_OF_RANGE
    assert result.message.text == "Invalid index: 5. Index must be between 0 and 0."


@pytest.mark.parametrize("index", [-1, 4])
def test_insert_rejects_index_outside_bounds(index):
    result = sequences.insert_at((1, 2, 3), 9, index)

    assert result.items == (1, 2, 3)
    assert result.message.text == f"Invalid index: {index}. Index must be between 0 and 3."


def test_insert_shifts_later_elements_right():
    result = sequences.insert_at((1, 2, 3), 9, 1)
    assert result.items == (1, 9, 2, 3)

    # appending at len is allowed
    result = sequences.insert_at((1, 2, 3), 9, 3)
    assert result.items == (1, 2, 3, 9)


@pytest.mark.parametrize("index", [0, 1, 2, 3])
def test_insert_then_remove_round_trip(index):
    original = ("a", 2, "c")
    inserted = sequences.insert_at(original, "v", index)
    removed = sequences.remove_at(inserted.items, index)

    assert removed.value == "v"
    assert removed.items == original
    assert removed.message.text == f"Removed v from index {index}."


def test_operations_do_not_mutate_input():
    original = [1, 2, 3]
    sequences.insert_at(original, 0, 0)
    sequences.remove_at(original, 0)
    sequences.push(original, 4)
    assert original == [1, 2, 3]


def test_view_at():
    result = sequences.view_at(("a", "b"), 1)
    assert result.value == "b"
    assert result.message.text == "Value at index 1 is b."
    assert result.message.type is MessageType.INFO

    missing = sequences.view_at((), 0)
    assert missing.value is None
    assert missing.message.text == "Invalid index: 0. Index must be between 0 and -1."


def test_stack_push_pop_is_lifo():
    stack = (1, 2)
    pushed = sequences.push(stack, 3)
    assert pushed.items == (1, 2, 3)
    assert pushed.message.text == "Pushed 3 to the stack."

    popped = sequences.pop(pushed.items)
    assert popped.value == 3
    assert popped.items == stack
    assert popped.message.text == "Popped 3 from the stack."


def test_stack_empty_errors():
    assert sequences.pop(()).message.text == "Cannot pop from an empty stack."
    assert sequences.pop(()).message.kind is ErrorKind.EMPTY_STRUCTURE
    assert sequences.peek_stack(()).message.text == "Cannot peek an empty stack."


def test_stack_peek():
    result = sequences.peek_stack((1, 2, 3))
    assert result.value == 3
    assert result.items == (1, 2, 3)
    assert result.message.text == "Top of stack is 3."


def test_queue_is_fifo():
    queue = ()
    for value in ["a", "b", "c"]:
        queue = sequences.enqueue(queue, value).items

    out = []
    while queue:
        result = sequences.dequeue(queue)
        out.append(result.value)
        queue = result.items

    assert out == ["a", "b", "c"]


def test_queue_messages():
    assert sequences.enqueue((), 1).message.text == "Enqueued 1 to the queue."
    assert sequences.dequeue((1,)).message.text == "Dequeued 1 from the queue."
    assert sequences.dequeue(()).message.text == "Cannot dequeue from an empty queue."
    assert sequences.peek_queue((4, 5)).message.text == "Front of queue is 4."
    assert sequences.peek_queue(()).message.text == "Cannot peek an empty queue."


def test_deque_both_ends():
    deque = sequences.add_rear((), 2).items
    deque = sequences.add_front(deque, 1).items
    deque = sequences.add_rear(deque, 3).items
    assert deque == (1, 2, 3)

    assert sequences.peek_front(deque).value == 1
    assert sequences.peek_rear(deque).value == 3

    front = sequences.remove_front(deque)
    assert front.value == 1
    assert front.items == (2, 3)
    assert front.message.text == "Removed 1 from the front of the deque."

    rear = sequences.remove_rear(front.items)
    assert rear.value == 3
    assert rear.items == (2,)
    assert rear.message.text == "Removed 3 from the rear of the deque."


@pytest.mark.parametrize(
    "op, expected",
    [
        (sequences.remove_front, "Cannot remove from the front of an empty deque."),
        (sequences.remove_rear, "Cannot remove from the rear of an empty deque."),
        (sequences.peek_front, "Cannot peek the front of an empty deque."),
        (sequences.peek_rear, "Cannot peek the rear of an empty deque."),
    ],
)
def test_deque_empty_errors(op, expected):
    result = op(())
    assert result.items == ()
    assert result.value is None
    assert result.message.text == expected
    assert result.message.kind is ErrorKind.EMPTY_STRUCTURE


def test_float_values_render_like_numbers():
    assert sequences.push((), 5.0).message.text == "Pushed 5 to the stack."
    assert sequences.push((), 1.5).message.text == "Pushed 1.5 to the stack."
