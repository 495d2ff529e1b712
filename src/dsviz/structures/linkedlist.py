"""
A persistent singly linked list.

The list is identified by its head node (None when empty). Nodes are
never modified after construction: an update rebuilds the nodes in front
of the change and shares the untouched suffix with the previous list.

Time Complexity:
Prepend: O(1)
Append: O(n), every node is rebuilt
Search/Remove: O(n) since in the worst case the entire list is scanned
"""

from __future__ import annotations  # allows forward-referencing without quotes

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

from ..core.errors import ErrorKind
from ..core.types import Message, Value, format_value


class Node:
    """
    A node is a container which holds a value
    and the next node it is linked to.
    """

    __slots__ = ("_value", "_next")

    def __init__(self, value: Value, next: Optional[Node] = None) -> None:
        self._value = value
        self._next = next

    @property
    def value(self) -> Value:
        return self._value

    @property
    def next(self) -> Optional[Node]:
        return self._next

    def __repr__(self) -> str:
        return f"[Node] {self._value}"


@dataclass(frozen=True)
class LinkedListResult:
    """
    Outcome of a linked list operation.
    `removed` is set by remove, `found` and `position` by search.
    """

    head: Optional[Node]
    message: Message
    removed: bool = False
    found: bool = False
    position: Optional[int] = None


# -----------------------------
# Helpers
# -----------------------------
def iter_nodes(head: Optional[Node]) -> Iterator[Node]:
    current = head
    while current is not None:
        yield current
        current = current.next


def from_iterable(values: Iterable[Value]) -> Optional[Node]:
    """Builds a list holding values in order and returns its head."""
    head: Optional[Node] = None
    for value in reversed(list(values)):
        head = Node(value, head)
    return head


def to_list(head: Optional[Node]) -> List[Value]:
    return [node.value for node in iter_nodes(head)]


def length(head: Optional[Node]) -> int:
    """Returns the number of elements in the linked list"""
    return sum(1 for _ in iter_nodes(head))


def get(head: Optional[Node], index: int) -> Optional[Node]:
    """
    Returns the node at the index specified.
    If the index is negative or past the end of the list, returns None.
    """
    if index < 0:
        return None
    for i, node in enumerate(iter_nodes(head)):
        if i == index:
            return node
    return None


def render(head: Optional[Node]) -> str:
    if head is None:
        return ""
    return "[Head] " + " -> ".join(format_value(v) for v in to_list(head)) + " [Tail]"


def _rebuild(prefix: List[Value], tail: Optional[Node]) -> Optional[Node]:
    """Copies the prefix values into fresh nodes linked in front of tail."""
    head = tail
    for value in reversed(prefix):
        head = Node(value, head)
    return head


# -----------------------------
# Operations
# -----------------------------
def append(head: Optional[Node], value: Value) -> LinkedListResult:
    """
    Attaches a new node after the last node.
    If the list is empty, the new node becomes the head.
    """
    if head is None:
        return LinkedListResult(
            Node(value),
            Message.success(f"Added {format_value(value)} as the head of the linked list."),
        )

    return LinkedListResult(
        _rebuild(to_list(head), Node(value)),
        Message.success(f"Appended {format_value(value)} to the end of the linked list."),
    )


def prepend(head: Optional[Node], value: Value) -> LinkedListResult:
    """
    Inserts a new element at the head of the linked list.
    O(1) since no scanning is involved.
    """
    return LinkedListResult(
        Node(value, head),
        Message.success(f"Prepended {format_value(value)} to the beginning of the linked list."),
    )


def remove(head: Optional[Node], value: Value) -> LinkedListResult:
    """
    Removes the first node holding value.
    Nodes before the match are copied; nodes after it are shared.
    """
    if head is None:
        return LinkedListResult(
            None,
            Message.error(ErrorKind.EMPTY_STRUCTURE, "Cannot remove from an empty linked list."),
        )

    if head.value == value:
        return LinkedListResult(
            head.next,
            Message.success(f"Removed {format_value(value)} from the head of the linked list."),
            removed=True,
        )

    prefix: List[Value] = [head.value]
    current = head.next
    while current is not None:
        if current.value == value:
            return LinkedListResult(
                _rebuild(prefix, current.next),
                Message.success(f"Removed {format_value(value)} from the linked list."),
                removed=True,
            )
        prefix.append(current.value)
        current = current.next

    return LinkedListResult(
        head,
        Message.error(ErrorKind.NOT_FOUND, f"Value {format_value(value)} not found in the linked list."),
    )


def search(head: Optional[Node], value: Value) -> LinkedListResult:
    """
    Returns the zero-based position of the first node
    which contains value.
    """
    if head is None:
        return LinkedListResult(
            None,
            Message.error(ErrorKind.EMPTY_STRUCTURE, "Cannot search an empty linked list."),
        )

    for position, node in enumerate(iter_nodes(head)):
        if node.value == value:
            return LinkedListResult(
                head,
                Message.success(f"Found {format_value(value)} at position {position} in the linked list."),
                found=True,
                position=position,
            )

    return LinkedListResult(
        head,
        Message.error(ErrorKind.NOT_FOUND, f"Value {format_value(value)} not found in the linked list."),
    )
