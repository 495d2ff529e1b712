"""Session - caller-side holder of the current structures.

Keeps one current state per structure kind, applies operations to it and
records the returned messages.
"""

from __future__ import annotations

import logging
import random
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional

from ..structures import bst, graph, heap, linkedlist, sequences, tree
from .config import SessionConfig
from .types import Message

logger = logging.getLogger(__name__)


class StructureKind(str, Enum):
    ARRAY = "array"
    STACK = "stack"
    QUEUE = "queue"
    DEQUE = "deque"
    LINKED_LIST = "linked_list"
    BST = "bst"
    HEAP = "heap"
    TREE = "tree"
    GRAPH = "graph"


@dataclass(frozen=True)
class StructureEntry:
    """How a session drives one structure kind.

    Attributes:
        label: Name used in reset notices
        state_field: Attribute of the operation result holding the new state
        operations: Operation name -> function taking (state, *args)
    """

    label: str
    state_field: str
    operations: Dict[str, Callable[..., Any]]


STRUCTURES: Dict[StructureKind, StructureEntry] = {
    StructureKind.ARRAY: StructureEntry(
        "Array",
        "items",
        {"insert_at": sequences.insert_at, "remove_at": sequences.remove_at, "view_at": sequences.view_at},
    ),
    StructureKind.STACK: StructureEntry(
        "Stack",
        "items",
        {"push": sequences.push, "pop": sequences.pop, "peek": sequences.peek_stack},
    ),
    StructureKind.QUEUE: StructureEntry(
        "Queue",
        "items",
        {"enqueue": sequences.enqueue, "dequeue": sequences.dequeue, "peek": sequences.peek_queue},
    ),
    StructureKind.DEQUE: StructureEntry(
        "Deque",
        "items",
        {
            "add_front": sequences.add_front,
            "add_rear": sequences.add_rear,
            "remove_front": sequences.remove_front,
            "remove_rear": sequences.remove_rear,
            "peek_front": sequences.peek_front,
            "peek_rear": sequences.peek_rear,
        },
    ),
    StructureKind.LINKED_LIST: StructureEntry(
        "Linked list",
        "head",
        {
            "append": linkedlist.append,
            "prepend": linkedlist.prepend,
            "remove": linkedlist.remove,
            "search": linkedlist.search,
        },
    ),
    StructureKind.BST: StructureEntry(
        "BST",
        "root",
        {"insert": bst.insert, "remove": bst.remove, "search": bst.search},
    ),
    StructureKind.HEAP: StructureEntry(
        "Heap",
        "heap",
        {"insert": heap.insert, "extract": heap.extract, "toggle_mode": heap.toggle_mode, "peek": heap.peek},
    ),
    StructureKind.TREE: StructureEntry(
        "Tree",
        "root",
        {"add_root": tree.add_root, "add_child": tree.add_child},
    ),
    StructureKind.GRAPH: StructureEntry(
        "Graph",
        "graph",
        {
            "add_node": graph.add_node,
            "remove_node": graph.remove_node,
            "add_edge": graph.add_edge,
            "remove_edge": graph.remove_edge,
        },
    ),
}


class Session:
    """Holds the current state of every structure and the message log.

    Args:
        config: Session configuration

    Public API:
        - apply(kind, operation, *args): Run an operation and keep its new state
        - reset(kind): Replace a structure with its empty state
        - state(kind): Current state of a structure
        - log: Messages recorded so far, oldest first

    Invariants:
        - A structure's state is replaced in a single assignment after
          its operation returns
        - The log only grows, apart from dropping the oldest entries when
          max_log_messages is set
    """

    def __init__(self, config: Optional[SessionConfig] = None):
        self.config = config or SessionConfig()
        self._rng = random.Random(self.config.layout_seed)
        self._log: deque[Message] = deque(maxlen=self.config.max_log_messages)
        self._states: Dict[StructureKind, Any] = {kind: self._empty_state(kind) for kind in StructureKind}

    def _empty_state(self, kind: StructureKind, heap_mode: Optional[heap.HeapMode] = None) -> Any:
        if kind is StructureKind.HEAP:
            return heap.Heap((), heap_mode or heap.HeapMode(self.config.default_heap_mode))
        if kind is StructureKind.GRAPH:
            return graph.Graph()
        if kind in (StructureKind.LINKED_LIST, StructureKind.BST, StructureKind.TREE):
            return None
        return ()

    @property
    def log(self) -> tuple[Message, ...]:
        return tuple(self._log)

    def state(self, kind: StructureKind | str) -> Any:
        return self._states[StructureKind(kind)]

    def record(self, message: Message) -> Message:
        """Append a message produced outside the core, e.g. input validation."""
        self._log.append(message)
        if message.is_error:
            logger.info(f"Error: {message.text}")
        return message

    def random_position(self) -> graph.Position:
        """Pick a node position inside the padded canvas."""
        cfg = self.config
        x = self._rng.uniform(cfg.canvas_padding, cfg.canvas_width - cfg.canvas_padding)
        y = self._rng.uniform(cfg.canvas_padding, cfg.canvas_height - cfg.canvas_padding)
        return (x, y)

    def apply(self, kind: StructureKind | str, operation: str, *args: Any) -> Any:
        """Run operation on the current state of kind and keep the returned state.

        Returns the operation's result object.
        """
        kind = StructureKind(kind)
        entry = STRUCTURES[kind]
        try:
            func = entry.operations[operation]
        except KeyError:
            raise ValueError(
                f"Unknown operation {operation!r} for {kind.value}; "
                f"expected one of {', '.join(entry.operations)}"
            ) from None

        if kind is StructureKind.GRAPH and operation == "add_node" and len(args) == 1:
            args = (args[0], self.random_position())

        logger.debug(f"Applying {kind.value}.{operation}{args}")
        result = func(self._states[kind], *args)
        self._states[kind] = getattr(result, entry.state_field)
        self.record(result.message)
        return result

    def reset(self, kind: StructureKind | str) -> Message:
        kind = StructureKind(kind)
        # A reset heap keeps its current ordering
        current = self._states[kind]
        self._states[kind] = self._empty_state(kind, getattr(current, "mode", None))
        if kind is StructureKind.HEAP:
            label = f"{self._states[kind].mode.value} heap"
        else:
            label = STRUCTURES[kind].label
        logger.debug(f"Reset {kind.value}")
        return self.record(Message.warning(f"{label} has been reset."))
