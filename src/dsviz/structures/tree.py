"""General (n-ary) rooted tree with parent-addressed child insertion.

Nodes are addressed by value. When several nodes share a value, the first
one met in a depth-first pre-order walk is used.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from ..core.errors import ErrorKind
from ..core.types import Message, Value, format_value


class TreeNode:
    """An immutable tree node holding a value and an ordered tuple of children."""

    __slots__ = ("value", "children")

    def __init__(self, value: Value, children: Tuple[TreeNode, ...] = ()) -> None:
        self.value = value
        self.children = tuple(children)

    def __repr__(self) -> str:
        return f"TreeNode({self.value!r}, children={len(self.children)})"


@dataclass(frozen=True)
class TreeResult:
    root: Optional[TreeNode]
    message: Message


# -----------------------------
# Structural queries
# -----------------------------
def preorder(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    if root is None:
        return
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def find(root: Optional[TreeNode], value: Value) -> Optional[TreeNode]:
    """Returns the first node holding value in pre-order, or None."""
    return next((node for node in preorder(root) if node.value == value), None)


def size(root: Optional[TreeNode]) -> int:
    return sum(1 for _ in preorder(root))


def height(root: Optional[TreeNode]) -> int:
    if root is None:
        return 0
    return 1 + max((height(child) for child in root.children), default=0)


def width(root: Optional[TreeNode]) -> int:
    """Number of leaves below root, at least 1 for a non-empty tree; 0 when empty."""
    if root is None:
        return 0
    if not root.children:
        return 1
    return max(1, sum(width(child) for child in root.children))


def _with_child(node: TreeNode, parent_value: Value, child_value: Value) -> Optional[TreeNode]:
    """
    Returns a copy of node with the new child attached under the first match,
    or None when no node in this subtree matches. Only the path to the
    parent is copied; other subtrees are shared.
    """
    if node.value == parent_value:
        return TreeNode(node.value, node.children + (TreeNode(child_value),))

    for i, child in enumerate(node.children):
        updated = _with_child(child, parent_value, child_value)
        if updated is not None:
            return TreeNode(node.value, node.children[:i] + (updated,) + node.children[i + 1 :])
    return None


# -----------------------------
# Operations
# -----------------------------
def add_root(root: Optional[TreeNode], value: Value) -> TreeResult:
    if root is not None:
        return TreeResult(
            root,
            Message.error(ErrorKind.INVALID_OPERATION, "Root already exists. Add child nodes instead."),
        )
    return TreeResult(TreeNode(value), Message.success(f"Added {format_value(value)} as the root node."))


def add_child(root: Optional[TreeNode], parent_value: Value, child_value: Value) -> TreeResult:
    if root is None:
        return TreeResult(None, Message.error(ErrorKind.EMPTY_STRUCTURE, "Please add a root node first."))

    updated = _with_child(root, parent_value, child_value)
    if updated is None:
        return TreeResult(
            root,
            Message.error(ErrorKind.NOT_FOUND, f"Parent node with value {format_value(parent_value)} not found."),
        )
    return TreeResult(
        updated,
        Message.success(f"Added {format_value(child_value)} as a child of {format_value(parent_value)}."),
    )
