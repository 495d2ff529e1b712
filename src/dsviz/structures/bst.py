from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional

from ..core.errors import ErrorKind
from ..core.types import Message, Number, format_value


# -----------------------------
# Binary Tree Node
# -----------------------------
class BinaryTreeNode:
    """
    An immutable node in a binary search tree.
    Updates build new nodes along the path from the root to the change.
    """

    __slots__ = ("value", "left", "right")

    def __init__(
        self,
        value: Number,
        left: Optional[BinaryTreeNode] = None,
        right: Optional[BinaryTreeNode] = None,
    ) -> None:
        self.value = value
        self.left = left
        self.right = right

    def __repr__(self) -> str:
        return f"BinaryTreeNode({self.value!r})"


@dataclass(frozen=True)
class BSTResult:
    root: Optional[BinaryTreeNode]
    message: Message
    found: bool = False


# -------------------------------
# Core algorithms
# -------------------------------
def insert_node(node: Optional[BinaryTreeNode], value: Number) -> BinaryTreeNode:
    """
    Insert a value BST style, returning the new root.
    An exact match is left alone, so duplicates are never inserted and
    the original root comes back unchanged.
    """
    if node is None:
        return BinaryTreeNode(value)
    if value < node.value:
        left = insert_node(node.left, value)
        return node if left is node.left else BinaryTreeNode(node.value, left, node.right)
    if value > node.value:
        right = insert_node(node.right, value)
        return node if right is node.right else BinaryTreeNode(node.value, node.left, right)
    return node


def remove_node(node: Optional[BinaryTreeNode], value: Number) -> Optional[BinaryTreeNode]:
    """
    Standard BST deletion, returning the new root.
    A node with two children takes the value of its in-order successor
    (the minimum of its right subtree), which is then removed from the right subtree.
    """
    if node is None:
        return None
    if value < node.value:
        return BinaryTreeNode(node.value, remove_node(node.left, value), node.right)
    if value > node.value:
        return BinaryTreeNode(node.value, node.left, remove_node(node.right, value))

    # Zero or one child: splice the remaining child into this slot
    if node.left is None:
        return node.right
    if node.right is None:
        return node.left

    successor = node.right
    while successor.left is not None:
        successor = successor.left
    return BinaryTreeNode(successor.value, node.left, remove_node(node.right, successor.value))


def contains(node: Optional[BinaryTreeNode], value: Number) -> bool:
    if node is None:
        return False
    if node.value == value:
        return True
    if value < node.value:
        return contains(node.left, value)
    return contains(node.right, value)


def height(node: Optional[BinaryTreeNode]) -> int:
    """
    Returns the height of the tree, 0 for an empty tree.
    Time Complexity: O(n) since all nodes must be visited
    """
    if node is None:
        return 0
    return 1 + max(height(node.left), height(node.right))


def size(node: Optional[BinaryTreeNode]) -> int:
    if node is None:
        return 0
    return 1 + size(node.left) + size(node.right)


# -------------------------------
# Traversals
# -------------------------------
def inorder(node: Optional[BinaryTreeNode], visit: Callable[[Number], None]) -> None:
    if node:
        inorder(node.left, visit)
        visit(node.value)
        inorder(node.right, visit)


def preorder(node: Optional[BinaryTreeNode], visit: Callable[[Number], None]) -> None:
    if node:
        visit(node.value)
        preorder(node.left, visit)
        preorder(node.right, visit)


def postorder(node: Optional[BinaryTreeNode], visit: Callable[[Number], None]) -> None:
    if node:
        postorder(node.left, visit)
        postorder(node.right, visit)
        visit(node.value)


def to_list(node: Optional[BinaryTreeNode]) -> List[Number]:
    """Return all values of the tree in inorder as a list."""
    values: List[Number] = []
    inorder(node, values.append)
    return values


def from_iterable(values) -> Optional[BinaryTreeNode]:
    root: Optional[BinaryTreeNode] = None
    for value in values:
        root = insert_node(root, value)
    return root


def find_min(node: Optional[BinaryTreeNode]) -> Optional[Number]:
    """
    Finds the minimum value in the binary search tree
    Time Complexity: Avg. O(logn), O(n) worst case for an unbalanced BST
    """
    if node is None:
        return None
    while node.left:
        node = node.left
    return node.value


def find_max(node: Optional[BinaryTreeNode]) -> Optional[Number]:
    if node is None:
        return None
    while node.right:
        node = node.right
    return node.value


def is_valid(node: Optional[BinaryTreeNode]) -> bool:
    """Checks the BST property with strict bounds, so duplicates fail."""

    def _check(n: Optional[BinaryTreeNode], lo: Optional[Number], hi: Optional[Number]) -> bool:
        if n is None:
            return True
        if lo is not None and n.value <= lo:
            return False
        if hi is not None and n.value >= hi:
            return False
        return _check(n.left, lo, n.value) and _check(n.right, n.value, hi)

    return _check(node, None, None)


def pretty_print(root: Optional[BinaryTreeNode]) -> str:
    """
    Render the tree on its side, root at the left margin.
    Right subtrees are drawn above their parent and left subtrees below,
    so reading top to bottom gives the values in descending order.
    """
    if root is None:
        return "<empty>"

    lines: List[str] = []

    def _walk(node: BinaryTreeNode, prefix: str, branch: str) -> None:
        if node.right is not None:
            above = prefix + ("│   " if branch == "└── " else "    ")
            _walk(node.right, above, "┌── ")
        lines.append(prefix + branch + format_value(node.value))
        if node.left is not None:
            below = prefix + ("│   " if branch == "┌── " else "    ")
            _walk(node.left, below, "└── ")

    _walk(root, "", "")
    return "\n".join(lines)


# -------------------------------
# Operations
# -------------------------------
def insert(root: Optional[BinaryTreeNode], value: Number) -> BSTResult:
    if contains(root, value):
        return BSTResult(
            root,
            Message.error(ErrorKind.DUPLICATE_IDENTITY, f"Value {format_value(value)} already exists in the BST."),
        )
    return BSTResult(insert_node(root, value), Message.success(f"Inserted {format_value(value)} into the BST."))


def remove(root: Optional[BinaryTreeNode], value: Number) -> BSTResult:
    if root is None:
        return BSTResult(None, Message.error(ErrorKind.EMPTY_STRUCTURE, "BST is empty. Nothing to remove."))
    if not contains(root, value):
        return BSTResult(
            root,
            Message.error(ErrorKind.NOT_FOUND, f"Value {format_value(value)} does not exist in the BST."),
        )
    return BSTResult(remove_node(root, value), Message.success(f"Removed {format_value(value)} from the BST."))


def search(root: Optional[BinaryTreeNode], value: Number) -> BSTResult:
    if root is None:
        return BSTResult(None, Message.error(ErrorKind.EMPTY_STRUCTURE, "BST is empty. Nothing to search."))
    if contains(root, value):
        return BSTResult(root, Message.success(f"Found {format_value(value)} in the BST."), found=True)
    return BSTResult(
        root,
        Message.error(ErrorKind.NOT_FOUND, f"Value {format_value(value)} not found in the BST."),
    )
