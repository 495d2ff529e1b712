"""
Plain-text descriptions of structure states, used by the CLI and the
HTML transcript.
"""

from __future__ import annotations

from typing import Any, List, Optional

from ..core.session import StructureKind
from ..core.types import format_value
from ..structures import bst, graph, heap, linkedlist, tree


def _join(values) -> str:
    return "[" + ", ".join(format_value(v) for v in values) + "]"


def _tree_outline(root: Optional[tree.TreeNode]) -> str:
    if root is None:
        return "<empty>"
    lines: List[str] = []

    def _walk(node: tree.TreeNode, depth: int) -> None:
        lines.append("  " * depth + format_value(node.value))
        for child in node.children:
            _walk(child, depth + 1)

    _walk(root, 0)
    return "\n".join(lines)


def _graph_summary(g: graph.Graph) -> str:
    if not g.nodes:
        return "<empty>"
    nodes = ", ".join(node.id for node in g.nodes)
    edges = ", ".join(f"{e.source} {'->' if e.directed else '--'} {e.target}" for e in g.edges)
    return f"nodes: {nodes}\nedges: {edges or '<none>'}"


def describe_state(kind: StructureKind | str, state: Any) -> str:
    kind = StructureKind(kind)
    if kind in (StructureKind.ARRAY, StructureKind.STACK, StructureKind.QUEUE, StructureKind.DEQUE):
        return _join(state)
    if kind is StructureKind.LINKED_LIST:
        return linkedlist.render(state) or "<empty>"
    if kind is StructureKind.BST:
        return bst.pretty_print(state)
    if kind is StructureKind.HEAP:
        h: heap.Heap = state
        return f"{h.mode.value} heap {_join(h.values)}"
    if kind is StructureKind.TREE:
        return _tree_outline(state)
    return _graph_summary(state)
