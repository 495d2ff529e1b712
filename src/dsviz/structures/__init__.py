"""Pure operations over each data structure."""

from . import bst, graph, heap, linkedlist, sequences, tree

__all__ = ["bst", "graph", "heap", "linkedlist", "sequences", "tree"]
