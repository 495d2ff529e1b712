"""Graph of named nodes joined by directed or undirected edges.

Node coordinates are display data supplied by the caller; the graph only
stores them.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

from ..core.errors import ErrorKind
from ..core.types import Message

Position = Tuple[float, float]


@dataclass(frozen=True)
class GraphNode:
    id: str
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class GraphEdge:
    source: str
    target: str
    directed: bool = False

    def touches(self, node_id: str) -> bool:
        return self.source == node_id or self.target == node_id

    def matches(self, source: str, target: str) -> bool:
        """True if this stored edge connects source to target, honouring direction."""
        if self.source == source and self.target == target:
            return True
        return not self.directed and self.source == target and self.target == source


@dataclass(frozen=True)
class Graph:
    """An immutable graph snapshot.

    Invariants:
        - Node ids are unique
        - Edge endpoints reference existing node ids
        - No self loops and no duplicate logical edges
    """

    nodes: Tuple[GraphNode, ...] = ()
    edges: Tuple[GraphEdge, ...] = ()

    def has_node(self, node_id: str) -> bool:
        return any(node.id == node_id for node in self.nodes)

    def node(self, node_id: str) -> Optional[GraphNode]:
        return next((node for node in self.nodes if node.id == node_id), None)


@dataclass(frozen=True)
class GraphResult:
    graph: Graph
    message: Message


# -----------------------------
# Queries
# -----------------------------
def incident_edges(graph: Graph, node_id: str) -> List[GraphEdge]:
    return [edge for edge in graph.edges if edge.touches(node_id)]


def neighbors(graph: Graph, node_id: str) -> List[str]:
    """
    Ids reachable from node_id over one edge, in edge order.
    Directed edges are only followed from source to target.
    """
    result: List[str] = []
    for edge in graph.edges:
        if edge.source == node_id:
            other = edge.target
        elif not edge.directed and edge.target == node_id:
            other = edge.source
        else:
            continue
        if other not in result:
            result.append(other)
    return result


def degree(graph: Graph, node_id: str) -> int:
    return len(incident_edges(graph, node_id))


def _missing(node_id: str) -> Message:
    return Message.error(ErrorKind.NOT_FOUND, f'Node "{node_id}" does not exist.')


# -----------------------------
# Operations
# -----------------------------
def add_node(graph: Graph, node_id: str, position: Position = (0.0, 0.0)) -> GraphResult:
    if graph.has_node(node_id):
        return GraphResult(
            graph,
            Message.error(ErrorKind.DUPLICATE_IDENTITY, f'Node "{node_id}" already exists.'),
        )
    x, y = position
    return GraphResult(
        replace(graph, nodes=graph.nodes + (GraphNode(node_id, x, y),)),
        Message.success(f'Added node "{node_id}".'),
    )


def remove_node(graph: Graph, node_id: str) -> GraphResult:
    """Removes the node and every edge whose source or target is node_id."""
    if not graph.has_node(node_id):
        return GraphResult(graph, _missing(node_id))
    return GraphResult(
        Graph(
            nodes=tuple(node for node in graph.nodes if node.id != node_id),
            edges=tuple(edge for edge in graph.edges if not edge.touches(node_id)),
        ),
        Message.success(f'Removed node "{node_id}" and all connected edges.'),
    )


def add_edge(graph: Graph, source: str, target: str, directed: bool = False) -> GraphResult:
    """
    Adds an edge unless it is a self loop or an equivalent edge exists.
    A directed edge only collides with the same ordered pair;
    an undirected edge collides with either ordering.
    """
    if source == target:
        return GraphResult(
            graph,
            Message.error(ErrorKind.INVALID_OPERATION, "Self-loops are not supported in this visualizer."),
        )
    for node_id in (source, target):
        if not graph.has_node(node_id):
            return GraphResult(graph, _missing(node_id))

    exists = any(
        (edge.source == source and edge.target == target)
        or (not directed and edge.source == target and edge.target == source)
        for edge in graph.edges
    )
    if exists:
        return GraphResult(graph, Message.error(ErrorKind.DUPLICATE_IDENTITY, "This edge already exists."))

    kind = "directed" if directed else "undirected"
    return GraphResult(
        replace(graph, edges=graph.edges + (GraphEdge(source, target, directed),)),
        Message.success(f'Added {kind} edge from "{source}" to "{target}".'),
    )


def remove_edge(graph: Graph, source: str, target: str) -> GraphResult:
    """
    Removes the first edge from source to target, or a stored
    undirected edge running the other way.
    """
    for i, edge in enumerate(graph.edges):
        if edge.matches(source, target):
            return GraphResult(
                replace(graph, edges=graph.edges[:i] + graph.edges[i + 1 :]),
                Message.success(f'Removed edge between "{source}" and "{target}".'),
            )
    return GraphResult(graph, Message.error(ErrorKind.NOT_FOUND, "This edge does not exist."))
