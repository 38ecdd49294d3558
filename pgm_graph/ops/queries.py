"""
Queries on a graph: membership, lookups, incidence and adjacency.

Lookups by identifier raise `VertexNotFound` / `EdgeNotFound`.
Membership-dependent predicates raise `NotInGraph` when one of their
arguments does not belong to the graph. Definitions follow Diestel 2017,
pp. 2-3.
"""

from collections.abc import Callable

from pgm_graph.exceptions import EdgeNotFound, NotInGraph, VertexNotFound
from pgm_graph.model import Edge, Node
from pgm_graph.ops.edge import get_other, is_end, is_endvertice, is_start, node_ids
from pgm_graph.types import GraphLike, HasEndpoints, Identified


def _describe(graph: GraphLike) -> str:
    return f"graph '{graph.id}'"


def is_empty(graph: GraphLike) -> bool:
    return not graph.vertices() and not graph.edges()


def is_in(graph: GraphLike, element: Identified) -> bool:
    """True when a node or an edge with the identifier of `element` is in the graph."""
    if isinstance(element, Edge):
        return element.id in graph.emap()
    if isinstance(element, Node):
        return element.id in graph.vmap()
    return element.id in graph.vmap() or element.id in graph.emap()


def _require(graph: GraphLike, *elements: Identified) -> None:
    for element in elements:
        if not is_in(graph, element):
            raise NotInGraph(f"{type(element).__name__} '{element.id}' is not in {_describe(graph)}")


def vertex_by_id(graph: GraphLike, identifier: str) -> Node:
    try:
        return graph.vmap()[identifier]
    except KeyError:
        raise VertexNotFound(identifier, _describe(graph)) from None


def edge_by_id(graph: GraphLike, identifier: str) -> Edge:
    try:
        return graph.emap()[identifier]
    except KeyError:
        raise EdgeNotFound(identifier, _describe(graph)) from None


def _edges_where(
    graph: GraphLike, node: Identified, condition: Callable[[HasEndpoints, Identified], bool]
) -> frozenset[Edge]:
    return frozenset(edge for edge in graph.edges() if condition(edge, node))


def edges_of(graph: GraphLike, node: Identified) -> frozenset[Edge]:
    """Edges incident to `node`, whatever their orientation."""
    return _edges_where(graph, node, is_endvertice)


def outgoing_edges_of(graph: GraphLike, node: Identified) -> frozenset[Edge]:
    """Edges starting at `node`. Only meaningful for directed edges."""
    return _edges_where(graph, node, is_start)


def incoming_edges_of(graph: GraphLike, node: Identified) -> frozenset[Edge]:
    """Edges ending at `node`. Only meaningful for directed edges."""
    return _edges_where(graph, node, is_end)


def edges_by_vertices(graph: GraphLike, first: Node, second: Node) -> frozenset[Edge]:
    """All edges joining `first` and `second`, parallel edges included."""
    _require(graph, first, second)
    wanted = frozenset((first.id, second.id))
    return frozenset(edge for edge in graph.edges() if node_ids(edge) == wanted)


def is_adjacent_of(graph: GraphLike, first: Edge, second: Edge) -> bool:
    """Two distinct edges are adjacent when they share an end vertex."""
    _require(graph, first, second)
    if first.id == second.id:
        return False
    return bool(node_ids(first) & node_ids(second))


def is_node_incident(graph: GraphLike, edge: Edge, node: Node) -> bool:
    """A vertex is incident to an edge when it is one of its end vertices."""
    _require(graph, edge, node)
    return is_endvertice(edge, node)


def is_neighbor_of(graph: GraphLike, first: Node, second: Node) -> bool:
    """Two vertices are neighbors when some edge joins them, orientation ignored."""
    return bool(edges_by_vertices(graph, first, second))


def neighbors_of(graph: GraphLike, node: Node) -> frozenset[Node]:
    """Opposite end vertices over every edge incident to `node`."""
    _require(graph, node)
    neighbors = set()
    for edge in graph.edges():
        other = get_other(edge, node)
        if other is not None:
            neighbors.add(other)
    return frozenset(neighbors)


__all__ = [
    "is_empty",
    "is_in",
    "vertex_by_id",
    "edge_by_id",
    "edges_of",
    "outgoing_edges_of",
    "incoming_edges_of",
    "edges_by_vertices",
    "is_adjacent_of",
    "is_node_incident",
    "is_neighbor_of",
    "neighbors_of",
]
