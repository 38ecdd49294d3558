"""
Neighbor generators.

A neighbor generator maps a vertex to the set of edges a traversal may
follow out of it. Which edges qualify depends on the edge semantics:

- out_edges:      directed graphs, edges starting at the vertex
- in_edges:       directed graphs walked backwards, edges ending at the vertex
- incident_edges: undirected graphs, every edge touching the vertex

Each factory indexes the graph once (O(V + E)); the returned function
then answers in O(1). Vertices unknown to the graph get an empty set.
"""

from collections.abc import Callable, Iterable

from pgm_graph.model import Edge, Node
from pgm_graph.types import EdgeType, GraphLike, NeighborGenerator


def make_neighbor_generator(
    graph: GraphLike, keys: Callable[[Edge], Iterable[str]]
) -> NeighborGenerator:
    """
    Create a neighbor generator from an edge-to-vertices mapping.

    Args:
        graph: Graph whose edges are indexed.
        keys: Identifiers of the vertices an edge is reachable from.

    Returns:
        A function vertex -> frozenset of edges reachable from that vertex.

    Example:
        >>> heads = make_neighbor_generator(graph, lambda edge: (edge.end.id,))
        >>> heads(Node("n2"))
        frozenset({...edges ending at n2...})
    """
    index: dict[str, set[Edge]] = {}
    for edge in graph.edges():
        for key in set(keys(edge)):
            index.setdefault(key, set()).add(edge)
    frozen = {key: frozenset(edges) for key, edges in index.items()}
    empty: frozenset[Edge] = frozenset()

    def neighbors(vertex: Node) -> frozenset[Edge]:
        return frozen.get(vertex.id, empty)

    return neighbors


def out_edges(graph: GraphLike) -> NeighborGenerator:
    return make_neighbor_generator(graph, lambda edge: (edge.start.id,))


def in_edges(graph: GraphLike) -> NeighborGenerator:
    return make_neighbor_generator(graph, lambda edge: (edge.end.id,))


def incident_edges(graph: GraphLike) -> NeighborGenerator:
    return make_neighbor_generator(graph, lambda edge: (edge.start.id, edge.end.id))


def edge_generator_for(graph: GraphLike) -> NeighborGenerator:
    """`out_edges` when every edge is directed, `incident_edges` otherwise."""
    edges = graph.edges()
    if edges and all(edge.kind is EdgeType.DIRECTED for edge in edges):
        return out_edges(graph)
    return incident_edges(graph)


__all__ = [
    "make_neighbor_generator",
    "out_edges",
    "in_edges",
    "incident_edges",
    "edge_generator_for",
]
