"""
Subgraph extraction from a vertex subset.

An edge policy decides, for each edge of the graph, whether it belongs
to the part of the graph spanned by the subset. The default policy gives
the induced subgraph: an edge is kept iff both its end vertices are in
the subset.
"""

from collections.abc import Iterable

from pgm_graph.model import Edge, Graph, Node
from pgm_graph.types import EdgePolicy, GraphLike


def induced_edge_policy(edge: Edge, vertex_ids: frozenset[str]) -> bool:
    return edge.start.id in vertex_ids and edge.end.id in vertex_ids


def inclusive_edge_policy(edge: Edge, vertex_ids: frozenset[str]) -> bool:
    return edge.start.id in vertex_ids or edge.end.id in vertex_ids


def get_subgraph_by_vertices(
    graph: GraphLike,
    vertices: Iterable[Node],
    edge_policy: EdgePolicy | None = None,
) -> tuple[frozenset[Node], frozenset[Edge]]:
    """
    Nodes of `graph` whose identifiers are in `vertices`, with the edges the policy keeps.

    Args:
        graph: Graph to extract from.
        vertices: Vertex subset; only identifiers matter.
        edge_policy: (edge, subset identifiers) -> keep edge. Defaults to
            `induced_edge_policy`.

    Returns:
        Tuple of (nodes, edges). Nodes are the graph's own node values.
    """
    policy = induced_edge_policy if edge_policy is None else edge_policy
    vertex_ids = frozenset(node.id for node in vertices)
    nodes = frozenset(node for node in graph.vertices() if node.id in vertex_ids)
    edges = frozenset(edge for edge in graph.edges() if policy(edge, vertex_ids))
    return nodes, edges


def subgraph(
    graph: GraphLike,
    vertices: Iterable[Node],
    edge_policy: EdgePolicy | None = None,
) -> Graph:
    """Same as `get_subgraph_by_vertices`, packed into a new Graph."""
    nodes, edges = get_subgraph_by_vertices(graph, vertices, edge_policy)
    return Graph.from_edge_and_node_set(edges, nodes)


__all__ = [
    "induced_edge_policy",
    "inclusive_edge_policy",
    "get_subgraph_by_vertices",
    "subgraph",
]
