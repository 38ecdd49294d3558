"""
pgm_graph: immutable graphs and a depth-first forest engine.

Typical use:
    >>> from pgm_graph import Edge, Graph, Node, depth_first_search, incident_edges
    >>> n1, n2, n3 = Node("n1"), Node("n2"), Node("n3")
    >>> g = Graph.from_edge_set([
    ...     Edge.undirected("e1", n1, n2),
    ...     Edge.undirected("e2", n2, n3),
    ...     Edge.undirected("e3", n3, n1),
    ... ])
    >>> result = depth_first_search(g, incident_edges(g), check_cycle=True, start=n1)
    >>> len(result.cycle_list())
    1

Sub-packages:
    model   - Node, Edge, Graph, Path, Tree
    ops     - Queries, neighbor generators, subgraphs, set algebra, exporters
    search  - Depth-first forest engine and its result type
    utils   - Union-find and tree traversals
"""

from .exceptions import (
    EdgeNotFound,
    EmptyInput,
    GraphError,
    MalformedPath,
    MalformedTree,
    NotInGraph,
    TraversalCancelled,
    VertexNotFound,
)
from .model import Edge, EdgeType, Graph, GraphObject, Node, Path, Tree
from .ops import (
    edge_generator_for,
    get_other,
    get_subgraph_by_vertices,
    in_edges,
    incident_edges,
    neighbors_of,
    out_edges,
)
from .search import CycleInfo, DepthFirstResult, depth_first_search

__all__ = [
    # model
    "GraphObject",
    "Node",
    "Edge",
    "EdgeType",
    "Graph",
    "Path",
    "Tree",
    # ops
    "get_other",
    "neighbors_of",
    "get_subgraph_by_vertices",
    "out_edges",
    "in_edges",
    "incident_edges",
    "edge_generator_for",
    # search
    "depth_first_search",
    "DepthFirstResult",
    "CycleInfo",
    # exceptions
    "GraphError",
    "VertexNotFound",
    "EdgeNotFound",
    "NotInGraph",
    "MalformedPath",
    "MalformedTree",
    "EmptyInput",
    "TraversalCancelled",
]
