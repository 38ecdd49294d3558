"""
Operations on graph objects.

Modules:
    edge        - Edge/node relations (is_start, get_other...)
    queries     - Lookups, incidence and adjacency within a graph
    generators  - Neighbor generators for directed and undirected traversals
    subgraph    - Subgraph extraction from a vertex subset
    sets        - Set algebra on nodes, edges and graphs
    export      - Adjacency list and matrix views
"""

from .edge import get_other, is_end, is_endvertice, is_start, node_ids
from .export import (
    to_adjacency_array,
    to_adjacency_list,
    to_adjacency_matrix,
    to_sparse_adjacency,
)
from .generators import (
    edge_generator_for,
    in_edges,
    incident_edges,
    make_neighbor_generator,
    out_edges,
)
from .queries import (
    edge_by_id,
    edges_by_vertices,
    edges_of,
    incoming_edges_of,
    is_adjacent_of,
    is_empty,
    is_in,
    is_neighbor_of,
    is_node_incident,
    neighbors_of,
    outgoing_edges_of,
    vertex_by_id,
)
from .sets import (
    SetOpKind,
    contains,
    contains_edges,
    contains_nodes,
    difference,
    difference_edge,
    difference_edges,
    difference_nodes,
    intersection,
    intersection_edge,
    intersection_edges,
    intersection_nodes,
    set_operation,
    symmetric_difference,
    symmetric_difference_edge,
    symmetric_difference_edges,
    symmetric_difference_nodes,
    union,
    union_edge,
    union_edges,
    union_nodes,
)
from .subgraph import (
    get_subgraph_by_vertices,
    inclusive_edge_policy,
    induced_edge_policy,
    subgraph,
)

__all__ = [
    # edge
    "node_ids",
    "is_start",
    "is_end",
    "is_endvertice",
    "get_other",
    # queries
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
    # generators
    "make_neighbor_generator",
    "out_edges",
    "in_edges",
    "incident_edges",
    "edge_generator_for",
    # subgraph
    "induced_edge_policy",
    "inclusive_edge_policy",
    "get_subgraph_by_vertices",
    "subgraph",
    # sets
    "SetOpKind",
    "set_operation",
    "union_nodes",
    "intersection_nodes",
    "difference_nodes",
    "symmetric_difference_nodes",
    "contains_nodes",
    "union_edges",
    "intersection_edges",
    "difference_edges",
    "symmetric_difference_edges",
    "contains_edges",
    "union_edge",
    "intersection_edge",
    "difference_edge",
    "symmetric_difference_edge",
    "union",
    "intersection",
    "difference",
    "symmetric_difference",
    "contains",
    # export
    "to_adjacency_list",
    "to_adjacency_matrix",
    "to_adjacency_array",
    "to_sparse_adjacency",
]
