"""
Derived adjacency views of a graph.

Exporters:
    to_adjacency_list    - vertex id -> identifiers of incident edges
    to_adjacency_matrix  - (id, id) -> bool, symmetric
    to_adjacency_array   - dense numpy matrix counting edges
    to_sparse_adjacency  - same counts as a scipy CSR array

Matrix rows and columns follow identifier order; the identifier tuple
returned alongside the matrix gives the row of each vertex.
"""

import numpy as np
from scipy import sparse

from pgm_graph.types import EdgeType, GraphLike


def to_adjacency_list(graph: GraphLike) -> dict[str, frozenset[str] | None]:
    """
    Identifiers of the edges incident to each vertex.

    Vertices without incident edges map to None rather than to an empty set.
    """
    incident: dict[str, set[str]] = {node.id: set() for node in graph.vertices()}
    for edge in graph.edges():
        incident[edge.start.id].add(edge.id)
        incident[edge.end.id].add(edge.id)
    return {
        node_id: frozenset(edge_ids) if edge_ids else None
        for node_id, edge_ids in sorted(incident.items())
    }


def to_adjacency_matrix(graph: GraphLike) -> dict[tuple[str, str], bool]:
    """Whether two vertices are joined by some edge, orientation ignored."""
    node_ids = sorted(node.id for node in graph.vertices())
    matrix = {(first, second): False for first in node_ids for second in node_ids}
    for edge in graph.edges():
        matrix[edge.start.id, edge.end.id] = True
        matrix[edge.end.id, edge.start.id] = True
    return matrix


def _coordinates(graph: GraphLike) -> tuple[tuple[str, ...], np.ndarray, np.ndarray]:
    ids = tuple(sorted(node.id for node in graph.vertices()))
    position = {node_id: index for index, node_id in enumerate(ids)}
    rows: list[int] = []
    cols: list[int] = []
    for edge in sorted(graph.edges(), key=lambda e: e.id):
        start, end = position[edge.start.id], position[edge.end.id]
        rows.append(start)
        cols.append(end)
        # Undirected self loops fill their diagonal cell once
        if edge.kind is EdgeType.UNDIRECTED and start != end:
            rows.append(end)
            cols.append(start)
    return ids, np.asarray(rows, dtype=np.intp), np.asarray(cols, dtype=np.intp)


def to_adjacency_array(graph: GraphLike) -> tuple[tuple[str, ...], np.ndarray]:
    """
    Dense adjacency matrix.

    A directed edge u -> v adds one to cell (u, v); an undirected edge adds
    one to (u, v) and to (v, u). Parallel edges are counted.

    Returns:
        Tuple of (vertex identifiers in row order, int64 matrix).
    """
    ids, rows, cols = _coordinates(graph)
    matrix = np.zeros((len(ids), len(ids)), dtype=np.int64)
    np.add.at(matrix, (rows, cols), 1)
    return ids, matrix


def to_sparse_adjacency(graph: GraphLike) -> tuple[tuple[str, ...], sparse.csr_array]:
    """Same counts as `to_adjacency_array`, stored as a compressed sparse row array."""
    ids, rows, cols = _coordinates(graph)
    counts = sparse.coo_array(
        (np.ones(len(rows), dtype=np.int64), (rows, cols)),
        shape=(len(ids), len(ids)),
    )
    # Duplicate coordinates are summed on conversion
    return ids, counts.tocsr()


__all__ = [
    "to_adjacency_list",
    "to_adjacency_matrix",
    "to_adjacency_array",
    "to_sparse_adjacency",
]
