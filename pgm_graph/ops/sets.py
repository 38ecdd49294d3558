"""
Set algebra on nodes, edges and graphs.

Graph objects compare by identifier, so two edges sharing an identifier
are one element even when they record different end vertices. Every
operation here resolves such collisions the same way: the member coming
from the left operand is kept.

Edges, being two-element vertex sets (Diestel 2017, p. 2), also get
vertex-level operations (`union_edge`, `intersection_edge`, ...).
"""

from collections.abc import Set
from enum import Enum
from itertools import chain
from typing import TypeVar

from pgm_graph.model import Edge, Graph, GraphObject, Node
from pgm_graph.types import GraphLike

T = TypeVar("T", bound=GraphObject)


class SetOpKind(Enum):
    UNION = "union"
    INTERSECTION = "intersection"
    DIFFERENCE = "difference"
    SYMMETRIC_DIFFERENCE = "symmetric_difference"


def set_operation(a: Set[T], b: Set[T], kind: SetOpKind) -> frozenset[T]:
    """Applies `kind` to two sets of graph objects, keeping left members on collisions."""
    match kind:
        case SetOpKind.UNION:
            return frozenset(chain(a, b))
        case SetOpKind.INTERSECTION:
            return frozenset(x for x in a if x in b)
        case SetOpKind.DIFFERENCE:
            return frozenset(x for x in a if x not in b)
        case SetOpKind.SYMMETRIC_DIFFERENCE:
            return frozenset(chain((x for x in a if x not in b), (y for y in b if y not in a)))
    raise ValueError(f"Unknown set operation: {kind}")


# -- node sets ---------------------------------------------------------------


def union_nodes(a: Set[Node], b: Set[Node]) -> frozenset[Node]:
    return set_operation(a, b, SetOpKind.UNION)


def intersection_nodes(a: Set[Node], b: Set[Node]) -> frozenset[Node]:
    return set_operation(a, b, SetOpKind.INTERSECTION)


def difference_nodes(a: Set[Node], b: Set[Node]) -> frozenset[Node]:
    return set_operation(a, b, SetOpKind.DIFFERENCE)


def symmetric_difference_nodes(a: Set[Node], b: Set[Node]) -> frozenset[Node]:
    return set_operation(a, b, SetOpKind.SYMMETRIC_DIFFERENCE)


def contains_nodes(a: Set[Node], b: Set[Node]) -> bool:
    """True when every node of `b` is in `a`."""
    return all(node in a for node in b)


# -- edge sets ---------------------------------------------------------------


def union_edges(a: Set[Edge], b: Set[Edge]) -> frozenset[Edge]:
    return set_operation(a, b, SetOpKind.UNION)


def intersection_edges(a: Set[Edge], b: Set[Edge]) -> frozenset[Edge]:
    return set_operation(a, b, SetOpKind.INTERSECTION)


def difference_edges(a: Set[Edge], b: Set[Edge]) -> frozenset[Edge]:
    return set_operation(a, b, SetOpKind.DIFFERENCE)


def symmetric_difference_edges(a: Set[Edge], b: Set[Edge]) -> frozenset[Edge]:
    return set_operation(a, b, SetOpKind.SYMMETRIC_DIFFERENCE)


def contains_edges(a: Set[Edge], b: Set[Edge]) -> bool:
    """True when every edge of `b` is in `a`."""
    return all(edge in a for edge in b)


# -- single edges as vertex sets ---------------------------------------------


def _ends(edge: Edge) -> frozenset[Node]:
    return frozenset((edge.start, edge.end))


def union_edge(a: Edge, b: Edge) -> frozenset[Node]:
    return union_nodes(_ends(a), _ends(b))


def intersection_edge(a: Edge, b: Edge) -> frozenset[Node]:
    """Common end vertices of two edges."""
    return intersection_nodes(_ends(a), _ends(b))


def difference_edge(a: Edge, b: Edge) -> frozenset[Node]:
    return difference_nodes(_ends(a), _ends(b))


def symmetric_difference_edge(a: Edge, b: Edge) -> frozenset[Node]:
    return symmetric_difference_nodes(_ends(a), _ends(b))


# -- whole graphs ------------------------------------------------------------


def _graph_operation(a: GraphLike, b: GraphLike, kind: SetOpKind) -> Graph:
    nodes = set_operation(a.vertices(), b.vertices(), kind)
    edges = set_operation(a.edges(), b.edges(), kind)
    return Graph.from_edge_and_node_set(edges, nodes)


def union(a: GraphLike, b: GraphLike) -> Graph:
    return _graph_operation(a, b, SetOpKind.UNION)


def intersection(a: GraphLike, b: GraphLike) -> Graph:
    return _graph_operation(a, b, SetOpKind.INTERSECTION)


def difference(a: GraphLike, b: GraphLike) -> Graph:
    """
    Vertices and edges of `a` absent from `b`.

    The end vertices of a surviving edge stay in the result even when `b`
    holds them, since a graph cannot hold an edge without its ends.
    """
    return _graph_operation(a, b, SetOpKind.DIFFERENCE)


def symmetric_difference(a: GraphLike, b: GraphLike) -> Graph:
    return _graph_operation(a, b, SetOpKind.SYMMETRIC_DIFFERENCE)


def contains(a: GraphLike, b: GraphLike) -> bool:
    """True when `b` is a subgraph of `a`, vertices and edges compared by identifier."""
    return contains_nodes(a.vertices(), b.vertices()) and contains_edges(a.edges(), b.edges())


__all__ = [
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
]
