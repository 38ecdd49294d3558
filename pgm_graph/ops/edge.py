"""
Functions taking an edge and a node.

All comparisons are made on identifiers, so a node value carrying a
different payload than the one stored in the edge still matches.
"""

from pgm_graph.model import Node
from pgm_graph.types import HasEndpoints, Identified


def node_ids(edge: HasEndpoints) -> frozenset[str]:
    """Identifiers of the end vertices of `edge`."""
    return frozenset((edge.start.id, edge.end.id))


def is_start(edge: HasEndpoints, node: Identified) -> bool:
    return edge.start.id == node.id


def is_end(edge: HasEndpoints, node: Identified) -> bool:
    return edge.end.id == node.id


def is_endvertice(edge: HasEndpoints, node: Identified) -> bool:
    """True iff `node` is one of the end vertices of `edge`."""
    return is_start(edge, node) or is_end(edge, node)


def get_other(edge: HasEndpoints, node: Identified) -> Node | None:
    """
    The end vertex of `edge` opposite to `node`.

    Returns None when `node` is not an end vertex of `edge`. For a self
    loop the node is its own opposite.
    """
    if is_start(edge, node):
        return edge.end
    if is_end(edge, node):
        return edge.start
    return None


__all__ = [
    "node_ids",
    "is_start",
    "is_end",
    "is_endvertice",
    "get_other",
]
