"""
Disjoint sets over vertex identifiers.

Validates that Path and Tree inputs are connected, and gives an
orientation-blind component partition independent of the depth-first
engine.
"""

from collections.abc import Hashable, Iterable
from typing import Generic, TypeVar

from pgm_graph.types import GraphLike

Element = TypeVar("Element", bound=Hashable)


class UnionFind(Generic[Element]):
    """
    Disjoint sets with path halving and union by size.

    Unknown elements become singleton sets on first use.

    Example:
        >>> uf = UnionFind(["n1", "n2", "n3"])
        >>> uf.union("n1", "n2") == uf.find("n2")
        True
        >>> uf.set_count()
        2
    """

    def __init__(self, elements: Iterable[Element] = ()) -> None:
        self._parent: dict[Element, Element] = {}
        self._size: dict[Element, int] = {}
        for element in elements:
            self.find(element)

    def find(self, element: Element) -> Element:
        """Representative of the set holding `element`."""
        if element not in self._parent:
            self._parent[element] = element
            self._size[element] = 1
            return element
        while self._parent[element] != element:
            # Point to the grandparent on the way up
            self._parent[element] = self._parent[self._parent[element]]
            element = self._parent[element]
        return element

    def union(self, x: Element, y: Element) -> Element:
        """Merges the sets of `x` and `y`, the larger set's representative is kept."""
        root_x, root_y = self.find(x), self.find(y)
        if root_x == root_y:
            return root_x
        if self._size[root_x] < self._size[root_y]:
            root_x, root_y = root_y, root_x
        self._parent[root_y] = root_x
        self._size[root_x] += self._size.pop(root_y)
        return root_x

    def set_count(self) -> int:
        return len(self._size)

    def groups(self) -> list[frozenset[Element]]:
        members: dict[Element, set[Element]] = {}
        for element in self._parent:
            members.setdefault(self.find(element), set()).add(element)
        return [frozenset(group) for group in members.values()]


def graph_union_find(graph: GraphLike) -> UnionFind[str]:
    """One set per vertex identifier, merged along every edge."""
    uf = UnionFind[str](node.id for node in graph.vertices())
    for edge in graph.edges():
        uf.union(edge.start.id, edge.end.id)
    return uf


def connected_components(graph: GraphLike) -> frozenset[frozenset[str]]:
    """
    Partition of the vertex identifiers into connected components.

    Edge orientation is ignored, so for directed graphs this gives the
    weakly connected components.
    """
    return frozenset(graph_union_find(graph).groups())


__all__ = [
    "UnionFind",
    "graph_union_find",
    "connected_components",
]
