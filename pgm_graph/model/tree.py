"""
Rooted tree type.

A tree is a connected graph with |E| = |V| - 1. Choosing a root induces
the tree order of Diestel 2017, p. 15: x <= y when x lies on the path
from the root to y. Edge orientation is ignored when the parent links
are derived from the root.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import KW_ONLY, dataclass
from functools import cached_property

from pgm_graph.constants import new_identifier
from pgm_graph.exceptions import EmptyInput, MalformedTree, VertexNotFound
from pgm_graph.model.edge import Edge
from pgm_graph.model.graph import Graph
from pgm_graph.model.objects import Node
from pgm_graph.utils.traversal import breadth_first_levels, depth_first_preorder
from pgm_graph.utils.union_find import graph_union_find


@dataclass(frozen=True, eq=False)
class Tree(Graph):
    _: KW_ONLY
    root_id: str

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.is_empty():
            raise EmptyInput(f"Tree '{self.id}' needs at least one vertex")
        if not self.has_vertex(self.root_id):
            raise VertexNotFound(self.root_id, f"tree '{self.id}'")
        if self.size() != self.order() - 1:
            raise MalformedTree(
                f"Tree '{self.id}' has {self.size()} edges for {self.order()} vertices"
            )
        if graph_union_find(self).set_count() != 1:
            raise MalformedTree(f"Tree '{self.id}' is not connected")

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[Edge],
        root: Node,
        identifier: str | None = None,
    ) -> Tree:
        return cls(
            identifier or new_identifier(),
            isolated_nodes=frozenset((root,)),
            edge_set=frozenset(edges),
            root_id=root.id,
        )

    @cached_property
    def _parents(self) -> dict[str, str | None]:
        incident: dict[str, list[str]] = {node_id: [] for node_id in self._vertex_index}
        for edge in self.sorted_edges():
            incident[edge.start.id].append(edge.end.id)
            incident[edge.end.id].append(edge.start.id)

        parents: dict[str, str | None] = {self.root_id: None}
        stack = [self.root_id]
        while stack:
            current = stack.pop()
            for neighbor in incident[current]:
                if neighbor not in parents:
                    parents[neighbor] = current
                    stack.append(neighbor)
        return parents

    @cached_property
    def _children(self) -> dict[str, tuple[str, ...]]:
        children: dict[str, list[str]] = {node_id: [] for node_id in self._vertex_index}
        for node_id, parent in self._parents.items():
            if parent is not None:
                children[parent].append(node_id)
        return {node_id: tuple(sorted(kids)) for node_id, kids in children.items()}

    @cached_property
    def _heights(self) -> dict[str, int]:
        levels = breadth_first_levels(self._children.__getitem__, self.root_id)
        return dict(levels)

    def _key(self, node: Node) -> str:
        if not self.has_vertex(node.id):
            raise VertexNotFound(node.id, f"tree '{self.id}'")
        return node.id

    def root(self) -> Node:
        return self._vertex_index[self.root_id]

    def parent_of(self, node: Node) -> Node | None:
        parent = self._parents[self._key(node)]
        return None if parent is None else self._vertex_index[parent]

    def children_of(self, node: Node) -> tuple[Node, ...]:
        return tuple(self._vertex_index[kid] for kid in self._children[self._key(node)])

    def leaves(self) -> frozenset[Node]:
        """Vertices without children; the root only when it is the sole vertex."""
        return frozenset(
            self._vertex_index[node_id]
            for node_id, kids in self._children.items()
            if not kids and (node_id != self.root_id or self.order() == 1)
        )

    def height_of(self, node: Node) -> int:
        """Distance from the root, the root having height 0."""
        return self._heights[self._key(node)]

    def nodes_per_height(self, height: int) -> frozenset[Node]:
        return frozenset(
            self._vertex_index[node_id]
            for node_id, level in self._heights.items()
            if level == height
        )

    def upset_of(self, node: Node) -> frozenset[Node]:
        """Up-closure: the node and everything above it, away from the root."""
        reached = depth_first_preorder(self._children.__getitem__, self._key(node))
        return frozenset(self._vertex_index[node_id] for node_id in reached)

    def downset_of(self, node: Node) -> frozenset[Node]:
        """Down-closure: the vertices of the path from the root to the node."""
        return frozenset(self._vertex_index[node_id] for node_id in self._ancestry(node))

    def _ancestry(self, node: Node) -> list[str]:
        chain = []
        current: str | None = self._key(node)
        while current is not None:
            chain.append(current)
            current = self._parents[current]
        return chain

    def is_upclosure_of(self, x_src: Node, y_dst: Node) -> bool:
        """True when y lies in the up-closure of x."""
        return self.less_than_or_equal(x_src, y_dst)

    def is_downclosure_of(self, x_src: Node, y_dst: Node) -> bool:
        """True when y lies in the down-closure of x."""
        return self.less_than_or_equal(y_dst, x_src)

    def less_than_or_equal(self, first: Node, second: Node) -> bool:
        """Tree order: `first` is on the path from the root to `second`."""
        self._key(first)
        return first.id in self._ancestry(second)

    def greater_than_or_equal(self, first: Node, second: Node) -> bool:
        return self.less_than_or_equal(second, first)


__all__ = [
    "Tree",
]
