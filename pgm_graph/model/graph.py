"""
Graph type.

A graph is formally a pair of sets (Diestel 2017, p. 2). It stores the
edge set and the nodes that are not incident to any edge; the vertex set
is derived from both, so an edge endpoint is always a vertex.

Duplicate identifiers in constructor inputs are resolved by keeping the
first object encountered.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import KW_ONLY, dataclass, field
from functools import cached_property
from operator import attrgetter
from types import MappingProxyType
from typing import TypeVar

from pgm_graph.constants import new_identifier
from pgm_graph.model.edge import Edge
from pgm_graph.model.objects import GraphObject, Node
from pgm_graph.types import EdgeType, GraphLike

by_id = attrgetter("id")

T = TypeVar("T", bound=GraphObject)


def unique_by_id(objects: Iterable[T]) -> dict[str, T]:
    """Indexes objects by identifier, the first occurrence of an identifier wins."""
    index: dict[str, T] = {}
    for obj in objects:
        index.setdefault(obj.id, obj)
    return index


@dataclass(frozen=True, eq=False)
class Graph(GraphObject):
    _: KW_ONLY
    isolated_nodes: frozenset[Node] = field(default_factory=frozenset)
    edge_set: frozenset[Edge] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        super().__post_init__()
        edges = unique_by_id(self.edge_set)
        incident = {node_id for edge in edges.values() for node_id in edge.node_ids()}
        isolated = {
            node_id: node
            for node_id, node in unique_by_id(self.isolated_nodes).items()
            if node_id not in incident
        }
        object.__setattr__(self, "edge_set", frozenset(edges.values()))
        object.__setattr__(self, "isolated_nodes", frozenset(isolated.values()))

    # -- constructors -------------------------------------------------------

    @classmethod
    def empty(cls, identifier: str) -> Graph:
        """A graph with no vertex and no edge."""
        return cls(identifier)

    @classmethod
    def from_edge_set(cls, edges: Iterable[Edge]) -> Graph:
        return cls(new_identifier(), edge_set=frozenset(edges))

    @classmethod
    def from_edge_and_node_set(cls, edges: Iterable[Edge], nodes: Iterable[Node]) -> Graph:
        return cls(
            new_identifier(),
            isolated_nodes=frozenset(nodes),
            edge_set=frozenset(edges),
        )

    @classmethod
    def induced_by(cls, edges: Iterable[Edge], nodes: Iterable[Node]) -> Graph:
        """Graph on `nodes` keeping only the edges whose both endpoints are in `nodes`."""
        node_list = list(nodes)
        node_ids = {node.id for node in node_list}
        kept = [edge for edge in edges if edge.node_ids() <= node_ids]
        return cls.from_edge_and_node_set(kept, node_list)

    @classmethod
    def from_graph(
        cls,
        graph: GraphLike,
        identifier: str | None = None,
        data: Mapping[str, Sequence[str]] | None = None,
    ) -> Graph:
        """Copies any graph-like object into a plain Graph."""
        return cls(
            graph.id if identifier is None else identifier,
            graph.data if data is None else data,
            isolated_nodes=graph.vertices(),
            edge_set=graph.edges(),
        )

    # -- derived views ------------------------------------------------------

    @cached_property
    def _edge_index(self) -> dict[str, Edge]:
        return {edge.id: edge for edge in sorted(self.edge_set, key=by_id)}

    @cached_property
    def _vertex_index(self) -> dict[str, Node]:
        index: dict[str, Node] = {}
        for edge in self._edge_index.values():
            index.setdefault(edge.start.id, edge.start)
            index.setdefault(edge.end.id, edge.end)
        for node in self.isolated_nodes:
            index.setdefault(node.id, node)
        return dict(sorted(index.items()))

    @cached_property
    def _vertex_set(self) -> frozenset[Node]:
        return frozenset(self._vertex_index.values())

    def vertices(self) -> frozenset[Node]:
        return self._vertex_set

    def edges(self) -> frozenset[Edge]:
        return self.edge_set

    def vmap(self) -> Mapping[str, Node]:
        """Read-only view of the vertices by identifier, in identifier order."""
        return MappingProxyType(self._vertex_index)

    def emap(self) -> Mapping[str, Edge]:
        return MappingProxyType(self._edge_index)

    def sorted_vertices(self) -> tuple[Node, ...]:
        return tuple(self._vertex_index.values())

    def sorted_edges(self) -> tuple[Edge, ...]:
        return tuple(self._edge_index.values())

    def has_vertex(self, node_id: str) -> bool:
        return node_id in self._vertex_index

    def order(self) -> int:
        """Number of vertices."""
        return len(self._vertex_index)

    def size(self) -> int:
        """Number of edges."""
        return len(self.edge_set)

    def is_empty(self) -> bool:
        return not self.edge_set and not self.isolated_nodes

    def is_directed(self) -> bool:
        """True when the graph has edges and all of them are directed."""
        return bool(self.edge_set) and all(
            edge.kind is EdgeType.DIRECTED for edge in self.edge_set
        )


__all__ = [
    "Graph",
    "unique_by_id",
]
