"""
Edge type.

An edge is formally a set with two elements (Diestel 2017, p. 2), here
stored as an ordered pair of endpoints plus an orientation tag. Two
edges with the same identifier are the same edge, whatever endpoints
they record.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import KW_ONLY, dataclass

from pgm_graph.constants import DEFAULT_EDGE_TYPE
from pgm_graph.model.objects import GraphObject, Node, render_data
from pgm_graph.types import EdgeType


@dataclass(frozen=True, eq=False)
class Edge(GraphObject):
    _: KW_ONLY
    start: Node
    end: Node
    kind: EdgeType = DEFAULT_EDGE_TYPE

    def __post_init__(self) -> None:
        super().__post_init__()
        if not isinstance(self.kind, EdgeType):
            raise TypeError(f"Edge kind must be an EdgeType, got {self.kind!r}")
        for name in ("start", "end"):
            if not isinstance(getattr(self, name), Node):
                raise TypeError(f"Edge '{self.id}' {name} must be a Node")

    @classmethod
    def directed(
        cls,
        identifier: str,
        start: Node,
        end: Node,
        data: Mapping[str, Sequence[str]] | None = None,
    ) -> Edge:
        return cls(identifier, data or {}, kind=EdgeType.DIRECTED, start=start, end=end)

    @classmethod
    def undirected(
        cls,
        identifier: str,
        start: Node,
        end: Node,
        data: Mapping[str, Sequence[str]] | None = None,
    ) -> Edge:
        return cls(identifier, data or {}, kind=EdgeType.UNDIRECTED, start=start, end=end)

    @classmethod
    def from_ids(cls, identifier: str, kind: EdgeType, start_id: str, end_id: str) -> Edge:
        """Edge between two payload-free nodes, built from identifiers only."""
        return cls(identifier, kind=kind, start=Node(start_id), end=Node(end_id))

    def is_directed(self) -> bool:
        return self.kind is EdgeType.DIRECTED

    def is_self_loop(self) -> bool:
        return self.start.id == self.end.id

    def node_ids(self) -> frozenset[str]:
        return frozenset((self.start.id, self.end.id))

    def endpoints(self) -> tuple[Node, Node]:
        return self.start, self.end

    def __str__(self) -> str:
        body = f"<start>{self.start}</start>\n<end>{self.end}</end>"
        if self.data:
            body = f"{body}\n{render_data(self.data)}"
        return f"<Edge id='{self.id}' type='{self.kind}'>\n{body}\n</Edge>"


__all__ = [
    "Edge",
    "EdgeType",
]
