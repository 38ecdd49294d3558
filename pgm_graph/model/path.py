"""
Path type: a graph whose edges form a simple path (Diestel 2017, p. 6).

Degrees count each edge once per endpoint, whatever its orientation.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from functools import cached_property

from pgm_graph.constants import new_identifier
from pgm_graph.exceptions import EmptyInput, MalformedPath
from pgm_graph.model.edge import Edge
from pgm_graph.model.graph import Graph
from pgm_graph.model.objects import Node
from pgm_graph.utils.union_find import graph_union_find


@dataclass(frozen=True, eq=False)
class Path(Graph):
    def __post_init__(self) -> None:
        super().__post_init__()
        if not self.edge_set:
            raise EmptyInput(f"Path '{self.id}' needs at least one edge")

        degrees = self.degrees()
        ends = sorted(node_id for node_id, degree in degrees.items() if degree == 1)
        if len(ends) != 2:
            raise MalformedPath(
                f"Path '{self.id}' has {len(ends)} vertices of degree one, expected 2"
            )
        inner = [node_id for node_id, degree in degrees.items() if degree not in (1, 2)]
        if inner:
            raise MalformedPath(f"Path '{self.id}' branches or is broken at {sorted(inner)}")
        if graph_union_find(self).set_count() != 1:
            raise MalformedPath(f"Path '{self.id}' is not connected")

    @classmethod
    def from_edges(cls, edges: Iterable[Edge], identifier: str | None = None) -> Path:
        return cls(identifier or new_identifier(), edge_set=frozenset(edges))

    def degrees(self) -> Counter[str]:
        """Degree of every vertex, isolated vertices included with 0."""
        degrees: Counter[str] = Counter({node.id: 0 for node in self.isolated_nodes})
        for edge in self.edge_set:
            degrees[edge.start.id] += 1
            degrees[edge.end.id] += 1
        return degrees

    @cached_property
    def _ends(self) -> tuple[Node, Node]:
        vertices = self._vertex_index
        first, second = sorted(node_id for node_id, d in self.degrees().items() if d == 1)
        starts = {edge.start.id for edge in self.edge_set}
        if second in starts and first not in starts:
            first, second = second, first
        return vertices[first], vertices[second]

    def length(self) -> int:
        """Number of edges inside the path."""
        return len(self.edge_set)

    def endvertices(self) -> tuple[Node, Node]:
        """End vertices; an end that starts its edge comes first, else identifier order."""
        return self._ends

    def vertex_sequence(self) -> tuple[Node, ...]:
        """Vertices in path order, from the first end vertex to the second."""
        incident: dict[str, list[Edge]] = {}
        for edge in self.sorted_edges():
            incident.setdefault(edge.start.id, []).append(edge)
            incident.setdefault(edge.end.id, []).append(edge)

        current = self._ends[0]
        sequence = [current]
        used: set[str] = set()
        while len(used) < len(self.edge_set):
            edge = next(e for e in incident[current.id] if e.id not in used)
            used.add(edge.id)
            current = edge.end if edge.start.id == current.id else edge.start
            sequence.append(current)
        return tuple(sequence)


__all__ = [
    "Path",
]
