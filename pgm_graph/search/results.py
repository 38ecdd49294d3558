"""
Outputs of the depth-first forest engine.

A `DepthFirstResult` is keyed by vertex identifiers. Components are
identified by the identifier of their tree root. Every mapping it hands
out is read-only.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import KW_ONLY, dataclass, field
from types import MappingProxyType
from typing import TypeVar

from pgm_graph.exceptions import VertexNotFound
from pgm_graph.model import Edge, GraphObject, Node, Tree


@dataclass(frozen=True)
class CycleInfo:
    """
    A back edge from `descendant` to its ancestor `ancestor`.

    For a self loop both ends are the same vertex. Times come from the
    clock of the run that found the edge.
    """

    ancestor: str
    descendant: str
    edge_id: str
    ancestor_discover_time: int
    ancestor_finish_time: int | None
    descendant_finish_time: int


K = TypeVar("K")
V = TypeVar("V")


def _readonly(mapping: Mapping[K, V]) -> Mapping[K, V]:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True, eq=False)
class DepthFirstResult(GraphObject):
    """Spanning forest, timestamps, components and back edges of one traversal."""

    _: KW_ONLY
    vertex_map: Mapping[str, Node] = field(default_factory=dict)
    forest_edges: Mapping[str, frozenset[Edge]] = field(default_factory=dict)
    predecessor_map: Mapping[str, str | None] = field(default_factory=dict)
    component_map: Mapping[str, str] = field(default_factory=dict)
    discover_map: Mapping[str, int] = field(default_factory=dict)
    finish_map: Mapping[str, int] = field(default_factory=dict)
    cycle_map: Mapping[str, tuple[CycleInfo, ...]] = field(default_factory=dict)
    cycle_order: tuple[CycleInfo, ...] = ()

    def __post_init__(self) -> None:
        super().__post_init__()
        for name in (
            "vertex_map",
            "forest_edges",
            "predecessor_map",
            "component_map",
            "discover_map",
            "finish_map",
            "cycle_map",
        ):
            object.__setattr__(self, name, _readonly(getattr(self, name)))
        object.__setattr__(self, "cycle_order", tuple(self.cycle_order))

    def _check(self, vertex_id: str) -> None:
        if vertex_id not in self.component_map:
            raise VertexNotFound(vertex_id, f"depth-first result '{self.id}'")

    # -- forest -------------------------------------------------------------

    def forest(self) -> Mapping[str, frozenset[Edge]]:
        """Component id -> tree edges. Singleton components have no edge."""
        return self.forest_edges

    def trees(self) -> Mapping[str, Mapping[str, str | None]]:
        """Component id -> predecessor of each vertex of the component, None at the root."""
        members: dict[str, dict[str, str | None]] = {root: {} for root in self.forest_edges}
        for vertex_id, root in self.component_map.items():
            members[root][vertex_id] = self.predecessor_map[vertex_id]
        return MappingProxyType({root: MappingProxyType(pred) for root, pred in members.items()})

    def predecessors(self) -> Mapping[str, str | None]:
        return self.predecessor_map

    def tree_of(self, component_id: str) -> Tree:
        """The spanning tree of a component, rooted at the vertex the traversal started it from."""
        if component_id not in self.forest_edges:
            raise VertexNotFound(component_id, f"depth-first result '{self.id}' (as a root)")
        return Tree.from_edges(
            self.forest_edges[component_id],
            self.vertex_map[component_id],
            identifier=component_id,
        )

    # -- components ---------------------------------------------------------

    def component_count(self) -> int:
        return len(self.forest_edges)

    @property
    def nb_component(self) -> int:
        return self.component_count()

    def components(self) -> Mapping[str, frozenset[str]]:
        """Component id -> identifiers of its vertices."""
        members: dict[str, set[str]] = {root: set() for root in self.forest_edges}
        for vertex_id, root in self.component_map.items():
            members[root].add(vertex_id)
        return MappingProxyType({root: frozenset(ids) for root, ids in members.items()})

    def component_of(self, vertex_id: str) -> str:
        self._check(vertex_id)
        return self.component_map[vertex_id]

    # -- timestamps ---------------------------------------------------------

    def discover_times(self) -> Mapping[str, int]:
        return self.discover_map

    def finish_times(self) -> Mapping[str, int]:
        return self.finish_map

    # -- cycles -------------------------------------------------------------

    def cycles(self) -> Mapping[str, tuple[CycleInfo, ...]]:
        """Back edges grouped by the vertex being explored when they were found."""
        return self.cycle_map

    def cycle_list(self) -> tuple[CycleInfo, ...]:
        """All back edges in detection order."""
        return self.cycle_order

    def has_cycle(self) -> bool:
        return bool(self.cycle_order)

    def cycle_vertices(self, info: CycleInfo) -> tuple[str, ...]:
        """
        The tree path closed by a back edge, from the ancestor down to the descendant.

        Raises:
            VertexNotFound: `info` refers to a vertex this result does not know.
            ValueError: the ancestor is not on the root path of the descendant.
        """
        self._check(info.ancestor)
        self._check(info.descendant)
        path = [info.descendant]
        while path[-1] != info.ancestor:
            parent = self.predecessor_map[path[-1]]
            if parent is None:
                raise ValueError(
                    f"'{info.ancestor}' is not an ancestor of '{info.descendant}'"
                )
            path.append(parent)
        return tuple(reversed(path))


__all__ = [
    "CycleInfo",
    "DepthFirstResult",
]
