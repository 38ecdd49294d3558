"""
Core type abstractions for graph objects.

The traversal and query code is written against these capabilities
rather than against the concrete classes in `pgm_graph.model`, so any
representation that provides them can be searched.

Types:
    EdgeType         - Directed / Undirected tag carried by edges
    Identified       - Anything with an identifier and a data payload
    HasEndpoints     - Identified object with start and end vertices
    VertexContainer  - Exposes a vertex set and an identifier index
    EdgeContainer    - Exposes an edge set and an identifier index
    GraphLike        - Vertex and edge container at once
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence, Set
from enum import Enum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from typing_extensions import TypeAliasType

if TYPE_CHECKING:
    from pgm_graph.model.edge import Edge
    from pgm_graph.model.objects import Node

# Payload attached to every graph object
Data = TypeAliasType("Data", Mapping[str, Sequence[str]])


class EdgeType(Enum):
    """Orientation of an edge."""

    DIRECTED = "Directed"
    UNDIRECTED = "Undirected"

    def __str__(self) -> str:
        return self.value


@runtime_checkable
class Identified(Protocol):
    """Object carrying a unique string identifier and a data payload."""

    @property
    def id(self) -> str: ...

    @property
    def data(self) -> Data: ...


@runtime_checkable
class HasEndpoints(Identified, Protocol):
    """Identified object joining two vertices."""

    @property
    def start(self) -> Node: ...

    @property
    def end(self) -> Node: ...

    @property
    def kind(self) -> EdgeType: ...


@runtime_checkable
class VertexContainer(Protocol):
    def vertices(self) -> frozenset[Node]: ...

    def vmap(self) -> Mapping[str, Node]: ...


@runtime_checkable
class EdgeContainer(Protocol):
    def edges(self) -> frozenset[Edge]: ...

    def emap(self) -> Mapping[str, Edge]: ...


@runtime_checkable
class GraphLike(VertexContainer, EdgeContainer, Identified, Protocol):
    """What the query, export and search functions need from a graph."""


# Yields the edges a traversal may follow out of a vertex
NeighborGenerator = TypeAliasType("NeighborGenerator", Callable[["Node"], Set["Edge"]])

# Decides whether an edge belongs to the subgraph spanned by a vertex subset
EdgePolicy = TypeAliasType("EdgePolicy", Callable[["Edge", frozenset[str]], bool])


__all__ = [
    "Data",
    "EdgeType",
    "Identified",
    "HasEndpoints",
    "VertexContainer",
    "EdgeContainer",
    "GraphLike",
    "NeighborGenerator",
    "EdgePolicy",
]
