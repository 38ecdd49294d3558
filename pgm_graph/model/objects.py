"""
Identified graph objects.

Hierarchy:
    GraphObject (abstract)
    ├── Node           - A vertex, no structure of its own
    ├── Edge           - Two endpoints and an orientation (edge.py)
    └── Graph          - Isolated vertices and edges (graph.py)
        ├── Path       - Simple path (path.py)
        └── Tree       - Rooted tree (tree.py)

Every object is immutable. Identity, equality and hashing are defined by
the identifier alone; the data payload is auxiliary. Setters return a new
value with the changed field.
"""

from __future__ import annotations

from abc import ABC
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any

from typing_extensions import Self


def freeze_data(data: Mapping[str, Sequence[str]] | None) -> Mapping[str, tuple[str, ...]]:
    """Read-only copy of a data payload."""
    if not data:
        return MappingProxyType({})
    return MappingProxyType({key: tuple(values) for key, values in data.items()})


def render_data(data: Mapping[str, Sequence[str]]) -> str:
    """Renders a payload as `<key>value</key>` lines, keys in sorted order."""
    lines = []
    for key in sorted(data):
        values = ", ".join(data[key])
        lines.append(f"<{key}>{values}</{key}>")
    return "\n".join(lines)


@dataclass(frozen=True, eq=False)
class GraphObject(ABC):
    """Base class for everything that has an identifier and a payload."""

    id: str
    data: Mapping[str, Sequence[str]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.id, str):
            raise TypeError(f"Identifier must be a string, got {type(self.id).__name__}")
        object.__setattr__(self, "data", freeze_data(self.data))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _family(self)):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash((_family(self).__name__, self.id))

    def set_id(self, identifier: str) -> Self:
        return replace(self, id=identifier)

    def set_data(self, data: Mapping[str, Sequence[str]]) -> Self:
        return replace(self, data=data)

    def _tag(self) -> str:
        return type(self).__name__

    def __str__(self) -> str:
        if not self.data:
            return f"<{self._tag()} id='{self.id}'/>"
        return f"<{self._tag()} id='{self.id}'>\n{render_data(self.data)}\n</{self._tag()}>"


def _family(obj: Any) -> type:
    """The direct GraphObject subclass an object descends from (Node, Edge, Graph...)."""
    for klass in type(obj).__mro__:
        if GraphObject in klass.__bases__:
            return klass
    return type(obj)


@dataclass(frozen=True, eq=False)
class Node(GraphObject):
    """A vertex. Carries no structural information of its own."""

    @classmethod
    def empty(cls, identifier: str) -> Node:
        return cls(identifier)


__all__ = [
    "GraphObject",
    "Node",
    "freeze_data",
    "render_data",
]
