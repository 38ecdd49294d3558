"""
Immutable graph objects.

Hierarchy:
    GraphObject
    ├── Node
    ├── Edge
    └── Graph
        ├── Path
        └── Tree
"""

from .edge import Edge, EdgeType
from .graph import Graph, unique_by_id
from .objects import GraphObject, Node
from .path import Path
from .tree import Tree

__all__ = [
    "GraphObject",
    "Node",
    "Edge",
    "EdgeType",
    "Graph",
    "Path",
    "Tree",
    "unique_by_id",
]
