"""
Algorithms with no dependency on the graph model beyond its protocols.

Modules:
    union_find  - Union-Find (disjoint set) data structure, component partition
    traversal   - Breadth/depth-first walks over rooted structures
"""

from .traversal import breadth_first_levels, depth_first_preorder
from .union_find import UnionFind, connected_components, graph_union_find

__all__ = [
    "UnionFind",
    "connected_components",
    "graph_union_find",
    "breadth_first_levels",
    "depth_first_preorder",
]
