"""
Depth-first search over graphs.

Modules:
    depth_first  - Iterative depth-first forest engine
    results      - DepthFirstResult and CycleInfo
"""

from .depth_first import depth_first_search
from .results import CycleInfo, DepthFirstResult

__all__ = [
    "depth_first_search",
    "CycleInfo",
    "DepthFirstResult",
]
