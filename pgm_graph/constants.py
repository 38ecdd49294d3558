"""
Global constants used throughout the package.
"""

import sys
import uuid

from pgm_graph.types import EdgeType

# Discovery/finish sentinel for vertices the traversal has not reached yet
UNVISITED: int = sys.maxsize

# The DFS clock is incremented before each stamp, so the first stamp is 1
CLOCK_START: int = 0

# Edge type used by constructors that do not say otherwise
DEFAULT_EDGE_TYPE: EdgeType = EdgeType.UNDIRECTED


def new_identifier() -> str:
    """Fresh identifier for graphs and results built without one."""
    return str(uuid.uuid4())
