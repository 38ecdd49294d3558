"""Exceptions raised by pgm_graph."""


class GraphError(Exception):
    """Base exception for graph operations."""


class VertexNotFound(GraphError, KeyError):
    """Raised when no vertex matches the requested identifier."""

    def __init__(self, vertex_id: str, container: str = "graph") -> None:
        self.vertex_id = vertex_id
        self.container = container
        super().__init__(f"vertex '{vertex_id}' not found in {container}")

    def __str__(self) -> str:
        return self.args[0]


class EdgeNotFound(GraphError, KeyError):
    """Raised when no edge matches the requested identifier."""

    def __init__(self, edge_id: str, container: str = "graph") -> None:
        self.edge_id = edge_id
        self.container = container
        super().__init__(f"edge '{edge_id}' not found in {container}")

    def __str__(self) -> str:
        return self.args[0]


class NotInGraph(GraphError):
    """Raised when an argument of a membership-dependent query is not part of the graph."""


class MalformedPath(GraphError):
    """Raised when an edge set does not form a simple path."""


class MalformedTree(GraphError):
    """Raised when an edge set does not form a tree."""


class EmptyInput(GraphError):
    """Raised when an operation needing at least one edge or vertex receives none."""


class TraversalCancelled(GraphError):
    """Raised when a traversal is stopped by its cancellation callback."""
