# graph_errors.py
"""Errors raised by the graph model."""


class GraphError(Exception):
    """Base exception class for graph errors."""
    pass


class InvalidArgumentError(GraphError, ValueError):
    """Raised when construction or insertion input is malformed."""
    pass


class VertexNotFoundError(GraphError, LookupError):
    """Raised when a vertex name or index is not part of the graph."""

    def __init__(self, vertex):
        super().__init__(f"Vertex not found: {vertex!r}")
        self.vertex = vertex
