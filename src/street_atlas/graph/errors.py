"""Errors raised by road graph lookups."""


class GraphError(Exception):
    """Base class for road graph errors."""


class VertexNotFoundError(GraphError, KeyError):
    """Raised when a vertex id is not in the graph."""

    def __init__(self, vertex_id: int):
        super().__init__(vertex_id)
        self.vertex_id = vertex_id

    def __str__(self) -> str:
        return f"Vertex {self.vertex_id} not found"


class EmptyGraphError(GraphError, LookupError):
    """Raised when a nearest-vertex search runs against an empty graph."""

    def __str__(self) -> str:
        return "Cannot search for the closest vertex in an empty graph"
