"""Road graph: vertex store and nearest-vertex search."""

from street_atlas.graph.errors import EmptyGraphError, GraphError, VertexNotFoundError
from street_atlas.graph.nearest import NearestVertexIndex
from street_atlas.graph.store import RoadGraph, clean_string
from street_atlas.graph.types import Vertex

__all__ = [
    "EmptyGraphError",
    "GraphError",
    "NearestVertexIndex",
    "RoadGraph",
    "Vertex",
    "VertexNotFoundError",
    "clean_string",
]
