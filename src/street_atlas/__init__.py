"""street_atlas - tile rastering and nearest-intersection lookup for road maps."""

from street_atlas.geometry import bearing, distance
from street_atlas.graph import EmptyGraphError, RoadGraph, Vertex, VertexNotFoundError
from street_atlas.raster import GeoBox, RasterConfig, RasterResult, TileAddress, TileGridResolver

__all__ = [
    "EmptyGraphError",
    "GeoBox",
    "RasterConfig",
    "RasterResult",
    "RoadGraph",
    "TileAddress",
    "TileGridResolver",
    "Vertex",
    "VertexNotFoundError",
    "bearing",
    "distance",
]
