"""Map raster queries: choosing pre-rendered tiles for a viewport."""

from street_atlas.raster.resolver import TileGridResolver
from street_atlas.raster.types import GeoBox, RasterConfig, RasterRequest, RasterResult, TileAddress

__all__ = [
    "GeoBox",
    "RasterConfig",
    "RasterRequest",
    "RasterResult",
    "TileAddress",
    "TileGridResolver",
]
