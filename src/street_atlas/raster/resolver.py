"""Tile selection for map raster queries.

The root bounding box is split into a 2^d x 2^d grid at depth d. A query
picks the shallowest depth whose tiles are at least as fine as the
viewport's longitudinal distance per pixel (LonDPP), then the smallest
rectangle of tiles at that depth covering the query box.

A tile is part of the result when its interior overlaps the query box.
Tile edges always come from tile_bounds(), so range selection and the
returned covering box agree exactly on where a tile starts and ends.
"""

import logging
from collections.abc import Mapping
from typing import Any

from street_atlas.raster.types import GeoBox, RasterConfig, RasterRequest, RasterResult, TileAddress

logger = logging.getLogger(__name__)


class TileGridResolver:
    """Resolves query boxes against one tile pyramid."""

    def __init__(self, config: RasterConfig | None = None):
        self.config = config or RasterConfig.from_settings()

    @property
    def root(self) -> GeoBox:
        return self.config.root

    def grid_size(self, depth: int) -> int:
        """Number of tiles along each axis at depth."""
        return 2**depth

    def select_depth(self, query_lon_dpp: float) -> int:
        """Shallowest depth whose LonDPP is <= query_lon_dpp, capped at max_depth."""
        depth = 0
        lon_dpp = self.config.root_lon_dpp
        while depth < self.config.max_depth and lon_dpp > query_lon_dpp:
            lon_dpp /= 2
            depth += 1
        return depth

    def tile_bounds(self, tile: TileAddress) -> GeoBox:
        """Geographic extent of a single tile."""
        return GeoBox(
            ullon=self._lon_edge(tile.column, tile.depth),
            ullat=self._lat_edge(tile.row, tile.depth),
            lrlon=self._lon_edge(tile.column + 1, tile.depth),
            lrlat=self._lat_edge(tile.row + 1, tile.depth),
        )

    def tile_name(self, tile: TileAddress) -> str:
        return tile.filename(self.config.tile_extension)

    def is_valid_query(self, query: GeoBox) -> bool:
        """False for inverted boxes and boxes that miss the root entirely."""
        return not query.is_degenerate and self.root.overlaps(query)

    def resolve(self, query: GeoBox, width: float) -> RasterResult:
        """Select the tiles covering query for a viewport width pixels wide."""
        if not width > 0:
            raise ValueError(f"Viewport width must be positive, got {width}")

        if not self.is_valid_query(query):
            logger.debug("Rejected raster query %s", query)
            return RasterResult.failed()

        depth = self.select_depth(query.width / width)
        col_left, col_right = self._column_range(query, depth)
        row_left, row_right = self._row_range(query, depth)

        render_grid = [
            [
                self.tile_name(TileAddress(depth=depth, column=column, row=row))
                for column in range(col_left, col_right + 1)
            ]
            for row in range(row_left, row_right + 1)
        ]

        result = RasterResult(
            render_grid=render_grid,
            raster_ul_lon=self._lon_edge(col_left, depth),
            raster_ul_lat=self._lat_edge(row_left, depth),
            raster_lr_lon=self._lon_edge(col_right + 1, depth),
            raster_lr_lat=self._lat_edge(row_right + 1, depth),
            depth=depth,
            query_success=True,
        )
        logger.debug(
            "Resolved raster query at depth %d: columns %d-%d, rows %d-%d",
            depth,
            col_left,
            col_right,
            row_left,
            row_right,
        )
        return result

    def get_map_raster(self, params: Mapping[str, Any]) -> dict[str, Any]:
        """Resolve raw front-end parameters (ullon, ullat, lrlon, lrlat, w, h).

        Raises:
            pydantic.ValidationError: If a parameter is missing or not numeric.
        """
        request = RasterRequest.model_validate(dict(params))
        return self.resolve(request.box, request.w).to_params()

    # ------------------------------------------------------------------
    # Grid arithmetic
    # ------------------------------------------------------------------

    def _lon_edge(self, k: int, depth: int) -> float:
        """Longitude of the left edge of column k (k == 2^depth gives the right border)."""
        n = self.grid_size(depth)
        if k >= n:
            return self.root.lrlon
        tile_width = abs(self.root.ullon - self.root.lrlon) / n
        return self.root.ullon + k * tile_width

    def _lat_edge(self, k: int, depth: int) -> float:
        """Latitude of the top edge of row k (k == 2^depth gives the bottom border)."""
        n = self.grid_size(depth)
        if k >= n:
            return self.root.lrlat
        tile_height = abs(self.root.ullat - self.root.lrlat) / n
        return self.root.ullat - k * tile_height

    def _column_range(self, query: GeoBox, depth: int) -> tuple[int, int]:
        n = self.grid_size(depth)
        # First column whose right edge is past the query's left side
        left = next((c for c in range(n) if self._lon_edge(c + 1, depth) > query.ullon), n - 1)
        # Last column whose left edge is before the query's right side
        right = next((c for c in reversed(range(n)) if self._lon_edge(c, depth) < query.lrlon), 0)
        return left, right

    def _row_range(self, query: GeoBox, depth: int) -> tuple[int, int]:
        n = self.grid_size(depth)
        # Rows grow southward
        top = next((r for r in range(n) if self._lat_edge(r + 1, depth) < query.ullat), n - 1)
        bottom = next((r for r in reversed(range(n)) if self._lat_edge(r, depth) > query.lrlat), 0)
        return top, bottom
