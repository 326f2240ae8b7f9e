"""Raster query schemas - query boxes, tile addresses and results."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from street_atlas.config import Settings, settings as default_settings


class GeoBox(BaseModel):
    """A geographic bounding box given by its upper-left and lower-right corners.

    Longitude grows to the right and latitude grows upward, so a usable box
    has ullon < lrlon and ullat > lrlat. Boxes breaking that rule are still
    representable; callers check is_degenerate. A NaN corner makes a box
    degenerate.
    """

    model_config = ConfigDict(frozen=True)

    ullon: float
    ullat: float
    lrlon: float
    lrlat: float

    @property
    def is_degenerate(self) -> bool:
        return not (self.ullon < self.lrlon and self.lrlat < self.ullat)

    @property
    def width(self) -> float:
        return self.lrlon - self.ullon

    @property
    def height(self) -> float:
        return self.ullat - self.lrlat

    def contains(self, other: "GeoBox") -> bool:
        """True when other lies entirely inside this box (edges inclusive)."""
        return (
            self.ullon <= other.ullon
            and self.ullat >= other.ullat
            and self.lrlon >= other.lrlon
            and self.lrlat <= other.lrlat
        )

    def overlaps(self, other: "GeoBox") -> bool:
        """True when the interiors of both boxes intersect."""
        return (
            self.ullon < other.lrlon
            and other.ullon < self.lrlon
            and self.lrlat < other.ullat
            and other.lrlat < self.ullat
        )


class RasterConfig(BaseModel):
    """Immutable tile pyramid description consumed by TileGridResolver."""

    model_config = ConfigDict(frozen=True)

    root: GeoBox
    tile_size: int = Field(default=256, gt=0, description="Tile edge in pixels")
    max_depth: int = Field(default=7, ge=0, le=7, description="Deepest rendered zoom level")
    tile_extension: str = ".png"

    @property
    def root_lon_dpp(self) -> float:
        """Longitudinal distance per pixel of the depth-0 tile."""
        return self.root.width / self.tile_size

    @classmethod
    def from_settings(cls, source: Settings | None = None) -> "RasterConfig":
        """Build a config from environment-driven settings."""
        s = source or default_settings
        return cls(
            root=GeoBox(
                ullon=s.root_ullon,
                ullat=s.root_ullat,
                lrlon=s.root_lrlon,
                lrlat=s.root_lrlat,
            ),
            tile_size=s.tile_size,
            max_depth=s.max_depth,
            tile_extension=s.tile_extension,
        )


class TileAddress(BaseModel):
    """A tile in the depth-d grid. Row 0 is the northernmost strip."""

    model_config = ConfigDict(frozen=True)

    depth: int = Field(..., ge=0)
    column: int = Field(..., ge=0)
    row: int = Field(..., ge=0)

    def filename(self, extension: str = ".png") -> str:
        return f"d{self.depth}_x{self.column}_y{self.row}{extension}"

    @model_validator(mode="after")
    def check_inside_grid(self) -> "TileAddress":
        """Column and row must fall inside the 2^depth x 2^depth grid."""
        size = 2**self.depth
        if self.column >= size or self.row >= size:
            raise ValueError(
                f"Tile ({self.column}, {self.row}) is outside the {size}x{size} grid at depth {self.depth}"
            )
        return self


class RasterRequest(BaseModel):
    """Query parameters sent by a map front end.

    ``h`` is accepted for compatibility with viewport requests but does not
    influence tile selection.
    """

    model_config = ConfigDict(allow_inf_nan=False)

    ullon: float
    ullat: float
    lrlon: float
    lrlat: float
    w: float = Field(..., gt=0, description="Viewport width in pixels")
    h: float | None = Field(default=None, description="Viewport height in pixels")

    @property
    def box(self) -> GeoBox:
        return GeoBox(ullon=self.ullon, ullat=self.ullat, lrlon=self.lrlon, lrlat=self.lrlat)


class RasterResult(BaseModel):
    """Tiles selected for a query, plus the box they cover together."""

    render_grid: list[list[str]] = Field(default_factory=list)
    raster_ul_lon: float | None = None
    raster_ul_lat: float | None = None
    raster_lr_lon: float | None = None
    raster_lr_lat: float | None = None
    depth: int | None = None
    query_success: bool = False

    @classmethod
    def failed(cls) -> "RasterResult":
        return cls(query_success=False)

    @property
    def covering_box(self) -> GeoBox | None:
        if not self.query_success:
            return None
        return GeoBox(
            ullon=self.raster_ul_lon,
            ullat=self.raster_ul_lat,
            lrlon=self.raster_lr_lon,
            lrlat=self.raster_lr_lat,
        )

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, columns) of the render grid."""
        if not self.render_grid:
            return (0, 0)
        return (len(self.render_grid), len(self.render_grid[0]))

    def to_params(self) -> dict[str, Any]:
        """Plain dict keyed the way map front ends expect."""
        return self.model_dump()
