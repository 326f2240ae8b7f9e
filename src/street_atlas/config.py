"""Application configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables (``STREET_ATLAS_*``)."""

    model_config = SettingsConfigDict(
        env_prefix="STREET_ATLAS_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Bounding box covered by the depth-0 tile
    root_ullon: float = -122.2998046875
    root_ullat: float = 37.892195547244356
    root_lrlon: float = -122.2119140625
    root_lrlat: float = 37.82280243352756

    # Tile edge length in pixels
    tile_size: int = 256

    # Deepest zoom level with rendered tiles
    max_depth: int = Field(default=7, ge=0, le=7)

    # Suffix appended to every tile name, depth 0 included
    tile_extension: str = ".png"

    # Logging
    log_level: str = "info"


settings = Settings()
