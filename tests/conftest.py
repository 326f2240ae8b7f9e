"""Pytest configuration and fixtures for street_atlas tests."""

import pytest

from street_atlas.graph import RoadGraph, Vertex
from street_atlas.raster import GeoBox, RasterConfig, TileGridResolver

ROOT_BOX = GeoBox(
    ullon=-122.2998046875,
    ullat=37.892195547244356,
    lrlon=-122.2119140625,
    lrlat=37.82280243352756,
)


@pytest.fixture
def root_box() -> GeoBox:
    """The default depth-0 tile extent."""
    return ROOT_BOX


@pytest.fixture
def raster_config() -> RasterConfig:
    """Tile pyramid over the default root box."""
    return RasterConfig(root=ROOT_BOX)


@pytest.fixture
def resolver(raster_config) -> TileGridResolver:
    """A resolver bound to the default pyramid."""
    return TileGridResolver(raster_config)


@pytest.fixture
def small_graph() -> RoadGraph:
    """A square of four connected intersections plus one isolated point.

    Layout (ids):

        1 --- 2
        |     |
        4 --- 3      5 (isolated)
    """
    graph = RoadGraph()
    graph.add_vertex(Vertex(id=1, lon=-122.26, lat=37.87, name="Shattuck & Center"))
    graph.add_vertex(Vertex(id=2, lon=-122.25, lat=37.87, name="Oxford St."))
    graph.add_vertex(Vertex(id=3, lon=-122.25, lat=37.86))
    graph.add_vertex(Vertex(id=4, lon=-122.26, lat=37.86))
    graph.add_vertex(Vertex(id=5, lon=-122.23, lat=37.84))
    graph.add_edge(1, 2)
    graph.add_edge(2, 3)
    graph.add_edge(3, 4)
    graph.add_edge(4, 1)
    return graph
