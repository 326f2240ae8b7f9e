"""Tests for nearest-vertex search."""

import numpy as np
import pytest

from street_atlas.geometry import distance
from street_atlas.graph import EmptyGraphError, NearestVertexIndex, RoadGraph, Vertex


def random_graph(count: int, seed: int = 7) -> RoadGraph:
    """Chain of vertices scattered over the Berkeley area."""
    rng = np.random.default_rng(seed)
    lons = rng.uniform(-122.30, -122.21, size=count)
    lats = rng.uniform(37.82, 37.89, size=count)

    graph = RoadGraph()
    for i, (lon, lat) in enumerate(zip(lons, lats)):
        graph.add_vertex(Vertex(id=1000 + i, lon=float(lon), lat=float(lat)))
    for i in range(count - 1):
        graph.add_edge(1000 + i, 1001 + i)
    graph.prune()
    return graph


def brute_force_min(graph: RoadGraph, lon: float, lat: float) -> float:
    return min(distance(v.lon, v.lat, lon, lat) for v in graph)


class TestClosest:
    """Tests for RoadGraph.closest."""

    def test_exact_vertex_location(self, small_graph):
        """Querying a vertex's own position returns it."""
        assert small_graph.closest(-122.25, 37.86) == 3

    def test_point_near_a_vertex(self, small_graph):
        """A point a few feet off a vertex resolves to it."""
        assert small_graph.closest(-122.2601, 37.8702) == 1

    def test_far_away_point_still_resolves(self, small_graph):
        """Any point resolves to some stored vertex."""
        assert small_graph.closest(0.0, 0.0) in small_graph.vertices()

    def test_matches_brute_force(self):
        """The returned vertex is never farther than any other vertex."""
        graph = random_graph(500)
        rng = np.random.default_rng(11)
        for lon, lat in zip(rng.uniform(-122.35, -122.15, 50), rng.uniform(37.80, 37.91, 50)):
            found = graph.closest(float(lon), float(lat))
            found_vertex = graph.get(found)
            found_distance = distance(found_vertex.lon, found_vertex.lat, lon, lat)
            assert found_distance == pytest.approx(brute_force_min(graph, lon, lat), abs=1e-9)

    def test_every_vertex_finds_a_minimizer(self):
        """Each vertex's own position finds a zero-distance vertex."""
        graph = random_graph(200, seed=3)
        for vertex in graph:
            found = graph.get(graph.closest(vertex.lon, vertex.lat))
            assert distance(found.lon, found.lat, vertex.lon, vertex.lat) == pytest.approx(0.0, abs=1e-9)

    def test_duplicate_locations(self):
        """Either of two co-located vertices is an acceptable answer."""
        graph = RoadGraph()
        graph.add_vertex(Vertex(id=1, lon=-122.25, lat=37.87))
        graph.add_vertex(Vertex(id=2, lon=-122.25, lat=37.87))
        graph.add_vertex(Vertex(id=3, lon=-122.24, lat=37.86))
        graph.add_edge(1, 3)
        graph.add_edge(2, 3)
        assert graph.closest(-122.25, 37.87) in (1, 2)

    def test_index_refreshes_after_mutation(self, small_graph):
        """Inserting a vertex makes it findable."""
        small_graph.prune()
        assert small_graph.closest(-122.23, 37.84) != 5

        small_graph.add_vertex(Vertex(id=5, lon=-122.23, lat=37.84))
        assert small_graph.closest(-122.23, 37.84) == 5

    def test_pruned_vertex_is_never_returned(self, small_graph):
        """Pruned vertices leave the index."""
        small_graph.prune()
        assert small_graph.closest(-122.2301, 37.8401) in (1, 2, 3, 4)


class TestEmptyGraph:
    """Nearest-vertex search against zero vertices."""

    def test_empty_graph_raises(self):
        """An empty graph has no closest vertex."""
        with pytest.raises(EmptyGraphError):
            RoadGraph().closest(-122.25, 37.87)

    def test_graph_emptied_by_prune_raises(self):
        """A graph emptied by pruning behaves like an empty one."""
        graph = RoadGraph()
        graph.add_vertex(Vertex(id=1, lon=-122.25, lat=37.87))
        graph.prune()
        with pytest.raises(EmptyGraphError):
            graph.closest(-122.25, 37.87)

    def test_empty_index(self):
        """An index over nothing refuses queries."""
        index = NearestVertexIndex([])
        assert len(index) == 0
        with pytest.raises(LookupError):
            index.query(0.0, 0.0)


class TestNearestVertexIndex:
    """Direct tests of the spatial index."""

    def test_single_vertex(self):
        """One vertex is closest to everything."""
        index = NearestVertexIndex([Vertex(id=9, lon=10.0, lat=20.0)])
        assert index.query(-170.0, -80.0) == 9

    def test_across_the_antimeridian(self):
        """Longitudes 179.9 and -179.9 are neighbors on the sphere."""
        index = NearestVertexIndex(
            [
                Vertex(id=1, lon=179.9, lat=0.0),
                Vertex(id=2, lon=170.0, lat=0.0),
            ]
        )
        assert index.query(-179.9, 0.0) == 1

    def test_returns_python_int(self):
        """Ids come back as plain ints, even above 32 bits."""
        index = NearestVertexIndex([Vertex(id=2**40, lon=0.0, lat=0.0)])
        result = index.query(0.0, 0.0)
        assert result == 2**40
        assert type(result) is int
