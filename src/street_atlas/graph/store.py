"""In-memory road graph built once by a loader, then queried read-only.

A loader calls add_vertex() for every intersection, add_edge() for every
road segment between two known intersections, and prune() once before
handing the graph to query code.
"""

import logging
import re
import threading
from collections.abc import Iterator
from dataclasses import replace

from street_atlas import geometry
from street_atlas.graph.errors import VertexNotFoundError
from street_atlas.graph.nearest import NearestVertexIndex
from street_atlas.graph.types import Vertex

logger = logging.getLogger(__name__)

_NON_LETTERS = re.compile(r"[^a-zA-Z ]")


def clean_string(s: str) -> str:
    """Lowercase a name and drop everything except letters and spaces."""
    return _NON_LETTERS.sub("", s).lower()


def _detached(vertex: Vertex) -> Vertex:
    """Copy of a stored vertex that shares no mutable state with the graph."""
    return replace(vertex, tags=dict(vertex.tags), adjacent=set(vertex.adjacent))


class RoadGraph:
    """Vertex store keyed by id, with adjacency kept as neighbor ids.

    Vertices handed out by get(), locations() and iteration are copies, so
    stored records only change through add_vertex, add_edge and prune.
    Mutations and index rebuilds share one writer lock. Reads take no lock,
    so callers must finish loading and pruning before querying from
    several threads.
    """

    def __init__(self) -> None:
        self._vertices: dict[int, Vertex] = {}
        self._index: NearestVertexIndex | None = None
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, vertex_id: object) -> bool:
        return vertex_id in self._vertices

    def __iter__(self) -> Iterator[Vertex]:
        return iter([_detached(vertex) for vertex in self._vertices.values()])

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def add_vertex(self, vertex: Vertex) -> None:
        """Store a copy of vertex, replacing any existing vertex with the same id."""
        with self._lock:
            self._vertices[vertex.id] = _detached(vertex)
            self._index = None

    def add_edge(self, u: int, v: int) -> None:
        """Connect two stored vertices in both directions.

        Self-loops are ignored.

        Raises:
            VertexNotFoundError: If either id is not stored.
        """
        with self._lock:
            start = self._require(u)
            end = self._require(v)
            if u == v:
                return
            start.adjacent.add(v)
            end.adjacent.add(u)

    def prune(self) -> int:
        """Remove every vertex without neighbors. Returns how many were removed."""
        with self._lock:
            isolated = [vid for vid, vertex in self._vertices.items() if vertex.is_isolated]
            for vid in isolated:
                del self._vertices[vid]
            if isolated:
                self._index = None

        logger.info(
            "Pruned %d isolated vertices, %d remain", len(isolated), len(self._vertices)
        )
        return len(isolated)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def get(self, vertex_id: int) -> Vertex:
        """Return a copy of the stored vertex.

        Changing the copy does not touch the graph; use add_vertex or
        add_edge to modify it.

        Raises:
            VertexNotFoundError: If the id is not stored.
        """
        return _detached(self._require(vertex_id))

    def vertices(self) -> list[int]:
        """Snapshot of all vertex ids, in no particular order."""
        return list(self._vertices)

    def adjacent(self, vertex_id: int) -> list[int]:
        """Ids of the vertices sharing a road segment with vertex_id."""
        return list(self._require(vertex_id).adjacent)

    def lon(self, vertex_id: int) -> float:
        return self._require(vertex_id).lon

    def lat(self, vertex_id: int) -> float:
        return self._require(vertex_id).lat

    def distance_between(self, v: int, w: int) -> float:
        """Great-circle distance in miles between two stored vertices."""
        a = self._require(v)
        b = self._require(w)
        return geometry.distance(a.lon, a.lat, b.lon, b.lat)

    def bearing_between(self, v: int, w: int) -> float:
        """Initial bearing in degrees from vertex v toward vertex w."""
        a = self._require(v)
        b = self._require(w)
        return geometry.bearing(a.lon, a.lat, b.lon, b.lat)

    def locations(self, name: str) -> list[Vertex]:
        """Vertices whose cleaned name matches the cleaned query."""
        target = clean_string(name)
        return [
            _detached(vertex)
            for vertex in self._vertices.values()
            if vertex.name is not None and clean_string(vertex.name) == target
        ]

    def closest(self, lon: float, lat: float) -> int:
        """Id of the vertex nearest to (lon, lat) by great-circle distance.

        Raises:
            EmptyGraphError: If the graph holds no vertices.
        """
        return self._nearest_index().query(lon, lat)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _require(self, vertex_id: int) -> Vertex:
        try:
            return self._vertices[vertex_id]
        except KeyError:
            raise VertexNotFoundError(vertex_id) from None

    def _nearest_index(self) -> NearestVertexIndex:
        index = self._index
        if index is None:
            with self._lock:
                if self._index is None:
                    self._index = NearestVertexIndex(self._vertices.values())
                index = self._index
        return index
