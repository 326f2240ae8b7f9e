"""Nearest-vertex search over a snapshot of the road graph.

Vertices are projected onto the unit sphere and indexed with a k-d tree.
The chord between two points on the sphere is a strictly increasing
function of the great-circle angle between them, so the chord-nearest
vertex is also the haversine-nearest one.
"""

import logging
from collections.abc import Iterable

import numpy as np
from scipy.spatial import cKDTree

from street_atlas.geometry import to_unit_vectors
from street_atlas.graph.errors import EmptyGraphError
from street_atlas.graph.types import Vertex

logger = logging.getLogger(__name__)


class NearestVertexIndex:
    """Immutable spatial index answering closest-vertex queries."""

    def __init__(self, vertices: Iterable[Vertex]):
        vertices = list(vertices)
        # Tree position -> vertex id
        self._ids = np.fromiter((v.id for v in vertices), dtype=np.int64, count=len(vertices))
        self._tree: cKDTree | None = None

        if vertices:
            lons = np.fromiter((v.lon for v in vertices), dtype=np.float64, count=len(vertices))
            lats = np.fromiter((v.lat for v in vertices), dtype=np.float64, count=len(vertices))
            self._tree = cKDTree(to_unit_vectors(lons, lats))

        logger.debug("Built nearest-vertex index over %d vertices", len(self._ids))

    def __len__(self) -> int:
        return len(self._ids)

    def query(self, lon: float, lat: float) -> int:
        """Return the id of the vertex closest to (lon, lat).

        Raises:
            EmptyGraphError: If the index holds no vertices.
        """
        if self._tree is None:
            raise EmptyGraphError()

        target = to_unit_vectors([lon], [lat])[0]
        _, position = self._tree.query(target, k=1)
        return int(self._ids[position])
