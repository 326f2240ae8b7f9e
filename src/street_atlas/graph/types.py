"""Type definitions for the road graph."""

from dataclasses import dataclass, field


@dataclass
class Vertex:
    """A road intersection.

    Adjacency holds neighbor ids only; the owning RoadGraph resolves them.
    """

    id: int
    lon: float
    lat: float
    name: str | None = None
    tags: dict[str, str] = field(default_factory=dict)
    adjacent: set[int] = field(default_factory=set)

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def is_isolated(self) -> bool:
        """True when no road segment touches this vertex."""
        return not self.adjacent
