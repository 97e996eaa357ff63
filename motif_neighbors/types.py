"""
Shared data structures for the motif neighbour engine.

TraditionPoint places a tradition slot on the globe.
Neighbor is one ranked candidate of a nearest-neighbour query.
Comparison partitions two traditions' motif inventories.
"""

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class TraditionPoint:
    """A tradition's name and location, parallel to a motif-vector slot."""

    name: str
    latitude: float  # degrees
    longitude: float  # degrees

    def to_dict(self) -> dict:
        return {
            "Name": self.name,
            "Latitude": self.latitude,
            "Longitude": self.longitude,
        }


@dataclass(frozen=True)
class MotifDescription:
    """Human-readable name and description of a motif family."""

    name: str = ""
    description: str = ""


@dataclass(frozen=True)
class Neighbor:
    """One (code, distance) pair. Distances are metric-specific."""

    code: str
    distance: float


@dataclass(frozen=True)
class Comparison:
    """Motif codes shared by two traditions and unique to each.

    Each sequence is ordered by motif slot index.
    """

    common: Tuple[str, ...] = field(default_factory=tuple)
    only_a: Tuple[str, ...] = field(default_factory=tuple)
    only_b: Tuple[str, ...] = field(default_factory=tuple)
