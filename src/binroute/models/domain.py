"""Domain models for collection waypoints and route optimization runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Sequence


class Algorithm(str, Enum):
    """Route optimization strategies offered to clients."""

    SHORTEST_PATH = "shortest-path"
    SPANNING_TREE = "spanning-tree"
    TOUR = "tour"
    CAPACITY_SELECTION = "capacity-selection"


@dataclass(frozen=True, slots=True)
class Coordinate:
    lat: float
    lng: float


@dataclass(frozen=True, slots=True)
class GeoPoint:
    """A waypoint consumed by the solvers: a bin or a synthetic start/end marker."""

    id: str
    location: str
    lat: float
    lng: float
    fill_level: int = 0

    @property
    def weight_kg(self) -> int:
        """Estimated load of the bin, 10 kg per percent of fill."""
        return self.fill_level * 10


# Bins are waypoints whose fill level carries real collection demand.
Bin = GeoPoint


@dataclass(slots=True)
class RouteRequest:
    algorithm: str
    bins: Sequence[Bin]
    truck_capacity: float
    start_point: Coordinate
    end_point: Coordinate
    two_opt: bool | None = None


@dataclass(slots=True)
class RouteResponse:
    path: list[GeoPoint]
    total_distance: float
    capacity_used: float
    execution_time: float = 0.0
    metadata: dict[str, Any] = field(default_factory=dict)
