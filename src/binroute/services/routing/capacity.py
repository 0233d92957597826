"""Capacity-constrained bin selection (0/1 knapsack) followed by sequencing."""

from __future__ import annotations

import logging
from typing import Sequence

from ...config import settings
from ...models.domain import Bin, RouteRequest, RouteResponse
from .base import RoutingStrategy
from .errors import InvalidCapacity
from .matrix import build_distance_matrix, path_distance
from .points import build_point_set
from .tour import nearest_neighbor_order

logger = logging.getLogger(__name__)

CRITICAL_FILL_LEVEL = 90
HIGH_FILL_LEVEL = 75


def bin_value(bin_: Bin, keywords: Sequence[str] | None = None) -> int:
    """Collection priority of a bin.

    Twice the fill level, +50 on a high-traffic street (location mentions one
    of ``keywords``), then +100 when critical or +50 when high.
    """

    keywords = settings.priority_keywords if keywords is None else keywords
    value = bin_.fill_level * 2

    location = bin_.location.lower()
    if any(keyword.lower() in location for keyword in keywords):
        value += 50

    if bin_.fill_level >= CRITICAL_FILL_LEVEL:
        value += 100
    elif bin_.fill_level >= HIGH_FILL_LEVEL:
        value += 50
    return value


def coerce_capacity(capacity: float) -> float:
    """Return ``capacity`` as a positive float or raise ``InvalidCapacity``."""

    if isinstance(capacity, bool):
        raise InvalidCapacity(f"Truck capacity must be a number, got {capacity!r}.")
    try:
        numeric = float(capacity)
    except (TypeError, ValueError) as exc:
        raise InvalidCapacity(f"Truck capacity must be a number, got {capacity!r}.") from exc
    if not numeric > 0:
        raise InvalidCapacity(f"Truck capacity must be positive, got {capacity!r}.")
    return numeric


def validate_capacity(capacity: float) -> int:
    """Return ``capacity`` as an int, rejecting non-positive or fractional values."""

    numeric = coerce_capacity(capacity)
    if not numeric.is_integer():
        raise InvalidCapacity(f"Capacity selection needs a whole number of kilograms, got {capacity!r}.")
    if numeric > settings.max_truck_capacity_kg:
        raise InvalidCapacity(
            f"Truck capacity {capacity!r} exceeds the supported maximum of {settings.max_truck_capacity_kg} kg."
        )
    return int(numeric)


def knapsack(values: Sequence[int], weights: Sequence[int], capacity: int) -> list[int]:
    """Solve the 0/1 knapsack bottom-up and return chosen item indices.

    Indices come out in backtracking order, last item first.
    """

    n = len(values)
    dp = [[0] * (capacity + 1) for _ in range(n + 1)]
    for i in range(1, n + 1):
        value, weight = values[i - 1], weights[i - 1]
        previous, row = dp[i - 1], dp[i]
        for w in range(capacity + 1):
            if weight <= w:
                row[w] = max(previous[w], value + previous[w - weight])
            else:
                row[w] = previous[w]

    selected: list[int] = []
    w = capacity
    for i in range(n, 0, -1):
        if dp[i][w] != dp[i - 1][w]:
            selected.append(i - 1)
            w -= weights[i - 1]
    return selected


class CapacitySelectionSolver(RoutingStrategy):
    """Pick the most valuable bins that fit the truck, then order them greedily.

    Unlike the tour solver the distance has no return leg, and only the
    selected bins count towards ``capacity_used``.
    """

    name = "capacity-selection"

    def solve(self, request: RouteRequest) -> RouteResponse:
        capacity = validate_capacity(request.truck_capacity)
        bins = list(request.bins)
        values = [bin_value(bin_) for bin_ in bins]
        weights = [bin_.weight_kg for bin_ in bins]

        chosen = [bins[index] for index in knapsack(values, weights, capacity)]
        logger.debug(
            "Selected %d of %d bins (%s) for %d kg",
            len(chosen),
            len(bins),
            ", ".join(bin_.id for bin_ in chosen),
            capacity,
        )

        points = build_point_set(request.start_point, chosen, request.end_point)
        distances = build_distance_matrix(points)
        order = nearest_neighbor_order(distances)

        return RouteResponse(
            path=[points[index] for index in order],
            total_distance=path_distance(order, distances),
            capacity_used=sum(bin_.weight_kg for bin_ in chosen),
            execution_time=0.0,
            metadata={
                "selected_bins": [bin_.id for bin_ in chosen],
                "selected_value": sum(bin_value(bin_) for bin_ in chosen),
            },
        )
