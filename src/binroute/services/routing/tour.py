"""Nearest-neighbour tour construction with optional 2-opt refinement."""

from __future__ import annotations

import logging
import math

from ...config import settings
from ...models.domain import RouteRequest, RouteResponse
from .base import RoutingStrategy, total_bin_weight
from .errors import EmptyPointSet
from .matrix import DistanceMatrix, build_distance_matrix, path_distance
from .points import build_point_set

logger = logging.getLogger(__name__)


def nearest_neighbor_order(distances: DistanceMatrix, start: int = 0) -> list[int]:
    """Greedy visiting order over every node, ties going to the lowest index."""

    n = len(distances)
    if n == 0:
        return []
    visited = [False] * n
    visited[start] = True
    order = [start]
    current = start

    for _ in range(n - 1):
        nearest = -1
        min_distance = math.inf
        for j in range(n):
            if not visited[j] and distances[current][j] < min_distance:
                min_distance = distances[current][j]
                nearest = j
        if nearest == -1:
            break
        visited[nearest] = True
        order.append(nearest)
        current = nearest

    return order


def two_opt(order: list[int], distances: DistanceMatrix) -> list[int]:
    """Reverse segments while the closed-tour length strictly drops.

    Position 0 is never moved so the tour keeps its starting point.
    """

    best = list(order)
    best_distance = path_distance(best, distances, closed=True)
    n = len(best)
    improved = True
    while improved:
        improved = False
        for i in range(1, n - 1):
            for j in range(i + 1, n):
                candidate = best[:i] + best[i : j + 1][::-1] + best[j + 1 :]
                candidate_distance = path_distance(candidate, distances, closed=True)
                if candidate_distance < best_distance:
                    best = candidate
                    best_distance = candidate_distance
                    improved = True
    return best


class TourSolver(RoutingStrategy):
    """Open visiting path whose reported distance includes the return leg."""

    name = "tour"

    def __init__(self, *, use_two_opt: bool | None = None) -> None:
        self.use_two_opt = use_two_opt

    def solve(self, request: RouteRequest) -> RouteResponse:
        points = build_point_set(request.start_point, request.bins, request.end_point)
        if len(points) < 2:
            raise EmptyPointSet("Tour needs at least two points.")

        distances = build_distance_matrix(points)
        order = nearest_neighbor_order(distances)

        refine = self.use_two_opt
        if refine is None:
            refine = request.two_opt if request.two_opt is not None else settings.tour_two_opt
        if refine:
            before = path_distance(order, distances, closed=True)
            order = two_opt(order, distances)
            logger.debug("2-opt reduced tour from %.4f km to %.4f km", before, path_distance(order, distances, closed=True))

        return RouteResponse(
            path=[points[index] for index in order],
            total_distance=path_distance(order, distances, closed=True),
            capacity_used=total_bin_weight(request.bins),
            execution_time=0.0,
            metadata={"two_opt": bool(refine)},
        )
