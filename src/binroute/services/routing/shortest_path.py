"""Dijkstra shortest path across the complete waypoint graph."""

from __future__ import annotations

import logging
import math

from ...models.domain import RouteRequest, RouteResponse
from .base import RoutingStrategy, total_bin_weight
from .errors import EmptyPointSet, UnreachableEndpoint
from .matrix import DistanceMatrix, build_distance_matrix, path_distance
from .points import build_point_set

logger = logging.getLogger(__name__)


def dijkstra(distances: DistanceMatrix, source: int, target: int) -> list[int]:
    """Return node indices from ``source`` to ``target``.

    Zero-length edges are treated as absent, so coincident points are never
    joined directly. Ties on tentative distance go to the lowest index. When
    ``target`` cannot be reached the walk stops at the first node without a
    predecessor and the returned path does not begin at ``source``.
    """

    n = len(distances)
    if n < 2:
        raise EmptyPointSet(f"Shortest path needs at least two points, got {n}.")
    dist = [math.inf] * n
    prev = [-1] * n
    visited = [False] * n
    dist[source] = 0.0

    for _ in range(n):
        u = -1
        for j in range(n):
            if not visited[j] and (u == -1 or dist[j] < dist[u]):
                u = j
        if u == -1:
            break
        visited[u] = True

        for v in range(n):
            if not visited[v] and distances[u][v] > 0:
                alt = dist[u] + distances[u][v]
                if alt < dist[v]:
                    dist[v] = alt
                    prev[v] = u

    path: list[int] = []
    current = target
    while current != -1:
        path.append(current)
        current = prev[current]
    path.reverse()
    return path


class ShortestPathSolver(RoutingStrategy):
    name = "shortest-path"

    def solve(self, request: RouteRequest) -> RouteResponse:
        points = build_point_set(request.start_point, request.bins, request.end_point)
        if len(points) < 2:
            raise EmptyPointSet("Shortest path needs a start and an end point.")

        distances = build_distance_matrix(points)
        order = dijkstra(distances, 0, len(points) - 1)
        if not order or order[0] != 0:
            logger.warning("End point unreachable from start; partial path %s", order)
            raise UnreachableEndpoint("End point is not reachable from the start point.")

        return RouteResponse(
            path=[points[index] for index in order],
            total_distance=path_distance(order, distances),
            capacity_used=total_bin_weight(request.bins),
            execution_time=0.0,
        )
