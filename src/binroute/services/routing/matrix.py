"""Pairwise distance tables over an ordered waypoint set."""

from __future__ import annotations

from typing import Sequence

from ...models.domain import GeoPoint
from ..geospatial import haversine_km

DistanceMatrix = list[list[float]]


def point_distance_km(a: GeoPoint, b: GeoPoint) -> float:
    return haversine_km(a.lat, a.lng, b.lat, b.lng)


def build_distance_matrix(points: Sequence[GeoPoint]) -> DistanceMatrix:
    """Build the symmetric ``n x n`` Haversine table with a zero diagonal."""

    n = len(points)
    distances: DistanceMatrix = [[0.0] * n for _ in range(n)]
    for i in range(n):
        for j in range(i + 1, n):
            distance_km = point_distance_km(points[i], points[j])
            distances[i][j] = distance_km
            distances[j][i] = distance_km
    return distances


def path_distance(order: Sequence[int], distances: DistanceMatrix, *, closed: bool = False) -> float:
    """Sum consecutive edges along ``order``; ``closed`` adds the edge back to the first index."""

    total = 0.0
    for current, following in zip(order, order[1:]):
        total += distances[current][following]
    if closed and order:
        total += distances[order[-1]][order[0]]
    return total
