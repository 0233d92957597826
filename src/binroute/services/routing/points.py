"""Waypoint assembly shared by every solver."""

from __future__ import annotations

from typing import Sequence

from ...models.domain import Bin, Coordinate, GeoPoint

START_ID = "start"
END_ID = "end"


def start_point(coordinate: Coordinate) -> GeoPoint:
    return GeoPoint(id=START_ID, location="Start Point", lat=coordinate.lat, lng=coordinate.lng, fill_level=0)


def end_point(coordinate: Coordinate) -> GeoPoint:
    return GeoPoint(id=END_ID, location="End Point", lat=coordinate.lat, lng=coordinate.lng, fill_level=0)


def build_point_set(start: Coordinate, bins: Sequence[Bin], end: Coordinate) -> list[GeoPoint]:
    """Return ``[start, *bins, end]``.

    Index 0 is always the start marker and the last index the end marker;
    solvers address those two points by position.
    """

    return [start_point(start), *bins, end_point(end)]


def bins_in(path: Sequence[GeoPoint]) -> list[GeoPoint]:
    """Strip the synthetic start/end markers from a path."""

    return [point for point in path if point.id not in (START_ID, END_ID)]
