"""Route optimization orchestration service."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Sequence

from ...config import settings
from ...models.domain import Algorithm, Bin, RouteRequest, RouteResponse
from .capacity import CRITICAL_FILL_LEVEL, HIGH_FILL_LEVEL, coerce_capacity, validate_capacity
from .dispatcher import execute_strategy, resolve_algorithm
from .errors import InvalidBin
from .matrix import point_distance_km
from .points import END_ID, START_ID, bins_in, end_point, start_point

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RouteMetrics:
    stop_count: int
    efficiency: float
    critical_bins: int
    high_bins: int


@dataclass(slots=True)
class AlgorithmComparison:
    algorithm: Algorithm
    total_distance: float
    capacity_used: float
    execution_time: float
    stop_count: int
    efficiency: float


def priority_for(fill_level: int) -> str:
    if fill_level >= CRITICAL_FILL_LEVEL:
        return "critical"
    if fill_level >= HIGH_FILL_LEVEL:
        return "high"
    return "medium"


def _validate_bins(bins: Sequence[Bin]) -> None:
    seen: set[str] = set()
    for bin_ in bins:
        if bin_.id in (START_ID, END_ID):
            raise InvalidBin(f"Bin id '{bin_.id}' is reserved for the route endpoints.")
        if bin_.id in seen:
            raise InvalidBin(f"Duplicate bin id '{bin_.id}'.")
        seen.add(bin_.id)
        if isinstance(bin_.fill_level, bool) or not isinstance(bin_.fill_level, int):
            raise InvalidBin(f"Bin '{bin_.id}' fill level must be an integer percentage.")
        if not 0 <= bin_.fill_level <= 100:
            raise InvalidBin(f"Bin '{bin_.id}' fill level {bin_.fill_level} is outside 0-100.")


def _validate_request(request: RouteRequest, algorithm: Algorithm) -> None:
    if algorithm is Algorithm.CAPACITY_SELECTION:
        validate_capacity(request.truck_capacity)
    else:
        coerce_capacity(request.truck_capacity)
    _validate_bins(request.bins)


def _direct_route(request: RouteRequest) -> RouteResponse:
    start = start_point(request.start_point)
    end = end_point(request.end_point)
    return RouteResponse(path=[start, end], total_distance=point_distance_km(start, end), capacity_used=0)


def optimize(request: RouteRequest) -> RouteResponse:
    """Validate ``request``, run the selected solver and time it.

    ``execution_time`` is wall-clock milliseconds including the configured
    simulated delay. A request without bins gets the direct start-to-end leg.
    """

    algorithm = resolve_algorithm(request.algorithm)
    _validate_request(request, algorithm)

    started = time.perf_counter()
    if settings.simulated_delay_seconds > 0:
        time.sleep(settings.simulated_delay_seconds)

    if request.bins:
        response = execute_strategy(request)
    else:
        response = _direct_route(request)

    response.execution_time = (time.perf_counter() - started) * 1000.0
    response.metadata["algorithm"] = algorithm.value
    logger.info(
        "Solved %s for %d bins: %.3f km, %s kg in %.1f ms",
        algorithm.value,
        len(request.bins),
        response.total_distance,
        response.capacity_used,
        response.execution_time,
    )
    return response


def summarize(response: RouteResponse, truck_capacity: float) -> RouteMetrics:
    visited = bins_in(response.path)
    efficiency = round(response.capacity_used / truck_capacity * 100, 1) if truck_capacity else 0.0
    return RouteMetrics(
        stop_count=len(visited),
        efficiency=efficiency,
        critical_bins=sum(1 for bin_ in visited if priority_for(bin_.fill_level) == "critical"),
        high_bins=sum(1 for bin_ in visited if priority_for(bin_.fill_level) == "high"),
    )


def compare_algorithms(request: RouteRequest) -> list[AlgorithmComparison]:
    """Run every algorithm on the same request and collect their figures."""

    results: list[AlgorithmComparison] = []
    for algorithm in Algorithm:
        variant = RouteRequest(
            algorithm=algorithm.value,
            bins=request.bins,
            truck_capacity=request.truck_capacity,
            start_point=request.start_point,
            end_point=request.end_point,
            two_opt=request.two_opt,
        )
        response = optimize(variant)
        metrics = summarize(response, request.truck_capacity)
        results.append(
            AlgorithmComparison(
                algorithm=algorithm,
                total_distance=response.total_distance,
                capacity_used=response.capacity_used,
                execution_time=response.execution_time,
                stop_count=metrics.stop_count,
                efficiency=metrics.efficiency,
            )
        )
    return results
