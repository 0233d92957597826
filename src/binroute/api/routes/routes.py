"""Routing endpoints."""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, HTTPException, status

from ...config import settings
from ...models.domain import Algorithm, Bin, Coordinate, GeoPoint, RouteRequest
from ...schemas.routing import (
    AlgorithmComparisonModel,
    AlgorithmInfoModel,
    BinModel,
    PointModel,
    RouteMetricsModel,
    RouteRequestModel,
    RouteResponseModel,
)
from ...services.routing import compare_algorithms, optimize, summarize
from ...services.routing.dispatcher import ALGORITHM_ALIASES, ALGORITHM_DESCRIPTIONS

router = APIRouter(prefix="/routes", tags=["routes"])

logger = logging.getLogger(__name__)


def _coordinate(point: PointModel | None) -> Coordinate:
    if point is None:
        return Coordinate(lat=settings.default_start_lat, lng=settings.default_start_lng)
    return Coordinate(lat=point.lat, lng=point.lng)


def _to_domain(payload: RouteRequestModel) -> RouteRequest:
    return RouteRequest(
        algorithm=payload.algorithm,
        bins=[
            Bin(id=item.id, location=item.location, fill_level=item.fill_level, lat=item.lat, lng=item.lng)
            for item in payload.bins
        ],
        truck_capacity=payload.truck_capacity,
        start_point=_coordinate(payload.start_point),
        end_point=_coordinate(payload.end_point),
        two_opt=payload.two_opt,
    )


def _bin_model(point: GeoPoint) -> BinModel:
    return BinModel(id=point.id, location=point.location, fill_level=point.fill_level, lat=point.lat, lng=point.lng)


@router.get("/algorithms", response_model=List[AlgorithmInfoModel], status_code=status.HTTP_200_OK)
def list_algorithms() -> List[AlgorithmInfoModel]:
    return [
        AlgorithmInfoModel(
            name=algorithm.value,
            aliases=[alias for alias, target in ALGORITHM_ALIASES.items() if target is algorithm],
            description=ALGORITHM_DESCRIPTIONS[algorithm],
        )
        for algorithm in Algorithm
    ]


@router.post("/optimize", response_model=RouteResponseModel, status_code=status.HTTP_200_OK)
def optimize_route(payload: RouteRequestModel) -> RouteResponseModel:
    try:
        response = optimize(_to_domain(payload))
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Error optimizing route: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to optimize route: {exc}",
        ) from exc

    metrics = summarize(response, payload.truck_capacity)
    return RouteResponseModel(
        algorithm=response.metadata["algorithm"],
        path=[_bin_model(point) for point in response.path],
        total_distance=response.total_distance,
        capacity_used=response.capacity_used,
        execution_time=response.execution_time,
        metrics=RouteMetricsModel(
            stop_count=metrics.stop_count,
            efficiency=metrics.efficiency,
            critical_bins=metrics.critical_bins,
            high_bins=metrics.high_bins,
        ),
    )


@router.post("/compare", response_model=List[AlgorithmComparisonModel], status_code=status.HTTP_200_OK)
def compare_routes(payload: RouteRequestModel) -> List[AlgorithmComparisonModel]:
    """Run every algorithm on the same bins; ``algorithm`` in the body is ignored."""
    try:
        results = compare_algorithms(_to_domain(payload))
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Error comparing algorithms: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to compare algorithms: {exc}",
        ) from exc

    return [
        AlgorithmComparisonModel(
            algorithm=entry.algorithm.value,
            total_distance=entry.total_distance,
            capacity_used=entry.capacity_used,
            execution_time=entry.execution_time,
            stop_count=entry.stop_count,
            efficiency=entry.efficiency,
        )
        for entry in results
    ]
