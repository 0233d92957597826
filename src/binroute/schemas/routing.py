"""Routing request/response schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PointModel(BaseModel):
    lat: float = Field(..., ge=-90.0, le=90.0)
    lng: float = Field(..., ge=-180.0, le=180.0)


class BinModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., min_length=1)
    location: str
    fill_level: int = Field(..., ge=0, le=100, alias="fillLevel")
    lat: float = Field(..., ge=-90.0, le=90.0)
    lng: float = Field(..., ge=-180.0, le=180.0)


class SampleBinModel(BinModel):
    priority: str


class RouteRequestModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    algorithm: str = Field(..., description="shortest-path, spanning-tree, tour or capacity-selection")
    bins: List[BinModel] = Field(default_factory=list)
    truck_capacity: float = Field(..., gt=0, alias="truckCapacity", description="Truck capacity in kilograms.")
    start_point: Optional[PointModel] = Field(default=None, alias="startPoint")
    end_point: Optional[PointModel] = Field(default=None, alias="endPoint")
    two_opt: Optional[bool] = Field(
        default=None,
        alias="twoOpt",
        description="Refine tours with 2-opt; falls back to the server default when omitted.",
    )


class RouteMetricsModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    stop_count: int = Field(..., alias="stopCount")
    efficiency: float
    critical_bins: int = Field(..., alias="criticalBins")
    high_bins: int = Field(..., alias="highBins")


class RouteResponseModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    algorithm: str
    path: List[BinModel]
    total_distance: float = Field(..., alias="totalDistance")
    capacity_used: float = Field(..., alias="capacityUsed")
    execution_time: float = Field(..., alias="executionTime")
    metrics: RouteMetricsModel


class AlgorithmComparisonModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    algorithm: str
    total_distance: float = Field(..., alias="totalDistance")
    capacity_used: float = Field(..., alias="capacityUsed")
    execution_time: float = Field(..., alias="executionTime")
    stop_count: int = Field(..., alias="stopCount")
    efficiency: float


class AlgorithmInfoModel(BaseModel):
    name: str
    aliases: List[str]
    description: str
