"""Bin catalogue endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Query, status

from ...data.bins_repository import get_sample_bins
from ...schemas.routing import SampleBinModel
from ...services.routing.service import priority_for

router = APIRouter(prefix="/bins", tags=["bins"])


@router.get("/sample", response_model=List[SampleBinModel], status_code=status.HTTP_200_OK)
def list_sample_bins(
    ids: List[str] | None = Query(default=None, description="Restrict the catalogue to these bin ids"),
) -> List[SampleBinModel]:
    return [
        SampleBinModel(
            id=bin_.id,
            location=bin_.location,
            fill_level=bin_.fill_level,
            lat=bin_.lat,
            lng=bin_.lng,
            priority=priority_for(bin_.fill_level),
        )
        for bin_ in get_sample_bins(ids)
    ]
