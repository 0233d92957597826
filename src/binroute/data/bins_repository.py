"""Demo bin catalogue served to clients without their own bin source."""

from __future__ import annotations

import functools
from typing import Iterable

from ..models.domain import Bin

_SAMPLE_ROWS = (
    ("bin1", "Main Street & 1st Ave", 85, 40.7128, -74.0060),
    ("bin2", "Park Avenue & 2nd St", 92, 40.7589, -73.9851),
    ("bin3", "Broadway & 3rd St", 78, 40.7505, -73.9934),
    ("bin4", "5th Avenue & Central", 95, 40.7614, -73.9776),
    ("bin5", "Wall Street Corner", 88, 40.7074, -74.0113),
)


@functools.lru_cache(maxsize=1)
def load_sample_bins() -> tuple[Bin, ...]:
    return tuple(
        Bin(id=bin_id, location=location, fill_level=fill_level, lat=lat, lng=lng)
        for bin_id, location, fill_level, lat, lng in _SAMPLE_ROWS
    )


def get_sample_bins(bin_ids: Iterable[str] | None = None) -> list[Bin]:
    """Return catalogue bins, optionally restricted to ``bin_ids`` (catalogue order kept)."""

    bins = load_sample_bins()
    if bin_ids is None:
        return list(bins)
    wanted = {bin_id.strip() for bin_id in bin_ids}
    return [bin_ for bin_ in bins if bin_.id in wanted]
