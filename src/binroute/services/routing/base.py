"""Base classes for route optimization strategy implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from ...models.domain import Bin, RouteRequest, RouteResponse


def total_bin_weight(bins: Sequence[Bin]) -> int:
    return sum(bin_.weight_kg for bin_ in bins)


class RoutingStrategy(ABC):
    """Contract for solver implementations.

    ``solve`` leaves ``execution_time`` at zero; the caller times the run.
    """

    name: str

    @abstractmethod
    def solve(self, request: RouteRequest) -> RouteResponse:
        raise NotImplementedError
