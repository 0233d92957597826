"""Factory for routing strategies based on user selection."""

from __future__ import annotations

from typing import Any

from ...models.domain import Algorithm, RouteRequest, RouteResponse
from .base import RoutingStrategy
from .capacity import CapacitySelectionSolver
from .errors import UnknownAlgorithm
from .shortest_path import ShortestPathSolver
from .spanning_tree import SpanningTreeSolver
from .tour import TourSolver

# Legacy selector names still sent by the web client.
ALGORITHM_ALIASES: dict[str, Algorithm] = {
    "dijkstra": Algorithm.SHORTEST_PATH,
    "prim": Algorithm.SPANNING_TREE,
    "tsp": Algorithm.TOUR,
    "knapsack": Algorithm.CAPACITY_SELECTION,
}

ALGORITHM_DESCRIPTIONS: dict[Algorithm, str] = {
    Algorithm.SHORTEST_PATH: "Dijkstra shortest path from the start point to the end point.",
    Algorithm.SPANNING_TREE: "Prim minimum spanning tree over all bins, walked depth-first.",
    Algorithm.TOUR: "Nearest-neighbour tour over all bins, distance includes the return leg.",
    Algorithm.CAPACITY_SELECTION: "Knapsack selection of the most valuable bins that fit the truck.",
}


def resolve_algorithm(name: str | Algorithm) -> Algorithm:
    if isinstance(name, Algorithm):
        return name
    key = str(name).strip().lower()
    try:
        return Algorithm(key)
    except ValueError:
        pass
    if key in ALGORITHM_ALIASES:
        return ALGORITHM_ALIASES[key]
    accepted = tuple(algorithm.value for algorithm in Algorithm) + tuple(ALGORITHM_ALIASES)
    raise UnknownAlgorithm(str(name), accepted)


def get_strategy(name: str | Algorithm, **kwargs: Any) -> RoutingStrategy:
    match resolve_algorithm(name):
        case Algorithm.SHORTEST_PATH:
            return ShortestPathSolver()
        case Algorithm.SPANNING_TREE:
            return SpanningTreeSolver()
        case Algorithm.TOUR:
            return TourSolver(use_two_opt=kwargs.get("use_two_opt"))
        case Algorithm.CAPACITY_SELECTION:
            return CapacitySelectionSolver()


def execute_strategy(request: RouteRequest, **kwargs: Any) -> RouteResponse:
    strategy = get_strategy(request.algorithm, **kwargs)
    return strategy.solve(request)
