"""Route optimization services."""

from .dispatcher import get_strategy, resolve_algorithm
from .errors import (
    EmptyPointSet,
    InvalidBin,
    InvalidCapacity,
    RouteOptimizationError,
    UnknownAlgorithm,
    UnreachableEndpoint,
)
from .service import compare_algorithms, optimize, summarize

__all__ = [
    "optimize",
    "compare_algorithms",
    "summarize",
    "get_strategy",
    "resolve_algorithm",
    "RouteOptimizationError",
    "UnknownAlgorithm",
    "InvalidCapacity",
    "InvalidBin",
    "EmptyPointSet",
    "UnreachableEndpoint",
]
