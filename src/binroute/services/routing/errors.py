"""Exceptions raised by the route optimization services.

Every error derives from ``ValueError`` so callers that already translate
``ValueError`` into a client error keep doing so.
"""

from __future__ import annotations


class RouteOptimizationError(ValueError):
    """Base class for failures caused by the request itself."""


class UnknownAlgorithm(RouteOptimizationError):
    def __init__(self, name: str, accepted: tuple[str, ...] = ()) -> None:
        self.name = name
        message = f"Unknown algorithm '{name}'."
        if accepted:
            message += f" Expected one of: {', '.join(accepted)}."
        super().__init__(message)


class InvalidCapacity(RouteOptimizationError):
    pass


class InvalidBin(RouteOptimizationError):
    pass


class EmptyPointSet(RouteOptimizationError):
    pass


class UnreachableEndpoint(RouteOptimizationError):
    pass
