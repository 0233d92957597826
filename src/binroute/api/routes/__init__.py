"""Route group exports."""

from . import bins, health, routes

__all__ = ["routes", "health", "bins"]
