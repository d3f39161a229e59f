"""Interfaces implemented by the geometry engine."""

from .placement_strategy import PlacementStrategy

__all__ = ["PlacementStrategy"]
