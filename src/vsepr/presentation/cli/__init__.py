"""Command-line interface modules."""

from .compute_geometry import main as compute_geometry_main

__all__ = [
    "compute_geometry_main",
]
