"""Command-line interfaces and other presentation layer components."""

from .cli.compute_geometry import main as compute_geometry_main

__all__ = [
    "compute_geometry_main",
]
