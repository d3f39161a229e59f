#!/usr/bin/env python3
# src/vsepr/core/domain/models/geometry.py

"""
Domain models for classified VSEPR geometries.
"""

from dataclasses import dataclass
from enum import Enum


class Geometry(Enum):
    """VSEPR shape of a molecule, valued by its electron-domain group count."""

    # 0 groups
    Single = (0, 0)
    # 1 group
    Linear2 = (1, 0)
    # 2 groups
    Linear = (2, 0)
    # 3 groups
    TrigonalPlanar = (3, 0)
    Bent1Lone = (3, 2)
    # 4 groups
    Tetrahedral = (4, 0)
    TrigonalPyramidal = (4, 2)
    Bent2Lone = (4, 4)
    # 5 groups
    TrigonalBipyramidal = (5, 0)
    Seesaw = (5, 2)
    TShape = (5, 4)
    Linear3Lone = (5, 6)
    # 6 groups
    Octahedral = (6, 0)
    SquarePyramidal = (6, 2)
    SquarePlanar = (6, 4)
    # 7 groups
    PentagonalBipyramidal = (7, 0)
    PentagonalPyramidal = (7, 2)
    PentagonalPlanar = (7, 4)
    # 8 groups
    SquareAntiprismatic = (8, 0)

    @property
    def electron_groups(self) -> int:
        return self.value[0]

    @property
    def lone_electron_count(self) -> int:
        return self.value[1]


@dataclass(frozen=True)
class GeometryClassification:
    """Result of classifying a molecule.

    Carries the central atom handle alongside the geometry so the molecule
    itself is never mutated by a query.
    """

    geometry: Geometry
    central_handle: int
    steric_number: int
    lone_electron_count: int = 0
