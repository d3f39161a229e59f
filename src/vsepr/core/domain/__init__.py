"""Core domain models, errors and algorithms."""

from .errors import (
    AmbiguousCentralAtomError,
    EmptyMoleculeError,
    GeometryError,
    NoGeometryFoundError,
    NoNonCentralAtomFoundError,
    UnsupportedGeometryError,
    UnsupportedHybridizationError,
)
from .models.geometry import Geometry, GeometryClassification
from .models.molecule import Molecule

__all__ = [
    "GeometryError",
    "EmptyMoleculeError",
    "AmbiguousCentralAtomError",
    "NoGeometryFoundError",
    "UnsupportedHybridizationError",
    "UnsupportedGeometryError",
    "NoNonCentralAtomFoundError",
    "Geometry",
    "GeometryClassification",
    "Molecule",
]
