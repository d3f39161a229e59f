#!/usr/bin/env python3
# src/vsepr/core/domain/errors.py

"""Errors raised when a molecule's geometry cannot be determined."""


class GeometryError(Exception):
    """Base class for unsupported or malformed molecular topology."""


class EmptyMoleculeError(GeometryError):
    """Raised when a query runs on a molecule without atoms."""


class AmbiguousCentralAtomError(GeometryError):
    """Raised when no single atom can be chosen as the central atom."""


class NoGeometryFoundError(GeometryError):
    """Raised when steric number and lone electrons match no VSEPR geometry."""

    def __init__(self, steric_number: int, lone_electron_count: int):
        self.steric_number = steric_number
        self.lone_electron_count = lone_electron_count
        super().__init__(
            f"No geometry found for steric number {steric_number} "
            f"with {lone_electron_count} lone electrons"
        )


class UnsupportedHybridizationError(GeometryError):
    """Raised for hybridizations without a lobe layout."""

    def __init__(self, hybridization):
        self.hybridization = hybridization
        super().__init__(f"Hybridization {hybridization.name} has no orbital layout")


class UnsupportedGeometryError(GeometryError):
    """Raised for classified geometries that placement does not handle."""

    def __init__(self, geometry):
        self.geometry = geometry
        super().__init__(f"Atom placement is not implemented for {geometry.name}")


class NoNonCentralAtomFoundError(GeometryError):
    """Raised when a geometry needs a second atom but none is distinct from the central one."""
