"""Algorithms of the geometry engine."""

from .central_atom_selector import select_central_atom
from .geometry_classifier import classify, classify_molecule, steric_number
from .orbital_orientation import orbital_orientations
from .spatial_placement import place_atoms

__all__ = [
    "select_central_atom",
    "classify",
    "classify_molecule",
    "steric_number",
    "orbital_orientations",
    "place_atoms",
]
