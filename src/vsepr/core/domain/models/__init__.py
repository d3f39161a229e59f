"""Domain model classes."""

from .atom import Atom, Hybridization
from .bond import Bond, BondType
from .bonded_atom import BondedAtom, OrbitalType, OrientedOrbital
from .geometry import Geometry, GeometryClassification
from .molecule import Molecule

__all__ = [
    "Atom",
    "Hybridization",
    "Bond",
    "BondType",
    "BondedAtom",
    "OrbitalType",
    "OrientedOrbital",
    "Geometry",
    "GeometryClassification",
    "Molecule",
]
