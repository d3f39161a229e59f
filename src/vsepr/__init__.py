"""VSEPR molecular geometry engine.

Classifies the shape of a small molecule from its bonding graph and places
every atom, with its orbital lobes, consistently with that shape.
"""

from .core.config import PlacementConfig
from .core.domain.errors import (
    AmbiguousCentralAtomError,
    EmptyMoleculeError,
    GeometryError,
    NoGeometryFoundError,
    NoNonCentralAtomFoundError,
    UnsupportedGeometryError,
    UnsupportedHybridizationError,
)
from .core.domain.implementations.orbital_orientation import orbital_orientations
from .core.domain.models.atom import Atom, Hybridization
from .core.domain.models.bond import Bond, BondType
from .core.domain.models.bonded_atom import BondedAtom, OrbitalType, OrientedOrbital
from .core.domain.models.geometry import Geometry, GeometryClassification
from .core.domain.models.molecule import Molecule
from .core.services.geometry_service import GeometryService, compute_atom_locs_rots, compute_geometry
from .core.services.instance_service import InstanceBatches, InstanceService

__version__ = "0.1.0"

__all__ = [
    "PlacementConfig",
    "GeometryError",
    "EmptyMoleculeError",
    "AmbiguousCentralAtomError",
    "NoGeometryFoundError",
    "UnsupportedHybridizationError",
    "UnsupportedGeometryError",
    "NoNonCentralAtomFoundError",
    "orbital_orientations",
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
    "GeometryService",
    "compute_geometry",
    "compute_atom_locs_rots",
    "InstanceService",
    "InstanceBatches",
]
