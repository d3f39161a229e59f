"""Core domain models, services and configuration for VSEPR geometry."""

from .config import PlacementConfig
from .domain.models.atom import Atom, Hybridization
from .domain.models.bond import Bond, BondType
from .domain.models.bonded_atom import BondedAtom, OrbitalType, OrientedOrbital
from .domain.models.geometry import Geometry, GeometryClassification
from .domain.models.molecule import Molecule
from .services.geometry_service import GeometryService, compute_atom_locs_rots, compute_geometry
from .services.instance_service import InstanceBatches, InstanceService

__all__ = [
    "PlacementConfig",
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
