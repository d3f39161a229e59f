"""Core business logic services."""

from .geometry_service import GeometryService, compute_atom_locs_rots, compute_geometry
from .instance_service import InstanceBatches, InstanceService

__all__ = [
    "GeometryService",
    "compute_geometry",
    "compute_atom_locs_rots",
    "InstanceService",
    "InstanceBatches",
]
