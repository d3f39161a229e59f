# src/vsepr/core/services/geometry_service.py
"""Service for molecular geometry classification and atom placement."""

import logging
from typing import List, Optional

from ..config import PlacementConfig
from ..domain.errors import EmptyMoleculeError
from ..domain.implementations.geometry_classifier import classify_molecule
from ..domain.implementations.spatial_placement import place_atoms
from ..domain.models.bonded_atom import BondedAtom
from ..domain.models.geometry import Geometry, GeometryClassification
from ..domain.models.molecule import Molecule
from ..interfaces.repository import Repository
from .base_service import BaseService


class GeometryService(BaseService[Molecule]):
    """Service running central atom selection, classification and placement."""

    def __init__(
        self,
        config: Optional[PlacementConfig] = None,
        repository: Optional[Repository[Molecule]] = None,
    ):
        """
        Initialize service.

        Args:
            config: Placement distances and options, defaults to PlacementConfig()
            repository: Optional source of molecules for ``*_by_id`` lookups
        """
        super().__init__(repository)
        self.config = config or PlacementConfig()
        self.logger = logging.getLogger(__name__)

    def classify(self, molecule: Molecule) -> GeometryClassification:
        """
        Classify a molecule.

        Args:
            molecule: Molecule to classify

        Returns:
            GeometryClassification with the geometry and central atom handle

        Raises:
            GeometryError: If the molecule's topology is empty or unsupported
        """
        classification = classify_molecule(molecule)
        self.logger.debug(
            "%r: geometry %s, central atom %s, steric number %d",
            molecule,
            classification.geometry.name,
            molecule.atom(classification.central_handle).element,
            classification.steric_number,
        )
        return classification

    def compute_geometry(self, molecule: Molecule) -> Geometry:
        """Return the VSEPR geometry of a molecule."""
        return self.classify(molecule).geometry

    def compute_atom_locs_rots(self, molecule: Molecule) -> List[BondedAtom]:
        """
        Compute the world position and rotation of every atom.

        Args:
            molecule: Molecule to lay out

        Returns:
            BondedAtom list, central atom first

        Raises:
            GeometryError: If the molecule cannot be classified or placed
        """
        if molecule.atom_count == 0:
            raise EmptyMoleculeError("Cannot place the atoms of an empty molecule")
        return place_atoms(molecule, self.classify(molecule), self.config)

    def compute_geometry_by_id(self, id: str) -> Geometry:
        """Load a molecule from the repository and classify it."""
        return self.compute_geometry(self.get_by_id(id))

    def compute_atom_locs_rots_by_id(self, id: str) -> List[BondedAtom]:
        """Load a molecule from the repository and place its atoms."""
        return self.compute_atom_locs_rots(self.get_by_id(id))


def compute_geometry(
    molecule: Molecule, config: Optional[PlacementConfig] = None
) -> Geometry:
    """Shortcut for ``GeometryService(config).compute_geometry(molecule)``."""
    return GeometryService(config).compute_geometry(molecule)


def compute_atom_locs_rots(
    molecule: Molecule, config: Optional[PlacementConfig] = None
) -> List[BondedAtom]:
    """Shortcut for ``GeometryService(config).compute_atom_locs_rots(molecule)``."""
    return GeometryService(config).compute_atom_locs_rots(molecule)
