# src/vsepr/infrastructure/repositories/structure_repository.py
"""Repository implementation for molecular structures."""

from typing import Dict, Optional
import os

from ...core.interfaces.repository import Repository
from ...core.domain.models.molecule import Molecule
from ..adapters.element_table import ElementTable
from ..io.structure_reader import StructureReader

STRUCTURE_SUFFIX = ".json"


class StructureRepository(Repository[Molecule]):
    """Repository serving molecules from a directory of structure descriptions."""

    def __init__(self, data_dir: str, element_table: Optional[ElementTable] = None):
        """
        Initialize repository with data directory.

        Args:
            data_dir: Directory containing ``<id>.json`` structure files
            element_table: Element lookup, defaults to RDKit's periodic table
        """
        self._data_dir = data_dir
        self._reader = StructureReader(element_table or ElementTable.from_rdkit())
        self._cache: Dict[str, Molecule] = {}

    def get(self, id: str) -> Optional[Molecule]:
        """
        Retrieve a molecule by ID.

        Args:
            id: Structure identifier, the file name without suffix

        Returns:
            Molecule, or None if no such file exists

        Raises:
            StructureFormatError: If the file exists but is malformed
        """
        if id in self._cache:
            return self._cache[id]

        file_path = os.path.join(self._data_dir, f"{id}{STRUCTURE_SUFFIX}")
        if not os.path.exists(file_path):
            return None

        molecule = self._reader.read(file_path)
        self._cache[id] = molecule
        return molecule

    def list(self) -> Dict[str, Molecule]:
        """
        List all available molecules.

        Returns:
            Dictionary mapping structure IDs to molecules, sorted by ID
        """
        structures = {}
        for file_name in sorted(os.listdir(self._data_dir)):
            if file_name.endswith(STRUCTURE_SUFFIX):
                id = os.path.splitext(file_name)[0]
                molecule = self.get(id)
                if molecule is not None:
                    structures[id] = molecule
        return structures

    def create(self, entity: Molecule) -> Molecule:
        """Create a new structure entry."""
        raise NotImplementedError("Creation not supported")

    def update(self, entity: Molecule) -> Molecule:
        """Update an existing structure."""
        raise NotImplementedError("Updates not supported")

    def delete(self, id: str) -> None:
        """Delete a structure."""
        raise NotImplementedError("Deletion not supported")
