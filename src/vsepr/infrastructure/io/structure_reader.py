# src/vsepr/infrastructure/io/structure_reader.py
"""Reading of solver JSON structure descriptions into Molecule objects."""

import json
import logging
from typing import Any, Dict, List, Tuple

from ...core.domain.models.atom import Atom, Hybridization
from ...core.domain.models.bond import BondType
from ...core.domain.models.molecule import Molecule
from ..adapters.element_table import ElementTable

logger = logging.getLogger(__name__)


class StructureFormatError(ValueError):
    """Raised when a structure description cannot be turned into a Molecule."""


def _clean_name(name: Any) -> str:
    return str(name).replace(" ", "")


def _as_int(value: Any, error_message: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise StructureFormatError(error_message) from e


class StructureReader:
    """Handles reading of structure description files.

    A description is a JSON object of the form::

        {"name": "NH3",
         "atoms": [{"name": "N", "id": 0, "lone": 2, "hybridization": "SP3",
                    "p_orbitals": [],
                    "bonds_with": [{"name": "H", "id": 1, "bond_type": "SIGMA"}]},
                   ...]}
    """

    def __init__(self, element_table: ElementTable):
        self.element_table = element_table

    def read(self, path: str) -> Molecule:
        """
        Read a structure description file.

        Args:
            path: Path to the JSON file

        Returns:
            Molecule built from the description

        Raises:
            StructureFormatError: If the description is malformed
        """
        with open(path, "r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                raise StructureFormatError(f"{path} is not valid JSON: {e}") from e
        logger.debug("Read structure description %s", path)
        return self.from_dict(data)

    def from_dict(self, data: Dict[str, Any]) -> Molecule:
        """Build a Molecule from an already parsed description."""
        if not isinstance(data, dict):
            raise StructureFormatError(
                f"Structure description must be an object, got {type(data).__name__}"
            )
        entries = data.get("atoms")
        if not isinstance(entries, list):
            raise StructureFormatError("Structure description has no 'atoms' list")
        if not all(isinstance(entry, dict) for entry in entries):
            raise StructureFormatError("Every entry of 'atoms' must be an object")

        atoms = [self._parse_atom(entry) for entry in entries]
        bonds_with = [
            self._parse_bonds(atom, entry.get("bonds_with", []), atoms)
            for atom, entry in zip(atoms, entries)
        ]
        try:
            return Molecule(atoms, bonds_with, name=str(data.get("name", "")))
        except ValueError as e:
            raise StructureFormatError(str(e)) from e

    def _parse_atom(self, entry: Dict[str, Any]) -> Atom:
        try:
            name = _clean_name(entry["name"])
            raw_id = entry["id"]
        except KeyError as e:
            raise StructureFormatError(f"Atom entry is missing {e}") from e
        atom_id = _as_int(raw_id, f"Atom with name {name} had invalid id entry of {raw_id}.")
        lone_electron_count = _as_int(
            entry.get("lone", 0),
            f"Atom with name {name} and id {atom_id} had invalid lone entry of "
            f"{entry.get('lone')}.",
        )

        try:
            hybridization = Hybridization.from_label(str(entry.get("hybridization", "S")))
        except ValueError as e:
            raise StructureFormatError(
                f"Atom with name {name} and id {atom_id} had invalid hybridization "
                f"entry of {entry.get('hybridization')}."
            ) from e

        try:
            proton_count = self.element_table.proton_count(name)
        except KeyError as e:
            raise StructureFormatError(
                f"Atom with name {name} and id {atom_id} is not in the element table."
            ) from e

        return Atom(
            atom_id=atom_id,
            element=name,
            proton_count=proton_count,
            lone_electron_count=lone_electron_count,
            hybridization=hybridization,
            p_orbital_count=len(entry.get("p_orbitals") or []),
        )

    def _parse_bonds(
        self, atom: Atom, bond_entries: List[Dict[str, Any]], atoms: List[Atom]
    ) -> List[Tuple[int, BondType]]:
        if not isinstance(bond_entries, list) or not all(
            isinstance(bond_entry, dict) for bond_entry in bond_entries
        ):
            raise StructureFormatError(
                f"Atom with name {atom.element} and id {atom.atom_id} had invalid "
                f"bonds_with entry."
            )
        bonds = []
        for bond_entry in bond_entries:
            bond_name = _clean_name(bond_entry.get("name", ""))
            bond_id = _as_int(
                bond_entry.get("id"),
                f"Atom with name {atom.element} and id {atom.atom_id} had invalid "
                f"bond id entry of {bond_entry.get('id')}.",
            )
            # bonds match on both id and element name
            if not any(a.atom_id == bond_id and a.element == bond_name for a in atoms):
                raise StructureFormatError(
                    f"Atom with name {atom.element} and id {atom.atom_id} "
                    f"could not find atom to bond with."
                )
            try:
                bond_type = BondType.from_label(str(bond_entry.get("bond_type", "")))
            except ValueError as e:
                raise StructureFormatError(
                    f"Atom with name {atom.element} and id {atom.atom_id} had invalid "
                    f"bond_type entry of {bond_entry.get('bond_type')}."
                ) from e
            bonds.append((bond_id, bond_type))
        return bonds


def load_molecule(path: str, element_table: ElementTable) -> Molecule:
    """Read the structure description at ``path``."""
    return StructureReader(element_table).read(path)


def molecule_from_dict(data: Dict[str, Any], element_table: ElementTable) -> Molecule:
    """Build a Molecule from a parsed structure description."""
    return StructureReader(element_table).from_dict(data)
