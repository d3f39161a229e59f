"""Readers for persisted structure descriptions."""

from .structure_reader import StructureFormatError, StructureReader, load_molecule, molecule_from_dict

__all__ = [
    "StructureFormatError",
    "StructureReader",
    "load_molecule",
    "molecule_from_dict",
]
