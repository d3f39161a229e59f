"""Infrastructure implementations of core interfaces and adapters."""

from .adapters.element_table import ElementTable
from .io.structure_reader import StructureFormatError, StructureReader, load_molecule
from .repositories.structure_repository import StructureRepository

__all__ = [
    "ElementTable",
    "StructureFormatError",
    "StructureReader",
    "load_molecule",
    "StructureRepository",
]
