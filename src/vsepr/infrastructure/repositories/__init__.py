"""Repository implementations."""

from .structure_repository import StructureRepository

__all__ = ["StructureRepository"]
