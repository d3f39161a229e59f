#!/usr/bin/env python3
# src/vsepr/core/domain/models/atom.py

"""
Domain model representing an atom in a molecular structure.
"""

from dataclasses import dataclass
from enum import Enum


class Hybridization(Enum):
    """Mixing pattern of an atom's valence orbitals."""

    s = "S"
    sp = "SP"
    sp2 = "SP2"
    sp3 = "SP3"
    sp3d = "SP3D"
    sp3d2 = "SP3D2"
    sp3d3 = "SP3D3"
    sp3d4 = "SP3D4"
    sp3d5 = "SP3D5"

    @classmethod
    def from_label(cls, label: str) -> "Hybridization":
        """
        Parse a hybridization label such as ``"SP3"``.

        Args:
            label: Label as written by the structure solver (case-insensitive)

        Returns:
            Matching Hybridization member

        Raises:
            ValueError: If the label names no hybridization
        """
        try:
            return cls(label.strip().upper())
        except ValueError:
            raise ValueError(f"Unknown hybridization label: {label!r}") from None


@dataclass(frozen=True)
class Atom:
    """Represents an atom in a molecular structure.

    An atom carries no rotation of its own: its hybridization fixes the
    layout of its orbitals, and placement assigns the world rotation.
    """

    atom_id: int
    element: str
    proton_count: int
    lone_electron_count: int = 0
    hybridization: Hybridization = Hybridization.s
    p_orbital_count: int = 0

    @property
    def is_hybridized(self) -> bool:
        return self.hybridization is not Hybridization.s

    @property
    def lone_pair_count(self) -> int:
        return self.lone_electron_count // 2
