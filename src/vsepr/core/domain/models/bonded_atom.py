#!/usr/bin/env python3
# src/vsepr/core/domain/models/bonded_atom.py

"""
Domain models for placed atoms and their oriented orbital lobes.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List

import numpy as np
from scipy.spatial.transform import Rotation

from .atom import Atom


class OrbitalType(Enum):
    """Kind of orbital lobe mesh used to draw an orbital."""

    s = "s"
    sp = "sp"
    p = "p"


@dataclass(frozen=True)
class OrientedOrbital:
    """One lobe of an atom, oriented relative to the atom's own rotation."""

    orbital_type: OrbitalType
    orientation: Rotation


@dataclass(frozen=True)
class BondedAtom:
    """An atom with the world position and rotation given by placement."""

    handle: int
    atom: Atom
    position: np.ndarray = field(default_factory=lambda: np.zeros(3), compare=False)
    rotation: Rotation = field(default_factory=Rotation.identity, compare=False)

    def __eq__(self, other: object) -> bool:
        """Same atom placed at the same pose, up to floating point noise."""
        if not isinstance(other, BondedAtom):
            return NotImplemented
        return (
            self.handle == other.handle
            and self.atom == other.atom
            and np.allclose(self.position, other.position)
            and np.allclose(self.rotation.as_matrix(), other.rotation.as_matrix())
        )

    # pose is compared approximately, so only the identity takes part in the hash
    def __hash__(self) -> int:
        return hash((self.handle, self.atom))

    def to_oriented_orbitals(self) -> List[OrientedOrbital]:
        """
        Expand the atom into its orbital lobes.

        Returns:
            Lobes in generation order, each oriented relative to ``rotation``

        Raises:
            UnsupportedHybridizationError: If the atom's hybridization has no
                lobe layout
        """
        from ..implementations.orbital_orientation import orbital_orientations

        return orbital_orientations(self.atom.hybridization, self.atom.p_orbital_count)

    def with_offset(self, dx: float) -> "BondedAtom":
        """Return a copy translated by ``dx`` along x."""
        return replace(self, position=self.position + np.array([dx, 0.0, 0.0]))
