# src/vsepr/core/services/instance_service.py
"""Service turning placed atoms into per-lobe instance transforms for rendering."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

import numpy as np
from scipy.spatial.transform import Rotation

from ..config import PlacementConfig
from ..domain.models.bonded_atom import BondedAtom, OrbitalType

# RGBA per lobe type; nuclei are drawn as grey s instances
LOBE_COLORS: Dict[OrbitalType, np.ndarray] = {
    OrbitalType.s: np.array([0.3, 0.0, 0.3, 1.0]),
    OrbitalType.sp: np.array([0.0, 0.3, 0.45, 1.0]),
    OrbitalType.p: np.array([0.45, 0.0, 0.2, 1.0]),
}
NUCLEUS_COLOR = np.array([0.5, 0.5, 0.5, 1.0])
NUCLEUS_SCALE_DIVISOR = 1.5


def translation_matrix(position: np.ndarray) -> np.ndarray:
    matrix = np.eye(4)
    matrix[:3, 3] = position
    return matrix


def rotation_matrix(rotation: Rotation) -> np.ndarray:
    matrix = np.eye(4)
    matrix[:3, :3] = rotation.as_matrix()
    return matrix


def scale_matrix(factor: float) -> np.ndarray:
    return np.diag([factor, factor, factor, 1.0])


@dataclass
class InstanceBatches:
    """Model matrices and colours grouped by lobe type."""

    _matrices: Dict[OrbitalType, List[np.ndarray]] = field(
        default_factory=lambda: {t: [] for t in OrbitalType}
    )
    _colors: Dict[OrbitalType, List[np.ndarray]] = field(
        default_factory=lambda: {t: [] for t in OrbitalType}
    )

    def append(self, orbital_type: OrbitalType, matrix: np.ndarray, color: np.ndarray) -> None:
        self._matrices[orbital_type].append(matrix)
        self._colors[orbital_type].append(color)

    def prepend(self, orbital_type: OrbitalType, matrix: np.ndarray, color: np.ndarray) -> None:
        self._matrices[orbital_type].insert(0, matrix)
        self._colors[orbital_type].insert(0, color)

    def matrices(self, orbital_type: OrbitalType) -> np.ndarray:
        """Model matrices of one lobe type as an (N, 4, 4) array."""
        entries = self._matrices[orbital_type]
        if not entries:
            return np.zeros((0, 4, 4))
        return np.stack(entries)

    def colors(self, orbital_type: OrbitalType) -> np.ndarray:
        """Colours of one lobe type as an (N, 4) array."""
        entries = self._colors[orbital_type]
        if not entries:
            return np.zeros((0, 4))
        return np.stack(entries)

    def count(self, orbital_type: OrbitalType) -> int:
        return len(self._matrices[orbital_type])

    def non_empty(self) -> List[OrbitalType]:
        """Lobe types with at least one instance, in enum order."""
        return [t for t in OrbitalType if self._matrices[t]]


class InstanceService:
    """Service building instance transforms from BondedAtom placements."""

    def __init__(self, config: Optional[PlacementConfig] = None):
        """
        Initialize service.

        Args:
            config: Supplies the per-type lobe scales
        """
        self.config = config or PlacementConfig()

    def scale_for(self, orbital_type: OrbitalType) -> float:
        """Mesh scale factor of a lobe type."""
        if orbital_type is OrbitalType.s:
            return self.config.s_orbital_scale
        if orbital_type is OrbitalType.sp:
            return self.config.sp_orbital_scale
        return self.config.p_orbital_scale

    def atom_matrix(self, bonded: BondedAtom) -> np.ndarray:
        """Translation to the atom's position followed by its world rotation."""
        return translation_matrix(bonded.position) @ rotation_matrix(bonded.rotation)

    def build_instances(self, bonded_atoms: Sequence[BondedAtom]) -> InstanceBatches:
        """
        Build one instance per nucleus and per orbital lobe.

        Each nucleus is a small grey sphere inserted at the front of the s
        batch; each lobe combines the atom's transform with the lobe's local
        orientation and its type's scale.

        Args:
            bonded_atoms: Output of ``compute_atom_locs_rots``

        Returns:
            InstanceBatches grouped by lobe type

        Raises:
            UnsupportedHybridizationError: If an atom's lobes cannot be generated
        """
        batches = InstanceBatches()
        for bonded in bonded_atoms:
            atom_matrix = self.atom_matrix(bonded)
            batches.prepend(
                OrbitalType.s,
                atom_matrix @ scale_matrix(self.config.s_orbital_scale / NUCLEUS_SCALE_DIVISOR),
                NUCLEUS_COLOR,
            )

            for orbital in bonded.to_oriented_orbitals():
                matrix = (
                    atom_matrix
                    @ rotation_matrix(orbital.orientation)
                    @ scale_matrix(self.scale_for(orbital.orbital_type))
                )
                batches.append(orbital.orbital_type, matrix, LOBE_COLORS[orbital.orbital_type])

        return batches
