"""Generation of orbital lobe orientations from an atom's hybridization."""

from typing import List

import numpy as np
from scipy.spatial.transform import Rotation

from ..errors import UnsupportedHybridizationError
from ..models.atom import Hybridization
from ..models.bonded_atom import OrbitalType, OrientedOrbital

# angle between two sp3 lobes
TETRAHEDRAL_ANGLE = float(np.arccos(-1.0 / 3.0))

Z_AXIS = np.array([0.0, 0.0, 1.0])
X_AXIS = np.array([1.0, 0.0, 0.0])

# axes the three non-reference sp3 lobes are tilted about
TETRAHEDRAL_AXES = (
    np.array([0.0, 0.0, -1.0]),
    np.array([0.0, -np.sqrt(3.0) / 2.0, 0.5]),
    np.array([0.0, np.sqrt(3.0) / 2.0, 0.5]),
)

# p lobes alternate between these axes by index parity
P_ORBITAL_AXES = (
    np.array([0.0, 1.0, 0.0]),
    np.array([0.0, 0.0, 1.0]),
)


def angle_axis(angle: float, axis: np.ndarray) -> Rotation:
    """Rotation of ``angle`` radians about ``axis`` (normalized here)."""
    axis = np.asarray(axis, dtype=float)
    return Rotation.from_rotvec(angle * axis / np.linalg.norm(axis))


def hybrid_rotations(hybridization: Hybridization) -> List[Rotation]:
    """
    Local rotations of the hybrid (or s) lobes of one atom.

    Raises:
        UnsupportedHybridizationError: For sp3d and above
    """
    if hybridization is Hybridization.s or hybridization is Hybridization.sp:
        count = 1 if hybridization is Hybridization.s else 2
        return [angle_axis(np.pi * k, Z_AXIS) for k in range(count)]
    if hybridization is Hybridization.sp2:
        return [angle_axis(2.0 * np.pi * k / 3.0, Z_AXIS) for k in range(3)]
    if hybridization is Hybridization.sp3:
        return [Rotation.identity()] + [
            angle_axis(TETRAHEDRAL_ANGLE, axis) for axis in TETRAHEDRAL_AXES
        ]
    raise UnsupportedHybridizationError(hybridization)


def orbital_orientations(
    hybridization: Hybridization, p_orbital_count: int = 0
) -> List[OrientedOrbital]:
    """
    Produce the ordered orbital lobes of an atom.

    Args:
        hybridization: Hybridization of the atom
        p_orbital_count: Unhybridized p orbitals appended after the hybrid lobes

    Returns:
        One OrientedOrbital per lobe: the s lobe or the sp-type hybrid lobes,
        followed by the p lobes

    Raises:
        UnsupportedHybridizationError: If the hybridization has no layout
    """
    lobe_type = OrbitalType.s if hybridization is Hybridization.s else OrbitalType.sp
    orbitals = [
        OrientedOrbital(lobe_type, rotation)
        for rotation in hybrid_rotations(hybridization)
    ]

    for i in range(p_orbital_count):
        orbitals.append(
            OrientedOrbital(OrbitalType.p, angle_axis(np.pi / 2.0, P_ORBITAL_AXES[i % 2]))
        )

    return orbitals
