"""
Placement of atoms around the central atom for a classified geometry.

The central atom sits at the origin with identity rotation. Each other atom
is moved out along a direction fixed by the geometry and turned so that one
of its own lobes points back toward the central atom.
"""

import logging
from typing import Dict, List, Optional, Sequence

import numpy as np
from scipy.spatial.transform import Rotation

from ...config import PlacementConfig
from ..errors import EmptyMoleculeError, NoNonCentralAtomFoundError, UnsupportedGeometryError
from ..interfaces.placement_strategy import PlacementStrategy
from ..models.atom import Atom
from ..models.bonded_atom import BondedAtom, OrbitalType
from ..models.geometry import Geometry, GeometryClassification
from ..models.molecule import Molecule
from .orbital_orientation import (
    TETRAHEDRAL_ANGLE,
    TETRAHEDRAL_AXES,
    X_AXIS,
    Z_AXIS,
    angle_axis,
    orbital_orientations,
)

logger = logging.getLogger(__name__)

HALF_TURN_Z = angle_axis(np.pi, Z_AXIS)


def contributes_hybrid_lobes(atom: Atom) -> bool:
    """Whether the atom has sp-type lobes (raises for unsupported hybridizations)."""
    return any(
        orbital.orbital_type is OrbitalType.sp
        for orbital in orbital_orientations(atom.hybridization, atom.p_orbital_count)
    )


def shift_for(atom: Atom, config: PlacementConfig) -> float:
    """Distance of a placed atom from the central atom."""
    if contributes_hybrid_lobes(atom):
        return config.sp_orbital_shift
    return config.s_orbital_shift


def _radial(rotation: Rotation, shift: float) -> np.ndarray:
    return rotation.apply(np.array([-shift, 0.0, 0.0]))


class DiatomicPlacement(PlacementStrategy):
    """Second atom of a two-atom molecule, on the -x axis."""

    def place(
        self, others: Sequence[BondedAtom], config: PlacementConfig
    ) -> List[BondedAtom]:
        second = others[0]
        atom = second.atom
        if contributes_hybrid_lobes(atom):
            # one of its lobes must point back along +x
            position = np.array([-config.sp_orbital_shift, 0.0, 0.0])
            rotation = HALF_TURN_Z
        else:
            # heavier s atoms sit further out
            position = np.array([-config.s_orbital_shift * atom.proton_count, 0.0, 0.0])
            rotation = Rotation.identity()
        return [BondedAtom(second.handle, atom, position, rotation)]


class LinearPlacement(PlacementStrategy):
    """Atoms alternating along -x and +x."""

    def place(
        self, others: Sequence[BondedAtom], config: PlacementConfig
    ) -> List[BondedAtom]:
        placed = []
        for index, other in enumerate(others):
            shift = shift_for(other.atom, config)
            position = np.array([-((-1.0) ** index) * shift, 0.0, 0.0])
            # extra turn about x lines up the p lobes of neighbouring atoms
            rotation = angle_axis((index + 1) * np.pi, Z_AXIS) * angle_axis(
                (index - 1) * np.pi / 2.0, X_AXIS
            )
            placed.append(BondedAtom(other.handle, other.atom, position, rotation))
        return placed


class RadialPlacement(PlacementStrategy):
    """Atoms placed along rotated -x directions, each turned to face the center."""

    def __init__(self, directions: Sequence[Rotation]):
        self._directions = list(directions)

    def _direction(self, index: int) -> Rotation:
        if index < len(self._directions):
            return self._directions[index]
        return Rotation.identity()

    def place(
        self, others: Sequence[BondedAtom], config: PlacementConfig
    ) -> List[BondedAtom]:
        placed = []
        for index, other in enumerate(others):
            direction = self._direction(index)
            position = _radial(direction, shift_for(other.atom, config))
            placed.append(
                BondedAtom(other.handle, other.atom, position, direction * HALF_TURN_Z)
            )
        return placed


TRIGONAL_PLACEMENT = RadialPlacement(
    [angle_axis(2.0 * np.pi * k / 3.0, Z_AXIS) for k in range(3)]
)

TETRAHEDRAL_PLACEMENT = RadialPlacement(
    [Rotation.identity()] + [angle_axis(TETRAHEDRAL_ANGLE, axis) for axis in TETRAHEDRAL_AXES]
)

PLACEMENT_STRATEGIES: Dict[Geometry, PlacementStrategy] = {
    Geometry.Linear2: DiatomicPlacement(),
    Geometry.Linear: LinearPlacement(),
    Geometry.TrigonalPlanar: TRIGONAL_PLACEMENT,
    Geometry.Bent1Lone: TRIGONAL_PLACEMENT,
    Geometry.Tetrahedral: TETRAHEDRAL_PLACEMENT,
    Geometry.TrigonalPyramidal: TETRAHEDRAL_PLACEMENT,
    Geometry.Bent2Lone: TETRAHEDRAL_PLACEMENT,
}


def place_atoms(
    molecule: Molecule,
    classification: GeometryClassification,
    config: Optional[PlacementConfig] = None,
) -> List[BondedAtom]:
    """
    Compute the world position and rotation of every atom.

    Args:
        molecule: Molecule to lay out
        classification: Geometry and central atom of the molecule
        config: Shift distances and recentring option

    Returns:
        The central atom followed by the other atoms in molecule order

    Raises:
        EmptyMoleculeError: If the molecule has no atoms
        UnsupportedGeometryError: If the geometry has no placement
        NoNonCentralAtomFoundError: If the geometry needs other atoms but
            none is distinct from the central atom
        UnsupportedHybridizationError: If a placed atom's lobes are unknown
    """
    if molecule.atom_count == 0:
        raise EmptyMoleculeError("Cannot place the atoms of an empty molecule")
    config = config or PlacementConfig()

    central_handle = classification.central_handle
    central = BondedAtom(central_handle, molecule.atom(central_handle))
    geometry = classification.geometry

    if geometry is Geometry.Single:
        return [central]

    strategy = PLACEMENT_STRATEGIES.get(geometry)
    if strategy is None:
        raise UnsupportedGeometryError(geometry)

    others = [
        BondedAtom(handle, atom)
        for handle, atom in enumerate(molecule.atoms)
        if handle != central_handle
    ]
    if not others:
        raise NoNonCentralAtomFoundError(
            f"Could not find an atom other than the central atom in {molecule!r}"
        )

    placed = strategy.place(others, config)

    if geometry is Geometry.Linear2 and config.centralize:
        # move the midpoint of the bond to the origin
        offset = -placed[0].position[0] / 2.0
        central = central.with_offset(offset)
        placed = [bonded.with_offset(offset) for bonded in placed]

    logger.debug("Placed %d atoms of %r as %s", len(placed) + 1, molecule, geometry.name)
    return [central] + placed
