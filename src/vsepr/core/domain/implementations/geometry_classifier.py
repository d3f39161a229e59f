"""Classification of a molecule into a named VSEPR geometry."""

import logging
from typing import Dict, Tuple

from ..errors import EmptyMoleculeError, NoGeometryFoundError
from ..models.geometry import Geometry, GeometryClassification
from ..models.molecule import Molecule
from .central_atom_selector import select_central_atom

logger = logging.getLogger(__name__)

# (steric number, lone electrons) -> geometry
GEOMETRY_TABLE: Dict[Tuple[int, int], Geometry] = {
    geometry.value: geometry
    for geometry in Geometry
    if geometry not in (Geometry.Single, Geometry.Linear2)
}


def steric_number(atom_count: int, lone_electron_count: int) -> int:
    """Electron-domain groups around the central atom: neighbours plus lone pairs."""
    return (atom_count - 1) + lone_electron_count // 2


def classify(atom_count: int, lone_electron_count: int) -> Geometry:
    """
    Look up the geometry for a central atom.

    Args:
        atom_count: Number of atoms in the molecule, central atom included
        lone_electron_count: Non-bonding electrons on the central atom

    Returns:
        The matching Geometry

    Raises:
        NoGeometryFoundError: If the pair has no entry in the table
    """
    steric = steric_number(atom_count, lone_electron_count)
    try:
        return GEOMETRY_TABLE[(steric, lone_electron_count)]
    except KeyError:
        raise NoGeometryFoundError(steric, lone_electron_count) from None


def classify_molecule(molecule: Molecule) -> GeometryClassification:
    """
    Select the central atom of a molecule and classify its geometry.

    Monatomic and diatomic molecules bypass the table as ``Single`` and
    ``Linear2``.

    Raises:
        EmptyMoleculeError: If the molecule has no atoms
        AmbiguousCentralAtomError: If no central atom can be selected
        NoGeometryFoundError: If no geometry matches
    """
    atom_count = molecule.atom_count
    if atom_count == 0:
        raise EmptyMoleculeError("Cannot compute the geometry of an empty molecule")

    central = select_central_atom(molecule)
    lone = molecule.atom(central).lone_electron_count

    if atom_count <= 2:
        geometry = Geometry.Single if atom_count == 1 else Geometry.Linear2
        steric = geometry.electron_groups
    else:
        geometry = classify(atom_count, lone)
        steric = steric_number(atom_count, lone)

    logger.debug("Classified %r as %s", molecule, geometry.name)
    return GeometryClassification(
        geometry=geometry,
        central_handle=central,
        steric_number=steric,
        lone_electron_count=lone,
    )
