"""Selection of the hub atom of a molecule."""

import logging

from ..errors import AmbiguousCentralAtomError, EmptyMoleculeError
from ..models.molecule import Molecule

logger = logging.getLogger(__name__)


def select_central_atom(molecule: Molecule) -> int:
    """
    Pick the atom that most other atoms bond to.

    Args:
        molecule: Molecule to inspect

    Returns:
        Handle of the central atom

    Raises:
        EmptyMoleculeError: If the molecule has no atoms
        AmbiguousCentralAtomError: If no atom can be singled out
    """
    atom_count = molecule.atom_count
    if atom_count == 0:
        raise EmptyMoleculeError("Cannot select a central atom of an empty molecule")

    if atom_count == 1:
        return 0

    if atom_count == 2:
        # max() keeps the first atom on equal proton counts
        return max(range(atom_count), key=lambda h: molecule.atom(h).proton_count)

    central = None
    max_count = 0
    for handle in range(atom_count):
        count = len(molecule.referencing_atoms(handle))
        # strict comparison: the first maximal atom in order wins ties
        if count > max_count:
            central = handle
            max_count = count

    if central is None:
        raise AmbiguousCentralAtomError(
            f"No atom of {molecule!r} is bonded to by another atom"
        )

    logger.debug(
        "Central atom of %r is %s (handle %d, %d bonded atoms)",
        molecule,
        molecule.atom(central).element,
        central,
        max_count,
    )
    return central
