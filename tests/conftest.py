import numpy as np
import pytest

from vsepr.core.domain.models.atom import Atom, Hybridization
from vsepr.core.domain.models.bond import BondType
from vsepr.core.domain.models.molecule import Molecule


def make_star(center, neighbours, bond_types=None, name=""):
    """Molecule with ``center`` first and every neighbour bonded to it both ways."""
    atoms = [center] + list(neighbours)
    bond_types = bond_types or [BondType.SIGMA] * len(neighbours)
    bonds_with = [[(n.atom_id, t) for n, t in zip(neighbours, bond_types)]]
    bonds_with += [[(center.atom_id, t)] for t in bond_types]
    return Molecule(atoms, bonds_with, name=name)


def assert_rotation_close(actual, expected):
    assert np.allclose(actual.as_matrix(), expected.as_matrix(), atol=1e-9)


def hydrogen(atom_id):
    return Atom(atom_id=atom_id, element="H", proton_count=1)


@pytest.fixture
def methane():
    carbon = Atom(0, "C", 6, lone_electron_count=0, hybridization=Hybridization.sp3)
    return make_star(carbon, [hydrogen(i) for i in range(1, 5)], name="CH4")


@pytest.fixture
def ammonia():
    nitrogen = Atom(0, "N", 7, lone_electron_count=2, hybridization=Hybridization.sp3)
    return make_star(nitrogen, [hydrogen(i) for i in range(1, 4)], name="NH3")


@pytest.fixture
def water():
    oxygen = Atom(0, "O", 8, lone_electron_count=4, hybridization=Hybridization.sp3)
    return make_star(oxygen, [hydrogen(1), hydrogen(2)], name="H2O")


@pytest.fixture
def carbon_dioxide():
    carbon = Atom(0, "C", 6, hybridization=Hybridization.sp, p_orbital_count=2)
    oxygens = [
        Atom(i, "O", 8, lone_electron_count=4, hybridization=Hybridization.sp2, p_orbital_count=1)
        for i in (1, 2)
    ]
    atoms = [carbon] + oxygens
    bonds_with = [
        [(1, BondType.SIGMA), (1, BondType.PI), (2, BondType.SIGMA), (2, BondType.PI)],
        [(0, BondType.SIGMA), (0, BondType.PI)],
        [(0, BondType.SIGMA), (0, BondType.PI)],
    ]
    return Molecule(atoms, bonds_with, name="CO2")


@pytest.fixture
def boron_trifluoride():
    boron = Atom(0, "B", 5, hybridization=Hybridization.sp2, p_orbital_count=1)
    fluorines = [
        Atom(i, "F", 9, lone_electron_count=6, hybridization=Hybridization.sp3)
        for i in range(1, 4)
    ]
    return make_star(boron, fluorines, name="BF3")


@pytest.fixture
def hydrogen_cyanide_fragment():
    """Diatomic: an sp nitrogen bonded to an s hydrogen."""
    nitrogen = Atom(0, "N", 7, hybridization=Hybridization.sp)
    return make_star(nitrogen, [hydrogen(1)], name="NH")


@pytest.fixture
def dinitrogen():
    first = Atom(0, "N", 7, lone_electron_count=2, hybridization=Hybridization.sp, p_orbital_count=2)
    second = Atom(1, "N", 7, lone_electron_count=2, hybridization=Hybridization.sp, p_orbital_count=2)
    bonds_with = [
        [(1, BondType.SIGMA), (1, BondType.PI), (1, BondType.PI)],
        [(0, BondType.SIGMA), (0, BondType.PI), (0, BondType.PI)],
    ]
    return Molecule([first, second], bonds_with, name="N2")
