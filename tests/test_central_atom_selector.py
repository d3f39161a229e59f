import pytest

from vsepr.core.domain.errors import AmbiguousCentralAtomError, EmptyMoleculeError
from vsepr.core.domain.implementations.central_atom_selector import select_central_atom
from vsepr.core.domain.models.atom import Atom, Hybridization
from vsepr.core.domain.models.bond import BondType
from vsepr.core.domain.models.molecule import Molecule

from conftest import hydrogen, make_star


def test_empty_molecule():
    with pytest.raises(EmptyMoleculeError):
        select_central_atom(Molecule([]))


def test_single_atom_is_central():
    assert select_central_atom(Molecule([Atom(3, "He", 2)])) == 0


class TestDiatomic:
    def test_heavier_atom_is_central(self, hydrogen_cyanide_fragment):
        assert select_central_atom(hydrogen_cyanide_fragment) == 0

    def test_order_does_not_change_choice(self):
        nitrogen = Atom(0, "N", 7, hybridization=Hybridization.sp)
        forward = make_star(nitrogen, [hydrogen(1)])
        backward = Molecule([hydrogen(1), nitrogen], [[(0, BondType.SIGMA)], [(1, BondType.SIGMA)]])

        assert forward.atom(select_central_atom(forward)).element == "N"
        assert backward.atom(select_central_atom(backward)).element == "N"

    def test_equal_proton_counts_pick_first(self, dinitrogen):
        assert select_central_atom(dinitrogen) == 0


class TestPolyatomic:
    def test_hub_atom_is_central(self, methane):
        assert select_central_atom(methane) == 0

    def test_hub_need_not_be_first(self):
        oxygen = Atom(5, "O", 8, lone_electron_count=4, hybridization=Hybridization.sp3)
        atoms = [hydrogen(1), oxygen, hydrogen(2)]
        bonds_with = [[(5, BondType.SIGMA)], [(1, BondType.SIGMA), (2, BondType.SIGMA)], [(5, BondType.SIGMA)]]
        assert select_central_atom(Molecule(atoms, bonds_with)) == 1

    def test_ties_go_to_first_in_order(self):
        # chain A-B-C-D: B and C are each bonded to by two atoms
        atoms = [Atom(i, "C", 6) for i in range(4)]
        bonds_with = [
            [(1, BondType.SIGMA)],
            [(0, BondType.SIGMA), (2, BondType.SIGMA)],
            [(1, BondType.SIGMA), (3, BondType.SIGMA)],
            [(2, BondType.SIGMA)],
        ]
        assert select_central_atom(Molecule(atoms, bonds_with)) == 1

    def test_multiple_bonds_count_once(self, carbon_dioxide):
        assert select_central_atom(carbon_dioxide) == 0

    def test_unbonded_atoms_are_ambiguous(self):
        molecule = Molecule([hydrogen(0), hydrogen(1), hydrogen(2)])
        with pytest.raises(AmbiguousCentralAtomError):
            select_central_atom(molecule)
