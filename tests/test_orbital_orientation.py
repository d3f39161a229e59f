import numpy as np
import pytest
from scipy.spatial.transform import Rotation

from vsepr.core.domain.errors import UnsupportedHybridizationError
from vsepr.core.domain.implementations.orbital_orientation import (
    TETRAHEDRAL_ANGLE,
    orbital_orientations,
)
from vsepr.core.domain.models.atom import Atom, Hybridization
from vsepr.core.domain.models.bonded_atom import BondedAtom, OrbitalType

from conftest import assert_rotation_close

X = np.array([1.0, 0.0, 0.0])


def lobe_directions(orbitals):
    return np.array([o.orientation.apply(X) for o in orbitals])


def test_s_is_one_identity_lobe():
    orbitals = orbital_orientations(Hybridization.s)
    assert [o.orbital_type for o in orbitals] == [OrbitalType.s]
    assert_rotation_close(orbitals[0].orientation, Rotation.identity())


def test_sp_lobes_are_opposite():
    orbitals = orbital_orientations(Hybridization.sp)
    assert [o.orbital_type for o in orbitals] == [OrbitalType.sp, OrbitalType.sp]
    directions = lobe_directions(orbitals)
    assert np.allclose(directions, [[1.0, 0.0, 0.0], [-1.0, 0.0, 0.0]])


def test_sp2_lobes_are_planar_and_evenly_spaced():
    orbitals = orbital_orientations(Hybridization.sp2)
    assert len(orbitals) == 3
    directions = lobe_directions(orbitals)
    assert np.allclose(directions[:, 2], 0.0)
    assert np.allclose(directions.sum(axis=0), 0.0)
    assert np.isclose(np.dot(directions[0], directions[1]), -0.5)


def test_sp3_lobes_form_tetrahedron():
    orbitals = orbital_orientations(Hybridization.sp3)
    assert [o.orbital_type for o in orbitals] == [OrbitalType.sp] * 4
    directions = lobe_directions(orbitals)
    assert np.allclose(directions.sum(axis=0), 0.0)
    for i in range(4):
        for j in range(i + 1, 4):
            assert np.isclose(np.dot(directions[i], directions[j]), -1.0 / 3.0)


def test_sp3_rotation_axes():
    orbitals = orbital_orientations(Hybridization.sp3)
    expected_axes = [
        (0.0, 0.0, -1.0),
        (0.0, -np.sqrt(3.0) / 2.0, 0.5),
        (0.0, np.sqrt(3.0) / 2.0, 0.5),
    ]
    for orbital, axis in zip(orbitals[1:], expected_axes):
        expected = Rotation.from_rotvec(TETRAHEDRAL_ANGLE * np.array(axis))
        assert_rotation_close(orbital.orientation, expected)


def test_p_lobes_alternate_axes():
    orbitals = orbital_orientations(Hybridization.sp, p_orbital_count=3)
    p_lobes = orbitals[2:]
    assert [o.orbital_type for o in p_lobes] == [OrbitalType.p] * 3
    assert np.allclose(p_lobes[0].orientation.as_rotvec(), [0.0, np.pi / 2.0, 0.0])
    assert np.allclose(p_lobes[1].orientation.as_rotvec(), [0.0, 0.0, np.pi / 2.0])
    assert np.allclose(p_lobes[2].orientation.as_rotvec(), [0.0, np.pi / 2.0, 0.0])


def test_p_lobes_follow_hybrid_lobes():
    orbitals = orbital_orientations(Hybridization.sp2, p_orbital_count=1)
    assert [o.orbital_type for o in orbitals] == [OrbitalType.sp] * 3 + [OrbitalType.p]


@pytest.mark.parametrize(
    "hybridization",
    [
        Hybridization.sp3d,
        Hybridization.sp3d2,
        Hybridization.sp3d3,
        Hybridization.sp3d4,
        Hybridization.sp3d5,
    ],
)
def test_expanded_octet_hybridizations_unsupported(hybridization):
    with pytest.raises(UnsupportedHybridizationError) as excinfo:
        orbital_orientations(hybridization)
    assert excinfo.value.hybridization is hybridization


def test_bonded_atom_expands_to_orbitals():
    atom = Atom(0, "C", 6, hybridization=Hybridization.sp2, p_orbital_count=1)
    orbitals = BondedAtom(0, atom).to_oriented_orbitals()
    assert len(orbitals) == 4
    assert orbitals[-1].orbital_type is OrbitalType.p
