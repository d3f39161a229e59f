import numpy as np
import pytest

from vsepr.core.config import PlacementConfig
from vsepr.core.domain.errors import UnsupportedHybridizationError
from vsepr.core.domain.models.atom import Atom, Hybridization
from vsepr.core.domain.models.bonded_atom import BondedAtom, OrbitalType
from vsepr.core.domain.models.molecule import Molecule
from vsepr.core.services.geometry_service import compute_atom_locs_rots
from vsepr.core.services.instance_service import (
    NUCLEUS_COLOR,
    InstanceBatches,
    InstanceService,
)

from conftest import hydrogen


@pytest.fixture
def service():
    return InstanceService(PlacementConfig())


def test_single_s_atom(service):
    batches = service.build_instances([BondedAtom(0, hydrogen(0))])
    assert batches.count(OrbitalType.s) == 2
    assert batches.non_empty() == [OrbitalType.s]

    nucleus, lobe = batches.matrices(OrbitalType.s)
    assert np.allclose(nucleus, np.diag([0.25 / 1.5] * 3 + [1.0]))
    assert np.allclose(lobe, np.diag([0.25] * 3 + [1.0]))
    assert np.allclose(batches.colors(OrbitalType.s)[0], NUCLEUS_COLOR)


def test_methane_batches(service, methane):
    batches = service.build_instances(compute_atom_locs_rots(methane))
    # five nuclei plus four hydrogen s lobes
    assert batches.count(OrbitalType.s) == 9
    assert batches.count(OrbitalType.sp) == 4
    assert batches.matrices(OrbitalType.sp).shape == (4, 4, 4)
    assert batches.matrices(OrbitalType.p).shape == (0, 4, 4)
    assert batches.colors(OrbitalType.p).shape == (0, 4)
    assert batches.non_empty() == [OrbitalType.s, OrbitalType.sp]

    nuclei = batches.colors(OrbitalType.s)[:5]
    assert np.allclose(nuclei, NUCLEUS_COLOR)


def test_lobes_inherit_atom_translation(service, methane):
    placed = compute_atom_locs_rots(methane)
    batches = service.build_instances(placed)
    lobe_translations = batches.matrices(OrbitalType.s)[5:, :3, 3]
    assert np.allclose(lobe_translations, [b.position for b in placed[1:]])


def test_lobe_rotation_combines_atom_and_orbital(service):
    atom = Atom(0, "C", 6, hybridization=Hybridization.sp, p_orbital_count=1)
    placed = compute_atom_locs_rots(Molecule([atom]))
    batches = service.build_instances(placed)
    sp_matrices = batches.matrices(OrbitalType.sp)
    # second sp lobe is a half turn about z
    assert np.allclose(sp_matrices[1][:3, :3] @ [1.0, 0.0, 0.0], [-1.0, 0.0, 0.0])
    p_matrix = batches.matrices(OrbitalType.p)[0]
    assert np.allclose(np.linalg.det(p_matrix[:3, :3]), 1.0)


def test_scale_for(service):
    config = PlacementConfig(s_orbital_scale=0.5, sp_orbital_scale=2.0, p_orbital_scale=3.0)
    scaled = InstanceService(config)
    assert scaled.scale_for(OrbitalType.s) == 0.5
    assert scaled.scale_for(OrbitalType.sp) == 2.0
    assert scaled.scale_for(OrbitalType.p) == 3.0


def test_unsupported_hybridization(service):
    atom = Atom(0, "S", 16, hybridization=Hybridization.sp3d2)
    with pytest.raises(UnsupportedHybridizationError):
        service.build_instances([BondedAtom(0, atom)])


def test_empty_batches():
    batches = InstanceBatches()
    assert batches.non_empty() == []
    assert batches.matrices(OrbitalType.sp).shape == (0, 4, 4)


def test_invalid_config():
    with pytest.raises(ValueError, match="sp_orbital_scale"):
        PlacementConfig(sp_orbital_scale=0.0)
