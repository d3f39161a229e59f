"""Configuration for atom placement and lobe instancing."""

from dataclasses import dataclass, fields


@dataclass(frozen=True)
class PlacementConfig:
    """Distances and scales used to lay out atoms and their orbital lobes.

    Attributes:
        s_orbital_shift: Shift per proton for unhybridized (s) atoms
        sp_orbital_shift: Distance from the central atom for hybridized atoms,
            chosen so that bonded lobes overlap
        s_orbital_scale: Scale of the s lobe mesh
        sp_orbital_scale: Scale of the sp lobe mesh
        p_orbital_scale: Scale of the p lobe mesh
        centralize: Place a diatomic molecule so its midpoint is at the origin
    """

    s_orbital_shift: float = 2.0
    sp_orbital_shift: float = 3.0
    s_orbital_scale: float = 0.25
    sp_orbital_scale: float = 1.0
    p_orbital_scale: float = 1.0
    centralize: bool = False

    def __post_init__(self):
        for f in fields(self):
            if f.name == "centralize":
                continue
            value = getattr(self, f.name)
            if value <= 0:
                raise ValueError(f"{f.name} must be positive, got {value}")
