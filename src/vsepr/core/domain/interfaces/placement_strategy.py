"""Interface for per-geometry atom placement strategies."""

from abc import ABC, abstractmethod
from typing import List, Sequence

from ...config import PlacementConfig
from ..models.bonded_atom import BondedAtom


class PlacementStrategy(ABC):
    """Abstract base class for placing the non-central atoms of a geometry."""

    @abstractmethod
    def place(
        self, others: Sequence[BondedAtom], config: PlacementConfig
    ) -> List[BondedAtom]:
        """
        Position and rotate the non-central atoms around the central atom.

        Args:
            others: Non-central atoms in molecule order, still at the origin
            config: Shift distances and recentring option

        Returns:
            The placed atoms, in the same order
        """
        pass
