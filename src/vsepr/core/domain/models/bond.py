#!/usr/bin/env python3
# src/vsepr/core/domain/models/bond.py

"""
Domain model representing a chemical bond between atoms.
"""

from dataclasses import dataclass
from enum import Enum


class BondType(Enum):
    """Enumeration of possible bond types."""

    SIGMA = "SIGMA"
    PI = "PI"

    @classmethod
    def from_label(cls, label: str) -> "BondType":
        """Parse a bond type label, raising ValueError when unknown."""
        try:
            return cls(label.strip().upper())
        except ValueError:
            raise ValueError(f"Unknown bond type label: {label!r}") from None


@dataclass(frozen=True)
class Bond:
    """One adjacency entry: the bonded atom's handle and the bond type."""

    target: int
    bond_type: BondType = BondType.SIGMA
