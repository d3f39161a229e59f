# src/vsepr/infrastructure/adapters/element_table.py
"""Adapter mapping element symbols to atomic numbers."""

from typing import Dict, Iterator

import pandas as pd
from rdkit import Chem

# highest atomic number RDKit's periodic table knows about
MAX_ATOMIC_NUMBER = 118


class ElementTable:
    """Lookup of proton counts by chemical element symbol."""

    def __init__(self, proton_counts: Dict[str, int]):
        """
        Initialize table.

        Args:
            proton_counts: Mapping of element symbol to atomic number
        """
        self._proton_counts = {symbol.strip(): int(z) for symbol, z in proton_counts.items()}

    @classmethod
    def from_csv(cls, csv_path: str) -> "ElementTable":
        """
        Read a periodic table CSV.

        The first column holds the atomic number and the second the element
        symbol; the first line is a header.

        Args:
            csv_path: Path to the CSV file

        Returns:
            ElementTable with one entry per row
        """
        df = pd.read_csv(csv_path, skipinitialspace=True)
        if df.shape[1] < 2:
            raise ValueError(f"Element table {csv_path} needs at least two columns")
        numbers = df.iloc[:, 0]
        symbols = df.iloc[:, 1].astype(str).str.replace(" ", "", regex=False)
        return cls(dict(zip(symbols, numbers.astype(int))))

    @classmethod
    def from_rdkit(cls) -> "ElementTable":
        """Build the table from RDKit's periodic table."""
        table = Chem.GetPeriodicTable()
        return cls(
            {
                table.GetElementSymbol(z): z
                for z in range(1, MAX_ATOMIC_NUMBER + 1)
            }
        )

    def proton_count(self, symbol: str) -> int:
        """
        Atomic number of an element.

        Raises:
            KeyError: If the symbol is not in the table
        """
        key = symbol.replace(" ", "")
        if key not in self._proton_counts:
            raise KeyError(f"Unknown element symbol: {symbol!r}")
        return self._proton_counts[key]

    def __contains__(self, symbol: str) -> bool:
        return symbol.replace(" ", "") in self._proton_counts

    def __len__(self) -> int:
        return len(self._proton_counts)

    def __iter__(self) -> Iterator[str]:
        return iter(self._proton_counts)
