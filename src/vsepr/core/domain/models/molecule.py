#!/usr/bin/env python3
# src/vsepr/core/domain/models/molecule.py

"""
Domain model representing a molecule as an atom arena plus bond lists.
"""

from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

import networkx as nx

from .atom import Atom
from .bond import Bond, BondType

BondSpec = Tuple[int, Union[BondType, str]]


class Molecule:
    """Immutable graph representation of a small molecule.

    Atoms live in an ordered arena; the handle of an atom is its index in
    that arena. Bonds and query results refer to atoms by handle.
    """

    def __init__(
        self,
        atoms: Sequence[Atom],
        bonds_with: Optional[Sequence[Iterable[BondSpec]]] = None,
        name: str = "",
    ):
        """
        Initialize a Molecule.

        Args:
            atoms: Atoms in a stable, caller-visible order
            bonds_with: Per atom (same order), the ``(bonded_atom_id, bond_type)``
                pairs of that atom's bonds
            name: Optional display name, e.g. the molecular formula

        Raises:
            ValueError: If atom ids repeat, a bond names an unknown atom id or
                the bond lists are not in lockstep with the atoms
        """
        self._atoms: Tuple[Atom, ...] = tuple(atoms)
        self.name = name

        self._handles: Dict[int, int] = {}
        for handle, atom in enumerate(self._atoms):
            if atom.atom_id in self._handles:
                raise ValueError(f"Duplicate atom id {atom.atom_id} in molecule {name!r}")
            self._handles[atom.atom_id] = handle

        if bonds_with is None:
            bonds_with = [() for _ in self._atoms]
        if len(bonds_with) != len(self._atoms):
            raise ValueError(
                f"Expected {len(self._atoms)} bond lists, got {len(bonds_with)}"
            )

        self._bonds: Tuple[Tuple[Bond, ...], ...] = tuple(
            tuple(self._resolve_bond(self._atoms[i], spec) for spec in entries)
            for i, entries in enumerate(bonds_with)
        )
        self._graph: Optional[nx.DiGraph] = None

    def _resolve_bond(self, owner: Atom, spec: BondSpec) -> Bond:
        atom_id, bond_type = spec
        if atom_id not in self._handles:
            raise ValueError(
                f"Atom {owner.element} (id {owner.atom_id}) bonds with unknown atom id {atom_id}"
            )
        if isinstance(bond_type, str):
            bond_type = BondType.from_label(bond_type)
        return Bond(target=self._handles[atom_id], bond_type=bond_type)

    @property
    def atoms(self) -> Tuple[Atom, ...]:
        return self._atoms

    @property
    def atom_count(self) -> int:
        return len(self._atoms)

    def __len__(self) -> int:
        return len(self._atoms)

    def __iter__(self) -> Iterator[Atom]:
        return iter(self._atoms)

    def __repr__(self) -> str:
        elements = "".join(atom.element for atom in self._atoms)
        return f"Molecule(name={self.name!r}, atoms={elements!r})"

    def atom(self, handle: int) -> Atom:
        """Return the atom stored under ``handle``."""
        return self._atoms[handle]

    def bonds_of(self, handle: int) -> Tuple[Bond, ...]:
        """Return the adjacency list of the atom stored under ``handle``."""
        return self._bonds[handle]

    def handle_of(self, atom_id: int) -> int:
        """Return the handle of the atom with id ``atom_id``.

        Raises:
            KeyError: If no atom carries that id
        """
        return self._handles[atom_id]

    @property
    def graph(self) -> nx.DiGraph:
        """Directed bond graph: an edge ``i -> j`` for each bond entry of atom ``i``.

        Parallel entries (a sigma and a pi bond to the same atom) collapse into
        one edge whose ``bond_types`` attribute lists both. The graph is frozen.
        """
        if self._graph is None:
            self._graph = nx.freeze(self._create_graph())
        return self._graph

    def _create_graph(self) -> nx.DiGraph:
        G = nx.DiGraph()

        for handle, atom in enumerate(self._atoms):
            G.add_node(
                handle,
                atom_id=atom.atom_id,
                element=atom.element,
                proton_count=atom.proton_count,
                hybridization=atom.hybridization,
            )

        for handle, bonds in enumerate(self._bonds):
            for bond in bonds:
                if G.has_edge(handle, bond.target):
                    G.edges[handle, bond.target]["bond_types"].append(bond.bond_type)
                else:
                    G.add_edge(handle, bond.target, bond_types=[bond.bond_type])

        return G

    def referencing_atoms(self, handle: int) -> List[int]:
        """Handles of the other atoms whose bond lists reference ``handle``."""
        return [h for h in self.graph.predecessors(handle) if h != handle]
