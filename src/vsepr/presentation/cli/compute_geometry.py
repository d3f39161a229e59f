# src/vsepr/presentation/cli/compute_geometry.py
"""Command-line interface for molecular geometry computation."""

import argparse
import json
import logging
import os
from typing import Any, Dict, List, Optional

from tqdm import tqdm

from ...core.config import PlacementConfig
from ...core.domain.errors import GeometryError
from ...core.domain.models.bonded_atom import BondedAtom
from ...core.services.geometry_service import GeometryService
from ...infrastructure.adapters.element_table import ElementTable
from ...infrastructure.io.structure_reader import StructureFormatError, StructureReader


def setup_logging(verbose: bool = False) -> None:
    """Set up logging configuration."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s - %(levelname)s - %(message)s")


def setup_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Classify VSEPR geometry and place atoms of molecules"
    )
    parser.add_argument("structures", nargs="+", help="Structure description JSON files")
    parser.add_argument(
        "--elements",
        help="CSV of atomic numbers and element symbols (default: RDKit periodic table)",
    )
    parser.add_argument(
        "--centralize",
        action="store_true",
        help="Place diatomic molecules with the bond midpoint at the origin",
    )
    parser.add_argument(
        "--s-orbital-shift",
        type=float,
        default=PlacementConfig.s_orbital_shift,
        help="Shift per proton of unhybridized atoms",
    )
    parser.add_argument(
        "--sp-orbital-shift",
        type=float,
        default=PlacementConfig.sp_orbital_shift,
        help="Distance of hybridized atoms from the central atom",
    )
    parser.add_argument("--output", help="Write a JSON summary to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    return parser


def summarize_atom(bonded: BondedAtom) -> Dict[str, Any]:
    """JSON-ready description of one placed atom."""
    return {
        "id": bonded.atom.atom_id,
        "element": bonded.atom.element,
        "position": [float(v) for v in bonded.position],
        "rotation": [float(v) for v in bonded.rotation.as_quat()],
        "orbitals": [o.orbital_type.value for o in bonded.to_oriented_orbitals()],
    }


def process_structure(
    path: str, reader: StructureReader, service: GeometryService
) -> Dict[str, Any]:
    """
    Classify and lay out a single structure file.

    Returns:
        Summary dictionary with the geometry and placed atoms

    Raises:
        StructureFormatError: If the file cannot be read
        GeometryError: If the molecule is unsupported
    """
    molecule = reader.read(path)
    classification = service.classify(molecule)
    bonded_atoms = service.compute_atom_locs_rots(molecule)
    return {
        "file": path,
        "name": molecule.name,
        "geometry": classification.geometry.name,
        "central_atom": molecule.atom(classification.central_handle).atom_id,
        "steric_number": classification.steric_number,
        "atoms": [summarize_atom(b) for b in bonded_atoms],
    }


def format_summary(summary: Dict[str, Any]) -> str:
    lines = [f"{summary['name'] or summary['file']}: {summary['geometry']}"]
    for atom in summary["atoms"]:
        x, y, z = atom["position"]
        qx, qy, qz, qw = atom["rotation"]
        lines.append(
            f"  {atom['element']:>2} #{atom['id']:<3} "
            f"pos=({x:7.3f}, {y:7.3f}, {z:7.3f}) "
            f"rot=({qx:6.3f}, {qy:6.3f}, {qz:6.3f}, {qw:6.3f})"
        )
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the geometry CLI."""
    parser = setup_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        config = PlacementConfig(
            s_orbital_shift=args.s_orbital_shift,
            sp_orbital_shift=args.sp_orbital_shift,
            centralize=args.centralize,
        )
    except ValueError as e:
        parser.error(str(e))

    element_table = (
        ElementTable.from_csv(args.elements) if args.elements else ElementTable.from_rdkit()
    )
    reader = StructureReader(element_table)
    service = GeometryService(config)

    summaries = []
    failures = 0
    for path in tqdm(args.structures, desc="Molecules", disable=len(args.structures) < 2):
        try:
            summary = process_structure(path, reader, service)
        except (StructureFormatError, GeometryError, OSError) as e:
            logger.error(f"{path}: {e}")
            failures += 1
            continue
        summaries.append(summary)
        print(format_summary(summary))

    if args.output:
        out_dir = os.path.dirname(args.output)
        if out_dir:
            os.makedirs(out_dir, exist_ok=True)
        with open(args.output, "w") as f:
            json.dump(summaries, f, indent=2)
        logger.info(f"Wrote {len(summaries)} summaries to {args.output}")

    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
