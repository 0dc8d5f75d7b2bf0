"""File and directory management utilities."""

import logging
from pathlib import Path
from typing import Dict, Union

from ..core.data_models import Fragment, Residue, Structure
from .structure_assembler import parse_pdb_content

logger = logging.getLogger(__name__)

PDB_SUFFIXES = (".pdb", ".ent")


def read_pdb_file(path: Union[str, Path]) -> str:
    """
    Read raw PDB text from disk.

    Args:
        path: Path to a .pdb/.ent file

    Returns:
        File contents

    Raises:
        FileNotFoundError: If the file does not exist
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"PDB file not found: {path}")
    if path.suffix.lower() not in PDB_SUFFIXES:
        logger.warning(f"Unexpected extension for PDB file: {path.name}")
    return path.read_text(errors="replace")


def load_structure(path: Union[str, Path]) -> Structure:
    """Read and parse a PDB file."""
    return parse_pdb_content(read_pdb_file(path))


class FileHandler:
    """Handles output files for pocket analysis."""

    def __init__(self, base_dir: Path, experiment_name: str):
        """
        Initialize file handler.

        Args:
            base_dir: Base output directory
            experiment_name: Name of the experiment
        """
        self.base_dir = Path(base_dir)
        self.experiment_dir = self.base_dir / experiment_name
        self.dirs: Dict[str, Path] = {}

        self._create_directory_structure()

    def _create_directory_structure(self) -> None:
        """Create the standard directory structure."""
        self.dirs["fragments"] = self.experiment_dir / "01_fragments"
        self.dirs["fragments_complex"] = self.dirs["fragments"] / "complex"
        self.dirs["fragments_ligand"] = self.dirs["fragments"] / "ligand"
        self.dirs["fragments_pocket"] = self.dirs["fragments"] / "pocket"

        for key in ("fragments_complex", "fragments_ligand", "fragments_pocket"):
            self.dirs[key].mkdir(parents=True, exist_ok=True)

        logger.info(f"Created directory structure at: {self.experiment_dir}")

    def get_fragment_filename(self, ligand: Residue) -> str:
        """
        Generate filename for a ligand's fragment.

        Args:
            ligand: Ligand residue

        Returns:
            Filename string, e.g. ``ATP_A100.xyz``
        """
        chain = ligand.chain_id.strip() or "_"
        return f"{ligand.name}_{chain}{ligand.seq_number}.xyz"

    def save_fragment(self, fragment: Fragment, ligand: Residue) -> Dict[str, Path]:
        """
        Write the fragment and its ligand/pocket parts as XYZ files.

        Args:
            fragment: Extracted fragment
            ligand: Ligand the fragment was built around

        Returns:
            Paths keyed by "complex", "ligand" and "pocket"
        """
        filename = self.get_fragment_filename(ligand)
        label = filename[:-len(".xyz")]
        geometries = {
            "complex": fragment.to_geometry(f"{label} fragment ({fragment.status.value})"),
            "ligand": fragment.ligand_geometry(f"{label} ligand"),
            "pocket": fragment.pocket_geometry(f"{label} pocket"),
        }

        paths = {}
        for part, geometry in geometries.items():
            path = self.dirs[f"fragments_{part}"] / filename
            geometry.save_xyz(path)
            paths[part] = path

        logger.info(f"Saved {fragment.n_atoms}-atom fragment for {label}")
        return paths
