"""Binding pocket detection and characterization around a ligand."""

import logging
from typing import List, Optional, Sequence

import numpy as np

from ..core.config import AnalysisConfig
from ..core.data_models import Atom, BindingSite, Position, Residue, Structure
from .proximity import ProximityIndex

logger = logging.getLogger(__name__)


# Kyte & Doolittle (1982) hydropathy index
KYTE_DOOLITTLE = {
    "ALA": 1.8, "ARG": -4.5, "ASN": -3.5, "ASP": -3.5,
    "CYS": 2.5, "GLN": -3.5, "GLU": -3.5, "GLY": -0.4,
    "HIS": -3.2, "ILE": 4.5, "LEU": 3.8, "LYS": -3.9,
    "MET": 1.9, "PHE": 2.8, "PRO": -1.6, "SER": -0.8,
    "THR": -0.7, "TRP": -0.9, "TYR": -1.3, "VAL": 4.2,
}

# Element proxy for hydrogen-bond donors/acceptors
HBOND_ELEMENTS = ("N", "O")


def is_hydrophobic(residue: Residue) -> bool:
    """Positive Kyte-Doolittle value; unknown residues count as non-hydrophobic."""
    return KYTE_DOOLITTLE.get(residue.name, 0.0) > 0.0


def hydropathy_label(residue: Residue) -> str:
    return "hydrophobic" if is_hydrophobic(residue) else "polar"


def count_hbond_sites(residue: Residue) -> int:
    """Number of N and O atoms in a residue."""
    return sum(1 for a in residue.atoms if a.element in HBOND_ELEMENTS)


def calculate_centroid(atoms: Sequence[Atom]) -> Position:
    """Arithmetic mean position; the origin for an empty atom list."""
    if not atoms:
        return (0.0, 0.0, 0.0)
    n = float(len(atoms))
    return (
        sum(a.x for a in atoms) / n,
        sum(a.y for a in atoms) / n,
        sum(a.z for a in atoms) / n,
    )


def estimate_volume(
    atoms: Sequence[Atom],
    padding: float = 3.0,
    packing_factor: float = 0.52
) -> float:
    """
    Bounding-box volume estimate in Å^3.

    Each axis extent is padded by ``padding`` and the box volume is scaled
    by ``packing_factor``. This is a fixed approximation kept for score
    compatibility, not a molecular volume; it overestimates elongated
    pockets.
    """
    if not atoms:
        return 0.0
    coords = np.array([[a.x, a.y, a.z] for a in atoms], dtype=np.float64)
    extents = coords.max(axis=0) - coords.min(axis=0) + padding
    return float(extents[0] * extents[1] * extents[2] * packing_factor)


class BindingSiteAnalyzer:
    """Identify and characterize the protein pocket around a ligand."""

    def __init__(self, config: Optional[AnalysisConfig] = None):
        """
        Initialize binding site analyzer.

        Args:
            config: Analysis configuration (uses defaults if None)
        """
        self.config = config or AnalysisConfig()

    def find_pocket_residues(
        self,
        structure: Structure,
        ligand: Residue,
        cutoff: Optional[float] = None
    ) -> List[Residue]:
        """
        Protein residues with any atom within ``cutoff`` (inclusive) of the ligand.

        Args:
            structure: Parsed structure
            ligand: Ligand residue
            cutoff: Distance cutoff in Å (config default if None)

        Returns:
            Pocket residues in chain order
        """
        if cutoff is None:
            cutoff = self.config.cutoff
        index = ProximityIndex(ligand.atoms)
        return [
            residue for residue in structure.protein_residues()
            if index.is_near(residue.atoms, cutoff, inclusive=True)
        ]

    def analyze(
        self,
        structure: Structure,
        ligand: Residue,
        cutoff: Optional[float] = None
    ) -> BindingSite:
        """
        Analyze the binding site of one ligand.

        Args:
            structure: Parsed structure
            ligand: Ligand residue
            cutoff: Distance cutoff in Å (config default if None)

        Returns:
            Binding site with pocket residues and derived metrics
        """
        pocket = self.find_pocket_residues(structure, ligand, cutoff)

        pocket_atoms = [a for res in pocket for a in res.atoms]
        volume = estimate_volume(
            list(ligand.atoms) + pocket_atoms,
            padding=self.config.volume_padding,
            packing_factor=self.config.volume_packing_factor,
        )

        if pocket:
            n_hydrophobic = sum(1 for res in pocket if is_hydrophobic(res))
            hydrophobic_fraction = n_hydrophobic / len(pocket)
        else:
            hydrophobic_fraction = 0.0

        site = BindingSite(
            ligand_id=ligand.name,
            pocket_residues=tuple(pocket),
            volume=volume,
            centroid=calculate_centroid(ligand.atoms),
            hydrophobic_fraction=hydrophobic_fraction,
            hydrogen_bond_sites=sum(count_hbond_sites(res) for res in pocket),
        )

        logger.debug(
            f"{ligand.name}{ligand.seq_number}: {len(pocket)} pocket residues, "
            f"volume {volume:.1f} A^3"
        )
        return site

    def analyze_all(self, structure: Structure, cutoff: Optional[float] = None) -> List[BindingSite]:
        """Analyze every ligand in the structure, in ligand order."""
        return [self.analyze(structure, ligand, cutoff) for ligand in structure.ligands]
