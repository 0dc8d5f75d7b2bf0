"""Data models for binding pocket analysis."""

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Dict, Optional, Tuple, Any

import numpy as np


WATER_NAMES = ("HOH", "WAT")

Position = Tuple[float, float, float]


class FragmentStatus(Enum):
    """Advisory status of an extracted fragment."""
    READY = "ready"
    INSUFFICIENT = "insufficient"


class FeatureType(Enum):
    """Pharmacophore feature types."""
    HBOND_DONOR = "hbond_donor"
    HBOND_ACCEPTOR = "hbond_acceptor"
    HYDROPHOBIC = "hydrophobic"
    AROMATIC = "aromatic"
    POSITIVE_CHARGE = "positive_charge"
    NEGATIVE_CHARGE = "negative_charge"


@dataclass(frozen=True)
class Atom:
    """A single ATOM/HETATM record."""
    serial: int
    name: str
    alt_location: Optional[str]
    residue_name: str
    chain_id: str
    residue_seq: int
    x: float
    y: float
    z: float
    occupancy: float = 1.0
    temp_factor: float = 0.0
    element: str = ""
    is_het_atom: bool = False

    @property
    def position(self) -> np.ndarray:
        """Cartesian position in Å."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @property
    def residue_key(self) -> Tuple[str, int, str]:
        """(chain, sequence number, residue name) identity of the owning residue."""
        return (self.chain_id, self.residue_seq, self.residue_name)


@dataclass(frozen=True)
class Residue:
    """A named group of atoms sharing chain, sequence number and name."""
    name: str
    chain_id: str
    seq_number: int
    atoms: Tuple[Atom, ...]
    is_ligand: bool = False

    @property
    def key(self) -> Tuple[str, int, str]:
        return (self.chain_id, self.seq_number, self.name)

    @property
    def is_water(self) -> bool:
        return self.name in WATER_NAMES

    @property
    def coordinates(self) -> np.ndarray:
        """Atom coordinates as an (N, 3) array."""
        if not self.atoms:
            return np.empty((0, 3), dtype=np.float64)
        return np.array([[a.x, a.y, a.z] for a in self.atoms], dtype=np.float64)


@dataclass(frozen=True)
class Chain:
    """A protein chain: non-ligand, non-water residues in first-seen order."""
    id: str
    residues: Tuple[Residue, ...]

    def unique_residue_names(self) -> List[str]:
        """Distinct residue names in first-seen order."""
        return list(dict.fromkeys(r.name for r in self.residues))


@dataclass(frozen=True)
class Structure:
    """Parsed macromolecular structure."""
    header: str = ""
    title: str = ""
    chains: Tuple[Chain, ...] = ()
    ligands: Tuple[Residue, ...] = ()
    waters: Tuple[Atom, ...] = ()

    def protein_residues(self) -> List[Residue]:
        """All chain residues, in chain order."""
        return [res for chain in self.chains for res in chain.residues]

    def find_ligand(self, name: str, chain_id: Optional[str] = None) -> Optional[Residue]:
        """Return the first ligand with the given name (and chain, if given)."""
        for ligand in self.ligands:
            if ligand.name == name and (chain_id is None or ligand.chain_id == chain_id):
                return ligand
        return None

    @property
    def n_atoms(self) -> int:
        n_protein = sum(len(res.atoms) for res in self.protein_residues())
        n_ligand = sum(len(lig.atoms) for lig in self.ligands)
        return n_protein + n_ligand + len(self.waters)


@dataclass(frozen=True)
class BindingSite:
    """Binding pocket around one ligand."""
    ligand_id: str
    pocket_residues: Tuple[Residue, ...]
    volume: float  # Å^3, bounding-box heuristic
    centroid: Position  # ligand atoms only
    hydrophobic_fraction: float
    hydrogen_bond_sites: int


@dataclass(frozen=True)
class DruggabilityAssessment:
    """Component and total druggability scores."""
    volume_score: float
    hydrophobic_score: float
    hbond_score: float
    total_score: float
    rating: str


@dataclass(frozen=True)
class PharmacophoreFeature:
    """Pharmacophore feature in a binding pocket."""
    id: str
    feature_type: FeatureType
    position: Position
    importance: float = 1.0


@dataclass
class Geometry:
    """3D geometry representation."""
    atoms: List[str]
    coordinates: np.ndarray
    title: str = ""
    energy: Optional[float] = None
    properties: Dict[str, Any] = field(default_factory=dict)

    def to_xyz_string(self) -> str:
        """Convert to XYZ format string."""
        lines = [f"{len(self.atoms)}", self.title]
        for atom, coord in zip(self.atoms, self.coordinates):
            lines.append(f"{atom:2s} {coord[0]:12.6f} {coord[1]:12.6f} {coord[2]:12.6f}")
        return "\n".join(lines)

    def save_xyz(self, filepath: Path) -> None:
        """Save geometry to XYZ file."""
        filepath.parent.mkdir(parents=True, exist_ok=True)
        filepath.write_text(self.to_xyz_string())


@dataclass(frozen=True)
class Fragment:
    """
    Size-bounded atom list handed to an external energy backend.

    Entries are (element, (x, y, z)) pairs. The first ``n_ligand_atoms``
    entries come from the ligand, the rest are pocket backbone atoms.
    """
    atoms: Tuple[Tuple[str, Position], ...]
    status: FragmentStatus
    n_ligand_atoms: int = 0

    @property
    def n_atoms(self) -> int:
        return len(self.atoms)

    @property
    def is_ready(self) -> bool:
        return self.status is FragmentStatus.READY

    def element_counts(self) -> List[Tuple[str, int]]:
        """Atom counts per element, sorted by element symbol."""
        return sorted(Counter(element for element, _ in self.atoms).items())

    def to_geometry(self, title: str = "") -> Geometry:
        return self._geometry(self.atoms, title)

    def ligand_geometry(self, title: str = "") -> Geometry:
        return self._geometry(self.atoms[:self.n_ligand_atoms], title)

    def pocket_geometry(self, title: str = "") -> Geometry:
        return self._geometry(self.atoms[self.n_ligand_atoms:], title)

    @staticmethod
    def _geometry(entries, title: str) -> Geometry:
        coords = np.array([pos for _, pos in entries], dtype=np.float64).reshape(-1, 3)
        return Geometry(
            atoms=[element for element, _ in entries],
            coordinates=coords,
            title=title,
        )


@dataclass
class InteractionEnergyResult:
    """Fragment interaction energy from externally computed energies."""
    interaction_energy: float  # in kcal/mol
    interaction_energy_hartree: float
    complex_energy: float
    pocket_energy: float
    ligand_energy: float
    complex_geometry: Optional[Geometry] = None
    pocket_geometry: Optional[Geometry] = None
    ligand_geometry: Optional[Geometry] = None


@dataclass(frozen=True)
class LigandReport:
    """Pocket analysis results for one ligand."""
    ligand: Residue
    site: BindingSite
    assessment: DruggabilityAssessment
    fragment: Fragment
