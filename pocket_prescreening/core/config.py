"""Configuration classes for binding pocket analysis."""

from dataclasses import dataclass, field
from typing import Tuple


@dataclass
class FragmentConfig:
    """Configuration for fragment extraction."""
    max_atoms: int = 20  # size limit handed to the energy backend
    min_atoms: int = 4   # below this the fragment is flagged "insufficient"
    backbone_atom_names: Tuple[str, ...] = ("N", "CA", "C", "O")
    max_backbone_per_residue: int = 2

    def __post_init__(self):
        """Validate fragment limits."""
        if self.max_atoms < 0:
            raise ValueError(f"max_atoms must be non-negative, got {self.max_atoms}")
        if self.min_atoms < 0:
            raise ValueError(f"min_atoms must be non-negative, got {self.min_atoms}")
        if self.max_backbone_per_residue < 0:
            raise ValueError(
                f"max_backbone_per_residue must be non-negative, "
                f"got {self.max_backbone_per_residue}"
            )


@dataclass
class DruggabilityConfig:
    """
    Scoring bands for druggability assessment.

    These are empirical calibration constants (DoGSiteScorer/fpocket style
    ranges), not physical law. Defaults reproduce the reference scoring.
    """
    # Volume bands (Å^3)
    volume_optimal: Tuple[float, float] = (300.0, 1500.0)
    volume_acceptable: Tuple[float, float] = (200.0, 2000.0)

    # Hydrophobic residue fraction bands
    hydrophobic_optimal: Tuple[float, float] = (0.3, 0.7)
    hydrophobic_acceptable: Tuple[float, float] = (0.2, 0.8)

    # Hydrogen-bond site count: optimal band and minimum for partial credit
    hbond_optimal: Tuple[int, int] = (3, 15)
    hbond_minimum: int = 1

    # Total score cutoffs for the rating
    highly_druggable_cutoff: float = 0.8
    moderately_druggable_cutoff: float = 0.5

    def __post_init__(self):
        """Validate that every band is ordered."""
        bands = {
            "volume_optimal": self.volume_optimal,
            "volume_acceptable": self.volume_acceptable,
            "hydrophobic_optimal": self.hydrophobic_optimal,
            "hydrophobic_acceptable": self.hydrophobic_acceptable,
            "hbond_optimal": self.hbond_optimal,
        }
        for name, (low, high) in bands.items():
            if low > high:
                raise ValueError(f"{name} lower bound {low} exceeds upper bound {high}")


@dataclass
class AnalysisConfig:
    """Main configuration for binding pocket analysis."""
    # Experiment info
    experiment_name: str = "binding_pocket_analysis"

    # Pocket selection
    cutoff: float = 5.0  # Å, inclusive

    # Volume heuristic
    volume_padding: float = 3.0      # Å added per axis, roughly two vdW radii
    volume_packing_factor: float = 0.52  # empirical sphere packing factor

    # Sub-configurations
    fragment: FragmentConfig = field(default_factory=FragmentConfig)
    druggability: DruggabilityConfig = field(default_factory=DruggabilityConfig)

    def __post_init__(self):
        """Validate pocket selection settings."""
        if self.cutoff < 0:
            raise ValueError(f"cutoff must be non-negative, got {self.cutoff}")
