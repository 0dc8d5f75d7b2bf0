"""Heuristic druggability scoring of binding sites."""

from typing import Optional, Tuple

from ..core.config import DruggabilityConfig
from ..core.data_models import BindingSite, DruggabilityAssessment

HIGHLY_DRUGGABLE = "Highly druggable"
MODERATELY_DRUGGABLE = "Moderately druggable"
CHALLENGING_TARGET = "Challenging target"


def _band_score(value: float, optimal: Tuple[float, float], acceptable: Tuple[float, float]) -> float:
    """1.0 inside the optimal band, 0.5 inside the acceptable band, else 0.0."""
    if optimal[0] <= value <= optimal[1]:
        return 1.0
    if acceptable[0] <= value <= acceptable[1]:
        return 0.5
    return 0.0


def assess_druggability(
    volume: float,
    hydrophobic_fraction: float,
    hbond_sites: int,
    config: Optional[DruggabilityConfig] = None
) -> DruggabilityAssessment:
    """
    Score a pocket from its volume, hydrophobic fraction and H-bond site count.

    Each criterion scores 1.0, 0.5 or 0.0; the total is their mean.

    Args:
        volume: Pocket volume estimate (Å^3)
        hydrophobic_fraction: Fraction of hydrophobic pocket residues
        hbond_sites: Number of N/O atoms in the pocket
        config: Scoring bands (defaults if None)

    Returns:
        Component scores, total score and rating
    """
    config = config or DruggabilityConfig()

    volume_score = _band_score(volume, config.volume_optimal, config.volume_acceptable)
    hydrophobic_score = _band_score(
        hydrophobic_fraction, config.hydrophobic_optimal, config.hydrophobic_acceptable
    )

    low, high = config.hbond_optimal
    if low <= hbond_sites <= high:
        hbond_score = 1.0
    elif hbond_sites >= config.hbond_minimum:
        hbond_score = 0.5
    else:
        hbond_score = 0.0

    total_score = (volume_score + hydrophobic_score + hbond_score) / 3.0

    if total_score >= config.highly_druggable_cutoff:
        rating = HIGHLY_DRUGGABLE
    elif total_score >= config.moderately_druggable_cutoff:
        rating = MODERATELY_DRUGGABLE
    else:
        rating = CHALLENGING_TARGET

    return DruggabilityAssessment(
        volume_score=volume_score,
        hydrophobic_score=hydrophobic_score,
        hbond_score=hbond_score,
        total_score=total_score,
        rating=rating,
    )


class DruggabilityScorer:
    """Assess binding sites with a fixed set of scoring bands."""

    def __init__(self, config: Optional[DruggabilityConfig] = None):
        self.config = config or DruggabilityConfig()

    def score_site(self, site: BindingSite) -> DruggabilityAssessment:
        return assess_druggability(
            site.volume,
            site.hydrophobic_fraction,
            site.hydrogen_bond_sites,
            self.config,
        )
