"""Analysis modules for binding pockets."""

from .proximity import ProximityIndex, distance, within_cutoff, is_near, find_overlapping_pairs
from .binding_site_analyzer import BindingSiteAnalyzer, KYTE_DOOLITTLE
from .druggability_scorer import DruggabilityScorer, assess_druggability
from .fragment_extractor import FragmentExtractor
from .energy_analyzer import EnergyAnalyzer

__all__ = [
    'ProximityIndex',
    'distance',
    'within_cutoff',
    'is_near',
    'find_overlapping_pairs',
    'BindingSiteAnalyzer',
    'KYTE_DOOLITTLE',
    'DruggabilityScorer',
    'assess_druggability',
    'FragmentExtractor',
    'EnergyAnalyzer'
]
