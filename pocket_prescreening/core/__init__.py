"""Core module for binding pocket analysis."""

from .config import AnalysisConfig, FragmentConfig, DruggabilityConfig
from .data_models import (
    Atom,
    Residue,
    Chain,
    Structure,
    BindingSite,
    DruggabilityAssessment,
    Fragment,
    FragmentStatus,
    Geometry,
    PharmacophoreFeature,
    FeatureType,
    InteractionEnergyResult,
    LigandReport
)
from .logger import logger
from .pocket_analysis import PocketAnalysis

__all__ = [
    'PocketAnalysis',
    'AnalysisConfig',
    'FragmentConfig',
    'DruggabilityConfig',
    'Atom',
    'Residue',
    'Chain',
    'Structure',
    'BindingSite',
    'DruggabilityAssessment',
    'Fragment',
    'FragmentStatus',
    'Geometry',
    'PharmacophoreFeature',
    'FeatureType',
    'InteractionEnergyResult',
    'LigandReport',
    'logger'
]
