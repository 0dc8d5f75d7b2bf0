"""
Pocket-Prescreening: Binding Pocket Analysis

A modular package for preparing protein-ligand binding sites for
energy calculations:
- PDB parsing (ATOM/HETATM, HEADER, TITLE)
- Binding pocket detection around ligands
- Pocket volume, hydrophobicity and H-bond site metrics
- Druggability scoring
- Fragment extraction for energy backends
"""

from .core import (
    PocketAnalysis,
    AnalysisConfig,
    FragmentConfig,
    DruggabilityConfig,
    Atom,
    Residue,
    Chain,
    Structure,
    BindingSite,
    DruggabilityAssessment,
    Fragment,
    FragmentStatus,
    Geometry,
    InteractionEnergyResult
)

from .io import (
    parse_atom_line,
    parse_pdb_content,
    FileHandler
)

from .analysis import (
    BindingSiteAnalyzer,
    DruggabilityScorer,
    FragmentExtractor,
    EnergyAnalyzer,
    ProximityIndex
)

__version__ = "0.1.0"

__all__ = [
    # Core classes
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
    'InteractionEnergyResult',

    # IO
    'parse_atom_line',
    'parse_pdb_content',
    'FileHandler',

    # Analysis
    'BindingSiteAnalyzer',
    'DruggabilityScorer',
    'FragmentExtractor',
    'EnergyAnalyzer',
    'ProximityIndex'
]
