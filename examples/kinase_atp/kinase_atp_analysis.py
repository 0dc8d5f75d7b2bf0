#!/usr/bin/env python3
"""
Binding Pocket Analysis Example: Kinase ATP Site

This example walks through the pocket workflow on a small kinase fragment
with a bound ATP:
1. Parse the PDB file
2. Detect the pocket residues around ATP
3. Score pocket druggability
4. Extract a bounded fragment and write XYZ files for an energy backend

The structure is a simplified excerpt; real PDB entries are much larger.
"""

import os
import sys
from pathlib import Path

os.environ.setdefault("POCKET_PRESCREENING_DEBUG", "0")

from pocket_prescreening import (
    PocketAnalysis,
    AnalysisConfig,
    FragmentConfig
)
from pocket_prescreening.core.logger import logger


def analyze_kinase_atp_site():
    """Analyze the ATP binding site and prepare fragments for energy estimation."""

    # =========================================================================
    # STEP 1: Configuration
    # =========================================================================

    config = AnalysisConfig(
        experiment_name="kinase_atp_pocket",
        cutoff=5.0,                  # Pocket residues within 5 A of ATP
        fragment=FragmentConfig(
            max_atoms=20,            # Keep the fragment small for the energy backend
            min_atoms=4
        )
    )

    # =========================================================================
    # STEP 2: Parse structure and analyze every ligand
    # =========================================================================

    pdb_path = Path(__file__).parent / "kinase_atp.pdb"
    analysis = PocketAnalysis.from_file(pdb_path, config)
    reports = analysis.run()

    for report in reports:
        counts = ", ".join(f"{element}: {n}" for element, n in report.fragment.element_counts())
        logger.info(f"{report.ligand.name} fragment composition: {counts}")

    # =========================================================================
    # STEP 3: Write fragments for the energy backend
    # =========================================================================

    saved = analysis.save_fragments(Path.cwd())
    for label, paths in saved.items():
        logger.info(f"{label}: {', '.join(str(p.name) for p in paths.values())}")


def main():
    """Main function with error handling."""
    try:
        analyze_kinase_atp_site()
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
