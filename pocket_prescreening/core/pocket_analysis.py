"""Workflow class for binding pocket analysis of a structure."""

from pathlib import Path
from typing import Dict, List, Optional, Union

from .config import AnalysisConfig
from .data_models import (
    BindingSite, DruggabilityAssessment, Fragment, LigandReport, Residue, Structure
)
from .logger import logger
from ..io.file_handler import FileHandler, read_pdb_file
from ..io.structure_assembler import parse_pdb_content
from ..analysis.binding_site_analyzer import BindingSiteAnalyzer, hydropathy_label
from ..analysis.druggability_scorer import DruggabilityScorer
from ..analysis.fragment_extractor import FragmentExtractor


class PocketAnalysis:
    """
    Binding pocket analysis of one structure.

    The workflow is:
    1. Parse the PDB text into a Structure (once)
    2. Find the pocket around each ligand
    3. Score pocket druggability
    4. Extract a bounded fragment for energy estimation

    Attributes:
        structure: Parsed structure
        config: Configuration settings
    """

    def __init__(self, content: str, config: Optional[AnalysisConfig] = None):
        """
        Initialize pocket analysis.

        Args:
            content: Raw PDB text
            config: Configuration object (uses defaults if None)
        """
        self.config = config or AnalysisConfig()
        self.structure: Structure = parse_pdb_content(content)

        self.site_analyzer = BindingSiteAnalyzer(self.config)
        self.scorer = DruggabilityScorer(self.config.druggability)
        self.fragment_extractor = FragmentExtractor(self.config.fragment)

        logger.info(
            f"Parsed structure: {len(self.structure.chains)} chains, "
            f"{len(self.structure.ligands)} ligands, "
            f"{len(self.structure.waters)} water atoms"
        )
        if self.structure.header:
            logger.debug(f"Header: {self.structure.header.strip()}")

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path],
        config: Optional[AnalysisConfig] = None
    ) -> "PocketAnalysis":
        """Create an analysis from a PDB file on disk."""
        return cls(read_pdb_file(path), config)

    def get_ligand(self, name: str, chain_id: Optional[str] = None) -> Residue:
        """
        Look up a ligand by residue name.

        Raises:
            ValueError: If no ligand matches
        """
        ligand = self.structure.find_ligand(name, chain_id)
        if ligand is None:
            available = ", ".join(f"{l.name}{l.seq_number}" for l in self.structure.ligands)
            raise ValueError(f"Ligand {name} not found (available: {available or 'none'})")
        return ligand

    def binding_site(self, ligand: Residue) -> BindingSite:
        return self.site_analyzer.analyze(self.structure, ligand)

    def binding_sites(self) -> List[BindingSite]:
        """Binding sites for every ligand in the structure."""
        return self.site_analyzer.analyze_all(self.structure)

    def assess(self, ligand: Residue) -> DruggabilityAssessment:
        return self.scorer.score_site(self.binding_site(ligand))

    def extract_fragment(self, ligand: Residue) -> Fragment:
        return self.fragment_extractor.extract(self.binding_site(ligand), ligand)

    def analyze_ligand(self, ligand: Residue) -> LigandReport:
        """Run pocket detection, scoring and fragment extraction for one ligand."""
        logger.info(
            f"Analyzing ligand {ligand.name} (chain {ligand.chain_id}, position {ligand.seq_number})"
        )
        site = self.binding_site(ligand)
        assessment = self.scorer.score_site(site)
        fragment = self.fragment_extractor.extract(site, ligand)

        logger.info(
            f"  {len(site.pocket_residues)} pocket residues, volume {site.volume:.1f} A^3, "
            f"hydrophobic {site.hydrophobic_fraction * 100:.1f}%, "
            f"{site.hydrogen_bond_sites} H-bond sites"
        )
        for res in site.pocket_residues:
            logger.debug(
                f"    {res.name}{res.seq_number} ({hydropathy_label(res)}, {len(res.atoms)} atoms)"
            )
        logger.info(f"  Druggability: {assessment.total_score:.2f} ({assessment.rating})")
        if fragment.is_ready:
            logger.info(f"  Fragment: {fragment.n_atoms} atoms, ready for energy estimation")
        else:
            logger.warning(f"  Fragment: {fragment.n_atoms} atoms, too small for energy estimation")

        return LigandReport(ligand=ligand, site=site, assessment=assessment, fragment=fragment)

    def run(self) -> List[LigandReport]:
        """Analyze every ligand in the structure."""
        if not self.structure.ligands:
            logger.warning("No ligands found in structure")
            return []
        return [self.analyze_ligand(ligand) for ligand in self.structure.ligands]

    def save_fragments(self, output_dir: Union[str, Path]) -> Dict[str, Dict[str, Path]]:
        """
        Write XYZ files for every ligand's fragment.

        Args:
            output_dir: Base output directory

        Returns:
            Paths per ligand label, as returned by ``FileHandler.save_fragment``
        """
        handler = FileHandler(Path(output_dir), self.config.experiment_name)
        saved = {}
        for report in self.run():
            filename = handler.get_fragment_filename(report.ligand)
            saved[filename[:-len(".xyz")]] = handler.save_fragment(report.fragment, report.ligand)
        return saved
