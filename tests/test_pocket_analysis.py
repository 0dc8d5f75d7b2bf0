"""
Tests for the PocketAnalysis workflow and file handling.

Tests cover:
- End-to-end analysis of the sample kinase structure
- Reading PDB files from disk
- Writing fragment XYZ files
"""

import pytest
from pathlib import Path

from pocket_prescreening import (
    PocketAnalysis,
    AnalysisConfig,
    FragmentConfig,
    FileHandler
)
from pocket_prescreening.io.file_handler import load_structure, read_pdb_file


class TestPocketAnalysisWorkflow:
    """Test the full parse-analyze-score-extract workflow."""

    @pytest.fixture
    def analysis(self, kinase_pdb_text):
        return PocketAnalysis(kinase_pdb_text)

    def test_run_workflow(self, analysis):
        reports = analysis.run()

        assert len(reports) == 1
        report = reports[0]
        assert report.ligand.name == "ATP"
        assert [r.name for r in report.site.pocket_residues] == ["LYS", "GLU", "ASP", "VAL"]
        assert report.site.hydrogen_bond_sites == 13
        assert report.assessment.rating == "Highly druggable"
        assert report.fragment.n_atoms == 20
        assert report.fragment.is_ready

    def test_get_ligand(self, analysis):
        assert analysis.get_ligand("ATP").seq_number == 100
        assert analysis.get_ligand("ATP", chain_id="A").name == "ATP"
        with pytest.raises(ValueError, match="NAD"):
            analysis.get_ligand("NAD")
        with pytest.raises(ValueError):
            analysis.get_ligand("ATP", chain_id="B")

    def test_individual_steps_agree(self, analysis):
        atp = analysis.get_ligand("ATP")
        report = analysis.analyze_ligand(atp)

        assert analysis.binding_sites() == [report.site]
        assert analysis.assess(atp) == report.assessment
        assert analysis.extract_fragment(atp) == report.fragment

    def test_custom_config(self, kinase_pdb_text):
        config = AnalysisConfig(cutoff=5.1, fragment=FragmentConfig(max_atoms=30))
        report = PocketAnalysis(kinase_pdb_text, config).run()[0]

        assert len(report.site.pocket_residues) == 5
        assert report.fragment.n_atoms == 23

    def test_structure_without_ligands(self, atom_line):
        content = atom_line(1, "N", "ALA", "A", 1, 0.0, 0.0, 0.0, element="N")
        assert PocketAnalysis(content).run() == []

    def test_garbage_input_does_not_fail(self):
        analysis = PocketAnalysis("not a pdb file\nATOM  garbage\n\x00\x01")
        assert analysis.structure.chains == ()
        assert analysis.run() == []


class TestFileHandling:
    """Test reading structures and writing fragments."""

    def test_read_pdb_file(self, kinase_pdb_path, kinase_pdb_text):
        assert read_pdb_file(kinase_pdb_path) == kinase_pdb_text
        assert read_pdb_file(str(kinase_pdb_path)) == kinase_pdb_text

    def test_missing_file(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            read_pdb_file(temp_dir / "missing.pdb")
        with pytest.raises(FileNotFoundError):
            PocketAnalysis.from_file(temp_dir / "missing.pdb")

    def test_load_structure(self, kinase_pdb_path):
        structure = load_structure(kinase_pdb_path)
        assert structure.ligands[0].name == "ATP"

    def test_from_file(self, kinase_pdb_path):
        analysis = PocketAnalysis.from_file(kinase_pdb_path)
        assert len(analysis.structure.protein_residues()) == 5

    def test_directory_creation(self, temp_dir):
        handler = FileHandler(temp_dir, "test_experiment")

        assert handler.experiment_dir == temp_dir / "test_experiment"
        assert handler.dirs["fragments_complex"].exists()
        assert handler.dirs["fragments_ligand"].exists()
        assert handler.dirs["fragments_pocket"].exists()

    def test_fragment_filename(self, temp_dir, atp):
        handler = FileHandler(temp_dir, "names")
        assert handler.get_fragment_filename(atp) == "ATP_A100.xyz"

    def test_save_fragments(self, temp_dir, kinase_pdb_text):
        config = AnalysisConfig(experiment_name="kinase_run")
        saved = PocketAnalysis(kinase_pdb_text, config).save_fragments(temp_dir)

        assert list(saved) == ["ATP_A100"]
        paths = saved["ATP_A100"]
        assert set(paths) == {"complex", "ligand", "pocket"}
        for path in paths.values():
            assert path.exists()
            assert Path(temp_dir / "kinase_run") in path.parents

        complex_lines = paths["complex"].read_text().split("\n")
        assert complex_lines[0] == "20"
        assert complex_lines[1] == "ATP_A100 fragment (ready)"
        assert paths["ligand"].read_text().split("\n")[0] == "13"
        assert paths["pocket"].read_text().split("\n")[0] == "7"
