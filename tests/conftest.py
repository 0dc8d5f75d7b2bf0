"""
Pytest configuration and shared fixtures for pocket-prescreening tests.
"""

import pytest
import tempfile
import shutil
from pathlib import Path

from pocket_prescreening.io.structure_assembler import parse_pdb_content


def make_atom_line(
    serial,
    name,
    res_name,
    chain,
    res_seq,
    x,
    y,
    z,
    record="ATOM",
    alt_loc=" ",
    occupancy=1.0,
    temp_factor=0.0,
    element=None
):
    """Format a PDB ATOM/HETATM line with standard column widths."""
    line = (
        f"{record:<6}{serial:>5} {name:<4}{alt_loc:1}{res_name:>3} {chain:1}{res_seq:>4}    "
        f"{x:>8.3f}{y:>8.3f}{z:>8.3f}{occupancy:>6.2f}{temp_factor:>6.2f}"
    )
    if element is not None:
        line += f"          {element:>2}"
    return line


@pytest.fixture(scope="session")
def atom_line():
    """Factory for formatted ATOM/HETATM lines."""
    return make_atom_line


@pytest.fixture(scope="session")
def test_data_dir():
    """Path to test data directory."""
    return Path(__file__).parent / "test_data"


@pytest.fixture(scope="session")
def kinase_pdb_path(test_data_dir):
    """Kinase fragment with five residues and an ATP ligand."""
    return test_data_dir / "kinase_atp.pdb"


@pytest.fixture(scope="session")
def kinase_pdb_text(kinase_pdb_path):
    return kinase_pdb_path.read_text()


@pytest.fixture
def kinase_structure(kinase_pdb_text):
    return parse_pdb_content(kinase_pdb_text)


@pytest.fixture
def atp(kinase_structure):
    return kinase_structure.find_ligand("ATP")


@pytest.fixture
def temp_dir():
    """Create a temporary directory that is cleaned up after test."""
    temp_dir = tempfile.mkdtemp(prefix="pocket_test_")
    yield Path(temp_dir)
    shutil.rmtree(temp_dir, ignore_errors=True)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks end-to-end tests over the sample structure"
    )


def pytest_collection_modifyitems(config, items):
    """Automatically add markers based on test names."""
    for item in items:
        if "integration" in item.nodeid.lower() or "workflow" in item.nodeid.lower():
            item.add_marker(pytest.mark.integration)
