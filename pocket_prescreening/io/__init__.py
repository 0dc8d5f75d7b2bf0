"""Input/output modules."""

from .record_parser import AtomRecordParser, parse_atom_line
from .structure_assembler import StructureAssembler, parse_pdb_content
from .file_handler import FileHandler, read_pdb_file, load_structure

__all__ = [
    'AtomRecordParser',
    'parse_atom_line',
    'StructureAssembler',
    'parse_pdb_content',
    'FileHandler',
    'read_pdb_file',
    'load_structure'
]
