"""Fixed-column parsing of PDB ATOM/HETATM records."""

import logging
from typing import Iterable, Iterator, List, Optional

from ..core.data_models import Atom

logger = logging.getLogger(__name__)

# Shortest line that still carries all three coordinates (columns 1-54)
MIN_RECORD_LENGTH = 54

ATOM_RECORD_TYPES = ("ATOM", "HETATM")


def _parse_optional_float(line: str, start: int, end: int, default: float) -> float:
    """Parse an optional trailing numeric column, falling back to ``default``."""
    if len(line) < end:
        return default
    try:
        return float(line[start:end])
    except ValueError:
        return default


def _parse_element(line: str, atom_name: str) -> str:
    """Element from columns 77-78, else the first character of the atom name."""
    if len(line) >= 78:
        element = line[76:78].strip()
        if element:
            return element
    return atom_name[:1]


def parse_atom_line(line: str) -> Optional[Atom]:
    """
    Parse one ATOM/HETATM line.

    Column layout (1-based, inclusive):
        1-6 record type, 7-11 serial, 13-16 atom name, 17 altLoc,
        18-20 residue name, 22 chain, 23-26 residue number,
        31-38 x, 39-46 y, 47-54 z, 55-60 occupancy,
        61-66 temperature factor, 77-78 element.

    Args:
        line: A single line of PDB text

    Returns:
        The parsed atom, or None if the line is too short, is not an
        ATOM/HETATM record, or has an unreadable serial, residue number
        or coordinate.
    """
    line = line.rstrip("\r\n")
    if len(line) < MIN_RECORD_LENGTH:
        return None

    record_type = line[0:6].strip()
    if record_type not in ATOM_RECORD_TYPES:
        return None

    try:
        serial = int(line[6:11])
        residue_seq = int(line[22:26])
        x = float(line[30:38])
        y = float(line[38:46])
        z = float(line[46:54])
    except ValueError:
        return None

    atom_name = line[12:16].strip()
    alt_location = line[16] if line[16] != " " else None

    return Atom(
        serial=serial,
        name=atom_name,
        alt_location=alt_location,
        residue_name=line[17:20].strip(),
        chain_id=line[21],
        residue_seq=residue_seq,
        x=x,
        y=y,
        z=z,
        occupancy=_parse_optional_float(line, 54, 60, 1.0),
        temp_factor=_parse_optional_float(line, 60, 66, 0.0),
        element=_parse_element(line, atom_name),
        is_het_atom=(record_type == "HETATM"),
    )


class AtomRecordParser:
    """Parse ATOM/HETATM records from a stream of lines, counting rejected records."""

    def __init__(self):
        """Initialize record parser."""
        self.n_parsed = 0
        self.n_rejected = 0

    def iter_atoms(self, lines: Iterable[str]) -> Iterator[Atom]:
        """Yield atoms in input order, skipping lines that do not parse."""
        for line in lines:
            atom = parse_atom_line(line)
            if atom is not None:
                self.n_parsed += 1
                yield atom
            elif line.startswith(ATOM_RECORD_TYPES):
                # Only coordinate records are worth reporting
                self.n_rejected += 1
                logger.debug(f"Skipping malformed coordinate record: {line.rstrip()!r}")

    def parse_lines(self, lines: Iterable[str]) -> List[Atom]:
        return list(self.iter_atoms(lines))
