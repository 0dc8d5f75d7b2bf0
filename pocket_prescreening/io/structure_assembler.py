"""Assembly of parsed atoms into residues, chains and a Structure."""

import logging
import re
from typing import Dict, Iterable, List, Sequence, Tuple

from ..core.data_models import Atom, Chain, Residue, Structure, WATER_NAMES
from .record_parser import AtomRecordParser

logger = logging.getLogger(__name__)

# "TITLE " plus the two-column continuation field
TITLE_PREFIX_LENGTH = 10

_LINE_BREAK = re.compile(r"[\r\n]")


def split_lines(content: str) -> List[str]:
    """Split on CR or LF, dropping empty lines."""
    return [line for line in _LINE_BREAK.split(content) if line]


def extract_header(lines: Sequence[str]) -> str:
    """First line beginning with HEADER, or an empty string."""
    for line in lines:
        if line.startswith("HEADER"):
            return line
    return ""


def extract_title(lines: Sequence[str]) -> str:
    """Concatenate all TITLE continuation lines with single spaces."""
    parts = []
    for line in lines:
        if line.startswith("TITLE"):
            if len(line) > TITLE_PREFIX_LENGTH:
                parts.append(line[TITLE_PREFIX_LENGTH:].strip())
            else:
                parts.append("")
    return " ".join(parts)


def is_ligand_group(name: str, atoms: Iterable[Atom]) -> bool:
    """A group is a ligand if any atom is HETATM and it is not water."""
    return name not in WATER_NAMES and any(a.is_het_atom for a in atoms)


class StructureAssembler:
    """Group atoms into residues and chains."""

    def group_residues(self, atoms: Iterable[Atom]) -> List[Residue]:
        """
        Group atoms by (chain, sequence number, residue name).

        Groups and the atoms inside them keep first-seen order. An explicit
        key -> index table with a parallel group list keeps the output
        deterministic regardless of mapping iteration order.

        Args:
            atoms: Parsed atoms in input order

        Returns:
            Residues in order of first appearance
        """
        index_of: Dict[Tuple[str, int, str], int] = {}
        groups: List[List[Atom]] = []

        for atom in atoms:
            key = atom.residue_key
            idx = index_of.get(key)
            if idx is None:
                index_of[key] = len(groups)
                groups.append([atom])
            else:
                groups[idx].append(atom)

        residues = []
        for group in groups:
            first = group[0]
            residues.append(Residue(
                name=first.residue_name,
                chain_id=first.chain_id,
                seq_number=first.residue_seq,
                atoms=tuple(group),
                is_ligand=is_ligand_group(first.residue_name, group),
            ))
        return residues

    def group_chains(self, residues: Iterable[Residue]) -> List[Chain]:
        """Partition protein residues by chain id, keeping first-seen order."""
        index_of: Dict[str, int] = {}
        chain_ids: List[str] = []
        members: List[List[Residue]] = []

        for residue in residues:
            if residue.is_ligand or residue.is_water:
                continue
            idx = index_of.get(residue.chain_id)
            if idx is None:
                index_of[residue.chain_id] = len(members)
                chain_ids.append(residue.chain_id)
                members.append([residue])
            else:
                members[idx].append(residue)

        return [Chain(id=cid, residues=tuple(res)) for cid, res in zip(chain_ids, members)]

    def assemble(
        self,
        atoms: Sequence[Atom],
        header: str = "",
        title: str = ""
    ) -> Structure:
        """
        Build a Structure from parsed atoms.

        Args:
            atoms: Parsed atoms in input order
            header: HEADER line text
            title: Concatenated TITLE text

        Returns:
            Immutable structure; empty input gives empty chains, ligands and waters
        """
        residues = self.group_residues(atoms)
        waters = tuple(a for a in atoms if a.residue_name in WATER_NAMES)
        ligands = tuple(r for r in residues if r.is_ligand)
        chains = tuple(self.group_chains(residues))

        return Structure(
            header=header,
            title=title,
            chains=chains,
            ligands=ligands,
            waters=waters,
        )


def parse_pdb_content(content: str) -> Structure:
    """
    Parse PDB text into a Structure.

    Only HEADER, TITLE, ATOM and HETATM records are interpreted; every
    other record type and every malformed coordinate line is ignored.
    """
    lines = split_lines(content)
    parser = AtomRecordParser()
    atoms = parser.parse_lines(lines)

    structure = StructureAssembler().assemble(
        atoms,
        header=extract_header(lines),
        title=extract_title(lines),
    )

    logger.debug(
        f"Parsed {parser.n_parsed} atoms ({parser.n_rejected} rejected): "
        f"{len(structure.chains)} chains, {len(structure.ligands)} ligands, "
        f"{len(structure.waters)} water atoms"
    )
    return structure
