"""Extraction of size-bounded atomic fragments for energy estimation."""

import logging
from typing import List, Optional, Tuple

from ..core.config import FragmentConfig
from ..core.data_models import (
    Atom, BindingSite, Fragment, FragmentStatus, Position, Residue
)

logger = logging.getLogger(__name__)


def _entry(atom: Atom) -> Tuple[str, Position]:
    return (atom.element, (atom.x, atom.y, atom.z))


class FragmentExtractor:
    """Build the ligand-plus-backbone fragment handed to an energy backend."""

    def __init__(self, config: Optional[FragmentConfig] = None):
        """
        Initialize fragment extractor.

        Args:
            config: Fragment limits (defaults: 20 max atoms, 4 min atoms)
        """
        self.config = config or FragmentConfig()

    def backbone_atoms(self, residue: Residue) -> List[Atom]:
        """First backbone atoms of a residue, in the residue's atom order."""
        selected = [a for a in residue.atoms if a.name in self.config.backbone_atom_names]
        return selected[:self.config.max_backbone_per_residue]

    def extract(self, site: BindingSite, ligand: Residue) -> Fragment:
        """
        Extract a fragment for one binding site.

        Ligand atoms come first in their original order, followed by
        backbone atoms of each pocket residue in pocket order. The list is
        truncated from the end to ``max_atoms``.

        Args:
            site: Analyzed binding site
            ligand: Ligand residue of the site

        Returns:
            Fragment with "ready" or "insufficient" status
        """
        entries = [_entry(a) for a in ligand.atoms]
        for residue in site.pocket_residues:
            entries.extend(_entry(a) for a in self.backbone_atoms(residue))

        entries = entries[:self.config.max_atoms]
        n_ligand = min(len(ligand.atoms), len(entries))

        if len(entries) >= self.config.min_atoms:
            status = FragmentStatus.READY
        else:
            status = FragmentStatus.INSUFFICIENT
            logger.warning(
                f"Fragment for {site.ligand_id} has {len(entries)} atoms, "
                f"fewer than {self.config.min_atoms}"
            )

        return Fragment(atoms=tuple(entries), status=status, n_ligand_atoms=n_ligand)
