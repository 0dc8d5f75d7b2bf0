"""Interaction energy bookkeeping for extracted fragments."""

import logging
from typing import List, Optional, Tuple

from ..core.data_models import Fragment, InteractionEnergyResult

logger = logging.getLogger(__name__)


class EnergyAnalyzer:
    """Combine externally computed fragment energies into interaction energies."""

    # Conversion factors
    HARTREE_TO_KCAL = 627.5094740631  # Hartree to kcal/mol

    def calculate_interaction_energy(
        self,
        complex_energy: Optional[float],
        pocket_energy: Optional[float],
        ligand_energy: Optional[float],
        fragment: Optional[Fragment] = None
    ) -> InteractionEnergyResult:
        """
        Calculate the ligand-pocket interaction energy.

        Interaction Energy = E(complex) - E(pocket) - E(ligand)

        Args:
            complex_energy: Energy of the whole fragment (Hartree)
            pocket_energy: Energy of the pocket backbone part (Hartree)
            ligand_energy: Energy of the ligand part (Hartree)
            fragment: Fragment the energies belong to, kept for reference

        Returns:
            Interaction energy result
        """
        energies = {
            "complex": complex_energy,
            "pocket": pocket_energy,
            "ligand": ligand_energy,
        }
        missing = [name for name, energy in energies.items() if energy is None]
        if missing:
            raise ValueError(f"Missing energies for: {', '.join(missing)}")

        interaction_hartree = complex_energy - pocket_energy - ligand_energy
        interaction_kcal = interaction_hartree * self.HARTREE_TO_KCAL

        logger.debug(f"Interaction energy: {interaction_kcal:.2f} kcal/mol")

        return InteractionEnergyResult(
            interaction_energy=interaction_kcal,
            interaction_energy_hartree=interaction_hartree,
            complex_energy=complex_energy,
            pocket_energy=pocket_energy,
            ligand_energy=ligand_energy,
            complex_geometry=fragment.to_geometry() if fragment else None,
            pocket_geometry=fragment.pocket_geometry() if fragment else None,
            ligand_geometry=fragment.ligand_geometry() if fragment else None,
        )

    def rank_by_energy(
        self,
        results: List[InteractionEnergyResult]
    ) -> List[Tuple[int, float]]:
        """
        Rank results from most to least favorable interaction energy.

        Returns:
            (index, interaction energy in kcal/mol) pairs, most negative first
        """
        ranked = sorted(enumerate(results), key=lambda item: item[1].interaction_energy)
        return [(idx, result.interaction_energy) for idx, result in ranked]
