"""Distance and proximity primitives."""

from typing import List, Sequence, Tuple

import numpy as np
from scipy.spatial.distance import cdist

from ..core.data_models import Atom, PharmacophoreFeature


def _xyz(point) -> np.ndarray:
    if isinstance(point, Atom):
        return point.position
    return np.asarray(point, dtype=np.float64)


def distance(a, b) -> float:
    """Euclidean distance between two atoms or (x, y, z) points."""
    return float(np.sqrt(np.sum((_xyz(b) - _xyz(a)) ** 2)))


def within_cutoff(a, b, cutoff: float, inclusive: bool) -> bool:
    """
    Distance test with explicit boundary handling.

    ``inclusive=True`` accepts ``d <= cutoff`` (pocket residue selection);
    ``inclusive=False`` accepts ``d < cutoff`` (feature overlap detection).
    """
    d = distance(a, b)
    return d <= cutoff if inclusive else d < cutoff


def _coordinates(atoms: Sequence[Atom]) -> np.ndarray:
    if not atoms:
        return np.empty((0, 3), dtype=np.float64)
    return np.array([[a.x, a.y, a.z] for a in atoms], dtype=np.float64)


class ProximityIndex:
    """
    Proximity queries against a fixed reference atom set.

    Pockets hold tens to a few hundred atoms, so a dense distance matrix
    is used instead of a spatial tree.
    """

    def __init__(self, reference_atoms: Sequence[Atom]):
        """
        Initialize proximity index.

        Args:
            reference_atoms: Atoms to measure against (usually a ligand)
        """
        self.reference = _coordinates(reference_atoms)

    def min_distance(self, atoms: Sequence[Atom]) -> float:
        """Smallest distance from any of ``atoms`` to the reference set (inf if either is empty)."""
        if len(atoms) == 0 or len(self.reference) == 0:
            return float("inf")
        return float(cdist(_coordinates(atoms), self.reference).min())

    def is_near(self, atoms: Sequence[Atom], cutoff: float, inclusive: bool = True) -> bool:
        """True if any atom lies within ``cutoff`` of any reference atom."""
        if len(atoms) == 0 or len(self.reference) == 0:
            return False
        distances = cdist(_coordinates(atoms), self.reference)
        if inclusive:
            return bool(np.any(distances <= cutoff))
        return bool(np.any(distances < cutoff))


def is_near(
    atoms: Sequence[Atom],
    reference_atoms: Sequence[Atom],
    cutoff: float,
    inclusive: bool = True
) -> bool:
    """True if any atom in ``atoms`` is within ``cutoff`` of any reference atom."""
    return ProximityIndex(reference_atoms).is_near(atoms, cutoff, inclusive=inclusive)


def find_overlapping_pairs(
    features: Sequence[PharmacophoreFeature],
    threshold: float
) -> List[Tuple[int, int]]:
    """
    Find spatially overlapping pharmacophore features.

    Two features overlap when their ids differ and they are strictly closer
    than ``threshold``; overlapping features cannot both be used by one
    ligand.

    Args:
        features: Pocket features
        threshold: Overlap distance in Å (exclusive)

    Returns:
        Index pairs (i, j) with i < j, in row-major order
    """
    pairs = []
    for i in range(len(features)):
        for j in range(i + 1, len(features)):
            f1, f2 = features[i], features[j]
            if f1.id != f2.id and within_cutoff(f1.position, f2.position, threshold, inclusive=False):
                pairs.append((i, j))
    return pairs
