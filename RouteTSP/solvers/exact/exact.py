from __future__ import annotations

import numpy as np

from RouteTSP.models import SolveConfig
from RouteTSP.solvers.base import BaseSolver, TourOutcome
from RouteTSP.solvers.exact.brute_force import BruteForceSolver
from RouteTSP.solvers.exact.held_karp import HeldKarpSolver
from RouteTSP.utils.taxonomy import AlgorithmFamily


class ExactSolver(BaseSolver):
    """Provably optimal tours: brute force for tiny instances, Held-Karp above that."""

    name = "exact"
    family = AlgorithmFamily.EXACT

    @property
    def degenerate_name(self) -> str:
        return BruteForceSolver.name

    def find_tour(self, dist_matrix: np.ndarray, config: SolveConfig) -> TourOutcome:
        n = dist_matrix.shape[0]
        if n <= self.settings.brute_force_max_points:
            return BruteForceSolver(self.settings).find_tour(dist_matrix, config)
        return HeldKarpSolver(self.settings).find_tour(dist_matrix, config)


__all__ = ["ExactSolver"]
