from __future__ import annotations

import itertools
import logging

import numpy as np

from RouteTSP.models import SolveConfig
from RouteTSP.solvers.base import BaseSolver, ProblemSizeExceeded, TourOutcome
from RouteTSP.utils.taxonomy import AlgorithmFamily

logger = logging.getLogger(__name__)


class BruteForceSolver(BaseSolver):
    """Exhaustive search over every ordering of the non-anchor points.

    Point 0 anchors the tour, which removes rotations (but not reflections).
    ``itertools.permutations`` yields orderings of a sorted input in lexicographic
    order, and only a strictly shorter tour replaces the incumbent, so the first
    minimum encountered wins ties.
    """

    name = "brute_force"
    family = AlgorithmFamily.EXACT

    def find_tour(self, dist_matrix: np.ndarray, config: SolveConfig) -> TourOutcome:
        n = dist_matrix.shape[0]
        limit = self.settings.brute_force_max_points
        if n > limit:
            raise ProblemSizeExceeded(self.name, n, limit)

        dist = dist_matrix.tolist()
        anchor_row = dist[0]
        best_cost = float("inf")
        best_order: tuple[int, ...] = tuple(range(1, n))
        checked = 0

        for order in itertools.permutations(range(1, n)):
            checked += 1
            cost = anchor_row[order[0]]
            prev = order[0]
            for city in order[1:]:
                cost += dist[prev][city]
                prev = city
            cost += dist[prev][0]
            if cost < best_cost:
                best_cost = cost
                best_order = order

        logger.debug("brute_force: %d permutations checked, best %.4f", checked, best_cost)
        return TourOutcome(
            tour=[0, *best_order],
            algorithm=self.name,
            metadata={"permutations_checked": checked},
        )


__all__ = ["BruteForceSolver"]
