from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

import numpy as np

from RouteTSP.models import SolveConfig
from RouteTSP.solvers.base import BaseSolver, TourOutcome
from RouteTSP.solvers.heuristics.nearest_neighbor import nearest_neighbor_tour
from RouteTSP.utils.taxonomy import AlgorithmFamily

logger = logging.getLogger(__name__)

IMPROVEMENT_EPS = 1e-9


def two_opt_improve(dist: Sequence[Sequence[float]], tour: Sequence[int]) -> Tuple[List[int], int]:
    """First-improvement 2-opt until no move shortens the tour.

    A move picks edges (i, i+1) and (j, j+1 mod n) with j - i >= 2 and reverses
    positions i+1..j, so position 0 never moves. The first strictly improving
    move is applied and the scan restarts from i = 0.

    Returns the improved tour and the number of moves applied.
    """
    path = list(tour)
    n = len(path)
    moves = 0
    if n < 4:
        return path, moves

    improved = True
    while improved:
        improved = False
        for i in range(n - 1):
            a = path[i]
            b = path[i + 1]
            d_ab = dist[a][b]
            for j in range(i + 2, n):
                c = path[j]
                d = path[(j + 1) % n]
                delta = dist[a][c] + dist[b][d] - d_ab - dist[c][d]
                if delta < -IMPROVEMENT_EPS:
                    path[i + 1 : j + 1] = reversed(path[i + 1 : j + 1])
                    moves += 1
                    improved = True
                    break
            if improved:
                break
    return path, moves


class TwoOptSolver(BaseSolver):
    """Nearest-neighbour construction followed by 2-opt local search."""

    name = "nearest_neighbor_2opt"
    family = AlgorithmFamily.HEURISTIC

    def find_tour(self, dist_matrix: np.ndarray, config: SolveConfig) -> TourOutcome:
        dist = dist_matrix.tolist()
        initial = nearest_neighbor_tour(dist)
        tour, moves = two_opt_improve(dist, initial)
        logger.debug("two_opt: %d improving moves from nearest-neighbour start", moves)
        return TourOutcome(tour=tour, algorithm=self.name, metadata={"two_opt_moves": moves})


__all__ = ["TwoOptSolver", "two_opt_improve"]
