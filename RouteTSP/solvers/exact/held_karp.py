from __future__ import annotations

import logging

import numpy as np

from RouteTSP.models import SolveConfig
from RouteTSP.solvers.base import BaseSolver, ProblemSizeExceeded, SolverError, TourOutcome
from RouteTSP.utils.taxonomy import AlgorithmFamily

logger = logging.getLogger(__name__)


class HeldKarpSolver(BaseSolver):
    """Bitmask dynamic programming over (position, visited-set) states, O(n^2 * 2^n).

    ``cost[(pos << n) | mask]`` is the length of the cheapest way to finish the tour
    from ``pos`` having visited ``mask`` (anchor 0 always included), and
    ``parent`` at the same slot holds the next point on that path. Both tables
    live only for the duration of one solve.
    """

    name = "held_karp"
    family = AlgorithmFamily.EXACT

    def find_tour(self, dist_matrix: np.ndarray, config: SolveConfig) -> TourOutcome:
        n = dist_matrix.shape[0]
        limit = self.settings.held_karp_max_points
        if n > limit:
            raise ProblemSizeExceeded(self.name, n, limit)

        dist = dist_matrix.tolist()
        full_mask = (1 << n) - 1
        cost = np.full(n << n, np.inf, dtype=float)
        parent = np.full(n << n, -1, dtype=np.int16)
        states = 0

        def visit(pos: int, mask: int) -> float:
            nonlocal states
            if mask == full_mask:
                return dist[pos][0]
            key = (pos << n) | mask
            if parent[key] >= 0:
                return float(cost[key])

            best = float("inf")
            best_next = -1
            row = dist[pos]
            for nxt in range(n):
                bit = 1 << nxt
                if mask & bit:
                    continue
                candidate = row[nxt] + visit(nxt, mask | bit)
                if candidate < best:
                    best = candidate
                    best_next = nxt

            cost[key] = best
            parent[key] = best_next
            states += 1
            return best

        best_cost = visit(0, 1)

        tour = [0]
        pos, mask = 0, 1
        while mask != full_mask:
            nxt = int(parent[(pos << n) | mask])
            if nxt < 0:
                raise SolverError(f"held_karp: missing parent for state (pos={pos}, mask={mask:#x})")
            tour.append(nxt)
            mask |= 1 << nxt
            pos = nxt

        logger.debug("held_karp: %d states memoised, best %.4f", states, best_cost)
        return TourOutcome(
            tour=tour,
            algorithm=self.name,
            metadata={"states": states, "optimal_cost": best_cost},
        )


__all__ = ["HeldKarpSolver"]
