from __future__ import annotations

import logging
from typing import List, Sequence

import numpy as np

from RouteTSP.models import SolveConfig
from RouteTSP.solvers.base import BaseSolver, TourOutcome
from RouteTSP.utils.taxonomy import AlgorithmFamily

logger = logging.getLogger(__name__)


def nearest_neighbor_tour(dist: Sequence[Sequence[float]], start: int = 0) -> List[int]:
    """Greedy construction: always step to the closest unvisited point.

    Linear scan per step, so O(n^2) overall; ties go to the lowest index.
    """
    n = len(dist)
    if n == 0:
        return []
    visited = [False] * n
    visited[start] = True
    tour = [start]
    current = start
    for _ in range(1, n):
        row = dist[current]
        nearest = -1
        nearest_dist = float("inf")
        for city in range(n):
            if visited[city]:
                continue
            if row[city] < nearest_dist:
                nearest_dist = row[city]
                nearest = city
        visited[nearest] = True
        tour.append(nearest)
        current = nearest
    return tour


class NearestNeighborSolver(BaseSolver):
    name = "nearest_neighbor"
    family = AlgorithmFamily.HEURISTIC

    def find_tour(self, dist_matrix: np.ndarray, config: SolveConfig) -> TourOutcome:
        tour = nearest_neighbor_tour(dist_matrix.tolist())
        return TourOutcome(tour=tour, algorithm=self.name, metadata={"nodes_visited": len(tour)})


__all__ = ["NearestNeighborSolver", "nearest_neighbor_tour"]
