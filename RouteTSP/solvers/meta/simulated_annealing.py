from __future__ import annotations

import logging
import math

import numpy as np

from RouteTSP.config import Settings
from RouteTSP.geometry import tour_length
from RouteTSP.models import SolveConfig
from RouteTSP.solvers.base import BaseSolver, TourOutcome
from RouteTSP.utils.taxonomy import AlgorithmFamily

logger = logging.getLogger(__name__)

# Cumulative thresholds for the mutation draw: 70% reversal, 20% swap, 10% relocation.
REVERSAL_CUTOFF = 0.7
SWAP_CUTOFF = 0.9


def reverse_segment(tour: np.ndarray, rng: np.random.Generator) -> np.ndarray:
    n = tour.shape[0]
    if n < 4:
        return tour
    i = 1 + int(rng.integers(n - 3))
    j = i + 1 + int(rng.integers(n - i - 1))
    tour[i : j + 1] = tour[i : j + 1][::-1]
    return tour


def swap_positions(tour: np.ndarray, rng: np.random.Generator) -> np.ndarray:
    n = tour.shape[0]
    if n < 2:
        return tour
    i, j = rng.choice(n, size=2, replace=False)
    tour[i], tour[j] = tour[j], tour[i]
    return tour


def relocate_point(tour: np.ndarray, rng: np.random.Generator) -> np.ndarray:
    n = tour.shape[0]
    if n < 3:
        return tour
    i = int(rng.integers(n))
    j = int(rng.integers(n))
    while j == i or j == (i + 1) % n:
        j = int(rng.integers(n))
    city = tour[i]
    remaining = np.delete(tour, i)
    if j > i:
        j -= 1
    return np.insert(remaining, j, city)


def metropolis_accept(delta: float, temperature: float, rng: np.random.Generator) -> bool:
    """Always take a candidate that is no worse; otherwise accept with probability exp(-delta / T)."""
    if delta <= 0:
        return True
    return bool(rng.random() < math.exp(-delta / temperature))


class SimulatedAnnealingSolver(BaseSolver):
    """Simulated annealing from a random tour with geometric cooling.

    The random source is resolved per solve: ``SolveConfig.seed`` first, then the
    generator passed to the constructor, then ``settings.sa_seed``, then fresh
    entropy. The best tour seen is returned, not the final current tour.
    """

    name = "simulated_annealing"
    family = AlgorithmFamily.METAHEURISTIC

    def __init__(
        self,
        settings: Settings | None = None,
        rng: np.random.Generator | None = None,
        initial_temperature: float | None = None,
        cooling_rate: float | None = None,
        min_temperature: float | None = None,
        iterations_per_temperature: int | None = None,
    ):
        super().__init__(settings)
        self.rng = rng
        self.initial_temperature = float(
            initial_temperature if initial_temperature is not None else self.settings.sa_initial_temperature
        )
        self.cooling_rate = float(cooling_rate if cooling_rate is not None else self.settings.sa_cooling_rate)
        self.min_temperature = float(
            min_temperature if min_temperature is not None else self.settings.sa_min_temperature
        )
        self.iterations_per_temperature = int(
            iterations_per_temperature
            if iterations_per_temperature is not None
            else self.settings.sa_iterations_per_temperature
        )
        if not 0.0 < self.cooling_rate < 1.0:
            raise ValueError(f"cooling_rate must be in (0, 1), got {self.cooling_rate}")
        if self.min_temperature <= 0.0:
            raise ValueError(f"min_temperature must be positive, got {self.min_temperature}")
        if self.iterations_per_temperature < 1:
            raise ValueError("iterations_per_temperature must be at least 1")

    def _resolve_rng(self, config: SolveConfig) -> np.random.Generator:
        if config.seed is not None:
            return np.random.default_rng(config.seed)
        if self.rng is not None:
            return self.rng
        return np.random.default_rng(self.settings.sa_seed)

    def mutate(self, tour: np.ndarray, rng: np.random.Generator) -> np.ndarray:
        candidate = tour.copy()
        p = rng.random()
        if p < REVERSAL_CUTOFF:
            return reverse_segment(candidate, rng)
        if p < SWAP_CUTOFF:
            return swap_positions(candidate, rng)
        return relocate_point(candidate, rng)

    def find_tour(self, dist_matrix: np.ndarray, config: SolveConfig) -> TourOutcome:
        rng = self._resolve_rng(config)
        n = dist_matrix.shape[0]

        current = rng.permutation(n)
        current_cost = tour_length(dist_matrix, current)
        best = current.copy()
        best_cost = current_cost

        temperature = self.initial_temperature
        iterations = 0
        accepted = 0
        improved = 0
        levels = 0

        while temperature > self.min_temperature:
            for _ in range(self.iterations_per_temperature):
                candidate = self.mutate(current, rng)
                candidate_cost = tour_length(dist_matrix, candidate)
                iterations += 1
                if metropolis_accept(candidate_cost - current_cost, temperature, rng):
                    current = candidate
                    current_cost = candidate_cost
                    accepted += 1
                    if current_cost < best_cost:
                        best = current.copy()
                        best_cost = current_cost
                        improved += 1
            temperature *= self.cooling_rate
            levels += 1

        logger.debug(
            "simulated_annealing: %d iterations over %d temperature levels, %d accepted, %d new bests",
            iterations,
            levels,
            accepted,
            improved,
        )
        return TourOutcome(
            tour=best.tolist(),
            algorithm=self.name,
            metadata={
                "iterations": iterations,
                "temperature_levels": levels,
                "accepted": accepted,
                "improved": improved,
                "initial_temperature": self.initial_temperature,
            },
        )


__all__ = [
    "SimulatedAnnealingSolver",
    "metropolis_accept",
    "relocate_point",
    "reverse_segment",
    "swap_positions",
]
