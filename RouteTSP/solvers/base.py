from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Sequence, Type

import numpy as np

from RouteTSP.config import Settings, settings as default_settings
from RouteTSP.geometry import distance_matrix
from RouteTSP.models import Point, SolveConfig, SolveResult, coerce_points
from RouteTSP.route import build_route, route_length
from RouteTSP.utils.taxonomy import AlgorithmFamily

logger = logging.getLogger(__name__)


class SolverError(RuntimeError):
    """Raised when a solver cannot produce a valid tour."""


class ProblemSizeExceeded(SolverError):
    """Raised when an instance is too large for an exponential-time solver."""

    def __init__(self, solver: str, n_points: int, limit: int):
        super().__init__(f"{solver} accepts at most {limit} points, got {n_points}")
        self.solver = solver
        self.n_points = n_points
        self.limit = limit


@dataclass
class TourOutcome:
    """Index tour found by a solver, plus the name of the strategy that produced it."""

    tour: List[int]
    algorithm: str
    metadata: Dict[str, Any] = field(default_factory=dict)


def current_time() -> float:
    return time.perf_counter()


def elapsed_ms(start_time: float) -> int:
    return max(0, int(round((current_time() - start_time) * 1000)))


def ensure_permutation(tour: Sequence[int], n: int) -> List[int]:
    checked = [int(idx) for idx in tour]
    if len(checked) != n or sorted(checked) != list(range(n)):
        raise SolverError(f"Solver returned an invalid tour for {n} points: {checked!r}")
    return checked


@dataclass(frozen=True)
class SolverSpec:
    """Metadata describing a solver implementation."""

    name: str
    cls: Type["BaseSolver"]
    family: AlgorithmFamily


class BaseSolver:
    """Common interface for RouteTSP solvers.

    Subclasses implement :meth:`find_tour`; :meth:`solve` handles point coercion,
    degenerate instances, tour validation, route accounting and timing.
    """

    name: str
    family: AlgorithmFamily

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or default_settings

    @property
    def degenerate_name(self) -> str:
        return self.name

    def solve(self, points: Iterable[Any], config: SolveConfig | None = None) -> SolveResult:
        """Solve a closed tour over ``points``."""
        config = config or SolveConfig()
        pts: List[Point] = coerce_points(points)
        start_time = current_time()
        n = len(pts)

        if n < 2:
            outcome = TourOutcome(tour=list(range(n)), algorithm=self.degenerate_name)
        else:
            dist_matrix = distance_matrix(pts)
            logger.debug("%s: solving %d points", self.name, n)
            outcome = self.find_tour(dist_matrix, config)

        tour = ensure_permutation(outcome.tour, n)
        route = build_route(pts, tour)
        result = SolveResult(
            route=route,
            total_distance=route_length(route),
            execution_time_ms=elapsed_ms(start_time),
            algorithm_name=outcome.algorithm,
            tour=tuple(tour),
            metadata=dict(outcome.metadata),
        )
        logger.debug(
            "%s: %d points -> %.4f in %d ms",
            result.algorithm_name,
            n,
            result.total_distance,
            result.execution_time_ms,
        )
        return result

    def find_tour(self, dist_matrix: np.ndarray, config: SolveConfig) -> TourOutcome:  # noqa: D401
        """Return a tour over a distance matrix with at least two rows."""
        raise NotImplementedError

    def __call__(self, points: Iterable[Any], config: SolveConfig | None = None) -> SolveResult:
        return self.solve(points, config=config)


__all__ = [
    "AlgorithmFamily",
    "BaseSolver",
    "ProblemSizeExceeded",
    "SolverError",
    "SolverSpec",
    "TourOutcome",
    "current_time",
    "elapsed_ms",
    "ensure_permutation",
]
