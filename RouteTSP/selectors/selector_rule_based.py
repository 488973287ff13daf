from __future__ import annotations

from typing import Optional

from RouteTSP.config import Settings, settings as default_settings
from RouteTSP.selectors.base import BaseSelector
from RouteTSP.solvers import FAMILY_SOLVERS, SOLVER_REGISTRY, BaseSolver
from RouteTSP.utils.taxonomy import AlgorithmFamily

# Names accepted as hints besides the family names and concrete solver names.
HINT_ALIASES: dict[str, AlgorithmFamily] = {
    "genetic": AlgorithmFamily.METAHEURISTIC,
    "two_opt": AlgorithmFamily.HEURISTIC,
}


def resolve_hint(algorithm: Optional[str]) -> Optional[type[BaseSolver]]:
    """Map an explicit algorithm name (case-insensitive) to a solver, or None if it is not known."""
    if algorithm is None:
        return None
    key = algorithm.strip().lower()
    if not key:
        return None
    family = AlgorithmFamily.parse(key) or HINT_ALIASES.get(key)
    if family is not None:
        return FAMILY_SOLVERS[family]
    return SOLVER_REGISTRY.get(key)


class RuleBasedSelector(BaseSelector):
    """Size thresholds with an explicit-name override.

    ``n <= exact_max_points`` -> exact, ``n <= heuristic_max_points`` -> heuristic,
    anything larger -> simulated annealing. A recognised algorithm name wins
    regardless of size; an unrecognised one is ignored.
    """

    def __init__(
        self,
        exact_max_points: Optional[int] = None,
        heuristic_max_points: Optional[int] = None,
        settings: Settings | None = None,
    ):
        settings = settings or default_settings
        self.exact_max_points = settings.exact_max_points if exact_max_points is None else int(exact_max_points)
        self.heuristic_max_points = (
            settings.heuristic_max_points if heuristic_max_points is None else int(heuristic_max_points)
        )

    def family_for(
        self,
        n_points: int,
        exact_max_points: Optional[int] = None,
        heuristic_max_points: Optional[int] = None,
    ) -> AlgorithmFamily:
        exact_max = self.exact_max_points if exact_max_points is None else exact_max_points
        heuristic_max = self.heuristic_max_points if heuristic_max_points is None else heuristic_max_points
        if n_points <= exact_max:
            return AlgorithmFamily.EXACT
        if n_points <= heuristic_max:
            return AlgorithmFamily.HEURISTIC
        return AlgorithmFamily.METAHEURISTIC

    def predict(
        self,
        n_points: int,
        algorithm: Optional[str] = None,
        exact_max_points: Optional[int] = None,
        heuristic_max_points: Optional[int] = None,
    ) -> type[BaseSolver]:
        hinted = resolve_hint(algorithm)
        if hinted is not None:
            return hinted
        return FAMILY_SOLVERS[self.family_for(n_points, exact_max_points, heuristic_max_points)]


__all__ = ["HINT_ALIASES", "RuleBasedSelector", "resolve_hint"]
