from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Iterable

from RouteTSP.config import Settings, settings as default_settings
from RouteTSP.models import SolveConfig, SolveResult, coerce_points
from RouteTSP.selectors import BaseSelector, RuleBasedSelector, resolve_hint

logger = logging.getLogger(__name__)


class RouteTSP:
    """End-to-end RouteTSP pipeline: selector -> solver -> annotated route."""

    def __init__(self, selector: BaseSelector | None = None, settings: Settings | None = None):
        self.settings = settings or default_settings
        self.selector = selector if selector is not None else RuleBasedSelector(settings=self.settings)

    def solve(self, points: Iterable[Any], config: SolveConfig | None = None) -> SolveResult:
        config = config or SolveConfig()
        pts = coerce_points(points)

        if config.algorithm and resolve_hint(config.algorithm) is None:
            logger.warning("Unknown algorithm %r requested; selecting by size instead", config.algorithm)

        if resolve_hint(config.algorithm) is None:
            self._check_exact_threshold(config)

        solver_cls = self.selector.predict(
            len(pts),
            config.algorithm,
            exact_max_points=config.exact_max_points,
            heuristic_max_points=config.heuristic_max_points,
        )
        solver = solver_cls(self.settings)
        logger.info("Solving %d points with %s", len(pts), solver_cls.name)

        result = solver.solve(pts, config=config)
        metadata = dict(result.metadata)
        metadata.update(
            {
                "selected_solver": solver_cls.name,
                "selected_family": solver_cls.family.value,
                "point_count": len(pts),
            }
        )
        logger.info(
            "%s finished: distance=%.4f time=%dms",
            result.algorithm_name,
            result.total_distance,
            result.execution_time_ms,
        )
        return replace(result, metadata=metadata)

    def _check_exact_threshold(self, config: SolveConfig) -> None:
        threshold = config.exact_max_points
        if threshold is None:
            threshold = getattr(self.selector, "exact_max_points", None)
        if threshold is None:
            return
        capacity = self.settings.exact_capacity
        if threshold > capacity:
            raise ValueError(
                f"exact_max_points={threshold} would route instances the exact solver refuses; "
                f"it accepts at most {capacity} points (raise held_karp_max_points or lower the threshold)"
            )


def solve(points: Iterable[Any], config: SolveConfig | None = None) -> SolveResult:
    """Solve with a default pipeline."""
    return RouteTSP().solve(points, config=config)


__all__ = ["RouteTSP", "solve"]
