from __future__ import annotations

from typing import Optional

from RouteTSP.solvers.base import BaseSolver


class BaseSelector:
    """Interface for RouteTSP selector strategies."""

    def predict(self, n_points: int, algorithm: Optional[str] = None, **overrides) -> type[BaseSolver]:
        raise NotImplementedError


__all__ = ["BaseSelector"]
