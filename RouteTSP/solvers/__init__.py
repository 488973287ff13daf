from __future__ import annotations

from RouteTSP.config import Settings
from RouteTSP.solvers.base import (
    BaseSolver,
    ProblemSizeExceeded,
    SolverError,
    SolverSpec,
    TourOutcome,
)
from RouteTSP.solvers.exact import BruteForceSolver, ExactSolver, HeldKarpSolver
from RouteTSP.solvers.heuristics import NearestNeighborSolver, TwoOptSolver
from RouteTSP.solvers.meta import SimulatedAnnealingSolver
from RouteTSP.utils.taxonomy import AlgorithmFamily

SOLVER_SPECS: dict[str, SolverSpec] = {
    cls.name: SolverSpec(name=cls.name, cls=cls, family=cls.family)
    for cls in (
        ExactSolver,
        BruteForceSolver,
        HeldKarpSolver,
        NearestNeighborSolver,
        TwoOptSolver,
        SimulatedAnnealingSolver,
    )
}

SOLVER_REGISTRY: dict[str, type[BaseSolver]] = {name: spec.cls for name, spec in SOLVER_SPECS.items()}
SOLVER_FAMILIES: dict[str, AlgorithmFamily] = {name: spec.family for name, spec in SOLVER_SPECS.items()}

# Solver each family resolves to when picked by size or by family name.
FAMILY_SOLVERS: dict[AlgorithmFamily, type[BaseSolver]] = {
    AlgorithmFamily.EXACT: ExactSolver,
    AlgorithmFamily.HEURISTIC: TwoOptSolver,
    AlgorithmFamily.METAHEURISTIC: SimulatedAnnealingSolver,
}


def get_solver(name: str, settings: Settings | None = None) -> BaseSolver:
    solver_cls = SOLVER_REGISTRY.get(name)
    if solver_cls is None:
        raise KeyError(f"Unknown solver: {name}")
    return solver_cls(settings)


__all__ = [
    "AlgorithmFamily",
    "BaseSolver",
    "BruteForceSolver",
    "ExactSolver",
    "FAMILY_SOLVERS",
    "HeldKarpSolver",
    "NearestNeighborSolver",
    "ProblemSizeExceeded",
    "SOLVER_FAMILIES",
    "SOLVER_REGISTRY",
    "SOLVER_SPECS",
    "SimulatedAnnealingSolver",
    "SolverError",
    "SolverSpec",
    "TourOutcome",
    "TwoOptSolver",
    "get_solver",
]
