from RouteTSP.config import Settings, settings
from RouteTSP.core import RouteTSP, solve
from RouteTSP.geometry import distance, distance_matrix, tour_length
from RouteTSP.models import InvalidPointError, Point, RoutePoint, SolveConfig, SolveResult, coerce_points
from RouteTSP.route import annotate_route, build_route, route_length
from RouteTSP.selectors import BaseSelector, RuleBasedSelector, get_selector
from RouteTSP.solvers import (
    BaseSolver,
    BruteForceSolver,
    ExactSolver,
    HeldKarpSolver,
    NearestNeighborSolver,
    ProblemSizeExceeded,
    SOLVER_FAMILIES,
    SOLVER_REGISTRY,
    SOLVER_SPECS,
    SimulatedAnnealingSolver,
    SolverError,
    TwoOptSolver,
    get_solver,
)
from RouteTSP.utils.taxonomy import AlgorithmFamily

__all__ = [
    "AlgorithmFamily",
    "BaseSelector",
    "BaseSolver",
    "BruteForceSolver",
    "ExactSolver",
    "HeldKarpSolver",
    "InvalidPointError",
    "NearestNeighborSolver",
    "Point",
    "ProblemSizeExceeded",
    "RoutePoint",
    "RouteTSP",
    "RuleBasedSelector",
    "SOLVER_FAMILIES",
    "SOLVER_REGISTRY",
    "SOLVER_SPECS",
    "Settings",
    "SimulatedAnnealingSolver",
    "SolveConfig",
    "SolveResult",
    "SolverError",
    "TwoOptSolver",
    "annotate_route",
    "build_route",
    "coerce_points",
    "distance",
    "distance_matrix",
    "get_selector",
    "get_solver",
    "route_length",
    "settings",
    "solve",
    "tour_length",
]
