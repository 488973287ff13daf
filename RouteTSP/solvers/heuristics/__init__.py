from RouteTSP.solvers.heuristics.nearest_neighbor import NearestNeighborSolver, nearest_neighbor_tour
from RouteTSP.solvers.heuristics.two_opt import TwoOptSolver, two_opt_improve

__all__ = [
    "NearestNeighborSolver",
    "TwoOptSolver",
    "nearest_neighbor_tour",
    "two_opt_improve",
]
