from RouteTSP.solvers.exact.brute_force import BruteForceSolver
from RouteTSP.solvers.exact.exact import ExactSolver
from RouteTSP.solvers.exact.held_karp import HeldKarpSolver

__all__ = [
    "BruteForceSolver",
    "ExactSolver",
    "HeldKarpSolver",
]
