import itertools
import math

import pytest

from RouteTSP import (
    BruteForceSolver,
    ExactSolver,
    HeldKarpSolver,
    Point,
    ProblemSizeExceeded,
    Settings,
    distance_matrix,
    tour_length,
)

from tests.conftest import cycle_length


def test_square_is_solved_optimally(square):
    result = ExactSolver().solve(square)
    assert result.total_distance == pytest.approx(4.0)
    assert result.algorithm_name == "brute_force"
    assert list(result.tour) == [0, 1, 2, 3]


def test_small_instance_matches_route():
    points = [Point(0.0, 0.0), Point(3.0, 4.0), Point(6.0, 0.0), Point(3.0, -4.0), Point(-3.0, 2.0)]
    result = ExactSolver().solve(points)
    assert len(result.route) == 5
    assert set(rp.point for rp in result.route) == set(points)
    assert result.total_distance > 0
    assert result.execution_time_ms >= 0
    assert result.total_distance == pytest.approx(cycle_length(result.route))
    assert result.route[-1].accumulated_distance == pytest.approx(result.total_distance)


def test_two_points_go_there_and_back():
    result = ExactSolver().solve([Point(0.0, 0.0), Point(1.0, 1.0)])
    assert len(result.route) == 2
    assert result.total_distance == pytest.approx(2.0 * math.sqrt(2.0))


@pytest.mark.parametrize("points", [[], [Point(0.0, 0.0)]])
def test_degenerate_instances(points):
    result = ExactSolver().solve(points)
    assert [rp.point for rp in result.route] == points
    assert result.total_distance == 0.0
    assert result.algorithm_name == "brute_force"


def test_brute_force_is_optimal_against_enumeration(random_points):
    points = random_points(7, seed=11)
    matrix = distance_matrix(points)
    expected = min(tour_length(matrix, [0, *perm]) for perm in itertools.permutations(range(1, 7)))
    result = BruteForceSolver().solve(points)
    assert result.total_distance == pytest.approx(expected)
    assert result.metadata["permutations_checked"] == math.factorial(6)


def test_exact_switches_to_held_karp_above_brute_force_limit(random_points):
    result = ExactSolver().solve(random_points(10, seed=5))
    assert result.algorithm_name == "held_karp"
    assert sorted(result.tour) == list(range(10))
    assert result.tour[0] == 0


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_held_karp_agrees_with_brute_force(random_points, seed):
    points = random_points(9, seed=seed)
    brute = BruteForceSolver(Settings(brute_force_max_points=9)).solve(points)
    dp = HeldKarpSolver().solve(points)
    assert dp.algorithm_name == "held_karp"
    assert dp.total_distance == pytest.approx(brute.total_distance)
    assert dp.metadata["optimal_cost"] == pytest.approx(dp.total_distance)


def test_held_karp_handles_tiny_instances(square):
    assert HeldKarpSolver().solve(square).total_distance == pytest.approx(4.0)
    two = HeldKarpSolver().solve([Point(0, 0), Point(0, 2)])
    assert two.total_distance == pytest.approx(4.0)


def test_held_karp_refuses_oversized_instances(random_points):
    solver = HeldKarpSolver(Settings(held_karp_max_points=6))
    with pytest.raises(ProblemSizeExceeded) as excinfo:
        solver.solve(random_points(7))
    assert excinfo.value.limit == 6
    assert excinfo.value.n_points == 7


def test_brute_force_refuses_oversized_instances(random_points):
    with pytest.raises(ProblemSizeExceeded):
        BruteForceSolver().solve(random_points(9))


def test_duplicate_points_are_kept():
    points = [Point(1, 1), Point(1, 1), Point(4, 5)]
    result = ExactSolver().solve(points)
    assert len(result.route) == 3
    assert result.total_distance == pytest.approx(10.0)
