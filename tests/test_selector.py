import pytest

from RouteTSP import (
    BruteForceSolver,
    ExactSolver,
    HeldKarpSolver,
    RuleBasedSelector,
    Settings,
    SimulatedAnnealingSolver,
    TwoOptSolver,
    get_selector,
)
from RouteTSP.selectors import resolve_hint


@pytest.fixture
def selector():
    return RuleBasedSelector(exact_max_points=10, heuristic_max_points=25)


@pytest.mark.parametrize(
    "n, expected",
    [
        (0, ExactSolver),
        (5, ExactSolver),
        (10, ExactSolver),
        (11, TwoOptSolver),
        (15, TwoOptSolver),
        (25, TwoOptSolver),
        (26, SimulatedAnnealingSolver),
        (50, SimulatedAnnealingSolver),
    ],
)
def test_size_thresholds(selector, n, expected):
    assert selector.predict(n) is expected


@pytest.mark.parametrize(
    "hint, expected",
    [
        ("heuristic", TwoOptSolver),
        ("HEURISTIC", TwoOptSolver),
        ("  Exact ", ExactSolver),
        ("metaheuristic", SimulatedAnnealingSolver),
        ("genetic", SimulatedAnnealingSolver),
        ("held_karp", HeldKarpSolver),
        ("brute_force", BruteForceSolver),
    ],
)
def test_explicit_hint_wins_regardless_of_size(selector, hint, expected):
    assert selector.predict(3, hint) is expected
    assert selector.predict(500, hint) is expected


@pytest.mark.parametrize("hint", ["quantum", "", None])
def test_unknown_hint_falls_back_to_size(selector, hint):
    assert selector.predict(5, hint) is ExactSolver
    assert selector.predict(50, hint) is SimulatedAnnealingSolver


def test_per_call_thresholds_override_selector(selector):
    assert selector.predict(12, exact_max_points=12) is ExactSolver
    assert selector.predict(30, heuristic_max_points=40) is TwoOptSolver


def test_thresholds_default_to_settings():
    selector = RuleBasedSelector(settings=Settings(exact_max_points=4, heuristic_max_points=6))
    assert selector.predict(4) is ExactSolver
    assert selector.predict(6) is TwoOptSolver
    assert selector.predict(7) is SimulatedAnnealingSolver


def test_resolve_hint():
    assert resolve_hint("two_opt") is TwoOptSolver
    assert resolve_hint("nearest_neighbor_2opt") is TwoOptSolver
    assert resolve_hint("nope") is None


def test_get_selector():
    assert isinstance(get_selector(), RuleBasedSelector)
    with pytest.raises(ValueError):
        get_selector("random_forest")
