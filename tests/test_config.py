import pytest
from pydantic import ValidationError

from RouteTSP import Settings


def test_defaults():
    s = Settings(_env_file=None)
    assert s.exact_max_points == 10
    assert s.heuristic_max_points == 25
    assert s.brute_force_max_points == 8
    assert s.held_karp_max_points == 16
    assert s.sa_initial_temperature == 10000.0
    assert s.sa_cooling_rate == 0.995
    assert s.sa_min_temperature == 1.0
    assert s.sa_iterations_per_temperature == 100
    assert s.sa_seed is None


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("ROUTETSP_EXACT_MAX_POINTS", "12")
    monkeypatch.setenv("ROUTETSP_HEURISTIC_MAX_POINTS", "40")
    monkeypatch.setenv("ROUTETSP_SA_SEED", "7")
    s = Settings(_env_file=None)
    assert s.exact_max_points == 12
    assert s.heuristic_max_points == 40
    assert s.sa_seed == 7


def test_threshold_ordering_is_validated():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, exact_max_points=30, heuristic_max_points=20)


@pytest.mark.parametrize("rate", [0.0, 1.0, 1.5])
def test_cooling_rate_bounds(rate):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, sa_cooling_rate=rate)


def test_temperature_ordering_is_validated():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, sa_initial_temperature=1.0, sa_min_temperature=5.0)


def test_held_karp_default_stays_below_theoretical_ceiling():
    field = Settings.model_fields["held_karp_max_points"]
    assert field.default == 16
    assert field.default < 20
    assert "ceiling" in field.description


@pytest.mark.parametrize(
    "overrides",
    [
        {"exact_max_points": 20},
        {"exact_max_points": 12, "held_karp_max_points": 10},
    ],
)
def test_exact_threshold_cannot_outrun_exact_solver(overrides):
    with pytest.raises(ValidationError, match="exact_max_points"):
        Settings(_env_file=None, **overrides)


def test_exact_capacity_covers_both_strategies():
    s = Settings(_env_file=None, brute_force_max_points=8, held_karp_max_points=12, exact_max_points=12)
    assert s.exact_capacity == 12
