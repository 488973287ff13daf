import math

import numpy as np
import pytest

from RouteTSP import Point, Settings


@pytest.fixture
def square():
    return [Point(0.0, 0.0), Point(1.0, 0.0), Point(1.0, 1.0), Point(0.0, 1.0)]


@pytest.fixture
def random_points():
    def _make(n: int, seed: int = 0, scale: float = 100.0) -> list[Point]:
        rng = np.random.default_rng(seed)
        return [Point(float(x), float(y)) for x, y in rng.random((n, 2)) * scale]

    return _make


@pytest.fixture
def fast_settings():
    # Short annealing schedule so metaheuristic tests stay quick.
    return Settings(
        sa_initial_temperature=100.0,
        sa_cooling_rate=0.9,
        sa_min_temperature=1.0,
        sa_iterations_per_temperature=50,
    )


def cycle_length(route) -> float:
    n = len(route)
    if n < 2:
        return 0.0
    return sum(
        math.hypot(route[i].x - route[(i + 1) % n].x, route[i].y - route[(i + 1) % n].y) for i in range(n)
    )
