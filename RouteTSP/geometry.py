from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from RouteTSP.models import Point


def distance(p: Point, q: Point) -> float:
    """Euclidean distance; 0.0 when either point lacks a coordinate."""
    if not (p.is_complete and q.is_complete):
        return 0.0
    return math.hypot(p.x - q.x, p.y - q.y)


def distance_matrix(points: Sequence[Point]) -> np.ndarray:
    """Full symmetric pairwise distance matrix, shape (n, n)."""
    n = len(points)
    if n == 0:
        return np.zeros((0, 0), dtype=float)
    coords = np.array(
        [[np.nan if p.x is None else p.x, np.nan if p.y is None else p.y] for p in points],
        dtype=float,
    )
    diff = coords[:, None, :] - coords[None, :, :]
    matrix = np.linalg.norm(diff, axis=-1)
    # Absent coordinates surface as NaN; they count as zero-length legs.
    matrix[np.isnan(matrix)] = 0.0
    np.fill_diagonal(matrix, 0.0)
    return matrix


def tour_length(dist_matrix: np.ndarray, tour: Sequence[int]) -> float:
    """Compute tour cost (including return leg)."""
    if len(tour) < 2:
        return 0.0
    order = np.asarray(tour, dtype=np.intp)
    return float(dist_matrix[order, np.roll(order, -1)].sum())


__all__ = ["distance", "distance_matrix", "tour_length"]
