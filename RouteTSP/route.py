"""Route accounting: turn an index tour into annotated ``RoutePoint`` legs."""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from RouteTSP.geometry import distance
from RouteTSP.models import Point, RoutePoint


def annotate_route(stops: Iterable[Point | RoutePoint]) -> Tuple[RoutePoint, ...]:
    """Build fresh route points in the given order.

    ``segment_distance[i]`` is the leg from stop ``i`` to stop ``(i + 1) % n`` and
    ``accumulated_distance[i]`` the running sum through that leg, so the last stop
    carries the closed-tour length. With fewer than two stops the distances stay
    ``None``. Passing an already annotated route yields identical values, since only
    the coordinates are read.
    """
    points = [stop.point if isinstance(stop, RoutePoint) else stop for stop in stops]
    n = len(points)
    if n < 2:
        return tuple(RoutePoint(point=p, order=i) for i, p in enumerate(points))

    route: List[RoutePoint] = []
    accumulated = 0.0
    for i, p in enumerate(points):
        segment = distance(p, points[(i + 1) % n])
        accumulated += segment
        route.append(RoutePoint(point=p, order=i, segment_distance=segment, accumulated_distance=accumulated))
    return tuple(route)


def build_route(points: Sequence[Point], tour: Sequence[int]) -> Tuple[RoutePoint, ...]:
    return annotate_route(points[idx] for idx in tour)


def route_length(route: Sequence[RoutePoint]) -> float:
    if len(route) < 2:
        return 0.0
    last = route[-1].accumulated_distance
    return float(last) if last is not None else 0.0


__all__ = ["annotate_route", "build_route", "route_length"]
