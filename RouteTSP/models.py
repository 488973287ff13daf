from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple


class InvalidPointError(ValueError):
    """Raised when point data cannot be interpreted as a 2-D coordinate."""


def _coerce_coordinate(value: Any, axis: str) -> Optional[float]:
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidPointError(f"Coordinate {axis} must be numeric, got bool")
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidPointError(f"Coordinate {axis} must be numeric, got {value!r}") from exc
    if not math.isfinite(number):
        raise InvalidPointError(f"Coordinate {axis} must be finite, got {number!r}")
    return number


@dataclass(frozen=True)
class Point:
    """Immutable 2-D coordinate. ``label`` is carried through untouched and ignored by equality."""

    x: Optional[float]
    y: Optional[float]
    label: Optional[str] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", _coerce_coordinate(self.x, "x"))
        object.__setattr__(self, "y", _coerce_coordinate(self.y, "y"))

    @property
    def is_complete(self) -> bool:
        return self.x is not None and self.y is not None

    @classmethod
    def from_value(cls, value: Any) -> "Point":
        if isinstance(value, Point):
            return value
        if isinstance(value, RoutePoint):
            return value.point
        if isinstance(value, Mapping):
            if "x" not in value or "y" not in value:
                raise InvalidPointError(f"Point mapping needs 'x' and 'y' keys, got {sorted(value)}")
            label = value.get("label", value.get("address"))
            return cls(value["x"], value["y"], None if label is None else str(label))
        if isinstance(value, (str, bytes)):
            raise InvalidPointError(f"Cannot interpret {value!r} as a point")
        try:
            items = list(value)
        except TypeError as exc:
            raise InvalidPointError(f"Cannot interpret {value!r} as a point") from exc
        if len(items) == 2:
            return cls(items[0], items[1])
        if len(items) == 3:
            return cls(items[0], items[1], None if items[2] is None else str(items[2]))
        raise InvalidPointError(f"Expected (x, y) or (x, y, label), got {len(items)} values")


def coerce_points(values: Iterable[Any]) -> List[Point]:
    """Normalise caller input into a fresh list of ``Point`` objects."""
    if values is None:
        raise InvalidPointError("Point list is required")
    points: List[Point] = []
    for index, value in enumerate(values):
        try:
            points.append(Point.from_value(value))
        except InvalidPointError as exc:
            raise InvalidPointError(f"Invalid point at index {index}: {exc}") from exc
    return points


@dataclass(frozen=True)
class RoutePoint:
    """A point placed in a solved tour, with the leg to the next stop and the distance travelled so far."""

    point: Point
    order: int
    segment_distance: Optional[float] = None
    accumulated_distance: Optional[float] = None

    @property
    def x(self) -> Optional[float]:
        return self.point.x

    @property
    def y(self) -> Optional[float]:
        return self.point.y

    @property
    def label(self) -> Optional[str]:
        return self.point.label

    def to_dict(self) -> Dict[str, Any]:
        return {
            "x": self.x,
            "y": self.y,
            "order": self.order,
            "label": self.label,
            "segment_distance": self.segment_distance,
            "accumulated_distance": self.accumulated_distance,
        }


@dataclass(frozen=True)
class SolveResult:
    """Container capturing the outcome of a solve."""

    route: Tuple[RoutePoint, ...]
    total_distance: float
    execution_time_ms: int
    algorithm_name: str
    tour: Tuple[int, ...] = ()
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "route": [rp.to_dict() for rp in self.route],
            "total_distance": self.total_distance,
            "execution_time_ms": self.execution_time_ms,
            "algorithm_name": self.algorithm_name,
            "tour": list(self.tour),
            "metadata": dict(self.metadata),
        }


@dataclass(frozen=True)
class SolveConfig:
    """Per-call overrides. ``None`` means use the configured default."""

    algorithm: Optional[str] = None
    seed: Optional[int] = None
    exact_max_points: Optional[int] = None
    heuristic_max_points: Optional[int] = None


__all__ = [
    "InvalidPointError",
    "Point",
    "RoutePoint",
    "SolveConfig",
    "SolveResult",
    "coerce_points",
]
