from __future__ import annotations

from enum import Enum


class AlgorithmFamily(str, Enum):
    EXACT = "exact"
    HEURISTIC = "heuristic"
    METAHEURISTIC = "metaheuristic"

    @classmethod
    def parse(cls, value: str | None) -> "AlgorithmFamily | None":
        if not value:
            return None
        key = value.strip().lower()
        for family in cls:
            if family.value == key:
                return family
        return None


__all__ = ["AlgorithmFamily"]
