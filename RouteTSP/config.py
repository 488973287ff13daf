"""Runtime configuration for the solver engine."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Solver thresholds and annealing schedule, loaded from ``ROUTETSP_*`` env vars or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="ROUTETSP_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    exact_max_points: int = Field(default=10, ge=0, description="Largest instance routed to the exact solver.")
    heuristic_max_points: int = Field(
        default=25,
        ge=0,
        description="Largest instance routed to the heuristic solver; bigger ones go to simulated annealing.",
    )
    brute_force_max_points: int = Field(
        default=8,
        ge=1,
        le=11,
        description="The exact solver enumerates permutations up to this size and switches to Held-Karp above it.",
    )
    held_karp_max_points: int = Field(
        default=16,
        ge=2,
        le=24,
        description=(
            "Instances above this size are refused by Held-Karp before the memo table is allocated. "
            "Kept below the usual 20-25 point ceiling because the pure-Python DP already takes seconds at 16."
        ),
    )
    sa_initial_temperature: float = Field(default=10000.0, gt=0.0)
    sa_cooling_rate: float = Field(default=0.995, gt=0.0, lt=1.0)
    sa_min_temperature: float = Field(default=1.0, gt=0.0)
    sa_iterations_per_temperature: int = Field(default=100, ge=1)
    sa_seed: Optional[int] = Field(
        default=None,
        description="Seed for the annealing random source; unset means fresh entropy on every solve.",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    @property
    def exact_capacity(self) -> int:
        """Largest instance the exact solver accepts: brute force up to its limit, Held-Karp above."""
        return max(self.brute_force_max_points, self.held_karp_max_points)

    @model_validator(mode="after")
    def _check_ordering(self) -> "Settings":
        if self.heuristic_max_points < self.exact_max_points:
            raise ValueError(
                f"heuristic_max_points ({self.heuristic_max_points}) must be >= "
                f"exact_max_points ({self.exact_max_points})"
            )
        if self.exact_max_points > self.exact_capacity:
            raise ValueError(
                f"exact_max_points ({self.exact_max_points}) exceeds what the exact solver accepts "
                f"(brute_force_max_points={self.brute_force_max_points}, "
                f"held_karp_max_points={self.held_karp_max_points})"
            )
        if self.sa_min_temperature >= self.sa_initial_temperature:
            raise ValueError("sa_min_temperature must be lower than sa_initial_temperature")
        return self


settings = Settings()


__all__ = ["Settings", "settings"]
