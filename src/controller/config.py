from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ElevatorLimits:
    """Floor range served by the car."""

    min_floor: int = 1
    max_floor: int = 10

    def __post_init__(self) -> None:
        if self.min_floor >= self.max_floor:
            raise ValueError(
                f"min_floor ({self.min_floor}) must be below max_floor ({self.max_floor})"
            )

    def contains(self, floor: int) -> bool:
        return self.min_floor <= floor <= self.max_floor


DEFAULT_LIMITS = ElevatorLimits()
