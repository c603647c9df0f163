from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Optional, Union

from .config import DEFAULT_LIMITS, ElevatorLimits
from .states import DoorState, MovementState, RejectionReason


class InvariantViolation(RuntimeError):
    """Raised when an elevator value breaks the range or direction rules."""


@dataclass(frozen=True)
class Outcome:
    """Result of a single operation; truthy when the operation was applied."""

    accepted: bool
    reason: Optional[RejectionReason] = None

    @classmethod
    def ok(cls) -> "Outcome":
        return cls(accepted=True)

    @classmethod
    def rejected(cls, reason: RejectionReason) -> "Outcome":
        return cls(accepted=False, reason=reason)

    def __bool__(self) -> bool:
        return self.accepted


@dataclass(frozen=True)
class Elevator:
    """Position, direction and door state of a single car."""

    current_floor: int
    target_floor: int
    movement_state: MovementState = MovementState.IDLE
    door_state: DoorState = DoorState.CLOSED

    @classmethod
    def initial(cls, limits: ElevatorLimits = DEFAULT_LIMITS) -> "Elevator":
        return cls(current_floor=limits.min_floor, target_floor=limits.min_floor)

    @property
    def at_target(self) -> bool:
        return self.current_floor == self.target_floor

    def evolve(self, **changes) -> "Elevator":
        return replace(self, **changes)

    def check_invariants(self, limits: ElevatorLimits = DEFAULT_LIMITS) -> None:
        for name in ("current_floor", "target_floor"):
            floor = getattr(self, name)
            if not limits.contains(floor):
                raise InvariantViolation(
                    f"{name}={floor} outside [{limits.min_floor}, {limits.max_floor}]"
                )
        if self.movement_state is MovementState.MOVING_UP and not self.current_floor < self.target_floor:
            raise InvariantViolation(f"moving up from {self.current_floor} to {self.target_floor}")
        if self.movement_state is MovementState.MOVING_DOWN and not self.current_floor > self.target_floor:
            raise InvariantViolation(f"moving down from {self.current_floor} to {self.target_floor}")
        if self.movement_state.moving and self.door_state is DoorState.OPEN:
            raise InvariantViolation("door open while moving")

    def snapshot(self) -> Dict[str, Union[int, str]]:
        return {
            "current_floor": self.current_floor,
            "target_floor": self.target_floor,
            "movement_state": self.movement_state.value,
            "door_state": self.door_state.value,
        }
