from __future__ import annotations

from enum import Enum


class MovementState(str, Enum):
    """Travel mode of the car."""

    IDLE = "idle"
    MOVING_UP = "moving_up"
    MOVING_DOWN = "moving_down"

    @property
    def moving(self) -> bool:
        return self is not MovementState.IDLE


class DoorState(str, Enum):
    OPEN = "open"
    CLOSED = "closed"


class Operation(str, Enum):
    """Caller-driven operations understood by the transition table."""

    SET_TARGET_FLOOR = "set_target_floor"
    STEP_UP = "step_up"
    STEP_DOWN = "step_down"
    SETTLE_IDLE = "settle_idle"


class RejectionReason(str, Enum):
    FLOOR_OUT_OF_RANGE = "floor_out_of_range"
    ALREADY_AT_FLOOR = "already_at_floor"
    NOT_MOVING_UP = "not_moving_up"
    NOT_MOVING_DOWN = "not_moving_down"
    ALREADY_AT_TARGET = "already_at_target"
    FLOORS_DIFFER = "floors_differ"
