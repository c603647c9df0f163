from __future__ import annotations

import logging
from typing import Dict, Optional, Union

from .config import DEFAULT_LIMITS, ElevatorLimits
from .elevator import Elevator, Outcome
from .states import DoorState, MovementState, Operation
from .transitions import transition

logger = logging.getLogger(__name__)


class ElevatorController:
    """Owns one car and advances it through caller-driven steps.

    Operations never raise for a request the car cannot honour. They return
    an :class:`Outcome` and leave the state untouched instead, so callers that
    ignore the return value see a silent no-op.
    """

    def __init__(self, limits: Optional[ElevatorLimits] = None) -> None:
        self.limits = limits or DEFAULT_LIMITS
        self.initialize()

    def initialize(self) -> None:
        self._state = Elevator.initial(self.limits)
        logger.debug("Elevator initialized at %s", self._state.snapshot())

    @property
    def state(self) -> Elevator:
        return self._state

    @property
    def current_floor(self) -> int:
        return self._state.current_floor

    @property
    def target_floor(self) -> int:
        return self._state.target_floor

    @property
    def movement_state(self) -> MovementState:
        return self._state.movement_state

    @property
    def door_state(self) -> DoorState:
        return self._state.door_state

    def set_target_floor(self, floor: int) -> Outcome:
        return self._apply(Operation.SET_TARGET_FLOOR, floor)

    def step_up(self) -> Outcome:
        return self._apply(Operation.STEP_UP)

    def step_down(self) -> Outcome:
        return self._apply(Operation.STEP_DOWN)

    def settle_idle(self) -> Outcome:
        return self._apply(Operation.SETTLE_IDLE)

    def apply(self, operation: Union[Operation, str], floor: Optional[int] = None) -> Outcome:
        """Dispatch an operation by name, e.g. from a scripted scenario."""
        return self._apply(Operation(operation), floor)

    def _apply(self, operation: Operation, floor: Optional[int] = None) -> Outcome:
        self._state, outcome = transition(self._state, operation, floor, self.limits)
        return outcome

    def snapshot(self) -> Dict[str, Union[int, str]]:
        return self._state.snapshot()

    def __repr__(self) -> str:  # pragma: no cover - convenience
        return f"ElevatorController({self._state!r})"
