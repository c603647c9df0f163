"""Transition table for the single-car controller.

Every legal move of the state machine is listed in ``TRANSITIONS``, keyed by
the current movement state and the requested operation. Handlers are pure:
they receive the current :class:`Elevator` and return the successor together
with an :class:`Outcome`. A rejected operation always returns the input value
unchanged.

Reachable (movement, door) pairs are ``(idle, closed)`` at start,
``(moving_up, closed)``, ``(moving_down, closed)`` and ``(idle, open)`` after
an arrival.
"""
from __future__ import annotations

import logging
from typing import Callable, Dict, Optional, Tuple

from .config import DEFAULT_LIMITS, ElevatorLimits
from .elevator import Elevator, Outcome
from .states import DoorState, MovementState, Operation, RejectionReason

logger = logging.getLogger(__name__)

TransitionResult = Tuple[Elevator, Outcome]
Handler = Callable[[Elevator, Optional[int], ElevatorLimits], TransitionResult]


def _reject(reason: RejectionReason) -> Handler:
    def handler(elevator: Elevator, floor: Optional[int], limits: ElevatorLimits) -> TransitionResult:
        return elevator, Outcome.rejected(reason)

    return handler


def _set_target(elevator: Elevator, floor: Optional[int], limits: ElevatorLimits) -> TransitionResult:
    if not limits.contains(floor):
        return elevator, Outcome.rejected(RejectionReason.FLOOR_OUT_OF_RANGE)
    if floor == elevator.current_floor:
        return elevator, Outcome.rejected(RejectionReason.ALREADY_AT_FLOOR)
    movement = MovementState.MOVING_UP if floor > elevator.current_floor else MovementState.MOVING_DOWN
    # Overrides an open door and any trip still in progress.
    return (
        elevator.evolve(target_floor=floor, movement_state=movement, door_state=DoorState.CLOSED),
        Outcome.ok(),
    )


def _advance(delta: int) -> Handler:
    def handler(elevator: Elevator, floor: Optional[int], limits: ElevatorLimits) -> TransitionResult:
        remaining = elevator.target_floor - elevator.current_floor
        if remaining == 0:
            return elevator, Outcome.rejected(RejectionReason.ALREADY_AT_TARGET)
        if remaining * delta < 0:
            # Direction disagrees with the floors; only reachable from a hand-built value.
            wrong_way = RejectionReason.NOT_MOVING_UP if delta > 0 else RejectionReason.NOT_MOVING_DOWN
            return elevator, Outcome.rejected(wrong_way)
        moved = elevator.evolve(current_floor=elevator.current_floor + delta)
        if moved.at_target:
            moved = moved.evolve(movement_state=MovementState.IDLE, door_state=DoorState.OPEN)
        return moved, Outcome.ok()

    return handler


def _settle(elevator: Elevator, floor: Optional[int], limits: ElevatorLimits) -> TransitionResult:
    # Guarded by floor equality only; the movement state is not consulted.
    if not elevator.at_target:
        return elevator, Outcome.rejected(RejectionReason.FLOORS_DIFFER)
    return elevator.evolve(movement_state=MovementState.IDLE, door_state=DoorState.CLOSED), Outcome.ok()


TRANSITIONS: Dict[Tuple[MovementState, Operation], Handler] = {
    (MovementState.IDLE, Operation.SET_TARGET_FLOOR): _set_target,
    (MovementState.IDLE, Operation.STEP_UP): _reject(RejectionReason.NOT_MOVING_UP),
    (MovementState.IDLE, Operation.STEP_DOWN): _reject(RejectionReason.NOT_MOVING_DOWN),
    (MovementState.IDLE, Operation.SETTLE_IDLE): _settle,
    (MovementState.MOVING_UP, Operation.SET_TARGET_FLOOR): _set_target,
    (MovementState.MOVING_UP, Operation.STEP_UP): _advance(+1),
    (MovementState.MOVING_UP, Operation.STEP_DOWN): _reject(RejectionReason.NOT_MOVING_DOWN),
    (MovementState.MOVING_UP, Operation.SETTLE_IDLE): _settle,
    (MovementState.MOVING_DOWN, Operation.SET_TARGET_FLOOR): _set_target,
    (MovementState.MOVING_DOWN, Operation.STEP_UP): _reject(RejectionReason.NOT_MOVING_UP),
    (MovementState.MOVING_DOWN, Operation.STEP_DOWN): _advance(-1),
    (MovementState.MOVING_DOWN, Operation.SETTLE_IDLE): _settle,
}


def _validate_floor(floor: Optional[int]) -> int:
    if isinstance(floor, bool) or not isinstance(floor, int):
        raise TypeError(f"floor must be an int, got {type(floor).__name__}")
    return floor


def transition(
    elevator: Elevator,
    operation: Operation,
    floor: Optional[int] = None,
    limits: ElevatorLimits = DEFAULT_LIMITS,
) -> TransitionResult:
    """Apply ``operation`` to ``elevator`` and return ``(successor, outcome)``.

    ``floor`` is only read by :attr:`Operation.SET_TARGET_FLOOR`. Raises
    :class:`TypeError` when that operation receives a non-integer floor and
    :class:`~controller.elevator.InvariantViolation` if a handler ever yields
    an invalid successor.
    """

    operation = Operation(operation)
    if operation is Operation.SET_TARGET_FLOOR:
        floor = _validate_floor(floor)
    handler = TRANSITIONS[(elevator.movement_state, operation)]
    successor, outcome = handler(elevator, floor, limits)
    if not outcome:
        logger.debug("%s rejected (%s) at %s", operation.value, outcome.reason.value, elevator.snapshot())
        return elevator, outcome

    successor.check_invariants(limits)
    logger.debug("%s: %s -> %s", operation.value, elevator.snapshot(), successor.snapshot())
    if successor.door_state is DoorState.OPEN and elevator.door_state is DoorState.CLOSED:
        logger.info("Arrived at floor %d", successor.current_floor)
    return successor, outcome
