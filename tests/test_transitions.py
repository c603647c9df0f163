import logging

import pytest

from controller import (
    DoorState,
    Elevator,
    ElevatorLimits,
    InvariantViolation,
    MovementState,
    Operation,
    RejectionReason,
    transition,
)
from controller.transitions import TRANSITIONS


def test_table_covers_every_state_and_operation():
    expected = {(state, op) for state in MovementState for op in Operation}
    assert set(TRANSITIONS) == expected


def test_transition_is_pure():
    elevator = Elevator.initial()
    successor, outcome = transition(elevator, Operation.SET_TARGET_FLOOR, 4)
    assert outcome.accepted
    assert elevator == Elevator(current_floor=1, target_floor=1)
    assert successor == Elevator(
        current_floor=1,
        target_floor=4,
        movement_state=MovementState.MOVING_UP,
        door_state=DoorState.CLOSED,
    )


def test_rejection_returns_same_value():
    elevator = Elevator.initial()
    successor, outcome = transition(elevator, Operation.STEP_DOWN)
    assert successor is elevator
    assert outcome.reason is RejectionReason.NOT_MOVING_DOWN


def test_settle_is_permissive_about_movement_state():
    # Only reachable by constructing the value directly.
    elevator = Elevator(current_floor=3, target_floor=3, movement_state=MovementState.MOVING_UP)
    successor, outcome = transition(elevator, Operation.SETTLE_IDLE)
    assert outcome
    assert successor.movement_state is MovementState.IDLE
    assert successor.door_state is DoorState.CLOSED


def test_step_with_stale_direction_reports_at_target():
    elevator = Elevator(current_floor=3, target_floor=3, movement_state=MovementState.MOVING_DOWN)
    successor, outcome = transition(elevator, Operation.STEP_DOWN)
    assert outcome.reason is RejectionReason.ALREADY_AT_TARGET
    assert successor is elevator


@pytest.mark.parametrize(
    "elevator,operation,reason",
    [
        (Elevator(5, 3, MovementState.MOVING_UP), Operation.STEP_UP, RejectionReason.NOT_MOVING_UP),
        (Elevator(3, 5, MovementState.MOVING_DOWN), Operation.STEP_DOWN, RejectionReason.NOT_MOVING_DOWN),
    ],
)
def test_step_against_floor_order_is_rejected(elevator, operation, reason):
    successor, outcome = transition(elevator, operation)
    assert outcome.reason is reason
    assert successor is elevator


def test_limits_bound_requests():
    limits = ElevatorLimits(min_floor=0, max_floor=3)
    elevator = Elevator.initial(limits)
    _, outcome = transition(elevator, Operation.SET_TARGET_FLOOR, 4, limits)
    assert outcome.reason is RejectionReason.FLOOR_OUT_OF_RANGE
    successor, outcome = transition(elevator, Operation.SET_TARGET_FLOOR, 3, limits)
    assert outcome
    assert successor.target_floor == 3


def test_operation_names_accepted():
    successor, outcome = transition(Elevator.initial(), "set_target_floor", 2)
    assert outcome
    assert successor.target_floor == 2


class TestCheckInvariants:
    def test_valid_states_pass(self):
        Elevator.initial().check_invariants()
        Elevator(5, 5, MovementState.IDLE, DoorState.OPEN).check_invariants()

    @pytest.mark.parametrize(
        "elevator",
        [
            Elevator(0, 1),
            Elevator(1, 11),
            Elevator(5, 3, MovementState.MOVING_UP),
            Elevator(3, 5, MovementState.MOVING_DOWN),
            Elevator(3, 5, MovementState.MOVING_UP, DoorState.OPEN),
        ],
    )
    def test_violations_raise(self, elevator):
        with pytest.raises(InvariantViolation):
            elevator.check_invariants()


def test_arrival_is_logged(caplog):
    elevator = Elevator(current_floor=1, target_floor=2, movement_state=MovementState.MOVING_UP)
    with caplog.at_level(logging.INFO, logger="controller.transitions"):
        transition(elevator, Operation.STEP_UP)
    assert "Arrived at floor 2" in caplog.text
