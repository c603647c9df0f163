"""Single-car elevator control core."""

from .config import ElevatorLimits
from .controller import ElevatorController
from .elevator import Elevator, InvariantViolation, Outcome
from .scenario import Scenario, ScenarioAction, ScenarioResult, drive_to, run_scenario
from .states import DoorState, MovementState, Operation, RejectionReason
from .transitions import transition

__all__ = [
    "DoorState",
    "Elevator",
    "ElevatorController",
    "ElevatorLimits",
    "InvariantViolation",
    "MovementState",
    "Operation",
    "Outcome",
    "RejectionReason",
    "Scenario",
    "ScenarioAction",
    "ScenarioResult",
    "drive_to",
    "run_scenario",
    "transition",
]
