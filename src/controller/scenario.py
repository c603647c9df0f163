"""Scripted runs of the controller, loaded from JSON scenario files."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, Field, model_validator

from .config import ElevatorLimits
from .controller import ElevatorController
from .elevator import Outcome
from .states import MovementState, Operation

logger = logging.getLogger(__name__)

ActionName = Literal["set_target_floor", "step_up", "step_down", "settle_idle", "drive_to"]


class LimitsModel(BaseModel):
    min_floor: int = 1
    max_floor: int = 10

    @model_validator(mode="after")
    def _ordered(self) -> "LimitsModel":
        if self.min_floor >= self.max_floor:
            raise ValueError(f"min_floor ({self.min_floor}) must be below max_floor ({self.max_floor})")
        return self

    def to_limits(self) -> ElevatorLimits:
        return ElevatorLimits(min_floor=self.min_floor, max_floor=self.max_floor)


class ScenarioAction(BaseModel):
    op: ActionName
    floor: Optional[int] = None
    repeat: int = Field(default=1, ge=1)

    @model_validator(mode="after")
    def _floor_required(self) -> "ScenarioAction":
        if self.op in ("set_target_floor", "drive_to") and self.floor is None:
            raise ValueError(f"'{self.op}' requires a floor")
        return self


class Scenario(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    limits: LimitsModel = Field(default_factory=LimitsModel)
    actions: List[ScenarioAction] = Field(default_factory=list)


@dataclass
class TraceEntry:
    op: str
    floor: Optional[int]
    accepted: bool
    reason: Optional[str]
    state: Dict[str, Union[int, str]]


@dataclass
class ScenarioResult:
    name: str
    description: Optional[str]
    trace: List[TraceEntry] = field(default_factory=list)
    final_state: Dict[str, Union[int, str]] = field(default_factory=dict)

    @property
    def accepted_count(self) -> int:
        return sum(1 for entry in self.trace if entry.accepted)

    @property
    def rejected_count(self) -> int:
        return len(self.trace) - self.accepted_count


def _drive_steps(
    controller: ElevatorController, floor: int, max_steps: Optional[int] = None
) -> Iterator[Tuple[Operation, Outcome]]:
    outcome = controller.set_target_floor(floor)
    yield Operation.SET_TARGET_FLOOR, outcome
    if not outcome:
        return

    limits = controller.limits
    budget = max_steps if max_steps is not None else limits.max_floor - limits.min_floor
    steps = 0
    while controller.movement_state is not MovementState.IDLE:
        if steps >= budget:
            raise RuntimeError(f"Car did not reach floor {floor} within {budget} steps")
        if controller.movement_state is MovementState.MOVING_UP:
            yield Operation.STEP_UP, controller.step_up()
        else:
            yield Operation.STEP_DOWN, controller.step_down()
        steps += 1


def drive_to(controller: ElevatorController, floor: int, max_steps: Optional[int] = None) -> List[int]:
    """Request ``floor`` and step until the car arrives.

    Returns the floors passed through, ending with ``floor``, or an empty list
    when the request is rejected.
    """

    visited: List[int] = []
    for operation, outcome in _drive_steps(controller, floor, max_steps):
        if operation is not Operation.SET_TARGET_FLOOR and outcome:
            visited.append(controller.current_floor)
    return visited


def run_scenario(scenario: Scenario) -> ScenarioResult:
    controller = ElevatorController(scenario.limits.to_limits())
    result = ScenarioResult(name=scenario.name or "scenario", description=scenario.description)

    def record(operation: Operation, floor: Optional[int], outcome: Outcome) -> None:
        result.trace.append(
            TraceEntry(
                op=operation.value,
                floor=floor,
                accepted=outcome.accepted,
                reason=outcome.reason.value if outcome.reason else None,
                state=controller.snapshot(),
            )
        )

    for action in scenario.actions:
        for _ in range(action.repeat):
            if action.op == "drive_to":
                for operation, outcome in _drive_steps(controller, action.floor):
                    floor = action.floor if operation is Operation.SET_TARGET_FLOOR else None
                    record(operation, floor, outcome)
            else:
                operation = Operation(action.op)
                floor = action.floor if operation is Operation.SET_TARGET_FLOOR else None
                record(operation, floor, controller.apply(operation, action.floor))

    result.final_state = controller.snapshot()
    logger.info(
        "Scenario %s finished: %d accepted, %d rejected",
        result.name,
        result.accepted_count,
        result.rejected_count,
    )
    return result
