"""
SimPy-based turn simulation engine.

Drives one robot from a starting state until every parcel is delivered.
Each turn is one unit of simulated time: the robot decides, the state
moves, and the turn is written to the event log.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

import simpy

from .errors import TurnLimitExceeded
from .models import EventType, SimEvent, VillageState
from .robots import BaseRobot


@dataclass
class SimulationResult:
    """
    Outcome of a single simulation run.

    Attributes:
        robot: Name of the robot that was run
        turns: Number of turns taken to deliver every parcel
        final_state: State after the last turn (no parcels left)
        events: Event log of the run (empty when recording is off)
    """
    robot: str
    turns: int
    final_state: VillageState
    events: list[SimEvent] = field(default_factory=list)


class SimulationEngine:
    """
    Core simulation engine using SimPy.

    A fresh environment is created for every run, so one engine can be
    reused for many runs.
    """

    def __init__(
        self,
        config: dict[str, Any] | None = None,
        record_events: bool = True,
        on_event: Callable[[SimEvent], None] | None = None,
    ):
        """
        Initialize simulation engine.

        Args:
            config: Configuration parameters (max_turns)
            record_events: Keep the per-turn event log
            on_event: Observer called with every logged event
        """
        self.config = config or {}
        self.record_events = record_events
        self.on_event = on_event
        self.max_turns: int | None = self.config.get("max_turns")
        self.env = simpy.Environment()
        self.events: list[SimEvent] = []

    def log_event(
        self,
        turn: int,
        robot: str,
        event: EventType,
        previous_place: str | None = None,
        direction: str | None = None,
        state: VillageState | None = None,
        payload: dict[str, Any] | None = None,
    ) -> None:
        """Log a simulation event."""
        if not self.record_events and self.on_event is None:
            return

        sim_event = SimEvent(
            turn=turn,
            robot=robot,
            event=event,
            previous_place=previous_place,
            direction=direction,
            state=state,
            payload=payload,
        )
        if self.record_events:
            self.events.append(sim_event)
        if self.on_event is not None:
            self.on_event(sim_event)

    def robot_process(
        self,
        state: VillageState,
        robot: BaseRobot,
        memory: Sequence[str],
        robot_name: str,
    ) -> Any:
        """
        SimPy process for one robot run.

        Sequence per turn:
        1. Stop if no parcels remain
        2. Ask the robot for a direction
        3. Move the state and adopt the returned memory
        4. Log the turn and advance the clock by one

        Args:
            state: Starting state
            robot: Robot to drive
            memory: Initial robot memory
            robot_name: Name used in the event log

        Yields:
            SimPy events

        Returns:
            SimulationResult once every parcel is delivered
        """
        turn = 0
        while state.parcels:
            if self.max_turns is not None and turn >= self.max_turns:
                raise TurnLimitExceeded(
                    f"{robot_name} did not finish within {self.max_turns} turns "
                    f"({len(state.parcels)} parcel(s) left)"
                )

            action = robot.decide(state, memory)
            previous = state
            state = state.move(action.direction)
            memory = action.memory
            turn += 1

            yield self.env.timeout(1)

            self._log_turn(turn, robot_name, previous, action.direction, state)

        self.log_event(
            turn,
            robot_name,
            EventType.COMPLETE,
            state=state,
            payload={"turns": turn},
        )
        return SimulationResult(robot_name, turn, state, list(self.events))

    def _log_turn(
        self,
        turn: int,
        robot_name: str,
        previous: VillageState,
        direction: str,
        state: VillageState,
    ) -> None:
        """Log the move of one turn plus any pickups and deliveries."""
        if state is previous:
            self.log_event(
                turn,
                robot_name,
                EventType.MOVE_IGNORED,
                previous_place=previous.place,
                direction=direction,
                state=state,
            )
            return

        carried = len(previous.parcels_at(previous.place))
        delivered = len(previous.parcels) - len(state.parcels)
        self.log_event(
            turn,
            robot_name,
            EventType.MOVE,
            previous_place=previous.place,
            direction=direction,
            state=state,
            payload={"carried": carried, "remaining": len(state.parcels)},
        )

        if delivered:
            self.log_event(
                turn,
                robot_name,
                EventType.DELIVER,
                previous_place=previous.place,
                direction=direction,
                state=state,
                payload={"delivered": delivered},
            )

        waiting = len(previous.parcels_at(state.place))
        if waiting:
            self.log_event(
                turn,
                robot_name,
                EventType.PICKUP,
                previous_place=previous.place,
                direction=direction,
                state=state,
                payload={"waiting": waiting},
            )

    def run(
        self,
        state: VillageState,
        robot: BaseRobot,
        memory: Sequence[str] = (),
        robot_name: str | None = None,
    ) -> SimulationResult:
        """
        Run a robot until every parcel is delivered.

        Args:
            state: Starting state
            robot: Robot to drive
            memory: Initial robot memory
            robot_name: Name for the event log (robot.name if omitted)

        Returns:
            SimulationResult with the turn count

        Raises:
            TurnLimitExceeded: If max_turns is configured and exceeded
        """
        self.env = simpy.Environment()
        self.events = []
        process = self.env.process(
            self.robot_process(state, robot, tuple(memory), robot_name or robot.name)
        )
        return self.env.run(until=process)

    def get_events(self) -> list[SimEvent]:
        """Get all events logged by the last run."""
        return self.events


def count_steps(
    state: VillageState,
    robot: BaseRobot,
    memory: Sequence[str] = (),
    config: dict[str, Any] | None = None,
) -> int:
    """
    Count the turns a robot needs to deliver every parcel.

    Args:
        state: Starting state
        robot: Robot to drive
        memory: Initial robot memory
        config: Engine configuration (max_turns)

    Returns:
        Number of turns
    """
    engine = SimulationEngine(config, record_events=False)
    return engine.run(state, robot, memory).turns
