"""
Delivery robots (decision strategies).

Each robot maps a state and its private memory to the next direction and
updated memory. The caller threads the memory between turns; robots keep
no per-run state of their own.

Robots:
1. RandomRobot: wander to a random neighbor
2. RouteRobot: follow a fixed loop that passes every location
3. GoalOrientedRobot: plan shortest routes to the first parcel
"""

import random
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any, NamedTuple

from .errors import RouteNotFoundError, SimulationError
from .models import VillageState
from .routing import find_route

Memory = tuple[str, ...]


class Action(NamedTuple):
    """A robot decision: where to go next and what to remember."""
    direction: str
    memory: Memory


class BaseRobot(ABC):
    """Abstract base class for all robots."""

    name = "robot"

    @abstractmethod
    def decide(self, state: VillageState, memory: Sequence[str]) -> Action:
        """
        Choose the next move.

        Args:
            state: Current world state
            memory: Memory returned by the previous decision (empty at start)

        Returns:
            Action with the chosen direction and the memory to carry on
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class RandomRobot(BaseRobot):
    """Moves to a uniformly random neighbor; duplicate roads weigh more."""

    name = "random"

    def __init__(self, rng: random.Random | None = None, seed: int | None = None):
        self.rng = rng or random.Random(seed)

    def decide(self, state: VillageState, memory: Sequence[str]) -> Action:
        neighbors = state.graph.neighbors(state.place)
        if not neighbors:
            raise SimulationError(f"{state.place!r} has no roads to wander along")
        return Action(self.rng.choice(neighbors), ())


class RouteRobot(BaseRobot):
    """
    Follows a preset mail route, one stop per turn.

    When the remaining route runs out it starts over from the beginning.
    """

    name = "route"

    def __init__(self, route: Sequence[str]):
        """
        Initialize route robot.

        Args:
            route: Ordered stops; consecutive stops should be neighbors

        Raises:
            ValueError: If the route is empty
        """
        if not route:
            raise ValueError("mail route must contain at least one stop")
        self.route: Memory = tuple(route)

    def decide(self, state: VillageState, memory: Sequence[str]) -> Action:
        if len(memory) == 0:
            memory = self.route
        return Action(memory[0], tuple(memory[1:]))


class GoalOrientedRobot(BaseRobot):
    """
    Plans a shortest route toward the first undelivered parcel.

    If the robot is not at the parcel it heads for the pickup place,
    otherwise for the parcel's address. Only the first parcel in the
    state is ever targeted.
    """

    name = "goal"

    def decide(self, state: VillageState, memory: Sequence[str]) -> Action:
        route = tuple(memory)
        if not route:
            route = self.plan(state)
        return Action(route[0], route[1:])

    def plan(self, state: VillageState) -> Memory:
        """
        Compute a fresh route for the first parcel.

        Raises:
            SimulationError: If there is no parcel left to plan for
            RouteNotFoundError: If the target cannot be reached
        """
        if not state.parcels:
            raise SimulationError("no parcels left to plan a route for")

        parcel = state.parcels[0]
        target = parcel.place if parcel.place != state.place else parcel.address

        route = find_route(state.graph, state.place, target)
        if not route:
            raise RouteNotFoundError(f"no route from {state.place!r} to {target!r}")
        return tuple(route)


ROBOT_KINDS = ("random", "route", "goal")


def make_robot(kind: str, config: dict[str, Any] | None = None, seed: int | None = None) -> BaseRobot:
    """
    Create a robot from its kind name.

    Args:
        kind: One of "random", "route", "goal"
        config: Scenario configuration (mail_route for the route robot)
        seed: Random seed for the random robot

    Returns:
        Robot instance

    Raises:
        ValueError: If the kind is unknown or the route robot has no route
    """
    config = config or {}
    if kind == "random":
        return RandomRobot(seed=seed)
    if kind == "route":
        return RouteRobot(config.get("mail_route", []))
    if kind == "goal":
        return GoalOrientedRobot()
    raise ValueError(f"unknown robot kind {kind!r}; expected one of {', '.join(ROBOT_KINDS)}")
