"""
Core data models for the mailbot simulation.

Defines the main entities: Parcel, VillageState (the immutable world
snapshot) and the per-turn SimEvent log record.
"""

import random
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional

from .errors import ScenarioError
from .graph import RoadGraph


@dataclass(frozen=True)
class Parcel:
    """
    A pending delivery.

    Attributes:
        place: Location where the parcel currently is
        address: Location the parcel must be delivered to
    """
    place: str
    address: str


@dataclass(frozen=True)
class VillageState:
    """
    Immutable snapshot of the robot position and undelivered parcels.

    Every transition returns a new state; an existing state is never
    mutated. The road graph is shared and excluded from equality.

    Attributes:
        place: Current robot location
        parcels: Undelivered parcels, in generation order
        graph: Road graph used to validate moves
    """
    place: str
    parcels: tuple[Parcel, ...]
    graph: RoadGraph = field(repr=False, compare=False)

    def __post_init__(self):
        # Accept any sequence but always store a tuple
        if not isinstance(self.parcels, tuple):
            object.__setattr__(self, "parcels", tuple(self.parcels))

    @property
    def is_done(self) -> bool:
        """True once every parcel has been delivered."""
        return not self.parcels

    def parcels_at(self, place: str) -> list[Parcel]:
        """Parcels currently waiting at (or carried to) a location."""
        return [p for p in self.parcels if p.place == place]

    def move(self, destination: str) -> "VillageState":
        """
        Move the robot to an adjacent location.

        Parcels at the current place travel with the robot, and parcels
        that reach their address are delivered (dropped) in the same step.
        A destination that is not a neighbor is ignored and the same state
        is returned.

        Args:
            destination: Location to move to

        Returns:
            New state, or self when the move is not possible
        """
        if not self.graph.is_neighbor(self.place, destination):
            return self

        parcels = tuple(
            p
            for p in (
                p if p.place != self.place else replace(p, place=destination)
                for p in self.parcels
            )
            if p.place != p.address
        )
        return VillageState(destination, parcels, self.graph)

    @classmethod
    def random(
        cls,
        graph: RoadGraph,
        parcel_count: int = 5,
        origin: str = "Post Office",
        rng: Optional[random.Random] = None,
    ) -> "VillageState":
        """
        Generate a random scenario.

        Each parcel gets a uniformly random address, and a pickup place
        resampled until it differs from the address. The robot starts at
        the origin.

        Args:
            graph: Road graph to draw locations from
            parcel_count: Number of parcels to generate
            origin: Starting location of the robot
            rng: Random source (unseeded when omitted)

        Returns:
            Fresh VillageState

        Raises:
            ScenarioError: If the graph has fewer than 2 locations, the
                origin is unknown, or parcel_count is negative
        """
        rng = rng or random.Random()
        locations = graph.locations
        if len(locations) < 2:
            raise ScenarioError(
                f"need at least 2 locations to place parcels, graph has {len(locations)}"
            )
        if origin not in graph:
            raise ScenarioError(f"origin {origin!r} is not a location in the graph")
        if parcel_count < 0:
            raise ScenarioError(f"parcel_count must be >= 0, got {parcel_count}")

        parcels = []
        for _ in range(parcel_count):
            address = rng.choice(locations)
            place = rng.choice(locations)
            while place == address:
                place = rng.choice(locations)
            parcels.append(Parcel(place=place, address=address))

        return cls(origin, tuple(parcels), graph)


class EventType(Enum):
    """Event types in the simulation log."""
    MOVE = "move"
    MOVE_IGNORED = "move_ignored"  # Direction was not adjacent
    PICKUP = "pickup"
    DELIVER = "deliver"
    COMPLETE = "complete"


@dataclass
class SimEvent:
    """
    A single entry in the simulation log.

    Attributes:
        turn: Turn number (1-based; COMPLETE carries the total)
        robot: Name of the robot being simulated
        event: Event type
        previous_place: Robot location before the turn
        direction: Location the robot chose
        state: Resulting state after the move
        payload: Additional event-specific data (optional)
    """
    turn: int
    robot: str
    event: EventType
    previous_place: Optional[str] = None
    direction: Optional[str] = None
    state: Optional[VillageState] = None
    payload: Optional[dict] = None
