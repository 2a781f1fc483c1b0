"""
Scenario generator for parcel deliveries.

Produces random starting states from the scenario configuration, with a
seeded random source so that comparisons can be reproduced.
"""

import random
from typing import Any

from .graph import RoadGraph
from .models import VillageState


class ParcelGenerator:
    """
    Generates random delivery scenarios over a road graph.

    Every scenario starts the robot at the configured origin.
    """

    def __init__(
        self,
        graph: RoadGraph,
        config: dict[str, Any] | None = None,
        seed: int | None = None,
    ):
        """
        Initialize parcel generator.

        Args:
            graph: Road graph to place parcels on
            config: Scenario configuration (origin, parcel_count)
            seed: Random seed for reproducibility
        """
        config = config or {}
        self.graph = graph
        self.rng = random.Random(seed)
        self.origin = config.get("origin", "Post Office")
        self.parcel_count = config.get("parcel_count", 5)
        self.scenario_counter = 0

    def generate(self, parcel_count: int | None = None) -> VillageState:
        """
        Generate one random scenario.

        Args:
            parcel_count: Parcels to create (configured default if omitted)

        Returns:
            Starting VillageState
        """
        if parcel_count is None:
            parcel_count = self.parcel_count

        state = VillageState.random(
            self.graph,
            parcel_count=parcel_count,
            origin=self.origin,
            rng=self.rng,
        )
        self.scenario_counter += 1
        return state

    def generate_many(self, runs: int, parcel_count: int | None = None) -> list[VillageState]:
        """Generate several independent scenarios."""
        return [self.generate(parcel_count) for _ in range(runs)]
