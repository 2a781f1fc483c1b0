"""
Robot comparison harness.

Runs several robots on the same sequence of random scenarios and reports
the average number of turns each one needs.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

import pandas as pd

from .demand import ParcelGenerator
from .engine import count_steps
from .kpi import TurnStatsAggregator
from .robots import BaseRobot


@dataclass
class Contender:
    """
    A robot entered into a comparison.

    Attributes:
        robot: Robot to run
        memory: Initial memory for every run
        name: Label used in the results
    """
    robot: BaseRobot
    memory: tuple[str, ...] = ()
    name: str | None = None

    @property
    def label(self) -> str:
        return self.name or self.robot.name


@dataclass
class ComparisonResult:
    """
    Outcome of a robot comparison.

    Attributes:
        runs: Number of scenarios each robot was run on
        averages: Average turns per robot label
        stats: Aggregator holding every individual turn count
    """
    runs: int
    averages: dict[str, float]
    stats: TurnStatsAggregator = field(repr=False)

    def summary(self) -> pd.DataFrame:
        """Per-robot statistics (see TurnStatsAggregator.summary)."""
        return self.stats.summary()


def compare_robots(
    contenders: Sequence[Contender],
    generator: ParcelGenerator,
    runs: int = 100,
    parcel_count: int | None = None,
    config: dict[str, Any] | None = None,
) -> ComparisonResult:
    """
    Compare robots on identical random scenarios.

    Every run generates one scenario and hands the same starting state to
    each contender, so all robots face matched conditions.

    Args:
        contenders: Robots to compare (usually two)
        generator: Scenario source; seed it for reproducible results
        runs: Number of scenarios
        parcel_count: Parcels per scenario (generator default if omitted)
        config: Engine configuration (max_turns)

    Returns:
        ComparisonResult with average turns per robot

    Raises:
        ValueError: If there are no contenders, labels repeat, or runs < 1
    """
    if not contenders:
        raise ValueError("at least one robot is needed for a comparison")
    if runs < 1:
        raise ValueError(f"runs must be >= 1, got {runs}")

    labels = [c.label for c in contenders]
    if len(set(labels)) != len(labels):
        raise ValueError(f"robot labels must be unique, got {labels}")

    stats = TurnStatsAggregator()
    for run in range(runs):
        state = generator.generate(parcel_count)
        for contender in contenders:
            turns = count_steps(state, contender.robot, contender.memory, config)
            stats.record(run, contender.label, turns)

    return ComparisonResult(runs=runs, averages=stats.averages(), stats=stats)
