"""
Turn-count aggregation.

Collects the turn counts of many runs and computes per-robot statistics:
- Average turns (the comparison figure)
- Spread (std, min, max)
- Median and 95th percentile
"""

from dataclasses import dataclass

import pandas as pd


@dataclass
class TurnRecord:
    """Turn count of one robot on one scenario."""

    run: int
    robot: str
    turns: int


class TurnStatsAggregator:
    """
    Aggregates turn counts from simulation runs.

    Robots are reported in the order they were first recorded.
    """

    def __init__(self):
        self.records: list[TurnRecord] = []
        self.robots: list[str] = []

    def record(self, run: int, robot: str, turns: int) -> None:
        """
        Record the outcome of one run.

        Args:
            run: Scenario index
            robot: Robot label
            turns: Turns taken
        """
        if robot not in self.robots:
            self.robots.append(robot)
        self.records.append(TurnRecord(run=run, robot=robot, turns=turns))

    def totals(self) -> dict[str, int]:
        """Total turns per robot."""
        totals = {robot: 0 for robot in self.robots}
        for rec in self.records:
            totals[rec.robot] += rec.turns
        return totals

    def averages(self) -> dict[str, float]:
        """Arithmetic mean of turns per robot."""
        counts = {robot: 0 for robot in self.robots}
        for rec in self.records:
            counts[rec.robot] += 1
        return {
            robot: total / counts[robot]
            for robot, total in self.totals().items()
            if counts[robot] > 0
        }

    def to_dataframe(self) -> pd.DataFrame:
        """Convert records to pandas DataFrame (one row per run and robot)."""
        if not self.records:
            return pd.DataFrame(columns=["run", "robot", "turns"])

        data = {
            "run": [r.run for r in self.records],
            "robot": [r.robot for r in self.records],
            "turns": [r.turns for r in self.records],
        }
        return pd.DataFrame(data)

    def summary(self) -> pd.DataFrame:
        """
        Per-robot statistics of the recorded turn counts.

        Returns:
            DataFrame indexed by robot with count, mean, std, min,
            p50, p95 and max columns
        """
        columns = ["count", "mean", "std", "min", "p50", "p95", "max"]
        df = self.to_dataframe()
        if df.empty:
            return pd.DataFrame(columns=columns)

        grouped = df.groupby("robot", sort=False)["turns"]
        summary = pd.DataFrame(
            {
                "count": grouped.count(),
                "mean": grouped.mean(),
                "std": grouped.std(ddof=0),
                "min": grouped.min(),
                "p50": grouped.quantile(0.5),
                "p95": grouped.quantile(0.95),
                "max": grouped.max(),
            }
        )
        return summary.reindex(self.robots)[columns]
