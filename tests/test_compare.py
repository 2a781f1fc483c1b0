"""Tests for the robot comparison harness and turn statistics."""
import pytest

from mailbot.compare import Contender, compare_robots
from mailbot.demand import ParcelGenerator
from mailbot.engine import count_steps
from mailbot.kpi import TurnStatsAggregator
from mailbot.robots import GoalOrientedRobot, RandomRobot, RouteRobot


def test_identical_robots_report_equal_averages(village_graph):
    result = compare_robots(
        [
            Contender(GoalOrientedRobot(), name="goal_a"),
            Contender(GoalOrientedRobot(), name="goal_b"),
        ],
        ParcelGenerator(village_graph, seed=42),
        runs=30,
    )
    assert result.averages["goal_a"] == result.averages["goal_b"]


def test_identically_seeded_random_robots_match(village_graph):
    result = compare_robots(
        [
            Contender(RandomRobot(seed=8), name="left"),
            Contender(RandomRobot(seed=8), name="right"),
        ],
        ParcelGenerator(village_graph, seed=8),
        runs=10,
    )
    assert result.averages["left"] == result.averages["right"]


def test_averages_match_manual_runs(village_graph, village_scenario):
    route = village_scenario["mail_route"]
    result = compare_robots(
        [Contender(RouteRobot(route)), Contender(GoalOrientedRobot())],
        ParcelGenerator(village_graph, seed=1),
        runs=20,
    )

    states = ParcelGenerator(village_graph, seed=1).generate_many(20)
    expected_route = sum(count_steps(s, RouteRobot(route)) for s in states) / 20
    expected_goal = sum(count_steps(s, GoalOrientedRobot()) for s in states) / 20

    assert result.runs == 20
    assert result.averages == pytest.approx({"route": expected_route, "goal": expected_goal})


def test_comparison_is_reproducible(village_graph, village_scenario):
    def run():
        return compare_robots(
            [Contender(RouteRobot(village_scenario["mail_route"])), Contender(GoalOrientedRobot())],
            ParcelGenerator(village_graph, seed=99),
            runs=15,
        ).averages

    assert run() == run()


def test_summary_table(village_graph):
    result = compare_robots(
        [Contender(GoalOrientedRobot())],
        ParcelGenerator(village_graph, seed=4),
        runs=12,
    )
    summary = result.summary()
    assert list(summary.index) == ["goal"]
    assert list(summary.columns) == ["count", "mean", "std", "min", "p50", "p95", "max"]
    assert summary.loc["goal", "count"] == 12
    assert summary.loc["goal", "mean"] == pytest.approx(result.averages["goal"])
    assert summary.loc["goal", "min"] <= summary.loc["goal", "p50"] <= summary.loc["goal", "max"]


def test_invalid_comparisons(village_graph):
    generator = ParcelGenerator(village_graph, seed=0)
    with pytest.raises(ValueError):
        compare_robots([], generator)
    with pytest.raises(ValueError):
        compare_robots([Contender(GoalOrientedRobot())], generator, runs=0)
    with pytest.raises(ValueError):
        compare_robots([Contender(GoalOrientedRobot()), Contender(GoalOrientedRobot())], generator)


def test_aggregator_averages_and_frame():
    stats = TurnStatsAggregator()
    stats.record(0, "b", 10)
    stats.record(0, "a", 4)
    stats.record(1, "b", 20)
    stats.record(1, "a", 6)

    assert stats.totals() == {"b": 30, "a": 10}
    assert stats.averages() == {"b": 15.0, "a": 5.0}

    df = stats.to_dataframe()
    assert list(df.columns) == ["run", "robot", "turns"]
    assert len(df) == 4

    summary = stats.summary()
    assert list(summary.index) == ["b", "a"]
    assert summary.loc["b", "std"] == pytest.approx(5.0)
    assert summary.loc["a", "max"] == 6


def test_empty_aggregator():
    stats = TurnStatsAggregator()
    assert stats.averages() == {}
    assert stats.to_dataframe().empty
    assert stats.summary().empty
