"""Tests for robot decision strategies."""
import random
from collections import Counter

import pytest

from mailbot.errors import RouteNotFoundError, SimulationError
from mailbot.graph import build_graph
from mailbot.models import Parcel, VillageState
from mailbot.robots import (
    GoalOrientedRobot,
    RandomRobot,
    RouteRobot,
    make_robot,
)


def test_route_robot_cycles_through_route(line_graph):
    robot = RouteRobot(["X", "Y"])
    state = VillageState("A", (), line_graph)

    first = robot.decide(state, ())
    assert first.direction == "X"
    assert first.memory == ("Y",)

    second = robot.decide(state, first.memory)
    assert second.direction == "Y"
    assert second.memory == ()

    third = robot.decide(state, second.memory)
    assert third.direction == "X"
    assert third.memory == ("Y",)


def test_route_robot_needs_a_route():
    with pytest.raises(ValueError):
        RouteRobot([])


def test_random_robot_picks_a_neighbor(village_graph):
    robot = RandomRobot(seed=5)
    state = VillageState("Marketplace", (), village_graph)
    for _ in range(50):
        action = robot.decide(state, ())
        assert action.direction in village_graph["Marketplace"]
        assert action.memory == ()


def test_random_robot_keeps_duplicate_road_bias():
    graph = build_graph(["A-B", "A-B", "A-C"])
    robot = RandomRobot(rng=random.Random(11))
    state = VillageState("A", (), graph)
    counts = Counter(robot.decide(state, ()).direction for _ in range(3000))
    # B is listed twice, so it comes up about twice as often as C
    assert 1.6 < counts["B"] / counts["C"] < 2.5


def test_random_robot_with_no_roads():
    graph = build_graph(["A-B"])
    state = VillageState("Z", (), graph)
    with pytest.raises(SimulationError):
        RandomRobot(seed=1).decide(state, ())


def test_goal_robot_heads_for_pickup_first(line_graph):
    state = VillageState("A", (Parcel("C", "A"),), line_graph)
    action = GoalOrientedRobot().decide(state, ())
    assert action.direction == "B"
    assert action.memory == ("C",)


def test_goal_robot_delivers_when_holding_parcel(line_graph):
    state = VillageState("A", (Parcel("A", "C"),), line_graph)
    action = GoalOrientedRobot().decide(state, ())
    assert action == ("B", ("C",))


def test_goal_robot_follows_remembered_route(line_graph):
    state = VillageState("B", (Parcel("A", "C"),), line_graph)
    action = GoalOrientedRobot().decide(state, ("A", "B"))
    assert action.direction == "A"
    assert action.memory == ("B",)


def test_goal_robot_only_targets_first_parcel(village_graph):
    state = VillageState(
        "Post Office",
        (Parcel("Cabin", "Farm"), Parcel("Marketplace", "Shop")),
        village_graph,
    )
    action = GoalOrientedRobot().decide(state, ())
    assert action.direction == "Alice's House"
    assert action.memory == ("Cabin",)


def test_goal_robot_unreachable_parcel():
    graph = build_graph(["A-B", "C-D"])
    state = VillageState("A", (Parcel("C", "D"),), graph)
    with pytest.raises(RouteNotFoundError):
        GoalOrientedRobot().decide(state, ())


def test_goal_robot_without_parcels(line_graph):
    with pytest.raises(SimulationError):
        GoalOrientedRobot().decide(VillageState("A", (), line_graph), ())


def test_make_robot(village_scenario):
    assert isinstance(make_robot("random", seed=1), RandomRobot)
    assert isinstance(make_robot("goal"), GoalOrientedRobot)
    route_robot = make_robot("route", village_scenario)
    assert route_robot.route == tuple(village_scenario["mail_route"])
    with pytest.raises(ValueError):
        make_robot("teleport")
