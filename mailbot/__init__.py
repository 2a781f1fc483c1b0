"""Mailbot village delivery simulation package."""

from .compare import ComparisonResult, Contender, compare_robots
from .demand import ParcelGenerator
from .engine import SimulationEngine, SimulationResult, count_steps
from .errors import (
    GraphError,
    MailbotError,
    RouteNotFoundError,
    ScenarioError,
    SimulationError,
    TurnLimitExceeded,
)
from .graph import RoadGraph, build_graph
from .kpi import TurnStatsAggregator
from .models import EventType, Parcel, SimEvent, VillageState
from .robots import (
    Action,
    BaseRobot,
    GoalOrientedRobot,
    RandomRobot,
    RouteRobot,
    make_robot,
)
from .routing import find_route, route_length

__all__ = [
    "build_graph",
    "RoadGraph",
    "find_route",
    "route_length",
    "Parcel",
    "VillageState",
    "EventType",
    "SimEvent",
    "ParcelGenerator",
    "Action",
    "BaseRobot",
    "RandomRobot",
    "RouteRobot",
    "GoalOrientedRobot",
    "make_robot",
    "SimulationEngine",
    "SimulationResult",
    "count_steps",
    "TurnStatsAggregator",
    "Contender",
    "ComparisonResult",
    "compare_robots",
    "MailbotError",
    "GraphError",
    "ScenarioError",
    "RouteNotFoundError",
    "SimulationError",
    "TurnLimitExceeded",
]
