#!/usr/bin/env python3
"""
Mailbot Simulation Runner

Entry point for running the village delivery robot, either once with a
turn-by-turn narration or as a comparison of robots over many random
scenarios.

Usage:
    python run.py --robot goal --parcels 3 --seed 42
    python run.py --compare route goal --runs 100 --seed 42
"""

import argparse
import sys

import pandas as pd
import yaml

from mailbot.compare import ComparisonResult, Contender, compare_robots
from mailbot.demand import ParcelGenerator
from mailbot.engine import SimulationEngine, SimulationResult
from mailbot.errors import MailbotError
from mailbot.graph import RoadGraph, build_graph
from mailbot.models import EventType, SimEvent, VillageState
from mailbot.robots import ROBOT_KINDS, BaseRobot, make_robot


def load_yaml(path: str) -> dict:
    """Load YAML configuration file."""
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def setup_graph(scenario: dict) -> RoadGraph:
    """Create road graph from scenario configuration."""
    return build_graph(scenario.get("roads", []))


def setup_generator(
    graph: RoadGraph, scenario: dict, config: dict, seed: int | None = None
) -> ParcelGenerator:
    """Create scenario generator from scenario and config."""
    return ParcelGenerator(
        graph,
        {
            "origin": scenario.get("origin", "Post Office"),
            "parcel_count": config.get("parcel_count", 5),
        },
        seed=seed,
    )


def narrate(event: SimEvent) -> None:
    """Print one engine event as part of the turn-by-turn narration."""
    if event.event == EventType.MOVE:
        print(f"Turn {event.turn}: {event.previous_place} -> {event.direction}")
        print(f"         Carrying: {len(event.state.parcels)} parcel(s) left")
    elif event.event == EventType.MOVE_IGNORED:
        print(f"Turn {event.turn}: {event.previous_place} -> {event.direction} (no road, stayed)")
    elif event.event == EventType.DELIVER:
        print(f"         Delivered: {event.payload['delivered']}")
    elif event.event == EventType.PICKUP:
        print(f"         Parcels here to pick up: {event.payload['waiting']}")
    elif event.event == EventType.COMPLETE:
        print("-" * 60)
        print(f"All deliveries complete in {event.turn} turns!")


def run_simulation(
    state: VillageState,
    robot: BaseRobot,
    config: dict,
    quiet: bool = False,
) -> SimulationResult:
    """
    Run a single robot with narration.

    Args:
        state: Starting state
        robot: Robot to run
        config: Configuration parameters
        quiet: Suppress the turn-by-turn narration

    Returns:
        SimulationResult of the run
    """
    print("=" * 60)
    print(f"{robot.name} robot simulation starting")
    print("=" * 60)
    print(f"Starting location: {state.place}")
    print("Parcels to deliver:")
    for idx, parcel in enumerate(state.parcels, start=1):
        print(f"  {idx}. Pick up at: {parcel.place} -> Deliver to: {parcel.address}")
    print("-" * 60)

    engine = SimulationEngine(config, on_event=None if quiet else narrate)
    result = engine.run(state, robot)

    if quiet:
        print(f"All deliveries complete in {result.turns} turns!")
    print("=" * 60)
    return result


def run_comparison(
    robots: list[BaseRobot],
    generator: ParcelGenerator,
    config: dict,
    runs: int,
) -> ComparisonResult:
    """Compare robots over shared random scenarios."""
    names = [r.name for r in robots]
    # Repeated robots get numbered labels
    contenders = [
        Contender(robot, name=f"{robot.name}_{idx + 1}" if names.count(robot.name) > 1 else None)
        for idx, robot in enumerate(robots)
    ]
    print(f"Comparing {', '.join(c.label for c in contenders)} over {runs} scenarios...")
    return compare_robots(
        contenders,
        generator,
        runs=runs,
        config=config,
    )


def print_summary(result: ComparisonResult) -> None:
    """Print comparison averages and statistics."""
    print("\n=== Robot Comparison Results ===")
    for name, average in result.averages.items():
        print(f"  {name:10s}: Average {average:.2f} steps")

    summary: pd.DataFrame = result.summary()
    print("\n" + summary.to_string(float_format=lambda v: f"{v:.2f}"))
    print("=" * 32)


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Run mailbot delivery simulation")
    parser.add_argument(
        "--scenario",
        default="config/scenario/village.yaml",
        help="Path to scenario YAML file",
    )
    parser.add_argument(
        "--config",
        default="config/config.yaml",
        help="Path to config YAML file",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducibility",
    )
    parser.add_argument(
        "--robot",
        choices=ROBOT_KINDS,
        default=None,
        help="Robot for a single run",
    )
    parser.add_argument(
        "--parcels",
        type=int,
        default=None,
        help="Parcels per scenario",
    )
    parser.add_argument(
        "--compare",
        nargs="*",
        default=None,
        metavar="ROBOT",
        help="Compare robots instead of a single run (config default if none given)",
    )
    parser.add_argument(
        "--runs",
        type=int,
        default=None,
        help="Scenarios per comparison",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Skip the turn-by-turn narration",
    )

    args = parser.parse_args()
    if args.compare and not set(args.compare) <= set(ROBOT_KINDS):
        parser.error(f"--compare robots must be among: {', '.join(ROBOT_KINDS)}")

    # Load configuration
    config = load_yaml(args.config)
    scenario = load_yaml(args.scenario)

    # Override from command line
    if args.seed is not None:
        scenario["random_seed"] = args.seed
    if args.parcels is not None:
        config["parcel_count"] = args.parcels

    seed = scenario.get("random_seed")

    try:
        graph = setup_graph(scenario)
        generator = setup_generator(graph, scenario, config, seed)
        print(f"Village: {len(graph)} locations, {graph.edge_count} roads")

        if args.compare is not None:
            kinds = args.compare or config.get("compare", ["route", "goal"])
            robots = [make_robot(kind, scenario, seed) for kind in kinds]
            runs = args.runs if args.runs is not None else config.get("runs", 100)
            print_summary(run_comparison(robots, generator, config, runs))
        else:
            robot = make_robot(args.robot or config.get("robot", "goal"), scenario, seed)
            run_simulation(generator.generate(), robot, config, quiet=args.quiet)
    except MailbotError as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
