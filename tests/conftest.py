"""Shared fixtures: the village from the bundled scenario file."""
from pathlib import Path

import pytest
import yaml

from mailbot.graph import build_graph

SCENARIO_PATH = Path(__file__).resolve().parent.parent / "config" / "scenario" / "village.yaml"


@pytest.fixture(scope="session")
def village_scenario():
    with open(SCENARIO_PATH, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


@pytest.fixture(scope="session")
def village_graph(village_scenario):
    return build_graph(village_scenario["roads"])


@pytest.fixture()
def line_graph():
    # A - B - C
    return build_graph(["A-B", "B-C"])
