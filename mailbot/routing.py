"""
Shortest-path search over the road graph.

Roads are unweighted, so a breadth-first search finds a route with the
fewest hops. Neighbors are explored in adjacency order, which makes the
chosen route deterministic when several shortest routes exist.
"""

from collections import deque

from .graph import RoadGraph


def find_route(graph: RoadGraph, start: str, goal: str) -> list[str] | None:
    """
    Find a shortest route between two locations.

    Args:
        graph: Road graph to search
        start: Location to start from
        goal: Location to reach

    Returns:
        Locations to visit in order, excluding start and including goal;
        an empty list when start == goal; None when goal is unreachable
    """
    if start == goal:
        return []

    work: deque[tuple[str, list[str]]] = deque([(start, [])])
    seen = {start}

    while work:
        at, route = work.popleft()
        for place in graph.neighbors(at):
            if place == goal:
                return route + [place]
            if place not in seen:
                seen.add(place)
                work.append((place, route + [place]))

    return None


def route_length(graph: RoadGraph, start: str, goal: str) -> int | None:
    """Number of hops on a shortest route, or None if unreachable."""
    route = find_route(graph, start, goal)
    return None if route is None else len(route)
