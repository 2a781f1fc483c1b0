"""
Road graph for the village.

The graph is an undirected adjacency mapping built from "A-B" edge
strings. Neighbor lists keep declaration order and keep duplicates, so
an edge declared twice makes that neighbor twice as likely to be picked
by a robot choosing uniformly at random.
"""

from collections.abc import Iterable, Iterator

from .errors import GraphError


class RoadGraph:
    """
    Read-only adjacency mapping from location to neighbor list.

    Built once via build_graph() and shared by every state, robot and
    run that uses it.
    """

    def __init__(self, adjacency: dict[str, list[str]]):
        """
        Initialize road graph.

        Args:
            adjacency: Mapping of location to ordered neighbor list
        """
        self._adjacency = {place: tuple(neighbors) for place, neighbors in adjacency.items()}

    @property
    def locations(self) -> list[str]:
        """All locations, in the order they were first declared."""
        return list(self._adjacency)

    @property
    def edge_count(self) -> int:
        """Number of declared edges (each counted once)."""
        return sum(len(neighbors) for neighbors in self._adjacency.values()) // 2

    def neighbors(self, place: str) -> tuple[str, ...]:
        """
        Get the neighbors of a location.

        Args:
            place: Location to look up

        Returns:
            Neighbors in adjacency order (empty for unknown locations)
        """
        return self._adjacency.get(place, ())

    def is_neighbor(self, place: str, other: str) -> bool:
        """Check whether two locations are one road apart."""
        return other in self.neighbors(place)

    def __getitem__(self, place: str) -> tuple[str, ...]:
        return self._adjacency[place]

    def __contains__(self, place: object) -> bool:
        return place in self._adjacency

    def __iter__(self) -> Iterator[str]:
        return iter(self._adjacency)

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        return f"RoadGraph(locations={len(self)}, edges={self.edge_count})"


def build_graph(edges: Iterable[str], separator: str = "-") -> RoadGraph:
    """
    Build an undirected road graph from edge strings.

    Args:
        edges: Edge strings such as "Post Office-Marketplace"
        separator: String separating the two endpoints

    Returns:
        RoadGraph with both directions of every edge

    Raises:
        GraphError: If an edge does not split into exactly two labels
    """
    adjacency: dict[str, list[str]] = {}

    def add_edge(start: str, end: str) -> None:
        if start not in adjacency:
            adjacency[start] = [end]
        else:
            adjacency[start].append(end)

    for edge in edges:
        parts = edge.split(separator)
        if len(parts) != 2 or not all(parts):
            raise GraphError(f"malformed edge {edge!r}: expected 'A{separator}B'")
        start, end = parts
        add_edge(start, end)
        add_edge(end, start)

    return RoadGraph(adjacency)
