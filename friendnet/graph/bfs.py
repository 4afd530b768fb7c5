"""
Breadth-first search for the shortest connection between two accounts.

Every friendship has the same weight, so BFS order gives a path with the
fewest hops. When several shortest paths exist, the one returned is the
first discovered while walking each account's friends in load order.
"""

from __future__ import annotations

import enum
import logging
from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from friendnet.data.loader import FriendGraph

logger = logging.getLogger(__name__)


class ConnectionStatus(enum.Enum):
    """Outcome of a connection query."""

    FOUND = "found"
    NO_PATH = "no_path"
    INVALID_ID = "invalid_id"


@dataclass(frozen=True)
class ConnectionResult:
    """
    Result of a shortest-connection query.

    Attributes:
        status: FOUND, NO_PATH, or INVALID_ID
        start: Account the search started from
        goal: Account the search was looking for
        path: Accounts from start to goal inclusive (empty unless FOUND)
    """

    status: ConnectionStatus
    start: int
    goal: int
    path: tuple[int, ...] = ()

    @property
    def found(self) -> bool:
        """Whether a connection exists."""
        return self.status is ConnectionStatus.FOUND

    @property
    def hops(self) -> int | None:
        """Number of friendships along the path (len(path) - 1)."""
        return len(self.path) - 1 if self.found else None

    def friendships(self) -> list[tuple[int, int]]:
        """Consecutive (a, b) pairs along the path."""
        return list(zip(self.path, self.path[1:]))


class PathFinder:
    """
    Shortest-connection queries over a loaded FriendGraph.

    Never mutates the graph, so one finder (or many) can share a graph.
    """

    def __init__(self, graph: FriendGraph, max_depth: int | None = None) -> None:
        """
        Initialize the path finder.

        Args:
            graph: Loaded friendship graph
            max_depth: Longest path (in hops) to search for; None for no limit
        """
        self._graph = graph
        self._max_depth = max_depth

    @property
    def graph(self) -> FriendGraph:
        return self._graph

    def shortest_path(self, start: int, goal: int) -> ConnectionResult:
        """
        Find one shortest path from start to goal.

        Returns:
            ConnectionResult with status INVALID_ID if either ID is out of
            range, NO_PATH if the accounts are not connected, else FOUND
            and the path including both endpoints.
        """
        if not self._graph.is_valid_id(start) or not self._graph.is_valid_id(goal):
            logger.debug(f"Invalid ID in connection query {start!r} -> {goal!r}")
            return ConnectionResult(ConnectionStatus.INVALID_ID, start, goal)

        path = self._bfs(start, goal)
        if path is None:
            logger.debug(f"No connection from {start} to {goal}")
            return ConnectionResult(ConnectionStatus.NO_PATH, start, goal)

        logger.debug(
            f"Connection {start} -> {goal} ({len(path) - 1} hops): "
            f"{' -> '.join(map(str, path))}"
        )
        return ConnectionResult(ConnectionStatus.FOUND, start, goal, tuple(path))

    def distance(self, start: int, goal: int) -> int | None:
        """Hop count between two accounts, or None if not connected or invalid."""
        return self.shortest_path(start, goal).hops

    def _bfs(self, start: int, goal: int) -> list[int] | None:
        """
        BFS with parent tracking.

        Accounts are marked visited when enqueued, so each one is expanded
        at most once.
        """
        if start == goal:
            return [start]

        queue = deque([(start, 0)])
        visited: dict[int, int | None] = {start: None}  # Maps id to parent id

        while queue:
            current, depth = queue.popleft()

            if self._max_depth is not None and depth >= self._max_depth:
                continue

            for friend in self._graph.neighbors_of(current):
                if friend in visited:
                    continue

                visited[friend] = current

                if friend == goal:
                    # Found! Reconstruct path
                    path = []
                    node: int | None = friend
                    while node is not None:
                        path.append(node)
                        node = visited[node]
                    return list(reversed(path))

                queue.append((friend, depth + 1))

        return None


def shortest_path(graph: FriendGraph, start: int, goal: int) -> ConnectionResult:
    """Find one shortest path between two accounts of graph."""
    return PathFinder(graph).shortest_path(start, goal)
