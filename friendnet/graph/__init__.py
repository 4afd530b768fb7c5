"""
Graph algorithms module.

Provides pathfinding on the friendship graph:
- PathFinder: BFS shortest connection between two accounts
- ConnectionResult: Outcome of a connection query
"""

from friendnet.graph.bfs import (
    ConnectionResult,
    ConnectionStatus,
    PathFinder,
    shortest_path,
)

__all__ = [
    "ConnectionResult",
    "ConnectionStatus",
    "PathFinder",
    "shortest_path",
]
