"""
Data loading module.

Provides FriendGraph, the immutable friendship graph, and load_graph()
for reading it from a text or msgpack file.

Usage:
    from friendnet.data import load_graph

    graph = load_graph("data/sample_network.txt")
    graph.neighbors_of(0)
"""

from friendnet.data.loader import FriendGraph, load_graph

__all__ = ["FriendGraph", "load_graph"]
