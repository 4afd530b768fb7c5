"""
Friendship network explorer.

Loads an undirected social graph from a text file and answers
friend-list and shortest-connection queries over it.
"""

__version__ = "0.1.0"
