"""
FriendGraph: the immutable friendship graph and its file loaders.

Usage:
    from friendnet.data.loader import load_graph

    graph = load_graph("data/sample_network.txt")
    graph.is_valid_id(3)
    graph.neighbors_of(0)
    graph.stats()

Text format:
    <num_accounts> [<num_edges>]
    <a> <b>
    ...

A .msgpack file holding {"num_accounts": int, "edges": [[a, b], ...]}
is loaded through the same validation path.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from pathlib import Path

import msgpack
import numpy as np

from friendnet.config import FILE_ENCODING, MSGPACK_SUFFIX
from friendnet.errors import (
    EmptyFileError,
    GraphFileNotFoundError,
    GraphIOError,
    GraphLoadError,
    InvalidFormatError,
    InvalidIdError,
)

logger = logging.getLogger(__name__)

# Plain decimal integers only (int() would also take "1_000" and unicode digits)
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def _parse_int(token: str, line_number: int, what: str) -> int:
    if not _INT_PATTERN.fullmatch(token):
        raise InvalidFormatError(f"{what} {token!r} is not an integer", line_number)
    return int(token)


class FriendGraph:
    """
    Undirected friendship graph over dense account IDs [0, num_accounts).

    Built once by one of the constructors below and never modified
    afterwards. Each account's neighbors are kept in first-insertion
    order with duplicates suppressed; a parallel list of sets backs the
    duplicate check.

    Attributes:
        source_path: File the graph was loaded from (None for in-memory input)
        declared_edges: Optional second header token, informational only
    """

    def __init__(
        self,
        num_accounts: int,
        source_path: str | None = None,
        declared_edges: int | None = None,
    ) -> None:
        if num_accounts < 0:
            raise InvalidFormatError(f"account count {num_accounts} is negative")
        self._num_accounts = num_accounts
        self._adjacency: list[list[int]] = [[] for _ in range(num_accounts)]
        self._neighbor_sets: list[set[int]] = [set() for _ in range(num_accounts)]
        self._edges: list[tuple[int, int]] = []
        self.source_path = source_path
        self.declared_edges = declared_edges

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def from_lines(
        cls,
        lines: Iterable[str],
        source_path: str | None = None,
    ) -> FriendGraph:
        """
        Parse the text format from any iterable of lines (e.g. an open file).

        Blank lines are skipped. The first token of the first non-empty line
        is the account count; every later non-empty line is a friendship pair.

        Raises:
            EmptyFileError: No non-empty line at all
            InvalidFormatError: Bad header, bad pair, or endpoint out of range
        """
        graph: FriendGraph | None = None

        for line_number, line in enumerate(lines, start=1):
            tokens = line.split()
            if not tokens:
                continue

            if graph is None:
                num_accounts = _parse_int(tokens[0], line_number, "account count")
                declared_edges = None
                if len(tokens) > 1 and _INT_PATTERN.fullmatch(tokens[1]):
                    declared_edges = int(tokens[1])
                graph = cls(num_accounts, source_path, declared_edges)
                continue

            if len(tokens) < 2:
                raise InvalidFormatError("expected two account IDs", line_number)
            person_a = _parse_int(tokens[0], line_number, "account ID")
            person_b = _parse_int(tokens[1], line_number, "account ID")
            graph._add_friendship(person_a, person_b, line_number)

        if graph is None:
            raise EmptyFileError()
        return graph

    @classmethod
    def from_edges(
        cls,
        num_accounts: int,
        edges: Iterable[tuple[int, int]],
        source_path: str | None = None,
    ) -> FriendGraph:
        """Build a graph from an account count and (a, b) pairs."""
        graph = cls(num_accounts, source_path)
        for person_a, person_b in edges:
            graph._add_friendship(person_a, person_b)
        return graph

    def _add_friendship(
        self, person_a: int, person_b: int, line_number: int | None = None
    ) -> None:
        """Insert a symmetric edge. Only called while the graph is being built."""
        for person in (person_a, person_b):
            if not self.is_valid_id(person):
                raise InvalidFormatError(
                    f"account ID {person} is outside [0, {self._num_accounts})",
                    line_number,
                )

        added = False
        if person_b not in self._neighbor_sets[person_a]:
            self._neighbor_sets[person_a].add(person_b)
            self._adjacency[person_a].append(person_b)
            added = True
        if person_a not in self._neighbor_sets[person_b]:
            self._neighbor_sets[person_b].add(person_a)
            self._adjacency[person_b].append(person_a)
            added = True

        if added:
            self._edges.append((person_a, person_b))

    # =========================================================================
    # Core Accessors
    # =========================================================================

    @property
    def num_accounts(self) -> int:
        """Number of accounts (IDs are 0 .. num_accounts - 1)."""
        return self._num_accounts

    def __len__(self) -> int:
        return self._num_accounts

    def __contains__(self, account_id: object) -> bool:
        return self.is_valid_id(account_id)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(num_accounts={self._num_accounts}, "
            f"friendships={len(self._edges)})"
        )

    def is_valid_id(self, account_id: object) -> bool:
        """Whether account_id is an integer in [0, num_accounts)."""
        if isinstance(account_id, bool) or not isinstance(account_id, int):
            return False
        return 0 <= account_id < self._num_accounts

    def _check_id(self, account_id: int) -> None:
        if not self.is_valid_id(account_id):
            raise InvalidIdError(account_id, self._num_accounts)

    def neighbors_of(self, account_id: int) -> tuple[int, ...]:
        """
        Get the friends of an account in the order they were loaded.

        Raises:
            InvalidIdError: If account_id is not a valid ID
        """
        self._check_id(account_id)
        return tuple(self._adjacency[account_id])

    def degree(self, account_id: int) -> int:
        """Number of friends of an account."""
        self._check_id(account_id)
        return len(self._adjacency[account_id])

    def edges(self) -> Iterator[tuple[int, int]]:
        """Unique friendships as (a, b) pairs, in first-seen order."""
        return iter(self._edges)

    def edge_count(self) -> int:
        """Number of unique friendships."""
        return len(self._edges)

    # =========================================================================
    # Snapshots
    # =========================================================================

    def dump_msgpack(self, path: str | Path) -> None:
        """
        Write the graph as a msgpack snapshot readable by load_graph().

        Edges are written in first-seen order, so reloading reproduces the
        same neighbor order for every account.
        """
        payload = {
            "num_accounts": self._num_accounts,
            "edges": [list(edge) for edge in self._edges],
        }
        with open(path, "wb") as f:
            msgpack.pack(payload, f)
        logger.info(f"Wrote {len(self._edges):,} friendships to {path}")

    # =========================================================================
    # Utility Methods
    # =========================================================================

    def validate(self) -> dict[str, bool]:
        """Run structural checks on the loaded graph."""
        ids_in_range = all(
            0 <= friend < self._num_accounts
            for friends in self._adjacency
            for friend in friends
        )
        no_duplicates = all(
            len(friends) == len(seen)
            for friends, seen in zip(self._adjacency, self._neighbor_sets, strict=True)
        )
        symmetric = ids_in_range and all(
            person in self._neighbor_sets[friend]
            for person, friends in enumerate(self._adjacency)
            for friend in friends
        )
        return {
            "adjacency_size_matches": len(self._adjacency) == self._num_accounts,
            "ids_in_range": ids_in_range,
            "no_duplicate_neighbors": no_duplicates,
            "symmetric": symmetric,
        }

    def stats(self) -> dict:
        """Get statistics about the loaded graph."""
        degrees = np.fromiter(
            (len(friends) for friends in self._adjacency),
            dtype=np.int64,
            count=self._num_accounts,
        )
        has_accounts = degrees.size > 0
        return {
            "num_accounts": self._num_accounts,
            "num_friendships": len(self._edges),
            "max_degree": int(degrees.max()) if has_accounts else 0,
            "mean_degree": float(degrees.mean()) if has_accounts else 0.0,
            "isolated_accounts": int(np.count_nonzero(degrees == 0)),
        }


# =============================================================================
# File Loading
# =============================================================================

def _load_text(path: Path) -> FriendGraph:
    with open(path, encoding=FILE_ENCODING) as f:
        return FriendGraph.from_lines(f, source_path=str(path))


def _load_msgpack(path: Path) -> FriendGraph:
    with open(path, "rb") as f:
        data = f.read()
    if not data:
        raise EmptyFileError()

    try:
        payload = msgpack.unpackb(data, raw=False, strict_map_key=False)
    except (ValueError, TypeError) as e:
        # TypeError: unhashable map key (array or map)
        raise InvalidFormatError(f"not a msgpack snapshot ({e})") from e

    if not isinstance(payload, dict):
        raise InvalidFormatError("msgpack snapshot must be a map")
    num_accounts = payload.get("num_accounts")
    edges = payload.get("edges", [])
    if isinstance(num_accounts, bool) or not isinstance(num_accounts, int):
        raise InvalidFormatError("msgpack snapshot has no integer 'num_accounts'")
    if not isinstance(edges, list):
        raise InvalidFormatError("msgpack snapshot 'edges' must be a list")

    pairs = []
    for position, edge in enumerate(edges):
        if (
            not isinstance(edge, list)
            or len(edge) < 2
            or any(isinstance(v, bool) or not isinstance(v, int) for v in edge[:2])
        ):
            raise InvalidFormatError(f"edge #{position} is not a pair of integers")
        pairs.append((edge[0], edge[1]))

    return FriendGraph.from_edges(num_accounts, pairs, source_path=str(path))


def load_graph(path: str | Path) -> FriendGraph:
    """
    Load a friendship graph from a file.

    Files ending in .msgpack are read as snapshots; anything else is
    parsed as the line-oriented text format. The whole load fails on the
    first problem, so a graph is either complete or not returned at all.

    Raises:
        GraphFileNotFoundError: Path does not exist
        GraphIOError: Path exists but could not be read or decoded
        InvalidFormatError: Content is malformed (EmptyFileError if empty)
    """
    if not str(path).strip():
        # Path("") would resolve to the current directory
        raise GraphFileNotFoundError(str(path))

    path = Path(path)
    logger.info(f"Loading graph from {path}...")

    try:
        if path.suffix.lower() == MSGPACK_SUFFIX:
            graph = _load_msgpack(path)
        else:
            graph = _load_text(path)
    except FileNotFoundError as e:
        logger.warning(f"Graph file not found: {path}")
        raise GraphFileNotFoundError(str(path)) from e
    except UnicodeDecodeError as e:
        logger.warning(f"Graph file is not valid {FILE_ENCODING}: {path}")
        raise GraphIOError(str(path), f"cannot decode as {FILE_ENCODING}") from e
    except OSError as e:
        logger.warning(f"Could not read graph file {path}: {e}")
        raise GraphIOError(str(path), e.strerror or str(e)) from e
    except GraphLoadError as e:
        logger.warning(f"Rejected graph file {path}: {e}")
        raise

    logger.info(
        f"Loaded {graph.num_accounts:,} accounts, "
        f"{graph.edge_count():,} friendships from {path}"
    )
    return graph
