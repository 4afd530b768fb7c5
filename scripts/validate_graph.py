#!/usr/bin/env python3
"""
Validate a friendship graph file and print its statistics.

Usage:
    python scripts/validate_graph.py                       (bundled sample)
    python scripts/validate_graph.py path/to/network.txt
    python scripts/validate_graph.py network.txt --snapshot network.msgpack
"""

import argparse
import logging
import sys
import time
from pathlib import Path

# Fix Windows console encoding for Unicode output
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from friendnet.config import SAMPLE_GRAPH_PATH  # noqa: E402 - must be after sys.path modification
from friendnet.data import FriendGraph, load_graph  # noqa: E402
from friendnet.errors import GraphLoadError  # noqa: E402
from friendnet.graph import PathFinder  # noqa: E402

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
)
logger = logging.getLogger(__name__)


def load_and_validate(path: Path) -> FriendGraph | None:
    """Load the graph and run validation checks."""
    print(f"\n=== Loading {path} ===\n")

    start_time = time.time()
    try:
        graph = load_graph(path)
    except GraphLoadError as e:
        logger.error(f"✗ {e}")
        return None
    print(f"Load time: {time.time() - start_time:.3f} seconds")

    print("\n=== Graph Statistics ===\n")
    for key, value in graph.stats().items():
        print(f"  {key}: {value:,}" if isinstance(value, int) else f"  {key}: {value:.2f}")
    if graph.declared_edges is not None and graph.declared_edges != graph.edge_count():
        print(
            f"  ⚠ header declares {graph.declared_edges:,} edges, "
            f"found {graph.edge_count():,} unique friendships"
        )

    print("\n=== Validation Checks ===\n")
    all_valid = True
    for check, passed in graph.validate().items():
        status = "✓" if passed else "✗"
        print(f"  {status} {check}")
        if not passed:
            all_valid = False

    return graph if all_valid else None


def sample_connections(graph: FriendGraph) -> None:
    """Print the connection from account 0 to every other account."""
    print("\n=== Connections from account 0 ===\n")
    if graph.num_accounts == 0:
        print("  (no accounts)")
        return

    finder = PathFinder(graph)
    unreachable = 0
    for goal in range(1, graph.num_accounts):
        result = finder.shortest_path(0, goal)
        if result.found:
            print(f"  0 -> {goal}: {result.hops} hops ({' -> '.join(map(str, result.path))})")
        else:
            unreachable += 1
    print(f"\n  Unreachable from 0: {unreachable:,}")


def main() -> int:
    """Main validation routine."""
    parser = argparse.ArgumentParser(description="Validate a friendship graph file")
    parser.add_argument("graph_file", nargs="?", default=str(SAMPLE_GRAPH_PATH))
    parser.add_argument("--snapshot", default=None, help="Also write a msgpack snapshot here")
    parser.add_argument("--max-report", type=int, default=50,
                        help="Skip the connection report above this many accounts")
    args = parser.parse_args()

    print("=" * 60)
    print("Friendship Graph Validation")
    print("=" * 60)

    graph = load_and_validate(Path(args.graph_file))
    if graph is None:
        logger.error("\n✗ Validation failed.")
        return 1

    if graph.num_accounts <= args.max_report:
        sample_connections(graph)

    if args.snapshot:
        graph.dump_msgpack(args.snapshot)
        print(f"\n✓ Snapshot written to {args.snapshot}")

    print("\n" + "=" * 60)
    print("✓ All validation checks passed!")
    print("=" * 60)

    return 0


if __name__ == "__main__":
    sys.exit(main())
