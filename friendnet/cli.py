"""
friendnet CLI - explore a friendship network from the console.

Usage:
    friendnet data/sample_network.txt
    friendnet data/sample_network.txt --friends 3
    friendnet data/sample_network.txt --connect 0 7
    friendnet                      (prompts for the file path)

Menu:
    [1] Get friend list   - friends of one account
    [2] Get connection    - shortest chain of friends between two accounts
    [3] Exit

Graph file format:
    <num_accounts> [<num_edges>]
    <a> <b>
    ...
"""

from __future__ import annotations

import argparse
import logging
import sys

from friendnet.config import (
    CLEAR_SCREEN,
    CLEAR_SCREEN_SEQUENCE,
    DEFAULT_GRAPH_PATH,
    LOG_LEVEL,
    MENU_RULE,
)
from friendnet.data.loader import FriendGraph, load_graph
from friendnet.errors import GraphLoadError, InvalidIdError
from friendnet.graph.bfs import PathFinder

logger = logging.getLogger(__name__)

MENU_FRIEND_LIST = "GET FRIEND LIST"
MENU_CONNECTION = "GET CONNECTION"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="friendnet",
        description="Explore friendships in a social network graph",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "graph_file",
        nargs="?",
        default=None,
        help="Graph file to load (prompted for if omitted)",
    )
    parser.add_argument(
        "--friends",
        type=int,
        metavar="ID",
        default=None,
        help="Print the friend list of ID and exit",
    )
    parser.add_argument(
        "--connect",
        type=int,
        nargs=2,
        metavar=("ID1", "ID2"),
        default=None,
        help="Print the shortest connection between two accounts and exit",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def resolve_log_level(name: str) -> int:
    """Map a level name (any case) to its number, WARNING if unknown."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.WARNING


def setup_logging(verbose: bool) -> None:
    log_level = logging.DEBUG if verbose else resolve_log_level(LOG_LEVEL)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


# =============================================================================
# Screen helpers
# =============================================================================

def clear_screen() -> None:
    """Clear the terminal (only when attached to one)."""
    if CLEAR_SCREEN and sys.stdout.isatty():
        print(CLEAR_SCREEN_SEQUENCE, end="", flush=True)


def print_header(title: str) -> None:
    print()
    print(MENU_RULE)
    print(f"{title:^{len(MENU_RULE)}}".rstrip())
    print(MENU_RULE)
    print()


def pause() -> None:
    print()
    print(MENU_RULE)
    input("Press Enter to continue...")


def read_account_id(prompt: str) -> int | None:
    """Read one integer from stdin, or None if the answer is not an integer."""
    answer = input(prompt).strip()
    try:
        return int(answer)
    except ValueError:
        return None


# =============================================================================
# Rendering
# =============================================================================

def render_friend_list(graph: FriendGraph, person_id: int) -> bool:
    """Print the friend list of one account. Returns False for an invalid ID."""
    try:
        friends = graph.neighbors_of(person_id)
    except InvalidIdError as e:
        print(f"Error: {e}")
        return False

    print(f"Person {person_id} has {len(friends)} friends!")
    print()
    if friends:
        print(f"List of friends: {' '.join(map(str, friends))}")
    else:
        print("This person has no friends in the network.")
    return True


def render_connection(finder: PathFinder, person_1: int, person_2: int) -> bool:
    """
    Print the shortest connection between two accounts.

    Invalid IDs and unconnected accounts both print "No connection found".
    Returns whether a connection was found.
    """
    result = finder.shortest_path(person_1, person_2)
    if not result.found:
        print("No connection found")
        return False

    print(f"There is a connection from {person_1} to {person_2}!")
    print()
    for from_id, to_id in result.friendships():
        print(f"  {from_id} is friends with {to_id}")
    return True


# =============================================================================
# Interactive menu
# =============================================================================

def _friend_list_page(graph: FriendGraph) -> None:
    clear_screen()
    print_header(MENU_FRIEND_LIST)
    person_id = read_account_id("Enter ID of person: ")

    clear_screen()
    print_header(MENU_FRIEND_LIST)
    if person_id is None:
        print("Error: Please enter a valid integer ID")
    else:
        render_friend_list(graph, person_id)
    pause()


def _connection_page(finder: PathFinder) -> None:
    clear_screen()
    print_header(MENU_CONNECTION)
    person_1 = read_account_id("Enter ID of first person: ")
    person_2 = None
    if person_1 is not None:
        print()
        person_2 = read_account_id("Enter ID of second person: ")

    clear_screen()
    print_header(MENU_CONNECTION)
    if person_1 is None or person_2 is None:
        print("Error: Please enter a valid integer ID")
    else:
        render_connection(finder, person_1, person_2)
    pause()


def run_main_menu(graph: FriendGraph, finder: PathFinder) -> None:
    """Show the main menu until the user chooses to exit."""
    while True:
        clear_screen()
        print_header("MAIN MENU")
        print(f"  File: {graph.source_path or '-'}")
        print(f"  Accounts: {graph.num_accounts}")
        print()
        print("  [1] Get friend list")
        print("  [2] Get connection")
        print("  [3] Exit")
        print()
        print(MENU_RULE)
        choice = input("Enter your choice: ").strip()

        if choice == "1":
            _friend_list_page(graph)
        elif choice == "2":
            _connection_page(finder)
        elif choice == "3":
            clear_screen()
            return


def prompt_graph_path() -> str:
    """Ask for the graph file, falling back to FRIENDNET_GRAPH_PATH."""
    answer = input("Input File Path: ").strip()
    if not answer and DEFAULT_GRAPH_PATH:
        print(f"Using {DEFAULT_GRAPH_PATH}")
        return DEFAULT_GRAPH_PATH
    return answer


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        graph_path = args.graph_file or prompt_graph_path()
        try:
            graph = load_graph(graph_path)
        except GraphLoadError as e:
            print(f"Error: {e}")
            print("Failed to load graph.")
            return 1

        finder = PathFinder(graph)

        if args.friends is not None or args.connect is not None:
            ok = True
            if args.friends is not None:
                ok = render_friend_list(graph, args.friends) and ok
            if args.connect is not None:
                if args.friends is not None:
                    print()
                ok = render_connection(finder, *args.connect) and ok
            return 0 if ok else 1

        print("Graph loaded!")
        input("Press Enter to continue...")
        run_main_menu(graph, finder)
    except EOFError:
        # stdin closed: leave quietly
        print()
        return 0
    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        return 130  # Standard exit code for Ctrl+C

    return 0


if __name__ == "__main__":
    sys.exit(main())
