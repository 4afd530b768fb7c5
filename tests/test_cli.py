"""
Tests for the console front end.
"""

import io
import logging

import pytest

from friendnet import cli


@pytest.fixture
def stdin(monkeypatch):
    """Return a helper that replaces stdin with the given text."""

    def _feed(text: str) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO(text))

    return _feed


class TestOneShot:
    """--friends and --connect run a single query."""

    def test_friend_list(self, example_path, capsys):
        """Friend list is printed space-separated with a count."""
        assert cli.main([str(example_path), "--friends", "1"]) == 0
        out = capsys.readouterr().out
        assert "Person 1 has 2 friends!" in out
        assert "List of friends: 0 2" in out

    def test_friend_list_no_friends(self, example_path, capsys):
        """An isolated account has its own message."""
        assert cli.main([str(example_path), "--friends", "3"]) == 0
        out = capsys.readouterr().out
        assert "Person 3 has 0 friends!" in out
        assert "This person has no friends in the network." in out

    def test_friend_list_invalid_id(self, example_path, capsys):
        """Out-of-range ID prints the valid range."""
        assert cli.main([str(example_path), "--friends", "7"]) == 1
        out = capsys.readouterr().out
        assert "Error: Invalid ID! ID must be between 0 and 3" in out

    def test_connection(self, example_path, capsys):
        """Connection is printed one friendship per line."""
        assert cli.main([str(example_path), "--connect", "0", "2"]) == 0
        out = capsys.readouterr().out
        assert "There is a connection from 0 to 2!" in out
        assert "  0 is friends with 1" in out
        assert "  1 is friends with 2" in out

    @pytest.mark.parametrize("ids", [["0", "3"], ["0", "9"]])
    def test_no_connection(self, example_path, capsys, ids):
        """No path and invalid ID share one message."""
        assert cli.main([str(example_path), "--connect", *ids]) == 1
        assert "No connection found" in capsys.readouterr().out


class TestLoadFailure:
    """The menu is never entered when loading fails."""

    def test_missing_file(self, tmp_path, capsys):
        assert cli.main([str(tmp_path / "missing.txt")]) == 1
        out = capsys.readouterr().out
        assert "Error: File not found" in out
        assert "Failed to load graph." in out
        assert "MAIN MENU" not in out

    def test_empty_file(self, write_graph, capsys):
        assert cli.main([str(write_graph(""))]) == 1
        assert "Error: File is empty" in capsys.readouterr().out

    def test_invalid_format(self, write_graph, capsys):
        assert cli.main([str(write_graph("abc\n"))]) == 1
        assert "Error: Invalid file format" in capsys.readouterr().out


class TestInteractive:
    """Drive the menu through stdin."""

    def test_prompted_path_and_exit(self, example_path, stdin, capsys):
        """Path is read from the prompt, then the menu exits on 3."""
        stdin(f"{example_path}\n\n3\n")
        assert cli.main([]) == 0
        out = capsys.readouterr().out
        assert "Input File Path:" in out
        assert "Graph loaded!" in out
        assert f"File: {example_path}" in out
        assert "Accounts: 4" in out

    def test_friend_list_page(self, example_path, stdin, capsys):
        """Menu option 1 shows a friend list."""
        stdin("\n1\n1\n\n3\n")
        assert cli.main([str(example_path)]) == 0
        out = capsys.readouterr().out
        assert "GET FRIEND LIST" in out
        assert "List of friends: 0 2" in out

    def test_connection_page(self, example_path, stdin, capsys):
        """Menu option 2 shows a connection."""
        stdin("\n2\n2\n0\n\n3\n")
        assert cli.main([str(example_path)]) == 0
        out = capsys.readouterr().out
        assert "GET CONNECTION" in out
        assert "There is a connection from 2 to 0!" in out
        assert "  2 is friends with 1" in out

    def test_non_integer_id(self, example_path, stdin, capsys):
        """Non-integer input is reported and the menu continues."""
        stdin("\n1\nabc\n\n2\nx\n\n3\n")
        assert cli.main([str(example_path)]) == 0
        out = capsys.readouterr().out
        assert out.count("Error: Please enter a valid integer ID") == 2

    def test_unknown_choice_ignored(self, example_path, stdin, capsys):
        """Unrecognized menu input just redraws the menu."""
        stdin("\n9\n\n3\n")
        assert cli.main([str(example_path)]) == 0
        assert capsys.readouterr().out.count("MAIN MENU") == 3

    def test_eof_exits_cleanly(self, example_path, stdin):
        """Closing stdin leaves the menu without an error."""
        stdin("\n")
        assert cli.main([str(example_path)]) == 0

    def test_blank_prompt_uses_default(self, example_path, stdin, monkeypatch, capsys):
        """A blank path answer falls back to the configured default."""
        monkeypatch.setattr(cli, "DEFAULT_GRAPH_PATH", str(example_path))
        stdin("\n\n3\n")
        assert cli.main([]) == 0
        assert "Graph loaded!" in capsys.readouterr().out


class TestArgs:
    """Argument parsing."""

    def test_defaults(self):
        args = cli.parse_args([])
        assert args.graph_file is None
        assert args.friends is None
        assert args.connect is None
        assert args.verbose is False

    def test_connect_takes_two_ids(self):
        args = cli.parse_args(["g.txt", "--connect", "1", "2"])
        assert args.connect == [1, 2]


class TestBlankPath:
    """An empty answer with no default configured."""

    def test_blank_path_not_found(self, stdin, monkeypatch, capsys):
        monkeypatch.setattr(cli, "DEFAULT_GRAPH_PATH", None)
        stdin("\n")
        assert cli.main([]) == 1
        out = capsys.readouterr().out
        assert "Error: File not found" in out
        assert "Failed to load graph." in out


class TestLogLevel:
    """LOG_LEVEL names are resolved before reaching logging."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("info", logging.INFO),
            ("Debug", logging.DEBUG),
            (" ERROR ", logging.ERROR),
            ("WARNING", logging.WARNING),
        ],
    )
    def test_known_names_any_case(self, name, expected):
        assert cli.resolve_log_level(name) == expected

    @pytest.mark.parametrize("name", ["verbose", "", "Level 5"])
    def test_unknown_names_fall_back(self, name):
        """Unrecognized names fall back to WARNING."""
        assert cli.resolve_log_level(name) == logging.WARNING

    def test_lowercase_env_does_not_break_run(self, example_path, monkeypatch, capsys):
        """A lowercase LOG_LEVEL still lets a query run."""
        monkeypatch.setattr(cli, "LOG_LEVEL", "info")
        assert cli.main([str(example_path), "--friends", "0"]) == 0
        assert "Person 0 has 1 friends!" in capsys.readouterr().out
