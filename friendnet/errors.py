"""
Exception hierarchy for graph loading and account queries.

Load failures derive from GraphLoadError so callers can catch one type
at the boundary. A query that finds no route is not an error; see
friendnet.graph.bfs.ConnectionStatus.
"""

from __future__ import annotations


class FriendNetError(Exception):
    """Base class for all friendnet errors."""


class GraphLoadError(FriendNetError):
    """The graph file could not be turned into a graph."""


class GraphFileNotFoundError(GraphLoadError):
    """The input path does not resolve to a file."""

    def __init__(self, path: str) -> None:
        super().__init__(f"File not found - {path}")
        self.path = path


class GraphIOError(GraphLoadError):
    """The file exists but reading it failed."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Problem reading file - {reason}")
        self.path = path
        self.reason = reason


class InvalidFormatError(GraphLoadError):
    """
    The file content does not follow the graph format.

    Attributes:
        detail: What was wrong with the content
        line_number: 1-based line of the offending content, if known
    """

    def __init__(self, detail: str | None = None, line_number: int | None = None) -> None:
        self.detail = detail
        self.line_number = line_number
        super().__init__(self._describe())

    def _describe(self) -> str:
        message = "Invalid file format"
        if self.line_number is not None:
            message += f" (line {self.line_number})"
        if self.detail:
            message += f": {self.detail}"
        return message


class EmptyFileError(InvalidFormatError):
    """The file has no content."""

    def _describe(self) -> str:
        return "File is empty"


class InvalidIdError(FriendNetError, ValueError):
    """An account ID outside [0, num_accounts) was queried."""

    def __init__(self, account_id: object, num_accounts: int) -> None:
        super().__init__(f"Invalid ID! ID must be between 0 and {num_accounts - 1}")
        self.account_id = account_id
        self.num_accounts = num_accounts
