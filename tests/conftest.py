"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from collections.abc import Callable
from pathlib import Path

import pytest

from friendnet.data import FriendGraph, load_graph


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def data_dir(project_root: Path) -> Path:
    """Return the data directory."""
    return project_root / "data"


@pytest.fixture
def write_graph(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes graph text to a temp file and returns its path."""

    def _write(content: str, name: str = "network.txt") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def example_path(write_graph) -> Path:
    """Four accounts, a 0-1-2 chain and isolated account 3."""
    return write_graph("4\n0 1\n1 2\n")


@pytest.fixture
def example_graph(example_path: Path) -> FriendGraph:
    return load_graph(example_path)


@pytest.fixture
def sample_graph(data_dir: Path) -> FriendGraph:
    """The bundled ten-account sample network."""
    return load_graph(data_dir / "sample_network.txt")
