"""
Pytest configuration and shared fixtures for bacon_number tests.
"""

import logging
from pathlib import Path
from typing import List

import pytest

from bacon_number.graph import CollaborationGraph, GraphBuilder
from bacon_number.solver import BaconSolver

# Configure logging for tests
logging.basicConfig(level=logging.INFO)

SAMPLE_LINES = [
    "Apollo 13 (1995)/Hanks, Tom/Bacon, Kevin/Paxton, Bill/Sinise, Gary",
    "Forrest Gump (1994)/Hanks, Tom/Sinise, Gary/Wright, Robin",
    "The Princess Bride (1987)/Wright, Robin/Elwes, Cary/Patinkin, Mandy",
    "Saw (2004)/Elwes, Cary/Whannell, Leigh",
    "Solo Film (2001)/Loner, Lou",
    "Twister (1996)/Paxton, Bill/Hunt, Helen",
]


@pytest.fixture
def sample_lines() -> List[str]:
    """Six movies: one connected component around Kevin Bacon plus an isolated actor."""
    return list(SAMPLE_LINES)


@pytest.fixture
def sample_graph(sample_lines: List[str]) -> CollaborationGraph:
    """Graph built from the sample lines."""
    return GraphBuilder().build_from_lines(sample_lines)


@pytest.fixture
def solver(sample_graph: CollaborationGraph) -> BaconSolver:
    """Solver over the sample graph with the default reference actor."""
    return BaconSolver(sample_graph)


@pytest.fixture
def sample_dataset(tmp_path: Path, sample_lines: List[str]) -> Path:
    """The sample lines written to a dataset file, with a blank line in the middle."""
    path = tmp_path / "movies.txt"
    lines = sample_lines[:3] + [""] + sample_lines[3:]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def restore_logging():
    """Put the root and package loggers back the way they were after a test reconfigures them."""
    root = logging.getLogger()
    package = logging.getLogger("bacon_number")
    handlers = root.handlers[:]
    level = root.level
    package_level = package.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    package.setLevel(package_level)
