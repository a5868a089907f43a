"""
Entity models for the collaboration graph.
"""
from dataclasses import dataclass, field
from typing import List


@dataclass
class Movie:
    """A movie node. Cast may contain the same name more than once."""
    name: str
    cast: List[str] = field(default_factory=list)


@dataclass
class Actor:
    """An actor node with the movies it appears in, in discovery order."""
    name: str
    filmography: List[str] = field(default_factory=list)
