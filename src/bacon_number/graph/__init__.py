# Collaboration graph package: entities and the builder that indexes them

from .models import Actor, Movie
from .builder import BuildStats, CollaborationGraph, GraphBuilder

__all__ = [
    "Actor",
    "Movie",
    "BuildStats",
    "CollaborationGraph",
    "GraphBuilder",
]
