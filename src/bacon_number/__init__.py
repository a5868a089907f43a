"""
Bacon Number - Core Library

Builds an in-memory collaboration graph from a movie-cast dataset and answers
degrees-of-separation queries between actors.
"""

from .graph import CollaborationGraph, GraphBuilder
from .solver import BaconSolver, DistanceResult, QueryStatus

__all__ = ['CollaborationGraph', 'GraphBuilder', 'BaconSolver', 'DistanceResult', 'QueryStatus']
