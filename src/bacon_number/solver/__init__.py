# Degrees-of-separation solver package

from .models import DistanceRequest, DistanceResult, Hop, QueryStatus, NOT_CONNECTED
from .path_finder import PathFinder, PathResult
from .solver import BaconSolver

__all__ = [
    "BaconSolver",
    "PathFinder",
    "PathResult",
    "DistanceRequest",
    "DistanceResult",
    "Hop",
    "QueryStatus",
    "NOT_CONNECTED",
]
