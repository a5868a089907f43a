"""
BaconSolver - degrees-of-separation queries over a collaboration graph.

Wraps PathFinder and turns its failures into sentinel results (distance -1)
that still say whether an actor was unknown or simply unconnected.
"""

import logging
import time
from pathlib import Path
from typing import Optional, Union

from bacon_number.config import DEFAULT_REFERENCE_ACTOR, BaconConfig
from bacon_number.dataset import read_records
from bacon_number.exceptions import ActorNotFoundException, NoPathException
from bacon_number.graph import CollaborationGraph, GraphBuilder
from bacon_number.utils.formatting import format_hop
from .models import DistanceRequest, DistanceResult, QueryStatus
from .path_finder import PathFinder

logger = logging.getLogger(__name__)


class BaconSolver:
    """Answers Bacon-number and pairwise distance queries."""

    def __init__(self, graph: CollaborationGraph, reference_actor: str = DEFAULT_REFERENCE_ACTOR):
        self.graph = graph
        self.reference_actor = reference_actor
        self.path_finder = PathFinder(graph)

    @classmethod
    def from_file(cls, path: Union[str, Path], config: Optional[BaconConfig] = None) -> "BaconSolver":
        """Read a dataset file, build its graph and return a solver for it."""
        config = config or BaconConfig()
        records = read_records(path, delimiter=config.delimiter, encoding=config.encoding)
        graph = GraphBuilder(strict_keys=config.strict_keys).build(records)
        return cls(graph, reference_actor=config.reference_actor)

    def bacon_number(self, actor: str) -> DistanceResult:
        """Distance from actor to the reference actor."""
        return self.find_distance(actor, self.reference_actor)

    def find_distance(self, start: str, end: str) -> DistanceResult:
        """
        Find the distance between two actors.

        Args:
            start: Name of the first actor
            end: Name of the second actor

        Returns:
            DistanceResult; distance is -1 when an actor is unknown or no chain exists

        Raises:
            ValueError: If either name is empty
        """
        request = DistanceRequest(start=start, end=end)
        request_start_time = time.perf_counter()

        try:
            path = self.path_finder.find_path(request.start, request.end)
        except ActorNotFoundException as e:
            return DistanceResult(
                start=request.start,
                end=request.end,
                status=QueryStatus.NOT_FOUND,
                message=e.message,
                computation_time_ms=(time.perf_counter() - request_start_time) * 1000,
            )
        except NoPathException as e:
            logger.info(e.message)
            return DistanceResult(
                start=request.start,
                end=request.end,
                status=QueryStatus.NO_PATH,
                message=e.message,
                computation_time_ms=(time.perf_counter() - request_start_time) * 1000,
            )

        computation_time_ms = (time.perf_counter() - request_start_time) * 1000
        for hop in path.hops:
            logger.debug(format_hop(hop))
        logger.info(
            f"QUERY SUMMARY for {request.start} -> {request.end}: "
            f"Distance: {path.distance}, "
            f"Total time: {computation_time_ms:.1f}ms"
        )

        return DistanceResult(
            start=request.start,
            end=request.end,
            status=QueryStatus.FOUND,
            distance=path.distance,
            hops=path.hops,
            computation_time_ms=computation_time_ms,
        )
