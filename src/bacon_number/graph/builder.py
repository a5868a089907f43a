"""
GraphBuilder - turns movie records into the bipartite collaboration graph.

Movies list their actors by name and actors list their movies by name; no
actor-to-actor edge list is ever materialized.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Union

from bacon_number.dataset import MovieRecord, parse_line
from bacon_number.index import HashIndex
from .models import Actor, Movie

logger = logging.getLogger(__name__)

RecordLike = Union[MovieRecord, Sequence[str]]


@dataclass
class BuildStats:
    """Counters collected while building the graph."""
    records: int = 0
    skipped: int = 0
    movies: int = 0
    actors: int = 0
    appearances: int = 0
    build_time_ms: float = 0.0


@dataclass
class CollaborationGraph:
    """The two indexes produced by GraphBuilder."""
    movies: HashIndex[Movie]
    actors: HashIndex[Actor]
    stats: BuildStats = field(default_factory=BuildStats)

    def get_actor(self, name: str) -> Optional[Actor]:
        return self.actors.get(name)

    def get_movie(self, name: str) -> Optional[Movie]:
        return self.movies.get(name)

    def has_actor(self, name: str) -> bool:
        return name in self.actors


class GraphBuilder:
    """Builds a CollaborationGraph from a sequence of movie records."""

    def __init__(self, strict_keys: bool = True):
        self.strict_keys = strict_keys

    def build(self, records: Sequence[RecordLike]) -> CollaborationGraph:
        """
        Index every record's movie and cast.

        Args:
            records: MovieRecord objects, or raw token sequences [movie, *cast].
                Blank records are skipped.

        Returns:
            CollaborationGraph with both indexes sized to len(records)
        """
        start_time = time.perf_counter()
        table_size = max(len(records), 1)
        graph = CollaborationGraph(
            movies=HashIndex(table_size, strict_keys=self.strict_keys),
            actors=HashIndex(table_size, strict_keys=self.strict_keys),
        )
        stats = graph.stats

        for line_no, raw in enumerate(records, start=1):
            stats.records += 1
            record = self._coerce_record(raw)
            if record is None:
                logger.debug(f"Skipping empty record at position {line_no}")
                stats.skipped += 1
                continue
            self._add_record(graph, record)

        stats.build_time_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"Graph built: {stats.movies} movies, {stats.actors} actors, "
            f"{stats.appearances} appearances from {stats.records} records "
            f"({stats.skipped} skipped) in {stats.build_time_ms:.1f}ms"
        )
        return graph

    def build_from_lines(self, lines: Iterable[str], delimiter: str = "/") -> CollaborationGraph:
        """Tokenize raw dataset lines and build the graph."""
        return self.build([parse_line(line, delimiter) for line in lines])

    def _add_record(self, graph: CollaborationGraph, record: MovieRecord) -> None:
        movie = Movie(name=record.name, cast=_trim_trailing_empty(record.cast))
        graph.movies.insert(movie.name, movie)
        graph.stats.movies += 1

        for actor_name in movie.cast:
            actor = graph.actors.get(actor_name)
            if actor is not None:
                actor.filmography.append(movie.name)
            else:
                actor = Actor(name=actor_name, filmography=[movie.name])
                graph.actors.insert(actor_name, actor)
                graph.stats.actors += 1
            graph.stats.appearances += 1

    @staticmethod
    def _coerce_record(raw: Optional[RecordLike]) -> Optional[MovieRecord]:
        if raw is None:
            return None
        if isinstance(raw, MovieRecord):
            record = raw
        elif isinstance(raw, str):
            raise TypeError("Raw lines must be tokenized first; use build_from_lines()")
        else:
            tokens = list(raw)
            if not tokens:
                return None
            record = MovieRecord(name=tokens[0], cast=tokens[1:])
        if not record.name.strip():
            return None
        return record


def _trim_trailing_empty(cast: List[str]) -> List[str]:
    trimmed = list(cast)
    while trimmed and not trimmed[-1].strip():
        trimmed.pop()
    return trimmed
