"""
PathFinder - breadth-first search over the implicit actor/movie graph.

Adjacency is expanded on demand: an actor's filmography is resolved through
the movie index, and each movie's cast through the actor index. All
traversal bookkeeping lives in a SearchState created per query, so the graph
itself is never mutated and repeated queries cannot see each other's marks.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Set

from bacon_number.exceptions import ActorNotFoundException, NoPathException
from bacon_number.graph import CollaborationGraph
from .models import Hop
from .queue import LinkedQueue

logger = logging.getLogger(__name__)


@dataclass
class ParentLink:
    """How an actor was first reached: through which actor and which movie."""
    parent: str
    movie: str


@dataclass
class SearchState:
    """Scratch state for a single traversal."""
    queue: LinkedQueue[str] = field(default_factory=LinkedQueue)
    visited_actors: Set[str] = field(default_factory=set)
    visited_movies: Set[str] = field(default_factory=set)
    parents: Dict[str, ParentLink] = field(default_factory=dict)  # For path reconstruction


@dataclass
class PathResult:
    """Shortest chain between two actors."""
    distance: int
    hops: List[Hop]


class PathFinder:
    """Finds the shortest chain of shared movies between two actors."""

    def __init__(self, graph: CollaborationGraph):
        self.graph = graph

    def find_path(self, start: str, end: str) -> PathResult:
        """
        Run BFS from start until end is dequeued.

        Args:
            start: Name of the source actor
            end: Name of the target actor

        Returns:
            PathResult with the minimum hop count and the hops in start -> end order

        Raises:
            ActorNotFoundException: If either actor is not in the graph
            NoPathException: If the search exhausts start's component without reaching end
        """
        resolved = []
        for name in (start, end):
            actor = self.graph.get_actor(name)
            if actor is None:
                logger.warning(f"Actor '{name}' not found in the actor index")
                raise ActorNotFoundException(name)
            resolved.append(actor.name)
        # Names that share an index entry are the same actor
        start, end = resolved

        state = SearchState()
        state.visited_actors.add(start)
        state.queue.enqueue(start)

        while state.queue:
            current = state.queue.dequeue()

            if current == end:
                result = self._reconstruct_path(end, state)
                logger.debug(
                    f"Reached '{end}' from '{start}' in {result.distance} hops "
                    f"(actors visited: {len(state.visited_actors)}, movies visited: {len(state.visited_movies)})"
                )
                return result

            self._expand(current, state)

        logger.debug(
            f"Search from '{start}' exhausted after visiting {len(state.visited_actors)} actors "
            f"and {len(state.visited_movies)} movies"
        )
        raise NoPathException(start, end)

    def _expand(self, current: str, state: SearchState) -> None:
        """Enqueue every unvisited co-star of current through its unvisited movies."""
        actor = self.graph.get_actor(current)
        if actor is None:
            return

        for movie_name in actor.filmography:
            if movie_name in state.visited_movies:
                continue
            state.visited_movies.add(movie_name)

            movie = self.graph.get_movie(movie_name)
            if movie is None:
                logger.error(f"Movie '{movie_name}' listed for '{current}' is missing from the movie index")
                continue

            for cast_name in movie.cast:
                co_actor = self.graph.get_actor(cast_name)
                if co_actor is None:
                    continue
                co_star = co_actor.name
                if co_star in state.visited_actors:
                    continue
                # First discovery wins
                if co_star not in state.parents:
                    state.parents[co_star] = ParentLink(parent=current, movie=movie_name)
                state.visited_actors.add(co_star)
                state.queue.enqueue(co_star)

    def _reconstruct_path(self, end: str, state: SearchState) -> PathResult:
        """Walk parent links from end back to the source."""
        hops: List[Hop] = []
        current = end
        while current in state.parents:
            link = state.parents[current]
            hops.append(Hop(actor=link.parent, co_star=current, movie=link.movie))
            current = link.parent
        hops.reverse()
        return PathResult(distance=len(hops), hops=hops)
