"""
Solver models for degrees-of-separation queries.
"""

from enum import Enum
from typing import Annotated, List, Optional, Tuple

from pydantic import BaseModel, Field

NOT_CONNECTED = -1


class QueryStatus(str, Enum):
    """Outcome of a distance query."""
    FOUND = "found"
    NOT_FOUND = "not_found"
    NO_PATH = "no_path"


class Hop(BaseModel):
    """One step of a chain: two actors and the movie they share."""
    actor: str = Field(..., description="Actor nearer the start of the chain")
    co_star: str = Field(..., description="Actor reached through the shared movie")
    movie: str = Field(..., description="Title of the movie both actors appear in")

    def as_tuple(self) -> Tuple[str, str, str]:
        return (self.actor, self.co_star, self.movie)


class DistanceRequest(BaseModel):
    """Request model for a pairwise distance query."""
    start: Annotated[str, Field(min_length=1)] = Field(..., description="Name of the actor the search starts from")
    end: Annotated[str, Field(min_length=1)] = Field(..., description="Name of the actor to reach")


class DistanceResult(BaseModel):
    """Response model for a distance query."""
    start: str = Field(..., description="Name of the starting actor")
    end: str = Field(..., description="Name of the target actor")
    status: QueryStatus = Field(..., description="Whether a chain was found, and if not, why")
    distance: int = Field(NOT_CONNECTED, description="Number of actor-to-actor hops, -1 when there is no result")
    hops: List[Hop] = Field(default_factory=list, description="Chain from start to end, one hop per shared movie")
    message: Optional[str] = Field(None, description="Reason for a failed query")
    computation_time_ms: float = Field(0.0, description="Time taken to run the query in milliseconds")

    @property
    def found(self) -> bool:
        return self.status == QueryStatus.FOUND

    def as_tuples(self) -> List[Tuple[str, str, str]]:
        """The chain as (actor, co_star, movie) triples."""
        return [hop.as_tuple() for hop in self.hops]
