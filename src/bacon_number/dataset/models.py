"""
Record model produced by the dataset reader and consumed by the graph builder.
"""
from typing import List

from pydantic import BaseModel, Field


class MovieRecord(BaseModel):
    """One tokenized dataset line: a movie name followed by its cast."""
    name: str = Field(..., description="Movie title, the first token of the line")
    cast: List[str] = Field(default_factory=list, description="Cast names in the order they appear on the line")
