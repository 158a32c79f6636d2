from __future__ import annotations

from typing import Any


class InvalidEdgeError(ValueError):
    """Raised while building a graph from an edge that cannot belong to it."""


class EmptyContainerError(IndexError):
    """Raised when reading from an empty priority queue."""


class NoPathExistsError(LookupError):
    """Raised when the end vertex is unreachable from the start vertex."""

    def __init__(self, start: Any, end: Any) -> None:
        super().__init__(f"No path between {start} and {end}.")
        self.start = start
        self.end = end
