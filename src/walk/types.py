"""Walk state and run summary structures."""

from collections import deque
from dataclasses import dataclass, field

import numpy as np

from src.grid.types import Vertex

EXCLUSION_CAPACITY = 150


class PathExhaustedError(RuntimeError):
    """Raised when the walk is at a dead end with no path left to backtrack."""

    def __init__(self, vertex: Vertex, message: str | None = None) -> None:
        self.vertex = vertex
        super().__init__(
            message
            or f"Walk exhausted at ({vertex.x}, {vertex.y}): "
            "no admissible neighbour and no path to backtrack"
        )


class _Blocked:
    """Membership view over the vertices a step must not move to."""

    __slots__ = ("_on_path", "_exclusions")

    def __init__(self, on_path: set[Vertex], exclusions: deque[Vertex]) -> None:
        self._on_path = on_path
        self._exclusions = exclusions

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._on_path or vertex in self._exclusions


@dataclass
class WalkState:
    """Mutable state of a single walker.

    path is the stack of previously visited vertices (all distinct, never
    containing current). exclusions is a bounded FIFO of abandoned dead
    ends: appending to a full deque drops its oldest entry.
    """

    current: Vertex
    path: list[Vertex] = field(default_factory=list)
    exclusions: deque[Vertex] = field(
        default_factory=lambda: deque(maxlen=EXCLUSION_CAPACITY)
    )
    steps: int = 0
    backtracks: int = 0
    exhaustions: int = 0
    _on_path: set[Vertex] = field(default_factory=set, repr=False)

    @classmethod
    def start_at(
        cls, start: Vertex, exclusion_capacity: int = EXCLUSION_CAPACITY
    ) -> "WalkState":
        return cls(current=start, exclusions=deque(maxlen=exclusion_capacity))

    def blocked(self) -> _Blocked:
        return _Blocked(self._on_path, self.exclusions)

    def advance(self, to: Vertex) -> None:
        self.path.append(self.current)
        self._on_path.add(self.current)
        self.current = to
        self.steps += 1

    def backtrack(self) -> Vertex:
        """Exclude current and step back to the last vertex on the path.

        Returns:
            The abandoned vertex.
        """
        abandoned = self.current
        self.exclusions.append(abandoned)
        self.current = self.path.pop()
        self._on_path.discard(self.current)
        self.backtracks += 1
        return abandoned


@dataclass(frozen=True)
class WalkSummary:
    """Outcome of running a walk for a number of steps.

    Omits slots=True since numpy arrays don't interact well with __slots__.
    """

    steps: int
    backtracks: int
    exhaustions: int
    path_length: int
    final_vertex: Vertex
    trajectory: np.ndarray  # int32 linear indices of current after each step
    visit_counts: np.ndarray  # int64 array of shape (height, width)

    @property
    def distinct_visited(self) -> int:
        return int(np.count_nonzero(self.visit_counts))
