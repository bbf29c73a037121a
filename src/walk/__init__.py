"""Walk module: walker state, controller, and run summaries."""

from src.walk.controller import WalkController
from src.walk.types import (
    EXCLUSION_CAPACITY,
    PathExhaustedError,
    WalkState,
    WalkSummary,
)

__all__ = [
    "EXCLUSION_CAPACITY",
    "PathExhaustedError",
    "WalkController",
    "WalkState",
    "WalkSummary",
]
