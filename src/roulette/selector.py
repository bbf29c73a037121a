"""Roulette-wheel (fitness-proportionate) selection over weighted items.

Candidates are sorted ascending by weight, turned into a cumulative
histogram, and a uniform draw in [0, total) picks the first bin whose
upper boundary exceeds it. Each item is therefore selected with
probability weight / sum(weights).
"""

import logging
from collections.abc import Sequence
from typing import Generic, TypeVar

import numpy as np

log = logging.getLogger(__name__)

T = TypeVar("T")


def _validate_weights(weights: np.ndarray) -> None:
    if np.isnan(weights).any():
        raise ValueError("Roulette weights must not be NaN")
    if (weights < 0).any():
        raise ValueError(
            f"Roulette weights must be non-negative, got min {weights.min()}"
        )


def cumulative_histogram(
    weights: Sequence[float],
) -> tuple[np.ndarray, np.ndarray]:
    """Stable ascending sort of weights followed by a prefix sum.

    Args:
        weights: Non-negative weights in insertion order.

    Returns:
        Tuple of (order, cumulative) where order[i] is the insertion index
        of the i-th smallest weight and cumulative[-1] equals the total.
    """
    w = np.asarray(weights, dtype=np.float64)
    _validate_weights(w)
    order = np.argsort(w, kind="stable")
    return order, np.cumsum(w[order])


class RouletteSelector(Generic[T]):
    """Draws items proportionally to their weights.

    The random source is injected so runs can be reproduced from a seed.

    Args:
        rng: numpy Generator used for every draw.
    """

    def __init__(self, rng: np.random.Generator) -> None:
        self.rng = rng

    def select(self, candidates: Sequence[tuple[float, T]]) -> T | None:
        """Pick one item from (weight, item) pairs.

        Returns None when there is nothing to choose from: the candidate
        list is empty or every weight is zero.

        Raises:
            ValueError: If any weight is negative or NaN.
        """
        if not candidates:
            return None
        order, cumulative = cumulative_histogram([w for w, _ in candidates])
        total = cumulative[-1]
        if total <= 0.0:
            return None

        draw = self.rng.random() * total
        idx = self._bin(cumulative, draw)
        return candidates[int(order[idx])][1]

    def select_many(
        self, candidates: Sequence[tuple[float, T]], size: int
    ) -> list[T]:
        """Draw size independent selections from the same candidates.

        Uses the same interval search as select(), vectorised over all
        draws. Returns an empty list when no selection is possible.
        """
        if not candidates or size <= 0:
            return []
        order, cumulative = cumulative_histogram([w for w, _ in candidates])
        total = cumulative[-1]
        if total <= 0.0:
            return []

        draws = self.rng.random(size) * total
        bins = np.searchsorted(cumulative, draws, side="right")
        np.minimum(bins, len(cumulative) - 1, out=bins)
        items = [item for _, item in candidates]
        return [items[int(order[b])] for b in bins]

    @staticmethod
    def probabilities(candidates: Sequence[tuple[float, T]]) -> list[tuple[float, T]]:
        """Normalised (probability, item) pairs in ascending weight order."""
        if not candidates:
            return []
        order, cumulative = cumulative_histogram([w for w, _ in candidates])
        total = cumulative[-1]
        if total <= 0.0:
            return []
        return [
            (candidates[int(i)][0] / total, candidates[int(i)][1]) for i in order
        ]

    @staticmethod
    def _bin(cumulative: np.ndarray, draw: float) -> int:
        # First bin whose upper boundary exceeds the draw. Clamp for the
        # case where rounding lands the draw exactly on the total.
        idx = int(np.searchsorted(cumulative, draw, side="right"))
        if idx >= len(cumulative):
            log.debug("Roulette draw %.6g hit the total, clamping", draw)
            idx = len(cumulative) - 1
        return idx
