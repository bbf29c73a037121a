"""Weighted random selection."""

from src.roulette.selector import RouletteSelector, cumulative_histogram

__all__ = [
    "RouletteSelector",
    "cumulative_histogram",
]
