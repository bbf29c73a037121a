"""Seed management for reproducible walks.

Walk randomness flows through an explicitly passed numpy Generator;
set_seed() additionally seeds the global sources for any third-party code
that still reads them.
"""

import random

import numpy as np

from src.config.simulation import SimulationConfig
from src.grid.aco_map import AcoMap
from src.walk.controller import WalkController


def make_rng(seed: int | None) -> np.random.Generator:
    """Create the Generator handed to the roulette selector.

    Args:
        seed: Seed value, or None for fresh OS entropy.
    """
    return np.random.default_rng(seed)


def set_seed(seed: int) -> None:
    """Seed Python's random module and the NumPy legacy global RNG."""
    random.seed(seed)
    np.random.seed(seed)


def verify_walk_determinism(config: SimulationConfig, n_steps: int = 200) -> bool:
    """Check that two walks seeded from config.seed follow the same trajectory.

    Builds two independent maps and controllers from the same config, runs
    n_steps on each and compares the visited vertex sequences.

    Args:
        config: Simulation configuration (map, walk and seed).
        n_steps: Number of steps to compare.

    Returns:
        True if both trajectories are identical.
    """
    trajectories = []
    for _ in range(2):
        aco_map = AcoMap.from_config(config.map)
        controller = WalkController.from_config(aco_map, config, make_rng(config.seed))
        trajectories.append(controller.run(n_steps).trajectory)
    return bool(np.array_equal(trajectories[0], trajectories[1]))
