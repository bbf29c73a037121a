"""Default configuration for the walk runner."""

from src.config.simulation import SimulationConfig

# 50x50 grid, evaporation 0.5, start at (7, 7), 1200x1200 window, seed 42.
DEFAULT_CONFIG = SimulationConfig()
