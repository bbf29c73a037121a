"""Simulation configuration system with frozen, hashable, serializable dataclasses."""

from src.config.simulation import (
    EXHAUSTION_POLICIES,
    MapConfig,
    RenderConfig,
    SimulationConfig,
    WalkConfig,
)
from src.config.defaults import DEFAULT_CONFIG
from src.config.hashing import config_hash, full_config_hash, map_config_hash
from src.config.serialization import (
    config_from_dict,
    config_from_json,
    config_to_dict,
    config_to_json,
)

__all__ = [
    "EXHAUSTION_POLICIES",
    "MapConfig",
    "RenderConfig",
    "SimulationConfig",
    "WalkConfig",
    "DEFAULT_CONFIG",
    "config_hash",
    "full_config_hash",
    "map_config_hash",
    "config_from_dict",
    "config_from_json",
    "config_to_dict",
    "config_to_json",
]
