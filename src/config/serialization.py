"""JSON serialization and deserialization for simulation configs."""

import json
from dataclasses import asdict
from typing import Any

from dacite import from_dict, Config as DaciteConfig

from src.config.simulation import SimulationConfig

_DACITE_CONFIG = DaciteConfig(
    cast=[tuple],
    check_types=True,
    strict=True,
)


def config_to_json(config: SimulationConfig) -> str:
    """Serialize a SimulationConfig to a JSON string (sorted keys, 2-space indent)."""
    return json.dumps(asdict(config), indent=2, sort_keys=True)


def config_from_json(json_str: str) -> SimulationConfig:
    """Deserialize a JSON string to a SimulationConfig.

    dacite runs with strict=True so unknown keys are rejected, and
    cast=[tuple] turns JSON arrays back into the tuple fields (start, tags).
    Missing keys fall back to the dataclass defaults.
    """
    return config_from_dict(json.loads(json_str))


def config_to_dict(config: SimulationConfig) -> dict[str, Any]:
    """Convert a SimulationConfig to a plain dictionary."""
    return asdict(config)


def config_from_dict(d: dict[str, Any]) -> SimulationConfig:
    """Reconstruct a SimulationConfig from a plain dictionary."""
    return from_dict(
        data_class=SimulationConfig,
        data=d,
        config=_DACITE_CONFIG,
    )
