"""Simulation configuration dataclasses, all frozen and slotted."""

from dataclasses import dataclass, field

EXHAUSTION_POLICIES = ("reset", "raise")


@dataclass(frozen=True, slots=True)
class MapConfig:
    """Grid map parameters."""

    width: int = 50
    height: int = 50
    evaporation_rate: float = 0.5  # stored on the map, no policy applies it
    initial_pheromone: float = 1.0


@dataclass(frozen=True, slots=True)
class WalkConfig:
    """Walk controller parameters."""

    start: tuple[int, int] = (7, 7)
    steps: int = 10_000
    exclusion_capacity: int = 150
    on_exhausted: str = "reset"  # "reset" or "raise"


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Window geometry used for screen layout and figures."""

    window_width: int = 1200
    window_height: int = 1200


@dataclass(frozen=True, slots=True)
class SimulationConfig:
    """Top-level configuration composing all sub-configs.

    Map dimensions and evaporation rate are checked when the map is built
    (MapConstructionError). Cross-parameter validation of the remaining
    fields runs in __post_init__.
    """

    map: MapConfig = field(default_factory=MapConfig)
    walk: WalkConfig = field(default_factory=WalkConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
    seed: int = 42
    description: str = ""
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        x, y = self.walk.start
        if x < 0 or y < 0 or x >= self.map.width or y >= self.map.height:
            raise ValueError(
                f"start ({x}, {y}) must lie inside the "
                f"{self.map.width}x{self.map.height} grid"
            )
        if self.walk.exclusion_capacity < 1:
            raise ValueError(
                f"exclusion_capacity must be >= 1, "
                f"got {self.walk.exclusion_capacity}"
            )
        if self.walk.steps < 0:
            raise ValueError(f"steps must be >= 0, got {self.walk.steps}")
        if self.walk.on_exhausted not in EXHAUSTION_POLICIES:
            raise ValueError(
                f"on_exhausted must be one of {EXHAUSTION_POLICIES}, "
                f"got {self.walk.on_exhausted!r}"
            )
        if self.render.window_width <= 0 or self.render.window_height <= 0:
            raise ValueError(
                f"window size must be positive, got "
                f"({self.render.window_width}, {self.render.window_height})"
            )
        if self.map.initial_pheromone < 0:
            raise ValueError(
                f"initial_pheromone must be >= 0, "
                f"got {self.map.initial_pheromone}"
            )
