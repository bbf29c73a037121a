#!/usr/bin/env python3
"""Entry point for running a pheromone-biased grid walk.

Chains the stages into a single command:
map construction -> walk -> (optional) figure rendering.

Usage:
    python run_walk.py
    python run_walk.py --config config.json --steps 5000
    python run_walk.py --config config.json --figures out/ --verbose
    python run_walk.py --config config.json --dry-run
"""

import argparse
import logging
import sys
import time
from contextlib import contextmanager
from dataclasses import replace
from pathlib import Path
from typing import Generator

from dacite import DaciteError

from src.config import (
    DEFAULT_CONFIG,
    SimulationConfig,
    config_from_json,
    full_config_hash,
    map_config_hash,
)
from src.walk import WalkSummary

log = logging.getLogger(__name__)


@contextmanager
def stage_timer(name: str) -> Generator[None, None, None]:
    """Context manager that prints stage banners with elapsed time."""
    print(f"\n=== {name} ===")
    log.info("Starting: %s", name)
    t0 = time.monotonic()
    yield
    elapsed = time.monotonic() - t0
    print(f"... done in {elapsed:.1f}s")
    log.info("Completed: %s in %.1fs", name, elapsed)


def run_pipeline(
    config: SimulationConfig, figures_dir: Path | None = None
) -> WalkSummary:
    """Build the map, run the walk and optionally render figures.

    Args:
        config: Simulation configuration.
        figures_dir: Directory for PNG/SVG figures, or None to skip rendering.

    Returns:
        Summary of the finished walk.
    """
    from src.grid import AcoMap
    from src.reproducibility import make_rng, set_seed
    from src.walk import WalkController

    pipeline_start = time.monotonic()

    with stage_timer("Reproducibility Seeding"):
        set_seed(config.seed)
        rng = make_rng(config.seed)
        log.info("Seed set: %d", config.seed)

    with stage_timer("Map Construction"):
        aco_map = AcoMap.from_config(config.map)

    with stage_timer("Walk"):
        controller = WalkController.from_config(aco_map, config, rng)
        summary = controller.run(config.walk.steps)

    figures: list[Path] = []
    if figures_dir is not None:
        from src.visualization import render_all

        with stage_timer("Rendering"):
            figures = render_all(
                aco_map,
                controller.state,
                summary,
                figures_dir,
                window_size=(
                    config.render.window_width,
                    config.render.window_height,
                ),
            )

    total_elapsed = time.monotonic() - pipeline_start
    final = summary.final_vertex
    print(f"\n{'=' * 60}")
    print(f"Walk complete in {total_elapsed:.1f}s")
    print(f"  Steps:       {summary.steps}")
    print(f"  Backtracks:  {summary.backtracks}")
    print(f"  Exhaustions: {summary.exhaustions}")
    print(f"  Visited:     {summary.distinct_visited} of {aco_map.grid.n_vertices} vertices")
    print(f"  Path length: {summary.path_length}")
    print(f"  Final:       ({final.x}, {final.y})")
    if figures_dir is not None:
        print(f"  Figures:     {len(figures)} files in {figures_dir}")
    print(f"{'=' * 60}")

    return summary


def build_config(args: argparse.Namespace) -> SimulationConfig:
    """Load the config file (or defaults) and apply command-line overrides."""
    if args.config is not None:
        config = config_from_json(Path(args.config).read_text())
    else:
        config = DEFAULT_CONFIG

    map_cfg = config.map
    if args.width is not None:
        map_cfg = replace(map_cfg, width=args.width)
    if args.height is not None:
        map_cfg = replace(map_cfg, height=args.height)

    walk_cfg = config.walk
    if args.steps is not None:
        walk_cfg = replace(walk_cfg, steps=args.steps)
    if args.start is not None:
        walk_cfg = replace(walk_cfg, start=tuple(args.start))
    if args.on_exhausted is not None:
        walk_cfg = replace(walk_cfg, on_exhausted=args.on_exhausted)

    seed = config.seed if args.seed is None else args.seed
    return replace(config, map=map_cfg, walk=walk_cfg, seed=seed)


def build_argparser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run a pheromone-biased random walk on a grid graph"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to simulation config JSON file (defaults if omitted)",
    )
    parser.add_argument("--width", type=int, default=None, help="Grid columns")
    parser.add_argument("--height", type=int, default=None, help="Grid rows")
    parser.add_argument("--steps", type=int, default=None, help="Number of walk steps")
    parser.add_argument(
        "--start",
        type=int,
        nargs=2,
        metavar=("X", "Y"),
        default=None,
        help="Starting vertex",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--on-exhausted",
        choices=("reset", "raise"),
        default=None,
        help="What to do when the walk backtracks past its start",
    )
    parser.add_argument(
        "--figures",
        type=str,
        default=None,
        help="Directory to write walk figures into",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show the resolved configuration without running the walk",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable DEBUG-level logging",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_argparser().parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.config is not None and not Path(args.config).exists():
        print(f"Error: config file not found: {args.config}", file=sys.stderr)
        sys.exit(1)

    try:
        config = build_config(args)
    except (ValueError, DaciteError) as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Config hash: {full_config_hash(config)}")
    print(f"Map hash:    {map_config_hash(config)}")
    print()
    print(f"Map:    {config.map.width}x{config.map.height}, "
          f"evaporation_rate={config.map.evaporation_rate}, "
          f"initial_pheromone={config.map.initial_pheromone}")
    print(f"Walk:   start={config.walk.start}, steps={config.walk.steps}, "
          f"exclusion_capacity={config.walk.exclusion_capacity}, "
          f"on_exhausted={config.walk.on_exhausted}")
    print(f"Seed:   {config.seed}")

    if args.dry_run:
        print("\n[dry-run] Config loaded successfully. Exiting.")
        return

    figures_dir = Path(args.figures) if args.figures is not None else None
    try:
        run_pipeline(config, figures_dir)
    except Exception:
        log.exception("Walk failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
