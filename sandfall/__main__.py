"""Entry point for ``python -m sandfall``.

Loads a YAML scene, runs the simulation headless and prints ASCII frames
to stdout.  This is a demonstration host; the engine itself has no
command-line surface.
"""

from __future__ import annotations

import argparse
import logging
import pathlib

from sandfall.simulation.config import SimulationConfig
from sandfall.simulation.engine import SimulationEngine
from sandfall.world.presentation import render_ascii

_DEFAULT_CONFIG = (
    pathlib.Path(__file__).resolve().parent.parent / "config" / "default.yaml"
)

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    """Parse CLI args, build the engine, run and print frames."""
    parser = argparse.ArgumentParser(
        prog="sandfall",
        description="sandfall - deterministic falling-sand simulation",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=_DEFAULT_CONFIG,
        help="Path to YAML config file (default: config/default.yaml)",
    )
    parser.add_argument(
        "--ticks",
        type=int,
        default=None,
        help="Number of ticks to run (default: value from config)",
    )
    parser.add_argument(
        "--every",
        type=int,
        default=50,
        help="Print a frame every N ticks (default: 50)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = SimulationConfig.from_yaml(args.config)
    engine = SimulationEngine.from_config(config)
    ticks = config.ticks if args.ticks is None else args.ticks
    every = max(1, args.every)

    print(render_ascii(engine.grid))
    for _ in range(ticks):
        engine.step()
        if engine.tick % every == 0:
            print(f"--- tick {engine.tick} ---")
            print(render_ascii(engine.grid))
    logger.info("Finished after %d ticks", engine.tick)


if __name__ == "__main__":
    main()
