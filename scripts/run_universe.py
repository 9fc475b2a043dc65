#!/usr/bin/env python3
"""
Run a Game of Life universe in the terminal.

Builds a universe with the default seeding rule (or a single named pattern),
then ticks and repaints it once per frame until the requested number of
generations has run or the user hits Ctrl-C.
"""

import argparse
import sys
import os
import json
import logging
from pathlib import Path

# Add repository root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from lifegrid import DriverConfig, FrameLoop, TerminalPainter, Universe, UniverseConfig
from lifegrid.patterns import PATTERNS

logger = logging.getLogger(__name__)


def build_universe(config: UniverseConfig, pattern_name=None) -> Universe:
    """Create the universe, seeded by the default rule or a centered pattern."""
    if pattern_name is None:
        return config.build()

    pattern = PATTERNS[pattern_name]()
    row = (config.height - pattern.shape[0]) // 2
    col = (config.width - pattern.shape[1]) // 2
    return Universe.from_pattern(config.width, config.height, pattern, row, col)


def run(universe_config: UniverseConfig, driver_config: DriverConfig, pattern_name=None) -> dict:
    """Drive a universe and return a summary of the run."""
    universe = build_universe(universe_config, pattern_name)
    initial_alive = universe.count_alive()

    painter = TerminalPainter(clear=driver_config.clear_screen)
    loop = FrameLoop(universe, painter, frame_interval=driver_config.frame_interval)
    ticks = loop.run(driver_config.generations)

    return {
        "width": universe.width,
        "height": universe.height,
        "pattern": pattern_name or "default",
        "ticks": ticks,
        "generation": universe.generation,
        "initial_alive": initial_alive,
        "final_alive": universe.count_alive(),
        "frames_painted": painter.frames,
    }


def save_run_summary(summary, summary_file):
    """Save run summary as JSON."""
    path = Path(summary_file)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, 'w') as f:
        json.dump(summary, f, indent=2)

    logger.info(f"Run summary saved to: {path}")


def build_parser() -> argparse.ArgumentParser:
    """Command-line options; flags override the config dataclass defaults."""
    parser = argparse.ArgumentParser(description="Conway's Game of Life on a torus")
    parser.add_argument("--width", type=int, default=UniverseConfig.width, help="Grid width (cells)")
    parser.add_argument("--height", type=int, default=UniverseConfig.height, help="Grid height (cells)")
    parser.add_argument("--generations", type=int, default=None, help="Ticks to run (default: until Ctrl-C)")
    parser.add_argument("--interval", type=float, default=DriverConfig.frame_interval, help="Seconds between frames")
    parser.add_argument("--pattern", choices=sorted(PATTERNS), default=None, help="Seed a single centered pattern")
    parser.add_argument("--no-clear", action="store_true", help="Append frames instead of redrawing in place")
    parser.add_argument("--summary", type=str, default=None, help="Write a JSON run summary to this file")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    return parser


if __name__ == "__main__":
    args = build_parser().parse_args()

    logging.basicConfig(level=args.log_level.upper(), format='%(asctime)s - %(levelname)s - %(message)s',
                        stream=sys.stderr)

    try:
        summary = run(
            UniverseConfig(width=args.width, height=args.height),
            DriverConfig(generations=args.generations, frame_interval=args.interval,
                         clear_screen=not args.no_clear),
            pattern_name=args.pattern
        )

        if args.summary:
            save_run_summary(summary, args.summary)

    except Exception as e:
        logger.error(f"Run failed: {e}")
        sys.exit(1)
