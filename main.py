"""Main entry point for the cat toy screensaver.

This module provides command-line options to run the simulation:
- Window mode (default): pygame window with mouse/touch input
- Headless mode: Stats-only, faster than realtime for testing
"""

import argparse
import json
import logging
import sys

from cattoy.config.simulation_config import PRESETS, DisplayConfig, SimulationConfig
from cattoy.exceptions import CatToyError
from cattoy.logging_config import configure_logging

logger = logging.getLogger(__name__)


def run_window(config: SimulationConfig, seed=None):
    """Run the pygame window."""
    try:
        from screensaver import run_screensaver
    except ImportError as e:
        logger.error("Error: Required dependencies not installed: %s", e)
        logger.error("Install with: pip install -e .")
        sys.exit(1)

    run_screensaver(config, seed=seed)


def run_headless(config: SimulationConfig, max_frames: int, stats_interval: int, seed=None,
                 export_stats=None):
    """Run the simulation in headless mode (no visualization).

    Args:
        config: Preset configuration
        max_frames: Maximum number of frames to simulate
        stats_interval: Log stats every N frames
        seed: Optional random seed for deterministic behavior
        export_stats: Optional filename to export final JSON stats
    """
    from cattoy.frame_driver import run_headless as drive_headless
    from cattoy.simulation import CatToySimulation

    simulation = CatToySimulation(config, seed=seed)
    stats = drive_headless(
        simulation,
        max_frames=max_frames,
        stats_interval=stats_interval,
        frame_rate=config.display.frame_rate,
        separator_width=config.display.separator_width,
    )
    if export_stats:
        with open(export_stats, "w") as f:
            json.dump(stats, f, indent=2)
        logger.info("Stats exported to: %s", export_stats)
    return stats


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Cat Toy Screensaver",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Fish aquarium in a window (default)
  python main.py

  # Bouncing laser dots
  python main.py --preset laser

  # Quick headless run with a fixed seed
  python main.py --headless --max-frames 3600 --seed 42
        """,
    )
    parser.add_argument(
        "--preset", choices=sorted(PRESETS), default="aquarium", help="Simulation preset"
    )
    parser.add_argument("--width", type=int, default=None, help="Window width in pixels")
    parser.add_argument("--height", type=int, default=None, help="Window height in pixels")
    parser.add_argument("--fps", type=int, default=None, help="Frames per second")
    parser.add_argument(
        "--headless", action="store_true", help="Run in headless mode (no window, stats only)"
    )
    parser.add_argument(
        "--max-frames",
        type=int,
        default=3600,
        help="Maximum frames to simulate in headless mode (default: 3600)",
    )
    parser.add_argument(
        "--stats-interval",
        type=int,
        default=600,
        help="Log stats every N frames in headless mode (default: 600)",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for deterministic behavior (optional)"
    )
    parser.add_argument(
        "--export-stats",
        type=str,
        default=None,
        metavar="FILENAME",
        help="Export final headless stats to a JSON file",
    )
    parser.add_argument(
        "--log-level", default=None, help="Log level (default: CATTOY_LOG_LEVEL or INFO)"
    )
    return parser


def build_config(args: argparse.Namespace) -> SimulationConfig:
    display = DisplayConfig()
    if args.width is not None:
        display.screen_width = args.width
    if args.height is not None:
        display.screen_height = args.height
    if args.fps is not None:
        display.frame_rate = args.fps
    if display.screen_width <= 0 or display.screen_height <= 0 or display.frame_rate <= 0:
        raise CatToyError("Width, height and fps must be positive")
    return SimulationConfig.for_preset(args.preset, display=display)


def main(argv=None):
    """Parse command-line arguments and run the appropriate mode."""
    args = build_parser().parse_args(argv)
    configure_logging(level=args.log_level, extra_loggers=["__main__", "screensaver", "rendering"])

    try:
        config = build_config(args)
        if args.headless:
            logger.info("Starting headless simulation...")
            run_headless(
                config, args.max_frames, args.stats_interval, seed=args.seed,
                export_stats=args.export_stats,
            )
        else:
            run_window(config, seed=args.seed)
    except CatToyError as e:
        logger.error("Fatal: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
