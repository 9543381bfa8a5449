"""Hosts that call ``CatToySimulation.tick`` once per frame.

The pygame window loop lives in ``screensaver.py``; this module holds the
display-free driver used by headless runs and tests.
"""

import logging
from typing import Callable, List, Optional

from cattoy.simulation import CatToySimulation, FrameResult

logger = logging.getLogger(__name__)


class HeadlessFrameDriver:
    """Feeds synthetic, evenly spaced timestamps to a simulation.

    Attributes:
        simulation: Simulation being driven
        frame_ms: Milliseconds between synthetic frames
        now_ms: Timestamp of the last frame issued
    """

    def __init__(self, simulation: CatToySimulation, frame_ms: float = 1000.0 / 60.0,
                 start_ms: Optional[float] = None) -> None:
        self.simulation = simulation
        self.frame_ms = frame_ms
        self.now_ms = simulation.context.last_time_ms if start_ms is None else start_ms

    def step(self) -> FrameResult:
        self.now_ms += self.frame_ms
        return self.simulation.tick(self.now_ms)

    def run(self, frames: int,
            on_frame: Optional[Callable[[int, FrameResult], None]] = None) -> List[FrameResult]:
        """Drive ``frames`` ticks, calling ``on_frame(index, result)`` after each."""
        results = []
        for frame in range(frames):
            result = self.step()
            results.append(result)
            if on_frame is not None:
                on_frame(frame, result)
        return results


def run_headless(simulation: CatToySimulation, max_frames: int, stats_interval: int,
                 frame_rate: int, separator_width: int = 60) -> dict:
    """Run without a display, logging stats every ``stats_interval`` frames."""
    logger.info("=" * separator_width)
    logger.info("HEADLESS CAT TOY SIMULATION (%s)", simulation.config.preset)
    logger.info("=" * separator_width)
    logger.info("Running for %d frames (%.1f seconds of sim time)",
                max_frames, max_frames / frame_rate)

    totals = {"spawned": 0, "removed": 0}

    def on_frame(frame: int, result: FrameResult) -> None:
        totals["spawned"] += result.spawned
        totals["removed"] += result.removed
        if frame > 0 and stats_interval > 0 and frame % stats_interval == 0:
            log_stats(simulation)

    simulation.setup()
    HeadlessFrameDriver(simulation, frame_ms=1000.0 / frame_rate).run(max_frames, on_frame)

    logger.info("=" * separator_width)
    logger.info("SIMULATION COMPLETE - Final Statistics")
    logger.info("=" * separator_width)
    stats = log_stats(simulation)
    stats.update(totals)
    return stats


def log_stats(simulation: CatToySimulation) -> dict:
    stats = simulation.get_stats()
    logger.info(
        "Frame %d: population %d/%d %s",
        stats["frame"], stats["population"], stats["max_population"], stats["by_kind"],
    )
    return stats
