"""Simulation context and the per-frame tick entry point.

``CatToySimulation.tick(now_ms)`` is the only thing a host needs to call once
per display refresh. Each tick runs spawn, then update, then render, and
returns without blocking; scheduling the next tick is the host's job.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Protocol

from cattoy.config.simulation_config import MotionMode, SimulationConfig
from cattoy.controls import Controls
from cattoy.entities import EntityKind
from cattoy.entity_store import EntityStore
from cattoy.input_adapter import InputAdapter, PointerState
from cattoy.physics import apply_speed_factor, compute_dt, update_entity
from cattoy.spawner import Spawner
from cattoy.util.rng import make_rng

logger = logging.getLogger(__name__)


class SceneSink(Protocol):
    """Anything that can draw the current scene."""

    def render(self, ctx: "SimulationContext") -> None:
        ...


@dataclass
class SimulationContext:
    """All mutable simulation state, passed explicitly instead of globals.

    Attributes:
        config: Preset values
        store: Live entities
        pointer: Pointer/touch state written by the input adapter
        controls: Pause, speed and kind selector
        width: Current surface width
        height: Current surface height
        last_time_ms: Timestamp of the previous tick
        last_spawn_ms: Timestamp of the last interval spawn
        frame_count: Ticks processed
        interacted: Whether the user has touched the surface yet
    """

    config: SimulationConfig
    width: float
    height: float
    store: EntityStore = field(default_factory=EntityStore)
    pointer: PointerState = field(default_factory=PointerState)
    controls: Controls = field(default_factory=Controls)
    last_time_ms: float = 0.0
    last_spawn_ms: float = 0.0
    frame_count: int = 0
    interacted: bool = False


@dataclass
class FrameResult:
    """What happened during one tick."""

    dt: float
    spawned: int
    removed: int
    entity_count: int
    paused: bool


class CatToySimulation:
    """Owns the context, spawner and input adapter for one surface.

    Attributes:
        config: Preset values
        rng: Random source shared by every spawn
        context: Mutable simulation state
        spawner: Entity factory
        input: Event-to-state adapter
        renderer: Optional scene sink called at the end of every tick
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        renderer: Optional[SceneSink] = None,
        start_time_ms: float = 0.0,
    ) -> None:
        self.config = config or SimulationConfig()
        self.rng = rng if rng is not None else make_rng(seed)
        display = self.config.display
        self.context = SimulationContext(
            config=self.config,
            width=display.screen_width,
            height=display.screen_height,
            pointer=PointerState(display.screen_width / 2, display.screen_height / 2, False),
            controls=Controls(
                speed_multiplier=self.config.default_speed,
                speed_factor=self.config.default_speed,
                kind=EntityKind.parse(self.config.default_kind),
            ),
            last_time_ms=start_time_ms,
        )
        self.spawner = Spawner(self.config, self.rng)
        self.input = InputAdapter(self.context, self.spawner)
        self.renderer = renderer

    def setup(self) -> None:
        """Seed the start-up population."""
        created = self.spawner.populate_initial(self.context, self.config.initial_count)
        logger.info("Simulation '%s' ready: %d initial entities on %dx%d",
                    self.config.preset, len(created), self.context.width, self.context.height)

    @property
    def store(self) -> EntityStore:
        return self.context.store

    @property
    def controls(self) -> Controls:
        return self.context.controls

    @property
    def paused(self) -> bool:
        return self.context.controls.paused

    @paused.setter
    def paused(self, value: bool) -> None:
        self.context.controls.paused = value

    def tick(self, now_ms: float) -> FrameResult:
        """Run one frame: spawn, update and prune unless paused, then render."""
        ctx = self.context
        physics = self.config.physics
        dt = compute_dt(now_ms, ctx.last_time_ms, physics.max_dt)
        ctx.last_time_ms = now_ms

        spawned = 0
        removed = 0
        if not ctx.controls.paused:
            if self.spawner.try_spawn(ctx, now_ms) is not None:
                spawned = 1
            for entity in reversed(ctx.store.entities):
                update_entity(entity, ctx, dt)
            if physics.ageing:
                removed = ctx.store.remove_expired(physics.lifetime_ms)
            ctx.frame_count += 1

        if self.renderer is not None:
            self.renderer.render(ctx)

        return FrameResult(
            dt=dt,
            spawned=spawned,
            removed=removed,
            entity_count=len(ctx.store),
            paused=ctx.controls.paused,
        )

    def clear(self) -> int:
        return self.context.store.clear()

    def adjust_speed(self, delta: float) -> float:
        """Speed stepper/slider.

        Attraction motion moves the speed-clamp multiplier. Bounce motion sets a
        new speed factor and rescales live velocities by it.
        """
        controls = self.context.controls
        if self.config.physics.motion is MotionMode.ATTRACT:
            value = controls.set_speed_multiplier(controls.speed_multiplier + delta)
        else:
            value = apply_speed_factor(self.context, controls.speed_factor + delta)
        logger.debug("Speed set to %.2f", value)
        return value

    def get_stats(self) -> Dict[str, Any]:
        """Summary used by the HUD and headless mode."""
        ctx = self.context
        by_kind = {kind.value: 0 for kind in EntityKind}
        for entity in ctx.store:
            by_kind[entity.kind.value] += 1
        return {
            "preset": self.config.preset,
            "frame": ctx.frame_count,
            "population": len(ctx.store),
            "max_population": self.config.spawn.max_entities,
            "by_kind": by_kind,
            "paused": ctx.controls.paused,
            "speed_multiplier": ctx.controls.speed_multiplier,
            "speed_factor": ctx.controls.speed_factor,
            "speed": (ctx.controls.speed_multiplier
                      if self.config.physics.motion is MotionMode.ATTRACT
                      else ctx.controls.speed_factor),
            "kind": ctx.controls.kind.value,
        }
