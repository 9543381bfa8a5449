"""Time-gated entity factory.

New entities come from three places: the interval gate checked every tick,
pointer-down/click events, and the start-up population. All of them go
through ``create_entity`` and the shared ``SpawnPolicy``.
"""

import logging
import math
import random
from typing import TYPE_CHECKING, List, Optional

from cattoy.config.display import BOUNCE_PALETTE, LASER_COLOR
from cattoy.config.simulation_config import MotionMode, SimulationConfig, SpawnPolicy
from cattoy.config.spawning import (
    AQUARIUM_SIZE_RANGE,
    BOUNCE_SIZE_RANGE,
    BOUNCE_SPEED,
    INITIAL_VELOCITY_RANGE,
    SPAWN_MARGIN,
    SPAWN_SPEED_RANGE,
    ZERO_VECTOR_DIVISOR,
)
from cattoy.entities import Color, Entity, EntityKind
from cattoy.math_utils import Vector2
from cattoy.util.rng import require_rng_param

if TYPE_CHECKING:
    from cattoy.simulation import SimulationContext

logger = logging.getLogger(__name__)

__all__ = ["Spawner", "SpawnPolicy"]


class Spawner:
    """Creates entities and appends them to the context's store.

    Attributes:
        config: Preset the entities are shaped by
        policy: Cap and interval rules
        rng: Source of every random draw
    """

    def __init__(self, config: SimulationConfig, rng: Optional[random.Random]) -> None:
        self.config = config
        self.policy: SpawnPolicy = config.spawn
        self.rng: random.Random = require_rng_param(rng, "Spawner.__init__")
        self._next_id: int = 1

    def at_capacity(self, ctx: "SimulationContext") -> bool:
        return len(ctx.store) >= self.policy.max_entities

    def try_spawn(self, ctx: "SimulationContext", now_ms: float) -> Optional[Entity]:
        """Interval spawn: one entity if the gate has elapsed and there is room."""
        if now_ms - ctx.last_spawn_ms > self.policy.interval_ms and not self.at_capacity(ctx):
            entity = self.create_entity(ctx, ctx.controls.kind)
            ctx.store.add(entity)
            ctx.last_spawn_ms = now_ms
            logger.debug("Interval spawn #%d (%s), population %d",
                         entity.entity_id, entity.kind.value, len(ctx.store))
            return entity
        return None

    def spawn_at(self, ctx: "SimulationContext", x: float, y: float) -> Optional[Entity]:
        """Manual spawn at a pointer location, ignoring the interval gate.

        The cap only applies when the policy enforces it for manual spawns.
        """
        if self.policy.enforce_cap_on_manual_spawn and self.at_capacity(ctx):
            logger.debug("Manual spawn at (%.0f, %.0f) refused: at capacity", x, y)
            return None
        entity = self.create_entity(ctx, ctx.controls.kind, x, y)
        ctx.store.add(entity)
        return entity

    def populate_initial(self, ctx: "SimulationContext", count: int,
                         kind: Optional[EntityKind] = None) -> List[Entity]:
        """Seed the start-up population, stopping at the cap."""
        created = []
        for _ in range(count):
            if self.at_capacity(ctx):
                break
            entity = self.create_entity(ctx, kind or ctx.controls.kind)
            ctx.store.add(entity)
            created.append(entity)
        return created

    def create_entity(self, ctx: "SimulationContext", kind: EntityKind,
                      x: Optional[float] = None, y: Optional[float] = None) -> Entity:
        """Build a new entity with randomized velocity, size and phase."""
        rng = self.rng
        if x is None:
            x = self._random_coordinate(ctx.width)
        if y is None:
            y = self._random_coordinate(ctx.height)

        if self.config.physics.motion is MotionMode.BOUNCE:
            vel = Vector2(rng.uniform(-BOUNCE_SPEED, BOUNCE_SPEED),
                          rng.uniform(-BOUNCE_SPEED, BOUNCE_SPEED))
            vel.mul_inplace(ctx.controls.speed_factor)
            size = rng.uniform(*BOUNCE_SIZE_RANGE)
        else:
            vel = self._random_velocity()
            size = rng.uniform(*AQUARIUM_SIZE_RANGE)

        entity = Entity(
            kind=kind,
            pos=Vector2(x, y),
            vel=vel,
            size=size,
            phase=rng.uniform(0.0, 2.0 * math.pi),
            color=self._pick_color(kind),
            entity_id=self._next_id,
        )
        self._next_id += 1
        return entity

    def _random_coordinate(self, extent: float) -> float:
        if extent <= 2 * SPAWN_MARGIN:
            return extent / 2
        return self.rng.uniform(SPAWN_MARGIN, extent - SPAWN_MARGIN)

    def _random_velocity(self) -> Vector2:
        """Random direction rescaled to a random speed in SPAWN_SPEED_RANGE."""
        rng = self.rng
        direction = Vector2(rng.uniform(-INITIAL_VELOCITY_RANGE, INITIAL_VELOCITY_RANGE),
                            rng.uniform(-INITIAL_VELOCITY_RANGE, INITIAL_VELOCITY_RANGE))
        length = direction.length() or ZERO_VECTOR_DIVISOR
        speed = rng.uniform(*SPAWN_SPEED_RANGE)
        return direction.mul_inplace(speed / length)

    def _pick_color(self, kind: EntityKind) -> Color:
        if self.config.laser_style and kind is EntityKind.DOT:
            return LASER_COLOR
        if self.config.random_colors:
            return self.rng.choice(BOUNCE_PALETTE)
        return kind.default_color
