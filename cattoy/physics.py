"""Per-frame physics: acceleration, speed clamp, integration and boundaries.

Every function here mutates only ``pos``, ``vel`` and ``age`` of the entity
it is given.
"""

import math
from typing import TYPE_CHECKING

from cattoy.config.simulation_config import BoundaryPolicy, MotionMode, PhysicsConfig
from cattoy.controls import clamp_speed
from cattoy.entities import Entity
from cattoy.math_utils import Vector2

if TYPE_CHECKING:
    from cattoy.input_adapter import PointerState
    from cattoy.simulation import SimulationContext


def compute_dt(now_ms: float, last_ms: float, max_dt: float) -> float:
    """Seconds since the previous frame, clamped to ``[0, max_dt]``."""
    return min(max_dt, max(0.0, (now_ms - last_ms) / 1000.0))


def apply_attraction(entity: Entity, pointer: "PointerState", dt: float,
                     physics: PhysicsConfig) -> None:
    """Pull the entity toward the pointer with an inverse-square strength."""
    dx = pointer.x - entity.pos.x
    dy = pointer.y - entity.pos.y
    d = max(physics.min_attraction_distance, math.hypot(dx, dy))
    pull = physics.attraction_strength / (d * d)
    scale = pull * dt * physics.attraction_damping
    entity.vel.x += dx * scale
    entity.vel.y += dy * scale


def apply_drift(entity: Entity, dt: float, physics: PhysicsConfig) -> None:
    """Small oscillating push so idle entities meander."""
    angle = entity.age * physics.drift_frequency + entity.phase
    entity.vel.x += math.sin(angle) * physics.drift_acceleration * dt
    entity.vel.y += math.cos(angle) * physics.drift_acceleration * dt


def clamp_speed_to(entity: Entity, max_speed: float) -> None:
    entity.vel.limit_inplace(max_speed)


def wrap_position(pos: Vector2, width: float, height: float, margin: float) -> None:
    """Teleport to the opposite edge once past the margin on either axis."""
    if pos.x < -margin:
        pos.x = width + margin
    elif pos.x > width + margin:
        pos.x = -margin
    if pos.y < -margin:
        pos.y = height + margin
    elif pos.y > height + margin:
        pos.y = -margin


def reflect_velocity(pos: Vector2, vel: Vector2, width: float, height: float) -> None:
    """Negate the velocity component of any axis outside ``[0, extent]``.

    The position is left where it is; the next frames carry it back inside.
    """
    if pos.x < 0 or pos.x > width:
        vel.x = -vel.x
    if pos.y < 0 or pos.y > height:
        vel.y = -vel.y


def update_entity(entity: Entity, ctx: "SimulationContext", dt: float) -> None:
    """Advance one entity by one frame according to the preset's physics."""
    physics = ctx.config.physics

    if physics.motion is MotionMode.ATTRACT:
        if ctx.pointer.active:
            apply_attraction(entity, ctx.pointer, dt, physics)
        else:
            apply_drift(entity, dt, physics)
        clamp_speed_to(entity, physics.base_max_speed * ctx.controls.speed_multiplier)

    if physics.time_scaled:
        entity.pos.x += entity.vel.x * dt
        entity.pos.y += entity.vel.y * dt
    else:
        entity.pos.add_inplace(entity.vel)

    if physics.ageing:
        entity.age += dt * 1000.0

    if physics.boundary is BoundaryPolicy.WRAP:
        wrap_position(entity.pos, ctx.width, ctx.height, physics.wrap_margin)
    else:
        reflect_velocity(entity.pos, entity.vel, ctx.width, ctx.height)


def apply_speed_factor(ctx: "SimulationContext", factor: float) -> float:
    """Set the bounce speed factor and rescale every live velocity by it.

    Repeated presses compound: each call multiplies current velocities by the
    new factor, not by the ratio to the previous one.
    """
    factor = clamp_speed(factor)
    ctx.controls.speed_factor = factor
    for entity in ctx.store:
        entity.vel.mul_inplace(factor)
    return factor
