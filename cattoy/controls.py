"""Global UI controls read by the simulation every tick."""

import logging
from dataclasses import dataclass

from cattoy.config.physics import DEFAULT_SPEED, SPEED_MAX, SPEED_MIN
from cattoy.entities import EntityKind

logger = logging.getLogger(__name__)


@dataclass
class Controls:
    """Pause flag, speed settings and the entity-kind selector.

    Attributes:
        paused: Skip spawning and physics (rendering still runs)
        speed_multiplier: Slider value scaling the aquarium speed clamp
        speed_factor: Stepper value scaling bounce velocities
        kind: Entity kind used for new spawns
    """

    paused: bool = False
    speed_multiplier: float = DEFAULT_SPEED
    speed_factor: float = DEFAULT_SPEED
    kind: EntityKind = EntityKind.FISH

    def toggle_pause(self) -> bool:
        self.paused = not self.paused
        logger.info("Simulation %s", "paused" if self.paused else "resumed")
        return self.paused

    def set_hidden(self, hidden: bool) -> None:
        """Visibility signal: a hidden surface pauses, a visible one resumes."""
        if self.paused != hidden:
            logger.info("Visibility changed (hidden=%s)", hidden)
        self.paused = hidden

    def set_speed_multiplier(self, value: float) -> float:
        self.speed_multiplier = clamp_speed(value)
        return self.speed_multiplier

    def cycle_kind(self) -> EntityKind:
        self.kind = self.kind.next()
        logger.debug("Selected entity kind: %s", self.kind.value)
        return self.kind


def clamp_speed(value: float) -> float:
    return max(SPEED_MIN, min(SPEED_MAX, float(value)))
