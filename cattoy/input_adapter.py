"""Pointer state and the mapping from input events to simulation changes.

Host event loops translate their native events (mouse, touch, window) into
calls on ``InputAdapter``; nothing here knows about pygame.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple

from cattoy.entities import Entity
from cattoy.exceptions import ConfigurationError

if TYPE_CHECKING:
    from cattoy.simulation import SimulationContext
    from cattoy.spawner import Spawner

logger = logging.getLogger(__name__)


@dataclass
class PointerState:
    """Current pointer/touch location and whether it is pressed."""

    x: float = 0.0
    y: float = 0.0
    active: bool = False

    def move_to(self, x: float, y: float) -> None:
        self.x = float(x)
        self.y = float(y)


def to_surface_coords(client_x: float, client_y: float,
                      offset: Tuple[float, float] = (0.0, 0.0)) -> Tuple[float, float]:
    """Translate viewport coordinates into surface-local coordinates."""
    return (client_x - offset[0], client_y - offset[1])


class InputAdapter:
    """Applies pointer, click and resize events to a simulation context."""

    def __init__(self, ctx: "SimulationContext", spawner: "Spawner") -> None:
        self.ctx = ctx
        self.spawner = spawner

    def pointer_down(self, x: float, y: float) -> Optional[Entity]:
        """Press: activate the pointer and spawn one entity under it."""
        self._mark_interaction()
        self.ctx.pointer.move_to(x, y)
        self.ctx.pointer.active = True
        return self.spawner.spawn_at(self.ctx, x, y)

    def pointer_move(self, x: float, y: float) -> None:
        self.ctx.pointer.move_to(x, y)

    def pointer_up(self) -> None:
        self.ctx.pointer.active = False

    def click(self, x: float, y: float) -> Optional[Entity]:
        """Click without press tracking: spawn only."""
        self._mark_interaction()
        return self.spawner.spawn_at(self.ctx, x, y)

    def resize(self, width: int, height: int) -> None:
        """Re-sync surface dimensions; live entities are left untouched."""
        if width <= 0 or height <= 0:
            raise ConfigurationError(f"Surface size must be positive, got {width}x{height}")
        self.ctx.width = width
        self.ctx.height = height
        logger.info("Surface resized to %dx%d", width, height)

    def _mark_interaction(self) -> None:
        if not self.ctx.interacted:
            self.ctx.interacted = True
            logger.debug("First interaction; hiding hint")
