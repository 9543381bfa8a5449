"""Per-frame scene drawing onto a pygame surface."""

import logging
from typing import TYPE_CHECKING, Optional, Tuple

import pygame

from cattoy.config.display import (
    BACKGROUND_BOTTOM_RGBA,
    BACKGROUND_TOP_RGBA,
    BOUNCE_BACKGROUND_COLOR,
    CLEAR_COLOR,
    POINTER_RING_RADIUS,
    POINTER_RING_RGBA,
    POINTER_RING_WIDTH,
)
from cattoy.config.simulation_config import SimulationConfig
from cattoy.entities import EntityKind
from cattoy.exceptions import RenderSurfaceError
from rendering.shapes import draw_dot, draw_fish
from rendering.ui_renderer import UIRenderer

if TYPE_CHECKING:
    from cattoy.simulation import CatToySimulation, SimulationContext

logger = logging.getLogger(__name__)

RGB = Tuple[int, int, int]


def blend_over(rgba: Tuple[float, float, float, float], base: RGB = CLEAR_COLOR) -> RGB:
    """Composite a translucent color over an opaque base color."""
    r, g, b, a = rgba
    return (
        round(r * a + base[0] * (1 - a)),
        round(g * a + base[1] * (1 - a)),
        round(b * a + base[2] * (1 - a)),
    )


def gradient_row_color(row: int, height: int, top: RGB, bottom: RGB) -> RGB:
    """Linear interpolation between ``top`` (row 0) and ``bottom`` (last row)."""
    if height <= 1:
        return top
    t = row / (height - 1)
    return tuple(round(top[i] + (bottom[i] - top[i]) * t) for i in range(3))


class SceneRenderer:
    """Clears the surface and draws every entity in store order.

    Drawing reads entity state but never writes it.

    Attributes:
        screen: Target surface
        config: Preset controlling background and decorations
        ui: Overlay renderer
        simulation: Optional simulation used for HUD stats
        frames_rendered: Number of completed ``render`` calls
    """

    def __init__(self, screen: Optional[pygame.Surface], config: SimulationConfig,
                 font: Optional[pygame.font.Font] = None,
                 simulation: Optional["CatToySimulation"] = None) -> None:
        if screen is None:
            raise RenderSurfaceError("No drawing surface available")
        self.screen = screen
        self.config = config
        self.ui = UIRenderer(screen, font)
        self.simulation = simulation
        self.frames_rendered: int = 0
        self._background: Optional[pygame.Surface] = None

    def set_screen(self, screen: pygame.Surface) -> None:
        """Point at a new surface (after a window resize)."""
        self.screen = screen
        self.ui.set_screen(screen)
        self._background = None

    def render(self, ctx: "SimulationContext") -> None:
        self.draw_background()
        for entity in ctx.store:
            if entity.kind is EntityKind.FISH:
                draw_fish(self.screen, entity)
            else:
                draw_dot(self.screen, entity, laser=self.config.laser_style)
        if self.config.show_pointer_ring and ctx.pointer.active:
            self.draw_pointer_ring(ctx.pointer.x, ctx.pointer.y)
        if not ctx.interacted:
            self.ui.draw_hint()
        if self.simulation is not None:
            self.ui.draw_status(self.simulation.get_stats())
        self.frames_rendered += 1

    def draw_background(self) -> None:
        self.screen.fill(CLEAR_COLOR)
        if not self.config.gradient_background:
            self.screen.fill(BOUNCE_BACKGROUND_COLOR)
            return
        size = self.screen.get_size()
        if self._background is None or self._background.get_size() != size:
            self._background = self._build_gradient(*size)
        self.screen.blit(self._background, (0, 0))

    def draw_pointer_ring(self, x: float, y: float) -> None:
        r, g, b, a = POINTER_RING_RGBA
        extent = POINTER_RING_RADIUS + POINTER_RING_WIDTH
        overlay = pygame.Surface((extent * 2, extent * 2), pygame.SRCALPHA)
        pygame.draw.circle(overlay, (r, g, b, int(255 * a)), (extent, extent),
                           POINTER_RING_RADIUS, POINTER_RING_WIDTH)
        self.screen.blit(overlay, (int(x) - extent, int(y) - extent))

    def _build_gradient(self, width: int, height: int) -> pygame.Surface:
        logger.debug("Building %dx%d background gradient", width, height)
        top = blend_over(BACKGROUND_TOP_RGBA)
        bottom = blend_over(BACKGROUND_BOTTOM_RGBA)
        background = pygame.Surface((width, height))
        for row in range(height):
            color = gradient_row_color(row, height, top, bottom)
            pygame.draw.line(background, color, (0, row), (width - 1, row))
        return background
