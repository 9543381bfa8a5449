"""Pygame host for the cat toy screensaver.

Owns the window, translates pygame events into ``InputAdapter`` calls and
drives ``CatToySimulation.tick`` once per frame.
"""

import logging
from typing import Optional, Tuple

import pygame

from cattoy.config.display import HUD_FONT_SIZE
from cattoy.config.physics import SPEED_FACTOR_STEP, SPEED_STEP
from cattoy.config.simulation_config import MotionMode, SimulationConfig
from cattoy.exceptions import RenderSurfaceError
from cattoy.input_adapter import to_surface_coords
from cattoy.simulation import CatToySimulation
from rendering.scene_renderer import SceneRenderer

logger = logging.getLogger(__name__)

HIDDEN_EVENTS = (pygame.WINDOWHIDDEN, pygame.WINDOWMINIMIZED)
SHOWN_EVENTS = (pygame.WINDOWSHOWN, pygame.WINDOWRESTORED)
SPEED_UP_KEYS = (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS)
SPEED_DOWN_KEYS = (pygame.K_MINUS, pygame.K_KP_MINUS)


class CatToyScreensaver:
    """A resizable window running one simulation preset.

    Attributes:
        simulation: The simulation being displayed
        screen: Pygame display surface
        clock: Pygame clock for frame pacing
        renderer: Scene renderer attached to the simulation
        surface_offset: Position of the drawing surface inside the window
    """

    def __init__(self, config: SimulationConfig, seed: Optional[int] = None) -> None:
        self.config = config
        self.simulation = CatToySimulation(config, seed=seed)
        self.clock: pygame.time.Clock = pygame.time.Clock()
        self.screen: Optional[pygame.Surface] = None
        self.renderer: Optional[SceneRenderer] = None
        self.surface_offset: Tuple[float, float] = (0.0, 0.0)

    @property
    def manual_spawn_activates_pointer(self) -> bool:
        return self.config.physics.motion is MotionMode.ATTRACT

    def setup_game(self) -> None:
        """Open the window and seed the initial population.

        Raises:
            RenderSurfaceError: If the display mode cannot be set
        """
        display = self.config.display
        try:
            self.screen = pygame.display.set_mode(
                (display.screen_width, display.screen_height), pygame.RESIZABLE
            )
            pygame.display.set_caption(f"Cat Toy - {self.config.preset}")
        except pygame.error as e:
            raise RenderSurfaceError(f"Couldn't set the display mode: {e}") from e

        font = pygame.font.Font(None, HUD_FONT_SIZE) if pygame.font.get_init() else None
        self.renderer = SceneRenderer(self.screen, self.config, font, simulation=self.simulation)
        self.simulation.renderer = self.renderer
        self.simulation.context.last_time_ms = pygame.time.get_ticks()
        self.simulation.setup()

    def handle_events(self) -> bool:
        """Handle user input and window events. Returns False to quit."""
        adapter = self.simulation.input
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            elif event.type == pygame.KEYDOWN:
                if not self.handle_key(event.key):
                    return False
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if getattr(event, "touch", False):
                    continue
                self.press(*self.mouse_position(event))
            elif event.type == pygame.MOUSEMOTION:
                if not getattr(event, "touch", False):
                    adapter.pointer_move(*self.mouse_position(event))
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                if not getattr(event, "touch", False):
                    adapter.pointer_up()
            elif event.type == pygame.FINGERDOWN:
                self.press(*self.finger_position(event))
            elif event.type == pygame.FINGERMOTION:
                adapter.pointer_move(*self.finger_position(event))
            elif event.type == pygame.FINGERUP:
                adapter.pointer_up()
            elif event.type == pygame.VIDEORESIZE:
                self.resize(event.w, event.h)
            elif event.type in HIDDEN_EVENTS:
                self.simulation.controls.set_hidden(True)
            elif event.type in SHOWN_EVENTS:
                self.simulation.controls.set_hidden(False)
        return True

    def handle_key(self, key: int) -> bool:
        controls = self.simulation.controls
        if key == pygame.K_ESCAPE:
            return False
        elif key in (pygame.K_p, pygame.K_SPACE):
            controls.toggle_pause()
        elif key == pygame.K_c:
            self.simulation.clear()
        elif key in (pygame.K_k, pygame.K_TAB):
            controls.cycle_kind()
        elif key == pygame.K_h and self.renderer is not None:
            self.renderer.ui.show_status = not self.renderer.ui.show_status
        elif key in SPEED_UP_KEYS:
            self.simulation.adjust_speed(self.speed_step)
        elif key in SPEED_DOWN_KEYS:
            self.simulation.adjust_speed(-self.speed_step)
        return True

    @property
    def speed_step(self) -> float:
        return SPEED_STEP if self.manual_spawn_activates_pointer else SPEED_FACTOR_STEP

    def press(self, x: float, y: float) -> None:
        if self.manual_spawn_activates_pointer:
            self.simulation.input.pointer_down(x, y)
        else:
            self.simulation.input.click(x, y)

    def mouse_position(self, event: pygame.event.Event) -> Tuple[float, float]:
        return to_surface_coords(event.pos[0], event.pos[1], self.surface_offset)

    def finger_position(self, event: pygame.event.Event) -> tuple:
        """Touch coordinates arrive normalised to 0-1."""
        return (event.x * self.simulation.context.width, event.y * self.simulation.context.height)

    def resize(self, width: int, height: int) -> None:
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        if self.renderer is not None:
            self.renderer.set_screen(self.screen)
        self.simulation.input.resize(width, height)

    def run(self) -> None:
        """Run until the window is closed."""
        self.setup_game()
        logger.info("Controls: click/touch spawn, P pause, C clear, K kind, +/- speed, "
                    "H status, ESC quit")

        while self.handle_events():
            self.simulation.tick(pygame.time.get_ticks())
            pygame.display.flip()
            self.clock.tick(self.config.display.frame_rate)

        stats = self.simulation.get_stats()
        logger.info("Screensaver closed after %d frames, %d entities on screen",
                    stats["frame"], stats["population"])


def run_screensaver(config: SimulationConfig, seed: Optional[int] = None) -> None:
    """Entry point for the windowed screensaver."""
    pygame.init()
    game = CatToyScreensaver(config, seed=seed)
    try:
        game.run()
    finally:
        pygame.quit()
