"""Tests for scene drawing onto off-screen pygame surfaces."""

import math

import pytest

pygame = pytest.importorskip("pygame")

from cattoy.config.display import DOT_COLOR, FISH_COLOR, LASER_COLOR  # noqa: E402
from cattoy.config.simulation_config import SimulationConfig  # noqa: E402
from cattoy.entities import Entity, EntityKind  # noqa: E402
from cattoy.exceptions import RenderSurfaceError  # noqa: E402
from cattoy.math_utils import Vector2  # noqa: E402
from cattoy.simulation import CatToySimulation  # noqa: E402
from rendering.scene_renderer import SceneRenderer, blend_over, gradient_row_color  # noqa: E402
from rendering.shapes import dot_radius, fish_body_polygon, fish_eye, fish_tail_polygon  # noqa: E402
from rendering.ui_renderer import UIRenderer  # noqa: E402


def rgb(surface, x, y):
    return tuple(surface.get_at((x, y)))[:3]


@pytest.fixture
def surface():
    return pygame.Surface((200, 150))


def make_sim(preset, surface, seeded_rng):
    config = SimulationConfig.for_preset(preset)
    config.initial_count = 0
    sim = CatToySimulation(config, rng=seeded_rng)
    sim.input.resize(*surface.get_size())
    sim.renderer = SceneRenderer(surface, config)
    return sim


class TestGeometry:
    """Test the pure shape helpers."""

    def test_body_faces_heading(self):
        points = fish_body_polygon(0, 0, 20, math.pi / 2, segments=4)
        # first point is the nose (+rx along the heading)
        assert points[0][0] == pytest.approx(0, abs=1e-9)
        assert points[0][1] == pytest.approx(12)

    def test_tail_behind_body(self):
        tail = fish_tail_polygon(100, 50, 20, 0.0)
        assert tail[0] == pytest.approx((88, 50))
        assert tail[1] == pytest.approx((81, 40))
        assert tail[2] == pytest.approx((81, 60))

    def test_eye_minimum_radii(self):
        _, eye_r, _, pupil_r = fish_eye(0, 0, 10, 0.0)
        assert eye_r == 2.0
        assert pupil_r == 1.0

    def test_dot_radius_floor(self):
        assert dot_radius(10) == 6.0
        assert dot_radius(50) == 10.0

    def test_blend_over_black(self):
        assert blend_over((10, 16, 28, 0.6)) == (6, 10, 17)

    def test_gradient_endpoints(self):
        assert gradient_row_color(0, 100, (0, 0, 0), (100, 50, 10)) == (0, 0, 0)
        assert gradient_row_color(99, 100, (0, 0, 0), (100, 50, 10)) == (100, 50, 10)


class TestSceneRenderer:
    """Test full-frame drawing."""

    def test_requires_surface(self):
        with pytest.raises(RenderSurfaceError):
            SceneRenderer(None, SimulationConfig())

    def test_draws_fish_and_background(self, surface, seeded_rng):
        sim = make_sim("aquarium", surface, seeded_rng)
        sim.store.add(Entity(EntityKind.FISH, Vector2(100, 75), Vector2(30, 0), 40.0,
                             color=FISH_COLOR))
        sim.paused = True

        sim.tick(16.0)

        assert rgb(surface, 100, 75) == FISH_COLOR
        assert rgb(surface, 0, 0) == blend_over((10, 16, 28, 0.6))

    def test_draws_dot(self, surface, seeded_rng):
        sim = make_sim("aquarium", surface, seeded_rng)
        sim.store.add(Entity(EntityKind.DOT, Vector2(50, 50), Vector2(1, 1), 30.0,
                             color=DOT_COLOR))
        sim.paused = True

        sim.tick(16.0)

        assert rgb(surface, 50, 50) == DOT_COLOR

    def test_laser_dot_keeps_core_color(self, surface, seeded_rng):
        sim = make_sim("laser", surface, seeded_rng)
        sim.input.click(60, 60)
        sim.paused = True

        sim.tick(16.0)

        assert rgb(surface, 60, 60) == LASER_COLOR

    def test_render_does_not_mutate(self, surface, seeded_rng):
        sim = make_sim("aquarium", surface, seeded_rng)
        sim.input.pointer_down(80, 80)
        entity = sim.store.entities[0]
        before = (entity.pos.copy(), entity.vel.copy(), entity.size, entity.age)

        sim.renderer.render(sim.context)

        assert (entity.pos, entity.vel, entity.size, entity.age) == before
        assert sim.renderer.frames_rendered == 1

    def test_paused_still_clears(self, surface, seeded_rng):
        sim = make_sim("bounce", surface, seeded_rng)
        surface.fill((255, 255, 255))
        sim.paused = True

        sim.tick(16.0)

        assert rgb(surface, 5, 140) != (255, 255, 255)
        assert sim.renderer.frames_rendered == 1

    def test_resized_surface(self, seeded_rng):
        small = pygame.Surface((40, 30))
        sim = make_sim("aquarium", small, seeded_rng)
        bigger = pygame.Surface((80, 60))

        sim.renderer.set_screen(bigger)
        sim.renderer.render(sim.context)

        assert rgb(bigger, 79, 0) == blend_over((10, 16, 28, 0.6))


class TestUIRenderer:
    """Test the status line formatting."""

    def test_status_line(self, surface, aquarium):
        ui = UIRenderer(surface, None)
        stats = aquarium.get_stats()

        assert ui.format_status(stats) == "6/18 | fish | speed x1.00"

        stats["paused"] = True
        assert ui.format_status(stats).endswith("| PAUSED")

    def test_status_speed_follows_motion_mode(self, surface, bounce):
        ui = UIRenderer(surface, None)
        bounce.controls.speed_multiplier = 2.0
        bounce.adjust_speed(0.25)

        assert ui.format_status(bounce.get_stats()).endswith("speed x1.25")

    def test_no_font_draws_nothing(self, surface, aquarium):
        ui = UIRenderer(surface, None)
        surface.fill((1, 2, 3))

        ui.draw_hint()
        ui.draw_status(aquarium.get_stats())

        assert rgb(surface, 10, 10) == (1, 2, 3)
