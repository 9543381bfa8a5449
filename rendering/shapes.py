"""Entity shapes: pure geometry helpers plus the pygame draw calls.

The geometry functions return plain point lists in surface coordinates so
they can be checked without a display; ``draw_fish`` and ``draw_dot`` feed
them to ``pygame.draw``.
"""

import math
from typing import List, Tuple

import pygame

from cattoy.config.display import (
    EYE_COLOR,
    LASER_GLOW_ALPHA,
    LASER_GLOW_SCALE,
    PUPIL_COLOR,
)
from cattoy.entities import Entity
from cattoy.math_utils import rotate_point

Point = Tuple[float, float]

ELLIPSE_SEGMENTS = 24


def _place(local: Point, x: float, y: float, angle: float) -> Point:
    rx, ry = rotate_point(local[0], local[1], angle)
    return (x + rx, y + ry)


def fish_body_polygon(x: float, y: float, size: float, angle: float,
                      segments: int = ELLIPSE_SEGMENTS) -> List[Point]:
    """Ellipse body (0.6 x 0.45 of size) rotated to face ``angle``."""
    rx = size * 0.6
    ry = size * 0.45
    points = []
    for i in range(segments):
        t = 2.0 * math.pi * i / segments
        points.append(_place((rx * math.cos(t), ry * math.sin(t)), x, y, angle))
    return points


def fish_tail_polygon(x: float, y: float, size: float, angle: float) -> List[Point]:
    """Tail triangle behind the body; grows faster than the body for big fish."""
    scale = size / 20.0
    half_height = size * 0.5 * scale
    local = [
        (-size * 0.6, 0.0),
        (-size * 0.95, -half_height),
        (-size * 0.95, half_height),
    ]
    return [_place(p, x, y, angle) for p in local]


def fish_eye(x: float, y: float, size: float, angle: float) -> Tuple[Point, float, Point, float]:
    """Eye centre and radius, then pupil centre and radius."""
    eye = _place((size * 0.2, -size * 0.12), x, y, angle)
    pupil = _place((size * 0.22, -size * 0.12), x, y, angle)
    return eye, max(2.0, size * 0.09), pupil, max(1.0, size * 0.045)


def dot_radius(size: float) -> float:
    return max(6.0, size * 0.2)


def draw_fish(surface: pygame.Surface, entity: Entity) -> None:
    x, y, size = entity.pos.x, entity.pos.y, entity.size
    angle = entity.heading
    pygame.draw.polygon(surface, entity.color, fish_body_polygon(x, y, size, angle))
    pygame.draw.polygon(surface, entity.color, fish_tail_polygon(x, y, size, angle))
    eye, eye_r, pupil, pupil_r = fish_eye(x, y, size, angle)
    pygame.draw.circle(surface, EYE_COLOR, eye, eye_r)
    pygame.draw.circle(surface, PUPIL_COLOR, pupil, pupil_r)


def draw_dot(surface: pygame.Surface, entity: Entity, laser: bool = False) -> None:
    radius = dot_radius(entity.size)
    center = (entity.pos.x, entity.pos.y)
    if laser:
        glow_radius = int(radius * LASER_GLOW_SCALE)
        glow = pygame.Surface((glow_radius * 2, glow_radius * 2), pygame.SRCALPHA)
        pygame.draw.circle(glow, (*entity.color, int(255 * LASER_GLOW_ALPHA)),
                           (glow_radius, glow_radius), glow_radius)
        surface.blit(glow, (int(center[0]) - glow_radius, int(center[1]) - glow_radius))
    pygame.draw.circle(surface, entity.color, center, radius)
