"""Simulation configuration dataclasses and named presets.

The three screensaver flavours share one simulation and differ only in the
values bundled here:

- ``aquarium``: fish drift and chase the pointer, wrap around the edges,
  age out after two minutes.
- ``bounce``: coloured fish and dots travel in straight lines and bounce off
  the walls.
- ``laser``: the bounce rules with a single red laser dot style.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Optional

from cattoy.config.display import FRAME_RATE, SCREEN_HEIGHT, SCREEN_WIDTH, SEPARATOR_WIDTH
from cattoy.config.physics import (
    ATTRACTION_DAMPING,
    ATTRACTION_STRENGTH,
    BASE_MAX_SPEED,
    DEFAULT_SPEED,
    DRIFT_ACCELERATION,
    DRIFT_FREQUENCY,
    ENTITY_LIFETIME_MS,
    MAX_DT,
    MIN_ATTRACTION_DISTANCE,
    WRAP_MARGIN,
)
from cattoy.config.spawning import (
    BOUNCE_MAX_ENTITIES,
    BOUNCE_SPAWN_INTERVAL_MS,
    INITIAL_FISH_COUNT,
    MAX_ENTITIES,
    SPAWN_INTERVAL_MS,
)
from cattoy.exceptions import ConfigurationError


class MotionMode(Enum):
    """How velocity evolves between boundary events."""

    ATTRACT = "attract"  # pointer attraction, idle drift otherwise
    BOUNCE = "bounce"  # constant velocity


class BoundaryPolicy(Enum):
    """What happens when an entity leaves the surface."""

    WRAP = "wrap"
    REFLECT = "reflect"


@dataclass(frozen=True)
class SpawnPolicy:
    """Unified spawn rules for interval and manual (pointer/click) spawns.

    Attributes:
        enforce_cap_on_manual_spawn: Whether pointer-down/click spawns respect
            ``max_entities``. The interval spawner always does.
        interval_ms: Minimum gap between interval spawns.
        max_entities: Population cap.
    """

    enforce_cap_on_manual_spawn: bool = False
    interval_ms: float = SPAWN_INTERVAL_MS
    max_entities: int = MAX_ENTITIES

    def __post_init__(self) -> None:
        if self.max_entities < 0:
            raise ConfigurationError(f"max_entities must be >= 0, got {self.max_entities}")
        if self.interval_ms < 0:
            raise ConfigurationError(f"interval_ms must be >= 0, got {self.interval_ms}")


@dataclass
class DisplayConfig:
    """Surface size and frame rate."""

    screen_width: int = SCREEN_WIDTH
    screen_height: int = SCREEN_HEIGHT
    frame_rate: int = FRAME_RATE
    separator_width: int = SEPARATOR_WIDTH


@dataclass
class PhysicsConfig:
    """Per-preset physics behaviour and tuning constants."""

    motion: MotionMode = MotionMode.ATTRACT
    boundary: BoundaryPolicy = BoundaryPolicy.WRAP
    # True: pos += vel * dt. False: pos += vel once per frame.
    time_scaled: bool = True
    ageing: bool = True
    max_dt: float = MAX_DT
    attraction_strength: float = ATTRACTION_STRENGTH
    attraction_damping: float = ATTRACTION_DAMPING
    min_attraction_distance: float = MIN_ATTRACTION_DISTANCE
    drift_acceleration: float = DRIFT_ACCELERATION
    drift_frequency: float = DRIFT_FREQUENCY
    base_max_speed: float = BASE_MAX_SPEED
    wrap_margin: float = WRAP_MARGIN
    lifetime_ms: float = ENTITY_LIFETIME_MS


@dataclass
class SimulationConfig:
    """Everything needed to build a simulation.

    Attributes:
        preset: Name of the preset these values came from.
        default_kind: Entity kind selected at start-up ("fish" or "dot").
        initial_count: Entities seeded at start-up.
        laser_style: Draw every dot as a red laser with a glow.
        gradient_background: Paint the vertical gradient instead of a flat fill.
        show_pointer_ring: Draw the ring indicator under an active pointer.
        random_colors: Pick entity colors from the bounce palette.
    """

    preset: str = "aquarium"
    default_kind: str = "fish"
    initial_count: int = INITIAL_FISH_COUNT
    default_speed: float = DEFAULT_SPEED
    laser_style: bool = False
    gradient_background: bool = True
    show_pointer_ring: bool = True
    random_colors: bool = False
    spawn: SpawnPolicy = field(default_factory=SpawnPolicy)
    physics: PhysicsConfig = field(default_factory=PhysicsConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)

    @classmethod
    def for_preset(cls, name: str, display: Optional[DisplayConfig] = None) -> "SimulationConfig":
        """Build the configuration for a named preset.

        Raises:
            ConfigurationError: If the preset name is unknown
        """
        key = name.strip().lower()
        if key not in PRESETS:
            raise ConfigurationError(
                f"Unknown preset {name!r}; expected one of {', '.join(sorted(PRESETS))}"
            )
        config = PRESETS[key]()
        if display is not None:
            config.display = display
        return config


def _aquarium() -> SimulationConfig:
    return SimulationConfig(preset="aquarium")


def _bounce_physics() -> PhysicsConfig:
    return PhysicsConfig(
        motion=MotionMode.BOUNCE,
        boundary=BoundaryPolicy.REFLECT,
        time_scaled=False,
        ageing=False,
    )


def _bounce() -> SimulationConfig:
    return SimulationConfig(
        preset="bounce",
        default_kind="fish",
        initial_count=0,
        gradient_background=False,
        show_pointer_ring=False,
        random_colors=True,
        spawn=SpawnPolicy(
            enforce_cap_on_manual_spawn=True,
            interval_ms=BOUNCE_SPAWN_INTERVAL_MS,
            max_entities=BOUNCE_MAX_ENTITIES,
        ),
        physics=_bounce_physics(),
    )


def _laser() -> SimulationConfig:
    return SimulationConfig(
        preset="laser",
        default_kind="dot",
        initial_count=0,
        laser_style=True,
        gradient_background=False,
        show_pointer_ring=False,
        spawn=SpawnPolicy(
            enforce_cap_on_manual_spawn=True,
            interval_ms=BOUNCE_SPAWN_INTERVAL_MS,
            max_entities=BOUNCE_MAX_ENTITIES,
        ),
        physics=_bounce_physics(),
    )


PRESETS: Dict[str, Callable[[], SimulationConfig]] = {
    "aquarium": _aquarium,
    "bounce": _bounce,
    "laser": _laser,
}
