"""Entity record for the cat toy simulation (pure logic, no rendering)."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

from cattoy.config.display import DOT_COLOR, FISH_COLOR
from cattoy.exceptions import EntityError
from cattoy.math_utils import Vector2

Color = Tuple[int, int, int]


class EntityKind(Enum):
    """Shape family of an entity."""

    FISH = "fish"
    DOT = "dot"

    @classmethod
    def parse(cls, value) -> "EntityKind":
        """Parse a selector value; ``"laser"`` is an alias for ``DOT``."""
        if isinstance(value, EntityKind):
            return value
        key = str(value).strip().lower()
        if key == "laser":
            return cls.DOT
        try:
            return cls(key)
        except ValueError as e:
            raise EntityError(f"Unknown entity kind: {value!r}") from e

    def next(self) -> "EntityKind":
        """The kind after this one, wrapping around (used by the selector)."""
        members = list(EntityKind)
        return members[(members.index(self) + 1) % len(members)]

    @property
    def default_color(self) -> Color:
        return FISH_COLOR if self is EntityKind.FISH else DOT_COLOR


@dataclass
class Entity:
    """A single animated object owned by the entity store.

    Only ``pos``, ``vel`` and ``age`` change after creation.

    Attributes:
        kind: Shape family, decides how the entity is drawn
        pos: Position in surface coordinates
        vel: Velocity (units/second or units/frame depending on preset)
        size: Radius/scale, fixed at creation
        age: Milliseconds since creation (ageing presets only)
        phase: Random offset that desynchronises idle drift
        color: RGB fill color
        entity_id: Spawner-assigned id
    """

    kind: EntityKind
    pos: Vector2
    vel: Vector2
    size: float
    age: float = 0.0
    phase: float = 0.0
    color: Color = field(default=FISH_COLOR)
    entity_id: int = 0

    def __post_init__(self) -> None:
        if not self.size > 0:
            raise EntityError(f"Entity size must be positive, got {self.size}")

    @property
    def heading(self) -> float:
        """Facing direction in radians, from the velocity vector."""
        return self.vel.heading()

    @property
    def speed(self) -> float:
        return self.vel.length()
