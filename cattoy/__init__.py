"""Pure simulation core for the cat toy screensaver.

Nothing in this package imports pygame; drawing and window handling live in
the ``rendering`` package and ``screensaver.py``.
"""

from cattoy.config.simulation_config import SimulationConfig, SpawnPolicy
from cattoy.entities import Entity, EntityKind
from cattoy.simulation import CatToySimulation, FrameResult, SimulationContext

__all__ = [
    "CatToySimulation",
    "Entity",
    "EntityKind",
    "FrameResult",
    "SimulationConfig",
    "SimulationContext",
    "SpawnPolicy",
]
