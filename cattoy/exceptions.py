"""Cat toy exception hierarchy.

Centralised base classes so callers can catch the simulation's own failures
without resorting to bare ``except Exception`` blocks.
"""


class CatToyError(Exception):
    """Root of all cat toy domain exceptions."""


class SimulationError(CatToyError):
    """Errors during simulation execution (spawner, physics, store)."""


class EntityError(SimulationError):
    """An entity record was built with invalid state."""


class ConfigurationError(CatToyError):
    """Invalid or missing configuration."""


class RenderSurfaceError(CatToyError):
    """The drawing surface could not be created or is unavailable."""
