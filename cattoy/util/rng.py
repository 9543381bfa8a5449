"""RNG utilities for deterministic simulation.

The spawner draws every random value from an explicit ``random.Random``
so seeded runs replay identically. These helpers fail loudly when that RNG
is missing rather than silently creating an unseeded fallback.
"""

import random
from typing import Optional

from cattoy.exceptions import SimulationError


class MissingRNGError(SimulationError):
    """Raised when an RNG is required but not available."""


def require_rng_param(rng: Optional[random.Random], context: str) -> random.Random:
    """Validate that an RNG parameter was provided, failing loudly if not.

    Args:
        rng: The RNG that should have been provided
        context: Description of where this is called from (for error messages)

    Returns:
        The validated RNG

    Raises:
        MissingRNGError: If rng is None
    """
    if rng is None:
        raise MissingRNGError(
            f"RNG parameter is required but was None (context: {context}). "
            "Pass random.Random(seed) or the simulation's rng."
        )
    return rng


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Create the simulation RNG, seeded when a seed is given."""
    return random.Random(seed)
