"""Ordered, exclusively-owned collection of live entities."""

import logging
from typing import Iterator, List

from cattoy.config.physics import ENTITY_LIFETIME_MS
from cattoy.entities import Entity

logger = logging.getLogger(__name__)


class EntityStore:
    """Holds every live entity in spawn order.

    The store never hands out its internal list: ``entities`` and iteration
    work on a snapshot, so callers can remove while looping. The population
    cap is enforced by the spawner, not here.
    """

    def __init__(self) -> None:
        self._entities: List[Entity] = []

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[Entity]:
        return iter(list(self._entities))

    @property
    def entities(self) -> List[Entity]:
        """A copy of the live entities in store order."""
        return list(self._entities)

    def add(self, entity: Entity) -> bool:
        """Append an entity. Always succeeds."""
        self._entities.append(entity)
        return True

    def remove_expired(self, lifetime_ms: float = ENTITY_LIFETIME_MS) -> int:
        """Drop entities whose age exceeds ``lifetime_ms``.

        Walks indices from the end so deletions don't shift unvisited items.

        Returns:
            Number of entities removed
        """
        removed = 0
        for i in range(len(self._entities) - 1, -1, -1):
            if self._entities[i].age > lifetime_ms:
                logger.debug("Pruning entity #%d (age %.0f ms)", self._entities[i].entity_id,
                             self._entities[i].age)
                del self._entities[i]
                removed += 1
        return removed

    def clear(self) -> int:
        """Empty the store; safe to call repeatedly.

        Returns:
            Number of entities removed
        """
        removed = len(self._entities)
        self._entities = []
        if removed:
            logger.debug("Cleared %d entities", removed)
        return removed
