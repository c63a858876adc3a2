"""In-memory entity store keyed by entity id."""

import logging
from collections import Counter
from collections.abc import Iterable, Iterator

from ..models.entities import Entity

logger = logging.getLogger(__name__)


class EntityStore:
    """Immutable lookup table over the entities of one build.

    Entities address each other by id, never by reference, so walking
    the relationship graph cannot create reference cycles.

    A repeated id silently replaces the earlier entity (last one wins);
    the shadowed ids are kept in ``duplicates`` for reporting.
    """

    def __init__(self, entities: Iterable[Entity] = ()):
        self._entities: dict[str, Entity] = {}
        self.duplicates: list[str] = []

        for entity in entities:
            if entity.id in self._entities:
                logger.debug("Entity %s registered twice, keeping the later record", entity.id)
                self.duplicates.append(entity.id)
            self._entities[entity.id] = entity

    def get(self, entity_id: str) -> Entity | None:
        """Get an entity by ID, or None if it is not loaded."""
        return self._entities.get(entity_id)

    @property
    def entities(self) -> list[Entity]:
        return list(self._entities.values())

    def by_type(self) -> dict[str, int]:
        """Count entities per type."""
        return dict(Counter(e.type for e in self._entities.values()))

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._entities

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._entities.values())

    def __len__(self) -> int:
        return len(self._entities)
