"""Related-name resolution over the relationship graph.

Searching for a director's name should surface the movies they made,
so every document carries the names of the entities reachable from it
within a small number of hops. Two hops is the default: far enough to
connect a character to the director of the movie they appear in, close
enough to keep loosely connected entities from matching each other.
"""

import logging
from dataclasses import dataclass

from ..models.entities import Entity
from .store import EntityStore

logger = logging.getLogger(__name__)

DEFAULT_MAX_HOPS = 2


@dataclass
class RelatedEntity:
    """An entity reached through relationships, with the hop it was first seen at."""

    entity: Entity
    hop: int
    via: str  # relationship type of the edge that reached it


class RelationshipResolver:
    """Walks relationship edges breadth-first up to ``max_hops``.

    Missing targets are skipped. Edges leading back to the originating
    entity are ignored at every hop, so an entity never lists itself,
    whether through a round trip or a direct self-reference.
    """

    def __init__(self, store: EntityStore, max_hops: int = DEFAULT_MAX_HOPS):
        if max_hops < 1:
            raise ValueError(f"max_hops must be at least 1, got {max_hops}")
        self.store = store
        self.max_hops = max_hops

    def related_entities(self, entity: Entity) -> list[RelatedEntity]:
        """All distinct entities reachable from ``entity``, in discovery order."""
        found: dict[str, RelatedEntity] = {}
        expanded = {entity.id}
        frontier = [entity]

        for hop in range(1, self.max_hops + 1):
            next_frontier = []
            for node in frontier:
                for rel in node.relationships:
                    target = self.store.get(rel.target)
                    if target is None:
                        logger.debug("%s -> %s: target not loaded, skipping", node.id, rel.target)
                        continue
                    if target.id == entity.id:
                        continue

                    if target.id not in found:
                        found[target.id] = RelatedEntity(entity=target, hop=hop, via=rel.type)
                    if target.id not in expanded:
                        expanded.add(target.id)
                        next_frontier.append(target)

            frontier = next_frontier
            if not frontier:
                break

        return list(found.values())

    def related_names(self, entity: Entity) -> list[str]:
        """Distinct names of the reachable entities, first-seen order."""
        names: dict[str, None] = {}
        for related in self.related_entities(entity):
            names.setdefault(related.entity.name, None)
        return list(names)
