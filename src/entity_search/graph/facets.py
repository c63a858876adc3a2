"""Facet inheritance from parent works to the entities that belong to them.

A character, item, vehicle or location rarely carries facets of its own,
but it should still surface when filtering by the facets of the movie or
book it belongs to. The engine copies those facets down one hop:

    Inception (movie)   facets: {genre: [sci-fi, heist]}
        ^
        | appears-in
    Cobb (character)    inherited: {genre: [sci-fi, heist]}

Providers never inherit, and nothing propagates through a second hop.
"""

import copy
import logging

from ..models.entities import Entity, Facets
from .store import EntityStore

logger = logging.getLogger(__name__)

# Entity types that receive facets from related providers
INHERITING_TYPES = frozenset({"character", "item", "vehicle", "location"})

# Entity types whose facets are handed down
PROVIDING_TYPES = frozenset({"movie", "book"})


def merge_facets(target: Facets, source: Facets) -> None:
    """Merge ``source`` into ``target`` in place.

    - Null values in ``source`` are ignored.
    - Keys missing from ``target`` are copied (lists are copied, not shared).
    - When both sides hold lists, they are unioned without duplicates.
    - Any other collision keeps the value already in ``target``, so the
      first scalar or boolean seen for a key sticks.
    """
    for key, value in source.items():
        if value is None:
            continue

        if key not in target:
            target[key] = copy.deepcopy(value)
            continue

        existing = target[key]
        if isinstance(existing, list) and isinstance(value, list):
            target[key] = list(dict.fromkeys([*existing, *value]))


class FacetInheritanceEngine:
    """Computes inherited and merged facet sets per entity."""

    def __init__(
        self,
        store: EntityStore,
        inheriting_types: frozenset[str] = INHERITING_TYPES,
        providing_types: frozenset[str] = PROVIDING_TYPES,
    ):
        self.store = store
        self.inheriting_types = inheriting_types
        self.providing_types = providing_types

    def inherits(self, entity: Entity) -> bool:
        return entity.type in self.inheriting_types

    def providers(self, entity: Entity) -> list[Entity]:
        """Directly related entities that hand facets down to ``entity``.

        Relationship order is preserved since it decides which scalar wins.
        """
        if not self.inherits(entity):
            return []

        found = []
        for rel in entity.relationships:
            related = self.store.get(rel.target)
            if related is None:
                logger.debug("%s -> %s: target not loaded, skipping", entity.id, rel.target)
                continue
            if related.type in self.providing_types and related.facets:
                found.append(related)
        return found

    def inherited_facets(self, entity: Entity) -> Facets:
        """Facets ``entity`` picks up from its one-hop providers."""
        inherited: Facets = {}
        for provider in self.providers(entity):
            merge_facets(inherited, provider.facets)
        return inherited

    def merged_facets(self, entity: Entity, inherited: Facets | None = None) -> Facets:
        """Own facets merged with inherited ones. Own values always win.

        Pass ``inherited`` when it has already been computed for ``entity``.
        """
        if inherited is None:
            inherited = self.inherited_facets(entity)

        merged: Facets = {}
        merge_facets(merged, entity.facets)
        merge_facets(merged, inherited)
        return merged
