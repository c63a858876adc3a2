"""Entity graph: lookup, facet inheritance and related-name resolution."""

from entity_search.graph.store import EntityStore
from entity_search.graph.facets import (
    INHERITING_TYPES,
    PROVIDING_TYPES,
    FacetInheritanceEngine,
    merge_facets,
)
from entity_search.graph.relationships import (
    DEFAULT_MAX_HOPS,
    RelatedEntity,
    RelationshipResolver,
)

__all__ = [
    "EntityStore",
    "INHERITING_TYPES",
    "PROVIDING_TYPES",
    "FacetInheritanceEngine",
    "merge_facets",
    "DEFAULT_MAX_HOPS",
    "RelatedEntity",
    "RelationshipResolver",
]
