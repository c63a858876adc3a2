"""Data models for entities and search documents."""

from entity_search.models.entities import ContentSection, Entity, FacetValue, Facets, Relationship
from entity_search.models.documents import (
    SEARCHABLE_FIELDS,
    SearchDocument,
    SearchResult,
    StoredFields,
)

__all__ = [
    "ContentSection",
    "Entity",
    "FacetValue",
    "Facets",
    "Relationship",
    "SEARCHABLE_FIELDS",
    "SearchDocument",
    "SearchResult",
    "StoredFields",
]
