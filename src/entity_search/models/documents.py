"""Flattened search documents and their stored counterparts."""

from typing import Any

from pydantic import BaseModel, Field

from .entities import Facets

# Fields the text index tokenizes, in document order.
SEARCHABLE_FIELDS = (
    "name",
    "description",
    "body",
    "aliases",
    "tags",
    "facet_text",
    "related",
)


class SearchDocument(BaseModel):
    """Document shape handed to the text index. Every field is plain text."""

    id: str
    type: str
    name: str
    description: str = ""
    body: str = ""  # concatenated content sections
    aliases: str = ""
    tags: str = ""
    facet_text: str = ""  # own + inherited facet values
    related: str = ""  # names reachable through relationships


class StoredFields(BaseModel):
    """Unflattened record kept alongside the index for filtering and display."""

    id: str
    type: str
    name: str
    description: str = ""
    facets: Facets = Field(default_factory=dict)
    tags: list[str] = Field(default_factory=list)
    relationships: list[dict[str, Any]] = Field(default_factory=list)


class SearchResult(StoredFields):
    """Stored fields returned in search results."""

    score: float = 0.0
    match: dict[str, list[str]] = Field(default_factory=dict)
