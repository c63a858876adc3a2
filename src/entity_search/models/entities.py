"""Entity models for the source graph."""

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr

# A facet is a single string, a list of strings, or a flag.
FacetValue = Union[StrictBool, StrictStr, list[StrictStr]]
Facets = dict[str, Optional[FacetValue]]


class ContentSection(BaseModel):
    """A titled block of body text."""

    model_config = ConfigDict(frozen=True)

    title: str
    body: str


class Relationship(BaseModel):
    """A typed, directed edge to another entity by id."""

    model_config = ConfigDict(frozen=True)

    type: str
    target: str


class Entity(BaseModel):
    """A typed record in the graph: a work, character, place, etc."""

    model_config = ConfigDict(frozen=True)

    id: str
    type: str
    name: str
    description: str | None = None
    content: list[ContentSection] = Field(default_factory=list)
    aliases: list[str] = Field(default_factory=list)
    relationships: list[Relationship] = Field(default_factory=list)
    properties: dict[str, Any] = Field(default_factory=dict)
    tags: list[str] = Field(default_factory=list)
    facets: Facets = Field(default_factory=dict)
