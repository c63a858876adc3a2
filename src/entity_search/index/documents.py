"""Document assembly - flattening entities into search documents."""

from ..graph.facets import FacetInheritanceEngine
from ..graph.relationships import RelationshipResolver
from ..graph.store import EntityStore
from ..models.documents import SearchDocument, StoredFields
from ..models.entities import Entity, Facets


def facets_to_text(facets: Facets) -> str:
    """Render facet values as space-separated search text.

    List values contribute each element, booleans and nulls are
    skipped (they are filterable, not searchable), anything else is
    stringified.
    """
    tokens: list[str] = []
    for value in facets.values():
        if value is None or isinstance(value, bool):
            continue
        if isinstance(value, list):
            tokens.extend(str(v) for v in value)
        else:
            tokens.append(str(value))
    return " ".join(tokens)


class DocumentAssembler:
    """Builds the searchable document and stored record for each entity.

    Inherited facets and related names are resolved once per entity id
    and reused by the document, the stored record and build statistics.
    """

    def __init__(
        self,
        store: EntityStore,
        facet_engine: FacetInheritanceEngine,
        resolver: RelationshipResolver,
    ):
        self.store = store
        self.facet_engine = facet_engine
        self.resolver = resolver

        self._inherited: dict[str, Facets] = {}
        self._related: dict[str, list[str]] = {}

    def inherited_facets(self, entity: Entity) -> Facets:
        if entity.id not in self._inherited:
            self._inherited[entity.id] = self.facet_engine.inherited_facets(entity)
        return self._inherited[entity.id]

    def related_names(self, entity: Entity) -> list[str]:
        if entity.id not in self._related:
            self._related[entity.id] = self.resolver.related_names(entity)
        return self._related[entity.id]

    def to_document(self, entity: Entity) -> SearchDocument:
        body = "\n\n".join(section.body for section in entity.content)

        own_text = facets_to_text(entity.facets)
        inherited_text = facets_to_text(self.inherited_facets(entity))
        facet_text = " ".join(t for t in (own_text, inherited_text) if t)

        return SearchDocument(
            id=entity.id,
            type=entity.type,
            name=entity.name,
            description=entity.description or "",
            body=body,
            aliases=" ".join(entity.aliases),
            tags=" ".join(entity.tags),
            facet_text=facet_text,
            related=" ".join(self.related_names(entity)),
        )

    def to_stored(self, entity: Entity) -> StoredFields:
        return StoredFields(
            id=entity.id,
            type=entity.type,
            name=entity.name,
            description=entity.description or "",
            facets=self.facet_engine.merged_facets(entity, self.inherited_facets(entity)),
            tags=list(entity.tags),
            relationships=[rel.model_dump() for rel in entity.relationships],
        )

    def assemble(self, entity: Entity) -> tuple[SearchDocument, StoredFields]:
        return self.to_document(entity), self.to_stored(entity)

    def assemble_all(self) -> list[tuple[SearchDocument, StoredFields]]:
        """Assemble every entity in the store, in store order."""
        return [self.assemble(entity) for entity in self.store]
