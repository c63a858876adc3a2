"""Index build driver: load entities, assemble documents, write the index."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from ..graph.facets import FacetInheritanceEngine
from ..graph.relationships import DEFAULT_MAX_HOPS, RelationshipResolver
from ..graph.store import EntityStore
from .documents import DocumentAssembler
from .loader import load_entities
from .search import SearchIndex

logger = logging.getLogger(__name__)


@dataclass
class BuildStats:
    """Statistics from one index build."""

    total_entities: int = 0
    entities_by_type: dict[str, int] = field(default_factory=dict)
    duplicate_ids: list[str] = field(default_factory=list)
    documents_indexed: int = 0
    entities_with_inherited_facets: int = 0
    total_related_names: int = 0
    output_path: Path | None = None
    output_bytes: int = 0


def build_assembler(store: EntityStore, max_hops: int = DEFAULT_MAX_HOPS) -> DocumentAssembler:
    """Wire the facet engine and relationship resolver over a store."""
    return DocumentAssembler(
        store,
        FacetInheritanceEngine(store),
        RelationshipResolver(store, max_hops=max_hops),
    )


def build_index(
    content_dir: Path,
    output_path: Path,
    max_hops: int = DEFAULT_MAX_HOPS,
    boost: dict[str, float] | None = None,
    fuzzy: float = 0.2,
    prefix: bool = True,
) -> BuildStats:
    """
    Build the search index from a directory of entity records.

    Raises:
        ValueError: If the source cannot be loaded or holds no entities
    """
    entities = load_entities(content_dir)
    if not entities:
        raise ValueError(f"No entities found in {content_dir}")

    store = EntityStore(entities)
    assembler = build_assembler(store, max_hops=max_hops)
    pairs = assembler.assemble_all()

    index = SearchIndex(boost=boost, fuzzy=fuzzy, prefix=prefix)
    index.add_all(pairs)

    stats = BuildStats(
        total_entities=len(store),
        entities_by_type=store.by_type(),
        duplicate_ids=list(store.duplicates),
        documents_indexed=index.document_count,
        entities_with_inherited_facets=sum(
            1 for entity in store if assembler.inherited_facets(entity)
        ),
        total_related_names=sum(len(assembler.related_names(e)) for e in store),
        output_path=output_path,
    )
    stats.output_bytes = index.save(output_path)

    logger.info("Indexed %d documents into %s", stats.documents_indexed, output_path)
    return stats
