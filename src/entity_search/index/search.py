"""In-process full-text index over assembled search documents.

Deliberately small: lowercase word tokens, OR semantics across query
terms, and one BM25+ model per field. Each query term matches
vocabulary terms exactly, by prefix, or within a fuzzy edit distance;
a match scores its field's BM25+ score times the field boost and the
match quality. Stored fields ride along untouched for filtering and display.
"""

import json
import logging
import re
from collections import defaultdict
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any

from rank_bm25 import BM25Plus
from rapidfuzz import process
from rapidfuzz.distance import Levenshtein

from ..models.documents import SEARCHABLE_FIELDS, SearchDocument, SearchResult, StoredFields
from ..models.entities import Facets
from ..taxonomy import expand_tag

logger = logging.getLogger(__name__)

INDEX_FORMAT_VERSION = 1

TOKEN_PATTERN = re.compile(r"\w+")

# Relative weight of non-exact matches
PREFIX_WEIGHT = 0.5
FUZZY_WEIGHT = 0.45


def tokenize(text: str) -> list[str]:
    """Split text into lowercase word tokens."""
    return [token.lower() for token in TOKEN_PATTERN.findall(text)]


def _facet_matches(facets: Facets, wanted: dict[str, Any]) -> bool:
    for key, value in wanted.items():
        have = facets.get(key)
        if isinstance(have, list):
            if value not in have:
                return False
        elif have != value:
            return False
    return True


class SearchIndex:
    """Inverted index with field boosts, prefix and fuzzy term matching.

    Usage:
        index = SearchIndex(boost={"name": 3, "aliases": 2})
        index.add_all(assembler.assemble_all())
        index.save(Path("build/search-index.json"))

        results = SearchIndex.load(path).search("btman", fuzzy=0.4)
        results = index.search("", tag="genre")  # browse a tag category
    """

    def __init__(
        self,
        fields: Sequence[str] = SEARCHABLE_FIELDS,
        boost: dict[str, float] | None = None,
        fuzzy: float = 0.2,
        prefix: bool = True,
    ):
        unknown = set(fields) - set(SEARCHABLE_FIELDS)
        if unknown:
            raise ValueError(f"Unknown search fields: {sorted(unknown)}")

        self.fields = tuple(fields)
        self.boost = dict(boost or {})
        self.fuzzy = fuzzy
        self.prefix = prefix

        self._documents: dict[str, SearchDocument] = {}
        self._stored: dict[str, StoredFields] = {}

        # term -> doc id -> fields containing it
        self._postings: dict[str, dict[str, set[str]]] = defaultdict(dict)

        # Tokenized field text per document, in insertion order
        self._corpora: dict[str, list[list[str]]] = {field: [] for field in self.fields}
        self._positions: dict[str, int] = {}

        # Built on first search after the corpus changes
        self._bm25: dict[str, BM25Plus] = {}

    @property
    def document_count(self) -> int:
        return len(self._documents)

    def get_stored(self, doc_id: str) -> StoredFields | None:
        return self._stored.get(doc_id)

    def add(self, document: SearchDocument, stored: StoredFields | None = None) -> None:
        """Index one document. Ids must be unique within the index."""
        if document.id in self._documents:
            raise ValueError(f"Duplicate document id: {document.id}")

        self._documents[document.id] = document
        self._stored[document.id] = stored or StoredFields(
            id=document.id,
            type=document.type,
            name=document.name,
            description=document.description,
        )

        self._positions[document.id] = len(self._positions)
        for field in self.fields:
            tokens = tokenize(getattr(document, field))
            self._corpora[field].append(tokens)
            for term in tokens:
                self._postings[term].setdefault(document.id, set()).add(field)
        self._bm25.clear()

    def add_all(self, pairs: Iterable[tuple[SearchDocument, StoredFields]]) -> None:
        for document, stored in pairs:
            self.add(document, stored)

    def _field_model(self, field: str) -> BM25Plus:
        """BM25+ model over one field of every document."""
        if field not in self._bm25:
            self._bm25[field] = BM25Plus(self._corpora[field])
        return self._bm25[field]

    def _expand_term(self, term: str, fuzzy: float, prefix: bool) -> dict[str, float]:
        """Map a query term to matching vocabulary terms and their weight."""
        matches: dict[str, float] = {}
        if term in self._postings:
            matches[term] = 1.0

        if prefix:
            for candidate in self._postings:
                if candidate != term and candidate.startswith(term):
                    weight = PREFIX_WEIGHT * len(term) / len(candidate)
                    matches[candidate] = max(matches.get(candidate, 0.0), weight)

        if fuzzy > 0:
            max_distance = max(1, round(fuzzy * len(term)))
            for candidate, distance, _ in process.extract(
                term,
                list(self._postings),
                scorer=Levenshtein.distance,
                score_cutoff=max_distance,
                limit=None,
            ):
                if candidate == term:
                    continue
                weight = FUZZY_WEIGHT * (1 - distance / max(len(term), len(candidate)))
                matches[candidate] = max(matches.get(candidate, 0.0), weight)

        return matches

    def _passes_filters(
        self,
        stored: StoredFields,
        tags: set[str] | None,
        entity_type: str | None,
        facets: dict[str, Any] | None,
    ) -> bool:
        if tags is not None and not tags.intersection(stored.tags):
            return False
        if entity_type is not None and stored.type != entity_type:
            return False
        if facets and not _facet_matches(stored.facets, facets):
            return False
        return True

    def search(
        self,
        query: str,
        *,
        boost: dict[str, float] | None = None,
        fuzzy: float | None = None,
        prefix: bool | None = None,
        tag: str | None = None,
        type: str | None = None,
        facets: dict[str, Any] | None = None,
        limit: int | None = None,
    ) -> list[SearchResult]:
        """
        Search the index.

        Args:
            query: Free text; terms are OR-ed together
            boost: Per-field weights (defaults to the index's)
            fuzzy: Max edit distance as a fraction of term length, 0 disables
            prefix: Whether query terms also match as prefixes
            tag: Only documents carrying this tag; a category matches all its children
            type: Only documents of this entity type
            facets: Only documents whose merged facets hold these values
            limit: Maximum number of results

        An empty query with filters returns every matching document.
        """
        boost = self.boost if boost is None else boost
        fuzzy = self.fuzzy if fuzzy is None else fuzzy
        prefix = self.prefix if prefix is None else prefix
        tags = expand_tag(tag) if tag else None

        terms = list(dict.fromkeys(tokenize(query)))
        scores: dict[str, float] = defaultdict(float)
        matched: dict[str, dict[str, set[str]]] = defaultdict(lambda: defaultdict(set))

        if terms:
            for term in terms:
                for candidate, weight in self._expand_term(term, fuzzy, prefix).items():
                    postings = self._postings[candidate]
                    fields = set().union(*postings.values())
                    field_scores = {
                        field: self._field_model(field).get_scores([candidate]) for field in fields
                    }
                    # BM25+ gives every document a floor score, so only
                    # documents that hold the term are credited.
                    for doc_id, doc_fields in postings.items():
                        position = self._positions[doc_id]
                        for field in doc_fields:
                            scores[doc_id] += (
                                weight * boost.get(field, 1.0) * float(field_scores[field][position])
                            )
                            matched[doc_id][candidate].add(field)
        elif tags is not None or type is not None or facets:
            scores = dict.fromkeys(self._documents, 0.0)
        else:
            return []

        results = []
        for doc_id, score in scores.items():
            stored = self._stored[doc_id]
            if not self._passes_filters(stored, tags, type, facets):
                continue
            results.append(
                SearchResult(
                    **stored.model_dump(),
                    score=score,
                    match={t: sorted(f) for t, f in matched.get(doc_id, {}).items()},
                )
            )

        results.sort(key=lambda r: (-r.score, r.id))
        logger.debug("Query %r matched %d documents", query, len(results))
        return results[:limit] if limit is not None else results

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def to_dict(self) -> dict:
        return {
            "version": INDEX_FORMAT_VERSION,
            "fields": list(self.fields),
            "boost": self.boost,
            "fuzzy": self.fuzzy,
            "prefix": self.prefix,
            "documents": {
                doc_id: {
                    "document": document.model_dump(),
                    "stored": self._stored[doc_id].model_dump(),
                }
                for doc_id, document in self._documents.items()
            },
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SearchIndex":
        version = data.get("version")
        if version != INDEX_FORMAT_VERSION:
            raise ValueError(f"Unsupported index format version: {version}")

        index = cls(
            fields=data["fields"],
            boost=data.get("boost"),
            fuzzy=data.get("fuzzy", 0.2),
            prefix=data.get("prefix", True),
        )
        for entry in data["documents"].values():
            index.add(
                SearchDocument.model_validate(entry["document"]),
                StoredFields.model_validate(entry["stored"]),
            )
        return index

    def save(self, path: Path) -> int:
        """Write the index as JSON. Returns the number of bytes written."""
        path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps(self.to_dict(), ensure_ascii=False).encode("utf-8")
        path.write_bytes(payload)
        return len(payload)

    @classmethod
    def load(cls, path: Path) -> "SearchIndex":
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise ValueError(f"Could not read index {path}: {exc}") from exc
        return cls.from_dict(data)
