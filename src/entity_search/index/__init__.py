"""Search document assembly, index building and querying."""

from .documents import DocumentAssembler, facets_to_text
from .loader import load_entities
from .search import SearchIndex, tokenize
from .builder import BuildStats, build_assembler, build_index

__all__ = [
    "DocumentAssembler",
    "facets_to_text",
    "load_entities",
    "SearchIndex",
    "tokenize",
    "BuildStats",
    "build_assembler",
    "build_index",
]
