"""Entity Search - build a full-text search index from an entity graph."""

__version__ = "0.1.0"
