"""Tag lookups over the static taxonomy."""

from functools import lru_cache

from .categories import TAG_TAXONOMY, TagCategory


def tag_to_label(tag: str) -> str:
    """Convert a kebab-case tag to plain language ("sci-fi" -> "Sci Fi")."""
    return " ".join(word[:1].upper() + word[1:] for word in tag.split("-"))


def label_to_tag(label: str) -> str:
    """Convert a plain language label to a kebab-case tag."""
    return "-".join(label.lower().split())


@lru_cache(maxsize=1)
def _categories_by_id() -> dict[str, TagCategory]:
    return {category.id: category for category in TAG_TAXONOMY}


@lru_cache(maxsize=1)
def _tag_to_parent() -> dict[str, str]:
    # A child listed under several categories keeps the last one.
    mapping: dict[str, str] = {}
    for category in TAG_TAXONOMY:
        for child in category.children:
            mapping[child] = category.id
    return mapping


def expand_tag(tag: str) -> set[str]:
    """Get all tags that should match when searching for ``tag``.

    A category id expands to itself plus all of its children;
    any other tag matches only itself.
    """
    category = _categories_by_id().get(tag)
    if category is None:
        return {tag}
    return {category.id, *category.children}


def get_tag_parent(tag: str) -> str | None:
    """Get the parent category id for a tag, if any."""
    return _tag_to_parent().get(tag)


def is_category(tag: str) -> bool:
    """Check if a tag is a known category parent."""
    return tag in _categories_by_id()


def get_category(category_id: str) -> TagCategory | None:
    return _categories_by_id().get(category_id)


def get_category_ids() -> list[str]:
    return [category.id for category in TAG_TAXONOMY]
