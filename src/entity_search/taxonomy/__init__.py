"""
Tag Taxonomy

Organizes the flat tags on entities into parent categories so a
search for a category ("genre") matches every tag filed under it.
"""

from .categories import TAG_TAXONOMY, TagCategory
from .tags import (
    expand_tag,
    get_category,
    get_category_ids,
    get_tag_parent,
    is_category,
    label_to_tag,
    tag_to_label,
)

__all__ = [
    "TAG_TAXONOMY",
    "TagCategory",
    "expand_tag",
    "get_category",
    "get_category_ids",
    "get_tag_parent",
    "is_category",
    "label_to_tag",
    "tag_to_label",
]
