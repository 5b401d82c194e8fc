"""Pydantic data models."""

from content_curator.models.category import (
    CATCH_ALL_LABEL,
    COLUMN_COLORS,
    HOME_COLUMN_LABELS,
    KEYWORD_LABELS,
    PRIORITY_LABELS,
    CategoryLabel,
)
from content_curator.models.post import Post
from content_curator.models.selection import (
    CarouselItem,
    CategoryColumn,
    HomePage,
    RelatedContent,
)

__all__ = [
    "CategoryLabel",
    "CATCH_ALL_LABEL",
    "COLUMN_COLORS",
    "HOME_COLUMN_LABELS",
    "KEYWORD_LABELS",
    "PRIORITY_LABELS",
    "Post",
    "CarouselItem",
    "CategoryColumn",
    "HomePage",
    "RelatedContent",
]
