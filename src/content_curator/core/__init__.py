"""Classification and selection logic for every display surface."""

from content_curator.core.carousel import CarouselRotation, select_carousel_items
from content_curator.core.classifier import (
    classify,
    filter_by_label,
    has_label,
    matches,
    priority_label,
)
from content_curator.core.columns import select_column, select_home_columns
from content_curator.core.keywords import KEYWORD_TABLE, keywords_for
from content_curator.core.page_builder import build_home_page, build_section_page
from content_curator.core.related import determine_primary_category, select_related

__all__ = [
    "KEYWORD_TABLE",
    "keywords_for",
    "matches",
    "classify",
    "has_label",
    "filter_by_label",
    "priority_label",
    "select_carousel_items",
    "CarouselRotation",
    "select_column",
    "select_home_columns",
    "determine_primary_category",
    "select_related",
    "build_home_page",
    "build_section_page",
]
