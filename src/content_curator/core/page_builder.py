"""Composes the home page and section pages from the selectors."""

from collections.abc import Iterable

from content_curator.core.carousel import select_carousel_items
from content_curator.core.classifier import filter_by_label
from content_curator.core.columns import select_home_columns
from content_curator.models.category import PRIORITY_LABELS, CategoryLabel
from content_curator.models.post import Post
from content_curator.models.selection import HomePage


def build_home_page(
    posts: Iterable[Post],
    *,
    carousel_limit: int = 5,
    column_size: int = 5,
    latest_limit: int = 5,
) -> HomePage:
    """Build showcase, columns and the Latest list over `posts`."""
    posts = list(posts)
    return HomePage(
        carousel=select_carousel_items(posts, limit=carousel_limit),
        columns=select_home_columns(posts, column_size=column_size),
        latest=posts[:latest_limit],
        has_more_latest=len(posts) > latest_limit,
    )


def build_section_page(
    posts: Iterable[Post],
    label: CategoryLabel,
    *,
    carousel_limit: int = 5,
    column_size: int = 5,
    latest_limit: int = 5,
) -> HomePage:
    """
    Build the home layout over a single section's posts.

    Only Celebverse and Gossips have section pages. Membership is the
    label's keyword match alone, so a post tagged both celebrity and
    gossip appears on both pages.
    """
    if label not in PRIORITY_LABELS:
        raise ValueError(f"No section page for category '{label.value}'")

    return build_home_page(
        filter_by_label(posts, label),
        carousel_limit=carousel_limit,
        column_size=column_size,
        latest_limit=latest_limit,
    )
