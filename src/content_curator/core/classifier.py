"""Tag classification by case-insensitive keyword containment."""

from collections.abc import Iterable, Sequence

from content_curator.core.keywords import keywords_for
from content_curator.models.category import (
    CATCH_ALL_LABEL,
    HOME_COLUMN_LABELS,
    PRIORITY_LABELS,
    CategoryLabel,
)
from content_curator.models.post import Post


def matches(tags: Sequence[str] | None, keywords: Iterable[str]) -> bool:
    """
    Check whether any tag contains any keyword.

    Args:
        tags: Post tags; None or empty never matches
        keywords: Keywords to look for

    Returns:
        True if at least one tag contains at least one keyword,
        compared case-insensitively
    """
    if not tags:
        return False

    lowered = [kw.lower() for kw in keywords]
    for tag in tags:
        if tag is None:
            continue
        tag_lower = tag.lower()
        if any(kw in tag_lower for kw in lowered):
            return True
    return False


def priority_label(tags: Sequence[str] | None) -> CategoryLabel:
    """First audience label whose keywords match, else the catch-all."""
    for label in PRIORITY_LABELS:
        if matches(tags, keywords_for(label)):
            return label
    return CATCH_ALL_LABEL


def classify(post: Post) -> frozenset[CategoryLabel]:
    """
    Compute every label a post belongs to.

    Hollywood, World and Exclusive are independent tests, so a post can
    carry several of them. Celebverse and Gossips are an audience pair
    decided by `priority_label`, so at most one of them is present.
    Posts without tags get no labels.
    """
    labels = {label for label in HOME_COLUMN_LABELS if matches(post.tags, keywords_for(label))}

    audience = priority_label(post.tags)
    if audience is not CATCH_ALL_LABEL:
        labels.add(audience)

    return frozenset(labels)


def has_label(post: Post, label: CategoryLabel) -> bool:
    return label in classify(post)


def filter_by_label(posts: Iterable[Post], label: CategoryLabel) -> list[Post]:
    """Posts whose tags match the label's keywords, in input order."""
    keywords = keywords_for(label)
    return [post for post in posts if matches(post.tags, keywords)]
