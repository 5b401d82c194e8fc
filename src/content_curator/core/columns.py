"""Category column selection for the home page."""

from collections.abc import Iterable

from content_curator.core.classifier import classify
from content_curator.models.category import COLUMN_COLORS, HOME_COLUMN_LABELS, CategoryLabel
from content_curator.models.post import Post
from content_curator.models.selection import CategoryColumn
from content_curator.utils.logging import get_logger

logger = get_logger(__name__)


def select_column(
    posts: Iterable[Post],
    label: CategoryLabel,
    column_size: int = 5,
) -> CategoryColumn:
    """
    Select the posts shown in a labeled column.

    Args:
        posts: Posts in display order
        label: Column label
        column_size: Maximum posts shown

    Returns:
        Column with the first `column_size` labeled posts, in input order,
        and whether more matches exist beyond them
    """
    matched = [post for post in posts if label in classify(post)]
    shown = matched[:max(column_size, 0)]

    logger.debug(f"Column {label.value}: {len(shown)} shown of {len(matched)} matches")
    return CategoryColumn(
        label=label,
        posts=shown,
        has_more=len(matched) > column_size,
        total_matches=len(matched),
        color=COLUMN_COLORS.get(label),
    )


def select_home_columns(posts: Iterable[Post], column_size: int = 5) -> list[CategoryColumn]:
    """Hollywood, World and Exclusive columns, in that order."""
    posts = list(posts)
    return [select_column(posts, label, column_size) for label in HOME_COLUMN_LABELS]
