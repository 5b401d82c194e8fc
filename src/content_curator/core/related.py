"""Related content selection for the post being viewed."""

from collections.abc import Iterable, Sequence

from content_curator.core.classifier import matches, priority_label
from content_curator.core.keywords import keywords_for
from content_curator.models.category import CategoryLabel
from content_curator.models.post import Post
from content_curator.models.selection import RelatedContent
from content_curator.utils.logging import get_logger

logger = get_logger(__name__)


def _is_celebverse(tags: Sequence[str] | None) -> bool:
    return matches(tags, keywords_for(CategoryLabel.CELEBVERSE))


def _is_gossips(tags: Sequence[str] | None) -> bool:
    return matches(tags, keywords_for(CategoryLabel.GOSSIPS))


def determine_primary_category(tags: Sequence[str] | None) -> CategoryLabel:
    """Return Celebverse, Gossips or Blog for a post's tags, first match wins."""
    return priority_label(tags)


def _belongs_to(post: Post, category: CategoryLabel) -> bool:
    if category is CategoryLabel.BLOG:
        # Blog is everything that is neither Celebverse nor Gossips
        return not _is_celebverse(post.tags) and not _is_gossips(post.tags)
    return matches(post.tags, keywords_for(category))


def select_related(
    current_post: Post,
    posts: Iterable[Post],
    limit: int = 6,
    fallback_limit: int = 3,
) -> RelatedContent:
    """
    Select companion posts for `current_post`.

    Keeps posts from the same primary category in input order, up to
    `limit`. When none exist, falls back to the first `fallback_limit`
    other posts regardless of category. The current post is never
    included.

    Args:
        current_post: Post being viewed
        posts: All posts, newest first
        limit: Maximum same-category posts
        fallback_limit: Posts shown by the fallback

    Returns:
        RelatedContent, empty only when there are no other posts
    """
    category = determine_primary_category(current_post.tags)
    pool = [post for post in posts if post.slug != current_post.slug]

    related = [post for post in pool if _belongs_to(post, category)][:max(limit, 0)]
    if related:
        logger.debug(f"{len(related)} related {category.value} posts for {current_post.slug}")
        return RelatedContent(category=category, posts=related)

    fallback = pool[:max(fallback_limit, 0)]
    logger.debug(
        f"No related {category.value} posts for {current_post.slug}, "
        f"falling back to {len(fallback)} recent posts"
    )
    return RelatedContent(category=category, posts=fallback, used_fallback=bool(fallback))
