"""Showcase selection and per-session rotation."""

import asyncio
from collections.abc import Iterable

from content_curator.models.post import Post
from content_curator.models.selection import CarouselItem
from content_curator.utils.logging import get_logger

logger = get_logger(__name__)


def select_carousel_items(posts: Iterable[Post], limit: int = 5) -> list[CarouselItem]:
    """
    Pick image-bearing posts for the showcase.

    Args:
        posts: Posts in display order
        limit: Maximum number of slides

    Returns:
        Up to `limit` slides in input order. Empty when no post has an
        image, in which case the showcase is not shown.
    """
    items: list[CarouselItem] = []
    if limit <= 0:
        return items

    for post in posts:
        if not post.has_images:
            continue
        items.append(CarouselItem(title=post.title, image=post.images[0], slug=post.slug))
        if len(items) >= limit:
            break

    logger.debug(f"Selected {len(items)} carousel items (limit {limit})")
    return items


class CarouselRotation:
    """Current slide of one showcase display session."""

    def __init__(self, item_count: int, interval: float = 5.0):
        if item_count < 0:
            raise ValueError("item_count cannot be negative")
        self.item_count = item_count
        self.interval = interval
        self.index = 0

    def advance(self) -> int:
        """Move to the next slide, wrapping to the first."""
        if self.item_count:
            self.index = (self.index + 1) % self.item_count
        return self.index

    def previous(self) -> int:
        """Move to the previous slide, wrapping to the last."""
        if self.item_count:
            self.index = (self.index - 1 + self.item_count) % self.item_count
        return self.index

    def go_to(self, index: int) -> int:
        if not 0 <= index < self.item_count:
            raise IndexError(f"Slide {index} out of range for {self.item_count} items")
        self.index = index
        return self.index

    async def auto_advance(self, max_ticks: int | None = None) -> int:
        """
        Advance once per interval until cancelled.

        Cancel the task running this coroutine when the session ends.
        Returns the number of ticks taken when `max_ticks` is reached.
        """
        ticks = 0
        while max_ticks is None or ticks < max_ticks:
            await asyncio.sleep(self.interval)
            self.advance()
            ticks += 1
        return ticks
