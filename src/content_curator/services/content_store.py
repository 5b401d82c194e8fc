"""File-backed content store supplying posts newest first."""

import json
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from content_curator.models.post import Post
from content_curator.utils.logging import get_logger

logger = get_logger(__name__)

_POSTS_ADAPTER = TypeAdapter(list[Post])


class ContentStore:
    """Loads posts from a JSON file and sorts them by date, newest first."""

    def __init__(self, posts_file: Path):
        self.posts_file = posts_file

    def _load_raw(self) -> list[dict]:
        if not self.posts_file.exists():
            raise FileNotFoundError(f"Posts file not found: {self.posts_file}")

        raw = self.posts_file.read_text(encoding="utf-8").strip()
        if not raw:
            return []

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {self.posts_file}: {e}") from e

        # Accept a bare list or an export wrapped as {"posts": [...]}
        if isinstance(data, dict):
            data = data.get("posts", [])
        if not isinstance(data, list):
            raise ValueError(f"Expected a list of posts in {self.posts_file}")
        return data

    def load_posts(self) -> list[Post]:
        """Load and validate all posts, newest first."""
        try:
            posts = _POSTS_ADAPTER.validate_python(self._load_raw())
        except ValidationError as e:
            raise ValueError(f"Invalid post records in {self.posts_file}: {e}") from e

        posts.sort(key=lambda p: p.date, reverse=True)
        logger.debug(f"Loaded {len(posts)} posts from {self.posts_file}")
        return posts

    def get_post(self, slug: str, posts: list[Post] | None = None) -> Post:
        """Find a post by slug. Raises ValueError if missing."""
        for post in posts if posts is not None else self.load_posts():
            if post.slug == slug:
                return post
        raise ValueError(f"Post '{slug}' not found")


def create_content_store(posts_file: Path) -> ContentStore:
    """Factory function to create a ContentStore."""
    return ContentStore(posts_file=posts_file)
