"""Shared fixtures for Content Curator tests."""

from datetime import datetime, timedelta

import pytest

from content_curator.models.post import Post


@pytest.fixture
def make_post():
    """Build posts with sensible defaults."""

    def _make(slug: str, tags=(), images=(), days_ago: int = 0, title: str | None = None) -> Post:
        return Post(
            slug=slug,
            date=datetime(2024, 6, 1) - timedelta(days=days_ago),
            title=title or slug.replace("-", " ").title(),
            tags=tags,
            images=images,
        )

    return _make


@pytest.fixture
def scenario_posts(make_post):
    """Celebrity post, travel post and an untagged post, newest first."""
    return [
        make_post("a", tags=["Celebrity News"], days_ago=0),
        make_post("b", tags=["Canada Travel"], days_ago=1),
        make_post("c", tags=[], days_ago=2),
    ]
