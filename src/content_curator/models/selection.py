"""Bounded lists produced for each display surface."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from content_curator.models.category import CategoryLabel
from content_curator.models.post import Post


class CarouselItem(BaseModel):
    """A showcase slide."""

    model_config = ConfigDict(frozen=True)

    title: str
    image: str = Field(..., description="Primary image of the source post")
    slug: str


class CategoryColumn(BaseModel):
    """Posts shown in a labeled column."""

    label: CategoryLabel
    posts: list[Post] = Field(default_factory=list)
    has_more: bool = Field(default=False, description="More matches exist than are shown")
    total_matches: int = Field(default=0, description="Match count before truncation")
    color: str | None = Field(default=None, description="Header color for home columns")

    @property
    def is_empty(self) -> bool:
        return not self.posts

    @property
    def title(self) -> str:
        return self.label.value


class RelatedContent(BaseModel):
    """Companion posts for the post being viewed."""

    category: CategoryLabel
    posts: list[Post] = Field(default_factory=list)
    used_fallback: bool = Field(
        default=False, description="Posts are recent posts from any category"
    )

    @property
    def is_empty(self) -> bool:
        return not self.posts

    @property
    def slugs(self) -> list[str]:
        return [post.slug for post in self.posts]


class HomePage(BaseModel):
    """Everything a home or section page renders."""

    carousel: list[CarouselItem] = Field(default_factory=list)
    columns: list[CategoryColumn] = Field(default_factory=list)
    latest: list[Post] = Field(default_factory=list)
    has_more_latest: bool = False

    @property
    def visible_columns(self) -> list[CategoryColumn]:
        """Columns with at least one post."""
        return [column for column in self.columns if not column.is_empty]
