"""Post model for editorial content supplied by the content store."""

from datetime import date as calendar_date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Post(BaseModel):
    """An editorial post. Read-only once loaded."""

    model_config = ConfigDict(frozen=True)

    slug: str = Field(..., description="Unique post identifier")
    date: datetime = Field(..., description="Publication timestamp")
    title: str = Field(..., description="Post title")
    summary: str = Field(default="", description="Post summary")
    tags: tuple[str, ...] = Field(default=(), description="Post tags, in author order")
    images: tuple[str, ...] = Field(default=(), description="Image URLs, primary first")

    @field_validator("tags", "images", mode="before")
    @classmethod
    def _drop_missing(cls, value):
        if value is None:
            return ()
        if isinstance(value, str):
            return (value,)
        return tuple(v for v in value if v is not None)

    @field_validator("date", mode="before")
    @classmethod
    def _date_only(cls, value):
        # Front matter often carries a bare date
        if isinstance(value, calendar_date) and not isinstance(value, datetime):
            return datetime(value.year, value.month, value.day)
        if isinstance(value, str) and len(value.strip()) == 10:
            return datetime.fromisoformat(value.strip())
        return value

    @property
    def has_images(self) -> bool:
        return len(self.images) > 0

    @property
    def primary_image(self) -> str | None:
        """First image URL, if any."""
        return self.images[0] if self.images else None
