"""Category labels derived from post tags."""

from __future__ import annotations

from enum import Enum


class CategoryLabel(str, Enum):
    """A derived classification applied to a post from keywords in its tags."""

    HOLLYWOOD = "Hollywood"
    WORLD = "World"
    EXCLUSIVE = "Exclusive"
    CELEBVERSE = "Celebverse"
    GOSSIPS = "Gossips"
    BLOG = "Blog"

    @property
    def slug(self) -> str:
        return self.value.lower()

    @classmethod
    def from_name(cls, name: str) -> CategoryLabel:
        """Look up a label by value, case-insensitively."""
        for label in cls:
            if label.value.lower() == name.strip().lower():
                return label
        raise ValueError(f"Unknown category '{name}'")


# Columns on the home page, left to right
HOME_COLUMN_LABELS: tuple[CategoryLabel, ...] = (
    CategoryLabel.HOLLYWOOD,
    CategoryLabel.WORLD,
    CategoryLabel.EXCLUSIVE,
)

# Audience labels, tested in this order; Blog is the residual case
PRIORITY_LABELS: tuple[CategoryLabel, ...] = (
    CategoryLabel.CELEBVERSE,
    CategoryLabel.GOSSIPS,
)

CATCH_ALL_LABEL = CategoryLabel.BLOG

KEYWORD_LABELS: tuple[CategoryLabel, ...] = HOME_COLUMN_LABELS + PRIORITY_LABELS

COLUMN_COLORS: dict[CategoryLabel, str] = {
    CategoryLabel.HOLLYWOOD: "#DC2626",
    CategoryLabel.WORLD: "#2563EB",
    CategoryLabel.EXCLUSIVE: "#7C3AED",
}
