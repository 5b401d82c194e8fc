"""Keyword table shared by every tag classifier."""

from content_curator.models.category import CategoryLabel

# Lowercase keywords; a tag matches when it contains one as a substring
KEYWORD_TABLE: dict[CategoryLabel, tuple[str, ...]] = {
    CategoryLabel.HOLLYWOOD: ("hollywood",),
    CategoryLabel.WORLD: ("canada", "holiday", "travel"),
    CategoryLabel.EXCLUSIVE: ("images", "exclusive", "feature"),
    CategoryLabel.CELEBVERSE: ("hollywood", "celebrity", "celeb", "actor", "actress"),
    CategoryLabel.GOSSIPS: ("gossip", "news", "entertainment", "scandal", "buzz"),
}


def keywords_for(label: CategoryLabel) -> tuple[str, ...]:
    """Return the keywords for a label. Blog has none."""
    try:
        return KEYWORD_TABLE[label]
    except KeyError:
        raise ValueError(f"Category '{label.value}' has no keyword table") from None
