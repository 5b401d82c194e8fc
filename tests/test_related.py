"""Tests for related content selection."""

from content_curator.core.related import determine_primary_category, select_related
from content_curator.models.category import CategoryLabel


class TestDeterminePrimaryCategory:
    def test_celebverse_before_gossips(self):
        assert determine_primary_category(["Buzz", "Actor"]) is CategoryLabel.CELEBVERSE

    def test_gossips(self):
        assert determine_primary_category(["Daily News"]) is CategoryLabel.GOSSIPS

    def test_blog(self):
        assert determine_primary_category(["Travel"]) is CategoryLabel.BLOG
        assert determine_primary_category([]) is CategoryLabel.BLOG


class TestSelectRelated:
    def test_scenario_fallback(self, scenario_posts):
        a, b, c = scenario_posts
        result = select_related(a, scenario_posts)
        assert result.category is CategoryLabel.CELEBVERSE
        assert result.used_fallback is True
        assert result.slugs == ["b", "c"]

    def test_same_category(self, make_post):
        current = make_post("cur", tags=["celebrity"])
        posts = [
            make_post("g", tags=["gossip"]),
            current,
            make_post("c1", tags=["Actress"]),
            make_post("c2", tags=["Hollywood"]),
        ]
        result = select_related(current, posts)
        assert result.slugs == ["c1", "c2"]
        assert result.used_fallback is False

    def test_gossips_includes_celebrity_news(self, make_post):
        current = make_post("cur", tags=["scandal"])
        posts = [current, make_post("n", tags=["Celebrity News"]), make_post("t", tags=["travel"])]
        assert select_related(current, posts).slugs == ["n"]

    def test_blog_excludes_celebverse_and_gossips(self, make_post):
        current = make_post("cur", tags=["recipes"])
        posts = [
            make_post("celeb", tags=["celeb"]),
            make_post("news", tags=["news"]),
            make_post("untagged"),
            make_post("travel", tags=["travel"]),
        ]
        result = select_related(current, posts)
        assert result.category is CategoryLabel.BLOG
        assert result.slugs == ["untagged", "travel"]

    def test_limited_to_six(self, make_post):
        current = make_post("cur", tags=["buzz"])
        posts = [make_post(f"g{i}", tags=["gossip"], days_ago=i) for i in range(9)]
        result = select_related(current, posts)
        assert result.slugs == [f"g{i}" for i in range(6)]

    def test_fallback_takes_first_three(self, make_post):
        current = make_post("cur", tags=["actor"])
        posts = [make_post(f"p{i}", tags=["travel"], days_ago=i) for i in range(5)]
        result = select_related(current, [current] + posts)
        assert result.slugs == ["p0", "p1", "p2"]
        assert result.used_fallback is True

    def test_excludes_current_post_by_slug(self, make_post):
        current = make_post("same", tags=["actor"])
        duplicate = make_post("same", tags=["actor"], title="Another copy")
        result = select_related(current, [duplicate, make_post("other")])
        assert "same" not in result.slugs

    def test_no_other_posts(self, make_post):
        current = make_post("only", tags=["gossip"])
        result = select_related(current, [current])
        assert result.is_empty
        assert result.used_fallback is False
