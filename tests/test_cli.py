"""Tests for CLI commands."""

import json

import pytest
from typer.testing import CliRunner

from content_curator.cli import app

runner = CliRunner()


@pytest.fixture
def posts_file(tmp_path):
    path = tmp_path / "posts.json"
    records = [
        {"slug": "a", "date": "2024-05-03", "title": "Star", "tags": ["Celebrity News"], "images": ["/a.jpg"]},
        {"slug": "b", "date": "2024-05-02", "title": "Trip", "tags": ["Canada Travel"]},
        {"slug": "c", "date": "2024-05-01", "title": "Misc", "tags": []},
    ]
    path.write_text(json.dumps(records), encoding="utf-8")
    return str(path)


class TestCli:
    def test_carousel(self, posts_file):
        result = runner.invoke(app, ["carousel", "--posts", posts_file])
        assert result.exit_code == 0
        assert "Showcase" in result.output
        assert "/a.jpg" in result.output

    def test_columns(self, posts_file):
        result = runner.invoke(app, ["columns", "--posts", posts_file])
        assert result.exit_code == 0
        assert "World" in result.output
        assert "Trip" in result.output

    def test_related_fallback(self, posts_file):
        result = runner.invoke(app, ["related", "a", "--posts", posts_file])
        assert result.exit_code == 0
        assert "Celebverse" in result.output
        assert "showing recent posts" in result.output
        assert "Trip" in result.output
        assert "Misc" in result.output

    def test_related_unknown_slug(self, posts_file):
        result = runner.invoke(app, ["related", "zzz", "--posts", posts_file])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_classify(self, posts_file):
        result = runner.invoke(app, ["classify", "b", "--posts", posts_file])
        assert result.exit_code == 0
        assert "World" in result.output
        assert "Blog" in result.output

    def test_home(self, posts_file):
        result = runner.invoke(app, ["home", "--posts", posts_file])
        assert result.exit_code == 0
        assert "Latest" in result.output

    def test_section(self, posts_file):
        result = runner.invoke(app, ["section", "celebverse", "--posts", posts_file])
        assert result.exit_code == 0
        assert "Star" in result.output

    def test_section_unknown(self, posts_file):
        result = runner.invoke(app, ["section", "world", "--posts", posts_file])
        assert result.exit_code == 1
        assert "No section page" in result.output

    def test_missing_posts_file(self, tmp_path):
        result = runner.invoke(app, ["home", "--posts", str(tmp_path / "none.json")])
        assert result.exit_code == 1
        assert "Could not load posts" in result.output
