"""
Tests for the post listing builder.
"""
import pytest
import yaml

from postkit.builders.listing import ListingBuilder, sort_posts
from postkit.core.exceptions import ListingError
from postkit.dataclasses.post import Post


def post_text(title, day, draft=False):
    lines = ["---", f'title: "{title}"', f"date: {day}"]
    if draft:
        lines.append("draft: true")
    lines += ["---", "", "Body."]
    return "\n".join(lines) + "\n"


@pytest.fixture
def populated(write_post):
    write_post("older.md", post_text("Older", "2020-05-01"))
    write_post("newer.md", post_text("Newer", "2021-03-14"))
    write_post("same-day-b.md", post_text("Beta", "2020-05-01"))
    write_post("wip.md", post_text("Work in progress", "2022-01-01", draft=True))
    write_post("broken.md", "---\ntitle: Broken\n---\nNo date here.\n")


class TestListingBuilder:
    def test_collect_sorts_newest_first(self, posts_dir, populated):
        builder = ListingBuilder(posts_dir)
        posts = builder.collect()
        assert [p.title for p in posts] == ["Newer", "Beta", "Older"]

    def test_collect_counts(self, posts_dir, populated):
        builder = ListingBuilder(posts_dir)
        builder.collect()
        assert builder.stats.files_processed == 4
        assert builder.stats.drafts_skipped == 1
        assert builder.stats.posts_listed == 3
        assert builder.stats.errors == 1

    def test_include_drafts(self, posts_dir, populated):
        posts = ListingBuilder(posts_dir, include_drafts=True).collect()
        assert posts[0].title == "Work in progress"

    def test_missing_directory(self, tmp_path):
        with pytest.raises(ListingError, match="not found"):
            ListingBuilder(tmp_path / "missing").collect()

    def test_write_yaml(self, posts_dir, populated, tmp_path):
        builder = ListingBuilder(posts_dir)
        output = builder.write(builder.collect(), tmp_path / "data" / "posts.yaml")

        data = yaml.safe_load(output.read_text(encoding="utf-8"))
        assert [entry["slug"] for entry in data["posts"]] == ["newer", "same-day-b", "older"]
        assert data["posts"][0] == {
            "slug": "newer",
            "title": "Newer",
            "date": "2021-03-14",
            "thumbnail": None,
            "path": "newer.md",
        }

    def test_write_failure(self, posts_dir, populated, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        builder = ListingBuilder(posts_dir)
        with pytest.raises(ListingError, match="Cannot write listing"):
            builder.write(builder.collect(), blocker / "posts.yaml")


class TestSortPosts:
    def test_title_breaks_ties_case_insensitively(self, tmp_path):
        from pathlib import Path

        a = Post.from_text(post_text("apple", "2021-01-01"), Path("a.md"))
        b = Post.from_text(post_text("Banana", "2021-01-01"), Path("b.md"))
        c = Post.from_text(post_text("cherry", "2021-06-01"), Path("c.md"))
        assert [p.title for p in sort_posts([b, a, c])] == ["cherry", "apple", "Banana"]


class TestImpossibleDates:
    def test_bad_date_is_counted_not_fatal(self, posts_dir, write_post, valid_post_content):
        write_post("good.md", valid_post_content)
        write_post("bad-date.md", "---\ntitle: Bad\ndate: 2024-13-45\n---\nBody.\n")
        builder = ListingBuilder(posts_dir)
        posts = builder.collect()
        assert [p.slug for p in posts] == ["good"]
        assert builder.stats.errors == 1
