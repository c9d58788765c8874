#!/usr/bin/env python3
"""
Integration tests for the post shipped in content/posts.

The published article must satisfy the same checks the CLI runs:
front matter complete, thumbnail present in the asset tree, body
parseable and every code fence closed.
"""
import pytest
from datetime import date

from postkit.builders.listing import ListingBuilder
from postkit.dataclasses.post import Post
from postkit.utils.md import find_fenced_blocks, parse_markdown
from postkit.validators.md import MarkdownValidator


@pytest.fixture
def post_path(project_root):
    return project_root / "content" / "posts" / "graphql-vs-rest.md"


@pytest.fixture
def post(post_path):
    return Post.from_file(post_path)


class TestShippedPost:
    def test_front_matter(self, post):
        assert post.title == "GraphQL vs REST: What You Gain and What You Give Up"
        assert post.date == date(2021, 3, 14)
        assert post.thumbnail == "images/graphql-vs-rest.svg"

    def test_thumbnail_exists(self, post, project_root):
        assert (project_root / "static" / post.thumbnail).is_file()

    def test_all_fences_closed_and_tagged(self, post):
        body_lines = post.body.split("\n")
        blocks = find_fenced_blocks(parse_markdown(post.body), body_lines)
        assert len(blocks) >= 10
        assert all(block.closed for block in blocks)
        assert all(block.info for block in blocks)

    def test_snippet_languages(self, post):
        blocks = find_fenced_blocks(parse_markdown(post.body), post.body.split("\n"))
        languages = {block.info for block in blocks}
        assert {"graphql", "json", "http"} <= languages

    def test_validator_reports_no_issues(self, project_root):
        validator = MarkdownValidator(
            project_root / "content" / "posts", assets_dir=project_root / "static"
        )
        report = validator.validate_all()
        assert report.files_checked == 1
        assert report.issues == []
        assert validator.validate_links() == []

    def test_listing(self, project_root):
        posts = ListingBuilder(project_root / "content" / "posts").collect()
        assert [p.slug for p in posts] == ["graphql-vs-rest"]
