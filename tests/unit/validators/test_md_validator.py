import pytest

from postkit.validators.md import MarkdownValidator, MarkdownValidationReport, MarkdownIssue


class TestMarkdownValidator:
    """Tests for the MarkdownValidator class."""

    @pytest.fixture
    def validator(self, posts_dir, assets_dir):
        """MarkdownValidator over a temporary site tree."""
        return MarkdownValidator(md_dir=posts_dir, assets_dir=assets_dir)

    def test_validate_valid_file(self, validator, write_post, valid_post_content):
        """A post with every field set and a real thumbnail is clean."""
        issues = validator.validate_file(write_post("valid.md", valid_post_content))
        assert not issues
        assert validator.report.files_checked == 1
        assert validator.report.total_errors == 0
        assert validator.report.total_warnings == 0

    def test_minimal_post_warns_about_thumbnail(self, validator, write_post, minimal_post_content):
        issues = validator.validate_file(write_post("minimal.md", minimal_post_content))
        assert [i.message for i in issues] == ["No thumbnail set"]
        assert validator.report.files_with_warnings == 1

    def test_asset_checks_skipped_without_assets_dir(self, posts_dir, write_post, minimal_post_content):
        validator = MarkdownValidator(md_dir=posts_dir)
        assert validator.validate_file(write_post("minimal.md", minimal_post_content)) == []

    def test_unterminated_frontmatter(self, validator, write_post):
        issues = validator.validate_file(write_post("open.md", "---\ntitle: x\ndate: 2024-01-01\n\nBody\n"))
        assert len(issues) == 1
        assert issues[0].category == "frontmatter"
        assert "never closed" in issues[0].message
        assert issues[0].line_number == 1

    def test_missing_frontmatter(self, validator, write_post):
        issues = validator.validate_file(write_post("bare.md", "# Heading\n\nJust prose.\n"))
        assert [i.message for i in issues] == ["No front matter found"]

    def test_unclosed_fence(self, validator, write_post, unclosed_fence_content):
        issues = validator.validate_file(write_post("fences.md", unclosed_fence_content))
        fence_issues = [i for i in issues if i.category == "fence"]
        assert len(fence_issues) == 1
        assert fence_issues[0].severity == "error"
        assert fence_issues[0].line_number == 15
        assert "Unclosed code fence" in fence_issues[0].message

    def test_fence_without_language_is_info(self, validator, write_post):
        content = "---\ntitle: x\ndate: 2024-01-01\nthumbnail: images/cover.png\n---\n\n```\nplain\n```\n"
        issues = validator.validate_file(write_post("nolang.md", content))
        assert [(i.severity, i.category) for i in issues] == [("info", "fence")]
        assert issues[0].line_number == 7
        assert validator.report.is_healthy
        assert not validator.report.has_warnings

    def test_empty_body(self, validator, write_post):
        content = "---\ntitle: x\ndate: 2024-01-01\nthumbnail: images/cover.png\n---\n"
        issues = validator.validate_file(write_post("empty.md", content))
        assert any("Post body is empty" in i.message for i in issues)

    def test_placeholder_in_prose(self, validator, write_post):
        content = "---\ntitle: x\ndate: 2024-01-01\nthumbnail: images/cover.png\n---\nIntro.\n\nHere is a TODO for later.\n"
        issues = validator.validate_file(write_post("todo.md", content))
        assert [i.message for i in issues] == ["Placeholder text found: TODO"]
        assert issues[0].line_number == 8

    def test_placeholder_in_code_ignored(self, validator, write_post):
        content = "---\ntitle: x\ndate: 2024-01-01\nthumbnail: images/cover.png\n---\n```python\n# TODO: batch\n```\n"
        assert validator.validate_file(write_post("code.md", content)) == []

    def test_missing_body_image(self, validator, write_post):
        content = "---\ntitle: x\ndate: 2024-01-01\nthumbnail: images/cover.png\n---\n![chart](images/chart.png)\n"
        issues = validator.validate_file(write_post("img.md", content))
        assert [i.category for i in issues] == ["asset"]
        assert issues[0].line_number == 6

    def test_invalid_encoding(self, validator, posts_dir):
        path = posts_dir / "latin1.md"
        path.write_bytes(b"---\ntitle: caf\xe9\n---\n")
        issues = validator.validate_file(path)
        assert issues[0].category == "structure"
        assert "encoding" in issues[0].message

    def test_impossible_date_reported(self, validator, write_post):
        path = write_post("bad-date.md", "---\ntitle: x\ndate: 2024-02-30\n---\nBody.\n")
        issues = validator.validate_file(path)
        date_issue = next(i for i in issues if i.category == "frontmatter")
        assert date_issue.severity == "error"
        assert "Invalid date format" in date_issue.message
        assert date_issue.line_number == 3

    def test_validate_all_counts(self, validator, write_post, valid_post_content, unclosed_fence_content):
        write_post("a.md", valid_post_content)
        write_post("b.md", unclosed_fence_content)
        report = validator.validate_all()
        assert report.files_checked == 2
        assert report.files_with_errors == 1
        assert not report.is_healthy

    def test_validate_links_valid(self, validator, write_post, posts_dir):
        (posts_dir / "target.md").write_text("Target content", encoding="utf-8")
        write_post("source.md", "[Link to target](target.md)\n\n[External](https://graphql.org)\n\n[Anchor](#top)\n")
        assert not validator.validate_links()

    def test_validate_links_broken(self, validator, write_post):
        write_post("broken_link.md", "---\ntitle: x\n---\n\n[Broken Link](non_existent.md#part)")
        issues = validator.validate_links()
        assert len(issues) == 1
        assert "Broken link" in issues[0].message
        assert "non_existent.md" in issues[0].message
        assert issues[0].line_number == 5

    def test_links_in_code_ignored(self, validator, write_post):
        write_post("code.md", "```md\n[x](gone.md)\n```\n\nInline `[y](gone.md)` too.\n")
        assert validator.validate_links() == []


class TestReport:
    def test_only_filters_and_recounts(self, tmp_path):
        report = MarkdownValidationReport(files_checked=2)
        report.add_issue(MarkdownIssue(tmp_path / "a.md", 1, "error", "fence", "x"))
        report.add_issue(MarkdownIssue(tmp_path / "b.md", 1, "warning", "frontmatter", "y"))
        report.add_issue(MarkdownIssue(tmp_path / "b.md", 2, "info", "fence", "z"))

        fences = report.only("fence")
        assert fences.files_checked == 2
        assert fences.total_errors == 1
        assert fences.total_warnings == 0
        assert fences.files_with_errors == 1
        assert len(fences.issues) == 2
