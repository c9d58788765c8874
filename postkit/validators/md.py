#!/usr/bin/env python3
"""
md.py
-----
Markdown file validation for blog posts.

Validates:
- Front matter (delegated to FrontmatterValidator)
- Thumbnail and body image assets (delegated to AssetValidator)
- Body parses under the CommonMark renderer
- Fenced code blocks are balanced
- Internal markdown links
- Body content (empty body, placeholder text)

Usage:
    validate md all
    validate md frontmatter
    validate md fences
    validate md thumbnails
    validate md links
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
from pathlib import Path
from typing import List, Optional
from urllib.parse import unquote

# --- Local imports ---
from postkit.core.exceptions import FrontmatterError
from postkit.core.logging_manager import PostkitLogger, safe_logger
from postkit.utils.fs import find_markdown_files, is_remote_path
from postkit.utils.md import (
    create_parser,
    find_fenced_blocks,
    iter_links,
    iter_prose,
    split_frontmatter,
)
from postkit.validators.assets import AssetValidator
from postkit.validators.frontmatter import FrontmatterValidator
from postkit.validators.issues import (
    MarkdownIssue,
    MarkdownValidationReport,
    format_markdown_report,
)

__all__ = [
    "MarkdownIssue",
    "MarkdownValidationReport",
    "MarkdownValidator",
    "format_markdown_report",
]

PLACEHOLDERS = ["TODO", "FIXME", "XXX", "PLACEHOLDER"]

SKIPPED_LINK_PREFIXES = ("mailto:", "tel:", "#", "/")


class MarkdownValidator:
    """Validates markdown post files."""

    def __init__(
        self,
        md_dir: Path,
        assets_dir: Optional[Path] = None,
        logger: Optional[PostkitLogger] = None,
    ):
        """
        Initialize markdown validator.

        Args:
            md_dir: Directory containing markdown posts
            assets_dir: Asset tree root; asset checks are skipped when None
            logger: Optional logger instance
        """
        self.md_dir = md_dir
        self.assets_dir = assets_dir
        self.logger = logger
        self.report = MarkdownValidationReport()
        self.parser = create_parser()
        self.frontmatter_validator = FrontmatterValidator()
        self.asset_validator = (
            AssetValidator(assets_dir, logger) if assets_dir is not None else None
        )

    def _read(self, file_path: Path) -> tuple[Optional[str], List[MarkdownIssue]]:
        try:
            return file_path.read_text(encoding="utf-8"), []
        except UnicodeDecodeError as e:
            return None, [
                MarkdownIssue(
                    file_path=file_path,
                    line_number=None,
                    severity="error",
                    category="structure",
                    message=f"File encoding error: {e}",
                    suggestion="Ensure file is UTF-8 encoded",
                )
            ]

    def validate_file(self, file_path: Path) -> List[MarkdownIssue]:
        """
        Validate a single markdown post.

        Args:
            file_path: Path to markdown file

        Returns:
            List of issues found in the file
        """
        issues = self._check_file(file_path)

        self.report.files_checked += 1
        self.report.add_issues(issues)
        if any(i.severity == "error" for i in issues):
            self.report.files_with_errors += 1
        if any(i.severity == "warning" for i in issues):
            self.report.files_with_warnings += 1

        safe_logger(self.logger).log_operation(
            "validate_file",
            {
                "file": str(file_path),
                "errors": sum(1 for i in issues if i.severity == "error"),
                "warnings": sum(1 for i in issues if i.severity == "warning"),
            },
        )
        return issues

    def _check_file(self, file_path: Path) -> List[MarkdownIssue]:
        content, issues = self._read(file_path)
        if content is None:
            return issues

        try:
            frontmatter_text, body_lines, body_start = split_frontmatter(content)
        except FrontmatterError as e:
            return [
                MarkdownIssue(
                    file_path=file_path,
                    line_number=e.line_number,
                    severity="error",
                    category="frontmatter",
                    message=str(e),
                    suggestion="Close the front matter with a '---' line",
                )
            ]

        data, parse_issues = self.frontmatter_validator.parse(file_path, frontmatter_text)
        issues.extend(parse_issues)
        if data is not None:
            issues.extend(
                self.frontmatter_validator.validate_data(file_path, data, frontmatter_text)
            )
            if self.asset_validator is not None:
                issues.extend(
                    self.asset_validator.validate_thumbnail(file_path, data, frontmatter_text)
                )

        issues.extend(self._validate_body(file_path, body_lines, body_start))
        return issues

    def _validate_body(
        self, file_path: Path, body_lines: List[str], body_start: int
    ) -> List[MarkdownIssue]:
        """Validate markdown body content."""
        issues: List[MarkdownIssue] = []
        body = "\n".join(body_lines)

        if not body.strip():
            issues.append(
                MarkdownIssue(
                    file_path=file_path,
                    line_number=body_start,
                    severity="warning",
                    category="content",
                    message="Post body is empty",
                    suggestion="Add content after the front matter",
                )
            )
            return issues

        try:
            tokens = self.parser.parse(body)
        except Exception as e:
            issues.append(
                MarkdownIssue(
                    file_path=file_path,
                    line_number=body_start,
                    severity="error",
                    category="structure",
                    message=f"Markdown body failed to parse: {e}",
                )
            )
            return issues

        for block in find_fenced_blocks(tokens, body_lines):
            line_num = block.start_line + body_start
            if not block.closed:
                issues.append(
                    MarkdownIssue(
                        file_path=file_path,
                        line_number=line_num,
                        severity="error",
                        category="fence",
                        message=f"Unclosed code fence '{block.markup}'",
                        suggestion=f"Close the block with a line containing only '{block.markup}'",
                    )
                )
            elif not block.info:
                issues.append(
                    MarkdownIssue(
                        file_path=file_path,
                        line_number=line_num,
                        severity="info",
                        category="fence",
                        message="Code block has no language tag",
                        suggestion=f"Start the block with '{block.markup}graphql', '{block.markup}json', ...",
                    )
                )

        seen = set()
        for text, line in iter_prose(tokens):
            for placeholder in PLACEHOLDERS:
                if placeholder in seen:
                    continue
                if re.search(rf"\b{placeholder}\b", text):
                    seen.add(placeholder)
                    issues.append(
                        MarkdownIssue(
                            file_path=file_path,
                            line_number=line + body_start if line is not None else None,
                            severity="warning",
                            category="content",
                            message=f"Placeholder text found: {placeholder}",
                            suggestion="Replace placeholder with actual content",
                        )
                    )

        if self.asset_validator is not None:
            issues.extend(self.asset_validator.validate_images(file_path, tokens, body_start))

        return issues

    def validate_all(self) -> MarkdownValidationReport:
        """
        Validate all markdown files in the directory.

        Returns:
            Complete validation report
        """
        md_files = find_markdown_files(self.md_dir)

        if not md_files:
            safe_logger(self.logger).log_warning(f"No markdown files found in {self.md_dir}")

        for md_file in md_files:
            self.validate_file(md_file)

        return self.report

    def validate_links(self) -> List[MarkdownIssue]:
        """
        Validate relative links between files.

        External links, mail links, in-page anchors and site-absolute
        routes (``/posts/...``) are skipped; those belong to the site
        generator's URL space.

        Returns:
            List of broken link issues
        """
        issues: List[MarkdownIssue] = []

        for md_file in find_markdown_files(self.md_dir):
            content, _ = self._read(md_file)
            if content is None:
                # Encoding errors are reported by validate_file
                continue
            try:
                _, body_lines, body_start = split_frontmatter(content)
            except FrontmatterError:
                # Reported by validate_file; check the raw text instead
                body_lines, body_start = content.splitlines(), 1

            tokens = self.parser.parse("\n".join(body_lines))
            for kind, link_path, link_text, line in iter_links(tokens):
                if kind != "link" or not link_path:
                    continue
                if is_remote_path(link_path) or link_path.startswith(SKIPPED_LINK_PREFIXES):
                    continue

                line_no = line + body_start if line is not None else None
                relative = unquote(link_path.split("#", 1)[0].split("?", 1)[0])
                try:
                    target_path = (md_file.parent / relative).resolve()
                except (ValueError, OSError) as e:
                    issues.append(
                        MarkdownIssue(
                            file_path=md_file,
                            line_number=line_no,
                            severity="error",
                            category="link",
                            message=f"Invalid link path: {link_path}",
                            suggestion=str(e),
                        )
                    )
                    continue

                if not target_path.exists():
                    issues.append(
                        MarkdownIssue(
                            file_path=md_file,
                            line_number=line_no,
                            severity="error",
                            category="link",
                            message=f"Broken link: [{link_text}]({link_path})",
                            suggestion=f"Target file not found: {target_path}",
                        )
                    )

        return issues
