#!/usr/bin/env python3
"""
assets.py
---------
Asset reference validation for blog posts.

Checks that the ``thumbnail`` front matter path and local body images
point at files that exist in the site's asset tree.

Resolution rules:
    - Thumbnails resolve against the asset root; a leading '/' is the
      asset root itself
    - Body images resolve against the asset root first, then against the
      post's own directory
    - http(s) URLs are not fetched
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Any, Dict, List, Optional
from urllib.parse import unquote

# --- Local imports ---
from postkit.core.logging_manager import PostkitLogger, safe_logger
from postkit.utils.fs import is_remote_path, resolve_asset_path
from postkit.utils.md import find_field_line_number, iter_links
from postkit.validators.issues import MarkdownIssue

IMAGE_EXTENSIONS = {".png", ".jpg", ".jpeg", ".gif", ".webp", ".svg", ".avif"}


class AssetValidator:
    """Validates thumbnail and image references against an asset tree."""

    def __init__(self, assets_dir: Path, logger: Optional[PostkitLogger] = None):
        """
        Initialize asset validator.

        Args:
            assets_dir: Root of the asset tree (e.g. ``static/``)
            logger: Optional logger instance
        """
        self.assets_dir = assets_dir
        self.logger = logger

    def _issue(
        self,
        file_path: Path,
        line_number: Optional[int],
        severity: str,
        message: str,
        suggestion: Optional[str] = None,
    ) -> MarkdownIssue:
        return MarkdownIssue(
            file_path=file_path,
            line_number=line_number,
            severity=severity,
            category="asset",
            message=message,
            suggestion=suggestion,
        )

    def validate_thumbnail(
        self,
        file_path: Path,
        frontmatter: Dict[str, Any],
        frontmatter_text: str = "",
    ) -> List[MarkdownIssue]:
        """
        Check the ``thumbnail`` field of a parsed front matter mapping.

        Args:
            file_path: Post being validated
            frontmatter: Parsed front matter
            frontmatter_text: Raw YAML, used for line numbers

        Returns:
            List of issues
        """
        thumbnail = frontmatter.get("thumbnail")
        line_num = find_field_line_number(frontmatter_text, "thumbnail")

        if thumbnail is None or (isinstance(thumbnail, str) and not thumbnail.strip()):
            return [
                self._issue(
                    file_path,
                    line_num,
                    "warning",
                    "No thumbnail set",
                    suggestion="Add 'thumbnail: images/<name>.png' so listing pages show an image",
                )
            ]

        # Type mismatches are reported by the front matter validator
        if not isinstance(thumbnail, str):
            return []

        return self.check_reference(file_path, thumbnail, line_num, "Thumbnail")

    def check_reference(
        self,
        file_path: Path,
        reference: str,
        line_number: Optional[int],
        label: str,
        fallback_dir: Optional[Path] = None,
    ) -> List[MarkdownIssue]:
        """
        Check one asset reference.

        Args:
            file_path: Post containing the reference
            reference: Path as written in the post
            line_number: File line for reporting
            label: 'Thumbnail' or 'Image', used in messages
            fallback_dir: Extra directory to try when the asset root misses

        Returns:
            List of issues
        """
        if is_remote_path(reference):
            return [
                self._issue(
                    file_path,
                    line_number,
                    "warning",
                    f"{label} is a remote URL and was not checked: {reference}",
                    suggestion="Store images in the asset tree so the site build can verify them",
                )
            ]

        issues: List[MarkdownIssue] = []
        reference = unquote(reference)

        try:
            target = resolve_asset_path(reference, self.assets_dir)
        except ValueError as e:
            return [self._issue(file_path, line_number, "error", str(e))]

        suffix = target.suffix.lower()
        if suffix not in IMAGE_EXTENSIONS:
            issues.append(
                self._issue(
                    file_path,
                    line_number,
                    "warning",
                    f"{label} does not look like an image: {reference}",
                    suggestion=f"Use one of: {', '.join(sorted(IMAGE_EXTENSIONS))}",
                )
            )

        if target.is_file():
            return issues

        if fallback_dir is not None and not reference.startswith("/"):
            local_target = (fallback_dir / reference).resolve()
            if local_target.is_file():
                return issues

        safe_logger(self.logger).log_debug(
            "Missing asset", {"file": str(file_path), "reference": reference}
        )
        issues.append(
            self._issue(
                file_path,
                line_number,
                "error",
                f"{label} not found: {reference}",
                suggestion=f"Expected file at {target}",
            )
        )
        return issues

    def validate_images(
        self, file_path: Path, tokens: list, body_start: int = 1
    ) -> List[MarkdownIssue]:
        """
        Check every local image referenced in a parsed body.

        Args:
            file_path: Post being validated
            tokens: markdown-it tokens of the body
            body_start: File line of the first body line

        Returns:
            List of issues
        """
        issues: List[MarkdownIssue] = []
        for kind, target, _text, line in iter_links(tokens):
            if kind != "image" or not target:
                continue
            line_num = line + body_start if line is not None else None
            issues.extend(
                self.check_reference(
                    file_path, target, line_num, "Image", fallback_dir=file_path.parent
                )
            )
        return issues
