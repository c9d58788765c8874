#!/usr/bin/env python3
"""
frontmatter.py
--------------
YAML front matter validation for blog posts.

This is STRUCTURAL validation: it checks that a site generator can read
the metadata block, not whether the prose is any good.

Validates:
- YAML syntax and basic structure
- Required fields (title, date) and that they are non-empty
- Date values that normalize to a calendar date
- Field types (string, list, bool)
- Unknown fields (warnings)

Thumbnail existence is checked separately by the asset validator,
since it needs the asset tree.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

# --- Third party imports ---
import yaml

# --- Local imports ---
from postkit.core.validators import DataValidator
from postkit.utils.md import find_field_line_number
from postkit.validators.issues import MarkdownIssue


class FrontmatterValidator:
    """Validates the front matter block of a post."""

    REQUIRED_FIELDS = ["title", "date"]

    # Optional fields with accepted types
    OPTIONAL_FIELDS: Dict[str, Any] = {
        "thumbnail": str,
        "description": str,
        "author": str,
        "tags": list,
        "draft": bool,
    }

    # A wrong type here breaks listings or asset lookup
    STRICT_FIELDS = {"thumbnail", "tags"}

    def _issue(
        self,
        file_path: Path,
        severity: str,
        message: str,
        line_number: Optional[int] = 1,
        suggestion: Optional[str] = None,
    ) -> MarkdownIssue:
        return MarkdownIssue(
            file_path=file_path,
            line_number=line_number,
            severity=severity,
            category="frontmatter",
            message=message,
            suggestion=suggestion,
        )

    def parse(
        self, file_path: Path, frontmatter_text: str
    ) -> Tuple[Optional[Dict[str, Any]], List[MarkdownIssue]]:
        """
        Parse front matter text into a mapping.

        Args:
            file_path: File being validated
            frontmatter_text: YAML between the delimiters

        Returns:
            Tuple of (mapping or None, issues)
        """
        if not frontmatter_text.strip():
            return None, [
                self._issue(
                    file_path,
                    "error",
                    "No front matter found",
                    suggestion="Start the file with a '---' block containing title and date",
                )
            ]

        try:
            data = yaml.safe_load(frontmatter_text)
        except yaml.YAMLError as e:
            problem_mark = getattr(e, "problem_mark", None)
            # +2: the opening delimiter and 1-indexing
            line_num = problem_mark.line + 2 if problem_mark else 1
            return None, [
                self._issue(
                    file_path,
                    "error",
                    f"Invalid YAML syntax: {e}",
                    line_number=line_num,
                    suggestion="Check YAML formatting (indentation, colons, quotes)",
                )
            ]
        except ValueError as e:
            # YAML timestamps that are not calendar dates, e.g. 2024-02-30
            return None, [
                self._issue(
                    file_path,
                    "error",
                    f"Invalid date format: {e}",
                    line_number=find_field_line_number(frontmatter_text, "date"),
                    suggestion="Use a real calendar date in YYYY-MM-DD format",
                )
            ]

        if not isinstance(data, dict):
            return None, [
                self._issue(
                    file_path,
                    "error",
                    f"Front matter must be a mapping, got {type(data).__name__}",
                )
            ]

        return data, []

    def validate(self, file_path: Path, frontmatter_text: str) -> List[MarkdownIssue]:
        """
        Validate front matter text.

        Args:
            file_path: File being validated
            frontmatter_text: YAML between the delimiters

        Returns:
            List of issues (empty when the block is valid)
        """
        data, issues = self.parse(file_path, frontmatter_text)
        if data is None:
            return issues
        return self.validate_data(file_path, data, frontmatter_text)

    def validate_data(
        self, file_path: Path, data: Dict[str, Any], frontmatter_text: str = ""
    ) -> List[MarkdownIssue]:
        """Validate an already parsed front matter mapping."""
        issues: List[MarkdownIssue] = []

        def line_of(field_name: str) -> int:
            return find_field_line_number(frontmatter_text, field_name)

        for field_name in self.REQUIRED_FIELDS:
            if field_name not in data:
                issues.append(
                    self._issue(
                        file_path,
                        "error",
                        f"Required field '{field_name}' missing",
                        suggestion=f"Add '{field_name}: <value>' to front matter",
                    )
                )
            elif data[field_name] is None or str(data[field_name]).strip() == "":
                issues.append(
                    self._issue(
                        file_path,
                        "error",
                        f"Required field '{field_name}' is empty",
                        line_number=line_of(field_name),
                    )
                )

        title = data.get("title")
        if title is not None and not isinstance(title, str):
            issues.append(
                self._issue(
                    file_path,
                    "warning",
                    f"Field 'title' has unexpected type: {type(title).__name__}",
                    line_number=line_of("title"),
                    suggestion="Quote the title so it is read as text",
                )
            )

        date_value = data.get("date")
        if date_value is not None and str(date_value).strip():
            if not isinstance(date_value, (str, date)) or DataValidator.normalize_date(date_value) is None:
                issues.append(
                    self._issue(
                        file_path,
                        "error",
                        f"Invalid date format: '{date_value}'",
                        line_number=line_of("date"),
                        suggestion="Use YYYY-MM-DD format (e.g., 2024-01-15)",
                    )
                )

        for field_key, expected_type in self.OPTIONAL_FIELDS.items():
            value = data.get(field_key)
            if value is None:
                continue
            if not isinstance(value, expected_type):
                severity = "error" if field_key in self.STRICT_FIELDS else "warning"
                issues.append(
                    self._issue(
                        file_path,
                        severity,
                        f"Field '{field_key}' has unexpected type: {type(value).__name__}",
                        line_number=line_of(field_key),
                        suggestion=f"Expected: {expected_type.__name__}",
                    )
                )

        tags = data.get("tags")
        if isinstance(tags, list):
            bad_tags = [t for t in tags if not isinstance(t, str)]
            if bad_tags:
                issues.append(
                    self._issue(
                        file_path,
                        "warning",
                        f"Non-text tags: {', '.join(str(t) for t in bad_tags)}",
                        line_number=line_of("tags"),
                        suggestion="Quote tags so they are read as text",
                    )
                )

        known_fields = set(self.REQUIRED_FIELDS) | set(self.OPTIONAL_FIELDS)
        unknown_fields = sorted(str(k) for k in set(data.keys()) - known_fields)
        for field_name in unknown_fields:
            issues.append(
                self._issue(
                    file_path,
                    "warning",
                    f"Unknown field: {field_name}",
                    line_number=line_of(field_name),
                    suggestion="This field is ignored by the listing",
                )
            )

        return issues
