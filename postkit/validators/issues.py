#!/usr/bin/env python3
"""
issues.py
---------
Issue and report records shared by the post validators.

Every validator reports problems as MarkdownIssue records and collects
them in a MarkdownValidationReport, so the CLI can merge and filter
results from front matter, asset and body checks uniformly.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

SEVERITIES = ("error", "warning", "info")


@dataclass
class MarkdownIssue:
    """Represents a validation issue in a markdown post."""

    file_path: Path
    line_number: Optional[int]
    severity: str  # error, warning, info
    category: str  # frontmatter, asset, fence, link, content, structure
    message: str
    suggestion: Optional[str] = None


@dataclass
class MarkdownValidationReport:
    """Complete validation report for a set of posts."""

    files_checked: int = 0
    files_with_errors: int = 0
    files_with_warnings: int = 0
    total_errors: int = 0
    total_warnings: int = 0
    issues: List[MarkdownIssue] = field(default_factory=list)

    def add_issue(self, issue: MarkdownIssue) -> None:
        """Add an issue to the report."""
        self.issues.append(issue)
        if issue.severity == "error":
            self.total_errors += 1
        elif issue.severity == "warning":
            self.total_warnings += 1

    def add_issues(self, issues: List[MarkdownIssue]) -> None:
        for issue in issues:
            self.add_issue(issue)

    def only(self, *categories: str) -> MarkdownValidationReport:
        """
        Return a copy restricted to the given issue categories.

        Totals and per-file counts are recomputed from the kept issues;
        ``files_checked`` is carried over unchanged.
        """
        filtered = MarkdownValidationReport(files_checked=self.files_checked)
        kept = [i for i in self.issues if i.category in categories]
        filtered.add_issues(kept)
        filtered.files_with_errors = len(
            {i.file_path for i in kept if i.severity == "error"}
        )
        filtered.files_with_warnings = len(
            {i.file_path for i in kept if i.severity == "warning"}
        )
        return filtered

    @property
    def has_errors(self) -> bool:
        """Check if any errors were found."""
        return self.total_errors > 0

    @property
    def has_warnings(self) -> bool:
        """Check if any warnings were found."""
        return self.total_warnings > 0

    @property
    def is_healthy(self) -> bool:
        """Check if all files are healthy (no errors)."""
        return not self.has_errors


def format_markdown_report(report: MarkdownValidationReport, title: str = "POST VALIDATION REPORT") -> str:
    """
    Format a validation report as readable text.

    Args:
        report: Validation report to format
        title: Heading for the report

    Returns:
        Formatted report string
    """
    lines = []
    lines.append("\n" + "=" * 60)
    lines.append(title)
    lines.append("=" * 60)
    lines.append("")

    clean_files = max(
        report.files_checked - report.files_with_errors - report.files_with_warnings, 0
    )
    lines.append(f"Files Checked: {report.files_checked}")
    lines.append(f"✅ Clean Files: {clean_files}")
    lines.append(f"⚠️  Files with Warnings: {report.files_with_warnings}")
    lines.append(f"❌ Files with Errors: {report.files_with_errors}")
    lines.append("")
    lines.append(f"Total Warnings: {report.total_warnings}")
    lines.append(f"Total Errors: {report.total_errors}")
    lines.append("")

    if report.is_healthy:
        lines.append("✅ ALL FILES VALID")
    else:
        lines.append("❌ VALIDATION FAILED")
    lines.append("")

    if report.issues:
        issues_by_file: Dict[Path, List[MarkdownIssue]] = {}
        for issue in report.issues:
            issues_by_file.setdefault(issue.file_path, []).append(issue)

        lines.append("ISSUES BY FILE:")
        lines.append("")

        for file_path in sorted(issues_by_file.keys()):
            file_issues = issues_by_file[file_path]
            errors = [i for i in file_issues if i.severity == "error"]

            icon = "❌" if errors else "⚠️"
            lines.append(f"{icon} {file_path.name}")

            for issue in file_issues:
                severity_icon = {"error": "❌", "warning": "⚠️"}.get(issue.severity, "ℹ️")
                line_info = f":{issue.line_number}" if issue.line_number else ""
                lines.append(f"   {severity_icon} [{issue.category}]{line_info} {issue.message}")
                if issue.suggestion:
                    lines.append(f"      💡 {issue.suggestion}")

            lines.append("")

    lines.append("=" * 60)

    return "\n".join(lines)
