"""
Utilities package for postkit.

- md: Front matter splitting and markdown-it parsing helpers
- fs: File discovery and asset path resolution

Import commonly-used utilities directly from this package:
    from postkit.utils import split_frontmatter, find_markdown_files
"""

from .md import (
    split_frontmatter,
    find_field_line_number,
    parse_markdown,
    find_fenced_blocks,
    iter_links,
)

from .fs import (
    find_markdown_files,
    is_remote_path,
    resolve_asset_path,
)

__all__ = [
    "split_frontmatter",
    "find_field_line_number",
    "parse_markdown",
    "find_fenced_blocks",
    "iter_links",
    "find_markdown_files",
    "is_remote_path",
    "resolve_asset_path",
]
