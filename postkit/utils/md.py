#!/usr/bin/env python3
"""
md.py
-------------------
Markdown-specific utilities for postkit.

Provides functions for working with Markdown posts that carry YAML
front matter:
- Front matter extraction and splitting (with body line offsets)
- Field line lookup for precise issue reporting
- markdown-it-py parsing, fenced block discovery and link extraction

This module handles Markdown structure but delegates type conversion
and validation to DataValidator.
"""
from __future__ import annotations

# --- Standard library imports ---
import re
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

# --- Third-party imports ---
from markdown_it import MarkdownIt
from markdown_it.token import Token

# --- Local imports ---
from postkit.core.exceptions import FrontmatterError

FRONTMATTER_DELIMITER = "---"


# ----- YAML Front Matter Parsing -----
def split_frontmatter(content: str) -> Tuple[str, List[str], int]:
    """
    Split markdown content into YAML front matter and body.

    Expected format:
        ---
        title: Some title
        ---

        Body content here...

    Args:
        content: Full markdown file content

    Returns:
        Tuple of (frontmatter_text, body_lines, body_start)
        - frontmatter_text: YAML content as string (empty if no front matter)
        - body_lines: List of body content lines, leading blank lines removed
        - body_start: 1-indexed file line of the first body line

    Raises:
        FrontmatterError: If the opening delimiter is never closed

    Examples:
        >>> fm, body, start = split_frontmatter("---\\ntitle: Hi\\n---\\n\\nBody text")
        >>> fm
        'title: Hi'
        >>> body, start
        (['Body text'], 5)
    """
    lines = content.lstrip("\ufeff").splitlines()

    if not lines or lines[0].strip() != FRONTMATTER_DELIMITER:
        return "", lines, 1

    frontmatter_end = None
    for i, line in enumerate(lines[1:], 1):
        if line.strip() == FRONTMATTER_DELIMITER:
            frontmatter_end = i
            break

    if frontmatter_end is None:
        raise FrontmatterError(
            "Front matter opened with '---' but never closed", line_number=1
        )

    frontmatter_lines = lines[1:frontmatter_end]
    body_index = frontmatter_end + 1

    while body_index < len(lines) and lines[body_index].strip() == "":
        body_index += 1

    return "\n".join(frontmatter_lines), lines[body_index:], body_index + 1


def find_field_line_number(frontmatter_text: str, field_name: str) -> int:
    """
    Find the file line where a top-level field appears in the front matter.

    Args:
        frontmatter_text: The YAML front matter text
        field_name: The field name to search for

    Returns:
        1-indexed line number in the original file (the opening ``---``
        is line 1), or 1 if the field is not found
    """
    pattern = re.compile(rf"^{re.escape(field_name)}\s*:")
    for i, line in enumerate(frontmatter_text.split("\n"), start=1):
        if pattern.match(line):
            return i + 1
    return 1


# ----- Markdown Parsing -----
@dataclass
class FencedBlock:
    """A fenced code block found in a markdown body."""

    start_line: int  # 0-indexed line of the opening fence
    end_line: int  # 0-indexed line after the block
    markup: str  # fence characters, e.g. ``` or ~~~~
    info: str  # info string (language), may be empty
    closed: bool


def create_parser() -> MarkdownIt:
    """Return a CommonMark markdown-it parser, the renderer posts target."""
    return MarkdownIt("commonmark")


def parse_markdown(text: str, parser: Optional[MarkdownIt] = None) -> List[Token]:
    """
    Parse markdown text into a flat block-level token stream.

    Args:
        text: Markdown body text
        parser: Optional preconfigured parser

    Returns:
        markdown-it tokens (inline tokens carry their children)
    """
    return (parser or create_parser()).parse(text)


def _is_closing_fence(line: str, markup: str) -> bool:
    """Check whether ``line`` closes a fence opened with ``markup``."""
    # Fences may sit inside blockquotes or list items
    stripped = re.sub(r"^[\s>]*", "", line).rstrip()
    if len(stripped) < len(markup):
        return False
    return stripped == markup[0] * len(stripped)


def find_fenced_blocks(tokens: List[Token], lines: List[str]) -> List[FencedBlock]:
    """
    Locate fenced code blocks and whether each one is closed.

    markdown-it silently runs an unclosed fence to the end of its
    container, so a block counts as closed only when its last mapped line
    is a matching closing fence.

    Args:
        tokens: Tokens from parse_markdown()
        lines: The same text split into lines

    Returns:
        Fenced blocks in document order
    """
    blocks = []
    for token in tokens:
        if token.type != "fence" or not token.map:
            continue
        start, end = token.map
        closed = end - start >= 2 and end - 1 < len(lines) and _is_closing_fence(
            lines[end - 1], token.markup
        )
        blocks.append(
            FencedBlock(
                start_line=start,
                end_line=end,
                markup=token.markup,
                info=token.info.strip(),
                closed=closed,
            )
        )
    return blocks


def iter_links(tokens: List[Token]) -> Iterator[Tuple[str, str, str, Optional[int]]]:
    """
    Yield every link and image target in the token stream.

    Links inside code spans and code blocks are never yielded because
    markdown-it does not tokenize them as links.

    Yields:
        Tuples of (kind, target, text, line) where kind is 'link' or
        'image' and line is the 0-indexed line of the containing block
    """
    for token in tokens:
        if token.type != "inline" or not token.children:
            continue
        line = token.map[0] if token.map else None
        children = token.children
        for idx, child in enumerate(children):
            if child.type == "link_open":
                href = child.attrGet("href") or ""
                text = ""
                if idx + 1 < len(children) and children[idx + 1].type == "text":
                    text = children[idx + 1].content
                yield "link", str(href), text, line
            elif child.type == "image":
                src = child.attrGet("src") or ""
                yield "image", str(src), child.content, line


def iter_prose(tokens: List[Token]) -> Iterator[Tuple[str, Optional[int]]]:
    """
    Yield plain prose text with its 0-indexed block line.

    Code spans, fenced blocks and indented code are excluded.
    """
    for token in tokens:
        if token.type != "inline" or not token.children:
            continue
        line = token.map[0] if token.map else None
        for child in token.children:
            if child.type == "text":
                yield child.content, line
