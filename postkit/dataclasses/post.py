#!/usr/bin/env python3
"""
post.py
-------------------
Dataclasses representing a blog post with YAML front matter.

A post is the content document a static-site generator consumes:
- A front matter block (title, date, thumbnail and a few optional keys)
- A Markdown body rendered by the generator

The Post class provides:
- Front matter parsing with type normalization
- A plain-dict view used to build the post listing

Unknown front matter keys are preserved in ``FrontMatter.extra`` so
the listing never drops data a generator theme might use.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import logging
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Optional

# --- Third-party imports ---
import yaml

# --- Local imports ---
from postkit.core.exceptions import (
    PostParseError,
    PostValidationError,
    ValidationError,
)
from postkit.core.validators import DataValidator
from postkit.utils import md

logger = logging.getLogger(__name__)


@dataclass
class FrontMatter:
    """
    Normalized front matter of a post.

    Attributes:
        title: Human-readable title (non-empty)
        date: Publication date, used for sort and display order
        thumbnail: Asset path relative to the asset root, if any
        description: Optional summary for listing pages
        author: Optional author name
        tags: Optional tag list
        draft: Drafts are left out of listings by default
        extra: Any other keys, kept verbatim
    """

    title: str
    date: date
    thumbnail: Optional[str] = None
    description: Optional[str] = None
    author: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    draft: bool = False
    extra: Dict[str, Any] = field(default_factory=dict)

    KNOWN_FIELDS = ("title", "date", "thumbnail", "description", "author", "tags", "draft")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> FrontMatter:
        """
        Build front matter from a parsed YAML mapping.

        Args:
            data: Mapping returned by yaml.safe_load

        Returns:
            Normalized FrontMatter

        Raises:
            PostValidationError: If title or date is missing or invalid
        """
        try:
            DataValidator.validate_required_fields(data, ["title", "date"])
        except ValidationError as e:
            raise PostValidationError(str(e)) from e

        post_date = DataValidator.normalize_date(data["date"])
        if post_date is None:
            raise PostValidationError(f"Invalid date: '{data['date']}'")

        try:
            draft = DataValidator.normalize_bool(data.get("draft")) or False
            tags = DataValidator.normalize_str_list(data.get("tags"))
        except ValidationError as e:
            raise PostValidationError(str(e)) from e

        return cls(
            title=str(data["title"]).strip(),
            date=post_date,
            thumbnail=DataValidator.normalize_string(data.get("thumbnail")),
            description=DataValidator.normalize_string(data.get("description")),
            author=DataValidator.normalize_string(data.get("author")),
            tags=tags,
            draft=draft,
            extra={k: v for k, v in data.items() if k not in cls.KNOWN_FIELDS},
        )


@dataclass
class Post:
    """
    A Markdown post file.

    Attributes:
        path: Source file
        front_matter: Normalized metadata
        body: Markdown body (front matter removed)
        body_start: 1-indexed file line where the body begins
    """

    path: Path
    front_matter: FrontMatter
    body: str
    body_start: int = 1

    @property
    def slug(self) -> str:
        """URL slug, taken from the file name."""
        return self.path.stem

    @property
    def title(self) -> str:
        return self.front_matter.title

    @property
    def date(self) -> date:
        return self.front_matter.date

    @property
    def thumbnail(self) -> Optional[str]:
        return self.front_matter.thumbnail

    @classmethod
    def from_text(cls, content: str, path: Path) -> Post:
        """
        Parse a post from its raw text.

        Args:
            content: Full file content
            path: Path the content came from (used for the slug)

        Raises:
            PostParseError: Missing, unterminated or invalid front matter
            PostValidationError: Front matter breaks the content contract
        """
        frontmatter_text, body_lines, body_start = md.split_frontmatter(content)

        if not frontmatter_text.strip():
            raise PostParseError(f"No front matter found in {path.name}")

        try:
            data = yaml.safe_load(frontmatter_text)
        except yaml.YAMLError as e:
            raise PostParseError(f"Cannot parse YAML front matter in {path.name}: {e}") from e
        except ValueError as e:
            raise PostValidationError(f"Invalid date in {path.name}: {e}") from e

        if not isinstance(data, dict):
            raise PostParseError(
                f"Front matter in {path.name} must be a mapping, got {type(data).__name__}"
            )

        front_matter = FrontMatter.from_dict(data)
        logger.debug("Parsed post %s (%s)", path.name, front_matter.date.isoformat())

        return cls(
            path=path,
            front_matter=front_matter,
            body="\n".join(body_lines),
            body_start=body_start,
        )

    @classmethod
    def from_file(cls, file_path: Path) -> Post:
        """
        Read and parse a post file.

        Raises:
            PostParseError: Unreadable file or malformed front matter
            PostValidationError: Front matter breaks the content contract
        """
        try:
            content = file_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise PostParseError(f"File is not valid UTF-8: {file_path}") from e
        except OSError as e:
            raise PostParseError(f"Cannot read {file_path}: {e}") from e

        return cls.from_text(content, file_path)

    def to_listing_dict(self, root: Optional[Path] = None) -> Dict[str, Any]:
        """
        Plain-dict view for the listing data file.

        Args:
            root: Optional directory to make ``path`` relative to
        """
        path = self.path
        if root is not None:
            try:
                path = self.path.relative_to(root)
            except ValueError:
                pass

        entry: Dict[str, Any] = {
            "slug": self.slug,
            "title": self.title,
            "date": self.date.isoformat(),
            "thumbnail": self.thumbnail,
            "path": path.as_posix(),
        }
        if self.front_matter.description:
            entry["description"] = self.front_matter.description
        if self.front_matter.author:
            entry["author"] = self.front_matter.author
        if self.front_matter.tags:
            entry["tags"] = list(self.front_matter.tags)
        return entry
