#!/usr/bin/env python3
"""
listing.py
----------
Build the date-ordered post listing consumed by the site generator.

Posts are loaded from the posts directory, drafts are dropped unless
requested, and the result is sorted newest first (ties broken by title).
The listing can be written as a YAML data file, which site generators
pick up for index pages and feeds.

Usage:
    builder = ListingBuilder(posts_dir, logger=logger)
    posts = builder.collect()
    builder.write(posts, Path("data/posts.yaml"))
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import List, Optional

# --- Third-party imports ---
import yaml

# --- Local imports ---
from postkit.core.cli import ListingStats
from postkit.core.exceptions import ListingError, PostParseError, PostValidationError
from postkit.core.logging_manager import PostkitLogger, safe_logger
from postkit.dataclasses.post import Post
from postkit.utils.fs import find_markdown_files


def sort_posts(posts: List[Post]) -> List[Post]:
    """Sort posts newest first, then alphabetically by title."""
    by_title = sorted(posts, key=lambda p: p.title.lower())
    return sorted(by_title, key=lambda p: p.date, reverse=True)


class ListingBuilder:
    """Collects posts and produces the listing data file."""

    def __init__(
        self,
        posts_dir: Path,
        include_drafts: bool = False,
        logger: Optional[PostkitLogger] = None,
    ) -> None:
        self.posts_dir = posts_dir
        self.include_drafts = include_drafts
        self.logger = logger
        self.stats = ListingStats()

    def collect(self) -> List[Post]:
        """
        Load every post in the posts directory.

        Files that fail to parse are logged and counted, not fatal.

        Returns:
            Posts sorted for display

        Raises:
            ListingError: If the posts directory does not exist
        """
        if not self.posts_dir.is_dir():
            raise ListingError(f"Posts directory not found: {self.posts_dir}")

        log = safe_logger(self.logger)
        posts: List[Post] = []

        for md_file in find_markdown_files(self.posts_dir):
            try:
                post = Post.from_file(md_file)
            except (PostParseError, PostValidationError) as e:
                self.stats.errors += 1
                log.log_error(e, {"file": str(md_file)})
                continue

            self.stats.files_processed += 1
            if post.front_matter.draft and not self.include_drafts:
                self.stats.drafts_skipped += 1
                log.log_debug("Skipping draft", {"file": str(md_file)})
                continue

            posts.append(post)

        self.stats.posts_listed = len(posts)
        log.log_operation("collect_posts", self.stats.to_dict())
        return sort_posts(posts)

    def to_data(self, posts: List[Post]) -> dict:
        """Listing as a plain mapping, paths relative to the posts directory."""
        return {"posts": [post.to_listing_dict(self.posts_dir) for post in posts]}

    def write(self, posts: List[Post], output_path: Path) -> Path:
        """
        Write the listing as YAML.

        Args:
            posts: Posts in display order
            output_path: Destination file

        Returns:
            The written path

        Raises:
            ListingError: If the file cannot be written
        """
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with output_path.open("w", encoding="utf-8") as f:
                yaml.safe_dump(
                    self.to_data(posts),
                    f,
                    allow_unicode=True,
                    sort_keys=False,
                    default_flow_style=False,
                )
        except OSError as e:
            raise ListingError(f"Cannot write listing to {output_path}: {e}") from e

        safe_logger(self.logger).log_operation(
            "write_listing", {"output": str(output_path), "posts": len(posts)}
        )
        return output_path
