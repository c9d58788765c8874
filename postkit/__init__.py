"""
postkit
=======

Content toolkit for the GraphQL vs REST blog post.

The repository's deliverable is a Markdown post with YAML front matter
that an external static-site generator renders. This package checks
that the post honours the generator's content contract and produces
the date-ordered listing its index pages use.

Main Components:
    - core: Logging, exceptions, paths, value normalization
    - dataclasses: Post and FrontMatter
    - validators: Front matter, asset, fence and link checks
    - builders: Post listing

Primary Interfaces:
    - postkit.validators.cli: ``validate`` CLI
    - postkit.builders.cli: ``postlist`` CLI

Example Usage:
    >>> from postkit import Post, POSTS_DIR
    >>> post = Post.from_file(POSTS_DIR / "graphql-vs-rest.md")
    >>> post.title
    'GraphQL vs REST: What You Gain and What You Give Up'
"""

__version__ = "1.0.0"

from postkit.core.paths import ASSETS_DIR, LOG_DIR, POSTS_DIR
from postkit.dataclasses.post import FrontMatter, Post

__all__ = [
    "ASSETS_DIR",
    "FrontMatter",
    "LOG_DIR",
    "POSTS_DIR",
    "Post",
]
