#!/usr/bin/env python3
"""
fs.py
-------------------
Filesystem utilities for post discovery and asset resolution.

Functions:
    find_markdown_files: Discover markdown files by glob pattern
    is_remote_path: Check whether a reference points off-site
    resolve_asset_path: Map a front matter asset path onto the asset tree

Usage:
    from postkit.utils.fs import find_markdown_files, resolve_asset_path

    posts = find_markdown_files(Path("content/posts"))
    thumb = resolve_asset_path("images/cover.svg", Path("static"))
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import List

REMOTE_PREFIXES = ("http://", "https://", "//")


def find_markdown_files(directory: Path, pattern: str = "**/*.md") -> List[Path]:
    """Find all markdown files matching pattern, sorted for stable output."""
    if not directory.exists():
        return []
    return sorted(directory.glob(pattern))


def is_remote_path(reference: str) -> bool:
    """Check whether an asset or link reference is an absolute URL."""
    return reference.strip().lower().startswith(REMOTE_PREFIXES)


def resolve_asset_path(reference: str, assets_dir: Path) -> Path:
    """
    Resolve an asset reference against the asset root.

    A leading ``/`` means "from the asset root", matching how static-site
    generators serve the ``static/`` tree at the site root.

    Args:
        reference: Path as written in front matter or an image tag
        assets_dir: Root of the asset tree

    Returns:
        Resolved absolute path

    Raises:
        ValueError: If the reference escapes the asset root
    """
    root = assets_dir.resolve()
    relative = reference.strip().split("?", 1)[0].split("#", 1)[0].lstrip("/")
    target = (root / relative).resolve()
    if target != root and root not in target.parents:
        raise ValueError(f"Asset path escapes the asset root: {reference}")
    return target
