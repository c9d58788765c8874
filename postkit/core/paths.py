#!/usr/bin/env python3
"""
paths.py
-------------------
Path constants for the postkit project.

All paths are Path objects resolved relative to the project root and
serve as defaults for the CLI options, which can override each of them.

The project structure:
    ROOT/
    ├── postkit/        # Content toolkit (this package)
    ├── content/posts/  # Markdown posts with front matter
    ├── static/         # Asset tree (thumbnails, images)
    └── logs/           # Application logs
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import sys
from pathlib import Path


def _get_project_root() -> Path:
    """
    Determine project root directory.

    Assumes this file is at ROOT/postkit/core/paths.py.

    Returns:
        Path object for project root

    Raises:
        RuntimeError: If the computed root does not contain the package
    """
    current_file = Path(__file__).resolve()

    # paths.py -> core/ -> postkit/ -> ROOT/
    root = current_file.parent.parent.parent

    if not (root / "postkit").is_dir():
        raise RuntimeError(
            f"Cannot determine valid project root. "
            f"Expected {root / 'postkit'} to exist. "
            f"Current file: {current_file}"
        )

    return root


# ----- Project directory -----
ROOT: Path = _get_project_root()

# ---- Content ----
CONTENT_DIR = ROOT / "content"
POSTS_DIR = CONTENT_DIR / "posts"

# ---- Assets ----
ASSETS_DIR = ROOT / "static"

# ---- Generated data ----
DATA_DIR = ROOT / "data"
LISTING_PATH = DATA_DIR / "posts.yaml"

# ---- Logs ----
LOG_DIR = ROOT / "logs"


def _validate_critical_paths() -> None:
    """
    Warn about missing content directories.

    Does not fail, so the package stays importable from an installed
    location where the content tree is absent.
    """
    critical_paths = [
        (POSTS_DIR, "posts directory"),
        (ASSETS_DIR, "asset directory"),
    ]

    missing_paths = [
        f"{description} ({path})"
        for path, description in critical_paths
        if not path.exists()
    ]

    if missing_paths:
        print(
            "Warning: Content paths missing:\n  " + "\n  ".join(missing_paths),
            file=sys.stderr,
        )


_validate_critical_paths()
