"""
conftest.py
-----------
Shared pytest fixtures for postkit tests.

Provides fixtures for:
- Sample post content (valid, minimal, broken)
- A throwaway site tree with posts and assets
"""
import pytest
from pathlib import Path


# ----- Path Fixtures -----

@pytest.fixture
def project_root():
    """Repository root (holds content/ and static/)."""
    return Path(__file__).resolve().parent.parent


@pytest.fixture
def site_dir(tmp_path):
    """Create an empty site tree with posts and asset directories."""
    (tmp_path / "content" / "posts").mkdir(parents=True)
    (tmp_path / "static" / "images").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def posts_dir(site_dir):
    return site_dir / "content" / "posts"


@pytest.fixture
def assets_dir(site_dir):
    """Asset root containing a single thumbnail image."""
    assets = site_dir / "static"
    (assets / "images" / "cover.png").write_bytes(b"\x89PNG\r\n\x1a\n")
    return assets


# ----- Sample Markdown Content Fixtures -----

@pytest.fixture
def valid_post_content():
    """Post with every supported front matter field."""
    return """---
title: "REST in Practice"
date: 2024-01-15
thumbnail: images/cover.png
description: "Notes on resource design."
author: Sam Doe
tags:
  - rest
  - http
---

# REST in Practice

Resources live at URLs.

```http
GET /users/42 HTTP/1.1
```

Plain prose closes the post.
"""


@pytest.fixture
def minimal_post_content():
    """Post with only the required fields."""
    return """---
title: Minimal
date: 2024-02-01
---
Just a body.
"""


@pytest.fixture
def unclosed_fence_content():
    """Post whose second code block never closes."""
    return """---
title: Broken fences
date: 2024-03-01
thumbnail: images/cover.png
---

Intro paragraph.

```graphql
query { user(id: 1) { name } }
```

More prose.

```json
{"data": null}
"""


@pytest.fixture
def write_post(posts_dir):
    """Factory writing a post file into the posts directory."""
    def _write(name: str, content: str) -> Path:
        path = posts_dir / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write
