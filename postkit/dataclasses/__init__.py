"""Post data structures."""
from .post import FrontMatter, Post

__all__ = ["FrontMatter", "Post"]
