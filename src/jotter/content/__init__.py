"""
Content management for Jekyll-style sites.

Provides tools for:
- Creating posts and drafts from a title
- Publishing drafts and unpublishing posts
- Rendering and rewriting front matter
- Listing existing content
"""

from jotter.content.frontmatter import MalformedContentError
from jotter.content.manager import ContentItem, ContentManager

__all__ = [
    "ContentManager",
    "ContentItem",
    "MalformedContentError",
]
