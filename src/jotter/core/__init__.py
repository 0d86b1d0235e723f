"""Core utilities for jotter."""

from jotter.core.config import SitePaths, find_site_root, get_paths, get_site_root
from jotter.core.fs import FileSystem
from jotter.core.naming import (
    ContentState,
    build_path,
    parse_date_from_post_filename,
    parse_slug_from_draft_filename,
    parse_slug_from_post_filename,
)
from jotter.core.slug import InvalidSlugError, require_slug, slugify

__all__ = [
    # Config
    "SitePaths",
    "find_site_root",
    "get_paths",
    "get_site_root",
    # Filesystem
    "FileSystem",
    # Naming
    "ContentState",
    "build_path",
    "parse_date_from_post_filename",
    "parse_slug_from_draft_filename",
    "parse_slug_from_post_filename",
    # Slugs
    "InvalidSlugError",
    "require_slug",
    "slugify",
]
