"""
Content file naming.

Posts live in ``_posts/YYYY-MM-DD-<slug>.md``, drafts in
``_drafts/<slug>.md``. This module builds those paths and reads slugs and
dates back out of them.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from enum import Enum
from pathlib import Path

EXTENSION = ".md"
DATE_FORMAT = "%Y-%m-%d"
DATE_PREFIX_PATTERN = re.compile(r"^(\d{4}-\d{2}-\d{2})-")


class ContentState(str, Enum):
    """Lifecycle state of a content item."""

    POST = "post"
    DRAFT = "draft"

    @property
    def directory(self) -> str:
        return "_posts" if self is ContentState.POST else "_drafts"


def state_directory(base_dir: Path, state: ContentState) -> Path:
    """Directory holding items in *state* under *base_dir*."""
    return Path(base_dir) / state.directory


def build_path(
    base_dir: Path,
    state: ContentState,
    slug: str,
    when: date | datetime | None = None,
) -> Path:
    """Build the path of a content file.

    Args:
        base_dir: Site root containing ``_posts`` and ``_drafts``
        state: Target state
        slug: Already-slugified identifier
        when: Publication date, required for posts and ignored for drafts

    Returns:
        Path of the content file
    """
    directory = state_directory(base_dir, state)
    if state is ContentState.DRAFT:
        return directory / f"{slug}{EXTENSION}"

    if when is None:
        raise ValueError("Posts need a date to build their filename")
    return directory / f"{when.strftime(DATE_FORMAT)}-{slug}{EXTENSION}"


def _stem(name: str | Path) -> str:
    filename = Path(name).name
    if filename.endswith(EXTENSION):
        filename = filename[: -len(EXTENSION)]
    return filename


def parse_slug_from_post_filename(name: str | Path) -> str:
    """``_posts/2024-01-15-my_post.md`` -> ``my_post``."""
    return DATE_PREFIX_PATTERN.sub("", _stem(name), count=1)


def parse_slug_from_draft_filename(name: str | Path) -> str:
    """``_drafts/my_post.md`` -> ``my_post``."""
    return _stem(name)


def parse_date_from_post_filename(name: str | Path) -> date | None:
    """Return the date encoded in a post filename, if there is one."""
    match = DATE_PREFIX_PATTERN.match(_stem(name))
    if not match:
        return None
    try:
        return datetime.strptime(match.group(1), DATE_FORMAT).date()
    except ValueError:
        return None
