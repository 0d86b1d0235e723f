"""
Post and draft lifecycle.

ContentManager creates posts and drafts and moves items between the two
states. It works against an explicit site root and reaches the disk only
through a FileSystem.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path

from jotter.content import frontmatter
from jotter.content.frontmatter import MalformedContentError
from jotter.core.fs import FileSystem
from jotter.core.naming import (
    ContentState,
    build_path,
    parse_date_from_post_filename,
    parse_slug_from_draft_filename,
    parse_slug_from_post_filename,
    state_directory,
)
from jotter.core.slug import require_slug

logger = logging.getLogger(__name__)


@dataclass
class ContentItem:
    """A single post or draft on disk."""

    path: Path
    slug: str
    state: ContentState
    title: str
    date: date | None = None
    body: str = ""

    @property
    def is_draft(self) -> bool:
        return self.state is ContentState.DRAFT


class ContentManager:
    """Create, publish and unpublish content under one site root."""

    def __init__(self, base_dir: Path, fs: FileSystem | None = None):
        """Initialize manager.

        Args:
            base_dir: Site root containing ``_posts`` and ``_drafts``
            fs: Filesystem collaborator (local disk if not provided)
        """
        self.base_dir = Path(base_dir)
        self.fs = fs or FileSystem()

    # -- creation ---------------------------------------------------------

    def create_post(self, title: str, slug: str | None = None) -> Path:
        """Create a timestamped post and return its path."""
        now = self.fs.now()
        return self._create(title, slug, ContentState.POST, now)

    def create_draft(self, title: str, slug: str | None = None) -> Path:
        """Create an undated draft and return its path."""
        return self._create(title, slug, ContentState.DRAFT, None)

    def _create(
        self,
        title: str,
        slug: str | None,
        state: ContentState,
        now: datetime | None,
    ) -> Path:
        slug = require_slug(slug or title)
        path = build_path(self.base_dir, state, slug, now)
        self._refuse_existing(path)

        self.fs.ensure_directory(path.parent)
        self.fs.write_file(path, frontmatter.render(title, now))
        logger.debug("Created %s %s", state.value, path)
        return path

    # -- transitions ------------------------------------------------------

    def publish(self, draft_path: Path, keep_draft: bool = False) -> Path:
        """Turn a draft into a post dated now.

        Args:
            draft_path: Path of the draft file
            keep_draft: Leave the draft in place after publishing

        Returns:
            Path of the new post
        """
        draft_path = Path(draft_path)
        now = self.fs.now()
        slug = parse_slug_from_draft_filename(draft_path)
        target = build_path(self.base_dir, ContentState.POST, slug, now)

        content = frontmatter.rewrite(self.fs.read_file(draft_path), date=now)
        self._move(draft_path, target, content, keep_source=keep_draft)
        return target

    def unpublish(self, post_path: Path, keep_timestamp: bool = False) -> Path:
        """Turn a post back into a draft.

        Args:
            post_path: Path of the post file
            keep_timestamp: Keep the post's date line instead of clearing it

        Returns:
            Path of the new draft
        """
        post_path = Path(post_path)
        slug = parse_slug_from_post_filename(post_path)
        target = build_path(self.base_dir, ContentState.DRAFT, slug)

        date_value = frontmatter.KEEP if keep_timestamp else None
        content = frontmatter.rewrite(self.fs.read_file(post_path), date=date_value)
        self._move(post_path, target, content)
        return target

    def _move(
        self, source: Path, target: Path, content: str, keep_source: bool = False
    ) -> None:
        self._refuse_existing(target)
        self.fs.ensure_directory(target.parent)
        self.fs.write_file(target, content, like=source)
        if not keep_source:
            self.fs.delete_file(source)
        logger.debug("Moved %s -> %s", source, target)

    def _refuse_existing(self, path: Path) -> None:
        if self.fs.exists(path):
            raise FileExistsError(f"Content already exists: {path}")

    # -- listing ----------------------------------------------------------

    def list_posts(self) -> list[ContentItem]:
        return self._list(ContentState.POST)

    def list_drafts(self) -> list[ContentItem]:
        return self._list(ContentState.DRAFT)

    def _list(self, state: ContentState) -> list[ContentItem]:
        items = []
        for path in self.fs.list_files(state_directory(self.base_dir, state)):
            try:
                fm, body = frontmatter.parse(self.fs.read_file(path))
            except MalformedContentError:
                logger.warning("Skipping %s: no front matter", path)
                continue
            except UnicodeDecodeError:
                logger.warning("Skipping %s: not UTF-8", path)
                continue

            if state is ContentState.POST:
                slug = parse_slug_from_post_filename(path)
                item_date = parse_date_from_post_filename(path)
            else:
                slug = parse_slug_from_draft_filename(path)
                item_date = None

            items.append(
                ContentItem(
                    path=path,
                    slug=slug,
                    state=state,
                    title=fm.get("title", slug),
                    date=item_date,
                    body=body,
                )
            )
        return items
