"""Shared test fixtures for jotter package."""

from datetime import datetime

import pytest

from jotter.content.manager import ContentManager
from jotter.core.fs import FileSystem

FROZEN_NOW = datetime(2024, 3, 9, 14, 5)


class FrozenFileSystem(FileSystem):
    """Local filesystem with a fixed clock."""

    def __init__(self, now: datetime = FROZEN_NOW):
        self._now = now

    def now(self) -> datetime:
        return self._now


@pytest.fixture
def frozen_fs():
    return FrozenFileSystem()


@pytest.fixture
def manager(tmp_path, frozen_fs):
    """A ContentManager rooted at a temporary directory."""
    return ContentManager(tmp_path, fs=frozen_fs)


@pytest.fixture
def mock_site_root(tmp_path, monkeypatch):
    """Point site root resolution at a temporary site."""
    (tmp_path / "_config.yml").write_text("title: Test site\n", encoding="utf-8")
    monkeypatch.setenv("JOTTER_SITE_ROOT", str(tmp_path))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    return tmp_path


@pytest.fixture
def create_content_file(tmp_path):
    """Factory fixture for writing content files by hand."""
    def _create(
        relpath: str = "_drafts/test_draft.md",
        title: str = "Test Draft",
        date: str = "",
        body: str = "",
    ):
        path = tmp_path / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        date_line = f"date: {date}" if date else "date:"
        path.write_text(f"---\ntitle: {title}\n{date_line}\n---\n{body}", encoding="utf-8")
        return path

    return _create
