"""Tests for the local FileSystem."""

import os
import stat
from datetime import datetime

import pytest

from jotter.core.fs import FileSystem


@pytest.fixture
def fs():
    return FileSystem()


def test_write_and_read(fs, tmp_path):
    path = tmp_path / "note.md"
    fs.write_file(path, "héllo\n")
    assert fs.read_file(path) == "héllo\n"


def test_write_overwrites(fs, tmp_path):
    path = tmp_path / "note.md"
    fs.write_file(path, "one")
    fs.write_file(path, "two")
    assert path.read_text(encoding="utf-8") == "two"


def test_write_leaves_no_temp_files(fs, tmp_path):
    fs.write_file(tmp_path / "note.md", "text")
    assert [p.name for p in tmp_path.iterdir()] == ["note.md"]


def test_write_into_missing_directory_fails(fs, tmp_path):
    with pytest.raises(FileNotFoundError):
        fs.write_file(tmp_path / "missing" / "note.md", "text")


def test_read_missing_raises(fs, tmp_path):
    with pytest.raises(FileNotFoundError):
        fs.read_file(tmp_path / "nope.md")


def test_delete(fs, tmp_path):
    path = tmp_path / "note.md"
    path.write_text("x")
    fs.delete_file(path)
    assert not path.exists()


def test_delete_missing_raises(fs, tmp_path):
    with pytest.raises(FileNotFoundError):
        fs.delete_file(tmp_path / "nope.md")


def test_ensure_directory_is_idempotent(fs, tmp_path):
    target = tmp_path / "_posts"
    fs.ensure_directory(target)
    fs.ensure_directory(target)
    assert target.is_dir()


def test_list_files_sorted_and_filtered(fs, tmp_path):
    (tmp_path / "b.md").write_text("")
    (tmp_path / "a.md").write_text("")
    (tmp_path / "c.txt").write_text("")
    (tmp_path / "sub.md").mkdir()
    assert [p.name for p in fs.list_files(tmp_path)] == ["a.md", "b.md"]


def test_list_files_missing_directory(fs, tmp_path):
    assert fs.list_files(tmp_path / "missing") == []


def test_now_returns_datetime(fs):
    assert isinstance(fs.now(), datetime)


@pytest.fixture
def umask_022():
    old = os.umask(0o022)
    yield
    os.umask(old)


def _mode(path):
    return stat.S_IMODE(path.stat().st_mode)


def test_new_file_follows_umask(fs, tmp_path, umask_022):
    path = tmp_path / "note.md"
    fs.write_file(path, "text")
    assert _mode(path) == 0o644


def test_overwrite_keeps_existing_mode(fs, tmp_path, umask_022):
    path = tmp_path / "note.md"
    path.write_text("old")
    path.chmod(0o640)
    fs.write_file(path, "new")
    assert _mode(path) == 0o640


def test_like_copies_reference_mode(fs, tmp_path, umask_022):
    reference = tmp_path / "draft.md"
    reference.write_text("draft")
    reference.chmod(0o604)
    target = tmp_path / "post.md"
    fs.write_file(target, "post", like=reference)
    assert _mode(target) == 0o604
