"""
Filesystem access for content operations.

ContentManager only touches the disk through a FileSystem, so tests can
swap in a fixed clock or a different backing store.
"""

from __future__ import annotations

import contextlib
import logging
import os
import stat
import tempfile
from datetime import datetime
from pathlib import Path

logger = logging.getLogger(__name__)


def _file_mode(reference: Path) -> int:
    """Permission bits for a written file.

    mkstemp always creates 0600, so copy *reference*'s bits when it exists
    and otherwise apply the umask the way open() would.
    """
    try:
        return stat.S_IMODE(os.stat(reference).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


class FileSystem:
    """Local filesystem plus a wall clock."""

    def read_file(self, path: Path) -> str:
        return Path(path).read_text(encoding="utf-8")

    def write_file(self, path: Path, text: str, like: Path | None = None) -> None:
        """Write *text* to *path* atomically.

        The content goes to a temp file in the same directory which then
        replaces the target, so a crash mid-write leaves no partial file.

        Args:
            path: Target file
            text: Full file content
            like: File whose permissions the target takes (defaults to the
                existing target, else the umask default for a new file)
        """
        path = Path(path)
        mode = _file_mode(like if like is not None else path)
        fd, tmp_path = tempfile.mkstemp(
            dir=path.parent, suffix=".tmp", prefix=".jotter_"
        )
        try:
            os.write(fd, text.encode("utf-8"))
            os.close(fd)
            fd = -1
            os.chmod(tmp_path, mode)
            os.replace(tmp_path, path)
        except Exception:
            if fd >= 0:
                os.close(fd)
            with contextlib.suppress(OSError):
                os.unlink(tmp_path)
            raise
        logger.debug("Wrote %s", path)

    def delete_file(self, path: Path) -> None:
        Path(path).unlink()
        logger.debug("Deleted %s", path)

    def ensure_directory(self, path: Path) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def list_files(self, directory: Path, pattern: str = "*.md") -> list[Path]:
        """Files in *directory* matching *pattern*, sorted by name."""
        directory = Path(directory)
        if not directory.is_dir():
            return []
        return sorted(p for p in directory.glob(pattern) if p.is_file())

    def now(self) -> datetime:
        return datetime.now()
