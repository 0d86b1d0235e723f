"""
Configuration and path management.

Finds the root of the Jekyll site that holds ``_posts`` and ``_drafts``.

Resolution order for site root:
  1. JOTTER_SITE_ROOT environment variable (highest priority)
  2. Walk up from cwd looking for _config.yml, _posts/ or _drafts/
  3. Global config file (~/.config/jotter/config.yaml) site_root key
  4. The current working directory
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import yaml

from jotter.core.naming import ContentState

logger = logging.getLogger(__name__)

SITE_MARKERS = ("_config.yml", "_posts", "_drafts")


@dataclass(frozen=True)
class SitePaths:
    """Standard paths for a Jekyll site."""

    root: Path
    posts: Path
    drafts: Path
    config_file: Path


def get_global_config_path() -> Path:
    """Return the path to the global jotter config file.

    Respects XDG_CONFIG_HOME if set, otherwise defaults to
    ~/.config/jotter/config.yaml.
    """
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config_home:
        base = Path(xdg_config_home)
    else:
        base = Path.home() / ".config"
    return base / "jotter" / "config.yaml"


def load_global_config() -> dict:
    """Load the global jotter configuration.

    Returns:
        Parsed config dict, or empty dict if the file is missing or invalid.
    """
    config_path = get_global_config_path()
    if not config_path.is_file():
        return {}
    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError):
        logger.warning("Ignoring unreadable config file %s", config_path)
        return {}
    if isinstance(data, dict):
        return data
    return {}


def _walk_up_for_site(start_path: Path) -> Path | None:
    current = start_path.resolve()
    while True:
        if any((current / marker).exists() for marker in SITE_MARKERS):
            return current
        if current == current.parent:
            return None
        current = current.parent


def find_site_root(start_path: Path | None = None) -> Path:
    """Find the site root.

    Args:
        start_path: Starting point for the directory walk (defaults to cwd)

    Returns:
        Path to the site root

    Raises:
        FileNotFoundError: If JOTTER_SITE_ROOT or the global site_root
            names a directory that does not exist
    """
    env_root = os.environ.get("JOTTER_SITE_ROOT")
    if env_root:
        env_path = Path(env_root).expanduser().resolve()
        if not env_path.is_dir():
            raise FileNotFoundError(f"JOTTER_SITE_ROOT={env_root} is not a directory.")
        return env_path

    if start_path is None:
        start_path = Path.cwd()
    result = _walk_up_for_site(Path(start_path))
    if result is not None:
        return result

    site_root_str = load_global_config().get("site_root")
    if site_root_str:
        global_path = Path(site_root_str).expanduser().resolve()
        if not global_path.is_dir():
            raise FileNotFoundError(
                f"Global config site_root={site_root_str} is not a directory."
            )
        return global_path

    return Path(start_path).resolve()


def get_site_root() -> Path:
    return find_site_root()


def get_paths(site_root: Path | None = None) -> SitePaths:
    """Get all standard paths for the site.

    Args:
        site_root: Site root path (resolved from the environment if omitted)
    """
    if site_root is None:
        site_root = get_site_root()

    site_root = Path(site_root)
    return SitePaths(
        root=site_root,
        posts=site_root / ContentState.POST.directory,
        drafts=site_root / ContentState.DRAFT.directory,
        config_file=get_global_config_path(),
    )
