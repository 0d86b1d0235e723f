"""
Front matter rendering and rewriting.

Content files start with a fenced block::

    ---
    title: Some Title
    date: 2024-01-15 09:30
    ---

Rewrites are targeted line substitutions inside the fence, so the title,
any extra keys, and the body keep their exact formatting.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime

logger = logging.getLogger(__name__)

FENCE = "---"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"

# Opening fence, front matter lines, closing fence (up to end of its line)
FRONT_MATTER_PATTERN = re.compile(r"\A---[ \t]*\r?\n((?:.*\n)*?)---[ \t]*(?:\r?\n|\Z)")
DATE_LINE_PATTERN = re.compile(r"^date:[^\r\n]*", re.MULTILINE)
TITLE_LINE_PATTERN = re.compile(r"^title:[^\r\n]*", re.MULTILINE)

# Marker for "leave the date line alone"; None means "clear it"
KEEP = object()


class MalformedContentError(ValueError):
    """Raised when a content file has no recognizable front matter fence."""


def format_date_line(date: datetime | None) -> str:
    if date is None:
        return "date:"
    return f"date: {date.strftime(TIMESTAMP_FORMAT)}"


def render(title: str, date: datetime | None = None) -> str:
    """Render the front matter block for a new content item.

    Args:
        title: Title, inserted verbatim
        date: Timestamp for posts, None for drafts

    Returns:
        The fenced block, ending with a newline
    """
    return f"{FENCE}\ntitle: {title}\n{format_date_line(date)}\n{FENCE}\n"


def _split(content: str) -> re.Match:
    match = FRONT_MATTER_PATTERN.match(content)
    if not match:
        raise MalformedContentError("No front matter fence found")
    return match


def rewrite(content: str, title: str | None = None, date=KEEP) -> str:
    """Rewrite the title and/or date of existing content.

    Args:
        content: Full file text
        title: New title, or None to keep the current one
        date: New timestamp, None to clear the date, or KEEP to leave it

    Returns:
        The full reconstructed text

    Raises:
        MalformedContentError: If *content* does not start with front matter
    """
    match = _split(content)
    block = match.group(1)
    newline = "\r\n" if "\r\n" in match.group(0) else "\n"

    if title is not None:
        title_line = f"title: {title}"
        if TITLE_LINE_PATTERN.search(block):
            block = TITLE_LINE_PATTERN.sub(lambda _: title_line, block, count=1)
        else:
            block = f"{title_line}{newline}{block}"

    if date is not KEEP:
        date_line = format_date_line(date)
        if DATE_LINE_PATTERN.search(block):
            block = DATE_LINE_PATTERN.sub(lambda _: date_line, block, count=1)
        else:
            logger.debug("No date line in front matter, appending one")
            block = f"{block}{date_line}{newline}"

    start, end = match.span(1)
    return content[:start] + block + content[end:]


def parse(content: str) -> tuple[dict[str, str], str]:
    """Read front matter as flat ``key: value`` pairs.

    Values are kept as raw strings; titles like ``Testing {}`` are not
    valid YAML in every position, so no YAML parsing happens here.

    Returns:
        Tuple of (front matter, body)

    Raises:
        MalformedContentError: If *content* does not start with front matter
    """
    match = _split(content)
    front_matter: dict[str, str] = {}
    for line in match.group(1).splitlines():
        key, sep, value = line.partition(":")
        if sep and key.strip():
            front_matter[key.strip()] = value.strip()
    return front_matter, content[match.end():]
