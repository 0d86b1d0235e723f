"""
Slug derivation.

Turns free-form titles into filename-safe identifiers: lowercase ASCII
letters, digits and single underscores.
"""

from __future__ import annotations

import re

# Non-ASCII letters are dropped rather than transliterated ("slüg" -> "slg").
# They go before lowercasing, which would turn some of them into ASCII.
_NON_ASCII = re.compile(r"[^\x00-\x7f\s]")
_WHITESPACE = re.compile(r"\s+")
_NON_WORD = re.compile(r"[^a-z0-9_]")
_UNDERSCORES = re.compile(r"_+")


class InvalidSlugError(ValueError):
    """Raised when a title or slug contains no usable characters."""


def slugify(text: str) -> str:
    """Convert *text* to an underscore-delimited slug.

    Drop non-ASCII characters, lowercase, turn whitespace runs into
    underscores, drop everything else that is not a word character, collapse
    repeated underscores and strip them from both ends. May return an empty
    string.
    """
    slug = _NON_ASCII.sub("", text).lower()
    slug = _WHITESPACE.sub("_", slug)
    slug = _NON_WORD.sub("", slug)
    slug = _UNDERSCORES.sub("_", slug)
    return slug.strip("_")


def require_slug(text: str) -> str:
    """Slugify *text*, refusing an empty result.

    Raises:
        InvalidSlugError: If nothing in *text* survives slugification
    """
    slug = slugify(text)
    if not slug:
        raise InvalidSlugError(f"Cannot derive a slug from {text!r}")
    return slug
