"""Filename helpers (core domain)."""

from __future__ import annotations

import unicodedata

OUTPUT_EXTENSION = ".md"

_RESERVED_CHARS = frozenset('/\\:*?"<>|')


def _is_unsafe(char: str) -> bool:
    return char in _RESERVED_CHARS or unicodedata.category(char) == "Cc"


def sanitize_filename(name: str) -> str:
    """Return ``name`` with path-hostile characters replaced by hyphens.

    Reserved characters and control characters each become one "-", then
    surrounding whitespace is trimmed. No length limit is applied.
    """

    return "".join("-" if _is_unsafe(char) else char for char in name).strip()


def build_output_name(channel: str, partition: str) -> str:
    """Return ``<sanitized-channel>-<partition>.md``."""

    return f"{sanitize_filename(channel)}-{partition}{OUTPUT_EXTENSION}"
