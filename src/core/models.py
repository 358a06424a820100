"""Core domain models.

These dataclasses are shared across the core and adapters to avoid tight
coupling to SQLite rows or any other source-specific types.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

UNKNOWN_PARTITION = "unknown"


@dataclass(frozen=True)
class Record:
    """One extracted message as handed over by a record source."""

    channel_name: str
    username: str
    timestamp: str
    content: str


@dataclass(frozen=True)
class NormalizedTimestamp:
    """Display form and month bucket derived from a raw timestamp."""

    display: str
    partition: str
    instant: Optional[datetime] = None

    @property
    def parsed(self) -> bool:
        return self.instant is not None


@dataclass(frozen=True)
class NormalizedRecord:
    """A record paired with its normalized timestamp."""

    record: Record
    timestamp: NormalizedTimestamp


@dataclass(frozen=True, order=True)
class GroupKey:
    """Output bucket: one channel within one partition."""

    channel: str
    partition: str


@dataclass(frozen=True)
class Document:
    """Rendered text for one output file."""

    title: str = ""
    blocks: Tuple[str, ...] = ()
    message_count: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.blocks

    @property
    def text(self) -> str:
        if self.is_empty:
            return ""
        return "\n\n".join(self.blocks) + "\n"
