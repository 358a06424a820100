"""Markdown rendering for grouped records.

Rendering is pure: it only builds Document values and never touches the
filesystem. The layout is fixed; there is no template engine.
"""

from __future__ import annotations

from typing import List, Mapping, Optional, Sequence

from core.models import Document, NormalizedRecord

ARCHIVE_TITLE = "# Discord Messages"
SEPARATOR = "---"
NO_CONTENT = "*[No content]*"
NO_MESSAGES = "No messages found."


def _message_blocks(entries: Sequence[NormalizedRecord]) -> List[str]:
    blocks: List[str] = []
    for entry in entries:
        blocks.append(f"**{entry.record.username}** *{entry.timestamp.display}*")
        body = entry.record.content.strip()
        blocks.append(body if body else NO_CONTENT)
        blocks.append(SEPARATOR)
    return blocks


def render_group(channel: str, entries: Sequence[NormalizedRecord], partition: Optional[str] = None) -> Document:
    """Render one (channel, partition) group.

    An empty group renders to an empty Document so callers can skip it.
    """

    if not entries:
        return Document()

    title = f"# #{channel}"
    if partition:
        title = f"{title} ({partition})"

    blocks = [
        title,
        f"**Total messages:** {len(entries)}",
        SEPARATOR,
        *_message_blocks(entries),
    ]
    return Document(title=title, blocks=tuple(blocks), message_count=len(entries))


def render_archive(channels: Mapping[str, Sequence[NormalizedRecord]]) -> Document:
    """Render every channel into one document (single-file layout).

    Unlike ``render_group`` this always yields content: an empty archive
    becomes a placeholder document.
    """

    total = sum(len(entries) for entries in channels.values())
    if total == 0:
        return Document(title=ARCHIVE_TITLE, blocks=(ARCHIVE_TITLE, NO_MESSAGES), message_count=0)

    blocks = [
        ARCHIVE_TITLE,
        f"**Total messages:** {total}",
        SEPARATOR,
    ]
    for channel, entries in channels.items():
        if not entries:
            continue
        blocks.append(f"## #{channel}")
        blocks.append(f"*{len(entries)} messages in this channel*")
        blocks.extend(_message_blocks(entries))
    return Document(title=ARCHIVE_TITLE, blocks=tuple(blocks), message_count=total)
