from __future__ import annotations

from datetime import timezone

from core.grouping import group_by_channel, normalize_records
from core.models import Record
from core.rendering import NO_CONTENT, render_archive, render_group


def _entries(*records: Record):
    return normalize_records(records, tz=timezone.utc)


def test_render_group_layout() -> None:
    entries = _entries(
        Record("general", "alice", "2025-12-16 10:30:00", "  hello\nworld  "),
        Record("general", "bob", "2025-12-16 11:00:00", "   "),
    )

    document = render_group("general", entries, "2025-12")

    assert document.message_count == 2
    assert document.text == (
        "# #general (2025-12)\n\n"
        "**Total messages:** 2\n\n"
        "---\n\n"
        "**alice** *2025-12-16 10:30:00 UTC*\n\n"
        "hello\nworld\n\n"
        "---\n\n"
        "**bob** *2025-12-16 11:00:00 UTC*\n\n"
        f"{NO_CONTENT}\n\n"
        "---\n"
    )


def test_render_group_shows_unparsed_timestamp_verbatim() -> None:
    document = render_group("general", _entries(Record("general", "alice", "yesterday", "hi")))
    assert document.title == "# #general"
    assert "**alice** *yesterday*" in document.blocks


def test_render_empty_group_is_empty_document() -> None:
    document = render_group("general", [], "2025-12")
    assert document.is_empty
    assert document.text == ""


def test_render_archive_groups_channels() -> None:
    records = [
        Record("random", "bob", "2025-12-16 11:00:00", "yo"),
        Record("general", "alice", "2025-12-16 10:30:00", "hello"),
    ]
    document = render_archive(group_by_channel(records, tz=timezone.utc))

    text = document.text
    assert text.startswith("# Discord Messages\n\n**Total messages:** 2\n\n---\n\n")
    assert text.index("## #general") < text.index("## #random")
    assert "*1 messages in this channel*" in text
    assert document.message_count == 2


def test_render_archive_placeholder_for_no_records() -> None:
    document = render_archive({})
    assert not document.is_empty
    assert document.text == "# Discord Messages\n\nNo messages found.\n"
