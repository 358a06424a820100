from __future__ import annotations

from datetime import timezone

from core.grouping import group_by_channel, group_records
from core.models import GroupKey, Record


def _record(channel: str, timestamp: str, content: str = "hi", username: str = "alice") -> Record:
    return Record(channel_name=channel, username=username, timestamp=timestamp, content=content)


RECORDS = [
    _record("general", "2025-12-01 09:00:00", "first"),
    _record("random", "2025-11-20 12:00:00", "second"),
    _record("general", "2025-11-05 08:00:00", "third"),
    _record("general", "2025-12-02 10:00:00", "fourth"),
    _record("general", "", "fifth"),
]


def test_groups_match_distinct_keys_without_loss() -> None:
    groups = group_records(RECORDS, tz=timezone.utc)

    assert list(groups) == [
        GroupKey("general", "2025-11"),
        GroupKey("general", "2025-12"),
        GroupKey("general", "unknown"),
        GroupKey("random", "2025-11"),
    ]
    flattened = [entry.record for entries in groups.values() for entry in entries]
    assert len(flattened) == len(RECORDS)
    assert sorted(flattened, key=RECORDS.index) == RECORDS


def test_group_keeps_input_order() -> None:
    records = [
        _record("general", "2025-12-09 09:00:00", "late"),
        _record("general", "2025-12-01 09:00:00", "early"),
    ]
    groups = group_records(records, tz=timezone.utc)
    contents = [entry.record.content for entry in groups[GroupKey("general", "2025-12")]]
    assert contents == ["late", "early"]


def test_group_sort_within_groups_is_stable() -> None:
    records = [
        _record("general", "2025-12-09 09:00:00", "late"),
        _record("general", "2025-12-01 09:00:00", "early"),
        _record("general", "2025-12-01T09:00:00Z", "early-twin"),
    ]
    groups = group_records(records, tz=timezone.utc, sort_within_groups=True)
    contents = [entry.record.content for entry in groups[GroupKey("general", "2025-12")]]
    assert contents == ["early", "early-twin", "late"]


def test_group_by_channel_sorts_channels_only() -> None:
    groups = group_by_channel(RECORDS, tz=timezone.utc)

    assert list(groups) == ["general", "random"]
    assert [entry.record.content for entry in groups["general"]] == ["first", "third", "fourth", "fifth"]


def test_empty_input_has_no_groups() -> None:
    assert group_records([]) == {}
    assert group_by_channel([]) == {}
