"""Record grouping (core domain).

Grouping is a stable partition of the input: records keep the order the
source delivered them in. The SQLite source already sorts by timestamp, so
re-sorting is only needed for sources without that guarantee and is opt-in.
"""

from __future__ import annotations

from datetime import tzinfo
from typing import Dict, Iterable, List, Optional

from core.models import GroupKey, NormalizedRecord, Record
from core.timestamps import normalize_timestamp


def normalize_records(records: Iterable[Record], tz: Optional[tzinfo] = None) -> List[NormalizedRecord]:
    """Pair each record with its normalized timestamp, keeping input order."""

    return [NormalizedRecord(record=record, timestamp=normalize_timestamp(record.timestamp, tz)) for record in records]


def sort_by_instant(entries: List[NormalizedRecord]) -> List[NormalizedRecord]:
    """Stable sort by parsed instant; unparsed entries follow in input order."""

    parsed = [entry for entry in entries if entry.timestamp.instant is not None]
    unparsed = [entry for entry in entries if entry.timestamp.instant is None]
    parsed.sort(key=lambda entry: entry.timestamp.instant)
    return parsed + unparsed


def group_records(
    records: Iterable[Record],
    tz: Optional[tzinfo] = None,
    sort_within_groups: bool = False,
) -> Dict[GroupKey, List[NormalizedRecord]]:
    """Partition records by (channel, partition key).

    The returned dict iterates in ascending channel, then partition order.
    """

    groups: Dict[GroupKey, List[NormalizedRecord]] = {}
    for entry in normalize_records(records, tz):
        key = GroupKey(channel=entry.record.channel_name, partition=entry.timestamp.partition)
        groups.setdefault(key, []).append(entry)

    ordered: Dict[GroupKey, List[NormalizedRecord]] = {}
    for key in sorted(groups):
        entries = groups[key]
        ordered[key] = sort_by_instant(entries) if sort_within_groups else entries
    return ordered


def group_by_channel(
    records: Iterable[Record],
    tz: Optional[tzinfo] = None,
    sort_within_groups: bool = False,
) -> Dict[str, List[NormalizedRecord]]:
    """Partition records by channel only, sorted by channel name."""

    groups: Dict[str, List[NormalizedRecord]] = {}
    for entry in normalize_records(records, tz):
        groups.setdefault(entry.record.channel_name, []).append(entry)

    ordered: Dict[str, List[NormalizedRecord]] = {}
    for channel in sorted(groups):
        entries = groups[channel]
        ordered[channel] = sort_by_instant(entries) if sort_within_groups else entries
    return ordered
