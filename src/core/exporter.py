"""Core export pipeline.

This module is storage-agnostic. It only relies on ports for reading records
and writing documents, so other sources or sinks can be plugged in without
changes here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from core.config import MODE_SINGLE, ExportConfig
from core.filenames import build_output_name
from core.grouping import group_by_channel, group_records
from core.models import Record
from core.ports import DocumentSink, RecordSource
from core.rendering import render_archive, render_group

LOGGER = logging.getLogger(__name__)


@dataclass
class ExportSummary:
    """What one export run produced."""

    records: int = 0
    paths: List[Path] = field(default_factory=list)

    @property
    def documents(self) -> int:
        return len(self.paths)


class ArchiveExporter:
    """Orchestrates fetch, grouping, rendering, and writing."""

    def __init__(self, source: RecordSource, sink: DocumentSink, config: ExportConfig) -> None:
        self._source = source
        self._sink = sink
        self._config = config

    def run(self) -> ExportSummary:
        """Run the export once.

        The source is queried exactly once. Fetch errors propagate before any
        file is written; the first write error aborts the run and leaves
        earlier files in place.
        """

        records = self._source.fetch_all_records()
        LOGGER.info("Fetched %s records", len(records))

        summary = ExportSummary(records=len(records))
        if self._config.mode == MODE_SINGLE:
            self._write_single(records, summary)
        else:
            self._write_monthly(records, summary)

        LOGGER.info("Export complete: records=%s, documents=%s", summary.records, summary.documents)
        return summary

    def _write_monthly(self, records: List[Record], summary: ExportSummary) -> None:
        groups = group_records(
            records,
            tz=self._config.tz,
            sort_within_groups=self._config.sort_within_groups,
        )
        for key, entries in groups.items():
            document = render_group(key.channel, entries, key.partition)
            if document.is_empty:
                LOGGER.debug("Skipping empty group %s/%s", key.channel, key.partition)
                continue
            path = self._sink.write(build_output_name(key.channel, key.partition), document)
            summary.paths.append(path)
            LOGGER.info("Wrote %s messages to %s", document.message_count, path)

    def _write_single(self, records: List[Record], summary: ExportSummary) -> None:
        channels = group_by_channel(
            records,
            tz=self._config.tz,
            sort_within_groups=self._config.sort_within_groups,
        )
        document = render_archive(channels)
        path = self._sink.write(self._config.single_file_name, document)
        summary.paths.append(path)
        LOGGER.info("Wrote %s messages to %s", document.message_count, path)
