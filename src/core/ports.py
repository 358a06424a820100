"""Ports (interfaces) used by the core pipeline.

Ports define the minimal contracts for the record source and the document
sink so that the core can be reused with different backends.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Protocol

from core.models import Document, Record


class RecordSource(Protocol):
    """Produces the full record set, ordered by timestamp ascending."""

    def fetch_all_records(self) -> List[Record]:
        ...


class DocumentSink(Protocol):
    """Persists one rendered document under a file name."""

    def write(self, name: str, document: Document) -> Path:
        ...
