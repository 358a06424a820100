"""Archivist exception hierarchy.

Each boundary raises a specific error type so the CLI can report one clear
message per failed run.
"""

from __future__ import annotations


class ArchiveError(Exception):
    """Base exception for all archivist failures."""


class ArchiveConfigError(ArchiveError):
    """Raised for invalid runtime configuration."""


class ArchiveFetchError(ArchiveError):
    """Raised when the record source cannot produce the record set."""


class ArchiveWriteError(ArchiveError):
    """Raised when a document cannot be persisted.

    The offending path is kept on the exception so callers can report it.
    """

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Failed to write {path}: {reason}")
        self.path = path
        self.reason = reason
