"""Markdown file sink adapter.

Implements the core DocumentSink port by writing each document to its own
file inside one output directory.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from core.errors import ArchiveWriteError
from core.models import Document


def _default_file_mode() -> int:
    # mkstemp creates 0600 files; match what a plain open() would give.
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


class MarkdownDirectorySink:
    """Writes documents as UTF-8 files, overwriting existing ones."""

    def __init__(self, output_dir: str) -> None:
        self._output_dir = Path(output_dir)

    @property
    def output_dir(self) -> Path:
        return self._output_dir

    def _ensure_dir(self) -> None:
        try:
            self._output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ArchiveWriteError(str(self._output_dir), exc.strerror or str(exc)) from exc

    def write(self, name: str, document: Document) -> Path:
        """Persist ``document`` as ``<output_dir>/<name>`` and return the path.

        The text goes to a temporary sibling first and is then moved into
        place, so a reader never sees a half-written file.
        """

        self._ensure_dir()
        target = self._output_dir / name
        tmp_path = None
        try:
            fd, tmp_path = tempfile.mkstemp(prefix=".archivist-", suffix=".tmp", dir=self._output_dir)
            with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as handle:
                handle.write(document.text)
            os.chmod(tmp_path, _default_file_mode())
            os.replace(tmp_path, target)
        except OSError as exc:
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise ArchiveWriteError(str(target), exc.strerror or str(exc)) from exc
        return target
