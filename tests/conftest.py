from __future__ import annotations

from pathlib import Path

import pytest

from db_helpers import build_export_db


@pytest.fixture
def export_db(tmp_path) -> Path:
    """Three messages over two channels and two months, inserted out of order."""

    return build_export_db(
        tmp_path / "export.db",
        channels=[(1, "general"), (2, "dev/ops")],
        users=[("u1", "alice"), ("u2", "bob")],
        messages=[
            (1, "m3", "u1", "see you in january", "2026-01-10 09:00:00"),
            (1, "m1", "u1", "hello", "2025-12-16 10:30:00"),
            (2, "m2", "u2", "deploy done", "2025-12-17 08:00:00"),
        ],
    )
