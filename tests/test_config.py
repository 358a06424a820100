from __future__ import annotations

import pytest

from core.config import MODE_SINGLE, ExportConfig
from core.errors import ArchiveConfigError, ArchiveError


def test_unknown_mode_is_config_error() -> None:
    with pytest.raises(ArchiveConfigError) as excinfo:
        ExportConfig(mode="weekly")
    assert isinstance(excinfo.value, ArchiveError)
    assert "weekly" in str(excinfo.value)


def test_known_modes_are_accepted() -> None:
    assert ExportConfig(mode=MODE_SINGLE).mode == MODE_SINGLE
