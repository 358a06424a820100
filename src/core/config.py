"""Core configuration dataclasses.

We keep config parsing outside the core, but these dataclasses define the
shape the core expects so adapters and app layers can build safely.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo
from typing import Optional

from core.errors import ArchiveConfigError

MODE_MONTHLY = "monthly"
MODE_SINGLE = "single"
EXPORT_MODES = (MODE_MONTHLY, MODE_SINGLE)

DEFAULT_SINGLE_FILE_NAME = "discord-messages.md"


@dataclass(frozen=True)
class ExportConfig:
    """Export settings for the core pipeline.

    ``tz`` of None means the system local zone.
    """

    mode: str = MODE_MONTHLY
    sort_within_groups: bool = False
    tz: Optional[tzinfo] = None
    single_file_name: str = DEFAULT_SINGLE_FILE_NAME

    def __post_init__(self) -> None:
        if self.mode not in EXPORT_MODES:
            raise ArchiveConfigError(f"export.mode must be one of {', '.join(EXPORT_MODES)}, got {self.mode!r}")
