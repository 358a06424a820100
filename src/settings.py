"""Static configuration for archivist.

User-editable settings (export mode, timezone, logging) live in an optional
JSON file so defaults can be changed without touching Python. The file path
comes from ARCHIVIST_CONFIG (read through python-dotenv) and falls back to
config.json at the project root.
"""

from __future__ import annotations

import json
import os
from datetime import timezone, tzinfo
from typing import Any, Optional

from dotenv import load_dotenv

from core.config import DEFAULT_SINGLE_FILE_NAME, MODE_MONTHLY, ExportConfig
from core.errors import ArchiveConfigError

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

# Default location of the optional JSON config.
CONFIG_PATH = os.path.join(PROJECT_ROOT, "config.json")

CONFIG_ENV_VAR = "ARCHIVIST_CONFIG"

DEFAULT_LOGGING: dict[str, Any] = {
    "enabled": True,
    "level": "INFO",
    "console": True,
    "file": {"enabled": False},
}


def resolve_config_path() -> str:
    """Return the config path, honoring ARCHIVIST_CONFIG from env or .env."""

    load_dotenv()
    return os.getenv(CONFIG_ENV_VAR) or CONFIG_PATH


def load_config(path: Optional[str] = None) -> dict:
    """Load the JSON config; a missing file means all defaults."""

    path = path or resolve_config_path()
    if not os.path.exists(path):
        return {}

    try:
        with open(path, "r", encoding="utf-8") as handle:
            data = json.load(handle)
    except (OSError, ValueError) as exc:
        raise ArchiveConfigError(f"Invalid config file {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ArchiveConfigError(f"Config file {path} must contain a JSON object")
    return data


def _resolve_timezone(name: str) -> Optional[tzinfo]:
    # None tells the core to use the system local zone.
    if name == "local":
        return None
    if name == "utc":
        return timezone.utc
    raise ArchiveConfigError(f"export.timezone must be 'local' or 'utc', got {name!r}")


def build_export_config(
    config: dict,
    mode: Optional[str] = None,
    sort_within_groups: Optional[bool] = None,
    single_file_name: Optional[str] = None,
) -> ExportConfig:
    """Build the core ExportConfig, letting CLI values override the file."""

    export = config.get("export", {})
    resolved_mode = mode or export.get("mode", MODE_MONTHLY)

    if sort_within_groups is None:
        sort_within_groups = bool(export.get("sort_within_groups", False))

    return ExportConfig(
        mode=resolved_mode,
        sort_within_groups=sort_within_groups,
        tz=_resolve_timezone(str(export.get("timezone", "local")).lower()),
        single_file_name=single_file_name or DEFAULT_SINGLE_FILE_NAME,
    )


def logging_config(config: dict) -> dict:
    """Return the logging block merged over the defaults."""

    merged = dict(DEFAULT_LOGGING)
    merged.update(config.get("logging", {}))
    return merged
