"""Persistent JSON config helpers.

Stores the hidden-file preference and the snapshot retention window.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir, user_data_dir

APP_NAME = "mediatree"
CONFIG_FILENAME = "config.json"
SNAPSHOT_FILENAME = "snapshots.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
SNAPSHOT_STORE_PATH = Path(user_data_dir(APP_NAME, appauthor=False)) / SNAPSHOT_FILENAME
DEFAULT_SNAPSHOT_RETENTION_HOURS = 24.0


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> bool:
    """Persist config data as pretty-printed JSON.

    Returns ``False`` instead of raising when the config cannot be written.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError):
        return False
    return True


def load_snapshot_retention_seconds() -> float:
    """Return how long a stored snapshot stays eligible for restore.

    ``snapshot_retention_hours`` must be a positive number; anything else
    falls back to the default window.
    """
    value = load_config().get("snapshot_retention_hours")
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        value = DEFAULT_SNAPSHOT_RETENTION_HOURS
    return float(value) * 3600.0


def load_show_hidden() -> bool:
    """Return persisted hidden-file visibility preference.

    Only explicit boolean values are accepted; any other type falls back to
    ``False``.
    """
    value = load_config().get("show_hidden")
    return bool(value) if isinstance(value, bool) else False


def save_show_hidden(show_hidden: bool) -> bool:
    """Remember whether scans include dot-entries; returns whether it was written."""
    data = load_config()
    if data.get("show_hidden") is show_hidden:
        return True
    data["show_hidden"] = bool(show_hidden)
    return save_config(data)


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "SNAPSHOT_STORE_PATH",
    "DEFAULT_SNAPSHOT_RETENTION_HOURS",
    "load_config",
    "save_config",
    "load_snapshot_retention_seconds",
    "load_show_hidden",
    "save_show_hidden",
]
