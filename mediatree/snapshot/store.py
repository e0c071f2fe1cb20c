"""JSON key-value store for folder snapshots.

Each stored value records the snapshot format version and a capture
timestamp next to the serialized forest. Saving is best-effort: failures are
logged and reported as ``False`` so an in-memory forest is never affected.
Loading applies the freshness policy and degrades to an empty forest.
"""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Callable
from pathlib import Path

from ..config import SNAPSHOT_STORE_PATH, load_snapshot_retention_seconds
from ..tree_model.types import Forest
from .codec import restore_forest, serialize_forest

logger = logging.getLogger(__name__)

SNAPSHOT_VERSION = 1
SNAPSHOT_KEY = f"folder-tree-snapshot-v{SNAPSHOT_VERSION}"


def _entry_saved_at(entry: object) -> float | None:
    if not isinstance(entry, dict):
        return None
    saved_at = entry.get("saved_at")
    if isinstance(saved_at, bool) or not isinstance(saved_at, (int, float)):
        return None
    return float(saved_at)


class SnapshotStore:
    """Persist and reload one folder snapshot under a versioned key."""

    def __init__(
        self,
        path: Path | None = None,
        *,
        key: str = SNAPSHOT_KEY,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.path = path if path is not None else SNAPSHOT_STORE_PATH
        self.key = key
        self._clock = clock

    def _read_all(self) -> dict[str, object]:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as exc:
            logger.warning("snapshot store %s is unreadable: %s", self.path, exc)
            return {}
        return data if isinstance(data, dict) else {}

    def _write_all(self, data: dict[str, object]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps(data, ensure_ascii=False)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        tmp_path.write_text(payload, encoding="utf-8")
        tmp_path.replace(self.path)

    def save(self, forest: Forest) -> bool:
        """Store a snapshot of ``forest``; returns whether it was persisted."""
        try:
            data = self._read_all()
            data[self.key] = {
                "version": SNAPSHOT_VERSION,
                "saved_at": self._clock(),
                "forest": serialize_forest(forest),
            }
            self._write_all(data)
        except (OSError, TypeError, ValueError) as exc:
            logger.warning("could not persist folder snapshot to %s: %s", self.path, exc)
            return False
        logger.debug("saved folder snapshot (%d roots) to %s", len(forest), self.path)
        return True

    def saved_at(self) -> float | None:
        """Capture timestamp of the stored snapshot, if any."""
        return _entry_saved_at(self._read_all().get(self.key))

    def load(self, max_age_seconds: float | None = None) -> Forest:
        """Restore the stored forest, or ``[]`` when missing, stale, or corrupt.

        ``max_age_seconds`` defaults to the configured retention window.
        """
        if max_age_seconds is None:
            max_age_seconds = load_snapshot_retention_seconds()

        entry = self._read_all().get(self.key)
        if entry is None:
            return []
        if not isinstance(entry, dict) or entry.get("version") != SNAPSHOT_VERSION:
            logger.info("ignoring folder snapshot with unexpected format under %s", self.key)
            return []

        saved_at = _entry_saved_at(entry)
        if saved_at is None:
            logger.info("ignoring folder snapshot without capture time")
            return []
        age = self._clock() - saved_at
        if age > max_age_seconds:
            logger.info("folder snapshot is %.0f seconds old; retention is %.0f", age, max_age_seconds)
            return []

        return restore_forest(entry.get("forest"))

    def clear(self) -> bool:
        """Remove the stored snapshot; returns whether the store was updated."""
        try:
            data = self._read_all()
            if data.pop(self.key, None) is None:
                return True
            self._write_all(data)
        except OSError as exc:
            logger.warning("could not clear folder snapshot in %s: %s", self.path, exc)
            return False
        return True


__all__ = [
    "SNAPSHOT_VERSION",
    "SNAPSHOT_KEY",
    "SnapshotStore",
]
