"""Snapshot codec and storage for folder forests.

The codec converts between a live forest and handle-free JSON records; the
store keeps one versioned, timestamped record on disk.
"""

from __future__ import annotations

from .codec import (
    SnapshotRecord,
    decode_folder,
    decode_forest,
    restore_forest,
    serialize_folder,
    serialize_forest,
)
from .store import SNAPSHOT_KEY, SNAPSHOT_VERSION, SnapshotStore

__all__ = [
    "SnapshotRecord",
    "serialize_folder",
    "serialize_forest",
    "decode_folder",
    "decode_forest",
    "restore_forest",
    "SNAPSHOT_KEY",
    "SNAPSHOT_VERSION",
    "SnapshotStore",
]
