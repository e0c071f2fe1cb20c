"""Handle-free snapshot records for folder forests.

``serialize_forest`` drops every content handle and keeps only the shape and
metadata needed to redraw the tree. ``restore_forest`` rebuilds a new forest
whose leaves are detached entries; they can be listed and searched but not
played until the folder is selected again.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from ..errors import SnapshotFormatError
from ..tree_model.types import (
    AnyFileEntry,
    AnyVideoEntry,
    DetachedOtherEntry,
    DetachedVideoEntry,
    FolderNode,
    Forest,
)

logger = logging.getLogger(__name__)

SnapshotRecord = dict[str, object]


def _serialize_video(video: AnyVideoEntry) -> SnapshotRecord:
    return {"name": video.name, "path": video.path, "size": video.size}


def _serialize_file(entry: AnyFileEntry) -> SnapshotRecord:
    return {"name": entry.name, "path": entry.path, "size": entry.size, "is_video": entry.is_video}


def serialize_folder(folder: FolderNode) -> SnapshotRecord:
    return {
        "name": folder.name,
        "path": folder.path,
        "children": [serialize_folder(child) for child in folder.children],
        "videos": [_serialize_video(video) for video in folder.videos],
        "all_files": [_serialize_file(entry) for entry in folder.all_files],
        "is_expanded": folder.is_expanded,
    }


def serialize_forest(forest: Forest) -> list[SnapshotRecord]:
    """Return a JSON-compatible, handle-free projection of ``forest``."""
    return [serialize_folder(folder) for folder in forest]


def _require_mapping(value: object, where: str) -> Mapping[str, object]:
    if not isinstance(value, Mapping):
        raise SnapshotFormatError(f"{where}: expected an object, got {type(value).__name__}")
    return value


def _require_list(record: Mapping[str, object], key: str, where: str) -> list[object]:
    value = record.get(key, [])
    if not isinstance(value, list):
        raise SnapshotFormatError(f"{where}.{key}: expected a list")
    return value


def _require_str(record: Mapping[str, object], key: str, where: str) -> str:
    value = record.get(key)
    if not isinstance(value, str):
        raise SnapshotFormatError(f"{where}.{key}: expected a string")
    return value


def _require_size(record: Mapping[str, object], where: str) -> int:
    value = record.get("size", 0)
    # bool is an int subclass but never a valid size.
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise SnapshotFormatError(f"{where}.size: expected a non-negative integer")
    return value


def _decode_file(raw: object, where: str) -> DetachedVideoEntry | DetachedOtherEntry:
    record = _require_mapping(raw, where)
    name = _require_str(record, "name", where)
    path = _require_str(record, "path", where)
    size = _require_size(record, where)
    is_video = record.get("is_video", False)
    if not isinstance(is_video, bool):
        raise SnapshotFormatError(f"{where}.is_video: expected a boolean")
    if is_video:
        return DetachedVideoEntry(name=name, path=path, size=size)
    return DetachedOtherEntry(name=name, path=path, size=size)


def _decode_video(raw: object, where: str) -> DetachedVideoEntry:
    record = _require_mapping(raw, where)
    return DetachedVideoEntry(
        name=_require_str(record, "name", where),
        path=_require_str(record, "path", where),
        size=_require_size(record, where),
    )


def decode_folder(raw: object, where: str = "forest") -> FolderNode:
    """Strictly rebuild one folder record; raises ``SnapshotFormatError``."""
    record = _require_mapping(raw, where)
    name = _require_str(record, "name", where)
    path = _require_str(record, "path", where)
    is_expanded = record.get("is_expanded", False)
    if not isinstance(is_expanded, bool):
        raise SnapshotFormatError(f"{where}.is_expanded: expected a boolean")

    all_files = [
        _decode_file(item, f"{where}.all_files[{idx}]")
        for idx, item in enumerate(_require_list(record, "all_files", where))
    ]
    # A video listed in both lists is restored as one shared entry.
    shared_videos = {entry.path: entry for entry in all_files if isinstance(entry, DetachedVideoEntry)}
    videos: list[AnyVideoEntry] = []
    for idx, item in enumerate(_require_list(record, "videos", where)):
        video = _decode_video(item, f"{where}.videos[{idx}]")
        videos.append(shared_videos.get(video.path, video))

    children = [
        decode_folder(item, f"{where}.children[{idx}]")
        for idx, item in enumerate(_require_list(record, "children", where))
    ]
    return FolderNode(
        name=name,
        path=path,
        children=children,
        videos=videos,
        all_files=list(all_files),
        is_expanded=is_expanded,
    )


def decode_forest(snapshot: object) -> Forest:
    """Strictly rebuild a forest; raises ``SnapshotFormatError`` on bad input."""
    if not isinstance(snapshot, list):
        raise SnapshotFormatError("forest: expected a list of folder records")
    return [decode_folder(item, f"forest[{idx}]") for idx, item in enumerate(snapshot)]


def restore_forest(snapshot: object) -> Forest:
    """Rebuild a detached forest, or ``[]`` when ``snapshot`` is absent or malformed."""
    if snapshot is None:
        return []
    try:
        return decode_forest(snapshot)
    except SnapshotFormatError as exc:
        logger.warning("discarding malformed folder snapshot: %s", exc)
        return []


__all__ = [
    "SnapshotRecord",
    "serialize_folder",
    "serialize_forest",
    "decode_folder",
    "decode_forest",
    "restore_forest",
]
