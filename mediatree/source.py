"""Directory scanning that stands in for a browser folder picker.

Produces the flat ``FileDescriptor`` batch the tree builder consumes. Paths
are reported relative to the parent of the selected directory, so the
selected directory itself becomes the first-level folder. Each descriptor's
handle is the absolute ``Path`` of the file.
"""

from __future__ import annotations

import logging
import mimetypes
import os
from collections.abc import Iterator
from pathlib import Path

from .tree_model.types import FileDescriptor

logger = logging.getLogger(__name__)

SUPPORTED_VIDEO_MIME_TYPES = frozenset(
    {
        "video/mp4",
        "video/webm",
        "video/ogg",
        "video/avi",
        "video/mov",
        "video/wmv",
        "video/flv",
        "video/mkv",
    }
)
VIDEO_EXTENSIONS = frozenset({".mp4", ".webm", ".ogg", ".avi", ".mov", ".wmv", ".flv", ".mkv", ".m4v", ".3gp"})


def is_video_by_extension(file_name: str) -> bool:
    _stem, suffix = os.path.splitext(file_name)
    return suffix.lower() in VIDEO_EXTENSIONS


def is_video_file(file_name: str, mime_type: str | None = None) -> bool:
    """Return whether a file is a supported video by MIME type or extension."""
    if mime_type is None:
        mime_type, _encoding = mimetypes.guess_type(file_name, strict=False)
    return mime_type in SUPPORTED_VIDEO_MIME_TYPES or is_video_by_extension(file_name)


def _safe_file_size(entry: os.DirEntry[str]) -> int:
    try:
        return int(entry.stat(follow_symlinks=True).st_size)
    except OSError:
        return 0


def scan_descriptors(root: Path, show_hidden: bool = False) -> Iterator[FileDescriptor]:
    """Yield one descriptor per regular file under ``root``.

    Unreadable directories are skipped with a warning. Hidden entries are
    skipped unless ``show_hidden`` is set.
    """
    root = root.resolve()
    base = root.parent
    pending = [root]
    while pending:
        directory = pending.pop()
        try:
            with os.scandir(directory) as entries:
                children = sorted(entries, key=lambda item: item.name)
        except OSError as exc:
            logger.warning("skipping unreadable directory %s: %s", directory, exc)
            continue

        subdirectories: list[Path] = []
        for child in children:
            if not show_hidden and child.name.startswith("."):
                continue
            try:
                is_dir = child.is_dir(follow_symlinks=False)
                is_file = child.is_file()
            except OSError:
                continue
            child_path = Path(child.path)
            if is_dir:
                subdirectories.append(child_path)
                continue
            if not is_file:
                continue
            yield FileDescriptor(
                name=child.name,
                path=child_path.relative_to(base).as_posix(),
                size=_safe_file_size(child),
                is_video=is_video_file(child.name),
                handle=child_path,
            )
        pending.extend(reversed(subdirectories))


__all__ = [
    "SUPPORTED_VIDEO_MIME_TYPES",
    "VIDEO_EXTENSIONS",
    "is_video_by_extension",
    "is_video_file",
    "scan_descriptors",
]
