"""Relative-path splitting for descriptor paths."""

from __future__ import annotations

PATH_SEPARATOR = "/"


def segment_path(path: str) -> tuple[tuple[str, ...], str]:
    """Split ``path`` into ``(folder_segments, leaf_name)``.

    Folder segments are ordered root-to-leaf and may be empty. No ``.``/``..``
    or duplicate-separator normalization happens here.
    """
    parts = path.split(PATH_SEPARATOR)
    return tuple(parts[:-1]), parts[-1]


def join_path(prefix: str, segment: str) -> str:
    """Append one folder segment to a running canonical path."""
    return f"{prefix}{PATH_SEPARATOR}{segment}" if prefix else segment


def parent_path(path: str) -> str:
    """Return ``path`` without its final segment (``""`` for top-level names)."""
    folders, _leaf = segment_path(path)
    return PATH_SEPARATOR.join(folders)


__all__ = [
    "PATH_SEPARATOR",
    "segment_path",
    "join_path",
    "parent_path",
]
