"""Recursive read-only summaries over folder subtrees."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .types import AnyVideoEntry, FolderNode, Forest


@dataclass(frozen=True)
class FolderCounts:
    """Direct file count plus recursive video count for one folder label."""

    files: int
    videos: int


def iter_folders(forest: Forest) -> Iterator[FolderNode]:
    """Yield every folder of ``forest`` in depth-first pre-order."""
    stack = list(reversed(forest))
    while stack:
        folder = stack.pop()
        yield folder
        stack.extend(reversed(folder.children))


def collect_folder_videos(folder: FolderNode) -> list[AnyVideoEntry]:
    """Return ``folder``'s own videos followed by each child's, recursively."""
    return [video for node in iter_folders([folder]) for video in node.videos]


def folder_counts(folder: FolderNode) -> FolderCounts:
    return FolderCounts(files=len(folder.all_files), videos=len(collect_folder_videos(folder)))


def forest_depth(forest: Forest) -> int:
    """Number of folder levels in the deepest branch (``0`` for an empty forest)."""
    if not forest:
        return 0
    return 1 + max(forest_depth(folder.children) for folder in forest)


__all__ = [
    "FolderCounts",
    "iter_folders",
    "collect_folder_videos",
    "folder_counts",
    "forest_depth",
]
