"""Domain model for folder forests built from flat file-selection batches.

This package contains non-UI tree primitives:
- descriptor, live/detached entry, and folder datatypes
- relative-path segmentation
- forest construction with a final natural-sort pass
- numeric-aware natural ordering
- recursive folder summaries (playlist videos, counts, depth)
"""

from __future__ import annotations

from .aggregate import FolderCounts, collect_folder_videos, folder_counts, forest_depth, iter_folders
from .build import build_folder_tree, entry_for_descriptor
from .paths import PATH_SEPARATOR, join_path, parent_path, segment_path
from .sorting import (
    compare_natural,
    extract_ordering_key,
    natural_sort_key,
    natural_sorted,
    sort_folder,
    sort_forest,
)
from .types import (
    ROOT_FOLDER_NAME,
    ROOT_FOLDER_PATH,
    AnyFileEntry,
    AnyVideoEntry,
    DetachedFileEntry,
    DetachedOtherEntry,
    DetachedVideoEntry,
    FileDescriptor,
    FolderNode,
    Forest,
    LiveFileEntry,
    OtherEntry,
    VideoEntry,
)

__all__ = [
    "ROOT_FOLDER_NAME",
    "ROOT_FOLDER_PATH",
    "FileDescriptor",
    "VideoEntry",
    "OtherEntry",
    "DetachedVideoEntry",
    "DetachedOtherEntry",
    "LiveFileEntry",
    "DetachedFileEntry",
    "AnyVideoEntry",
    "AnyFileEntry",
    "FolderNode",
    "Forest",
    "PATH_SEPARATOR",
    "segment_path",
    "join_path",
    "parent_path",
    "build_folder_tree",
    "entry_for_descriptor",
    "extract_ordering_key",
    "natural_sort_key",
    "compare_natural",
    "natural_sorted",
    "sort_folder",
    "sort_forest",
    "FolderCounts",
    "iter_folders",
    "collect_folder_videos",
    "folder_counts",
    "forest_depth",
]
