"""Flat descriptor batch to naturally sorted folder forest."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .paths import join_path, segment_path
from .sorting import sort_forest
from .types import (
    ROOT_FOLDER_NAME,
    ROOT_FOLDER_PATH,
    FileDescriptor,
    FolderNode,
    Forest,
    LiveFileEntry,
    OtherEntry,
    VideoEntry,
)

logger = logging.getLogger(__name__)


def entry_for_descriptor(descriptor: FileDescriptor) -> LiveFileEntry:
    """Project a descriptor onto its tagged live entry type."""
    path = descriptor.path or descriptor.name
    if descriptor.is_video:
        return VideoEntry(
            name=descriptor.name,
            path=path,
            size=descriptor.size,
            handle=descriptor.handle,
        )
    return OtherEntry(
        name=descriptor.name,
        path=path,
        size=descriptor.size,
        handle=descriptor.handle,
    )


class _ForestBuilder:
    """Per-call builder state: the path-to-folder map and the root list."""

    def __init__(self) -> None:
        self.folders: dict[str, FolderNode] = {}
        self.roots: Forest = []

    def root_folder(self) -> FolderNode:
        root = self.folders.get(ROOT_FOLDER_PATH)
        if root is None:
            root = FolderNode(name=ROOT_FOLDER_NAME, path=ROOT_FOLDER_PATH, is_expanded=True)
            self.folders[ROOT_FOLDER_PATH] = root
            self.roots.append(root)
        return root

    def folder_for(self, segments: tuple[str, ...]) -> FolderNode:
        """Return the folder for ``segments``, creating missing ancestors."""
        current: FolderNode | None = None
        prefix = ROOT_FOLDER_PATH
        for segment in segments:
            if current is None and not segment:
                # Leading separators carry no folder name.
                continue
            prefix = join_path(prefix, segment)
            folder = self.folders.get(prefix)
            if folder is None:
                folder = FolderNode(name=segment, path=prefix)
                self.folders[prefix] = folder
                if current is None:
                    self.roots.append(folder)
                else:
                    current.children.append(folder)
            current = folder

        if current is None:
            return self.root_folder()
        return current

    def add(self, descriptor: FileDescriptor) -> None:
        entry = entry_for_descriptor(descriptor)
        segments, _leaf = segment_path(entry.path)
        folder = self.folder_for(segments)
        folder.all_files.append(entry)
        if isinstance(entry, VideoEntry):
            folder.videos.append(entry)


def build_folder_tree(descriptors: Iterable[FileDescriptor]) -> Forest:
    """Build the naturally sorted folder forest for one selection batch.

    First-level folders become forest roots. Files without any folder are
    collected under a root sentinel folder at path ``""``.
    """
    builder = _ForestBuilder()
    descriptor_count = 0
    video_count = 0
    for descriptor in descriptors:
        builder.add(descriptor)
        descriptor_count += 1
        if descriptor.is_video:
            video_count += 1

    forest = sort_forest(builder.roots)
    logger.debug(
        "built forest: %d files, %d videos, %d folders, %d roots",
        descriptor_count,
        video_count,
        len(builder.folders),
        len(forest),
    )
    return forest


__all__ = [
    "entry_for_descriptor",
    "build_folder_tree",
]
