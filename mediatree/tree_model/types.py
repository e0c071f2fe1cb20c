"""Domain datatypes for descriptor batches and the folder forest."""

from __future__ import annotations

from dataclasses import dataclass, field

ROOT_FOLDER_NAME = "(root)"
ROOT_FOLDER_PATH = ""


@dataclass(frozen=True)
class FileDescriptor:
    """One file reported by the file-selection source.

    ``path`` is the slash-joined relative path whose final segment is
    ``name``. ``handle`` is borrowed from the source and never persisted.
    """

    name: str
    path: str
    size: int
    is_video: bool
    handle: object | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class VideoEntry:
    """Playable video leaf carrying the borrowed content handle."""

    name: str
    path: str
    size: int
    handle: object | None = field(default=None, compare=False, repr=False)
    duration: float | None = None
    thumbnail: str | None = None

    @property
    def is_video(self) -> bool:
        return True

    @property
    def is_detached(self) -> bool:
        return False


@dataclass(frozen=True)
class OtherEntry:
    """Non-video leaf from a live selection."""

    name: str
    path: str
    size: int
    handle: object | None = field(default=None, compare=False, repr=False)

    @property
    def is_video(self) -> bool:
        return False

    @property
    def is_detached(self) -> bool:
        return False


@dataclass(frozen=True)
class DetachedVideoEntry:
    """Video leaf restored from a snapshot; it has no content handle."""

    name: str
    path: str
    size: int
    duration: float | None = None
    thumbnail: str | None = None

    @property
    def is_video(self) -> bool:
        return True

    @property
    def is_detached(self) -> bool:
        return True


@dataclass(frozen=True)
class DetachedOtherEntry:
    """Non-video leaf restored from a snapshot."""

    name: str
    path: str
    size: int

    @property
    def is_video(self) -> bool:
        return False

    @property
    def is_detached(self) -> bool:
        return True


LiveFileEntry = VideoEntry | OtherEntry
DetachedFileEntry = DetachedVideoEntry | DetachedOtherEntry
AnyVideoEntry = VideoEntry | DetachedVideoEntry
AnyFileEntry = LiveFileEntry | DetachedFileEntry


@dataclass
class FolderNode:
    """One directory level of the forest.

    ``videos`` and ``all_files`` only hold direct entries; nested folders
    live in ``children``. Lists are reordered in place by the sort pass.
    """

    name: str
    path: str
    children: list["FolderNode"] = field(default_factory=list)
    videos: list[AnyVideoEntry] = field(default_factory=list)
    all_files: list[AnyFileEntry] = field(default_factory=list)
    is_expanded: bool = False


Forest = list[FolderNode]


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
]
