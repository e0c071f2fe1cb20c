"""Exception hierarchy shared by tree, snapshot, and selection modules."""

from __future__ import annotations


class MediaTreeError(Exception):
    """Base class for all mediatree errors."""


class SnapshotFormatError(MediaTreeError, ValueError):
    """Raised when a stored snapshot record does not have the expected shape."""


class SelectionError(MediaTreeError):
    """Base class for entries that cannot be handed to a player."""

    def __init__(self, entry: object, message: str) -> None:
        super().__init__(message)
        self.entry = entry


class NeedsReselectionError(SelectionError):
    """Entry was restored from a snapshot and has no content handle."""

    def __init__(self, entry: object) -> None:
        name = getattr(entry, "name", "?")
        super().__init__(entry, f"{name!r} was restored from a previous session; select the folder again to play it")


class NotAVideoError(SelectionError):
    """Entry is a live file but not a supported video."""

    def __init__(self, entry: object) -> None:
        name = getattr(entry, "name", "?")
        super().__init__(entry, f"{name!r} is not a supported video file")


__all__ = [
    "MediaTreeError",
    "SnapshotFormatError",
    "SelectionError",
    "NeedsReselectionError",
    "NotAVideoError",
]
