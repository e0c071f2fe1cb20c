"""Decide whether a selected tree leaf can be handed to a player.

Detached entries (restored from a snapshot) are reported as needing
re-selection before the video check, so a restored non-video file also asks
for the folder to be picked again.
"""

from __future__ import annotations

import enum

from .errors import NeedsReselectionError, NotAVideoError, SelectionError
from .tree_model.types import AnyFileEntry, VideoEntry


class SelectionOutcome(enum.Enum):
    PLAYABLE = "playable"
    NEEDS_RESELECTION = "needs_reselection"
    NOT_VIDEO = "not_video"


def playable_video(entry: AnyFileEntry) -> VideoEntry:
    """Return ``entry`` as a live video or raise a ``SelectionError``."""
    if entry.is_detached:
        raise NeedsReselectionError(entry)
    if not isinstance(entry, VideoEntry):
        raise NotAVideoError(entry)
    return entry


def selection_outcome(entry: AnyFileEntry) -> SelectionOutcome:
    try:
        playable_video(entry)
    except NeedsReselectionError:
        return SelectionOutcome.NEEDS_RESELECTION
    except NotAVideoError:
        return SelectionOutcome.NOT_VIDEO
    return SelectionOutcome.PLAYABLE


__all__ = [
    "SelectionError",
    "SelectionOutcome",
    "playable_video",
    "selection_outcome",
]
