"""Search package exports.

Substring search over the videos of an already-built forest.
"""

from __future__ import annotations

from .videos import matches_term, search_videos

__all__ = [
    "matches_term",
    "search_videos",
]
