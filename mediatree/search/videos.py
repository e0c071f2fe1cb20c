from __future__ import annotations

from ..tree_model.aggregate import iter_folders
from ..tree_model.sorting import natural_sorted
from ..tree_model.types import AnyVideoEntry, Forest


def matches_term(name: str, term: str) -> bool:
    return term.casefold() in name.casefold()


def search_videos(forest: Forest, term: str) -> list[AnyVideoEntry]:
    """Return videos whose name contains ``term``, in natural order.

    Blank terms return no results. Only ``videos`` lists are searched.
    """
    if not term.strip():
        return []

    results: list[AnyVideoEntry] = []
    for folder in iter_folders(forest):
        for video in folder.videos:
            if matches_term(video.name, term):
                results.append(video)
    return natural_sorted(results)
