"""Numeric-aware ordering for folders, files, and search results.

Names are ordered by an extracted ordering number when one exists, so
``episode2`` precedes ``episode10`` and ``第2节`` precedes ``第10节``.
Numbered names always precede unnumbered ones; unnumbered names fall back to
case-folded text order.
"""

from __future__ import annotations

import os
import re
from collections.abc import Iterable
from typing import Protocol, TypeVar

from .types import Forest, FolderNode

# Labelled course/episode markers win over any other digits in the name.
LABELLED_UNIT_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"第([0-9]+)节"),
    re.compile(r"第([0-9]+)章"),
    re.compile(r"第([0-9]+)课"),
    re.compile(r"第([0-9]+)集"),
    re.compile(r"第([0-9]+)讲"),
    re.compile(r"(?<![a-z])(?:part|chapter|lesson|episode)[\s._-]*([0-9]+)", re.IGNORECASE),
)
LEADING_NUMBER_PATTERN = re.compile(r"^([0-9]+)")
ANY_NUMBER_PATTERN = re.compile(r"([0-9]+)")

# Matched against the name without its extension, so ".mp4" is no number.
STEM_NUMBER_PATTERNS: tuple[re.Pattern[str], ...] = (
    LEADING_NUMBER_PATTERN,
    ANY_NUMBER_PATTERN,
)


class Named(Protocol):
    name: str


NamedT = TypeVar("NamedT", bound=Named)


def _name_stem(name: str) -> str:
    stem, suffix = os.path.splitext(name)
    # "Season 1.5" keeps its numeric tail; only real extensions are dropped.
    if suffix[1:].isdigit():
        return name
    return stem


def extract_ordering_key(name: str) -> int | None:
    """Return the ordering number for ``name`` or ``None`` when it has none.

    Labelled markers are searched in the full name; plain digit runs only in
    the name stem, so a file extension such as ``.mp4`` never counts.
    """
    for pattern in LABELLED_UNIT_PATTERNS:
        match = pattern.search(name)
        if match is not None:
            return int(match.group(1))
    stem = _name_stem(name)
    for pattern in STEM_NUMBER_PATTERNS:
        match = pattern.search(stem)
        if match is not None:
            return int(match.group(1))
    return None


def _text_key(name: str) -> tuple[str, str]:
    return name.casefold(), name


def natural_sort_key(item: Named) -> tuple[int, int, tuple[str, str]]:
    """Sort key equivalent to :func:`compare_natural`.

    Numbered items compare by number only, so equal numbers keep their input
    order under a stable sort.
    """
    number = extract_ordering_key(item.name)
    if number is None:
        return 1, 0, _text_key(item.name)
    return 0, number, ("", "")


def compare_natural(a: Named, b: Named) -> int:
    """Three-way comparison of two named items in natural order."""
    key_a = natural_sort_key(a)
    key_b = natural_sort_key(b)
    if key_a < key_b:
        return -1
    if key_a > key_b:
        return 1
    return 0


def natural_sorted(items: Iterable[NamedT]) -> list[NamedT]:
    """Return a new list of ``items`` stably sorted in natural order."""
    return sorted(items, key=natural_sort_key)


def sort_folder(folder: FolderNode) -> None:
    """Natural-sort ``folder``'s lists and every descendant's lists in place."""
    folder.all_files = natural_sorted(folder.all_files)
    folder.videos = natural_sorted(folder.videos)
    folder.children = natural_sorted(folder.children)
    for child in folder.children:
        sort_folder(child)


def sort_forest(forest: Forest) -> Forest:
    """Sort every folder of ``forest`` and return the sorted root list."""
    for root in forest:
        sort_folder(root)
    return natural_sorted(forest)


__all__ = [
    "LABELLED_UNIT_PATTERNS",
    "LEADING_NUMBER_PATTERN",
    "ANY_NUMBER_PATTERN",
    "STEM_NUMBER_PATTERNS",
    "extract_ordering_key",
    "natural_sort_key",
    "compare_natural",
    "natural_sorted",
    "sort_folder",
    "sort_forest",
]
