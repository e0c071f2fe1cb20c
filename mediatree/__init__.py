"""Public package surface for mediatree.

Re-exports the core operations: building a folder forest from a flat
descriptor batch, searching its videos, and the snapshot codec. ``main`` is
the CLI entrypoint and is imported lazily.
"""

from __future__ import annotations

from .search import search_videos
from .snapshot import restore_forest, serialize_forest
from .tree_model import FileDescriptor, FolderNode, build_folder_tree


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "FileDescriptor",
    "FolderNode",
    "build_folder_tree",
    "search_videos",
    "serialize_forest",
    "restore_forest",
    "main",
]
