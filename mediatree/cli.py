"""Command-line front door for mediatree.

Scans a directory into a flat descriptor batch, builds the folder forest,
and prints it (or video search results). The forest shape is persisted as a
snapshot so ``--restore`` can show it again without rescanning.
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from .config import load_show_hidden, save_show_hidden
from .highlight import colorize_json
from .logging_setup import setup_logging
from .render import render_forest, render_search_results
from .search import search_videos
from .snapshot import SnapshotStore, serialize_forest
from .source import scan_descriptors
from .tree_model import Forest, build_folder_tree, iter_folders
from .ui_theme import available_theme_names, resolve_theme


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Show a folder of videos as a naturally sorted tree."
    )
    parser.add_argument("path", nargs="?", default=None, help="Folder to scan. Defaults to current directory.")
    parser.add_argument("--search", metavar="TERM", default=None, help="List videos whose name contains TERM.")
    parser.add_argument("--json", action="store_true", help="Print the forest snapshot as JSON.")
    parser.add_argument(
        "--restore",
        action="store_true",
        help="Show the last saved snapshot instead of scanning.",
    )
    parser.add_argument("--no-save", action="store_true", help="Do not persist a snapshot after scanning.")
    parser.add_argument(
        "--show-hidden",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Include dot-files and dot-folders, and remember the choice for later scans.",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--style", default="monokai", help="Pygments style name for --json output.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr.")
    return parser


def _print_snapshot_age(store: SnapshotStore) -> None:
    saved_at = store.saved_at()
    if saved_at is None:
        return
    stamp = time.strftime("%Y-%m-%d %H:%M", time.localtime(saved_at))
    print(f"Showing folder snapshot saved {stamp}; re-select the folder to play videos.", file=sys.stderr)


def _load_forest(args: argparse.Namespace, default_path: Path | None, store: SnapshotStore) -> Forest:
    if args.restore:
        if args.path is not None:
            raise SystemExit("Cannot combine a folder path with --restore.")
        forest = store.load()
        if forest:
            _print_snapshot_age(store)
        return forest

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path or default_path)
    if not path.is_dir():
        raise SystemExit(f"Folder not found: {path}")

    if args.show_hidden is None:
        show_hidden = load_show_hidden()
    else:
        show_hidden = args.show_hidden
        if not save_show_hidden(show_hidden):
            print("Note: the hidden-file preference could not be saved.", file=sys.stderr)
    forest = build_folder_tree(scan_descriptors(path, show_hidden=show_hidden))
    if not any(folder.videos for folder in iter_folders(forest)):
        print(f"Note: no supported video files were found in {path}; showing all files.", file=sys.stderr)
    if not args.no_save and not store.save(forest):
        print("Note: the folder snapshot could not be saved.", file=sys.stderr)
    return forest


def main(argv: list[str] | None = None, default_path: Path | None = None, store: SnapshotStore | None = None) -> int:
    """Parse CLI arguments, build or restore the forest, and print it.

    ``default_path`` and ``store`` are primarily for tests.
    """
    args = _build_parser().parse_args(argv)
    if args.json and args.search is not None:
        raise SystemExit("Cannot combine --json with --search.")
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    if store is None:
        store = SnapshotStore()
    forest = _load_forest(args, default_path, store)
    if args.restore and not forest:
        print("No saved folder snapshot is available; scan a folder first.")
        return 1

    no_color = args.no_color or not sys.stdout.isatty()
    if args.json:
        sys.stdout.write(colorize_json(serialize_forest(forest), args.style, no_color=no_color))
        return 0

    theme = resolve_theme(args.theme, no_color=no_color)
    if args.search is not None:
        rows = render_search_results(search_videos(forest, args.search), args.search, theme)
    else:
        rows = render_forest(forest, theme)
    for row in rows:
        print(row)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
