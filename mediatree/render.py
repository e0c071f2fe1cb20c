"""Plain-text and ANSI rendering of folder forests and search results.

Each folder row shows its direct file count and recursive video count. A
folder's files are listed before its subfolders, matching the tree widget
layout of the player UI.
"""

from __future__ import annotations

from .formatting import format_file_size
from .tree_model.aggregate import folder_counts
from .tree_model.types import AnyFileEntry, AnyVideoEntry, FolderNode, Forest
from .ui_theme import DEFAULT_THEME, UITheme

DETACHED_BADGE = "[re-select to play]"


def highlight_substring(text: str, query: str, theme: UITheme) -> str:
    """Highlight first case-insensitive substring match in ``text``."""
    if not query or not theme.search_hit:
        return text
    folded_query = query.casefold()
    # Case folding can grow a character ("ß" -> "ss"); map folded offsets back.
    owners: list[int] = []
    for index, char in enumerate(text):
        owners.extend([index] * len(char.casefold()))
    idx = text.casefold().find(folded_query)
    if idx < 0:
        return text
    start = owners[idx]
    end = owners[idx + len(folded_query) - 1] + 1
    return text[:start] + theme.search_hit + text[start:end] + theme.reset + text[end:]


def format_folder_row(folder: FolderNode, depth: int, theme: UITheme | None = None) -> str:
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    counts = folder_counts(folder)
    indent = "  " * depth
    marker = "▾ " if folder.is_expanded else "▸ "
    return (
        f"{indent}{active_theme.tree_marker}{marker}{reset}"
        f"{active_theme.tree_dir}{folder.name}/{reset}"
        f"{active_theme.tree_counts} ({counts.files} files, {counts.videos} videos){reset}"
    )


def format_file_row(entry: AnyFileEntry, depth: int, theme: UITheme | None = None) -> str:
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    # Align file names under the parent folder's name column.
    indent = "  " * depth
    name_color = active_theme.tree_file_video if entry.is_video else active_theme.tree_file_default
    row = f"{indent}  {name_color}{entry.name}{reset}{active_theme.tree_size} [{format_file_size(entry.size)}]{reset}"
    if entry.is_detached:
        row += f" {active_theme.tree_detached}{DETACHED_BADGE}{reset}"
    return row


def render_forest(forest: Forest, theme: UITheme | None = None) -> list[str]:
    """Render every folder and file of ``forest`` as indented rows."""
    rows: list[str] = []

    def render_folder(folder: FolderNode, depth: int) -> None:
        rows.append(format_folder_row(folder, depth, theme))
        for entry in folder.all_files:
            rows.append(format_file_row(entry, depth, theme))
        for child in folder.children:
            render_folder(child, depth + 1)

    for root in forest:
        render_folder(root, 0)
    return rows


def render_search_results(results: list[AnyVideoEntry], term: str, theme: UITheme | None = None) -> list[str]:
    """Render search hits with the matched text highlighted."""
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    if not results:
        return ["No matching videos."]

    rows = [f"{len(results)} matching videos:"]
    for video in results:
        name = highlight_substring(video.name, term, active_theme)
        row = (
            f"  {name}{active_theme.tree_size} [{format_file_size(video.size)}]{reset}"
            f"  {active_theme.search_path}{video.path}{reset}"
        )
        if video.is_detached:
            row += f" {active_theme.tree_detached}{DETACHED_BADGE}{reset}"
        rows.append(row)
    return rows


__all__ = [
    "DETACHED_BADGE",
    "highlight_substring",
    "format_folder_row",
    "format_file_row",
    "render_forest",
    "render_search_results",
]
