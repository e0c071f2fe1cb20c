"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the tree/search renderers. JSON colorization
uses a pygments style and is configured separately.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    tree_marker: str
    tree_dir: str
    tree_counts: str
    tree_file_video: str
    tree_file_default: str
    tree_size: str
    tree_detached: str
    search_hit: str
    search_path: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    tree_marker="\033[38;5;44m",
    tree_dir="\033[1;34m",
    tree_counts="\033[2;38;5;250m",
    tree_file_video="\033[38;5;110m",
    tree_file_default="\033[38;5;252m",
    tree_size="\033[38;5;109m",
    tree_detached="\033[2;38;5;214m",
    search_hit="\033[7;1m",
    search_path="\033[2;38;5;250m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    tree_marker="\033[38;5;39m",
    tree_dir="\033[1;38;5;45m",
    tree_counts="\033[2;38;5;110m",
    tree_file_video="\033[38;5;117m",
    tree_file_default="\033[38;5;252m",
    tree_size="\033[38;5;73m",
    tree_detached="\033[2;38;5;215m",
    search_hit="\033[7;1m",
    search_path="\033[2;38;5;110m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    tree_marker="",
    tree_dir="",
    tree_counts="",
    tree_file_video="",
    tree_file_default="",
    tree_size="",
    tree_detached="",
    search_hit="",
    search_path="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode.

    Unknown or blank names fall back to the default theme.
    """
    if no_color:
        return PLAIN_THEME
    candidate = str(name or "").strip().lower()
    return _THEMES.get(candidate, DEFAULT_THEME)


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "resolve_theme",
]
