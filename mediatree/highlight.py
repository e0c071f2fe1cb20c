"""Terminal colorization of snapshot JSON through pygments."""

from __future__ import annotations

import json

from pygments import highlight as pygments_highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import JsonLexer
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

DEFAULT_STYLE = "monokai"


def _normalize_style(style: str) -> str:
    try:
        get_style_by_name(style)
    except ClassNotFound:
        return DEFAULT_STYLE
    return style


def dump_json(data: object) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def colorize_json(data: object, style: str = DEFAULT_STYLE, *, no_color: bool = False) -> str:
    """Return ``data`` as indented JSON, ANSI-highlighted unless ``no_color``."""
    text = dump_json(data)
    if no_color:
        return text
    formatter = TerminalFormatter(style=_normalize_style(style))
    return pygments_highlight(text, JsonLexer(), formatter)


__all__ = [
    "DEFAULT_STYLE",
    "dump_json",
    "colorize_json",
]
