"""Human-readable size and duration labels."""

from __future__ import annotations

import math

SIZE_UNITS: tuple[str, ...] = ("B", "KB", "MB", "GB", "TB")


def format_file_size(size: int) -> str:
    """Format ``size`` bytes with 1024-based units and up to two decimals.

    ``0`` renders as ``"0 B"``; sizes beyond the largest unit stay in TB.
    """
    if size <= 0:
        return "0 B"
    exponent = 0
    value = float(size)
    while value >= 1024 and exponent < len(SIZE_UNITS) - 1:
        value /= 1024
        exponent += 1
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{text} {SIZE_UNITS[exponent]}"


def format_duration(seconds: float | None) -> str:
    """Format seconds as ``MM:SS``, or ``HH:MM:SS`` from one hour up."""
    if seconds is None or math.isnan(seconds):
        return "00:00"
    total = int(max(0.0, seconds))
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)
    if hours > 0:
        return f"{hours:02d}:{minutes:02d}:{secs:02d}"
    return f"{minutes:02d}:{secs:02d}"


__all__ = [
    "SIZE_UNITS",
    "format_file_size",
    "format_duration",
]
