"""Human-readable formatting helpers."""

from __future__ import annotations

_UNITS = ("B", "KB", "MB", "GB")


def format_bytes(num_bytes: int, precision: int = 2) -> str:
    """Format a byte count using binary multiples, e.g. ``10.00 MB``."""
    size = float(num_bytes)
    unit_index = 0
    while size >= 1024 and unit_index < len(_UNITS) - 1:
        size /= 1024
        unit_index += 1
    return f"{size:.{precision}f} {_UNITS[unit_index]}"
