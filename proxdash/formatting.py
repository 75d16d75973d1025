"""Human-readable formatting helpers."""

from __future__ import annotations

_SUFFIXES = ("B", "KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")
_UNIT = 1024


def transform_bytes_for_human(b: int, nb: int = 0) -> str:
    """Format a byte count with a binary-scaled unit suffix.

    Values below 1024 are printed as a plain integer followed by ``B``.
    Larger values are divided by 1024 until they fit, then printed with
    ``nb`` decimals when ``nb`` is between 1 and 4, and with none otherwise.
    """
    if b < _UNIT:
        return f"{b} B"

    size = float(b)
    index = 0
    while size >= _UNIT and index < len(_SUFFIXES) - 1:
        size /= _UNIT
        index += 1

    precision = nb if 1 <= nb <= 4 else 0
    return f"{size:.{precision}f} {_SUFFIXES[index]}"