"""Human-readable byte counts.

Sizes scale by 1024 but are labelled GB/MB/KB.
"""

from __future__ import annotations

import math

BYTE_UNITS: tuple[tuple[int, str], ...] = (
    (1024**3, "GB"),
    (1024**2, "MB"),
    (1024, "KB"),
)

DEFAULT_THRESHOLD = 0.95
DEFAULT_MARGIN = 0.1


def format_bytes(
    n: int,
    *,
    threshold: float = DEFAULT_THRESHOLD,
    margin: float = DEFAULT_MARGIN,
) -> str:
    """Format a byte count using the largest unit it nearly fills.

    A unit is used once the scaled value exceeds *threshold*, so 1000
    bytes reads as "1KB". Values whose fraction lies within *margin* of a
    whole number are rounded to it; the rest keep one decimal place.

    Examples:
        >>> format_bytes(600)
        '600B'
        >>> format_bytes(1000)
        '1KB'
        >>> format_bytes(70000000000)
        '65.2GB'
    """
    for size, label in BYTE_UNITS:
        scaled = n / size
        if scaled > threshold:
            fraction = scaled - math.floor(scaled)
            if fraction < margin or fraction > 1 - margin:
                return f"{round(scaled)}{label}"
            return f"{scaled:.1f}{label}"
    return f"{n}B"
