"""Gravity-relative offset strings in ImageMagick geometry syntax."""

from __future__ import annotations

from typing import Tuple


def _signed(value: int) -> str:
    # Negative numbers already carry their own "-".
    return f"+{value}" if value >= 0 else str(value)


def format_offset(x: int, y: int) -> str:
    """Format an offset pair as ``+x+y`` (``-520+172``, ``+0+0``, ...)."""

    return f"{_signed(x)}{_signed(y)}"


def shifted(position: Tuple[int, int], offset_y: int = 0) -> Tuple[int, int]:
    x, y = position
    return x, y + offset_y
