from __future__ import annotations

import math
import sys


def is_normal_value(value: float) -> bool:
    """True for finite, non-subnormal values (zero counts as normal)."""
    if not math.isfinite(value):
        return False
    return value == 0.0 or abs(value) >= sys.float_info.min


def to_graphics(
    min_coord: float,
    g_range: float,
    min_value: float,
    max_value: float,
    margin: float,
    vertical: bool,
    value: float,
) -> float:
    min_coord += margin / 2
    g_range -= margin
    if g_range <= 0:
        return float(min_coord)

    value_range = max_value - min_value
    if value_range == 0 or not math.isfinite(value_range):
        k = 0.0
    else:
        k = (value - min_value) / value_range
    if vertical:
        k = 1.0 - k
    return min_coord + k * g_range


def to_data(
    min_coord: float,
    g_range: float,
    min_value: float,
    max_value: float,
    margin: float,
    vertical: bool,
    g: float,
) -> float:
    min_coord += margin / 2
    g_range -= margin
    if g_range <= 0:
        return 0.0

    value_range = max_value - min_value
    offset = (g - min_coord) * value_range / g_range
    if vertical:
        return max_value - offset
    return min_value + offset


def pixel(coord: float) -> int:
    """Round a graphics coordinate to the integer pixel grid."""
    return int(math.floor(coord + 0.5))
