from __future__ import annotations

from .theme import RGBA


_SERIES_COLOURS: tuple[RGBA, ...] = (
    (255, 0, 0, 255),
    (0, 128, 0, 255),
    (0, 0, 255, 255),
    (255, 165, 0, 255),
    (128, 0, 128, 255),
    (0, 128, 128, 255),
    (165, 42, 42, 255),
    (128, 128, 128, 255),
)


def default_colour(index: int) -> RGBA:
    """Colour assigned to series `index` when none is configured; cycles."""
    return _SERIES_COLOURS[index % len(_SERIES_COLOURS)]
