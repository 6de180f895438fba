from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Protocol, runtime_checkable

from xychart.style.theme import DEFAULT_THEME, RGBA


Rect = tuple[int, int, int, int]
Direction = Literal["east", "west", "north", "south"]
DrawStyle = Literal["solid", "transparent"]


@dataclass(frozen=True)
class Pen:
    color: RGBA = (0, 0, 0, 255)
    width: int = 1
    style: DrawStyle = "solid"


@dataclass(frozen=True)
class Brush:
    color: RGBA = (255, 255, 255, 255)
    style: DrawStyle = "solid"


@dataclass(frozen=True)
class Font:
    family: str = DEFAULT_THEME.font_family
    size_px: float = DEFAULT_THEME.font_size_px


NO_PEN = Pen(style="transparent")
NO_BRUSH = Brush(style="transparent")


@runtime_checkable
class DrawingSurface(Protocol):
    """2D drawing capability supplied by the host for one draw call.

    Coordinates are integer pixels with the origin at the top-left corner.
    `draw_rectangle` fills with the current brush and outlines with the
    current pen.
    """

    def set_pen(self, pen: Pen) -> None: ...

    def set_brush(self, brush: Brush) -> None: ...

    def set_font(self, font: Font) -> None: ...

    def draw_rectangle(self, x: int, y: int, width: int, height: int) -> None: ...

    def draw_line(self, x0: int, y0: int, x1: int, y1: int) -> None: ...

    def draw_text(self, text: str, x: int, y: int) -> None: ...

    def text_extent(self, text: str) -> tuple[int, int]: ...

    def gradient_fill_linear(self, rect: Rect, colour1: RGBA, colour2: RGBA, direction: Direction) -> None: ...


def normalize_rect(x: int, y: int, width: int, height: int) -> Rect:
    """Flip negative extents so the rect is anchored at its top-left corner."""
    if width < 0:
        x += width
        width = -width
    if height < 0:
        y += height
        height = -height
    return (x, y, width, height)
