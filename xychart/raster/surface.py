from __future__ import annotations

import numpy as np

from xychart.raster.canvas import fill_rect, gradient_rect, new_canvas
from xychart.raster.draw_lines import draw_segment
from xychart.raster.draw_text import draw_text, text_size
from xychart.style.theme import RGBA
from xychart.surface import Brush, Direction, Font, Pen, Rect, normalize_rect


class RasterSurface:
    """`DrawingSurface` backed by an (H, W, 4) uint8 RGBA numpy canvas."""

    def __init__(
        self,
        width: int,
        height: int,
        background: RGBA = (255, 255, 255, 255),
        canvas: np.ndarray | None = None,
    ) -> None:
        if canvas is None:
            canvas = new_canvas(width, height, background)
        elif canvas.dtype != np.uint8 or canvas.ndim != 3 or canvas.shape[2] != 4:
            raise ValueError("canvas must be uint8 with shape (H, W, 4)")
        self.canvas = canvas
        self.pen = Pen()
        self.brush = Brush()
        self.font = Font()

    @property
    def width(self) -> int:
        return int(self.canvas.shape[1])

    @property
    def height(self) -> int:
        return int(self.canvas.shape[0])

    def set_pen(self, pen: Pen) -> None:
        self.pen = pen

    def set_brush(self, brush: Brush) -> None:
        self.brush = brush

    def set_font(self, font: Font) -> None:
        self.font = font

    def draw_rectangle(self, x: int, y: int, width: int, height: int) -> None:
        x, y, width, height = normalize_rect(x, y, width, height)
        if width == 0 or height == 0:
            return
        if self.brush.style == "solid":
            fill_rect(self.canvas, x, y, width, height, self.brush.color)
        if self.pen.style == "solid":
            x1 = x + width - 1
            y1 = y + height - 1
            for ax, ay, bx, by in ((x, y, x1, y), (x, y1, x1, y1), (x, y, x, y1), (x1, y, x1, y1)):
                draw_segment(self.canvas, ax, ay, bx, by, self.pen.color, self.pen.width)

    def draw_line(self, x0: int, y0: int, x1: int, y1: int) -> None:
        if self.pen.style != "solid":
            return
        draw_segment(self.canvas, int(x0), int(y0), int(x1), int(y1), self.pen.color, self.pen.width)

    def draw_text(self, text: str, x: int, y: int) -> None:
        draw_text(
            self.canvas,
            int(x),
            int(y),
            text,
            self.pen.color,
            font_family=self.font.family,
            font_size_px=self.font.size_px,
        )

    def text_extent(self, text: str) -> tuple[int, int]:
        return text_size(text, font_family=self.font.family, font_size_px=self.font.size_px)

    def gradient_fill_linear(self, rect: Rect, colour1: RGBA, colour2: RGBA, direction: Direction) -> None:
        x, y, width, height = normalize_rect(*rect)
        if width == 0 or height == 0:
            return
        # colour1 starts at the edge opposite to `direction`.
        if direction == "east":
            gradient_rect(self.canvas, x, y, width, height, colour1, colour2, horizontal=True)
        elif direction == "west":
            gradient_rect(self.canvas, x, y, width, height, colour2, colour1, horizontal=True)
        elif direction == "south":
            gradient_rect(self.canvas, x, y, width, height, colour1, colour2, horizontal=False)
        elif direction == "north":
            gradient_rect(self.canvas, x, y, width, height, colour2, colour1, horizontal=False)
        else:
            raise ValueError(f"unsupported gradient direction: {direction}")

    def to_rgba(self) -> np.ndarray:
        return self.canvas.copy()
