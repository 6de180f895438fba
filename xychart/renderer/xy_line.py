from __future__ import annotations

from xychart.axis.base import Axis
from xychart.dataset import XYDataset
from xychart.renderer.base import XYRenderer
from xychart.scales import pixel
from xychart.style.art import default_colour
from xychart.surface import DrawingSurface, Pen, Rect


class XYLineRenderer(XYRenderer):
    """Connects consecutive points of each series; gaps break the line."""

    def __init__(self, line_width: int = 1) -> None:
        super().__init__()
        if line_width <= 0:
            raise ValueError("line width must be > 0")
        self.line_width = int(line_width)
        self._serie_pens: dict[int, Pen] = {}

    def set_serie_pen(self, serie: int, pen: Pen) -> None:
        self._serie_pens[serie] = pen
        self._need_redraw()

    def serie_pen(self, serie: int) -> Pen:
        pen = self._serie_pens.get(serie)
        if pen is None:
            pen = Pen(default_colour(serie), self.line_width)
        return pen

    def draw(
        self,
        surface: DrawingSurface,
        rect: Rect,
        horizontal_axis: Axis,
        vertical_axis: Axis,
        dataset: XYDataset,
    ) -> None:
        for serie in range(dataset.serie_count):
            surface.set_pen(self.serie_pen(serie))
            prev: tuple[int, int] | None = None
            for n in range(dataset.count(serie)):
                point = self._to_graphics(
                    rect, horizontal_axis, vertical_axis, dataset.get_x(n, serie), dataset.get_y(n, serie)
                )
                if point is None:
                    prev = None
                    continue
                current = (pixel(point[0]), pixel(point[1]))
                if prev is not None:
                    surface.draw_line(prev[0], prev[1], current[0], current[1])
                prev = current

    def draw_legend_symbol(self, surface: DrawingSurface, x0: int, y0: int, x1: int, y1: int, *, serie: int = 0) -> None:
        surface.set_pen(self.serie_pen(serie))
        mid = (y0 + y1) // 2
        surface.draw_line(x0, mid, x1, mid)
