from __future__ import annotations

import logging

from xychart.areadraw import AreaDraw, AreaDrawCollection
from xychart.axis.base import Axis
from xychart.dataset import XYDataset
from xychart.observer import ListenerHandle
from xychart.renderer.base import XYRenderer
from xychart.scales import pixel
from xychart.surface import DrawingSurface, Rect


LOGGER = logging.getLogger(__name__)


class XYHistoRenderer(XYRenderer):
    """Histogram-style bars for XY datasets.

    Every point becomes a bar of fixed thickness running from the data area
    baseline (bottom edge for vertical bars, left edge for horizontal bars)
    to the point's value. Series sharing a position are spread
    `serie_shift` pixels apart, symmetric about the true position.
    """

    def __init__(self, bar_width: int = 5, vertical: bool = True, serie_shift: int | None = None) -> None:
        super().__init__()
        if bar_width <= 0:
            raise ValueError("bar width must be > 0")
        self.bar_width = int(bar_width)
        self.vertical = vertical
        self.serie_shift = self.bar_width + 2 if serie_shift is None else int(serie_shift)
        if self.serie_shift < 0:
            raise ValueError("serie shift must be >= 0")
        self.bar_areas = AreaDrawCollection()
        self._area_handles: dict[int, ListenerHandle] = {}

    def set_bar_width(self, bar_width: int) -> None:
        if bar_width <= 0:
            raise ValueError("bar width must be > 0")
        self.bar_width = int(bar_width)
        self._need_redraw()

    def set_serie_shift(self, serie_shift: int) -> None:
        if serie_shift < 0:
            raise ValueError("serie shift must be >= 0")
        self.serie_shift = int(serie_shift)
        self._need_redraw()

    def set_bar_area(self, serie: int, area_draw: AreaDraw) -> None:
        old = self._area_handles.pop(serie, None)
        if old is not None:
            old.detach()
        self.bar_areas.set_area_draw(serie, area_draw)
        self._area_handles[serie] = area_draw.add_listener("need_redraw", self._need_redraw)
        self._need_redraw()

    def serie_offset(self, serie: int, serie_count: int) -> float:
        return (serie - (serie_count - 1) / 2.0) * self.serie_shift

    def bar_rect(self, rect: Rect, x: float, y: float) -> Rect:
        rx, ry, _, rh = rect
        if self.vertical:
            top = pixel(y)
            return (pixel(x - self.bar_width / 2.0), top, self.bar_width, ry + rh - top)
        right = pixel(x)
        return (rx, pixel(y - self.bar_width / 2.0), right - rx, self.bar_width)

    def draw(
        self,
        surface: DrawingSurface,
        rect: Rect,
        horizontal_axis: Axis,
        vertical_axis: Axis,
        dataset: XYDataset,
    ) -> None:
        serie_count = dataset.serie_count
        skipped = 0
        for serie in range(serie_count):
            offset = self.serie_offset(serie, serie_count)
            area = self.bar_areas.get_area_draw(serie)
            for n in range(dataset.count(serie)):
                if self.vertical:
                    x_value, y_value = dataset.get_x(n, serie), dataset.get_y(n, serie)
                else:
                    x_value, y_value = dataset.get_y(n, serie), dataset.get_x(n, serie)

                point = self._to_graphics(rect, horizontal_axis, vertical_axis, x_value, y_value)
                if point is None:
                    skipped += 1
                    continue
                x, y = point
                if self.vertical:
                    x += offset
                else:
                    y += offset
                area.draw(surface, self.bar_rect(rect, x, y))
        if skipped:
            LOGGER.debug("skipped %d bars with non-finite coordinates", skipped)

    def draw_legend_symbol(self, surface: DrawingSurface, x0: int, y0: int, x1: int, y1: int, *, serie: int = 0) -> None:
        self.bar_areas.get_area_draw(serie).draw(surface, (x0, y0, x1 - x0, y1 - y0))
