from __future__ import annotations

from abc import ABC, abstractmethod
import math

from xychart.axis.base import Axis
from xychart.dataset import XYDataset
from xychart.observer import Observable
from xychart.surface import DrawingSurface, Rect


NEED_REDRAW = "need_redraw"


class Renderer(Observable, ABC):
    """Draws one visual representation of a dataset; fires `need_redraw` when restyled."""

    def __init__(self) -> None:
        super().__init__()

    def _need_redraw(self, *_: object) -> None:
        self._fire(NEED_REDRAW)

    @abstractmethod
    def draw_legend_symbol(self, surface: DrawingSurface, x0: int, y0: int, x1: int, y1: int, *, serie: int = 0) -> None:
        raise NotImplementedError


class XYRenderer(Renderer):
    @abstractmethod
    def draw(
        self,
        surface: DrawingSurface,
        rect: Rect,
        horizontal_axis: Axis,
        vertical_axis: Axis,
        dataset: XYDataset,
    ) -> None:
        raise NotImplementedError

    @staticmethod
    def _to_graphics(rect: Rect, horizontal_axis: Axis, vertical_axis: Axis, x_value: float, y_value: float) -> tuple[float, float] | None:
        x, y, w, h = rect
        gx = horizontal_axis.to_graphics(x, w, x_value)
        gy = vertical_axis.to_graphics(y, h, y_value)
        if not (math.isfinite(gx) and math.isfinite(gy)):
            return None
        return (gx, gy)
