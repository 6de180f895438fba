from __future__ import annotations

from abc import ABC, abstractmethod
import logging
import math
from typing import Literal

from xychart import scales
from xychart.dataset import Dataset
from xychart.observer import ListenerHandle, Observable
from xychart.style.theme import DEFAULT_THEME
from xychart.surface import DrawingSurface, Font, Pen, Rect


LOGGER = logging.getLogger(__name__)

AxisLocation = Literal["left", "right", "top", "bottom"]

AXIS_CHANGED = "axis_changed"
BOUNDS_CHANGED = "bounds_changed"


class Axis(Observable, ABC):
    """Maps data values along one chart dimension to pixels and back.

    Subclasses supply the tick math (`update_bounds`, `get_value`,
    `get_label`) and may override `_scale` / `_unscale` to map through a
    non-linear space; the pixel interpolation itself lives here.
    """

    def __init__(self, location: AxisLocation) -> None:
        super().__init__()
        if location not in ("left", "right", "top", "bottom"):
            raise ValueError(f"unsupported axis location: {location}")
        self.location: AxisLocation = location
        self.margin_min = 5
        self.margin_max = 5
        self.use_window = False
        self.win_pos = 0.0
        self.win_width = 0.0
        self.enable_subticks = False

        self.line_pen = Pen(DEFAULT_THEME.color("axis_line"))
        self.label_pen = Pen(DEFAULT_THEME.color("axis_label_text"))
        self.grid_pen = Pen(DEFAULT_THEME.color("grid_line"))
        self.label_font = Font(DEFAULT_THEME.font_family, DEFAULT_THEME.font_size_px)
        self.tick_length = 5
        self.label_gap = 3

        self._datasets: list[Dataset] = []
        self._dataset_handles: list[ListenerHandle] = []

    @property
    def is_vertical(self) -> bool:
        return self.location in ("left", "right")

    @property
    def is_horizontal(self) -> bool:
        return not self.is_vertical

    @property
    def fixed_bounds(self) -> bool:
        return False

    @property
    def datasets(self) -> tuple[Dataset, ...]:
        return tuple(self._datasets)

    def add_dataset(self, dataset: Dataset) -> bool:
        """Attach `dataset` if `accept_dataset` allows it; returns whether it was attached."""
        if not self.accept_dataset(dataset):
            LOGGER.info("%s rejected dataset %r", type(self).__name__, dataset)
            return False
        if dataset in self._datasets:
            return True
        self._datasets.append(dataset)
        self._dataset_handles.append(dataset.on_changed(self._on_dataset_changed))
        if not self.fixed_bounds:
            self.update_bounds()
        return True

    def remove_dataset(self, dataset: Dataset) -> None:
        if dataset not in self._datasets:
            return
        idx = self._datasets.index(dataset)
        self._dataset_handles.pop(idx).detach()
        del self._datasets[idx]
        if not self.fixed_bounds:
            self.update_bounds()

    def _on_dataset_changed(self, dataset: Dataset) -> None:
        if not self.fixed_bounds:
            self.update_bounds()

    def set_margins(self, margin_min: int, margin_max: int) -> None:
        if margin_min < 0 or margin_max < 0:
            raise ValueError("axis margins must be >= 0")
        self.margin_min = int(margin_min)
        self.margin_max = int(margin_max)
        self._fire(AXIS_CHANGED)

    def set_window(self, win_pos: float, win_width: float) -> None:
        if win_width < 0:
            raise ValueError("window width must be >= 0")
        self.win_pos = float(win_pos)
        self.win_width = float(win_width)
        self._fire(AXIS_CHANGED)

    def set_use_window(self, use_window: bool) -> None:
        self.use_window = bool(use_window)
        self._fire(AXIS_CHANGED)

    def set_enable_subticks(self, enable: bool) -> None:
        if self.enable_subticks == bool(enable):
            return
        self.enable_subticks = bool(enable)
        self.update_bounds()
        self._fire(AXIS_CHANGED)

    @abstractmethod
    def accept_dataset(self, dataset: Dataset) -> bool:
        raise NotImplementedError

    @abstractmethod
    def update_bounds(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def data_bounds(self) -> tuple[float, float]:
        raise NotImplementedError

    @abstractmethod
    def get_value(self, step: int) -> float:
        raise NotImplementedError

    @abstractmethod
    def get_label(self, step: int) -> str:
        raise NotImplementedError

    @abstractmethod
    def is_end(self, step: int) -> bool:
        raise NotImplementedError

    @abstractmethod
    def has_labels(self) -> bool:
        raise NotImplementedError

    def _scale(self, value: float) -> float:
        return value

    def _unscale(self, value: float) -> float:
        return value

    def visible_bounds(self) -> tuple[float, float]:
        if self.use_window:
            return (self.win_pos, self.win_pos + self.win_width)
        return self.data_bounds()

    def to_graphics(self, min_coord: float, g_range: float, value: float) -> float:
        """Pixel coordinate of `value` inside [min_coord, min_coord + g_range]."""
        lo, hi = self.visible_bounds()
        min_coord += self.margin_min
        g_range = max(0, g_range - (self.margin_min + self.margin_max))
        return scales.to_graphics(
            min_coord, g_range, self._scale(lo), self._scale(hi), 0, self.is_vertical, self._scale(value)
        )

    def to_data(self, min_coord: float, g_range: float, g: float) -> float:
        lo, hi = self.visible_bounds()
        min_coord += self.margin_min
        g_range = max(0, g_range - (self.margin_min + self.margin_max))
        return self._unscale(
            scales.to_data(min_coord, g_range, self._scale(lo), self._scale(hi), 0, self.is_vertical, g)
        )

    def is_visible(self, value: float) -> bool:
        lo, hi = self.visible_bounds()
        return lo <= value <= hi

    def bound_value(self, value: float) -> float:
        if not self.use_window:
            return value
        return min(max(value, self.win_pos), self.win_pos + self.win_width)

    def tick_values(self) -> list[float]:
        if not self.has_labels():
            return []
        values: list[float] = []
        step = 0
        while not self.is_end(step):
            values.append(self.get_value(step))
            step += 1
        return values

    def tick_labels(self) -> list[str]:
        if not self.has_labels():
            return []
        labels: list[str] = []
        step = 0
        while not self.is_end(step):
            labels.append(self.get_label(step))
            step += 1
        return labels

    def longest_label_extent(self, surface: DrawingSurface) -> tuple[int, int]:
        surface.set_font(self.label_font)
        widest = (0, 0)
        for label in self.tick_labels():
            extent = surface.text_extent(label)
            if extent[0] > widest[0]:
                widest = extent
        return widest

    def extent(self, surface: DrawingSurface) -> int:
        """Pixels the axis needs across its direction (width for vertical axes)."""
        w, h = self.longest_label_extent(surface)
        return (w if self.is_vertical else h) + self.tick_length + self.label_gap

    def draw(self, surface: DrawingSurface, rect: Rect) -> None:
        """Draw the axis line, tick marks and labels.

        For vertical axes `rect` shares its y/height with the data area; for
        horizontal axes it shares x/width.
        """
        x, y, w, h = rect
        surface.set_pen(self.line_pen)
        if self.location == "left":
            line = x + w - 1
            surface.draw_line(line, y, line, y + h)
        elif self.location == "right":
            line = x
            surface.draw_line(line, y, line, y + h)
        elif self.location == "top":
            line = y + h - 1
            surface.draw_line(x, line, x + w, line)
        else:
            line = y
            surface.draw_line(x, line, x + w, line)

        surface.set_font(self.label_font)
        step = 0
        while self.has_labels() and not self.is_end(step):
            value = self.get_value(step)
            label = self.get_label(step)
            step += 1
            if not self.is_visible(value):
                continue
            if self.is_vertical:
                coord = self.to_graphics(y, h, value)
            else:
                coord = self.to_graphics(x, w, value)
            if not math.isfinite(coord):
                continue
            self._draw_tick(surface, line, scales.pixel(coord), label)

    def _draw_tick(self, surface: DrawingSurface, line: int, c: int, label: str) -> None:
        tw, th = surface.text_extent(label)
        surface.set_pen(self.line_pen)
        if self.location == "left":
            surface.draw_line(line - self.tick_length, c, line, c)
            tx, ty = line - self.tick_length - self.label_gap - tw, c - th // 2
        elif self.location == "right":
            surface.draw_line(line, c, line + self.tick_length, c)
            tx, ty = line + self.tick_length + self.label_gap, c - th // 2
        elif self.location == "top":
            surface.draw_line(c, line - self.tick_length, c, line)
            tx, ty = c - tw // 2, line - self.tick_length - self.label_gap - th
        else:
            surface.draw_line(c, line, c, line + self.tick_length)
            tx, ty = c - tw // 2, line + self.tick_length + self.label_gap
        surface.set_pen(self.label_pen)
        surface.draw_text(label, tx, ty)

    def draw_grid_lines(self, surface: DrawingSurface, rect: Rect) -> None:
        x, y, w, h = rect
        surface.set_pen(self.grid_pen)
        for value in self.tick_values():
            if not self.is_visible(value):
                continue
            if self.is_vertical:
                coord = self.to_graphics(y, h, value)
            else:
                coord = self.to_graphics(x, w, value)
            if not math.isfinite(coord):
                continue
            c = scales.pixel(coord)
            if self.is_vertical:
                surface.draw_line(x, c, x + w - 1, c)
            else:
                surface.draw_line(c, y, c, y + h - 1)
