from __future__ import annotations

from dataclasses import dataclass
import logging

from xychart.areadraw import AreaDraw, FillAreaDraw
from xychart.axis.base import Axis
from xychart.dataset import XYDataset
from xychart.observer import ListenerHandle, Observable
from xychart.style.theme import DEFAULT_THEME, ChartTheme
from xychart.surface import NO_BRUSH, Brush, DrawingSurface, Font, Pen, Rect


LOGGER = logging.getLogger(__name__)

PLOT_CHANGED = "plot_changed"


@dataclass(frozen=True)
class PlotLayout:
    data_rect: Rect
    axis_rects: tuple[Rect, ...]


class XYPlot(Observable):
    """Wires XY datasets to axes and renderers and paints them on request.

    The host calls `draw(surface, rect)` from its redraw handler. Dataset,
    axis and renderer changes are re-broadcast as `plot_changed` so the host
    can schedule that redraw.
    """

    def __init__(self, theme: ChartTheme = DEFAULT_THEME) -> None:
        super().__init__()
        self.theme = theme
        self.background: AreaDraw = FillAreaDraw(Pen(theme.color("axis_line")), Brush(theme.color("plot_background")))
        self.draw_grid = True
        self.show_legend = False
        self.padding = 5
        self.legend_font = Font(theme.font_family, theme.font_size_px)
        self._datasets: list[XYDataset] = []
        self._axes: list[Axis] = []
        self._links: dict[int, dict[str, Axis]] = {}
        self._handles: list[ListenerHandle] = []
        self._background_handle = self.background.add_listener("need_redraw", self._changed)

    @property
    def datasets(self) -> tuple[XYDataset, ...]:
        return tuple(self._datasets)

    @property
    def axes(self) -> tuple[Axis, ...]:
        return tuple(self._axes)

    def _changed(self, *_: object) -> None:
        self._fire(PLOT_CHANGED)

    def set_background(self, background: AreaDraw) -> None:
        self._background_handle.detach()
        self.background = background
        self._background_handle = background.add_listener("need_redraw", self._changed)
        self._changed()

    def add_dataset(self, dataset: XYDataset) -> int:
        self._datasets.append(dataset)
        self._handles.append(dataset.on_changed(self._changed))
        self._changed()
        return len(self._datasets) - 1

    def add_axis(self, axis: Axis) -> int:
        self._axes.append(axis)
        self._handles.append(axis.add_listener("axis_changed", self._changed))
        self._handles.append(axis.add_listener("bounds_changed", self._changed))
        self._changed()
        return len(self._axes) - 1

    def link_data_horizontal_axis(self, dataset_index: int, axis_index: int) -> bool:
        return self._link(dataset_index, axis_index, "horizontal")

    def link_data_vertical_axis(self, dataset_index: int, axis_index: int) -> bool:
        return self._link(dataset_index, axis_index, "vertical")

    def _link(self, dataset_index: int, axis_index: int, direction: str) -> bool:
        dataset = self._datasets[dataset_index]
        axis = self._axes[axis_index]
        if (direction == "vertical") != axis.is_vertical:
            raise ValueError(f"axis at index {axis_index} is not {direction}")
        if not axis.add_dataset(dataset):
            return False
        previous = self._links.setdefault(dataset_index, {}).get(direction)
        if previous is not None and previous is not axis:
            previous.remove_dataset(dataset)
        self._links[dataset_index][direction] = axis
        return True

    def dataset_axes(self, dataset_index: int) -> tuple[Axis | None, Axis | None]:
        links = self._links.get(dataset_index, {})
        return (links.get("horizontal"), links.get("vertical"))

    def layout(self, surface: DrawingSurface, rect: Rect) -> PlotLayout:
        x, y, w, h = rect
        extents = [axis.extent(surface) for axis in self._axes]
        side = {loc: sum(e for a, e in zip(self._axes, extents) if a.location == loc) for loc in ("left", "right", "top", "bottom")}

        pad = self.padding
        data_x = x + pad + side["left"]
        data_y = y + pad + side["top"]
        data_w = max(0, w - 2 * pad - side["left"] - side["right"])
        data_h = max(0, h - 2 * pad - side["top"] - side["bottom"])

        cursors = {
            "left": data_x,
            "right": data_x + data_w,
            "top": data_y,
            "bottom": data_y + data_h,
        }
        axis_rects: list[Rect] = []
        for axis, ext in zip(self._axes, extents):
            loc = axis.location
            if loc == "left":
                cursors[loc] -= ext
                axis_rects.append((cursors[loc], data_y, ext, data_h))
            elif loc == "right":
                axis_rects.append((cursors[loc], data_y, ext, data_h))
                cursors[loc] += ext
            elif loc == "top":
                cursors[loc] -= ext
                axis_rects.append((data_x, cursors[loc], data_w, ext))
            else:
                axis_rects.append((data_x, cursors[loc], data_w, ext))
                cursors[loc] += ext
        return PlotLayout(data_rect=(data_x, data_y, data_w, data_h), axis_rects=tuple(axis_rects))

    def draw(self, surface: DrawingSurface, rect: Rect) -> None:
        layout = self.layout(surface, rect)
        data_rect = layout.data_rect
        self.background.draw(surface, data_rect)

        if self.draw_grid:
            for axis in self._axes:
                axis.draw_grid_lines(surface, data_rect)

        for index, dataset in enumerate(self._datasets):
            horizontal, vertical = self.dataset_axes(index)
            renderer = dataset.renderer
            if horizontal is None or vertical is None or renderer is None:
                LOGGER.debug("dataset %d is not fully linked, skipping", index)
                continue
            renderer.draw(surface, data_rect, horizontal, vertical, dataset)

        for axis, axis_rect in zip(self._axes, layout.axis_rects):
            axis.draw(surface, axis_rect)

        if self.show_legend:
            self._draw_legend(surface, data_rect)

    def _draw_legend(self, surface: DrawingSurface, data_rect: Rect) -> None:
        entries = [
            (dataset, serie)
            for dataset in self._datasets
            if dataset.renderer is not None
            for serie in range(dataset.serie_count)
        ]
        if not entries:
            return

        surface.set_font(self.legend_font)
        text_h = max(surface.text_extent(dataset.serie_name(serie))[1] for dataset, serie in entries)
        text_w = max(surface.text_extent(dataset.serie_name(serie))[0] for dataset, serie in entries)
        swatch_w = max(10, text_h * 2)
        item_h = text_h + 4
        pad = 4
        box_w = pad * 3 + swatch_w + text_w
        box_h = pad * 2 + item_h * len(entries)
        dx, dy, dw, _ = data_rect
        box_x = dx + dw - box_w - pad
        box_y = dy + pad

        surface.set_pen(Pen(self.theme.color("axis_line")))
        surface.set_brush(Brush(self.theme.color("background")))
        surface.draw_rectangle(box_x, box_y, box_w, box_h)
        for i, (dataset, serie) in enumerate(entries):
            row_y = box_y + pad + i * item_h
            sx = box_x + pad
            dataset.renderer.draw_legend_symbol(surface, sx, row_y + 2, sx + swatch_w, row_y + item_h - 2, serie=serie)
            surface.set_pen(Pen(self.theme.color("axis_label_text")))
            surface.set_brush(NO_BRUSH)
            surface.draw_text(dataset.serie_name(serie), sx + swatch_w + pad, row_y + 2)
