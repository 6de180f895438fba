from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from xychart.observer import Observable
from xychart.style.art import default_colour
from xychart.style.theme import DEFAULT_THEME, RGBA
from xychart.surface import NO_BRUSH, Brush, Direction, DrawingSurface, Pen, Rect


class AreaDraw(Observable, ABC):
    """Strategy that paints a rectangular area: plot background, bar body, etc."""

    def __init__(self) -> None:
        super().__init__()

    @abstractmethod
    def draw(self, surface: DrawingSurface, rect: Rect) -> None:
        raise NotImplementedError

    def _need_redraw(self) -> None:
        self._fire("need_redraw")


class NoAreaDraw(AreaDraw):
    def draw(self, surface: DrawingSurface, rect: Rect) -> None:
        return None


class FillAreaDraw(AreaDraw):
    def __init__(
        self,
        border_pen: Pen | None = None,
        fill_brush: Brush | None = None,
    ) -> None:
        super().__init__()
        self.border_pen = border_pen if border_pen is not None else Pen(DEFAULT_THEME.color("bar_border"))
        self.fill_brush = fill_brush if fill_brush is not None else Brush(DEFAULT_THEME.color("plot_background"))

    def set_border_pen(self, pen: Pen) -> None:
        self.border_pen = pen
        self._need_redraw()

    def set_fill_brush(self, brush: Brush) -> None:
        self.fill_brush = brush
        self._need_redraw()

    def draw(self, surface: DrawingSurface, rect: Rect) -> None:
        surface.set_pen(self.border_pen)
        surface.set_brush(self.fill_brush)
        surface.draw_rectangle(*rect)


class GradientAreaDraw(AreaDraw):
    def __init__(
        self,
        border_pen: Pen | None = None,
        colour1: RGBA | None = None,
        colour2: RGBA | None = None,
        direction: Direction = "east",
    ) -> None:
        super().__init__()
        self.border_pen = border_pen if border_pen is not None else Pen(DEFAULT_THEME.color("bar_border"))
        self.colour1 = colour1 if colour1 is not None else DEFAULT_THEME.color("gradient_start")
        self.colour2 = colour2 if colour2 is not None else DEFAULT_THEME.color("gradient_end")
        self.direction: Direction = direction

    def set_colour1(self, colour: RGBA) -> None:
        self.colour1 = colour
        self._need_redraw()

    def set_colour2(self, colour: RGBA) -> None:
        self.colour2 = colour
        self._need_redraw()

    def set_direction(self, direction: Direction) -> None:
        if direction not in ("east", "west", "north", "south"):
            raise ValueError(f"unsupported gradient direction: {direction}")
        self.direction = direction
        self._need_redraw()

    def draw(self, surface: DrawingSurface, rect: Rect) -> None:
        surface.gradient_fill_linear(rect, self.colour1, self.colour2, self.direction)
        surface.set_pen(self.border_pen)
        surface.set_brush(NO_BRUSH)
        surface.draw_rectangle(*rect)


@dataclass(eq=False)
class AreaDrawCollection:
    """Per-series area draws; unset series fall back to a fill in their default colour."""

    _areas: dict[int, AreaDraw] = field(default_factory=dict)

    def set_area_draw(self, serie: int, area_draw: AreaDraw) -> None:
        if serie < 0:
            raise ValueError("serie index must be >= 0")
        self._areas[serie] = area_draw

    def get_area_draw(self, serie: int) -> AreaDraw:
        area = self._areas.get(serie)
        if area is None:
            area = FillAreaDraw(Pen(DEFAULT_THEME.color("bar_border")), Brush(default_colour(serie)))
            self._areas[serie] = area
        return area
