from __future__ import annotations

import unittest
from unittest import mock

from xychart.areadraw import AreaDrawCollection, FillAreaDraw, GradientAreaDraw, NoAreaDraw
from xychart.raster import RasterSurface
from xychart.style import DEFAULT_THEME, default_colour, hex_to_rgba, validate_theme_tokens
from xychart.surface import Brush, Pen


class ThemeTokenTests(unittest.TestCase):
    def test_defaults(self) -> None:
        theme = validate_theme_tokens()
        self.assertEqual(theme, DEFAULT_THEME)
        self.assertEqual(theme.color("grid_line"), (200, 200, 200, 255))

    def test_override_and_alpha(self) -> None:
        theme = validate_theme_tokens({"grid_line": "#11223344", "font_size_px": 14})
        self.assertEqual(theme.color("grid_line"), (17, 34, 51, 68))
        self.assertEqual(theme.font_size_px, 14.0)

    def test_rejects_bad_tokens(self) -> None:
        with self.assertRaises(ValueError):
            validate_theme_tokens({"unknown": "#FFFFFF"})
        with self.assertRaises(ValueError):
            validate_theme_tokens({"axis_line": "black"})
        with self.assertRaises(ValueError):
            validate_theme_tokens({"font_family": "  "})
        with self.assertRaises(ValueError):
            validate_theme_tokens({"font_size_px": 0})
        with self.assertRaises(ValueError):
            DEFAULT_THEME.color("font_family")
        with self.assertRaises(ValueError):
            hex_to_rgba("#12345")

    def test_default_colours_cycle(self) -> None:
        self.assertEqual(default_colour(0), (255, 0, 0, 255))
        self.assertEqual(default_colour(8), default_colour(0))


class AreaDrawTests(unittest.TestCase):
    def test_no_area_draw_is_a_no_op(self) -> None:
        surface = mock.MagicMock()
        NoAreaDraw().draw(surface, (0, 0, 10, 10))
        self.assertEqual(surface.method_calls, [])

    def test_fill_area_draw_sets_pen_and_brush(self) -> None:
        pen = Pen((1, 1, 1, 255))
        brush = Brush((9, 9, 9, 255))
        surface = mock.MagicMock()
        FillAreaDraw(pen, brush).draw(surface, (1, 2, 3, 4))
        self.assertEqual(
            surface.method_calls,
            [mock.call.set_pen(pen), mock.call.set_brush(brush), mock.call.draw_rectangle(1, 2, 3, 4)],
        )

    def test_gradient_area_draw_fills_then_outlines(self) -> None:
        surface = RasterSurface(12, 12)
        GradientAreaDraw(Pen((0, 0, 0, 255)), (255, 0, 0, 255), (0, 0, 255, 255), "east").draw(surface, (0, 0, 12, 12))
        self.assertEqual(tuple(surface.canvas[0, 0]), (0, 0, 0, 255))
        self.assertGreater(int(surface.canvas[6, 1, 0]), int(surface.canvas[6, 1, 2]))
        self.assertGreater(int(surface.canvas[6, 10, 2]), int(surface.canvas[6, 10, 0]))

    def test_setters_fire_need_redraw(self) -> None:
        fill = FillAreaDraw()
        gradient = GradientAreaDraw()
        listener = mock.Mock()
        fill.add_listener("need_redraw", listener)
        gradient.add_listener("need_redraw", listener)
        fill.set_fill_brush(Brush((1, 2, 3, 255)))
        fill.set_border_pen(Pen())
        gradient.set_colour1((0, 0, 0, 255))
        gradient.set_colour2((0, 0, 0, 255))
        gradient.set_direction("north")
        self.assertEqual(listener.call_count, 5)
        with self.assertRaises(ValueError):
            gradient.set_direction("sideways")  # type: ignore[arg-type]

    def test_collection_defaults_to_series_colour(self) -> None:
        areas = AreaDrawCollection()
        area = areas.get_area_draw(2)
        self.assertIsInstance(area, FillAreaDraw)
        self.assertEqual(area.fill_brush.color, default_colour(2))
        self.assertIs(areas.get_area_draw(2), area)

        custom = NoAreaDraw()
        areas.set_area_draw(0, custom)
        self.assertIs(areas.get_area_draw(0), custom)
        with self.assertRaises(ValueError):
            areas.set_area_draw(-1, custom)


if __name__ == "__main__":
    unittest.main()
