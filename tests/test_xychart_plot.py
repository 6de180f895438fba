from __future__ import annotations

import unittest
from unittest import mock

import numpy as np

from xychart import (
    Brush,
    FillAreaDraw,
    LogarithmicNumberAxis,
    NoAreaDraw,
    NumberAxis,
    RasterSurface,
    XYHistoRenderer,
    XYLineRenderer,
    XYPlot,
    XYSeriesDataset,
)


RECT = (0, 0, 320, 200)


def _bar_plot() -> tuple[XYPlot, XYSeriesDataset, int, int, int]:
    plot = XYPlot()
    ds = XYSeriesDataset()
    ds.add_serie([1.0, 4.0, 2.0, 6.0], x=[0.0, 1.0, 2.0, 3.0], name="rain")
    ds.set_renderer(XYHistoRenderer(bar_width=6))
    d = plot.add_dataset(ds)
    h = plot.add_axis(NumberAxis("bottom"))
    v = plot.add_axis(NumberAxis("left"))
    return plot, ds, d, h, v


class XYPlotLinkTests(unittest.TestCase):
    def test_linking_attaches_dataset_to_axes(self) -> None:
        plot, ds, d, h, v = _bar_plot()
        self.assertTrue(plot.link_data_horizontal_axis(d, h))
        self.assertTrue(plot.link_data_vertical_axis(d, v))
        self.assertEqual(plot.dataset_axes(d), (plot.axes[h], plot.axes[v]))
        self.assertEqual(plot.axes[v].data_bounds(), (1.0, 6.0))
        self.assertEqual(plot.axes[h].data_bounds(), (0.0, 3.0))

    def test_log_axis_rejection_leaves_dataset_unlinked(self) -> None:
        plot = XYPlot()
        ds = XYSeriesDataset()
        ds.add_serie([0.0, 1.0])
        d = plot.add_dataset(ds)
        v = plot.add_axis(LogarithmicNumberAxis("left"))
        self.assertFalse(plot.link_data_vertical_axis(d, v))
        self.assertEqual(plot.dataset_axes(d), (None, None))

    def test_orientation_mismatch_raises(self) -> None:
        plot, _, d, h, v = _bar_plot()
        with self.assertRaises(ValueError):
            plot.link_data_horizontal_axis(d, v)
        with self.assertRaises(ValueError):
            plot.link_data_vertical_axis(d, h)

    def test_relinking_replaces_previous_axis(self) -> None:
        plot, ds, d, h, _ = _bar_plot()
        plot.link_data_horizontal_axis(d, h)
        top = plot.add_axis(NumberAxis("top"))
        plot.link_data_horizontal_axis(d, top)
        self.assertEqual(plot.axes[h].datasets, ())
        self.assertEqual(plot.axes[top].datasets, (ds,))

    def test_changes_are_rebroadcast(self) -> None:
        plot, ds, d, h, v = _bar_plot()
        plot.link_data_vertical_axis(d, v)
        listener = mock.Mock()
        plot.add_listener("plot_changed", listener)
        ds.append(0, 4.0, 3.0)
        listener.assert_called()
        listener.reset_mock()
        ds.renderer.set_bar_width(3)
        listener.assert_called()
        listener.reset_mock()
        plot.set_background(NoAreaDraw())
        listener.assert_called_once()


class XYPlotBackgroundTests(unittest.TestCase):
    def test_default_background_restyle_is_rebroadcast(self) -> None:
        plot = XYPlot()
        listener = mock.Mock()
        plot.add_listener("plot_changed", listener)
        plot.background.set_fill_brush(Brush((1, 2, 3, 255)))
        listener.assert_called_once()

    def test_replaced_background_is_detached(self) -> None:
        plot = XYPlot()
        first = FillAreaDraw()
        plot.set_background(first)
        plot.set_background(NoAreaDraw())
        self.assertEqual(first.listener_count(), 0)
        listener = mock.Mock()
        plot.add_listener("plot_changed", listener)
        first.set_fill_brush(Brush((1, 2, 3, 255)))
        listener.assert_not_called()


class XYPlotDrawTests(unittest.TestCase):
    def _render(self) -> np.ndarray:
        plot, _, d, h, v = _bar_plot()
        plot.link_data_horizontal_axis(d, h)
        plot.link_data_vertical_axis(d, v)
        surface = RasterSurface(RECT[2], RECT[3])
        plot.draw(surface, RECT)
        return surface.to_rgba()

    def test_bars_are_painted_in_series_colour(self) -> None:
        frame = self._render()
        red = (frame[:, :, 0] == 255) & (frame[:, :, 1] == 0) & (frame[:, :, 2] == 0)
        self.assertTrue(np.any(red))

    def test_render_is_deterministic(self) -> None:
        self.assertTrue(np.array_equal(self._render(), self._render()))

    def test_layout_reserves_room_for_axes(self) -> None:
        plot, _, d, h, v = _bar_plot()
        surface = RasterSurface(RECT[2], RECT[3])
        layout = plot.layout(surface, RECT)
        dx, dy, dw, dh = layout.data_rect
        left = layout.axis_rects[v]
        bottom = layout.axis_rects[h]
        self.assertGreater(dx, plot.padding)
        self.assertEqual(left[0] + left[2], dx)
        self.assertEqual(bottom[1], dy + dh)
        self.assertLessEqual(bottom[1] + bottom[3], RECT[3])

    def test_unlinked_dataset_is_skipped(self) -> None:
        plot = XYPlot()
        ds = XYSeriesDataset()
        ds.add_serie([1.0, 2.0])
        ds.set_renderer(XYLineRenderer())
        plot.add_dataset(ds)
        surface = mock.MagicMock()
        surface.text_extent.return_value = (30, 10)
        with self.assertLogs("xychart.plot", level="DEBUG"):
            plot.draw(surface, RECT)
        surface.draw_line.assert_not_called()

    def test_legend_lists_series_names(self) -> None:
        plot, _, d, h, v = _bar_plot()
        plot.link_data_horizontal_axis(d, h)
        plot.link_data_vertical_axis(d, v)
        plot.show_legend = True
        surface = mock.MagicMock()
        surface.text_extent.return_value = (30, 10)
        plot.draw(surface, RECT)
        texts = [c.args[0] for c in surface.draw_text.call_args_list]
        self.assertIn("rain", texts)

    def test_grid_lines_follow_ticks(self) -> None:
        plot, _, d, h, v = _bar_plot()
        plot.link_data_vertical_axis(d, v)
        plot.draw_grid = True
        surface = mock.MagicMock()
        surface.text_extent.return_value = (30, 10)
        with mock.patch.object(NumberAxis, "draw"):
            plot.draw(surface, RECT)
        # Bottom axis keeps its default 0..100 range with no labels; the left axis has six ticks.
        self.assertEqual(surface.draw_line.call_count, len(plot.axes[v].tick_values()))


if __name__ == "__main__":
    unittest.main()
