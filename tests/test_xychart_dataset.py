from __future__ import annotations

import math
import unittest

import numpy as np

from xychart.axis import NumberAxis
from xychart.dataset import XYDataset, XYSeriesDataset
from xychart.renderer import XYHistoRenderer


class _Counter:
    def __init__(self) -> None:
        self.calls = 0

    def __call__(self, *_: object) -> None:
        self.calls += 1


class _PairsDataset(XYDataset):
    """Minimal pure-python dataset used to exercise the XYDataset defaults."""

    def __init__(self, series: list[list[tuple[float, float]]]) -> None:
        super().__init__()
        self.series = series

    @property
    def serie_count(self) -> int:
        return len(self.series)

    def count(self, serie: int) -> int:
        return len(self.series[serie])

    def get_x(self, index: int, serie: int) -> float:
        return self.series[serie][index][0]

    def get_y(self, index: int, serie: int) -> float:
        return self.series[serie][index][1]


class ObserverTests(unittest.TestCase):
    def test_each_mutation_notifies_once(self) -> None:
        ds = XYSeriesDataset()
        counter = _Counter()
        ds.on_changed(counter)
        ds.add_serie([1.0, 2.0])
        ds.append(0, 5.0, 3.0)
        self.assertEqual(counter.calls, 2)

    def test_listener_receives_dataset(self) -> None:
        ds = XYSeriesDataset()
        seen: list[object] = []
        ds.on_changed(seen.append)
        ds.add_serie([1.0])
        self.assertEqual(len(seen), 1)
        self.assertIs(seen[0], ds)

    def test_detached_listener_is_not_called(self) -> None:
        ds = XYSeriesDataset()
        counter = _Counter()
        handle = ds.on_changed(counter)
        handle.detach()
        handle.detach()
        ds.add_serie([1.0])
        self.assertEqual(counter.calls, 0)
        self.assertFalse(handle.attached)
        self.assertEqual(ds.listener_count(), 0)

    def test_listener_may_detach_during_notification(self) -> None:
        ds = XYSeriesDataset()
        counter = _Counter()
        handles = []

        def once(*_: object) -> None:
            handles[0].detach()

        handles.append(ds.on_changed(once))
        ds.on_changed(counter)
        ds.add_serie([1.0])
        ds.add_serie([2.0])
        self.assertEqual(counter.calls, 2)
        self.assertEqual(ds.listener_count("dataset_changed"), 1)


class BatchedUpdateTests(unittest.TestCase):
    def test_updating_scope_collapses_notifications(self) -> None:
        ds = XYSeriesDataset()
        counter = _Counter()
        ds.on_changed(counter)
        with ds.updating():
            ds.add_serie([1.0, 2.0])
            ds.add_serie([3.0, 4.0])
            ds.append(1, 2.0, 9.0)
            self.assertEqual(counter.calls, 0)
            self.assertTrue(ds.is_updating)
        self.assertEqual(counter.calls, 1)
        self.assertFalse(ds.is_updating)

    def test_nested_scopes_notify_at_outermost_exit(self) -> None:
        ds = XYSeriesDataset()
        counter = _Counter()
        ds.on_changed(counter)
        ds.begin_update()
        ds.begin_update()
        ds.add_serie([1.0])
        ds.end_update()
        self.assertEqual(counter.calls, 0)
        ds.end_update()
        self.assertEqual(counter.calls, 1)

    def test_scope_without_changes_is_silent(self) -> None:
        ds = XYSeriesDataset()
        counter = _Counter()
        ds.on_changed(counter)
        with ds.updating():
            pass
        self.assertEqual(counter.calls, 0)

    def test_scope_exits_on_exception(self) -> None:
        ds = XYSeriesDataset()
        counter = _Counter()
        ds.on_changed(counter)
        with self.assertRaises(RuntimeError):
            with ds.updating():
                ds.add_serie([1.0])
                raise RuntimeError("boom")
        self.assertFalse(ds.is_updating)
        self.assertEqual(counter.calls, 1)

    def test_unmatched_end_update_warns(self) -> None:
        ds = XYSeriesDataset()
        with self.assertLogs("xychart.dataset", level="WARNING"):
            ds.end_update()
        self.assertFalse(ds.is_updating)


class XYSeriesDatasetTests(unittest.TestCase):
    def test_min_max_per_dimension(self) -> None:
        ds = XYSeriesDataset()
        ds.add_serie([5.0, -2.0, 7.0], x=[10.0, 11.0, 12.0])
        ds.add_serie([1.0, 30.0], x=[-4.0, 0.0])
        self.assertEqual(ds.min_value(True), -2.0)
        self.assertEqual(ds.max_value(True), 30.0)
        self.assertEqual(ds.min_value(False), -4.0)
        self.assertEqual(ds.max_value(False), 12.0)

    def test_nan_samples_are_ignored(self) -> None:
        ds = XYSeriesDataset()
        ds.add_serie([math.nan, 3.0, None, float("inf")])
        self.assertEqual(ds.min_value(True), 3.0)
        self.assertEqual(ds.max_value(True), 3.0)
        self.assertTrue(math.isnan(ds.get_y(3, 0)))

    def test_empty_dataset_reports_nan(self) -> None:
        ds = XYSeriesDataset()
        self.assertTrue(math.isnan(ds.min_value(True)))
        ds.add_serie([])
        self.assertTrue(math.isnan(ds.max_value(False)))
        self.assertEqual(ds.count(0), 0)

    def test_point_access_and_names(self) -> None:
        ds = XYSeriesDataset()
        ds.add_serie([1.5, 2.5], x=[0.0, 10.0], name="rain")
        ds.add_serie(np.array([4, 5], dtype=np.int32))
        self.assertEqual(ds.serie_count, 2)
        self.assertEqual(ds.get_x(1, 0), 10.0)
        self.assertEqual(ds.get_y(1, 1), 5.0)
        self.assertEqual(ds.serie_name(0), "rain")
        self.assertEqual(ds.serie_name(1), "Serie 1")

    def test_stored_arrays_are_copies(self) -> None:
        source = np.array([1.0, 2.0])
        ds = XYSeriesDataset()
        ds.add_serie(source)
        source[0] = 99.0
        self.assertEqual(ds.get_y(0, 0), 1.0)

    def test_set_and_remove_serie(self) -> None:
        ds = XYSeriesDataset()
        ds.add_serie([1.0, 2.0])
        ds.add_serie([3.0])
        ds.set_serie(0, [7.0, 8.0, 9.0])
        self.assertEqual(ds.count(0), 3)
        ds.remove_serie(1)
        self.assertEqual(ds.serie_count, 1)
        np.testing.assert_allclose(ds.ys(0), [7.0, 8.0, 9.0])
        np.testing.assert_allclose(ds.xs(0), [0.0, 1.0, 2.0])

    def test_base_reduction_matches_array_reduction(self) -> None:
        pairs = _PairsDataset([[(1.0, 4.0), (2.0, math.nan)], [(-3.0, 8.0)]])
        self.assertEqual(pairs.min_value(False), -3.0)
        self.assertEqual(pairs.max_value(True), 8.0)
        self.assertEqual(pairs.min_value(True), 4.0)
        self.assertTrue(math.isnan(_PairsDataset([]).max_value(True)))


class NonFiniteAppendTests(unittest.TestCase):
    def test_appended_infinity_is_stored_as_nan(self) -> None:
        ds = XYSeriesDataset()
        ds.add_serie([1.0, 2.0])
        ds.append(0, 2.0, math.inf)
        ds.append(0, -math.inf, 1.5)
        self.assertTrue(math.isnan(ds.get_y(2, 0)))
        self.assertTrue(math.isnan(ds.get_x(3, 0)))
        self.assertEqual(ds.max_value(True), 2.0)
        self.assertEqual(ds.min_value(False), 0.0)

    def test_appended_infinity_keeps_axis_on_finite_data(self) -> None:
        ds = XYSeriesDataset()
        ds.add_serie([1.0, 2.0])
        axis = NumberAxis("left")
        axis.add_dataset(ds)
        ds.append(0, 2.0, math.inf)
        lo, hi = axis.data_bounds()
        self.assertLessEqual(lo, 1.0)
        self.assertGreaterEqual(hi, 2.0)
        self.assertTrue(axis.has_labels())


class RendererAttachmentTests(unittest.TestCase):
    def test_renderer_restyle_counts_as_dataset_change(self) -> None:
        ds = XYSeriesDataset()
        counter = _Counter()
        ds.on_changed(counter)
        renderer = XYHistoRenderer()
        ds.set_renderer(renderer)
        self.assertIs(ds.renderer, renderer)
        self.assertEqual(counter.calls, 1)
        renderer.set_bar_width(9)
        self.assertEqual(counter.calls, 2)

    def test_replaced_renderer_is_detached(self) -> None:
        ds = XYSeriesDataset()
        first = XYHistoRenderer()
        ds.set_renderer(first)
        ds.set_renderer(XYHistoRenderer())
        self.assertEqual(first.listener_count(), 0)
        counter = _Counter()
        ds.on_changed(counter)
        first.set_bar_width(3)
        self.assertEqual(counter.calls, 0)


if __name__ == "__main__":
    unittest.main()
