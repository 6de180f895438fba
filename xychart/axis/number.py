from __future__ import annotations

import logging
import math

from xychart.axis.base import AXIS_CHANGED, BOUNDS_CHANGED, Axis, AxisLocation
from xychart.axis.labels import LabelFormat
from xychart.dataset import Dataset
from xychart.scales import is_normal_value
from xychart.surface import DrawingSurface


LOGGER = logging.getLogger(__name__)


class NumberAxis(Axis):
    """Linear numeric axis.

    In automatic mode the bounds follow the attached datasets and are rounded
    outwards to the order of magnitude of their range, which also becomes
    the tick interval. `set_fixed_bounds` switches to fixed mode, where the
    interval is `(max - min) / (label_count - 1)`.
    """

    def __init__(
        self,
        location: AxisLocation,
        *,
        tick_format: str = "%.2f",
        label_count: int = 5,
        multiplier: float = 1.0,
        integer_values: bool = False,
    ) -> None:
        super().__init__(location)
        if label_count < 2:
            raise ValueError("label_count must be >= 2")
        self.label_format = LabelFormat(tick_format=tick_format, multiplier=multiplier, integer_values=integer_values)
        self.min_value = 0.0
        self.max_value = 100.0
        self.label_interval = 10.0
        self.label_count = label_count
        self._has_labels = False
        self._fixed_bounds = False

    @property
    def fixed_bounds(self) -> bool:
        return self._fixed_bounds

    @property
    def tick_format(self) -> str:
        return self.label_format.tick_format

    @property
    def multiplier(self) -> float:
        return self.label_format.multiplier

    def set_tick_format(self, tick_format: str) -> None:
        self.label_format.tick_format = tick_format
        self._fire(AXIS_CHANGED)

    def set_multiplier(self, multiplier: float) -> None:
        self.label_format.multiplier = float(multiplier)
        self._fire(AXIS_CHANGED)

    def set_integer_values(self, integer_values: bool) -> None:
        if self.label_format.integer_values == bool(integer_values):
            return
        self.label_format.integer_values = bool(integer_values)
        self._fire(AXIS_CHANGED)

    def set_label_count(self, label_count: int) -> None:
        if label_count < 2:
            raise ValueError("label_count must be >= 2")
        # Automatic mode derives the count from the data range.
        if self._fixed_bounds and self.label_count != label_count:
            self.label_count = int(label_count)
            self._fixed_ticks_calc()
            self._fire(AXIS_CHANGED)

    def accept_dataset(self, dataset: Dataset) -> bool:
        return True

    def set_fixed_bounds(self, min_value: float, max_value: float) -> None:
        lo, hi = float(min_value), float(max_value)
        if lo > hi:
            lo, hi = hi, lo
        self.min_value = lo
        self.max_value = hi
        self._fixed_bounds = True
        self._fixed_ticks_calc()
        self._fire(BOUNDS_CHANGED)

    def clear_fixed_bounds(self) -> None:
        if not self._fixed_bounds:
            return
        self._fixed_bounds = False
        self.update_bounds()

    def update_bounds(self) -> None:
        if self._fixed_bounds:
            self._fixed_ticks_calc()
        else:
            vertical = self.is_vertical
            lo: float | None = None
            hi: float | None = None
            for dataset in self._datasets:
                dmin = dataset.min_value(vertical)
                dmax = dataset.max_value(vertical)
                if math.isnan(dmin) or math.isnan(dmax):
                    continue
                lo = dmin if lo is None else min(lo, dmin)
                hi = dmax if hi is None else max(hi, dmax)
            if lo is not None and hi is not None:
                self.min_value = lo
                self.max_value = hi
            self._automatic_ticks_calc()
        self._fire(BOUNDS_CHANGED)

    def _reset_degenerate(self, reason: str) -> None:
        LOGGER.warning("%s: %s, resetting to empty range", type(self).__name__, reason)
        self.min_value = 0.0
        self.max_value = 0.0
        self.label_interval = 0.0
        self._has_labels = False

    def _fixed_ticks_calc(self) -> None:
        self._has_labels = False
        interval = (self.max_value - self.min_value) / (self.label_count - 1)
        if not is_normal_value(interval):
            self._reset_degenerate(f"tick interval {interval!r} is not a normal value")
            return
        self.label_interval = interval
        if abs(self.max_value - self.min_value) > 1e-9:
            self._has_labels = True

    def _automatic_ticks_calc(self) -> None:
        lo, hi = self.min_value, self.max_value
        if not (math.isfinite(lo) and math.isfinite(hi)):
            self._reset_degenerate(f"data range [{lo!r}, {hi!r}] is not finite")
            return

        # Equal bounds get a range of 1 (wider for values where 0.5 is below precision).
        if hi == lo:
            delta = max(0.5, abs(hi) * 1e-9)
            hi += delta
            lo -= delta

        value_range = abs(hi - lo)
        if not is_normal_value(value_range) or value_range == 0:
            self._reset_degenerate(f"data range {value_range!r} is not usable")
            return

        magnitude = 10.0 ** math.floor(math.log10(value_range))
        nice_hi = math.ceil(hi / magnitude) * magnitude
        nice_lo = math.floor(lo / magnitude) * magnitude
        if nice_hi < hi:
            nice_hi += magnitude
        if nice_lo > lo:
            nice_lo -= magnitude

        interval = magnitude
        count = int(round((nice_hi - nice_lo) / interval)) + 1
        if self.enable_subticks:
            interval /= 10.0
            count = (count - 1) * 10 + 1

        self.min_value = nice_lo
        self.max_value = nice_hi
        self.label_interval = interval
        self.label_count = count
        self._has_labels = True

    def data_bounds(self) -> tuple[float, float]:
        return (self.min_value, self.max_value)

    def get_value(self, step: int) -> float:
        return self.min_value + step * self.label_interval

    def format_label(self, value: float) -> str:
        return self.label_format.format(value)

    def get_label(self, step: int) -> str:
        return self.format_label(self.get_value(step))

    def is_end(self, step: int) -> bool:
        return step >= self.label_count

    def has_labels(self) -> bool:
        return self._has_labels

    def longest_label_extent(self, surface: DrawingSurface) -> tuple[int, int]:
        surface.set_font(self.label_font)
        size_min = surface.text_extent(self.format_label(self.min_value))
        size_max = surface.text_extent(self.format_label(self.max_value))
        return size_min if size_min[0] > size_max[0] else size_max
