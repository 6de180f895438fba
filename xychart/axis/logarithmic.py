from __future__ import annotations

import logging
import math
import re

from xychart.axis.base import AXIS_CHANGED, AxisLocation
from xychart.axis.number import NumberAxis
from xychart.dataset import Dataset


LOGGER = logging.getLogger(__name__)

_SHORT_EXPONENT = re.compile(r"e\+(\d\d)$")


def log_base(value: float, base: float) -> float:
    """Logarithm that degrades instead of raising: -inf for 0, NaN below."""
    if value > 0:
        if base == 10.0:
            return math.log10(value)
        return math.log(value) / math.log(base)
    if value == 0:
        return -math.inf
    return math.nan


def _snap(exponent: float) -> float:
    nearest = round(exponent)
    if abs(exponent - nearest) <= 1e-9 * max(1.0, abs(exponent)):
        return float(nearest)
    return exponent


class LogarithmicNumberAxis(NumberAxis):
    """Number axis whose pixel mapping and ticks are logarithmic.

    Only datasets with strictly positive values along the axis dimension are
    accepted. Automatic bounds snap outwards to whole powers of the base;
    with subticks each power is split into `base - 1` ticks placed at
    1x, 2x, ... (base-1)x of the power, as on log paper.
    """

    def __init__(
        self,
        location: AxisLocation,
        *,
        log_base: float = 10.0,
        long_exponent: bool = False,
        label_count: int = 5,
        multiplier: float = 1.0,
    ) -> None:
        super().__init__(location, label_count=label_count, multiplier=multiplier)
        self.long_exponent = long_exponent
        self.log_base = 10.0
        self.min_value = 1.0
        self.max_value = 100.0
        self._apply_log_base(log_base)

    def _apply_log_base(self, base: float) -> None:
        if not math.isfinite(base) or base <= 1.0:
            raise ValueError("log base must be > 1")
        self.log_base = float(base)
        self.label_format.tick_format = "%2.2e" if self.log_base == 10.0 else "%2.2f"

    def set_log_base(self, base: float) -> None:
        self._apply_log_base(base)
        self.update_bounds()
        self._fire(AXIS_CHANGED)

    def set_long_exponent(self, enable: bool) -> None:
        self.long_exponent = bool(enable)
        self._fire(AXIS_CHANGED)

    @property
    def subticks_per_power(self) -> int:
        return max(1, int(self.log_base) - 1)

    def accept_dataset(self, dataset: Dataset) -> bool:
        return dataset.min_value(self.is_vertical) > 0

    def _scale(self, value: float) -> float:
        return log_base(value, self.log_base)

    def _unscale(self, value: float) -> float:
        return self.log_base**value

    def _fixed_ticks_calc(self) -> None:
        if not self.min_value > 0:
            self._reset_degenerate(f"minimum {self.min_value!r} is not positive")
            return
        super()._fixed_ticks_calc()

    def _automatic_ticks_calc(self) -> None:
        lo, hi = self.min_value, self.max_value
        if not (math.isfinite(lo) and math.isfinite(hi) and lo > 0 and hi > 0):
            self._reset_degenerate(f"data range [{lo!r}, {hi!r}] is not positive and finite")
            return

        max_exp = math.ceil(_snap(log_base(hi, self.log_base)))
        min_exp = math.floor(_snap(log_base(lo, self.log_base)))
        # Snapping may land just inside the data; push out to enclose it.
        while self.log_base**max_exp < hi:
            max_exp += 1
        while self.log_base**min_exp > lo:
            min_exp -= 1
        # One power of separation when all values fall on the same power.
        if max_exp == min_exp:
            max_exp += 1

        self.max_value = self.log_base**max_exp
        self.min_value = self.log_base**min_exp
        count = max_exp - min_exp + 1
        if self.enable_subticks:
            count = (count - 1) * self.subticks_per_power + 1
        self.label_count = count
        self._has_labels = True

    def get_value(self, step: int) -> float:
        lo, hi = self.data_bounds()
        if self._fixed_bounds:
            if lo <= 0:
                return lo
            log_min = log_base(lo, self.log_base)
            log_max = log_base(hi, self.log_base)
            log_interval = (log_max - log_min) / (self.label_count - 1)
            return lo * self.log_base ** (step * log_interval)
        if self.enable_subticks:
            per_power = self.subticks_per_power
            value = lo * self.log_base ** (step // per_power)
            return value + value * (step % per_power)
        return lo * self.log_base**step

    def format_label(self, value: float) -> str:
        label = super().format_label(value)
        if self.log_base == 10.0 and not self.long_exponent:
            label = _SHORT_EXPONENT.sub(r"e\1", label)
        return label

    def is_visible(self, value: float) -> bool:
        if value == 0.0:
            return False
        return super().is_visible(value)
