from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
import logging
import math
from typing import TYPE_CHECKING, Any, Callable, Iterator

import numpy as np

from xychart.adapters import normalize_xy
from xychart.observer import Listener, ListenerHandle, Observable

if TYPE_CHECKING:
    from xychart.renderer.base import Renderer


LOGGER = logging.getLogger(__name__)

DATASET_CHANGED = "dataset_changed"


class Dataset(Observable, ABC):
    """Base for data containers observed by axes, renderers and plots.

    Mutations call `dataset_changed()`. Inside `updating()` (or between
    `begin_update()` and `end_update()`) notifications are deferred and
    collapsed into one when the outermost scope exits.
    """

    def __init__(self) -> None:
        super().__init__()
        self._update_depth = 0
        self._changed = False
        self._renderer: Renderer | None = None
        self._renderer_handle: ListenerHandle | None = None

    @property
    def renderer(self) -> Renderer | None:
        return self._renderer

    def set_renderer(self, renderer: Renderer | None) -> None:
        if self._renderer_handle is not None:
            self._renderer_handle.detach()
            self._renderer_handle = None
        self._renderer = renderer
        if renderer is not None:
            self._renderer_handle = renderer.add_listener("need_redraw", lambda _renderer: self.dataset_changed())
        self.dataset_changed()

    def on_changed(self, callback: Listener) -> ListenerHandle:
        return self.add_listener(DATASET_CHANGED, callback)

    @property
    def is_updating(self) -> bool:
        return self._update_depth > 0

    def begin_update(self) -> None:
        self._update_depth += 1

    def end_update(self) -> None:
        if self._update_depth == 0:
            LOGGER.warning("end_update() called without matching begin_update()")
            return
        self._update_depth -= 1
        if self._update_depth == 0 and self._changed:
            self._changed = False
            self._fire(DATASET_CHANGED)

    @contextmanager
    def updating(self) -> Iterator[Dataset]:
        self.begin_update()
        try:
            yield self
        finally:
            self.end_update()

    def dataset_changed(self) -> None:
        if self.is_updating:
            self._changed = True
            return
        self._changed = False
        self._fire(DATASET_CHANGED)

    @property
    @abstractmethod
    def serie_count(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def count(self, serie: int) -> int:
        raise NotImplementedError

    @abstractmethod
    def min_value(self, vertical: bool) -> float:
        raise NotImplementedError

    @abstractmethod
    def max_value(self, vertical: bool) -> float:
        raise NotImplementedError

    def serie_name(self, serie: int) -> str:
        return f"Serie {serie}"


class XYDataset(Dataset):
    """Dataset of (x, y) samples grouped into series.

    `min_value(vertical)` / `max_value(vertical)` scan Y when `vertical` is
    true and X otherwise; NaN samples are ignored. An empty dataset reports
    NaN for both.
    """

    @abstractmethod
    def get_x(self, index: int, serie: int) -> float:
        raise NotImplementedError

    @abstractmethod
    def get_y(self, index: int, serie: int) -> float:
        raise NotImplementedError

    def min_value(self, vertical: bool) -> float:
        return self._reduce(vertical, min)

    def max_value(self, vertical: bool) -> float:
        return self._reduce(vertical, max)

    def _reduce(self, vertical: bool, pick: Callable[[float, float], float]) -> float:
        out = math.nan
        for serie in range(self.serie_count):
            for n in range(self.count(serie)):
                value = self.get_y(n, serie) if vertical else self.get_x(n, serie)
                if math.isnan(value):
                    continue
                out = value if math.isnan(out) else pick(out, value)
        return out


class XYSeriesDataset(XYDataset):
    """In-memory `XYDataset` keeping one pair of float64 arrays per series."""

    def __init__(self) -> None:
        super().__init__()
        self._xs: list[np.ndarray] = []
        self._ys: list[np.ndarray] = []
        self._names: list[str | None] = []

    @property
    def serie_count(self) -> int:
        return len(self._ys)

    def count(self, serie: int) -> int:
        return int(self._ys[serie].size)

    def get_x(self, index: int, serie: int) -> float:
        return float(self._xs[serie][index])

    def get_y(self, index: int, serie: int) -> float:
        return float(self._ys[serie][index])

    def serie_name(self, serie: int) -> str:
        name = self._names[serie]
        return name if name is not None else super().serie_name(serie)

    def xs(self, serie: int) -> np.ndarray:
        return self._xs[serie]

    def ys(self, serie: int) -> np.ndarray:
        return self._ys[serie]

    def add_serie(self, y: Any = None, *, x: Any = None, data: Any = None, name: str | None = None) -> int:
        series = normalize_xy(y=y, x=x, data=data, source_name=name)
        self._xs.append(series.x.copy())
        self._ys.append(series.y.copy())
        self._names.append(name)
        self.dataset_changed()
        return len(self._ys) - 1

    def set_serie(self, serie: int, y: Any = None, *, x: Any = None, data: Any = None) -> None:
        series = normalize_xy(y=y, x=x, data=data)
        self._xs[serie] = series.x.copy()
        self._ys[serie] = series.y.copy()
        self.dataset_changed()

    def append(self, serie: int, x: float, y: float) -> None:
        x, y = float(x), float(y)
        # Same convention as normalize_xy: non-finite samples are stored as NaN.
        self._xs[serie] = np.append(self._xs[serie], x if math.isfinite(x) else math.nan)
        self._ys[serie] = np.append(self._ys[serie], y if math.isfinite(y) else math.nan)
        self.dataset_changed()

    def remove_serie(self, serie: int) -> None:
        del self._xs[serie]
        del self._ys[serie]
        del self._names[serie]
        self.dataset_changed()

    def min_value(self, vertical: bool) -> float:
        return _nan_reduce(self._ys if vertical else self._xs, np.min)

    def max_value(self, vertical: bool) -> float:
        return _nan_reduce(self._ys if vertical else self._xs, np.max)


def _nan_reduce(arrays: list[np.ndarray], reducer: Callable[[np.ndarray], Any]) -> float:
    finite = [arr[~np.isnan(arr)] for arr in arrays]
    finite = [arr for arr in finite if arr.size]
    if not finite:
        return math.nan
    return float(reducer(np.concatenate(finite)))
