from __future__ import annotations

import numpy as np

from xychart.raster.canvas import _blend, fill_rect
from xychart.style.theme import RGBA


def draw_segment(dst: np.ndarray, x0: int, y0: int, x1: int, y1: int, color: RGBA, width: int = 1) -> None:
    """Rasterise the closed segment (x0, y0)-(x1, y1) with a square brush of side `width`."""
    radius = max(0, width // 2)
    if y0 == y1 or x0 == x1:
        xa, xb = sorted((x0, x1))
        ya, yb = sorted((y0, y1))
        fill_rect(dst, xa - radius, ya - radius, xb - xa + 1 + 2 * radius, yb - ya + 1 + 2 * radius, color)
        return

    # One sample per pixel along the major axis.
    steps = max(abs(x1 - x0), abs(y1 - y0)) + 1
    xs = np.rint(np.linspace(x0, x1, steps)).astype(np.int64)
    ys = np.rint(np.linspace(y0, y1, steps)).astype(np.int64)

    if radius == 0:
        keep = (xs >= 0) & (xs < dst.shape[1]) & (ys >= 0) & (ys < dst.shape[0])
        if not np.any(keep):
            return
        xs, ys = xs[keep], ys[keep]
        pixels = dst[ys, xs]
        _blend(pixels, color)
        dst[ys, xs] = pixels
        return

    for x, y in zip(xs.tolist(), ys.tolist()):
        fill_rect(dst, x - radius, y - radius, 2 * radius + 1, 2 * radius + 1, color)
