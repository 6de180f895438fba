from __future__ import annotations

import numpy as np

from xychart.style.theme import RGBA


def new_canvas(width: int, height: int, color: RGBA = (255, 255, 255, 255)) -> np.ndarray:
    if width <= 0 or height <= 0:
        raise ValueError("canvas width/height must be > 0")
    canvas = np.empty((height, width, 4), dtype=np.uint8)
    canvas[:, :] = np.asarray(color, dtype=np.uint8)
    return canvas


def _blend(view: np.ndarray, color: RGBA) -> None:
    a = color[3] / 255.0
    if a >= 1.0:
        view[..., :3] = np.asarray(color[:3], dtype=np.uint8)
    elif a > 0.0:
        src = np.asarray(color[:3], dtype=np.float32) * a
        view[..., :3] = (src + view[..., :3].astype(np.float32) * (1.0 - a)).astype(np.uint8)
    else:
        return
    view[..., 3] = 255


def fill_rect(dst: np.ndarray, x: int, y: int, width: int, height: int, color: RGBA) -> None:
    """Blend `color` over the clipped pixel box [x, x+width) x [y, y+height)."""
    x0 = max(0, x)
    y0 = max(0, y)
    x1 = min(dst.shape[1], x + width)
    y1 = min(dst.shape[0], y + height)
    if x0 >= x1 or y0 >= y1:
        return
    _blend(dst[y0:y1, x0:x1], color)


def gradient_rect(
    dst: np.ndarray,
    x: int,
    y: int,
    width: int,
    height: int,
    start: RGBA,
    end: RGBA,
    *,
    horizontal: bool,
) -> None:
    """Linear gradient from `start` at the near edge to `end` at the far edge."""
    x0 = max(0, x)
    y0 = max(0, y)
    x1 = min(dst.shape[1], x + width)
    y1 = min(dst.shape[0], y + height)
    if x0 >= x1 or y0 >= y1:
        return

    steps = width if horizontal else height
    t = np.linspace(0.0, 1.0, max(steps, 1), dtype=np.float32)
    ramp = (1.0 - t)[:, None] * np.asarray(start, dtype=np.float32) + t[:, None] * np.asarray(end, dtype=np.float32)
    if horizontal:
        ramp = ramp[x0 - x : x1 - x][None, :, :]
    else:
        ramp = ramp[y0 - y : y1 - y][:, None, :]

    view = dst[y0:y1, x0:x1]
    alpha = ramp[..., 3:4] / 255.0
    blended = ramp[..., :3] * alpha + view[..., :3].astype(np.float32) * (1.0 - alpha)
    view[..., :3] = np.clip(blended, 0, 255).astype(np.uint8)
    view[..., 3] = 255
