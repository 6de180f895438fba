from __future__ import annotations

from functools import lru_cache
from pathlib import Path

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from xychart.style.theme import DEFAULT_THEME, RGBA


SANS_FONT_FALLBACK_PATTERNS = (
    "dejavusans",
    "dejavu sans",
    "liberationsans",
    "arial",
    "helvetica",
)
FONT_DIRS = (
    Path.home() / ".fonts",
    Path("/Library/Fonts"),
    Path("/System/Library/Fonts"),
    Path("/usr/share/fonts"),
    Path("/usr/local/share/fonts"),
)


def draw_text(
    dst: np.ndarray,
    x: int,
    y: int,
    text: str,
    color: RGBA,
    *,
    font_family: str = DEFAULT_THEME.font_family,
    font_size_px: float = DEFAULT_THEME.font_size_px,
) -> None:
    """Blend anti-aliased `text` with its bounding box top-left at (x, y)."""
    if not text:
        return
    font = _load_font(font_family, font_size_px)
    _blend_mask(dst, x, y, _render_mask(text, font), color)


def text_size(
    text: str,
    *,
    font_family: str = DEFAULT_THEME.font_family,
    font_size_px: float = DEFAULT_THEME.font_size_px,
) -> tuple[int, int]:
    font = _load_font(font_family, font_size_px)
    if not text:
        ascent, descent = font.getmetrics()
        return (0, max(1, int(ascent + descent)))
    left, top, right, bottom = font.getbbox(text)
    return (max(0, int(right - left)), max(1, int(bottom - top)))


def _blend_mask(dst: np.ndarray, x: int, y: int, mask: np.ndarray, color: RGBA) -> None:
    h, w = mask.shape
    x0 = max(0, x)
    y0 = max(0, y)
    x1 = min(dst.shape[1], x + w)
    y1 = min(dst.shape[0], y + h)
    if x1 <= x0 or y1 <= y0:
        return

    cov = mask[y0 - y : y1 - y, x0 - x : x1 - x].astype(np.float32) / 255.0
    src_alpha = (color[3] / 255.0) * cov[:, :, None]
    if not np.any(src_alpha > 0):
        return
    patch = dst[y0:y1, x0:x1]
    src_rgb = np.asarray(color[:3], dtype=np.float32).reshape(1, 1, 3)
    out = src_rgb * src_alpha + patch[:, :, :3].astype(np.float32) * (1.0 - src_alpha)
    patch[:, :, :3] = np.clip(out, 0, 255).astype(np.uint8)
    patch[:, :, 3] = 255


@lru_cache(maxsize=128)
def _render_mask(text: str, font: ImageFont.FreeTypeFont | ImageFont.ImageFont) -> np.ndarray:
    left, top, right, bottom = font.getbbox(text)
    image = Image.new("L", (max(1, int(right - left)), max(1, int(bottom - top))), 0)
    ImageDraw.Draw(image).text((-left, -top), text, fill=255, font=font)
    return np.asarray(image, dtype=np.uint8)


@lru_cache(maxsize=64)
def _load_font(font_family: str, font_size_px: float) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    size = max(1, int(round(font_size_px)))
    font_path = _resolve_font_path(font_family)
    if font_path is None:
        return ImageFont.load_default()
    try:
        return ImageFont.truetype(str(font_path), size=size)
    except OSError:
        return ImageFont.load_default()


def _resolve_font_path(font_family: str) -> Path | None:
    wanted = font_family.strip().lower() or DEFAULT_THEME.font_family.lower()
    candidates: list[Path] = []
    for base in FONT_DIRS:
        if base.exists():
            for ext in ("*.ttf", "*.otf"):
                candidates.extend(sorted(base.rglob(ext)))

    for pattern in (wanted,) + SANS_FONT_FALLBACK_PATTERNS:
        p = pattern.replace(" ", "")
        for path in candidates:
            if p == path.stem.lower().replace(" ", "").replace("-", ""):
                return path
        for path in candidates:
            if p in path.stem.lower().replace(" ", ""):
                return path
    return None
