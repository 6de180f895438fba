from __future__ import annotations

from dataclasses import asdict, dataclass
import re
from typing import Any, Mapping

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}([0-9a-fA-F]{2})?$")

RGBA = tuple[int, int, int, int]

_COLOR_TOKENS = (
    "background",
    "plot_background",
    "axis_line",
    "axis_label_text",
    "grid_line",
    "bar_border",
    "gradient_start",
    "gradient_end",
)


@dataclass(frozen=True)
class ChartTheme:
    """Visual defaults shared by axes, area draws and renderers."""

    background: str = "#FFFFFF"
    plot_background: str = "#FFFFFF"
    axis_line: str = "#000000"
    axis_label_text: str = "#000000"
    grid_line: str = "#C8C8C8"
    bar_border: str = "#000000"
    gradient_start: str = "#C8DCFA"
    gradient_end: str = "#FFFFFF"
    font_family: str = "DejaVu Sans"
    font_size_px: float = 11.0

    def color(self, token: str) -> RGBA:
        if token not in _COLOR_TOKENS:
            raise ValueError(f"Unknown colour token: {token}")
        return hex_to_rgba(getattr(self, token))


DEFAULT_THEME = ChartTheme()


def hex_to_rgba(value: str) -> RGBA:
    if not isinstance(value, str) or not _HEX_COLOR.match(value):
        raise ValueError(f"{value!r} is not a hex color (#RRGGBB or #RRGGBBAA)")
    digits = value[1:]
    r = int(digits[0:2], 16)
    g = int(digits[2:4], 16)
    b = int(digits[4:6], 16)
    a = int(digits[6:8], 16) if len(digits) == 8 else 255
    return (r, g, b, a)


def validate_theme_tokens(overrides: Mapping[str, Any] | None = None) -> ChartTheme:
    """Validate and merge user token overrides against the default theme."""

    raw: dict[str, Any] = asdict(DEFAULT_THEME)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ValueError(f"Unknown theme token: {key}")
            raw[key] = value

    for key in _COLOR_TOKENS:
        if not isinstance(raw[key], str) or not _HEX_COLOR.match(raw[key]):
            raise ValueError(f"Token `{key}` must be a hex color (#RRGGBB or #RRGGBBAA)")

    if not isinstance(raw["font_family"], str) or not raw["font_family"].strip():
        raise ValueError("Token `font_family` must be a non-empty string")

    if not isinstance(raw["font_size_px"], (int, float)) or float(raw["font_size_px"]) <= 0:
        raise ValueError("Token `font_size_px` must be a positive number")

    return ChartTheme(
        **{key: str(raw[key]) for key in _COLOR_TOKENS},
        font_family=str(raw["font_family"]),
        font_size_px=float(raw["font_size_px"]),
    )
