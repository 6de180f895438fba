from .art import default_colour
from .theme import DEFAULT_THEME, RGBA, ChartTheme, hex_to_rgba, validate_theme_tokens

__all__ = [
    "ChartTheme",
    "DEFAULT_THEME",
    "RGBA",
    "default_colour",
    "hex_to_rgba",
    "validate_theme_tokens",
]
