from .canvas import fill_rect, gradient_rect, new_canvas
from .draw_lines import draw_segment
from .draw_text import draw_text, text_size
from .surface import RasterSurface

__all__ = [
    "RasterSurface",
    "draw_segment",
    "draw_text",
    "fill_rect",
    "gradient_rect",
    "new_canvas",
    "text_size",
]
