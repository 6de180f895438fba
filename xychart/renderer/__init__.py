from .base import NEED_REDRAW, Renderer, XYRenderer
from .xy_histo import XYHistoRenderer
from .xy_line import XYLineRenderer

__all__ = ["NEED_REDRAW", "Renderer", "XYHistoRenderer", "XYLineRenderer", "XYRenderer"]
