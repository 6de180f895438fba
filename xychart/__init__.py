from xychart.areadraw import AreaDraw, AreaDrawCollection, FillAreaDraw, GradientAreaDraw, NoAreaDraw
from xychart.axis import Axis, LabelFormat, LogarithmicNumberAxis, NumberAxis
from xychart.dataset import Dataset, XYDataset, XYSeriesDataset
from xychart.errors import ChartDataError
from xychart.observer import ListenerHandle
from xychart.plot import XYPlot
from xychart.raster import RasterSurface
from xychart.renderer import Renderer, XYHistoRenderer, XYLineRenderer, XYRenderer
from xychart.surface import Brush, DrawingSurface, Font, Pen

__all__ = [
    "AreaDraw",
    "AreaDrawCollection",
    "Axis",
    "Brush",
    "ChartDataError",
    "Dataset",
    "DrawingSurface",
    "FillAreaDraw",
    "Font",
    "GradientAreaDraw",
    "LabelFormat",
    "ListenerHandle",
    "LogarithmicNumberAxis",
    "NoAreaDraw",
    "NumberAxis",
    "Pen",
    "RasterSurface",
    "Renderer",
    "XYDataset",
    "XYHistoRenderer",
    "XYLineRenderer",
    "XYPlot",
    "XYRenderer",
    "XYSeriesDataset",
]
