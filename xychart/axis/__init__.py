from .base import AXIS_CHANGED, BOUNDS_CHANGED, Axis, AxisLocation
from .labels import LabelFormat
from .logarithmic import LogarithmicNumberAxis, log_base
from .number import NumberAxis

__all__ = [
    "AXIS_CHANGED",
    "Axis",
    "AxisLocation",
    "BOUNDS_CHANGED",
    "LabelFormat",
    "LogarithmicNumberAxis",
    "NumberAxis",
    "log_base",
]
