"""Core algorithms and data structures for bcanalysis."""

from .transform import AnalysisMode, g_function, square_root_time, transform
from .derivative import smooth_derivative
from .series import TransformedSeries, compute
from .nearest import nearest
from .session import BeforeClosureAnalysis

__all__ = [
    "AnalysisMode",
    "square_root_time",
    "g_function",
    "transform",
    "smooth_derivative",
    "TransformedSeries",
    "compute",
    "nearest",
    "BeforeClosureAnalysis",
]
