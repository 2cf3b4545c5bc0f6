"""Before-closure analysis of fracture-injection pressure decline."""

from .core import (
    AnalysisMode,
    BeforeClosureAnalysis,
    TransformedSeries,
    compute,
    g_function,
    nearest,
    smooth_derivative,
    square_root_time,
    transform,
)
from .errors import BCAnalysisError, DomainError, EmptyInputError, ShapeMismatchError
from .types import CursorReadout

__all__ = [
    "AnalysisMode",
    "BeforeClosureAnalysis",
    "CursorReadout",
    "TransformedSeries",
    "compute",
    "g_function",
    "nearest",
    "smooth_derivative",
    "square_root_time",
    "transform",
    "BCAnalysisError",
    "DomainError",
    "EmptyInputError",
    "ShapeMismatchError",
]
