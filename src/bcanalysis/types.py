"""Common type helpers for bcanalysis.

This module defines lightweight containers shared across the codebase:
the analysis mode selector, index windows and the cursor readout handed
back to presentation code.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class AnalysisMode(str, Enum):
    """Time coordinate used for before-closure analysis."""

    SQUARE_ROOT_TIME = "square_root_time"
    G_FUNCTION = "g_function"

    @classmethod
    def parse(cls, value: "AnalysisMode | str") -> "AnalysisMode":
        """Return the mode named by ``value``.

        Besides the canonical values a few common spellings are accepted,
        e.g. ``"sqrt"``, ``"srt"``, ``"g"`` or ``"G-Function"``.
        """

        if isinstance(value, cls):
            return value
        key = str(value).strip().lower().replace("-", "_").replace(" ", "_")
        try:
            return _ALIASES[key]
        except KeyError:
            raise ValueError(f"unknown analysis mode: {value!r}") from None


_ALIASES = {
    "square_root_time": AnalysisMode.SQUARE_ROOT_TIME,
    "square_root": AnalysisMode.SQUARE_ROOT_TIME,
    "sqrt": AnalysisMode.SQUARE_ROOT_TIME,
    "sqrt_time": AnalysisMode.SQUARE_ROOT_TIME,
    "srt": AnalysisMode.SQUARE_ROOT_TIME,
    "g_function": AnalysisMode.G_FUNCTION,
    "gfunction": AnalysisMode.G_FUNCTION,
    "g": AnalysisMode.G_FUNCTION,
}


@dataclass(frozen=True)
class Window:
    """Index based window used for segmenting sequences."""

    start: int
    end: int

    @property
    def width(self) -> int:
        """Return the number of elements covered by the window."""

        return self.end - self.start


@dataclass(frozen=True)
class CursorReadout:
    """Values of every displayed series at the sample under the cursor."""

    index: int
    x: float
    pressure: float
    dx: float
    xdx: float
