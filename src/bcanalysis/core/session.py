from __future__ import annotations

"""Stateful wrapper around a single shut-in record.

:class:`BeforeClosureAnalysis` holds the record of one analysis session
together with the selected mode and smoothing window.  Changing either
discards the computed series; it is rebuilt from the raw record the next
time it is requested.
"""

import logging
from typing import Sequence

import numpy as np

from ..config import Settings
from ..errors import ShapeMismatchError
from ..types import AnalysisMode, CursorReadout
from .derivative import _validate_window
from .nearest import nearest
from .series import TransformedSeries, compute

logger = logging.getLogger(__name__)


class BeforeClosureAnalysis:
    """Before-closure analysis of one shut-in record."""

    def __init__(
        self,
        elapsed_time: Sequence[float],
        pressure: Sequence[float],
        *,
        mode: AnalysisMode | str | None = None,
        window: int | None = None,
        settings: Settings | None = None,
    ) -> None:
        if settings is None:
            settings = Settings()
        t = np.array(elapsed_time, dtype=float).reshape(-1)
        p = np.array(pressure, dtype=float).reshape(-1)
        if t.size != p.size:
            raise ShapeMismatchError(t.size, p.size, names=("elapsed_time", "pressure"))
        t.setflags(write=False)
        p.setflags(write=False)
        self._elapsed_time = t
        self._pressure = p
        self._mode = settings.analysis.mode if mode is None else AnalysisMode.parse(mode)
        self._window = _validate_window(settings.analysis.window if window is None else window)
        self._series: TransformedSeries | None = None
        self.cursor_index: int | None = None

    @property
    def elapsed_time(self) -> np.ndarray:
        return self._elapsed_time

    @property
    def pressure(self) -> np.ndarray:
        return self._pressure

    @property
    def mode(self) -> AnalysisMode:
        return self._mode

    @mode.setter
    def mode(self, value: AnalysisMode | str) -> None:
        self._mode = AnalysisMode.parse(value)
        self._invalidate()

    @property
    def window(self) -> int:
        return self._window

    @window.setter
    def window(self, value: int) -> None:
        self._window = _validate_window(value)
        self._invalidate()

    def _invalidate(self) -> None:
        self._series = None
        self.cursor_index = None

    @property
    def series(self) -> TransformedSeries:
        """Series for the current mode and window, computed on first access."""

        if self._series is None:
            self._series = compute(self._mode, self._elapsed_time, self._pressure, self._window)
        return self._series

    def cursor(self, query: float) -> CursorReadout:
        """Resolve ``query`` to the nearest sample and read every series there."""

        series = self.series
        i = nearest(series.x, query)
        self.cursor_index = i
        return CursorReadout(
            index=i,
            x=float(series.x[i]),
            pressure=float(self._pressure[i]),
            dx=float(series.dx[i]),
            xdx=float(series.xdx[i]),
        )

    def __len__(self) -> int:
        return int(self._elapsed_time.size)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(n={len(self)}, mode={self._mode.value!r}, "
            f"window={self._window})"
        )
