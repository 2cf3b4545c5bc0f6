from __future__ import annotations

"""Assemble the before-closure analysis series.

For a shut-in record ``(tD, p)`` and an analysis mode the diagnostic plot
shows three curves against the transformed time ``x``:

* the pressure ``p``,
* the derivative ``dp/dx``,
* the log-derivative ``x * dp/dx``.
"""

from dataclasses import dataclass
import logging
from typing import Sequence

import numpy as np

from ..config import Settings
from ..errors import ShapeMismatchError
from ..types import AnalysisMode
from .derivative import smooth_derivative
from .transform import transform

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransformedSeries:
    """Index-aligned series derived from a shut-in record.

    Attributes
    ----------
    x:
        Transformed time, square-root or G-function time depending on ``mode``.
    dx:
        Smoothed derivative of pressure with respect to ``x``.
    xdx:
        Log-derivative ``x * dx``.
    mode:
        Analysis mode ``x`` was computed for.
    window:
        Half-width of the smoothing window used for ``dx``.
    """

    x: np.ndarray
    dx: np.ndarray
    xdx: np.ndarray
    mode: AnalysisMode
    window: int

    def __len__(self) -> int:
        return int(self.x.size)


def compute(
    mode: AnalysisMode | str | None,
    elapsed_time: Sequence[float],
    pressure: Sequence[float],
    window: int | None = None,
    *,
    settings: Settings | None = None,
) -> TransformedSeries:
    """Compute ``x``, ``dp/dx`` and ``x * dp/dx`` for a shut-in record.

    Every call starts from the raw record; results for one mode or window
    are never reused for another.

    Parameters
    ----------
    mode:
        Analysis mode.  ``None`` selects ``settings.analysis.mode``.
    elapsed_time:
        Non-negative dimensionless shut-in times.
    pressure:
        Pressures aligned with ``elapsed_time``.
    window:
        Smoothing half-width.  ``None`` selects ``settings.analysis.window``.

    Raises
    ------
    ShapeMismatchError
        If ``elapsed_time`` and ``pressure`` differ in length.
    DomainError
        If any elapsed time is negative.
    """

    if settings is None:
        settings = Settings()
    mode = settings.analysis.mode if mode is None else AnalysisMode.parse(mode)
    if window is None:
        window = settings.analysis.window

    t = np.asarray(elapsed_time, dtype=float).reshape(-1)
    p = np.asarray(pressure, dtype=float).reshape(-1)
    if t.size != p.size:
        raise ShapeMismatchError(t.size, p.size, names=("elapsed_time", "pressure"))

    x = transform(mode, t)
    dx = smooth_derivative(x, p, window)
    xdx = x * dx
    logger.debug("computed %s series: %d samples, window ±%d", mode.value, x.size, window)
    return TransformedSeries(x=x, dx=dx, xdx=xdx, mode=mode, window=int(window))
