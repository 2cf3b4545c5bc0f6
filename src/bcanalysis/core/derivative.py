"""Smoothed derivative estimation.

Differentiating field pressure data amplifies measurement noise, so the
derivative at each sample is taken as the slope of a least-squares line
through the samples within ``±window`` indices.  Windows are clipped at the
series boundaries: end points are estimated from fewer samples rather than
extrapolated.
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from ..config import Settings
from ..errors import ShapeMismatchError
from ..utils.windows import iter_centered_windows

logger = logging.getLogger(__name__)


def _validate_window(window: int) -> int:
    if isinstance(window, bool) or int(window) != window:
        raise ValueError("window must be an integer")
    window = int(window)
    if window < 0:
        raise ValueError("window must not be negative")
    return window


def _slope(x: np.ndarray, y: np.ndarray) -> float:
    """Least-squares slope of ``y`` against ``x``; 0 when ``x`` is constant."""

    if x.size < 2 or np.ptp(x) == 0.0:
        return 0.0
    xc = x - x.mean()
    sxx = float(xc @ xc)
    if sxx == 0.0:
        return 0.0
    return float(xc @ (y - y.mean())) / sxx


def smooth_derivative(
    x: Sequence[float],
    y: Sequence[float],
    window: int | None = None,
    *,
    settings: Settings | None = None,
) -> np.ndarray:
    """Estimate ``dy/dx`` at every sample via local linear regression.

    For sample ``i`` a straight line is fit to the points with indices in
    ``[max(0, i - window), min(n - 1, i + window)]`` and its slope is
    returned.  Windows containing fewer than two distinct ``x`` values give
    a derivative of ``0``; repeated timestamps are common near shut-in.

    A ``window`` of ``0`` falls back to the secant through the immediate
    neighbours of each sample.

    Parameters
    ----------
    x:
        Abscissa, normally a transformed time.
    y:
        Ordinate aligned with ``x``, normally the shut-in pressure.
    window:
        Half-width of the regression window in samples.  Defaults to
        ``settings.analysis.window``.

    Returns
    -------
    numpy.ndarray
        Array of derivative estimates matching the length of ``x``.
    """

    if settings is None:
        settings = Settings()
    if window is None:
        window = settings.analysis.window
    window = _validate_window(window)

    xa = np.asarray(x, dtype=float).reshape(-1)
    ya = np.asarray(y, dtype=float).reshape(-1)
    if xa.size != ya.size:
        raise ShapeMismatchError(xa.size, ya.size)

    n = xa.size
    out = np.zeros(n, dtype=float)
    if window == 0:
        for i in range(n):
            lo = max(0, i - 1)
            hi = min(n - 1, i + 1)
            out[i] = _slope(xa[[lo, hi]], ya[[lo, hi]]) if hi > lo else 0.0
        return out

    if 2 * window + 1 > n:
        logger.debug("window ±%d wider than %d samples; every window is clipped", window, n)
    for i, w in enumerate(iter_centered_windows(n, window)):
        out[i] = _slope(xa[w.start : w.end], ya[w.start : w.end])
    return out
