"""Time transforms for before-closure analysis plots.

Elapsed shut-in time is expressed in dimensionless form ``tD`` by the caller.
Each :class:`~bcanalysis.types.AnalysisMode` maps ``tD`` onto the abscissa of
its diagnostic plot:

.. math::

   x_{SRT} = \\sqrt{t_D}

   G(t_D) = \\frac{16}{3\\pi}\\left[(1 + t_D)^{3/2} - t_D^{3/2} - 1\\right]

Both transforms are zero at ``tD = 0`` and increase monotonically, so the
ordering of the input times carries over to the transformed coordinate.
"""

from __future__ import annotations

from typing import Callable, Dict, Sequence

import numpy as np

from ..errors import DomainError
from ..types import AnalysisMode

G_FUNCTION_SCALE = 16.0 / (3.0 * np.pi)


def _as_elapsed_time(elapsed_time: Sequence[float]) -> np.ndarray:
    t = np.asarray(elapsed_time, dtype=float).reshape(-1)
    # NaN fails the comparison as well
    bad = np.flatnonzero(~(t >= 0.0))
    if bad.size:
        raise DomainError(
            f"elapsed time must be non-negative, got {float(t[bad[0]])!r}", index=int(bad[0])
        )
    return t


def square_root_time(elapsed_time: Sequence[float]) -> np.ndarray:
    """Return ``sqrt(tD)`` for every sample."""

    return np.sqrt(_as_elapsed_time(elapsed_time))


def g_function(elapsed_time: Sequence[float]) -> np.ndarray:
    """Return the G-function time ``G(tD)`` for every sample."""

    t = _as_elapsed_time(elapsed_time)
    # difference-of-cubes form of (1+t)^1.5 - t^1.5
    difference = (1.0 + 3.0 * t + 3.0 * t**2) / ((1.0 + t) ** 1.5 + t**1.5)
    return G_FUNCTION_SCALE * (difference - 1.0)


TRANSFORMS: Dict[AnalysisMode, Callable[[Sequence[float]], np.ndarray]] = {
    AnalysisMode.SQUARE_ROOT_TIME: square_root_time,
    AnalysisMode.G_FUNCTION: g_function,
}


def transform(mode: AnalysisMode | str, elapsed_time: Sequence[float]) -> np.ndarray:
    """Map dimensionless elapsed time onto the coordinate of ``mode``.

    Parameters
    ----------
    mode:
        Analysis mode, or any spelling accepted by :meth:`AnalysisMode.parse`.
    elapsed_time:
        Non-negative dimensionless shut-in times.

    Returns
    -------
    numpy.ndarray
        Transformed time with the same length as ``elapsed_time``.

    Raises
    ------
    DomainError
        If any elapsed time is negative.
    """

    return TRANSFORMS[AnalysisMode.parse(mode)](elapsed_time)
