from __future__ import annotations

"""Nearest-sample lookup for interactive cursor readouts."""

import logging
from typing import Sequence

import numpy as np

from ..errors import EmptyInputError

logger = logging.getLogger(__name__)


def _is_sorted(x: np.ndarray) -> bool:
    return bool(np.all(x[1:] >= x[:-1]))


def nearest(x: Sequence[float], query: float, *, assume_sorted: bool | None = None) -> int:
    """Return the index of the sample in ``x`` closest to ``query``.

    Parameters
    ----------
    x:
        Sample coordinates, sorted or not.
    query:
        Coordinate to resolve, e.g. the pointer position in data units.
    assume_sorted:
        Skip the ordering check and binary search (``True``) or scan
        linearly (``False``).  By default ``x`` is inspected and a binary
        search is used whenever it is non-decreasing.

    Returns
    -------
    int
        Index minimising ``|x[i] - query|``.  When two samples are equally
        close the lower index is returned.

    Raises
    ------
    EmptyInputError
        If ``x`` holds no samples.
    """

    xs = np.asarray(x, dtype=float).reshape(-1)
    if xs.size == 0:
        raise EmptyInputError("cannot resolve a nearest sample in an empty series")
    q = float(query)

    if assume_sorted is None:
        assume_sorted = _is_sorted(xs)
    if not assume_sorted:
        logger.debug("unsorted series of %d samples; scanning", xs.size)
        return int(np.argmin(np.abs(xs - q)))

    j = int(np.searchsorted(xs, q, side="left"))
    if j == 0:
        idx = 0
    elif j == xs.size:
        idx = xs.size - 1
    else:
        prev_diff = abs(q - xs[j - 1])
        next_diff = abs(xs[j] - q)
        idx = j if next_diff < prev_diff else j - 1
    # repeated coordinates resolve to their first occurrence
    return int(np.searchsorted(xs, xs[idx], side="left"))
