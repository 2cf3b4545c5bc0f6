"""Helpers for working with sliding windows over sequences."""

from __future__ import annotations

from typing import Iterator

from ..types import Window


def centered_window(index: int, n: int, half: int) -> Window:
    """Return the window of ``±half`` samples around ``index``.

    The window is clipped to ``[0, n)`` so that it shrinks near either end
    of the series instead of padding or wrapping around.
    """

    if half < 0:
        raise ValueError("half must not be negative")
    if not 0 <= index < n:
        raise IndexError(f"index {index} out of range for {n} samples")
    return Window(max(0, index - half), min(n, index + half + 1))


def iter_centered_windows(n: int, half: int) -> Iterator[Window]:
    """Yield the clipped centred window for every index of an ``n`` sample series."""

    if half < 0:
        raise ValueError("half must not be negative")
    for i in range(n):
        yield centered_window(i, n, half)
