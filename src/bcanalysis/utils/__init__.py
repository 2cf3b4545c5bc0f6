"""Small shared helpers."""

from .logging import get_logger
from .windows import centered_window, iter_centered_windows

__all__ = ["get_logger", "centered_window", "iter_centered_windows"]
