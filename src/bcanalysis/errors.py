"""Exception types raised by the before-closure analysis core."""

from __future__ import annotations


class BCAnalysisError(ValueError):
    """Base class for invalid inputs to the analysis routines."""


class DomainError(BCAnalysisError):
    """Raised when a time transform receives a negative elapsed time."""

    def __init__(self, message: str, *, index: int | None = None) -> None:
        self.index = index
        if index is not None:
            message = f"{message} (index {index})"
        super().__init__(message)


class ShapeMismatchError(BCAnalysisError):
    """Raised when paired sequences do not have the same length."""

    def __init__(self, left: int, right: int, *, names: tuple[str, str] = ("x", "y")) -> None:
        self.left = left
        self.right = right
        super().__init__(
            f"{names[0]} and {names[1]} must have the same length ({left} != {right})"
        )


class EmptyInputError(BCAnalysisError):
    """Raised when a lookup is attempted against zero samples."""


__all__ = ["BCAnalysisError", "DomainError", "ShapeMismatchError", "EmptyInputError"]
