"""Exception types raised by ditherto.

Every error is a ``ValueError`` subclass so callers that only guard against
bad arguments keep working.
"""
from __future__ import annotations


class DitherError(ValueError):
    """Base class for all ditherto errors."""


class EmptyPaletteError(DitherError):
    def __init__(self, message: str = "Palette cannot be empty") -> None:
        super().__init__(message)


class InvalidColorError(DitherError):
    """A palette entry is not an (r, g, b) triple of integers in 0..255."""


class InvalidPaletteError(DitherError):
    pass


class UnknownPaletteError(DitherError, KeyError):
    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0]) if self.args else ""


class InvalidStepError(DitherError):
    pass


class InvalidQualityError(DitherError):
    pass


class InvalidDimensionError(DitherError):
    pass


class UnknownAlgorithmError(DitherError):
    def __init__(self, name: str, available: list[str] | None = None) -> None:
        self.name = name
        self.available = list(available or [])
        message = f"Unknown dithering algorithm: {name!r}"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)


__all__ = [
    "DitherError",
    "EmptyPaletteError",
    "InvalidColorError",
    "InvalidPaletteError",
    "UnknownPaletteError",
    "InvalidStepError",
    "InvalidQualityError",
    "InvalidDimensionError",
    "UnknownAlgorithmError",
]
