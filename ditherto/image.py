"""In-memory RGBA raster used throughout ditherto.

A :class:`RawImage` wraps a NumPy ``uint8`` array of shape ``(H, W, 4)``.
The array is C-contiguous, so its raw buffer is the row-major, top-to-bottom
RGBA byte sequence of length ``width * height * 4``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple, Union

import numpy as np

from .errors import InvalidDimensionError

Array = np.ndarray
Color = Tuple[int, int, int]

MAX_DIMENSION = 8192


def validate_dimensions(width: int, height: int) -> None:
    """Raise :class:`InvalidDimensionError` unless both sides are usable.

    Dimensions must be integers in ``1..MAX_DIMENSION``.
    """
    for label, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise InvalidDimensionError(
                f"Image {label} must be an integer, got {value!r}"
            )
    if width <= 0 or height <= 0:
        raise InvalidDimensionError(f"Invalid image dimensions: {width}x{height}")
    if width > MAX_DIMENSION or height > MAX_DIMENSION:
        raise InvalidDimensionError(
            f"Image dimensions too large: {width}x{height} "
            f"(max {MAX_DIMENSION}x{MAX_DIMENSION})"
        )


@dataclass(eq=False)
class RawImage:
    """Mutable RGBA8 pixel buffer.

    Parameters
    ----------
    data : np.ndarray
        Array of shape (H, W, 4), dtype=uint8.
    """

    data: Array

    def __post_init__(self) -> None:
        if not isinstance(self.data, np.ndarray):
            raise TypeError("data must be a NumPy array")
        if self.data.dtype != np.uint8:
            raise TypeError("data must have dtype=uint8")
        if self.data.ndim != 3 or self.data.shape[2] != 4:
            raise ValueError("data must have shape (H, W, 4)")
        if self.data.shape[0] == 0 or self.data.shape[1] == 0:
            raise InvalidDimensionError(
                f"Invalid image dimensions: {self.data.shape[1]}x{self.data.shape[0]}"
            )
        self.data = np.ascontiguousarray(self.data)

    @property
    def width(self) -> int:
        return int(self.data.shape[1])

    @property
    def height(self) -> int:
        return int(self.data.shape[0])

    @property
    def rgb(self) -> Array:
        """View of the colour channels, shape (H, W, 3)."""
        return self.data[:, :, :3]

    @property
    def alpha(self) -> Array:
        return self.data[:, :, 3]

    @classmethod
    def from_array(cls, arr: Array) -> "RawImage":
        """Build an image from an (H, W, 3) or (H, W, 4) uint8 array.

        The array is copied. RGB input gets a fully opaque alpha channel.
        """
        if not isinstance(arr, np.ndarray) or arr.ndim != 3 or arr.shape[2] not in (3, 4):
            raise ValueError("arr must be an image array with shape (H, W, 3) or (H, W, 4)")
        if arr.shape[2] == 4:
            return cls(arr.astype(np.uint8, copy=True))
        h, w, _ = arr.shape
        out = np.full((h, w, 4), 255, dtype=np.uint8)
        out[:, :, :3] = arr
        return cls(out)

    @classmethod
    def from_buffer(cls, buffer: Union[bytes, bytearray, memoryview, Array], width: int, height: int) -> "RawImage":
        """Build an image from a flat RGBA byte buffer."""
        validate_dimensions(width, height)
        if isinstance(buffer, np.ndarray):
            flat = buffer.reshape(-1)
        else:
            flat = np.frombuffer(bytes(buffer), dtype=np.uint8)
        expected = width * height * 4
        if flat.size != expected:
            raise ValueError(
                f"Buffer length {flat.size} does not match {width}x{height}x4 = {expected}"
            )
        return cls(flat.astype(np.uint8).reshape(height, width, 4).copy())

    @classmethod
    def from_colors(cls, rows: Sequence[Sequence[Sequence[int]]]) -> "RawImage":
        """Build an opaque image from nested rows of (r, g, b) colours."""
        arr = np.asarray(rows, dtype=np.int64)
        if arr.ndim != 3 or arr.shape[2] != 3:
            raise ValueError("rows must be a rectangular grid of (r, g, b) colours")
        if arr.size == 0:
            raise InvalidDimensionError("rows must contain at least one pixel")
        if arr.min() < 0 or arr.max() > 255:
            raise ValueError("colour components must be in 0..255")
        return cls.from_array(arr.astype(np.uint8))

    @classmethod
    def solid(cls, color: Sequence[int], width: int, height: int) -> "RawImage":
        validate_dimensions(width, height)
        out = np.empty((height, width, 4), dtype=np.uint8)
        out[:, :, :3] = np.asarray(color, dtype=np.uint8)
        out[:, :, 3] = 255
        return cls(out)

    def copy(self) -> "RawImage":
        return RawImage(self.data.copy())

    def pixel(self, x: int, y: int) -> Color:
        r, g, b = self.data[y, x, :3]
        return (int(r), int(g), int(b))

    def to_bytes(self) -> bytes:
        """Flat RGBA bytes, row-major."""
        return self.data.tobytes()


__all__ = ["RawImage", "Color", "MAX_DIMENSION", "validate_dimensions"]
