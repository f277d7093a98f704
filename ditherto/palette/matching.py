"""Nearest-colour search against a fixed palette.

Distances are plain Euclidean distances in RGB space. Comparisons are done on
squared integer distances, which order the same way as the square roots and
make ties exact. The first palette entry reaching the minimum wins.
"""
from __future__ import annotations

import math
from typing import Sequence, Tuple

import numpy as np

from ..errors import EmptyPaletteError, InvalidColorError
from ..image import Color

Array = np.ndarray


def as_palette_array(palette: Sequence[Sequence[int]]) -> Array:
    """Normalize a palette to an (N, 3) int64 array.

    Raises
    ------
    EmptyPaletteError
        If the palette has no entries.
    InvalidColorError
        If an entry is not three integers in 0..255.
    """
    if isinstance(palette, np.ndarray):
        arr = palette
        if arr.size == 0:
            raise EmptyPaletteError()
        if arr.ndim != 2 or arr.shape[1] != 3:
            raise InvalidColorError("palette array must have shape (N, 3)")
        if not np.issubdtype(arr.dtype, np.integer):
            raise InvalidColorError("palette components must be integers")
    else:
        if len(palette) == 0:
            raise EmptyPaletteError()
        rows = []
        for color in palette:
            if len(color) != 3:
                raise InvalidColorError(f"palette entry must be (r, g, b), got {tuple(color)!r}")
            for c in color:
                if isinstance(c, bool) or not isinstance(c, (int, np.integer)):
                    raise InvalidColorError(f"palette components must be integers, got {tuple(color)!r}")
            rows.append([int(c) for c in color])
        arr = np.array(rows, dtype=np.int64)

    if arr.min() < 0 or arr.max() > 255:
        raise InvalidColorError("palette components must be in 0..255")
    return np.ascontiguousarray(arr, dtype=np.int64)


def color_distance(a: Sequence[int], b: Sequence[int]) -> float:
    """Euclidean distance between two RGB colours."""
    dr = int(a[0]) - int(b[0])
    dg = int(a[1]) - int(b[1])
    db = int(a[2]) - int(b[2])
    return math.sqrt(dr * dr + dg * dg + db * db)


def closest_index(pixel: Sequence[int], palette: Array) -> int:
    """Index of the palette entry nearest to ``pixel`` (first wins ties)."""
    if len(palette) == 0:
        raise EmptyPaletteError()
    r, g, b = int(pixel[0]), int(pixel[1]), int(pixel[2])
    best = 0
    best_d = -1
    for i in range(len(palette)):
        dr = r - int(palette[i][0])
        dg = g - int(palette[i][1])
        db = b - int(palette[i][2])
        d = dr * dr + dg * dg + db * db
        if best_d < 0 or d < best_d:
            best_d = d
            best = i
    return best


def find_closest_color(pixel: Sequence[int], palette: Sequence[Sequence[int]]) -> Color:
    """Return the palette colour nearest to ``pixel``.

    Parameters
    ----------
    pixel : sequence of int
        The (r, g, b) colour to match.
    palette : sequence of (r, g, b)
        Candidate colours. Order only matters for ties: the earliest entry
        at the minimum distance is returned.

    Returns
    -------
    tuple[int, int, int]
        The matched palette colour.
    """
    if len(palette) == 0:
        raise EmptyPaletteError()
    c = palette[closest_index(pixel, palette)]
    return (int(c[0]), int(c[1]), int(c[2]))


def two_closest(pixels: Array, palette: Array) -> Tuple[Array, Array, Array, Array]:
    """Vectorized nearest and second-nearest palette search.

    Parameters
    ----------
    pixels : np.ndarray
        Array of shape (N, 3).
    palette : np.ndarray
        Normalized palette of shape (P, 3), see :func:`as_palette_array`.

    Returns
    -------
    tuple of np.ndarray
        ``(nearest, second, d_nearest, d_second)``: indices and squared
        distances. With a single-entry palette ``second`` equals ``nearest``.
    """
    diff = pixels.astype(np.int64)[:, None, :] - palette[None, :, :]
    d2 = np.einsum("npc,npc->np", diff, diff)
    # stable sort keeps palette order among equal distances
    order = np.argsort(d2, axis=1, kind="stable")
    rows = np.arange(d2.shape[0])
    nearest = order[:, 0]
    second = order[:, 1] if palette.shape[0] > 1 else nearest
    return nearest, second, d2[rows, nearest], d2[rows, second]


__all__ = [
    "as_palette_array",
    "color_distance",
    "closest_index",
    "find_closest_color",
    "two_closest",
]
