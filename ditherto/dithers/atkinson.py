"""Atkinson error diffusion dithering.

Error diffusion pattern (block units, 1/8 each)::

        *   1   1
    1   1   1
        1

The kernel diffuses error to 6 neighbors with weight 1/8 each; the total
distributed weight is 6/8, allowing some error to dissipate, which gives the
characteristic higher-contrast result.
"""
from __future__ import annotations

from typing import Sequence

from ..image import RawImage
from ._diffusion import diffuse, make_kernel

NAME = "atkinson"

KERNEL = (
    (1, 0, 1 / 8),
    (2, 0, 1 / 8),
    (-1, 1, 1 / 8),
    (0, 1, 1 / 8),
    (1, 1, 1 / 8),
    (0, 2, 1 / 8),
)

_OFFSETS, _WEIGHTS = make_kernel(KERNEL)


def dither_atkinson(image: RawImage, palette: Sequence[Sequence[int]], step: int = 1) -> RawImage:
    """Apply Atkinson dithering against a fixed palette.

    Same contract as :func:`ditherto.dithers.floyd.dither_floyd`.
    """
    return diffuse(image, palette, step, _OFFSETS, _WEIGHTS)


__all__ = ["NAME", "KERNEL", "dither_atkinson"]
