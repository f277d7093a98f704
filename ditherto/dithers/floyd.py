"""Floyd–Steinberg error diffusion dithering.

Error diffusion pattern (block units, normalized by 16)::

        *   7
     3  5   1

The four weights sum to 16/16, so all of a block's quantization error is
passed on (except where neighbours fall outside the image).
"""
from __future__ import annotations

from typing import Sequence

from ..image import RawImage
from ._diffusion import diffuse, make_kernel

NAME = "floyd-steinberg"

# (dx, dy, weight)
KERNEL = (
    (1, 0, 7 / 16),
    (-1, 1, 3 / 16),
    (0, 1, 5 / 16),
    (1, 1, 1 / 16),
)

_OFFSETS, _WEIGHTS = make_kernel(KERNEL)


def dither_floyd(image: RawImage, palette: Sequence[Sequence[int]], step: int = 1) -> RawImage:
    """Apply Floyd–Steinberg dithering against a fixed palette.

    Parameters
    ----------
    image : RawImage
        Input RGBA image. It is not modified.
    palette : sequence of (r, g, b)
        Non-empty list of allowed output colours.
    step : int
        Block size (>=1). Values >1 produce chunky pixels; error then travels
        between blocks rather than single pixels.

    Returns
    -------
    RawImage
        Dithered image, every pixel a palette colour with alpha 255.
    """
    return diffuse(image, palette, step, _OFFSETS, _WEIGHTS)


__all__ = ["NAME", "KERNEL", "dither_floyd"]
