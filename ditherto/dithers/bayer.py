"""Ordered/Bayer dithering against a fixed palette.

Each block's anchor pixel is compared with its two nearest palette colours.
How far the pixel sits between them, ``d1 / (d1 + d2)`` (0 on the nearest
colour, 0.5 halfway), is compared with the centred Bayer threshold of the
block's cell, ``(M + s/2) / 256`` for a cell spacing ``s``: above it the
block takes the second-nearest colour, otherwise the nearest. Centring keeps
the 0 cell from flipping pixels that sit just off a palette colour. The
matrix tiles across blocks, not raw pixels.

No error is propagated, so every block is decided independently and the
whole image is processed in one vectorized pass.
"""
from __future__ import annotations

from typing import Sequence

import numpy as np

from ..image import RawImage
from ..palette.matching import two_closest
from ._blocks import anchors, expand_blocks, prepare

NAME = "ordered"


def _bayer_matrix(n: int) -> np.ndarray:
    """Generate an n x n Bayer matrix (n must be a power of 2).

    The matrix values range from 0..n*n-1. Typical sizes used are 2, 4, 8.
    """
    if n & (n - 1) != 0 or n <= 0:
        raise ValueError("Bayer size must be a positive power of 2 (e.g., 2, 4, 8)")

    def build(k: int) -> np.ndarray:
        if k == 1:
            return np.array([[0]], dtype=np.int32)
        prev = build(k // 2)
        a = 4 * prev
        return np.block(
            [
                [a + 0, a + 2],
                [a + 3, a + 1],
            ]
        )

    return build(n)


def threshold_matrix(size: int = 4) -> np.ndarray:
    """Bayer matrix rescaled to the 0..255 intensity range."""
    return _bayer_matrix(size) * (256 // (size * size))


# [[0, 128, 32, 160], [192, 64, 224, 96], [48, 176, 16, 144], [240, 112, 208, 80]]
BAYER_4X4 = threshold_matrix(4)


def dither_ordered(
    image: RawImage,
    palette: Sequence[Sequence[int]],
    step: int = 1,
    size: int = 4,
) -> RawImage:
    """Apply ordered dithering using a ``size x size`` Bayer matrix.

    Parameters
    ----------
    image : RawImage
        Input RGBA image. It is not modified.
    palette : sequence of (r, g, b)
        Non-empty list of allowed output colours.
    step : int
        Block size (>=1).
    size : int
        Bayer matrix size (power of 2): 2, 4, 8.

    Returns
    -------
    RawImage
        Dithered image, every pixel a palette colour with alpha 255.
    """
    pal, step = prepare(image, palette, step)
    M = BAYER_4X4 if size == 4 else threshold_matrix(size)
    spacing = 256 // (size * size)

    H, W = image.height, image.width
    anchor_rgb = anchors(image.rgb, step)
    bh, bw, _ = anchor_rgb.shape

    nearest, second, d_near, d_second = two_closest(anchor_rgb.reshape(-1, 3), pal)
    d_near = np.sqrt(d_near)
    d_second = np.sqrt(d_second)
    total = d_near + d_second
    position = np.divide(
        d_near, total, out=np.zeros(total.shape, dtype=np.float64), where=total != 0
    )

    # Cell (bx % size, by % size) for every block
    by = np.arange(bh) % size
    bx = np.arange(bw) % size
    thresh = ((M[by[:, None], bx[None, :]] + spacing / 2) / 256.0).reshape(-1)

    choice = np.where(position > thresh, second, nearest)
    block_colors = pal[choice].astype(np.uint8).reshape(bh, bw, 3)

    out = np.empty((H, W, 4), dtype=np.uint8)
    out[:, :, :3] = expand_blocks(block_colors, step, H, W)
    out[:, :, 3] = 255
    return RawImage(out)


__all__ = ["NAME", "BAYER_4X4", "dither_ordered", "threshold_matrix"]
