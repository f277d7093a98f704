"""Numba-compiled error-diffusion core shared by the diffusion dithers.

The working buffer doubles as the partially quantized result and the
pending-error accumulator: blocks already visited hold final palette colours,
blocks not yet visited hold their source value plus whatever error has been
pushed into them so far. Every write is rounded half to even and clamped to
0..255, the way a clamped 8-bit canvas buffer stores it.
"""
from __future__ import annotations

import numpy as np
from numba import njit

from ..image import RawImage
from ._blocks import prepare

Array = np.ndarray


@njit(cache=True)
def _closest(r: int, g: int, b: int, palette: np.ndarray) -> int:
    best = 0
    best_d = -1
    for i in range(palette.shape[0]):
        dr = r - palette[i, 0]
        dg = g - palette[i, 1]
        db = b - palette[i, 2]
        d = dr * dr + dg * dg + db * db
        if best_d < 0 or d < best_d:
            best_d = d
            best = i
    return best


@njit(cache=True)
def _clamp_u8(v: float) -> np.uint8:
    # exact .5 ties go to the even neighbour
    iv = np.int64(np.rint(v))
    if iv < 0:
        iv = 0
    elif iv > 255:
        iv = 255
    return np.uint8(iv)


@njit(cache=True)
def _diffuse_impl(
    work: np.ndarray,
    palette: np.ndarray,
    offsets: np.ndarray,
    weights: np.ndarray,
    step: int,
) -> None:
    H, W, _ = work.shape
    for y in range(0, H, step):
        for x in range(0, W, step):
            old0 = np.int64(work[y, x, 0])
            old1 = np.int64(work[y, x, 1])
            old2 = np.int64(work[y, x, 2])

            k = _closest(old0, old1, old2, palette)
            new0 = np.uint8(palette[k, 0])
            new1 = np.uint8(palette[k, 1])
            new2 = np.uint8(palette[k, 2])
            work[y, x, 0] = new0
            work[y, x, 1] = new1
            work[y, x, 2] = new2
            work[y, x, 3] = 255

            err0 = old0 - np.int64(new0)
            err1 = old1 - np.int64(new1)
            err2 = old2 - np.int64(new2)

            # Offsets are in block units; edge losses are dropped
            for j in range(offsets.shape[0]):
                nx = x + offsets[j, 0] * step
                ny = y + offsets[j, 1] * step
                if nx < 0 or nx >= W or ny < 0 or ny >= H:
                    continue
                w = weights[j]
                work[ny, nx, 0] = _clamp_u8(work[ny, nx, 0] + err0 * w)
                work[ny, nx, 1] = _clamp_u8(work[ny, nx, 1] + err1 * w)
                work[ny, nx, 2] = _clamp_u8(work[ny, nx, 2] + err2 * w)

            if step > 1:
                y_end = min(y + step, H)
                x_end = min(x + step, W)
                for by in range(y, y_end):
                    for bx in range(x, x_end):
                        work[by, bx, 0] = new0
                        work[by, bx, 1] = new1
                        work[by, bx, 2] = new2
                        work[by, bx, 3] = 255


def make_kernel(taps) -> tuple[Array, Array]:
    """Split ``[(dx, dy, weight), ...]`` into offset and weight arrays."""
    offsets = np.array([(dx, dy) for dx, dy, _ in taps], dtype=np.int64)
    weights = np.array([w for _, _, w in taps], dtype=np.float64)
    return offsets, weights


def diffuse(image: RawImage, palette, step: int, offsets: Array, weights: Array) -> RawImage:
    """Run error diffusion over ``image`` with the given kernel.

    Blocks are visited in raster order: rows top to bottom, each row left to
    right. The input image is not modified.
    """
    pal, step = prepare(image, palette, step)
    work = image.data.copy()
    _diffuse_impl(work, pal, offsets, weights, step)
    return RawImage(work)


__all__ = ["diffuse", "make_kernel"]
