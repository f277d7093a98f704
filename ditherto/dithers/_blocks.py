"""Block/step helpers shared by every dithering algorithm.

With ``step > 1`` the image is split into ``step x step`` blocks aligned to
the origin (edge blocks are clipped). Each block is decided once, at its
top-left anchor pixel, and the whole block takes that colour.
"""
from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np

from ..errors import InvalidStepError
from ..image import RawImage
from ..palette.matching import as_palette_array

Array = np.ndarray


def check_step(step: int) -> int:
    """Return ``step`` as an int, or raise :class:`InvalidStepError`."""
    if isinstance(step, bool) or not isinstance(step, (int, np.integer)):
        raise InvalidStepError(f"Step must be an integer >= 1, got {step!r}")
    if step < 1:
        raise InvalidStepError(f"Step must be >= 1, got {step}")
    return int(step)


def prepare(image: RawImage, palette: Sequence[Sequence[int]], step: int) -> Tuple[Array, int]:
    """Validate algorithm arguments once per call.

    The palette is checked before the step. Returns the normalized palette
    array and the step.
    """
    if not isinstance(image, RawImage):
        raise TypeError("image must be a RawImage")
    pal = as_palette_array(palette)
    return pal, check_step(step)


def anchors(arr: Array, step: int) -> Array:
    """Anchor pixels of every block, shape (ceil(H/step), ceil(W/step), C)."""
    return arr[::step, ::step]


def expand_blocks(block_colors: Array, step: int, height: int, width: int) -> Array:
    """Paint per-block colours back onto a full (height, width) grid.

    Nearest-neighbor upscale by ``step`` and crop, so clipped edge blocks
    fall out naturally.
    """
    if step == 1:
        return block_colors
    up = np.repeat(np.repeat(block_colors, step, axis=0), step, axis=1)
    return up[:height, :width]


__all__ = ["check_step", "prepare", "anchors", "expand_blocks"]
