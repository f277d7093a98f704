"""Nearest-neighbor resizing utilities for RGBA images.

Provides integer-agnostic nearest-neighbor scaling to arbitrary output size,
so source pixel values survive unchanged, plus the aspect-ratio arithmetic
used to pick a target size from max width/height limits.
"""
from __future__ import annotations

import math
from typing import Literal, Optional, Tuple

import numpy as np

from ..image import RawImage

Fit = Literal["contain", "cover"]


def _round_half_up(v: float) -> int:
    return int(math.floor(v + 0.5))


def calculate_resize_dimensions(
    orig_w: int,
    orig_h: int,
    width: Optional[int] = None,
    height: Optional[int] = None,
    fit: Fit = "contain",
) -> Tuple[int, int]:
    """Compute a target (width, height) that preserves the aspect ratio.

    Parameters
    ----------
    orig_w, orig_h : int
        Source dimensions.
    width, height : int | None
        Maximum target width/height. With only one given, the other side is
        derived from the aspect ratio. With neither, the source size is kept.
    fit : {"contain", "cover"}
        With both limits given, "contain" scales to fit inside the box and
        "cover" scales to fill it.

    Returns
    -------
    tuple[int, int]
        Target (width, height), each at least 1.
    """
    if not width and not height:
        return orig_w, orig_h
    if fit not in ("contain", "cover"):
        raise ValueError(f"fit must be 'contain' or 'cover', got {fit!r}")

    aspect = orig_w / orig_h
    if width and height:
        sw = width / orig_w
        sh = height / orig_h
        scale = min(sw, sh) if fit == "contain" else max(sw, sh)
        new_w = _round_half_up(orig_w * scale)
        new_h = _round_half_up(orig_h * scale)
    elif width:
        new_w = width
        new_h = _round_half_up(width / aspect)
    else:
        new_h = height
        new_w = _round_half_up(height * aspect)
    return max(1, new_w), max(1, new_h)


def resize_nearest(image: RawImage, new_h: int, new_w: int) -> RawImage:
    """Resize an image to (new_h, new_w) via nearest-neighbor.

    Parameters
    ----------
    image : RawImage
        Input image.
    new_h : int
        Target height (>=1).
    new_w : int
        Target width (>=1).

    Returns
    -------
    RawImage
        Resized image (always a new buffer).
    """
    if new_h < 1 or new_w < 1:
        raise ValueError("new_h and new_w must be >= 1")

    arr = image.data
    H, W, _ = arr.shape
    if H == new_h and W == new_w:
        return image.copy()

    # Sample the source pixel under each output pixel centre
    y = (np.arange(new_h) + 0.5) * (H / new_h)
    x = (np.arange(new_w) + 0.5) * (W / new_w)
    yi = np.clip(np.floor(y), 0, H - 1).astype(np.int64)
    xi = np.clip(np.floor(x), 0, W - 1).astype(np.int64)

    out = arr[yi[:, None], xi[None, :], :]
    return RawImage(np.ascontiguousarray(out, dtype=np.uint8))


def resize_to_fit(
    image: RawImage,
    width: Optional[int] = None,
    height: Optional[int] = None,
    fit: Fit = "contain",
) -> RawImage:
    """Resize within max width/height limits, keeping aspect ratio."""
    new_w, new_h = calculate_resize_dimensions(image.width, image.height, width, height, fit)
    return resize_nearest(image, new_h, new_w)


__all__ = ["calculate_resize_dimensions", "resize_nearest", "resize_to_fit"]
