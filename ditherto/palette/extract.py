"""Palette extraction from reference images.

A palette image is any picture whose distinct opaque colours form the
palette, typically a small swatch strip.
"""
from __future__ import annotations

from typing import List

import numpy as np

from ..image import Color, RawImage

# ITU-R BT.601 luma weights
LUMA_WEIGHTS = (0.299, 0.587, 0.114)


def luminance(color) -> float:
    return LUMA_WEIGHTS[0] * color[0] + LUMA_WEIGHTS[1] * color[1] + LUMA_WEIGHTS[2] * color[2]


def extract_palette(image: RawImage) -> List[Color]:
    """Collect the unique colours of an image, sorted darkest first.

    Fully transparent pixels (alpha == 0) are skipped. Colours with equal
    luminance keep the order in which they first appear (row-major).

    Parameters
    ----------
    image : RawImage
        Reference image.

    Returns
    -------
    list[tuple[int, int, int]]
        Unique colours; empty if every pixel is transparent.
    """
    opaque = image.data[image.alpha != 0][:, :3]
    if opaque.size == 0:
        return []

    uniq, first_seen = np.unique(opaque, axis=0, return_index=True)
    uniq = uniq[np.argsort(first_seen, kind="stable")]
    colors = [(int(r), int(g), int(b)) for r, g, b in uniq]
    colors.sort(key=luminance)
    return colors


def generate_palette(source) -> List[Color]:
    """Load ``source`` (path, bytes or file object) and extract its palette."""
    from ..utils.loader import load_image

    return extract_palette(load_image(source))


__all__ = ["extract_palette", "generate_palette", "luminance"]
