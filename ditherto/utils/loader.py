"""Image loading and saving utilities using Pillow, with NumPy arrays.

All processing in this project happens on :class:`~ditherto.image.RawImage`
buffers. These helpers only convert between Pillow images and RGBA ``uint8``
arrays for IO.
"""
from __future__ import annotations

import io
from pathlib import Path
from typing import BinaryIO, Union

import numpy as np
from PIL import Image

from ..image import RawImage, validate_dimensions

ImageSource = Union[str, Path, bytes, bytearray, BinaryIO, RawImage]


def load_image(source: ImageSource) -> RawImage:
    """Load an image into an RGBA :class:`RawImage`.

    Parameters
    ----------
    source : str | Path | bytes | file object | RawImage
        A path to an image supported by Pillow, encoded image bytes, or a
        binary file object. A RawImage is returned as a copy.

    Returns
    -------
    RawImage
        Decoded pixels, alpha preserved (opaque formats get alpha 255).
    """
    if isinstance(source, RawImage):
        return source.copy()
    if isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(bytes(source))
    elif isinstance(source, str):
        source = Path(source)

    with Image.open(source) as im:
        im = im.convert("RGBA")
        arr = np.array(im, dtype=np.uint8)
    validate_dimensions(arr.shape[1], arr.shape[0])
    return RawImage(arr)


def save_image(image: RawImage, path: Union[str, Path]) -> None:
    """Save an image file via Pillow.

    Alpha is dropped: dithered output is always opaque. The format is inferred
    from the extension.
    """
    if not isinstance(image, RawImage):
        raise TypeError("image must be a RawImage")

    p = Path(path)
    im = Image.fromarray(np.ascontiguousarray(image.rgb))
    im.save(p)


__all__ = ["load_image", "save_image", "ImageSource"]
