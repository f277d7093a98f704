"""Output format conversion for dithered images.

Output is always lossless: ``quality`` is validated and carried through to
the encoders, but it never changes a pixel.
"""
from __future__ import annotations

import io
from pathlib import Path
from typing import Literal, Optional, Union

import numpy as np
from PIL import Image

from .errors import InvalidQualityError
from .image import RawImage
from .utils.loader import save_image

OutputFormat = Literal["raw", "rgb", "png"]


def check_quality(quality) -> float:
    if isinstance(quality, bool) or not isinstance(quality, (int, float, np.floating, np.integer)):
        raise InvalidQualityError(f"Quality must be a number, got {quality!r}")
    if not 0.0 <= float(quality) <= 1.0:
        raise InvalidQualityError(f"Quality must be between 0 and 1, got {quality}")
    return float(quality)


def to_rgb_bytes(image: RawImage) -> bytes:
    """Pack an image as RGB bytes (alpha dropped), length ``w * h * 3``."""
    return np.ascontiguousarray(image.rgb).tobytes()


def encode_with_quality(image: RawImage, quality: float) -> RawImage:
    """Validate ``quality`` and return ``image`` unchanged.

    Lossless output is the only mode; the hint is accepted for API
    compatibility with lossy encoders.
    """
    check_quality(quality)
    return image


def encode_png(image: RawImage, quality: Optional[float] = None) -> bytes:
    """Encode the image as PNG bytes via Pillow."""
    if quality is not None:
        image = encode_with_quality(image, quality)
    buf = io.BytesIO()
    Image.fromarray(np.ascontiguousarray(image.rgb)).save(buf, format="PNG")
    return buf.getvalue()


def format_output(image: RawImage, fmt: OutputFormat = "raw", quality: Optional[float] = None) -> Union[RawImage, bytes]:
    """Convert a dithered image to the requested output form.

    ``"raw"`` returns the RawImage itself, ``"rgb"`` packed RGB bytes and
    ``"png"`` an encoded PNG.
    """
    if fmt == "raw":
        return image if quality is None else encode_with_quality(image, quality)
    if fmt == "rgb":
        if quality is not None:
            image = encode_with_quality(image, quality)
        return to_rgb_bytes(image)
    if fmt == "png":
        return encode_png(image, quality)
    raise ValueError(f"Unknown output format: {fmt}")


def write_output(image: RawImage, path: Union[str, Path], quality: Optional[float] = None) -> None:
    """Write ``image`` to ``path``.

    ``.png`` files go through :func:`encode_png` with the quality hint; any
    other extension is handed to Pillow by :func:`~ditherto.utils.loader.save_image`.
    """
    p = Path(path)
    if p.suffix.lower() == ".png":
        p.write_bytes(encode_png(image, quality))
        return

    if quality is not None:
        image = encode_with_quality(image, quality)
    save_image(image, p)


__all__ = [
    "check_quality",
    "to_rgb_bytes",
    "encode_with_quality",
    "encode_png",
    "format_output",
    "write_output",
]
