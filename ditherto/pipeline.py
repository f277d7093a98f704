"""Resize -> dither pipeline.

:func:`dither_image` validates every option before doing any pixel work,
resolves the palette and algorithm, optionally resizes, and applies the
algorithm. Nothing is produced if validation fails.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Union

import numpy as np

from .dithers import AlgorithmRegistry, algorithms, resolve_algorithm
from .dithers._blocks import check_step
from .errors import EmptyPaletteError, InvalidDimensionError
from .image import Color, RawImage, validate_dimensions
from .output import check_quality, write_output
from .palette.extract import extract_palette
from .palette.matching import as_palette_array
from .palette.presets import PALETTES
from .utils.loader import ImageSource, load_image
from .utils.resize import calculate_resize_dimensions, resize_nearest

DEFAULT_ALGORITHM = "atkinson"
DEFAULT_STEP = 1
DEFAULT_PALETTE: List[Color] = list(PALETTES["BW"])


@dataclass
class DitherOptions:
    """Options for :func:`dither_image`. Every field is optional.

    Attributes
    ----------
    algorithm : str | None
        Registered algorithm name (default "atkinson").
    palette : sequence of (r, g, b) | None
        Explicit palette; overrides ``palette_image``.
    palette_image : path | bytes | RawImage | None
        Reference image whose unique colours form the palette.
    width, height : int | None
        Maximum output size; aspect ratio is kept.
    step : int | None
        Block size (>=1) for chunky pixels (default 1).
    quality : float | None
        Encoder quality hint in [0, 1]. Validated only.
    """

    algorithm: Optional[str] = None
    palette: Optional[Sequence[Sequence[int]]] = None
    palette_image: Optional[ImageSource] = None
    width: Optional[int] = None
    height: Optional[int] = None
    step: Optional[int] = None
    quality: Optional[float] = None


def _check_size(label: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidDimensionError(f"{label} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidDimensionError(f"{label} must be greater than 0, got {value}")


def validate_options(options: DitherOptions, registry: Optional[AlgorithmRegistry] = None) -> None:
    """Check every option eagerly, raising the matching :mod:`ditherto.errors` type."""
    if options.step is not None:
        check_step(options.step)
    if options.quality is not None:
        check_quality(options.quality)
    if options.width is not None:
        _check_size("Width", options.width)
    if options.height is not None:
        _check_size("Height", options.height)
    if options.width is not None or options.height is not None:
        validate_dimensions(options.width or 1, options.height or 1)
    if options.palette is not None:
        as_palette_array(options.palette)
    if options.algorithm is not None:
        resolve_algorithm(options.algorithm, registry)


def resolve_palette(options: DitherOptions) -> List[Color]:
    """Pick the palette: explicit, then extracted from an image, then black/white."""
    if options.palette is not None:
        return [tuple(int(c) for c in color) for color in options.palette]
    if options.palette_image is not None:
        palette = extract_palette(load_image(options.palette_image))
        if not palette:
            raise EmptyPaletteError("Palette image has no opaque pixels")
        return palette
    return list(DEFAULT_PALETTE)


def dither_image(
    image: RawImage,
    options: Optional[DitherOptions] = None,
    *,
    registry: Optional[AlgorithmRegistry] = None,
) -> RawImage:
    """Dither ``image`` according to ``options``.

    Parameters
    ----------
    image : RawImage
        Source pixels. Never modified.
    options : DitherOptions | None
        Processing options; defaults apply for anything unset.
    registry : AlgorithmRegistry | None
        Where algorithm names are looked up; defaults to the built-in registry.

    Returns
    -------
    RawImage
        The dithered image.
    """
    opts = options or DitherOptions()
    reg = algorithms if registry is None else registry

    if not isinstance(image, RawImage):
        raise TypeError("image must be a RawImage")
    validate_dimensions(image.width, image.height)
    validate_options(opts, reg)

    target = None
    if opts.width is not None or opts.height is not None:
        target = calculate_resize_dimensions(image.width, image.height, opts.width, opts.height)
        # the derived side is unbounded until checked here
        validate_dimensions(*target)

    palette = resolve_palette(opts)
    algorithm = resolve_algorithm(opts.algorithm or DEFAULT_ALGORITHM, reg)
    step = DEFAULT_STEP if opts.step is None else opts.step

    work = image
    if target is not None:
        new_w, new_h = target
        work = resize_nearest(image, new_h, new_w)

    return algorithm.apply(work, palette, step)


def dither_file(
    input_path: Union[str, Path],
    output_path: Union[str, Path],
    options: Optional[DitherOptions] = None,
    *,
    registry: Optional[AlgorithmRegistry] = None,
) -> RawImage:
    """Load ``input_path``, dither it and save the result to ``output_path``.

    PNG output is encoded with ``options.quality`` as the hint.
    """
    result = dither_image(load_image(input_path), options, registry=registry)
    write_output(result, output_path, options.quality if options else None)
    return result


__all__ = [
    "DEFAULT_ALGORITHM",
    "DEFAULT_STEP",
    "DEFAULT_PALETTE",
    "DitherOptions",
    "validate_options",
    "resolve_palette",
    "dither_image",
    "dither_file",
    "check_quality",
]
