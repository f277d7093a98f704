"""ditherto - dither images to a fixed colour palette.

Public API
----------
- dither_image(image, options): resize -> dither pipeline on a RawImage
- dither_file(input_path, output_path, options): load, dither, save
- apply_dither(image, palette, method, step): run one algorithm directly
- algorithms: registry of available algorithms
- find_closest_color, extract_palette, generate_palette, get_palette
- load_image, save_image, resize_nearest
"""
from __future__ import annotations

__version__ = "0.1.0"

from .errors import (  # noqa: E402
    DitherError,
    EmptyPaletteError,
    InvalidColorError,
    InvalidDimensionError,
    InvalidPaletteError,
    InvalidQualityError,
    InvalidStepError,
    UnknownAlgorithmError,
    UnknownPaletteError,
)
from .image import RawImage  # noqa: E402
from .palette import (  # noqa: E402
    PALETTES,
    extract_palette,
    find_closest_color,
    generate_palette,
    get_palette,
    grayscale_palette,
)
from .dithers import (  # noqa: E402
    AlgorithmRegistry,
    DitherAlgorithm,
    algorithms,
    apply_dither,
    default_registry,
)
from .pipeline import DitherOptions, dither_file, dither_image  # noqa: E402
from .utils.loader import load_image, save_image  # noqa: E402
from .utils.resize import resize_nearest  # noqa: E402

__all__ = [
    "__version__",
    "DitherError",
    "EmptyPaletteError",
    "InvalidColorError",
    "InvalidDimensionError",
    "InvalidPaletteError",
    "InvalidQualityError",
    "InvalidStepError",
    "UnknownAlgorithmError",
    "UnknownPaletteError",
    "RawImage",
    "PALETTES",
    "extract_palette",
    "find_closest_color",
    "generate_palette",
    "get_palette",
    "grayscale_palette",
    "AlgorithmRegistry",
    "DitherAlgorithm",
    "algorithms",
    "apply_dither",
    "default_registry",
    "DitherOptions",
    "dither_file",
    "dither_image",
    "load_image",
    "save_image",
    "resize_nearest",
]
