"""Dithering algorithms and a unified entry-point for application.

Exported API
------------
- apply_dither(image, palette, method="atkinson", step=1)
- algorithms: the process-wide registry holding the built-in algorithms
- default_registry(): a fresh registry holding the built-in algorithms

Supported methods
-----------------
- "atkinson"        : Atkinson error diffusion (6/8 of the error diffused)
- "floyd-steinberg" : Floyd–Steinberg error diffusion
- "ordered"         : Ordered/Bayer dithering using a 4x4 matrix

Implementation notes
--------------------
All dithers take a :class:`~ditherto.image.RawImage`, a fixed palette and a
block ``step``, and return a new image whose pixels are all palette colours
with alpha 255. The input image is never modified. Diffusion loops are
compiled with Numba; ordered dithering is vectorized NumPy.
"""
from __future__ import annotations

from typing import Optional, Sequence

from ..errors import UnknownAlgorithmError
from ..image import RawImage
from . import atkinson, bayer, floyd
from .registry import AlgorithmRegistry, DitherAlgorithm

ATKINSON = DitherAlgorithm(atkinson.NAME, atkinson.dither_atkinson)
FLOYD_STEINBERG = DitherAlgorithm(floyd.NAME, floyd.dither_floyd)
ORDERED = DitherAlgorithm(bayer.NAME, bayer.dither_ordered)

BUILTIN_ALGORITHMS = (ATKINSON, FLOYD_STEINBERG, ORDERED)


def default_registry() -> AlgorithmRegistry:
    """Return a new registry with the built-in algorithms registered."""
    registry = AlgorithmRegistry()
    for algorithm in BUILTIN_ALGORITHMS:
        registry.register(algorithm)
    return registry


algorithms = default_registry()


def resolve_algorithm(name: str, registry: Optional[AlgorithmRegistry] = None) -> DitherAlgorithm:
    """Look ``name`` up, raising :class:`UnknownAlgorithmError` if missing."""
    reg = algorithms if registry is None else registry
    algorithm = reg.get(name)
    if algorithm is None:
        raise UnknownAlgorithmError(name, reg.list())
    return algorithm


def apply_dither(
    image: RawImage,
    palette: Sequence[Sequence[int]],
    method: str = "atkinson",
    step: int = 1,
    registry: Optional[AlgorithmRegistry] = None,
) -> RawImage:
    """Apply the selected dithering method to an image.

    Parameters
    ----------
    image : RawImage
        Input RGBA image.
    palette : sequence of (r, g, b)
        Allowed output colours.
    method : str
        Registered algorithm name.
    step : int
        Block size (>=1).
    registry : AlgorithmRegistry | None
        Registry to look ``method`` up in; defaults to :data:`algorithms`.

    Returns
    -------
    RawImage
        Dithered image.
    """
    return resolve_algorithm(method, registry).apply(image, palette, step)


__all__ = [
    "AlgorithmRegistry",
    "DitherAlgorithm",
    "ATKINSON",
    "FLOYD_STEINBERG",
    "ORDERED",
    "BUILTIN_ALGORITHMS",
    "algorithms",
    "default_registry",
    "resolve_algorithm",
    "apply_dither",
]
