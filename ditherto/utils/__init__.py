"""Utility functions for ditherto.

Modules:
- loader: Load/save Pillow <-> RawImage conversion utilities.
- resize: Nearest-neighbor resizing and aspect-ratio target sizes.
"""
from .loader import load_image, save_image
from .resize import calculate_resize_dimensions, resize_nearest, resize_to_fit

__all__ = [
    "load_image",
    "save_image",
    "calculate_resize_dimensions",
    "resize_nearest",
    "resize_to_fit",
]
