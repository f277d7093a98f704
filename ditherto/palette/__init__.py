"""Palettes: colour matching, presets and extraction."""
from .matching import (
    as_palette_array,
    closest_index,
    color_distance,
    find_closest_color,
    two_closest,
)
from .presets import PALETTES, get_palette, grayscale_palette, palette_names
from .extract import extract_palette, generate_palette, luminance

__all__ = [
    "as_palette_array",
    "closest_index",
    "color_distance",
    "find_closest_color",
    "two_closest",
    "PALETTES",
    "get_palette",
    "grayscale_palette",
    "palette_names",
    "extract_palette",
    "generate_palette",
    "luminance",
]
