"""Predefined palettes."""
from __future__ import annotations

from typing import Dict, List

from ..errors import InvalidPaletteError, UnknownPaletteError
from ..image import Color


def grayscale_palette(levels: int) -> List[Color]:
    """Evenly spaced greys from black to white, ``levels`` entries (>=2)."""
    if levels < 2:
        raise InvalidPaletteError("Grayscale palette must have at least 2 levels")
    out: List[Color] = []
    for i in range(levels):
        # round half up
        v = int(i * 255 / (levels - 1) + 0.5)
        out.append((v, v, v))
    return out


PALETTES: Dict[str, List[Color]] = {
    "BW": [
        (0, 0, 0),
        (255, 255, 255),
    ],
    # Original Game Boy LCD greens
    "GAMEBOY": [
        (15, 56, 15),
        (48, 98, 48),
        (139, 172, 15),
        (155, 188, 15),
    ],
    "RGB": [
        (0, 0, 0),
        (255, 0, 0),
        (0, 255, 0),
        (0, 0, 255),
        (255, 255, 0),
        (255, 0, 255),
        (0, 255, 255),
        (255, 255, 255),
    ],
    "GRAYSCALE_16": grayscale_palette(16),
    # CGA mode 4, palette 1 high intensity
    "CGA_4": [
        (0, 0, 0),
        (255, 0, 255),
        (0, 255, 255),
        (255, 255, 255),
    ],
}


def palette_names() -> List[str]:
    return list(PALETTES)


def get_palette(name: str) -> List[Color]:
    """Return a copy of a predefined palette by (case-insensitive) name.

    Dashes are accepted in place of underscores, so ``"grayscale-16"`` works.
    """
    key = name.strip().upper().replace("-", "_")
    try:
        return list(PALETTES[key])
    except KeyError:
        raise UnknownPaletteError(
            f"Unknown palette: {name!r} (available: {', '.join(PALETTES)})"
        ) from None


__all__ = ["PALETTES", "get_palette", "grayscale_palette", "palette_names"]
