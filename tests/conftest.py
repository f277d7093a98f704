"""Shared test images and palettes."""

import numpy as np
import pytest

from ditherto.image import RawImage

BW = [(0, 0, 0), (255, 255, 255)]
GAMEBOY = [(15, 56, 15), (48, 98, 48), (139, 172, 15), (155, 188, 15)]
RGB_PRIMARIES = [(255, 0, 0), (0, 255, 0), (0, 0, 255)]


def rgb_set(image: RawImage) -> set:
    return {tuple(int(c) for c in px) for px in image.rgb.reshape(-1, 3)}


@pytest.fixture
def bw():
    return list(BW)


@pytest.fixture
def checkerboard():
    black, white = (0, 0, 0), (255, 255, 255)
    return RawImage.from_colors([[black, white], [white, black]])


@pytest.fixture
def gradient():
    """4x4 grey gradient, luminance increasing row by row."""
    rows = [
        [0, 85, 170, 255],
        [64, 128, 192, 255],
        [128, 160, 200, 255],
        [192, 210, 230, 255],
    ]
    return RawImage.from_colors([[(v, v, v) for v in row] for row in rows])


@pytest.fixture
def noise():
    rng = np.random.default_rng(1234)
    arr = rng.integers(0, 256, size=(13, 17, 4), dtype=np.uint8)
    return RawImage(arr)
