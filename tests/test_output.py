"""Tests for output formatting."""

import io

import numpy as np
import pytest
from PIL import Image

from ditherto.errors import InvalidQualityError
from ditherto.output import check_quality, encode_png, format_output, to_rgb_bytes, write_output
from ditherto.utils.loader import load_image


class TestOutput:
    def test_rgb_bytes(self, checkerboard):
        data = to_rgb_bytes(checkerboard)
        assert len(data) == 2 * 2 * 3
        assert data[:6] == bytes([0, 0, 0, 255, 255, 255])

    def test_raw_is_identity(self, checkerboard):
        assert format_output(checkerboard) is checkerboard

    def test_png_decodes(self, gradient):
        data = format_output(gradient, "png", quality=0.5)
        with Image.open(io.BytesIO(data)) as im:
            assert im.size == (4, 4)
            assert np.array_equal(np.array(im.convert("RGB")), gradient.rgb)

    def test_invalid_quality(self, checkerboard):
        with pytest.raises(InvalidQualityError):
            encode_png(checkerboard, quality=2)
        with pytest.raises(InvalidQualityError):
            format_output(checkerboard, "rgb", quality=-1)

    def test_unknown_format(self, checkerboard):
        with pytest.raises(ValueError):
            format_output(checkerboard, "gif")


class TestWriteOutput:
    def test_png(self, tmp_path, gradient):
        path = tmp_path / "out.png"
        write_output(gradient, path, quality=0.7)
        assert path.read_bytes() == encode_png(gradient)

    def test_other_format(self, tmp_path, gradient):
        path = tmp_path / "out.bmp"
        write_output(gradient, path, quality=1)
        assert np.array_equal(load_image(path).rgb, gradient.rgb)

    @pytest.mark.parametrize("name", ["out.png", "out.bmp"])
    def test_invalid_quality_writes_nothing(self, tmp_path, gradient, name):
        path = tmp_path / name
        with pytest.raises(InvalidQualityError):
            write_output(gradient, path, quality=3)
        assert not path.exists()


class TestCheckQuality:
    @pytest.mark.parametrize("value", [0, 0.5, 1, 1.0])
    def test_accepts(self, value):
        assert check_quality(value) == float(value)

    @pytest.mark.parametrize("value", [-0.01, 1.01, True, "0.5", None])
    def test_rejects(self, value):
        with pytest.raises(InvalidQualityError):
            check_quality(value)
