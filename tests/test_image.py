"""Tests for RawImage, resizing, loading/saving and output formatting."""

import io

import numpy as np
import pytest
from PIL import Image

from ditherto.errors import InvalidDimensionError, InvalidQualityError
from ditherto.image import MAX_DIMENSION, RawImage, validate_dimensions
from ditherto.output import encode_png, encode_with_quality, format_output, to_rgb_bytes
from ditherto.utils.loader import load_image, save_image
from ditherto.utils.resize import calculate_resize_dimensions, resize_nearest


class TestRawImage:
    def test_from_buffer(self):
        buf = bytes(range(16))
        image = RawImage.from_buffer(buf, 2, 2)
        assert (image.width, image.height) == (2, 2)
        assert image.to_bytes() == buf
        assert image.pixel(1, 0) == (4, 5, 6)

    def test_from_buffer_length_mismatch(self):
        with pytest.raises(ValueError):
            RawImage.from_buffer(bytes(15), 2, 2)

    def test_from_rgb_array_is_opaque(self):
        image = RawImage.from_array(np.zeros((3, 2, 3), dtype=np.uint8))
        assert image.data.shape == (3, 2, 4)
        assert (image.alpha == 255).all()

    def test_rejects_wrong_shape(self):
        with pytest.raises(ValueError):
            RawImage(np.zeros((2, 2, 3), dtype=np.uint8))

    def test_rejects_wrong_dtype(self):
        with pytest.raises(TypeError):
            RawImage(np.zeros((2, 2, 4), dtype=np.float32))

    def test_rejects_empty(self):
        with pytest.raises(InvalidDimensionError):
            RawImage(np.zeros((0, 2, 4), dtype=np.uint8))

    def test_copy_is_independent(self):
        image = RawImage.solid((1, 2, 3), 2, 2)
        clone = image.copy()
        clone.data[0, 0, 0] = 99
        assert image.pixel(0, 0) == (1, 2, 3)

    def test_buffer_length_invariant(self):
        image = RawImage.solid((1, 2, 3), 5, 3)
        assert len(image.to_bytes()) == 5 * 3 * 4


class TestValidateDimensions:
    @pytest.mark.parametrize("w,h", [(0, 1), (1, -1), (MAX_DIMENSION + 1, 1), (1.5, 2), (True, 2)])
    def test_invalid(self, w, h):
        with pytest.raises(InvalidDimensionError):
            validate_dimensions(w, h)

    def test_valid(self):
        validate_dimensions(1, MAX_DIMENSION)


class TestResize:
    def test_dimensions_width_only(self):
        assert calculate_resize_dimensions(400, 200, width=200) == (200, 100)

    def test_dimensions_height_only(self):
        assert calculate_resize_dimensions(400, 200, height=50) == (100, 50)

    def test_dimensions_contain(self):
        assert calculate_resize_dimensions(400, 200, width=100, height=100) == (100, 50)

    def test_dimensions_cover(self):
        assert calculate_resize_dimensions(400, 200, width=100, height=100, fit="cover") == (200, 100)

    def test_dimensions_unchanged(self):
        assert calculate_resize_dimensions(7, 3) == (7, 3)

    def test_upscale_nearest(self):
        image = RawImage.from_colors([[(0, 0, 0), (255, 0, 0)], [(0, 255, 0), (0, 0, 255)]])
        up = resize_nearest(image, 4, 4)
        assert up.pixel(0, 0) == up.pixel(1, 1) == (0, 0, 0)
        assert up.pixel(3, 0) == (255, 0, 0)
        assert up.pixel(0, 3) == (0, 255, 0)
        assert up.pixel(3, 3) == (0, 0, 255)

    def test_downscale_keeps_source_values(self):
        rng = np.random.default_rng(7)
        image = RawImage(rng.integers(0, 256, size=(9, 12, 4), dtype=np.uint8))
        small = resize_nearest(image, 3, 4)
        source = {tuple(px) for px in image.data.reshape(-1, 4).tolist()}
        assert {tuple(px) for px in small.data.reshape(-1, 4).tolist()} <= source

    def test_same_size_is_copy(self):
        image = RawImage.solid((1, 2, 3), 2, 2)
        assert resize_nearest(image, 2, 2).data is not image.data


class TestLoader:
    def test_save_and_load(self, tmp_path, gradient):
        path = tmp_path / "g.png"
        save_image(gradient, path)
        loaded = load_image(path)
        assert np.array_equal(loaded.rgb, gradient.rgb)
        assert (loaded.alpha == 255).all()

    def test_load_keeps_alpha(self, tmp_path):
        arr = np.zeros((2, 2, 4), dtype=np.uint8)
        arr[0, 0] = (10, 20, 30, 0)
        arr[1, 1] = (40, 50, 60, 128)
        path = tmp_path / "a.png"
        Image.fromarray(arr).save(path)
        loaded = load_image(str(path))
        assert loaded.data[0, 0, 3] == 0
        assert tuple(loaded.data[1, 1]) == (40, 50, 60, 128)

    def test_load_from_bytes(self, gradient):
        buf = io.BytesIO()
        Image.fromarray(np.ascontiguousarray(gradient.rgb)).save(buf, format="PNG")
        loaded = load_image(buf.getvalue())
        assert np.array_equal(loaded.rgb, gradient.rgb)


class TestOutput:
    def test_rgb_bytes(self, gradient):
        data = to_rgb_bytes(gradient)
        assert len(data) == 4 * 4 * 3
        assert data[3:6] == bytes((85, 85, 85))

    def test_quality_validation(self, gradient):
        assert encode_with_quality(gradient, 0.5) is gradient
        with pytest.raises(InvalidQualityError):
            encode_with_quality(gradient, 1.1)

    def test_png(self, gradient):
        data = encode_png(gradient, quality=0.8)
        assert data.startswith(b"\x89PNG")
        with Image.open(io.BytesIO(data)) as im:
            assert im.size == (4, 4)

    def test_format_output(self, gradient):
        assert format_output(gradient, "raw") is gradient
        assert format_output(gradient, "rgb") == to_rgb_bytes(gradient)
        with pytest.raises(ValueError):
            format_output(gradient, "gif")
