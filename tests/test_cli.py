"""Tests for the command-line interface."""

import pytest

from ditherto import __version__
from ditherto.image import RawImage
from ditherto.main import build_options, main, parse_args, parse_colors, validate_args
from ditherto.output import encode_png
from ditherto.utils.loader import load_image, save_image

from conftest import GAMEBOY, rgb_set


@pytest.fixture
def input_png(tmp_path, gradient):
    path = tmp_path / "input.png"
    save_image(gradient, path)
    return path


class TestParseArgs:
    def test_basic(self):
        ns = parse_args(["input.png", "-o", "output.png"])
        assert ns.input == "input.png"
        assert ns.output == "output.png"
        assert ns.algorithm == "atkinson"
        assert ns.step == 1

    def test_all_flags(self):
        ns = parse_args([
            "input.png", "--output", "output.png",
            "--algorithm", "floyd-steinberg",
            "--width", "300", "--height", "200",
            "--step", "2", "--quality", "0.8",
            "--paletteimg", "palette.png",
        ])
        assert ns.algorithm == "floyd-steinberg"
        assert (ns.width, ns.height) == (300, 200)
        assert ns.step == 2
        assert ns.quality == 0.8
        assert ns.paletteimg == "palette.png"

    def test_unknown_flag(self):
        with pytest.raises(SystemExit):
            parse_args(["input.png", "--bogus"])

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc:
            parse_args(["-v"])
        assert exc.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_help_lists_options(self, capsys):
        with pytest.raises(SystemExit):
            parse_args(["--help"])
        out = capsys.readouterr().out
        for flag in ("--output", "--algorithm", "--paletteimg", "--width", "--height", "--step", "--quality"):
            assert flag in out


class TestValidateArgs:
    def check(self, argv, message):
        with pytest.raises(ValueError, match=message):
            validate_args(parse_args(argv))

    def test_input_required(self):
        self.check(["-o", "out.png"], "Input file is required")

    def test_algorithm(self):
        self.check(["in.png", "-o", "o.png", "--algorithm", "invalid"], "Invalid algorithm")

    def test_width(self):
        self.check(["in.png", "-o", "o.png", "--width", "0"], "Width must be greater than 0")

    def test_height(self):
        self.check(["in.png", "-o", "o.png", "--height", "-1"], "Height must be greater than 0")

    def test_step(self):
        self.check(["in.png", "-o", "o.png", "--step", "0"], "Step must be greater than 0")

    def test_quality(self):
        self.check(["in.png", "-o", "o.png", "--quality", "1.5"], "Quality must be between 0 and 1")

    def test_missing_file(self, tmp_path):
        self.check([str(tmp_path / "nope.png"), "-o", "o.png"], "Input file not found")

    def test_valid(self, input_png, tmp_path):
        validate_args(parse_args([str(input_png), "-o", str(tmp_path / "o.png"), "--step", "2", "--quality", "0.9"]))


class TestColors:
    def test_rgb_triples(self):
        assert parse_colors("0,0,0; 255,255,255") == [(0, 0, 0), (255, 255, 255)]

    def test_hex(self):
        assert parse_colors("#0f380f;#9bbc0f") == [(15, 56, 15), (155, 188, 15)]

    def test_invalid(self):
        with pytest.raises(ValueError):
            parse_colors("1,2")

    def test_build_options_preset(self):
        opts = build_options(parse_args(["in.png", "-o", "o.png", "--palette", "gameboy"]))
        assert opts.palette == GAMEBOY


class TestMain:
    def test_end_to_end(self, input_png, tmp_path, capsys):
        out = tmp_path / "out.png"
        code = main([str(input_png), "-o", str(out), "--algorithm", "ordered", "--palette", "gameboy", "--step", "2"])
        assert code == 0
        assert rgb_set(load_image(out)) <= set(GAMEBOY)
        assert "Wrote" in capsys.readouterr().out

    def test_palette_image_and_resize(self, input_png, tmp_path):
        swatch = tmp_path / "swatch.png"
        save_image(RawImage.from_colors([[(0, 0, 0), (255, 0, 0)]]), swatch)
        out = tmp_path / "out.png"
        code = main([str(input_png), "-o", str(out), "--paletteimg", str(swatch), "--width", "2"])
        assert code == 0
        result = load_image(out)
        assert (result.width, result.height) == (2, 2)
        assert rgb_set(result) <= {(0, 0, 0), (255, 0, 0)}

    def test_argument_error(self, capsys):
        assert main(["-o", "out.png"]) == 2
        assert "Argument error" in capsys.readouterr().out

    def test_bad_colors(self, input_png, tmp_path, capsys):
        assert main([str(input_png), "-o", str(tmp_path / "o.png"), "--colors", "1,2"]) == 2

    def test_unreadable_input(self, tmp_path, capsys):
        bogus = tmp_path / "bogus.png"
        bogus.write_bytes(b"not an image")
        assert main([str(bogus), "-o", str(tmp_path / "o.png")]) == 1
        assert "Error" in capsys.readouterr().out

    def test_quality_reaches_png_output(self, input_png, tmp_path):
        out = tmp_path / "out.png"
        assert main([str(input_png), "-o", str(out), "--quality", "0.4"]) == 0
        assert out.read_bytes() == encode_png(load_image(out))
