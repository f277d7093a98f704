"""Command-line entry point for ditherto.

This tool loads an image, optionally resizes it to fit a maximum width and/or
height, dithers it to a fixed colour palette with the selected algorithm, and
saves the result.

All processing occurs on NumPy arrays; Pillow is used only for
loading and saving.

Usage example:
    ditherto input.png -o output.png --algorithm floyd-steinberg --palette gameboy --step 2
"""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from . import __version__
from .dithers import algorithms
from .errors import DitherError
from .image import Color
from .palette.presets import get_palette, palette_names
from .pipeline import DEFAULT_ALGORITHM, DitherOptions, dither_file


def parse_colors(text: str) -> List[Color]:
    """Parse ``"r,g,b;r,g,b"`` (or ``#rrggbb`` entries) into a colour list."""
    colors: List[Color] = []
    for chunk in text.replace(" ", "").split(";"):
        if not chunk:
            continue
        if chunk.startswith("#"):
            h = chunk[1:]
            if len(h) != 6:
                raise ValueError(f"Invalid hex colour: {chunk}")
            colors.append((int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)))
            continue
        parts = chunk.split(",")
        if len(parts) != 3:
            raise ValueError(f"Invalid colour (expected r,g,b): {chunk}")
        colors.append((int(parts[0]), int(parts[1]), int(parts[2])))
    return colors


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Parameters
    ----------
    argv : list[str] | None
        Optional list of arguments for testing. If None, uses sys.argv.

    Returns
    -------
    argparse.Namespace
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        prog="ditherto",
        description="ditherto - Pixelate your life by dithering images to a fixed colour palette.",
    )

    parser.add_argument("input", nargs="?", help="Path to input image file")
    parser.add_argument("-o", "--output", help="Output file path")
    parser.add_argument(
        "--algorithm",
        type=str,
        default=DEFAULT_ALGORITHM,
        help="Dither algorithm: " + " | ".join(algorithms.list()),
    )
    parser.add_argument(
        "--palette",
        type=str,
        default=None,
        help="Predefined palette: " + " | ".join(name.lower() for name in palette_names()),
    )
    parser.add_argument(
        "--colors",
        type=str,
        default=None,
        help='Explicit palette, e.g. "0,0,0;255,255,255" or "#000000;#ffffff"',
    )
    parser.add_argument(
        "--paletteimg",
        type=str,
        default=None,
        help="Image file whose unique colours form the palette",
    )
    parser.add_argument("--width", type=int, default=None, help="Target max width")
    parser.add_argument("--height", type=int, default=None, help="Target max height")
    parser.add_argument(
        "--step",
        type=int,
        default=1,
        help="Pixel block size (>=1); values >1 create chunky pixels",
    )
    parser.add_argument(
        "--quality",
        type=float,
        default=None,
        help="Output quality hint (0-1)",
    )
    parser.add_argument("-v", "--version", action="version", version=f"%(prog)s {__version__}")

    return parser.parse_args(argv)


def validate_args(ns: argparse.Namespace) -> None:
    """Validate argument values and raise ValueError for invalid inputs.

    Parameters
    ----------
    ns : argparse.Namespace
        Parsed CLI arguments.
    """
    if not ns.input:
        raise ValueError("Input file is required")
    if not ns.output:
        raise ValueError("Output file is required (-o/--output)")
    if algorithms.get(ns.algorithm) is None:
        raise ValueError(
            f"Invalid algorithm: {ns.algorithm} (choose from {', '.join(algorithms.list())})"
        )
    if ns.width is not None and ns.width <= 0:
        raise ValueError("Width must be greater than 0")
    if ns.height is not None and ns.height <= 0:
        raise ValueError("Height must be greater than 0")
    if ns.step <= 0:
        raise ValueError("Step must be greater than 0")
    if ns.quality is not None and not 0.0 <= ns.quality <= 1.0:
        raise ValueError("Quality must be between 0 and 1")
    if sum(x is not None for x in (ns.palette, ns.colors, ns.paletteimg)) > 1:
        raise ValueError("Use only one of --palette, --colors and --paletteimg")
    if not Path(ns.input).exists():
        raise ValueError(f"Input file not found: {ns.input}")
    if ns.paletteimg is not None and not Path(ns.paletteimg).exists():
        raise ValueError(f"Palette image not found: {ns.paletteimg}")


def build_options(ns: argparse.Namespace) -> DitherOptions:
    """Translate validated CLI arguments into :class:`DitherOptions`."""
    palette = None
    if ns.palette is not None:
        palette = get_palette(ns.palette)
    elif ns.colors is not None:
        palette = parse_colors(ns.colors)
    return DitherOptions(
        algorithm=ns.algorithm,
        palette=palette,
        palette_image=ns.paletteimg,
        width=ns.width,
        height=ns.height,
        step=ns.step,
        quality=ns.quality,
    )


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry function for the CLI.

    Parameters
    ----------
    argv : list[str] | None
        Optional list of arguments for testing.

    Returns
    -------
    int
        Exit status code (0 for success, 2 for argument errors, 1 for
        processing failures).
    """
    args = parse_args(argv)
    try:
        validate_args(args)
        options = build_options(args)
    except ValueError as e:
        print(f"Argument error: {e}")
        return 2

    try:
        result = dither_file(args.input, args.output, options)
    except (DitherError, OSError) as e:
        print(f"Error: {e}")
        return 1

    print(f"Wrote {result.width}x{result.height} image ({args.algorithm}, step {args.step}): {args.output}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
