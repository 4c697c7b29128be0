"""Command-line entry point for imgxform.

This tool loads an image, applies one pixel transform to it, and saves the
result.

All processing occurs on packed RGBA buffers; Pillow is used only for
loading and saving.

Usage example:
    python -m imgxform.main squash input.png output.png 4 2
    python -m imgxform.main blur input.png output.png 3
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .transforms import Transform, apply_transform, make_transform, output_size
from .utils.loader import load_image, save_image
from .utils.raster import Image

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(name)s] - %(message)s"

# Positional parameters each transform takes after <input> <output>, in order.
TRANSFORM_PARAMS = {
    "squash": ("xfac", "yfac"),
    "color_rot": (),
    "blur": ("blur_dist",),
    "expand": (),
}


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
        prog="imgxform",
        description="Apply a pixel transform (squash, color_rot, blur, expand) to an image.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log output (-v for info, -vv for debug).",
    )

    sub = parser.add_subparsers(dest="transform", metavar="transform", required=True)

    def add_transform(name: str, help_text: str) -> argparse.ArgumentParser:
        p = sub.add_parser(name, help=help_text, description=help_text)
        p.add_argument("input", help="Path to input image file")
        p.add_argument("output", help="Path to output image file")
        return p

    p = add_transform("squash", "Shrink by integer factors, keeping every xfac-th column and yfac-th row.")
    p.add_argument("xfac", type=int, help="Horizontal factor (>=1)")
    p.add_argument("yfac", type=int, help="Vertical factor (>=1)")

    add_transform("color_rot", "Rotate color channels: red<-blue, green<-red, blue<-green.")

    p = add_transform("blur", "Average each pixel with its neighbors within blur_dist.")
    p.add_argument("blur_dist", type=int, help="Neighborhood radius in pixels (>=0)")

    add_transform("expand", "Double width and height, averaging between source pixels.")

    return parser.parse_args(argv)


def validate_args(ns: argparse.Namespace) -> None:
    """Validate argument values and raise ValueError for invalid inputs.

    Parameters
    ----------
    ns : argparse.Namespace
        Parsed CLI arguments.
    """
    if ns.transform == "squash" and (ns.xfac < 1 or ns.yfac < 1):
        raise ValueError("squash factors must be integers >= 1")
    if ns.transform == "blur" and ns.blur_dist < 0:
        raise ValueError("blur_dist must be an integer >= 0")
    if not Path(ns.input).exists():
        raise ValueError(f"Input file not found: {ns.input}")


def transform_from_args(ns: argparse.Namespace) -> Transform:
    """Build the transform selected on the command line."""
    params = [getattr(ns, name) for name in TRANSFORM_PARAMS[ns.transform]]
    return make_transform(ns.transform, *params)


def setup_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry function for the CLI.

    Parameters
    ----------
    argv : list[str] | None
        Optional list of arguments for testing.

    Returns
    -------
    int
        Exit status code (0 for success, non-zero for failure).
    """
    args = parse_args(argv)
    setup_logging(args.verbose)
    try:
        validate_args(args)
    except ValueError as e:
        print(f"Error: invalid command-line arguments: {e}", file=sys.stderr)
        return 1

    # 1) Load (Pillow -> Image)
    try:
        img = load_image(args.input)
    except OSError as e:
        logger.info("reading %s failed: %s", args.input, e)
        print("Error: couldn't read input image", file=sys.stderr)
        return 1

    # 2) Size and allocate the destination
    transform = transform_from_args(args)
    try:
        width, height = output_size(img, transform)
    except ValueError as e:
        print(f"Error: couldn't create output image: {e}", file=sys.stderr)
        return 1
    out = Image.blank(width, height)

    # 3) Transform
    apply_transform(img, transform, out)
    logger.info(
        "%s: %dx%d -> %dx%d", args.transform, img.width, img.height, out.width, out.height
    )

    # 4) Save (Image -> Pillow)
    try:
        save_image(out, args.output)
    except (OSError, ValueError) as e:
        logger.info("writing %s failed: %s", args.output, e)
        print("Error: couldn't write output image", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
