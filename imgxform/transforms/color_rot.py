"""Color rotation: a lossless cyclic permutation of the R, G and B channels."""
from __future__ import annotations

from typing import Optional

from ..utils.pixel import rotate_colors
from ..utils.raster import Image
from .base import fill, prepare_destination


def color_rot_pixel(pixel):
    """Red takes the old blue, green the old red, blue the old green; alpha stays."""
    return rotate_colors(pixel)


def color_rot(src: Image, out: Optional[Image] = None) -> Image:
    """Apply :func:`color_rot_pixel` to every pixel. Three applications are the identity."""
    dst = prepare_destination(src, src.width, src.height, out)
    return fill(dst, color_rot_pixel(src.grid()))
