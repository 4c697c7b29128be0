"""Squash: integer-factor downsampling by nearest-sample decimation.

The image is shrunk horizontally by ``xfac`` and vertically by ``yfac`` by
keeping only the pixels whose row is a multiple of ``yfac`` and whose column
is a multiple of ``xfac``. Given the image below, where each letter is a
pixel::

    XAAAYBBB
    AAAABBBB
    ZCCCWDDD
    CCCCDDDD

squashing with ``xfac=4, yfac=2`` samples rows 0 and 2 at columns 0 and 4::

    XY
    ZW

No averaging takes place.
"""
from __future__ import annotations

from typing import Optional

from ..utils.coords import index
from ..utils.raster import Image
from .base import coordinate_grid, fill, prepare_destination


def squash_size(width: int, height: int, xfac: int, yfac: int) -> tuple[int, int]:
    """Output ``(width, height)`` for the given squash factors.

    Raises
    ------
    ValueError
        If a factor is below 1, or so large that a dimension would be 0.
    """
    if xfac < 1 or yfac < 1:
        raise ValueError("xfac and yfac must be >= 1")
    out_w = width // xfac
    out_h = height // yfac
    if out_w == 0 or out_h == 0:
        raise ValueError("factor too large for image dimensions")
    return out_w, out_h


def squash_pixel(src: Image, row, col, xfac: int, yfac: int):
    """Destination pixel ``(row, col)``: the source pixel at ``(row*yfac, col*xfac)``."""
    return src.pixels[index(src.width, row * yfac, col * xfac)]


def squash(src: Image, xfac: int, yfac: int, out: Optional[Image] = None) -> Image:
    """Downsample ``src`` by ``xfac`` horizontally and ``yfac`` vertically.

    Parameters
    ----------
    src : Image
        Source image.
    xfac : int
        Horizontal factor (>=1).
    yfac : int
        Vertical factor (>=1).
    out : Image | None
        Optional preallocated destination of size
        ``(src.width // xfac) x (src.height // yfac)``.

    Returns
    -------
    Image
        The squashed image.
    """
    width, height = squash_size(src.width, src.height, xfac, yfac)
    dst = prepare_destination(src, width, height, out)
    rows, cols = coordinate_grid(width, height)
    return fill(dst, squash_pixel(src, rows, cols, xfac, yfac))
