"""Box blur over a square neighborhood.

Each output pixel is the truncated average of every source pixel within
``blur_dist`` rows and columns of it, i.e. a ``(2*blur_dist + 1)`` square.
Positions outside the image are ignored rather than padded, so border pixels
average fewer samples. All four channels, alpha included, are averaged; with
``blur_dist == 0`` the output equals the input.
"""
from __future__ import annotations

from typing import Iterator, Optional

from ..utils.averager import PixelAverager
from ..utils.raster import Image
from .base import coordinate_grid, fill, prepare_destination


def _check_dist(blur_dist: int) -> None:
    if blur_dist < 0:
        raise ValueError("blur_dist must be >= 0")


def blur_candidates(row, col, blur_dist: int) -> Iterator[tuple]:
    """Yield every ``(row, col)`` of the square neighborhood, in or out of bounds."""
    for dr in range(-blur_dist, blur_dist + 1):
        for dc in range(-blur_dist, blur_dist + 1):
            yield row + dr, col + dc


def blur_pixel(src: Image, row, col, blur_dist: int):
    """Blurred value of ``src`` at ``(row, col)``."""
    _check_dist(blur_dist)
    pa = PixelAverager()
    for r, c in blur_candidates(row, col, blur_dist):
        pa.ingest_from_image(src, r, c)
    return pa.average()


def blur(src: Image, blur_dist: int, out: Optional[Image] = None) -> Image:
    """Blur ``src`` with a box of radius ``blur_dist`` (>=0).

    Parameters
    ----------
    src : Image
        Source image.
    blur_dist : int
        Neighborhood radius in pixels.
    out : Image | None
        Optional preallocated destination, same size as ``src``.

    Returns
    -------
    Image
        The blurred image.
    """
    _check_dist(blur_dist)
    dst = prepare_destination(src, src.width, src.height, out)
    rows, cols = coordinate_grid(src.width, src.height)
    return fill(dst, blur_pixel(src, rows, cols, blur_dist))
