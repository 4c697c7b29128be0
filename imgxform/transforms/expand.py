"""Expand: double both dimensions, interpolating between source pixels.

For output pixel ``(i, j)`` let ``r = i // 2`` and ``c = j // 2``:

- ``i`` even, ``j`` even: copy of source ``(r, c)``
- ``i`` even, ``j`` odd: average of ``(r, c)`` and ``(r, c + 1)``
- ``i`` odd, ``j`` even: average of ``(r, c)`` and ``(r + 1, c)``
- ``i`` odd, ``j`` odd: average of ``(r, c)``, ``(r, c + 1)``,
  ``(r + 1, c)`` and ``(r + 1, c + 1)``

Neighbors past the last row or column are left out of the average. The copy
case is a single-sample average, so all four cases share one code path.
"""
from __future__ import annotations

from typing import Iterator, Optional

from ..utils.averager import PixelAverager
from ..utils.raster import Image
from .base import coordinate_grid, fill, prepare_destination


def expand_candidates(row, col) -> Iterator[tuple]:
    """Yield ``(src_row, src_col, used)`` for the four possible source samples.

    ``used`` selects the samples that apply to the parity of ``(row, col)``.
    """
    r, c = row // 2, col // 2
    row_odd = row % 2 == 1
    col_odd = col % 2 == 1
    yield r, c, True
    yield r, c + 1, col_odd
    yield r + 1, c, row_odd
    yield r + 1, c + 1, row_odd & col_odd


def expand_pixel(src: Image, row, col):
    """Value of output pixel ``(row, col)`` of the expanded ``src``."""
    pa = PixelAverager()
    for r, c, used in expand_candidates(row, col):
        pa.ingest_from_image(src, r, c, where=used)
    return pa.average()


def expand(src: Image, out: Optional[Image] = None) -> Image:
    """Return ``src`` scaled to ``2*width x 2*height``."""
    width, height = src.width * 2, src.height * 2
    dst = prepare_destination(src, width, height, out)
    rows, cols = coordinate_grid(width, height)
    return fill(dst, expand_pixel(src, rows, cols))
