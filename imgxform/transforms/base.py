"""Helpers shared by the transforms: destination allocation and coordinate grids."""
from __future__ import annotations

from typing import Optional

import numpy as np

from ..utils.raster import Image

Array = np.ndarray


def prepare_destination(src: Image, width: int, height: int, out: Optional[Image] = None) -> Image:
    """Return a destination image of exactly ``width x height``.

    A fresh zero-filled image is allocated unless ``out`` is given, in which
    case it must already have the right size and must not share its buffer
    with ``src``.
    """
    if out is None:
        return Image.blank(width, height)
    if (out.width, out.height) != (width, height):
        raise ValueError(
            f"destination is {out.width}x{out.height}, expected {width}x{height}"
        )
    if np.shares_memory(out.pixels, src.pixels):
        raise ValueError("destination must not share its pixel buffer with the source")
    return out


def coordinate_grid(width: int, height: int) -> tuple[Array, Array]:
    """Row and column index arrays, each of shape ``(height, width)``."""
    rows, cols = np.indices((height, width))
    return rows, cols


def fill(dst: Image, values: Array) -> Image:
    """Write a ``(height, width)`` grid of packed pixels into ``dst``."""
    dst.pixels[:] = np.asarray(values, dtype=np.uint32).reshape(-1)
    return dst
