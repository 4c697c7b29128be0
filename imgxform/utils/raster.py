"""The in-memory raster type shared by the loader and the transforms.

An :class:`Image` holds a flat, row-major NumPy buffer of packed RGBA pixels
(see :mod:`imgxform.utils.pixel`) together with its dimensions.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from .pixel import CHANNELS, channel, pack

Array = np.ndarray


@dataclass(eq=False)
class Image:
    """A ``width x height`` buffer of 32-bit RGBA pixels.

    Parameters
    ----------
    width : int
        Number of columns (>=1).
    height : int
        Number of rows (>=1).
    pixels : np.ndarray
        ``width * height`` packed pixels in row-major order. Any array-like
        is accepted and stored as a flat ``uint32`` array.
    """

    width: int
    height: int
    pixels: Array

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(
                f"image dimensions must be positive, got {self.width}x{self.height}"
            )
        self.width = int(self.width)
        self.height = int(self.height)
        self.pixels = np.asarray(self.pixels, dtype=np.uint32).reshape(-1)
        if self.pixels.size != self.width * self.height:
            raise ValueError(
                f"pixel buffer has {self.pixels.size} entries, "
                f"expected {self.width * self.height}"
            )

    @classmethod
    def blank(cls, width: int, height: int) -> "Image":
        """Create an all-zero image of the given size."""
        if width < 1 or height < 1:
            raise ValueError(f"image dimensions must be positive, got {width}x{height}")
        return cls(width, height, np.zeros(width * height, dtype=np.uint32))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Image":
        """Build an image from a list of rows of packed pixel values."""
        grid = np.asarray(rows, dtype=np.uint32)
        if grid.ndim != 2:
            raise ValueError("rows must form a rectangular 2-D grid")
        height, width = grid.shape
        return cls(width, height, grid)

    @classmethod
    def from_rgba(cls, arr: Array) -> "Image":
        """Pack an ``(H, W, 4)`` ``uint8`` RGBA array into an image."""
        if not isinstance(arr, np.ndarray) or arr.ndim != 3 or arr.shape[2] != 4:
            raise ValueError("arr must be an RGBA image with shape (H, W, 4)")
        height, width, _ = arr.shape
        grid = pack(arr[:, :, 0], arr[:, :, 1], arr[:, :, 2], arr[:, :, 3])
        return cls(width, height, grid)

    @property
    def shape(self) -> tuple[int, int]:
        """``(height, width)``, matching NumPy's row-major convention."""
        return self.height, self.width

    def grid(self) -> Array:
        """Return the pixels as a ``(height, width)`` view."""
        return self.pixels.reshape(self.height, self.width)

    def to_rgba(self) -> Array:
        """Unpack into an ``(H, W, 4)`` ``uint8`` RGBA array."""
        grid = self.grid()
        return np.stack([channel(grid, c) for c in CHANNELS], axis=-1).astype(np.uint8)

    def copy(self) -> "Image":
        return Image(self.width, self.height, self.pixels.copy())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Image):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and np.array_equal(self.pixels, other.pixels)
        )

    def __repr__(self) -> str:
        return f"Image(width={self.width}, height={self.height})"


__all__ = ["Image"]
