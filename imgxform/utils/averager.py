"""Running per-channel average of RGBA pixels.

:class:`PixelAverager` collects pixels and reports their channel-wise mean
using integer division, which truncates and never rounds. It is the shared
machinery behind the blur and expand transforms: each of those only decides
*which* source coordinates to sample, and the averager takes care of skipping
coordinates that fall outside the image.

The averager is shape-agnostic. Feeding it scalars gives scalar sums; feeding
it equally shaped coordinate arrays gives one independent accumulator per
array element, which is how whole images are processed in a single pass.
"""
from __future__ import annotations

import numpy as np

from .coords import in_bounds, index
from .pixel import ALPHA, BLUE, GREEN, RED, channel, pack
from .raster import Image


def _masked(values, mask) -> np.ndarray:
    return np.where(mask, values, 0).astype(np.int64)


class PixelAverager:
    """Accumulates pixels and yields their truncated per-channel average.

    Attributes
    ----------
    red, green, blue, alpha : int | np.ndarray
        Running channel sums (64-bit once anything has been ingested).
    count : int | np.ndarray
        Number of pixels ingested.
    """

    def __init__(self) -> None:
        self.red = 0
        self.green = 0
        self.blue = 0
        self.alpha = 0
        self.count = 0

    def _accumulate(self, pixel, mask) -> None:
        self.red = self.red + _masked(channel(pixel, RED), mask)
        self.green = self.green + _masked(channel(pixel, GREEN), mask)
        self.blue = self.blue + _masked(channel(pixel, BLUE), mask)
        self.alpha = self.alpha + _masked(channel(pixel, ALPHA), mask)
        self.count = self.count + np.asarray(mask, dtype=np.int64)

    def ingest(self, pixel) -> None:
        """Add one pixel (or one pixel per accumulator) to the sums."""
        self._accumulate(pixel, True)

    def ingest_from_image(self, image: Image, row, col, where=True) -> None:
        """Add the pixel at ``(row, col)`` of ``image`` if it is in bounds.

        Out-of-bounds coordinates are skipped silently and are never used to
        index the pixel buffer. ``where`` can narrow ingestion further; it is
        combined with the bounds check.
        """
        mask = in_bounds(image.width, image.height, row, col) & np.asarray(where, dtype=bool)
        if not np.any(mask):
            return
        # Masked-out positions read pixel 0, which always exists, and are then discarded.
        safe_row = np.where(mask, row, 0)
        safe_col = np.where(mask, col, 0)
        pixel = image.pixels[index(image.width, safe_row, safe_col)]
        self._accumulate(pixel, mask)

    def average(self):
        """Return the truncated per-channel average as a packed pixel.

        An averager that has seen no pixels yields ``0`` (transparent black).
        """
        count = np.asarray(self.count, dtype=np.int64)
        divisor = np.maximum(count, 1)
        r, g, b, a = (
            np.where(count > 0, np.asarray(total, dtype=np.int64) // divisor, 0)
            for total in (self.red, self.green, self.blue, self.alpha)
        )
        pixel = pack(r, g, b, a)
        if np.ndim(pixel) == 0:
            return int(pixel)
        return pixel


__all__ = ["PixelAverager"]
