"""Image loading and saving utilities using Pillow.

All processing in this project happens on :class:`~imgxform.utils.raster.Image`
buffers. These helpers only convert between Pillow images and packed RGBA
buffers for IO.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image as PILImage

from .raster import Image

logger = logging.getLogger(__name__)


def load_image(path: Union[str, Path]) -> Image:
    """Load an image file into an RGBA :class:`Image`.

    Parameters
    ----------
    path : str | Path
        Path to an image supported by Pillow.

    Returns
    -------
    Image
        The decoded image. Files without an alpha channel get alpha 255.
    """
    p = Path(path)
    with PILImage.open(p) as im:
        im = im.convert("RGBA")
        arr = np.array(im, dtype=np.uint8)
    img = Image.from_rgba(arr)
    logger.debug("loaded %s (%dx%d)", p, img.width, img.height)
    return img


def save_image(img: Image, path: Union[str, Path]) -> None:
    """Save an :class:`Image` to a file via Pillow.

    Parameters
    ----------
    img : Image
        The image to write.
    path : str | Path
        Output file path. The format is inferred from the extension and must
        be one that can store RGBA (e.g. PNG).
    """
    if not isinstance(img, Image):
        raise TypeError("img must be an imgxform Image")

    p = Path(path)
    im = PILImage.fromarray(img.to_rgba())
    im.save(p)
    logger.debug("saved %s (%dx%d)", p, img.width, img.height)
