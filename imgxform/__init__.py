from __future__ import annotations

from imgxform.transforms import (  # noqa: F401
    Blur,
    ColorRotate,
    Expand,
    Squash,
    apply_transform,
    make_transform,
    output_size,
)
from imgxform.utils.averager import PixelAverager  # noqa: F401
from imgxform.utils.loader import load_image, save_image  # noqa: F401
from imgxform.utils.raster import Image  # noqa: F401

__all__ = [
    "Blur",
    "ColorRotate",
    "Expand",
    "Squash",
    "apply_transform",
    "make_transform",
    "output_size",
    "PixelAverager",
    "load_image",
    "save_image",
    "Image",
]
