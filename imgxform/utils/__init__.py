"""Utility modules for imgxform.

Modules:
- pixel: Packing/unpacking of 32-bit RGBA pixels.
- coords: Row/column to buffer-index mapping and bounds checks.
- raster: The Image buffer type.
- averager: Truncating per-channel pixel averages.
- loader: Load/save Pillow <-> Image conversion utilities.
"""
from .pixel import channel, pack, unpack, rotate_colors
from .coords import index, in_bounds
from .raster import Image
from .averager import PixelAverager
from .loader import load_image, save_image

__all__ = [
    "channel",
    "pack",
    "unpack",
    "rotate_colors",
    "index",
    "in_bounds",
    "Image",
    "PixelAverager",
    "load_image",
    "save_image",
]
