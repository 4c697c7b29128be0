"""Packing and unpacking of 32-bit RGBA pixels.

A pixel is stored as a single unsigned 32-bit value with red in the most
significant byte and alpha in the least significant one::

    0xRRGGBBAA

Every function here works on plain Python ints as well as on NumPy integer
arrays, so the same code serves single-pixel queries and whole images.
"""
from __future__ import annotations

from typing import Union

import numpy as np

Array = np.ndarray
PixelLike = Union[int, np.integer, Array]

RED = "red"
GREEN = "green"
BLUE = "blue"
ALPHA = "alpha"

CHANNELS = (RED, GREEN, BLUE, ALPHA)

_SHIFTS = {RED: 24, GREEN: 16, BLUE: 8, ALPHA: 0}


def _widen(value: PixelLike) -> PixelLike:
    # uint8 inputs would overflow when shifted into the red byte
    if isinstance(value, (np.ndarray, np.generic)):
        return value.astype(np.uint32)
    return int(value)


def channel(pixel: PixelLike, which: str) -> PixelLike:
    """Extract one 8-bit channel (``"red"``, ``"green"``, ``"blue"`` or ``"alpha"``)."""
    try:
        shift = _SHIFTS[which]
    except KeyError:
        raise ValueError(f"Unknown channel: {which}") from None
    return (pixel >> shift) & 0xFF


def pack(r: PixelLike, g: PixelLike, b: PixelLike, a: PixelLike) -> PixelLike:
    """Combine four byte values into one RGBA pixel.

    Parameters
    ----------
    r, g, b, a : int | np.ndarray
        Channel values in 0..255. Arrays must broadcast against each other.

    Returns
    -------
    int | np.ndarray
        The packed pixel(s); ``uint32`` when any input is a NumPy value.
    """
    return (_widen(r) << 24) | (_widen(g) << 16) | (_widen(b) << 8) | _widen(a)


def unpack(pixel: PixelLike) -> tuple:
    """Split a pixel into its ``(r, g, b, a)`` channels."""
    return tuple(channel(pixel, c) for c in CHANNELS)


def rotate_colors(pixel: PixelLike) -> PixelLike:
    """Rotate the color channels: red takes blue, green takes red, blue takes green.

    Alpha is left untouched, so ``0xAABBCCDD`` becomes ``0xCCAABBDD``.
    """
    r, g, b, a = unpack(pixel)
    return pack(b, r, g, a)


__all__ = [
    "RED",
    "GREEN",
    "BLUE",
    "ALPHA",
    "CHANNELS",
    "channel",
    "pack",
    "unpack",
    "rotate_colors",
]
