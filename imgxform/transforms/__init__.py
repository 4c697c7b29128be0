"""Image transforms and a unified entry-point for applying them.

Exported API
------------
- apply_transform(src, transform, out=None)
- output_size(src, transform)
- make_transform(name, *params)

Supported transforms
--------------------
- "squash"    : ``Squash(xfac, yfac)``, nearest-sample downsampling
- "color_rot" : ``ColorRotate()``, R<-B, G<-R, B<-G rotation
- "blur"      : ``Blur(blur_dist)``, square box blur
- "expand"    : ``Expand()``, 2x upsampling with neighbor averaging

Implementation notes
--------------------
Each transform is a per-pixel function that accepts scalar coordinates or
whole coordinate grids. The whole-image functions evaluate it once over the
full destination grid.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

from ..utils.raster import Image
from .blur import blur, blur_pixel
from .color_rot import color_rot, color_rot_pixel
from .expand import expand, expand_pixel
from .squash import squash, squash_pixel, squash_size

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Squash:
    xfac: int
    yfac: int


@dataclass(frozen=True)
class ColorRotate:
    pass


@dataclass(frozen=True)
class Blur:
    blur_dist: int


@dataclass(frozen=True)
class Expand:
    pass


Transform = Union[Squash, ColorRotate, Blur, Expand]

TRANSFORMS = {
    "squash": Squash,
    "color_rot": ColorRotate,
    "blur": Blur,
    "expand": Expand,
}


def make_transform(name: str, *params: int) -> Transform:
    """Build a transform from its command-line name and integer parameters."""
    try:
        cls = TRANSFORMS[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown transformation: {name}") from None
    try:
        return cls(*params)
    except TypeError:
        raise ValueError(f"Wrong number of parameters for {name}: {len(params)}") from None


def output_size(src: Image, transform: Transform) -> tuple[int, int]:
    """Return the ``(width, height)`` the transform produces for ``src``."""
    if isinstance(transform, Squash):
        return squash_size(src.width, src.height, transform.xfac, transform.yfac)
    if isinstance(transform, (ColorRotate, Blur)):
        return src.width, src.height
    if isinstance(transform, Expand):
        return src.width * 2, src.height * 2

    raise ValueError(f"Unknown transformation: {transform!r}")


def apply_transform(src: Image, transform: Transform, out: Optional[Image] = None) -> Image:
    """Apply ``transform`` to ``src``.

    Parameters
    ----------
    src : Image
        Source image; never modified.
    transform : Squash | ColorRotate | Blur | Expand
        The transform and its parameters.
    out : Image | None
        Optional preallocated destination; its size must equal
        :func:`output_size` and its buffer must not alias ``src``.

    Returns
    -------
    Image
        The destination image.
    """
    width, height = output_size(src, transform)
    logger.debug(
        "applying %s to %dx%d image -> %dx%d", transform, src.width, src.height, width, height
    )

    if isinstance(transform, Squash):
        return squash(src, transform.xfac, transform.yfac, out)
    if isinstance(transform, ColorRotate):
        return color_rot(src, out)
    if isinstance(transform, Blur):
        return blur(src, transform.blur_dist, out)
    return expand(src, out)


__all__ = [
    "Squash",
    "ColorRotate",
    "Blur",
    "Expand",
    "Transform",
    "TRANSFORMS",
    "make_transform",
    "output_size",
    "apply_transform",
    "squash",
    "squash_pixel",
    "color_rot",
    "color_rot_pixel",
    "blur",
    "blur_pixel",
    "expand",
    "expand_pixel",
]
