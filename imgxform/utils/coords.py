"""Row/column to buffer-index mapping for row-major pixel buffers."""
from __future__ import annotations


def index(width, row, col):
    """Return the linear index of ``(row, col)`` in a buffer of the given width.

    Only meaningful for in-bounds coordinates; check with :func:`in_bounds`
    first when the coordinate is speculative.
    """
    return row * width + col


def in_bounds(width, height, row, col):
    """True iff ``0 <= row < height`` and ``0 <= col < width``.

    With array coordinates this returns a boolean mask of the same shape.
    """
    return (row >= 0) & (row < height) & (col >= 0) & (col < width)


__all__ = ["index", "in_bounds"]
