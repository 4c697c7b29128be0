"""Test image factories.

Every fixture builds its images from scratch, so tests never share pixel
buffers.
"""
import numpy as np
import pytest

from imgxform.utils.raster import Image


def make_image(width, height, seed=0):
    """Deterministic image of random RGBA pixels."""
    rng = np.random.default_rng(seed)
    pixels = rng.integers(0, 2**32, size=width * height, dtype=np.uint64).astype(np.uint32)
    return Image(width, height, pixels)


def gray(v, a=0xFF):
    """Pixel with red, green and blue all equal to ``v``."""
    return (v << 24) | (v << 16) | (v << 8) | a


def naive_average(pixels):
    """Per-channel truncated average computed with plain ints."""
    sums = [0, 0, 0, 0]
    for p in pixels:
        for k, shift in enumerate((24, 16, 8, 0)):
            sums[k] += (p >> shift) & 0xFF
    n = len(pixels)
    r, g, b, a = (s // n for s in sums)
    return (r << 24) | (g << 16) | (b << 8) | a


def naive_blur(img, blur_dist):
    """Plain-Python box blur used as an independent reference."""
    rows = img.grid().tolist()
    out = []
    for i in range(img.height):
        for j in range(img.width):
            neighborhood = [
                rows[r][c]
                for r in range(i - blur_dist, i + blur_dist + 1)
                for c in range(j - blur_dist, j + blur_dist + 1)
                if 0 <= r < img.height and 0 <= c < img.width
            ]
            out.append(naive_average(neighborhood))
    return Image(img.width, img.height, out)


@pytest.fixture
def image_factory():
    return make_image


@pytest.fixture
def smol():
    """A 21x15 image of random pixels."""
    return make_image(21, 15, seed=1234)


@pytest.fixture
def gray3x3():
    """3x3 gray ramp 0..80; the pixel at (0, 1) is fully transparent."""
    return Image.from_rows(
        [
            [gray(0), gray(10, 0x00), gray(20)],
            [gray(30), gray(40), gray(50)],
            [gray(60), gray(70), gray(80)],
        ]
    )
