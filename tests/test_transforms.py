"""Tests for the four transforms and the dispatcher."""

import numpy as np
import pytest

from conftest import gray, naive_average, naive_blur
from imgxform.transforms import (
    Blur,
    ColorRotate,
    Expand,
    Squash,
    apply_transform,
    blur,
    blur_pixel,
    color_rot,
    expand,
    expand_pixel,
    make_transform,
    output_size,
    squash,
    squash_pixel,
)
from imgxform.utils.raster import Image


def marker_image():
    """The 8x4 picture from the squash docs, one value per letter."""
    letters = {"X": 1, "A": 2, "Y": 3, "B": 4, "Z": 5, "C": 6, "W": 7, "D": 8}
    rows = ["XAAAYBBB", "AAAABBBB", "ZCCCWDDD", "CCCCDDDD"]
    return Image.from_rows([[letters[ch] * 0x11111111 for ch in row] for row in rows]), letters


# --- squash ---------------------------------------------------------------


def test_squash_samples_marked_pixels():
    img, m = marker_image()
    out = squash(img, 4, 2)
    expected = Image.from_rows(
        [[m["X"] * 0x11111111, m["Y"] * 0x11111111], [m["Z"] * 0x11111111, m["W"] * 0x11111111]]
    )
    assert out == expected


def test_squash_by_one_is_a_copy(smol):
    out = squash(smol, 1, 1)
    assert out == smol
    assert not np.shares_memory(out.pixels, smol.pixels)


@pytest.mark.parametrize("xfac, yfac", [(3, 1), (1, 3), (2, 4), (21, 15)])
def test_squash_sizes_and_samples(smol, xfac, yfac):
    out = squash(smol, xfac, yfac)
    assert (out.width, out.height) == (21 // xfac, 15 // yfac)
    src = smol.grid()
    for i in range(out.height):
        for j in range(out.width):
            assert out.grid()[i, j] == src[i * yfac, j * xfac]
            assert squash_pixel(smol, i, j, xfac, yfac) == src[i * yfac, j * xfac]


@pytest.mark.parametrize("xfac, yfac", [(0, 1), (1, 0), (22, 1), (1, 16)])
def test_squash_rejects_bad_factors(smol, xfac, yfac):
    with pytest.raises(ValueError):
        squash(smol, xfac, yfac)


# --- color_rot ------------------------------------------------------------


def test_color_rot_single_pixel():
    out = color_rot(Image.from_rows([[0xAABBCCDD]]))
    assert out.pixels.tolist() == [0xCCAABBDD]


def test_color_rot_three_times_is_identity(smol):
    once = color_rot(smol)
    assert once != smol
    assert color_rot(color_rot(once)) == smol


def test_color_rot_keeps_alpha(smol):
    out = color_rot(smol)
    assert np.array_equal(out.pixels & 0xFF, smol.pixels & 0xFF)


# --- blur -----------------------------------------------------------------


def test_blur_zero_is_identity(smol):
    assert blur(smol, 0) == smol


def test_blur_corner_uses_four_pixels(gray3x3):
    # (0, 0), (0, 1), (1, 0), (1, 1): rgb 80 // 4, alpha (255 + 0 + 255 + 255) // 4
    assert blur_pixel(gray3x3, 0, 0, 1) == gray(20, 191)


def test_blur_3x3(gray3x3):
    out = blur(gray3x3, 1)
    t = 191  # three opaque pixels and the transparent one
    s = 212  # 5 opaque of 6: 1275 // 6
    n = 226  # 8 opaque of 9: 2040 // 9
    expected = Image.from_rows(
        [
            [gray(20, t), gray(25, s), gray(30, t)],
            [gray(35, s), gray(40, n), gray(45, s)],
            [gray(50, 255), gray(55, 255), gray(60, 255)],
        ]
    )
    assert out == expected


@pytest.mark.parametrize("blur_dist", [1, 2, 3, 30])
def test_blur_matches_reference(smol, blur_dist):
    assert blur(smol, blur_dist) == naive_blur(smol, blur_dist)


def test_blur_pixel_agrees_with_whole_image(smol):
    out = blur(smol, 3).grid()
    for row, col in [(0, 20), (5, 5), (14, 0), (7, 10)]:
        assert blur_pixel(smol, row, col, 3) == out[row, col]


def test_blur_rejects_negative_distance(smol):
    with pytest.raises(ValueError):
        blur(smol, -1)


# --- expand ---------------------------------------------------------------


def test_expand_2x2():
    src = Image.from_rows([[gray(10, 10), gray(21, 21)], [gray(40, 40), gray(100, 100)]])
    values = [
        [10, 15, 21, 21],
        [25, 42, 60, 60],
        [40, 70, 100, 100],
        [40, 70, 100, 100],
    ]
    expected = Image.from_rows([[gray(v, v) for v in row] for row in values])
    assert expand(src) == expected


def test_expand_size_and_corner(smol):
    out = expand(smol)
    assert (out.width, out.height) == (42, 30)
    assert out.grid()[0, 0] == smol.grid()[0, 0]


def test_expand_matches_reference(image_factory):
    src = image_factory(5, 4, seed=7)
    out = expand(src).grid()
    grid = src.grid().tolist()
    for i in range(out.shape[0]):
        for j in range(out.shape[1]):
            r, c = i // 2, j // 2
            cand = [(r, c)]
            if j % 2:
                cand.append((r, c + 1))
            if i % 2:
                cand.append((r + 1, c))
            if i % 2 and j % 2:
                cand.append((r + 1, c + 1))
            pixels = [grid[y][x] for y, x in cand if y < src.height and x < src.width]
            assert out[i, j] == naive_average(pixels)
            assert expand_pixel(src, i, j) == out[i, j]


def test_expand_single_pixel():
    src = Image.from_rows([[0x12345678]])
    assert expand(src).pixels.tolist() == [0x12345678] * 4


# --- dispatch -------------------------------------------------------------


def test_output_size(smol):
    assert output_size(smol, Squash(4, 2)) == (5, 7)
    assert output_size(smol, ColorRotate()) == (21, 15)
    assert output_size(smol, Blur(2)) == (21, 15)
    assert output_size(smol, Expand()) == (42, 30)


@pytest.mark.parametrize(
    "transform, direct",
    [
        (Squash(3, 2), lambda img: squash(img, 3, 2)),
        (ColorRotate(), color_rot),
        (Blur(1), lambda img: blur(img, 1)),
        (Expand(), expand),
    ],
)
def test_apply_transform_dispatches(smol, transform, direct):
    assert apply_transform(smol, transform) == direct(smol)


def test_apply_transform_fills_given_destination(smol):
    out = Image.blank(*output_size(smol, Expand()))
    result = apply_transform(smol, Expand(), out)
    assert result is out
    assert out == expand(smol)


def test_apply_transform_rejects_wrong_destination(smol):
    with pytest.raises(ValueError):
        apply_transform(smol, Blur(1), Image.blank(20, 15))


def test_apply_transform_rejects_aliased_destination(smol):
    with pytest.raises(ValueError):
        apply_transform(smol, ColorRotate(), smol)


def test_source_is_not_modified(smol):
    before = smol.copy()
    for transform in (Squash(2, 2), ColorRotate(), Blur(2), Expand()):
        apply_transform(smol, transform)
    assert smol == before


def test_make_transform():
    assert make_transform("squash", 4, 2) == Squash(4, 2)
    assert make_transform("color_rot") == ColorRotate()
    assert make_transform("BLUR", 3) == Blur(3)
    assert make_transform("expand") == Expand()
    with pytest.raises(ValueError):
        make_transform("sharpen")
    with pytest.raises(ValueError):
        make_transform("blur")
