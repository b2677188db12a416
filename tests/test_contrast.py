"""Tests for thresholding and histogram utilities."""

import numpy as np
import pytest

from raster_edges.contrast import (
    adaptive_threshold,
    cumulative_histogram,
    equalize_histogram,
    histogram,
    histogram_lut,
    match_histogram,
    otsu_level,
    threshold,
)
from raster_edges.data import constant_image


def test_adaptive_threshold_constant():
    binary = adaptive_threshold(constant_image(3, 3, 100), 1)

    assert np.all(binary == 255)


@pytest.mark.parametrize("x,y", [(x, y) for y in range(3) for x in range(3)])
def test_adaptive_threshold_one_darker_pixel(x, y):
    image = constant_image(3, 3, 200)
    image[y, x] = 100

    binary = adaptive_threshold(image, 1)

    # All except the dark pixel are at least as bright as their local mean
    expected = np.full((3, 3), 255, dtype=np.uint8)
    expected[y, x] = 0
    assert np.array_equal(binary, expected)


@pytest.mark.parametrize("x,y", [(x, y) for y in range(5) for x in range(5)])
def test_adaptive_threshold_one_lighter_pixel(x, y):
    image = constant_image(5, 5, 100)
    image[y, x] = 200

    binary = adaptive_threshold(image, 1)

    for yb in range(5):
        for xb in range(5):
            if (xb, yb) == (x, y):
                assert binary[yb, xb] == 255
            elif abs(yb - y) <= 1 and abs(xb - x) <= 1:
                assert binary[yb, xb] == 0
            else:
                assert binary[yb, xb] == 255


def test_adaptive_threshold_rejects_zero_radius():
    with pytest.raises(ValueError, match="block_radius"):
        adaptive_threshold(constant_image(3, 3, 0), 0)


def test_histogram():
    image = np.array([[1, 2, 3, 2, 1]], dtype=np.uint8)

    hist = histogram(image)

    assert hist.shape == (256,)
    assert hist[0] == 0
    assert hist[1] == 2
    assert hist[2] == 2
    assert hist[3] == 1
    assert hist.sum() == 5


def test_cumulative_histogram():
    image = np.array([[1, 2, 3, 2, 1]], dtype=np.uint8)

    hist = cumulative_histogram(image)

    assert hist[0] == 0
    assert hist[1] == 2
    assert hist[2] == 4
    assert hist[3] == 5
    assert np.all(hist[4:] == 5)


@pytest.mark.parametrize("intensity", [0, 128, 255])
def test_otsu_constant(intensity):
    # Variance is zero at every level, and the level only moves on a
    # strictly greater variance
    assert otsu_level(constant_image(10, 10, intensity)) == 0


def test_otsu_level_gradient():
    image = (np.arange(26, dtype=np.uint8) * 10).reshape(1, 26)

    assert otsu_level(image) == 120


def test_threshold_0_image_0():
    assert np.all(threshold(constant_image(10, 10, 0), 0) == 0)


def test_threshold_0_image_1():
    assert np.all(threshold(constant_image(10, 10, 1), 0) == 255)


def test_threshold_255_image_255():
    assert np.all(threshold(constant_image(10, 10, 255), 255) == 0)


def test_threshold():
    image = (np.arange(26, dtype=np.uint8) * 10).reshape(1, 26)

    expected = np.array([[0] * 13 + [255] * 13], dtype=np.uint8)
    assert np.array_equal(threshold(image, 125), expected)


def test_threshold_does_not_mutate_input():
    image = constant_image(4, 4, 50)

    threshold(image, 10)

    assert np.all(image == 50)


def test_histogram_lut_source_and_target_equal():
    histc = np.zeros(256, dtype=np.int64)
    histc[1:] = 2 * np.arange(1, 256)

    lut = histogram_lut(histc, histc)

    assert lut.tolist() == list(range(256))


def test_histogram_lut_gradient_to_step_contrast():
    grad_histc = np.arange(256, dtype=np.int64)

    step_histc = np.zeros(256, dtype=np.int64)
    step_histc[30:130] = 100
    step_histc[130:256] = 200

    lut = histogram_lut(grad_histc, step_histc)

    expected = np.zeros(256, dtype=np.int64)
    # No black pixels in either image
    expected[1:64] = 29
    expected[64:128] = 30
    expected[128:192] = 129
    expected[192:256] = 130
    assert lut.tolist() == expected.tolist()


def test_match_histogram_to_itself_is_identity():
    image = np.arange(256, dtype=np.uint8).reshape(16, 16)

    matched = match_histogram(image, image)

    assert matched.dtype == np.uint8
    assert np.array_equal(matched, image)


def test_match_histogram_is_monotonic():
    rng = np.random.default_rng(0)
    image = rng.integers(0, 256, size=(20, 20), dtype=np.uint8)
    target = rng.integers(100, 156, size=(20, 20), dtype=np.uint8)

    matched = match_histogram(image, target)

    order = np.argsort(image.ravel(), kind="stable")
    assert np.all(np.diff(matched.ravel()[order].astype(int)) >= 0)


def test_equalize_histogram_constant_image():
    assert np.all(equalize_histogram(constant_image(10, 10, 100)) == 255)


def test_equalize_histogram_uniform_image():
    image = np.arange(256, dtype=np.uint8).reshape(16, 16)

    equalized = equalize_histogram(image)

    flat = equalized.ravel().astype(int)
    assert equalized.dtype == np.uint8
    assert flat[0] == 0
    assert flat[-1] == 255
    assert np.all(np.diff(flat) >= 0)
