"""
Contrast utilities for uint8 intensity rasters.

Thresholding (adaptive, global, Otsu) and histogram equalization/matching.
None of these mutate their input.
"""

import numpy as np

from .data.raster import raster_size, sample_extremes

BLACK, WHITE = sample_extremes(np.uint8)


def _integral_image(image: np.ndarray) -> np.ndarray:
    """(H+1, W+1) summed-area table with a leading row/column of zeros."""
    h, w = image.shape
    integral = np.zeros((h + 1, w + 1), dtype=np.int64)
    integral[1:, 1:] = image.astype(np.int64).cumsum(axis=0).cumsum(axis=1)
    return integral


def adaptive_threshold(image: np.ndarray, block_radius: int) -> np.ndarray:
    """
    Compare each pixel with the mean of the block around it.

    The block is the (2 * block_radius + 1) square centered on the pixel,
    clipped to the image. Pixels at least as bright as the integer block
    mean become 255, the rest 0.

    Args:
        image: (H, W) uint8 raster
        block_radius: Half-size of the block (> 0)

    Returns:
        (H, W) uint8 binary raster
    """
    if block_radius <= 0:
        raise ValueError(f"block_radius must be positive, got {block_radius}")
    w, h = raster_size(image)

    integral = _integral_image(image)

    ys = np.arange(h)
    xs = np.arange(w)
    y_low = np.maximum(0, ys - block_radius)[:, None]
    y_high = np.minimum(h - 1, ys + block_radius)[:, None]
    x_low = np.maximum(0, xs - block_radius)[None, :]
    x_high = np.minimum(w - 1, xs + block_radius)[None, :]

    block_sum = (
        integral[y_high + 1, x_high + 1]
        - integral[y_low, x_high + 1]
        - integral[y_high + 1, x_low]
        + integral[y_low, x_low]
    )
    # Number of pixels in the block, adjusted at the borders
    block_count = (y_high - y_low + 1) * (x_high - x_low + 1)
    mean = block_sum // block_count

    return np.where(image.astype(np.int64) >= mean, WHITE, BLACK).astype(np.uint8)


def histogram(image: np.ndarray) -> np.ndarray:
    """(256,) count of each intensity."""
    raster_size(image)
    return np.bincount(image.ravel(), minlength=256).astype(np.int64)


def cumulative_histogram(image: np.ndarray) -> np.ndarray:
    """(256,) count of pixels with intensity <= each level."""
    return np.cumsum(histogram(image))


def otsu_level(image: np.ndarray) -> int:
    """
    Otsu threshold level of a uint8 raster.

    Picks the level maximizing the between-class variance. The level only
    moves on a strictly greater variance, so a constant image gives 0.
    See https://en.wikipedia.org/wiki/Otsu%27s_method
    """
    hist = histogram(image)
    total_weight = int(hist.sum())

    # Sum of all intensities, to compute class means
    total_pixel_sum = float(np.dot(np.arange(256), hist))

    background_pixel_sum = 0.0
    background_weight = 0

    largest_variance = 0.0
    best_threshold = 0

    for level, count in enumerate(hist.tolist()):
        background_weight += count
        if background_weight == 0:
            continue

        foreground_weight = total_weight - background_weight
        if foreground_weight == 0:
            break

        background_pixel_sum += level * count
        foreground_pixel_sum = total_pixel_sum - background_pixel_sum

        background_mean = background_pixel_sum / background_weight
        foreground_mean = foreground_pixel_sum / foreground_weight

        variance = background_weight * foreground_weight * (background_mean - foreground_mean) ** 2

        if variance > largest_variance:
            largest_variance = variance
            best_threshold = level

    return best_threshold


def threshold(image: np.ndarray, level: int) -> np.ndarray:
    """
    Binarize with a global level.

    Pixels equal to the level go to the background.
    """
    raster_size(image)
    return np.where(image <= level, BLACK, WHITE).astype(np.uint8)


def equalize_histogram(image: np.ndarray) -> np.ndarray:
    """
    Histogram equalization.

    See https://en.wikipedia.org/wiki/Histogram_equalization
    """
    cdf = cumulative_histogram(image).astype(np.float32)
    total = cdf[255]
    lut = np.minimum(np.float32(255), np.float32(255) * (cdf / total)).astype(np.uint8)
    return lut[image]


def histogram_lut(source_histc: np.ndarray, target_histc: np.ndarray) -> np.ndarray:
    """
    Lookup table mapping source levels to target levels.

    lut[i] is chosen so that target_histc[lut[i]] / sum(target) is as
    close as possible to source_histc[i] / sum(source).

    Args:
        source_histc: (256,) cumulative histogram of the source
        target_histc: (256,) cumulative histogram of the target

    Returns:
        (256,) int64 lookup table
    """
    source_total = np.float32(source_histc[255])
    target_total = np.float32(target_histc[255])

    lut = np.zeros(256, dtype=np.int64)
    y = 0
    prev_target_fraction = np.float32(0.0)

    for s in range(256):
        source_fraction = np.float32(source_histc[s]) / source_total
        target_fraction = np.float32(target_histc[y]) / target_total

        while source_fraction > target_fraction and y < 255:
            y += 1
            prev_target_fraction = target_fraction
            target_fraction = np.float32(target_histc[y]) / target_total

        if y == 0:
            lut[s] = y
        else:
            prev_dist = abs(prev_target_fraction - source_fraction)
            dist = abs(target_fraction - source_fraction)
            lut[s] = y - 1 if prev_dist < dist else y

    return lut


def match_histogram(image: np.ndarray, target: np.ndarray) -> np.ndarray:
    """Adjust contrast so the histogram is as close as possible to target's."""
    lut = histogram_lut(cumulative_histogram(image), cumulative_histogram(target))
    return lut.astype(np.uint8)[image]
