"""
Raster helpers.

Rasters are 2-D numpy arrays of shape (H, W), indexed [y, x]. Public
functions in this package take and return (x, y) coordinates.
"""

import numpy as np
from typing import Iterator, Tuple


def raster_size(image: np.ndarray) -> Tuple[int, int]:
    """
    Get (width, height) of a single-channel raster.

    Raises:
        ValueError: If the array is not 2-D
    """
    if image.ndim != 2:
        raise ValueError(f"Expected a single-channel (H, W) raster, got shape {image.shape}")
    h, w = image.shape
    return w, h


def check_same_size(*rasters: np.ndarray) -> Tuple[int, int]:
    """
    Check that all rasters share the same dimensions.

    Returns:
        (width, height) shared by all rasters
    """
    size = raster_size(rasters[0])
    for other in rasters[1:]:
        other_size = raster_size(other)
        if other_size != size:
            raise ValueError(f"Raster dimensions must match: {size} vs {other_size}")
    return size


def check_min_size(image: np.ndarray, min_size: int = 3) -> Tuple[int, int]:
    """Check that a raster has at least one interior pixel."""
    w, h = raster_size(image)
    if w < min_size or h < min_size:
        raise ValueError(
            f"Raster must be at least {min_size}x{min_size} to have an interior, got {w}x{h}"
        )
    return w, h


def in_bounds(image: np.ndarray, x: int, y: int) -> bool:
    h, w = image.shape[:2]
    return 0 <= x < w and 0 <= y < h


def get_pixel(image: np.ndarray, x: int, y: int):
    """
    Bounds-checked read of the sample at (x, y).

    Unlike plain numpy indexing, negative coordinates are rejected
    instead of wrapping around to the other side of the raster.
    """
    if not in_bounds(image, x, y):
        raise IndexError(f"Pixel ({x}, {y}) out of bounds for raster of shape {image.shape}")
    return image[y, x]


def put_pixel(image: np.ndarray, x: int, y: int, value) -> None:
    """Bounds-checked write of the sample at (x, y)."""
    if not in_bounds(image, x, y):
        raise IndexError(f"Pixel ({x}, {y}) out of bounds for raster of shape {image.shape}")
    image[y, x] = value


def sample_extremes(dtype) -> Tuple[int, int]:
    """
    Get the (minimum, maximum) sample values of an integer raster type.

    These are the background and foreground values of binary rasters,
    e.g. (0, 255) for uint8.
    """
    info = np.iinfo(dtype)
    return int(info.min), int(info.max)


def interior_coords(width: int, height: int) -> Iterator[Tuple[int, int]]:
    """Iterate (x, y) over the interior (excluding the 1px border) in row-major order."""
    for y in range(1, height - 1):
        for x in range(1, width - 1):
            yield x, y
