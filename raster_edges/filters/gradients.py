"""
Sobel gradient operators.

Both operators return signed int16 rasters of the input's size. Borders
are handled by replicating the edge pixels.
"""

import numpy as np
from scipy.ndimage import correlate

HORIZONTAL_SOBEL = np.array([
    [-1, 0, 1],
    [-2, 0, 2],
    [-1, 0, 1],
], dtype=np.int32)

VERTICAL_SOBEL = HORIZONTAL_SOBEL.T.copy()


def _filter3x3(image: np.ndarray, kernel: np.ndarray) -> np.ndarray:
    if image.ndim != 2:
        raise ValueError(f"Expected a single-channel (H, W) raster, got shape {image.shape}")
    response = correlate(image.astype(np.int32), kernel, mode="nearest")
    return np.clip(response, np.iinfo(np.int16).min, np.iinfo(np.int16).max).astype(np.int16)


def horizontal_sobel(image: np.ndarray) -> np.ndarray:
    """Gradient along x (positive where intensity increases to the right)."""
    return _filter3x3(image, HORIZONTAL_SOBEL)


def vertical_sobel(image: np.ndarray) -> np.ndarray:
    """Gradient along y (positive where intensity increases downwards)."""
    return _filter3x3(image, VERTICAL_SOBEL)
