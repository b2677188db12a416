"""
Gaussian smoothing of intensity rasters.
"""

import numpy as np
from scipy.ndimage import gaussian_filter

# Sigma used by the Canny pipeline
CANNY_SIGMA = 1.4


def gaussian_blur(image: np.ndarray, sigma: float = CANNY_SIGMA) -> np.ndarray:
    """
    Blur a uint8 raster with a Gaussian kernel.

    Filtering is done in float32 with replicated edges, then the result is
    rounded and clamped back to uint8 so the output has the input's size
    and sample type.

    Args:
        image: (H, W) uint8 intensity raster
        sigma: Standard deviation of the Gaussian (must be > 0)

    Returns:
        (H, W) uint8 smoothed raster
    """
    if sigma <= 0:
        raise ValueError(f"sigma must be positive, got {sigma}")

    blurred = gaussian_filter(image.astype(np.float32), sigma=sigma, mode="nearest")
    return np.clip(np.rint(blurred), 0, 255).astype(np.uint8)
