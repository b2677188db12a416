"""
Gradient magnitude from horizontal and vertical gradient rasters.
"""

import numpy as np

from ..data.raster import check_same_size


def gradient_magnitude(gx: np.ndarray, gy: np.ndarray) -> np.ndarray:
    """
    Combine signed gradients into a float32 magnitude raster.

    Uses hypot rather than sqrt(gx**2 + gy**2) so large gradients
    neither overflow nor lose precision.

    Args:
        gx: (H, W) horizontal gradient
        gy: (H, W) vertical gradient

    Returns:
        (H, W) float32 magnitude
    """
    check_same_size(gx, gy)
    return np.hypot(gx.astype(np.float32), gy.astype(np.float32))
