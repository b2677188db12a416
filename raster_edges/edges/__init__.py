"""
Canny edge detection: gradient magnitude, non-maximum suppression and
hysteresis thresholding (eager and lazy).
"""

from .gradient_field import gradient_magnitude
from .suppression import (
    DirectionBucket,
    COMPARISON_OFFSETS,
    direction_bucket,
    quantize_direction,
    non_maximum_suppression,
)
from .hysteresis import (
    NEIGHBOR_OFFSETS,
    HysteresisThresholds,
    HysteresisTracer,
    hysteresis,
    render_pixels,
)
from .canny import (
    CannyConfig,
    CannyDetector,
    CannyPixels,
    canny,
    canny_pixels,
    thinned_gradient,
)

__all__ = [
    # Pipeline
    "canny",
    "canny_pixels",
    "thinned_gradient",
    "CannyPixels",
    "CannyConfig",
    "CannyDetector",
    # Gradient field
    "gradient_magnitude",
    # Suppression
    "DirectionBucket",
    "COMPARISON_OFFSETS",
    "direction_bucket",
    "quantize_direction",
    "non_maximum_suppression",
    # Hysteresis
    "NEIGHBOR_OFFSETS",
    "HysteresisThresholds",
    "HysteresisTracer",
    "hysteresis",
    "render_pixels",
]
