"""
raster-edges: Canny edge detection and contrast utilities for
single-channel uint8 rasters.
"""

from .edges import (
    canny,
    canny_pixels,
    CannyPixels,
    CannyConfig,
    CannyDetector,
    HysteresisTracer,
)
from .data import Rect

__all__ = [
    "canny",
    "canny_pixels",
    "CannyPixels",
    "CannyConfig",
    "CannyDetector",
    "HysteresisTracer",
    "Rect",
]
