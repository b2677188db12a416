"""Smoothing and gradient filters feeding the edge detector."""

from .smoothing import gaussian_blur, CANNY_SIGMA
from .gradients import horizontal_sobel, vertical_sobel

__all__ = [
    "gaussian_blur",
    "CANNY_SIGMA",
    "horizontal_sobel",
    "vertical_sobel",
]
