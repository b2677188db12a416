"""
Synthetic test images built from filled rectangles.
"""

import numpy as np
import cv2

from .rect import Rect


def draw_filled_rect(image: np.ndarray, rect: Rect, value: int) -> np.ndarray:
    """
    Fill a rectangle in place, clipped to the image bounds.

    Args:
        image: (H, W) uint8 raster to draw on
        rect: Region to fill
        value: Intensity to write

    Returns:
        The same image, for chaining
    """
    h, w = image.shape[:2]
    clipped = rect.intersect(Rect(0, 0, w, h))
    if clipped is None:
        return image

    cv2.rectangle(
        image,
        (clipped.left, clipped.top),
        (clipped.right, clipped.bottom),
        color=int(value),
        thickness=-1,
    )
    return image


def two_rectangles_image(width: int = 250, height: int = 250) -> np.ndarray:
    """
    Benchmark scene: a centered rectangle half the image size plus a 3x3
    square near the top-left corner, both white on black.
    """
    image = np.zeros((height, width), dtype=np.uint8)
    large = Rect.at(width // 4, height // 4).of_size(width // 2, height // 2)
    small = Rect.at(9, 9).of_size(3, 3)

    draw_filled_rect(image, large, 255)
    draw_filled_rect(image, small, 255)

    return image


def constant_image(width: int, height: int, intensity: int) -> np.ndarray:
    return np.full((height, width), intensity, dtype=np.uint8)
