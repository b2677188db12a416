"""Raster helpers, rectangle geometry and synthetic images."""

from .raster import (
    raster_size,
    check_same_size,
    check_min_size,
    get_pixel,
    put_pixel,
    sample_extremes,
    interior_coords,
)
from .rect import Rect, RectPosition
from .synthetic import draw_filled_rect, two_rectangles_image, constant_image

__all__ = [
    "raster_size",
    "check_same_size",
    "check_min_size",
    "get_pixel",
    "put_pixel",
    "sample_extremes",
    "interior_coords",
    "Rect",
    "RectPosition",
    "draw_filled_rect",
    "two_rectangles_image",
    "constant_image",
]
