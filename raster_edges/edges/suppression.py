"""
Non-maximum suppression: thin a gradient magnitude raster to 1px ridges.

Each interior pixel is compared with its two neighbors along the gradient
direction, quantized to one of four buckets. Pixels strictly smaller than
either neighbor are zeroed; ties survive. The outer 1px ring is always
zero because its neighborhood is incomplete.
"""

import math
from enum import IntEnum
from typing import Dict, Tuple

import numpy as np

from ..data.raster import check_same_size


class DirectionBucket(IntEnum):
    """Gradient orientation quantized to 45 degree steps, in [0, 180)."""
    DEG_0 = 0
    DEG_45 = 45
    DEG_90 = 90
    DEG_135 = 135


# (dx, dy) of the two neighbors compared against, per bucket
COMPARISON_OFFSETS: Dict[DirectionBucket, Tuple[Tuple[int, int], Tuple[int, int]]] = {
    DirectionBucket.DEG_0: ((-1, 0), (1, 0)),
    DirectionBucket.DEG_45: ((1, 1), (-1, -1)),
    DirectionBucket.DEG_90: ((0, -1), (0, 1)),
    DirectionBucket.DEG_135: ((-1, 1), (1, -1)),
}


def _bucket_for_angle(angle: float) -> DirectionBucket:
    if angle >= 157.5 or angle < 22.5:
        return DirectionBucket.DEG_0
    if angle < 67.5:
        return DirectionBucket.DEG_45
    if angle < 112.5:
        return DirectionBucket.DEG_90
    return DirectionBucket.DEG_135


def direction_bucket(gx: float, gy: float) -> DirectionBucket:
    """Quantize the orientation of a single gradient sample."""
    angle = math.degrees(math.atan2(gy, gx))
    if angle < 0.0:
        angle += 180.0
    return _bucket_for_angle(angle)


def quantize_direction(gx: np.ndarray, gy: np.ndarray) -> np.ndarray:
    """
    Vectorized direction_bucket.

    Args:
        gx: Horizontal gradient array
        gy: Vertical gradient array (same shape)

    Returns:
        uint8 array of bucket angles (0, 45, 90 or 135)
    """
    angle = np.degrees(np.arctan2(gy.astype(np.float64), gx.astype(np.float64)))
    angle = np.where(angle < 0.0, angle + 180.0, angle)

    buckets = np.select(
        [
            (angle >= 157.5) | (angle < 22.5),
            angle < 67.5,
            angle < 112.5,
        ],
        [
            int(DirectionBucket.DEG_0),
            int(DirectionBucket.DEG_45),
            int(DirectionBucket.DEG_90),
        ],
        default=int(DirectionBucket.DEG_135),
    )
    return buckets.astype(np.uint8)


def non_maximum_suppression(
    g: np.ndarray,
    gx: np.ndarray,
    gy: np.ndarray,
) -> np.ndarray:
    """
    Keep only pixels that are local maxima along their gradient direction.

    Args:
        g: (H, W) gradient magnitude
        gx: (H, W) horizontal gradient used to build g
        gy: (H, W) vertical gradient used to build g

    Returns:
        (H, W) float32 thinned magnitude, zero on the outer ring
    """
    w, h = check_same_size(g, gx, gy)
    out = np.zeros((h, w), dtype=np.float32)
    if w < 3 or h < 3:
        return out

    center = g[1:-1, 1:-1]
    buckets = quantize_direction(gx[1:-1, 1:-1], gy[1:-1, 1:-1])
    suppressed = np.zeros(center.shape, dtype=bool)

    for bucket, offsets in COMPARISON_OFFSETS.items():
        in_bucket = buckets == bucket
        for dx, dy in offsets:
            # Shifted interior view: neighbor[y-1, x-1] == g[y + dy, x + dx]
            neighbor = g[1 + dy:h - 1 + dy, 1 + dx:w - 1 + dx]
            suppressed |= in_bucket & (center < neighbor)

    out[1:-1, 1:-1] = np.where(suppressed, 0.0, center)
    return out
