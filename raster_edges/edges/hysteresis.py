"""
Hysteresis thresholding of a thinned gradient magnitude raster.

Pixels at or above the high threshold seed new edges; pixels at or above
the low threshold join an edge when reached from an edge pixel through the
propagation neighborhood. Propagation uses an explicit stack so large
connected regions cannot exhaust the call stack.

Two forms share the same rules:
1. hysteresis: eager, returns the complete binary raster
2. HysteresisTracer: lazy, yields one newly discovered (x, y) per request,
   in exactly the order the eager form marks pixels
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np

from ..data.raster import (
    check_min_size,
    get_pixel,
    interior_coords,
    put_pixel,
    sample_extremes,
)

BINARY_BACKGROUND, BINARY_FOREGROUND = sample_extremes(np.uint8)

# Propagation neighborhood, in visiting order. North (0, -1) and
# north-east (1, -1) are not part of it.
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, -1),
    (-1, 0),
    (-1, 1),
)


@dataclass(frozen=True)
class HysteresisThresholds:
    """Low/high threshold pair, with 0 <= low <= high."""
    low: float
    high: float

    def __post_init__(self):
        if self.low < 0 or self.high < 0:
            raise ValueError(
                f"Thresholds must be non-negative, got low={self.low}, high={self.high}"
            )
        if self.high < self.low:
            raise ValueError(
                f"high_threshold ({self.high}) must be >= low_threshold ({self.low})"
            )


def _classify(suppressed: np.ndarray, low: float, high: float) -> Tuple[np.ndarray, np.ndarray]:
    """
    Strong (>= high) and weak (>= low) masks.

    Zero magnitude never seeds an edge, even with a zero high threshold,
    but is absorbed during propagation when low is 0.
    """
    strong = (suppressed >= high) & (suppressed > 0)
    return strong, suppressed >= low


def _seed_candidates(strong: np.ndarray) -> Iterator[Tuple[int, int]]:
    """Interior strong pixels, row-major."""
    h, w = strong.shape
    return ((x, y) for x, y in interior_coords(w, h) if get_pixel(strong, x, y))


def hysteresis(suppressed: np.ndarray, low: float, high: float) -> np.ndarray:
    """
    Classify pixels of a thinned magnitude raster as edge or background.

    Args:
        suppressed: (H, W) output of non_maximum_suppression
        low: Weak threshold; connected pixels at or above it become edges
        high: Strong threshold; pixels at or above it always seed edges

    Returns:
        (H, W) uint8 raster, 255 for edge pixels and 0 elsewhere
    """
    HysteresisThresholds(low, high)
    w, h = check_min_size(suppressed)

    strong, weak = _classify(suppressed, low, high)

    out = np.full((h, w), BINARY_BACKGROUND, dtype=np.uint8)
    visited = np.zeros((h, w), dtype=bool)
    edges: List[Tuple[int, int]] = []

    for x, y in _seed_candidates(strong):
        if visited[y, x]:
            continue

        visited[y, x] = True
        out[y, x] = BINARY_FOREGROUND
        edges.append((x, y))

        # Track neighbors until none is >= low
        while edges:
            nx, ny = edges.pop()
            for dx, dy in NEIGHBOR_OFFSETS:
                cx, cy = nx + dx, ny + dy
                # Stay inside the interior; the border ring is never an edge
                if not (0 < cx < w - 1 and 0 < cy < h - 1):
                    continue
                if weak[cy, cx] and not visited[cy, cx]:
                    visited[cy, cx] = True
                    out[cy, cx] = BINARY_FOREGROUND
                    edges.append((cx, cy))

    return out


class HysteresisTracer:
    """
    Resumable form of hysteresis().

    Holds the outer scan position, the pending-neighbor stack and the
    visit map between requests. Each advance() returns one newly
    discovered edge pixel, or None once everything has been traced.
    The tracer is single-use: build a new one to trace again.
    """

    def __init__(self, suppressed: np.ndarray, low: float, high: float):
        """
        Args:
            suppressed: (H, W) output of non_maximum_suppression
            low: Weak threshold
            high: Strong threshold
        """
        self.thresholds = HysteresisThresholds(low, high)
        self.width, self.height = check_min_size(suppressed)

        self._strong, self._weak = _classify(suppressed, low, high)
        self._visited = np.zeros((self.height, self.width), dtype=bool)
        self._stack: List[Tuple[int, int]] = []
        self._traversal = self._traverse()
        self._exhausted = False
        self.num_discovered = 0

    def _traverse(self) -> Iterator[Tuple[int, int]]:
        w, h = self.width, self.height
        visited = self._visited
        weak = self._weak
        stack = self._stack

        for x, y in _seed_candidates(self._strong):
            if visited[y, x]:
                continue

            visited[y, x] = True
            stack.append((x, y))
            yield x, y

            while stack:
                nx, ny = stack.pop()
                for dx, dy in NEIGHBOR_OFFSETS:
                    cx, cy = nx + dx, ny + dy
                    if not (0 < cx < w - 1 and 0 < cy < h - 1):
                        continue
                    if weak[cy, cx] and not visited[cy, cx]:
                        visited[cy, cx] = True
                        stack.append((cx, cy))
                        yield cx, cy

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    @property
    def pending(self) -> int:
        """Length of the pending-neighbor stack."""
        return len(self._stack)

    def advance(self) -> Optional[Tuple[int, int]]:
        """
        Discover the next edge pixel.

        Returns:
            (x, y) of a pixel not returned before, or None when exhausted
        """
        if self._exhausted:
            return None

        try:
            pixel = next(self._traversal)
        except StopIteration:
            self._exhausted = True
            return None

        self.num_discovered += 1
        return pixel

    def __iter__(self) -> "HysteresisTracer":
        return self

    def __next__(self) -> Tuple[int, int]:
        pixel = self.advance()
        if pixel is None:
            raise StopIteration
        return pixel


def render_pixels(
    pixels: Iterable[Tuple[int, int]],
    width: int,
    height: int,
) -> np.ndarray:
    """
    Paint (x, y) coordinates as foreground on a background uint8 raster.

    Rendering every pixel of a HysteresisTracer reproduces hysteresis().
    """
    out = np.full((height, width), BINARY_BACKGROUND, dtype=np.uint8)
    for x, y in pixels:
        put_pixel(out, x, y, BINARY_FOREGROUND)
    return out
