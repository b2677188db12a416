"""
Canny edge detection over single-channel uint8 rasters.

Pipeline:
1. Gaussian blur (sigma 1.4)
2. Horizontal/vertical Sobel gradients
3. Gradient magnitude
4. Non-maximum suppression (thin edges to 1px)
5. Hysteresis with low/high thresholds, eager or lazy
"""

import logging
import time
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import numpy as np
import yaml

from ..data.raster import check_min_size
from ..filters import CANNY_SIGMA, gaussian_blur, horizontal_sobel, vertical_sobel
from .gradient_field import gradient_magnitude
from .hysteresis import HysteresisThresholds, HysteresisTracer, hysteresis
from .suppression import non_maximum_suppression

logger = logging.getLogger(__name__)


def _check_image(image: np.ndarray) -> None:
    if image.dtype != np.uint8:
        raise ValueError(f"Expected a uint8 intensity raster, got dtype {image.dtype}")
    check_min_size(image)


def _check_thresholds(low_threshold: float, high_threshold: float) -> None:
    """Reject bad thresholds before any filtering work."""
    HysteresisThresholds(low_threshold, high_threshold)


def thinned_gradient(image: np.ndarray, sigma: float = CANNY_SIGMA) -> np.ndarray:
    """
    Front half of the pipeline: blur, gradients, magnitude, suppression.

    Args:
        image: (H, W) uint8 intensity raster, at least 3x3
        sigma: Gaussian blur sigma

    Returns:
        (H, W) float32 thinned gradient magnitude
    """
    _check_image(image)

    start = time.perf_counter()
    blurred = gaussian_blur(image, sigma)
    gx = horizontal_sobel(blurred)
    gy = vertical_sobel(blurred)
    g = gradient_magnitude(gx, gy)
    thinned = non_maximum_suppression(g, gx, gy)

    logger.debug(
        "thinned gradient for %dx%d raster in %.1f ms (%d ridge pixels)",
        image.shape[1], image.shape[0],
        (time.perf_counter() - start) * 1000,
        int(np.count_nonzero(thinned)),
    )
    return thinned


def canny(
    image: np.ndarray,
    low_threshold: float,
    high_threshold: float,
    sigma: float = CANNY_SIGMA,
) -> np.ndarray:
    """
    Run Canny edge detection.

    Args:
        image: (H, W) uint8 intensity raster, at least 3x3
        low_threshold: Edges with a strength at or above this appear in the
            output if they are connected to a strong edge
        high_threshold: Edges with a strength at or above this always appear
        sigma: Gaussian blur sigma

    Returns:
        (H, W) uint8 binary raster: 255 for edge pixels, 0 elsewhere
    """
    _check_thresholds(low_threshold, high_threshold)
    thinned = thinned_gradient(image, sigma)

    start = time.perf_counter()
    edges = hysteresis(thinned, low_threshold, high_threshold)
    logger.debug(
        "hysteresis(low=%s, high=%s) found %d edge pixels in %.1f ms",
        low_threshold, high_threshold,
        int(np.count_nonzero(edges)),
        (time.perf_counter() - start) * 1000,
    )
    return edges


class CannyPixels(HysteresisTracer):
    """
    Lazy Canny: an iterator over interior (x, y) edge pixels.

    Blurring, gradients and suppression run up front; hysteresis runs one
    discovered pixel at a time as the caller pulls.
    """

    def __init__(
        self,
        image: np.ndarray,
        low_threshold: float,
        high_threshold: float,
        sigma: float = CANNY_SIGMA,
    ):
        _check_thresholds(low_threshold, high_threshold)
        super().__init__(thinned_gradient(image, sigma), low_threshold, high_threshold)


def canny_pixels(
    image: np.ndarray,
    low_threshold: float,
    high_threshold: float,
    sigma: float = CANNY_SIGMA,
) -> CannyPixels:
    """
    Lazy counterpart of canny().

    Consuming the returned iterator and painting every coordinate on a
    black raster gives exactly canny(image, low_threshold, high_threshold).
    """
    return CannyPixels(image, low_threshold, high_threshold, sigma)


@dataclass
class CannyConfig:
    """
    Configuration for Canny edge detection.

    Thresholds apply to the Sobel gradient magnitude, which for uint8
    input ranges up to roughly 1442.
    """
    sigma: float = CANNY_SIGMA
    low_threshold: float = 50.0
    high_threshold: float = 100.0

    def __post_init__(self):
        if self.sigma <= 0:
            raise ValueError(f"sigma must be positive, got {self.sigma}")
        _check_thresholds(self.low_threshold, self.high_threshold)

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> "CannyConfig":
        """Build a config from a (possibly nested) dict of overrides."""
        flat: Dict[str, Any] = {}
        # Flatten nested sections
        for key, value in values.items():
            if isinstance(value, dict):
                flat.update(value)
            else:
                flat[key] = value

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(flat) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {unknown}")

        return cls(**{k: float(v) for k, v in flat.items()})

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "CannyConfig":
        with open(path) as f:
            values = yaml.safe_load(f) or {}
        return cls.from_dict(values)


class CannyDetector:
    """Canny edge detection with a fixed configuration."""

    def __init__(self, config: Optional[CannyConfig] = None):
        """
        Args:
            config: Detection configuration (uses defaults if None)
        """
        self.config = config or CannyConfig()

    def detect(self, image: np.ndarray) -> np.ndarray:
        """Binary edge raster for a uint8 image."""
        return canny(
            image,
            self.config.low_threshold,
            self.config.high_threshold,
            sigma=self.config.sigma,
        )

    def pixels(self, image: np.ndarray) -> CannyPixels:
        """Lazy iterator over edge pixels of a uint8 image."""
        return canny_pixels(
            image,
            self.config.low_threshold,
            self.config.high_threshold,
            sigma=self.config.sigma,
        )
