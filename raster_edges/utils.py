"""Shared utilities: logging and image I/O for scripts."""

import logging
from pathlib import Path

import numpy as np
from PIL import Image


def setup_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """Return a logger with a single stream handler."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(name)s] %(levelname)s: %(message)s")
        )
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger


def load_grayscale(path) -> np.ndarray:
    """Load an image from disk as an (H, W) uint8 raster."""
    with Image.open(path) as img:
        return np.array(img.convert("L"), dtype=np.uint8)


def save_grayscale(image: np.ndarray, path) -> None:
    """Save an (H, W) uint8 raster as an image, creating parent dirs."""
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    Image.fromarray(image.astype(np.uint8)).save(path)
