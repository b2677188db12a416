#!/usr/bin/env python3
"""
Visualize each stage of the Canny pipeline side by side.

Usage:
    python scripts/visualize/pipeline_stages.py --image input.png --low 50 --high 100
    python scripts/visualize/pipeline_stages.py --synthetic --low 250 --high 300
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import matplotlib.pyplot as plt
import numpy as np

from raster_edges.data import two_rectangles_image
from raster_edges.edges import (
    gradient_magnitude,
    hysteresis,
    non_maximum_suppression,
    quantize_direction,
)
from raster_edges.filters import gaussian_blur, horizontal_sobel, vertical_sobel
from raster_edges.utils import load_grayscale


def plot_stages(image: np.ndarray, sigma: float, low: float, high: float, save_path: Path):
    """Plot input, blur, magnitude, direction, suppression and edges."""
    blurred = gaussian_blur(image, sigma)
    gx = horizontal_sobel(blurred)
    gy = vertical_sobel(blurred)
    g = gradient_magnitude(gx, gy)
    directions = quantize_direction(gx, gy)
    thinned = non_maximum_suppression(g, gx, gy)
    edges = hysteresis(thinned, low, high)

    fig, axes = plt.subplots(2, 3, figsize=(15, 10))

    axes[0, 0].imshow(image, cmap="gray", vmin=0, vmax=255)
    axes[0, 0].set_title("Input")

    axes[0, 1].imshow(blurred, cmap="gray", vmin=0, vmax=255)
    axes[0, 1].set_title(f"Gaussian blur (sigma={sigma})")

    axes[0, 2].imshow(g, cmap="magma")
    axes[0, 2].set_title(f"Gradient magnitude (max {g.max():.0f})")

    axes[1, 0].imshow(np.where(g > 0, directions, np.nan), cmap="twilight", vmin=0, vmax=180)
    axes[1, 0].set_title("Direction bucket (0/45/90/135)")

    axes[1, 1].imshow(thinned, cmap="magma")
    axes[1, 1].set_title(f"Non-maximum suppression ({np.count_nonzero(thinned)} px)")

    axes[1, 2].imshow(edges, cmap="gray", vmin=0, vmax=255)
    axes[1, 2].set_title(f"Hysteresis low={low} high={high} ({np.count_nonzero(edges)} px)")

    for ax in axes.flat:
        ax.axis("off")

    plt.tight_layout()
    save_path.parent.mkdir(parents=True, exist_ok=True)
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close()
    print(f"Saved: {save_path}")


def main():
    parser = argparse.ArgumentParser(description="Visualize Canny pipeline stages")
    parser.add_argument("--image", type=str, default=None, help="Input image")
    parser.add_argument("--synthetic", action="store_true", help="Use the two-rectangle test scene")
    parser.add_argument("--sigma", type=float, default=1.4)
    parser.add_argument("--low", type=float, default=50.0)
    parser.add_argument("--high", type=float, default=100.0)
    parser.add_argument("--output", type=str, default="outputs/visualizations/pipeline_stages.png")
    args = parser.parse_args()

    if args.synthetic:
        image = two_rectangles_image(250, 250)
    elif args.image:
        image = load_grayscale(args.image)
    else:
        parser.error("Pass --image or --synthetic")

    plot_stages(image, args.sigma, args.low, args.high, Path(args.output))


if __name__ == "__main__":
    main()
