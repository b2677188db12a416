#!/usr/bin/env python3
"""
Run Canny edge detection on an image or a directory of images.

Usage:
    python scripts/detect_edges.py input.png --output edges/
    python scripts/detect_edges.py images/ --output edges/ --config configs/default.yaml
    python scripts/detect_edges.py input.png --lazy --max-pixels 20
"""

import argparse
import logging
import sys
from dataclasses import asdict
from itertools import islice
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from tqdm import tqdm

from raster_edges.edges import CannyConfig, CannyDetector
from raster_edges.utils import load_grayscale, save_grayscale, setup_logger

IMAGE_SUFFIXES = {".png", ".jpg", ".jpeg", ".bmp", ".tif", ".tiff"}


def parse_args():
    parser = argparse.ArgumentParser(description="Canny edge detection")
    parser.add_argument("input", type=str, help="Image file or directory of images")
    parser.add_argument("--output", type=str, default="outputs/edges", help="Output directory")
    parser.add_argument("--config", type=str, default=None, help="YAML config file")
    parser.add_argument("--sigma", type=float, default=None, help="Gaussian blur sigma")
    parser.add_argument("--low", type=float, default=None, help="Low hysteresis threshold")
    parser.add_argument("--high", type=float, default=None, help="High hysteresis threshold")
    parser.add_argument(
        "--lazy",
        action="store_true",
        help="Print edge pixel coordinates as they are discovered instead of saving images",
    )
    parser.add_argument(
        "--max-pixels",
        type=int,
        default=None,
        help="With --lazy, stop after this many pixels per image",
    )
    parser.add_argument("--verbose", action="store_true", help="Log per-stage timings")
    return parser.parse_args()


def load_config(args) -> CannyConfig:
    """Defaults, then YAML config, then command-line overrides."""
    values = {}
    if args.config:
        values = asdict(CannyConfig.from_yaml(args.config))

    overrides = {
        "sigma": args.sigma,
        "low_threshold": args.low,
        "high_threshold": args.high,
    }
    values.update({k: v for k, v in overrides.items() if v is not None})
    return CannyConfig.from_dict(values)


def collect_images(input_path: Path):
    if input_path.is_dir():
        return sorted(p for p in input_path.iterdir() if p.suffix.lower() in IMAGE_SUFFIXES)
    return [input_path]


def main():
    args = parse_args()
    setup_logger("raster_edges", logging.DEBUG if args.verbose else logging.WARNING)
    config = load_config(args)
    detector = CannyDetector(config)

    image_paths = collect_images(Path(args.input))
    if len(image_paths) == 0:
        print(f"No images found in {args.input}")
        sys.exit(1)

    print(
        f"Detecting edges in {len(image_paths)} image(s) "
        f"(sigma={config.sigma}, low={config.low_threshold}, high={config.high_threshold})"
    )

    output_dir = Path(args.output)

    for image_path in tqdm(image_paths, desc="Detecting", disable=args.lazy):
        image = load_grayscale(image_path)

        if args.lazy:
            print(f"{image_path.name}:")
            for x, y in islice(detector.pixels(image), args.max_pixels):
                print(f"  {x} {y}")
            continue

        edges = detector.detect(image)
        save_grayscale(edges, output_dir / f"{image_path.stem}_edges.png")

    if not args.lazy:
        print(f"Saved edge maps to {output_dir}")


if __name__ == "__main__":
    main()
