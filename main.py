#!/usr/bin/env python3
"""
Body Measurements - Main Entry Point

Computes body measurements in centimeters from a detected 2D pose,
the detection image size and the subject's height.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

import numpy as np
import yaml

from bodyscan import __version__
from bodyscan.core import Config, setup_logging, get_logger
from bodyscan.pose import KeypointSet, assess_framing
from bodyscan.measure import (
    MeasurementEngine, format_measurements, parse_height, validate_height,
)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Estimate body measurements from pose keypoints"
    )
    parser.add_argument(
        "--keypoints", "-k",
        type=str,
        required=True,
        help="JSON file with image_width, image_height and keypoints"
    )
    parser.add_argument(
        "--height",
        type=str,
        required=True,
        help="Subject height, e.g. 175, 175cm, 1.75m or 5'9\""
    )
    parser.add_argument(
        "--mask", "-m",
        type=str,
        help="Optional .npy person mask shaped (image_height, image_width)"
    )
    parser.add_argument(
        "--config", "-c",
        type=str,
        help="Path to configuration file"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )
    return parser.parse_args(argv)


def load_keypoint_file(path: Path):
    """
    Read a keypoint file.

    Expected layout:
        {"image_width": 1080, "image_height": 1920,
         "keypoints": [[x, y], ...]}      # or {"left_shoulder": [x, y], ...}

    Raises:
        ValueError: if the file is not in the expected layout
    """
    with open(path, "r") as f:
        data = json.load(f)

    try:
        width = int(data["image_width"])
        height = int(data["image_height"])
        raw = data["keypoints"]
    except (KeyError, TypeError, ValueError) as e:
        raise ValueError(f"Malformed keypoint file {path}: {e}") from None

    if isinstance(raw, dict):
        keypoints = KeypointSet.from_dict(raw)
    else:
        keypoints = KeypointSet.from_array(raw)
    return keypoints, width, height


def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point."""
    args = parse_args(argv)

    try:
        config = Config(args.config) if args.config else Config()
    except FileNotFoundError:
        print(f"Error: Config file not found: {args.config}", file=sys.stderr)
        return 1
    except (ValueError, yaml.YAMLError) as e:
        print(f"Error: Invalid config file: {e}", file=sys.stderr)
        return 1

    log_level = "DEBUG" if args.debug else config.get("app.log_level", "INFO")
    setup_logging(level=log_level)
    logger = get_logger("main")

    logger.info(f"Body Measurements v{config.get('app.version', __version__)}")

    try:
        height = parse_height(args.height)
        keypoints, image_width, image_height = load_keypoint_file(Path(args.keypoints))
        mask = np.load(args.mask) if args.mask else None
    except (OSError, ValueError) as e:
        logger.error(str(e))
        return 1

    ok, reason = validate_height(height, config)
    if not ok:
        logger.error(reason)
        return 1

    framing = assess_framing(keypoints, config)
    if not framing.ok:
        logger.warning(f"Framing: {framing.message or 'incomplete'}")

    engine = MeasurementEngine(config)
    result = engine.measure(keypoints, image_width, image_height, height.to_centimeters(), mask)

    if args.json:
        print(json.dumps({
            "height_cm": round(height.to_centimeters(), 2),
            "framing": {
                "has_person": framing.has_person,
                "is_full_body": framing.is_full_body,
                "confidence": round(framing.confidence, 3),
                "message": framing.message,
            },
            "measurements": result.to_dict(),
        }, indent=2))
    else:
        print(f"Height: {height.display()}")
        print(format_measurements(result.as_measurements()))

    return 0


if __name__ == "__main__":
    sys.exit(main())
