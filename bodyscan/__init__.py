"""Anthropometric body measurements from a single 2D pose"""

__version__ = "0.1.0"

from bodyscan.core import Config, setup_logging, get_logger, Landmark
from bodyscan.pose import Keypoint, KeypointSet, FramingResult, assess_framing
from bodyscan.measure import (
    MeasurementEngine, MeasurementVector, MeasurementIndex, BodyMeasurement, measure_body,
)

__all__ = [
    "Config", "setup_logging", "get_logger", "Landmark",
    "Keypoint", "KeypointSet", "FramingResult", "assess_framing",
    "MeasurementEngine", "MeasurementVector", "MeasurementIndex", "BodyMeasurement",
    "measure_body",
]
