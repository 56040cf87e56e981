"""Measurement module"""

from .results import (
    MeasurementIndex, MeasurementVector, BodyMeasurement,
    MEASUREMENT_COUNT, MEASUREMENT_KEYS, MEASUREMENT_LABELS, format_measurements,
)
from .validator import MeasurementRange, MeasurementValidator, DEFAULT_RANGES, validate
from .calibration import Calibration, ScaleCalibrator
from .calculators import CALCULATORS
from .thigh import (
    ThighEdgeStrategy, MaskEdgeStrategy, KeypointGeometryStrategy,
    ThighWidthEstimator, ThighEstimate,
)
from .height import Height, HeightUnit, parse_height, validate_height
from .engine import MeasurementEngine, measure_body

__all__ = [
    "MeasurementIndex", "MeasurementVector", "BodyMeasurement",
    "MEASUREMENT_COUNT", "MEASUREMENT_KEYS", "MEASUREMENT_LABELS", "format_measurements",
    "MeasurementRange", "MeasurementValidator", "DEFAULT_RANGES", "validate",
    "Calibration", "ScaleCalibrator",
    "CALCULATORS",
    "ThighEdgeStrategy", "MaskEdgeStrategy", "KeypointGeometryStrategy",
    "ThighWidthEstimator", "ThighEstimate",
    "Height", "HeightUnit", "parse_height", "validate_height",
    "MeasurementEngine", "measure_body",
]
