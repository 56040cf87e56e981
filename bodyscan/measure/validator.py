"""Plausible-range screening for raw measurements"""

import math
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from bodyscan.core import Config, get_logger
from bodyscan.measure.results import MeasurementIndex, MEASUREMENT_KEYS


@dataclass(frozen=True)
class MeasurementRange:
    """Inclusive [minimum, maximum] range in centimeters."""
    minimum: float
    maximum: float

    def contains(self, value: float) -> bool:
        return self.minimum <= value <= self.maximum


DEFAULT_RANGES: Dict[MeasurementIndex, MeasurementRange] = {
    MeasurementIndex.SHOULDER_WIDTH: MeasurementRange(30.0, 60.0),
    MeasurementIndex.ARM_LENGTH: MeasurementRange(50.0, 80.0),
    MeasurementIndex.LEG_LENGTH: MeasurementRange(70.0, 120.0),
    MeasurementIndex.HIP_WIDTH: MeasurementRange(25.0, 50.0),
    MeasurementIndex.UPPER_BODY_LENGTH: MeasurementRange(40.0, 80.0),
    MeasurementIndex.LOWER_BODY_LENGTH: MeasurementRange(60.0, 100.0),
    MeasurementIndex.NECK_WIDTH: MeasurementRange(8.0, 15.0),
    MeasurementIndex.THIGH_WIDTH: MeasurementRange(10.0, 60.0),
}


def validate(value: Optional[float], minimum: float, maximum: float) -> float:
    """Return value if it is finite and inside [minimum, maximum], else 0.0."""
    if value is None:
        return 0.0
    value = float(value)
    if not math.isfinite(value):
        return 0.0
    if value < minimum or value > maximum:
        return 0.0
    return value


class MeasurementValidator:
    """Applies per-measurement ranges, loaded from config.measurement.ranges."""

    def __init__(self, config: Optional[Config] = None):
        self.logger = get_logger("measure.validator")
        self.config = config or Config()

        configured = self.config.measurement.get("ranges", {}) or {}
        self._ranges: Dict[MeasurementIndex, MeasurementRange] = {}
        for idx, default in DEFAULT_RANGES.items():
            bounds = configured.get(MEASUREMENT_KEYS[idx])
            if bounds is None:
                self._ranges[idx] = default
            else:
                self._ranges[idx] = _parse_bounds(MEASUREMENT_KEYS[idx], bounds)

    @property
    def ranges(self) -> Dict[MeasurementIndex, MeasurementRange]:
        return dict(self._ranges)

    def range_for(self, index: MeasurementIndex) -> MeasurementRange:
        return self._ranges[MeasurementIndex(index)]

    def validate(self, index: MeasurementIndex, value: Optional[float]) -> float:
        rng = self._ranges[MeasurementIndex(index)]
        result = validate(value, rng.minimum, rng.maximum)
        if value is not None and result == 0.0:
            self.logger.debug(
                f"Rejected {MEASUREMENT_KEYS[index]}={value:.2f} cm "
                f"(plausible {rng.minimum:.0f}-{rng.maximum:.0f} cm)"
            )
        return result


def _parse_bounds(key: str, bounds) -> MeasurementRange:
    try:
        low, high = (float(b) for b in bounds)
    except (TypeError, ValueError):
        raise ValueError(f"measurement.ranges.{key} must be [min, max], got {bounds!r}") from None
    if low > high:
        raise ValueError(f"measurement.ranges.{key}: min {low} exceeds max {high}")
    return MeasurementRange(low, high)
